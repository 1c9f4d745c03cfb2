"""Planning package exports."""

from .instance_io import load_instance, load_solution, save_instance
from .instance_validation import InstanceValidationError, verify_instance
from .model_config import ModelConfig
from .problem_instance import ProblemInstance
from .solution import (
    BinarySolution,
    FrequencySolution,
    Solution,
    as_solution,
    calculate_cost,
    covered_edges,
    edge_frequencies,
    line_frequencies,
)
from .solution_validation import SolutionCheck, verify_solution
from .stats import basic_stats

__all__ = [
    "BinarySolution",
    "FrequencySolution",
    "InstanceValidationError",
    "ModelConfig",
    "ProblemInstance",
    "Solution",
    "SolutionCheck",
    "as_solution",
    "basic_stats",
    "calculate_cost",
    "covered_edges",
    "edge_frequencies",
    "line_frequencies",
    "load_instance",
    "load_solution",
    "save_instance",
    "verify_instance",
    "verify_solution",
]
