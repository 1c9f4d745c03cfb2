"""Feasibility checks for proposed solutions.

Unlike ``verify_instance`` these checks never raise for an infeasible
solution; they return a ``SolutionCheck`` that callers must inspect.
"""

from __future__ import annotations

import logging
from typing import Iterable, NamedTuple, Optional, Union

import numpy as np

from .instance_validation import InstanceValidationError, verify_instance
from .model_config import ModelConfig
from .problem_instance import ProblemInstance
from .solution import BinarySolution, FrequencySolution, Solution, as_solution, edge_frequencies

logger = logging.getLogger(__name__)

VALID = "Valid"
LINE_COVERAGE_KEY = "line_coverage"


class SolutionCheck(NamedTuple):
    ok: bool
    message: str


def verify_solution(
    instance: ProblemInstance,
    solution: Union[Solution, Iterable[object]],
    config: Optional[ModelConfig] = None,
) -> SolutionCheck:
    """Verify a solution against ``instance``; return ``(True, "Valid")`` or ``(False, reason)``.

    Operated lines must appear in the ``line_coverage`` metadata of every
    edge they traverse, where that metadata is recorded. Frequency bounds
    derived from ``config`` are only checked when a config is given;
    selecting no lines is otherwise always structurally valid.
    """
    try:
        verify_instance(instance)
    except InstanceValidationError as exc:
        return _fail(f"Invalid instance: {exc}")

    solution = as_solution(solution)
    if len(solution) != instance.num_lines:
        return _fail(
            f"Solution has {len(solution)} entries but the instance has "
            f"{instance.num_lines} lines."
        )

    entry_problem = _check_entries(solution)
    if entry_problem is not None:
        return _fail(entry_problem)

    coverage_problem = _check_recorded_coverage(instance, solution)
    if coverage_problem is not None:
        return _fail(coverage_problem)

    if config is not None:
        served = edge_frequencies(instance, solution)
        for edge, (low, high) in config.edge_frequency_bounds(instance.network).items():
            freq = served.get(edge, 0)
            if freq > high:
                return _fail(
                    f"Edge {edge} is served {freq} times, above its maximum of {high:g}."
                )
            if not config.use_slack and freq < low:
                return _fail(
                    f"Edge {edge} is served {freq} times, below its minimum of {low:g}."
                )

    return SolutionCheck(True, VALID)


def _fail(message: str) -> SolutionCheck:
    logger.debug("Solution rejected: %s", message)
    return SolutionCheck(False, message)


def _check_entries(solution: Solution) -> Optional[str]:
    if isinstance(solution, BinarySolution):
        for idx, entry in enumerate(solution.selected):
            if not isinstance(entry, (bool, np.bool_)):
                return f"Entry {idx} of a binary solution is not a boolean: {entry!r}."
        return None
    for idx, entry in enumerate(solution.frequencies):
        if isinstance(entry, (bool, np.bool_)) or not isinstance(entry, (int, np.integer)):
            return f"Entry {idx} of a frequency solution is not an integer: {entry!r}."
        if entry < 0:
            return f"Entry {idx} of a frequency solution is negative: {entry!r}."
    return None


def _check_recorded_coverage(instance: ProblemInstance, solution: Solution) -> Optional[str]:
    """Compare operated lines with the ``line_coverage`` metadata of their edges.

    ``line_coverage`` lists the ids of the lines recorded as serving an edge.
    Edges without the metadata are skipped.
    """
    for line_index, taken in enumerate(_taken_flags(solution)):
        if not taken:
            continue
        line = instance.lines[line_index]
        for edge in line.walk:
            attributes = instance.network.get_edge(edge)
            recorded = attributes.metadata.get(LINE_COVERAGE_KEY)
            if recorded is None:
                continue
            if isinstance(recorded, (str, bytes)) or not isinstance(recorded, Iterable):
                return f"Edge {edge} has malformed {LINE_COVERAGE_KEY} metadata: {recorded!r}."
            if line.id not in list(recorded):
                return (
                    f"Line {line.id!r} (index {line_index}) traverses edge {edge} "
                    f"but is missing from its recorded {LINE_COVERAGE_KEY}."
                )
    return None


def _taken_flags(solution: Solution) -> Iterable[bool]:
    if isinstance(solution, FrequencySolution):
        return [freq > 0 for freq in solution.frequencies]
    return [bool(flag) for flag in solution.selected]
