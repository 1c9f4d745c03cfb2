"""Solution representations and their cost / coverage evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Set, Tuple, Union

import numpy as np

from lpbasic.network.domain_types import EdgeId

from .problem_instance import ProblemInstance


@dataclass(frozen=True)
class BinarySolution:
    """Per-line flags: operate the line at its base frequency or not at all."""

    selected: Tuple[bool, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "selected", tuple(self.selected))

    def __len__(self) -> int:
        return len(self.selected)


@dataclass(frozen=True)
class FrequencySolution:
    """Per-line chosen frequency (0 means the line is not operated)."""

    frequencies: Tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "frequencies", tuple(self.frequencies))

    def __len__(self) -> int:
        return len(self.frequencies)


Solution = Union[BinarySolution, FrequencySolution]


def as_solution(value: Union[Solution, Iterable[object]]) -> Solution:
    """Wrap a plain sequence into the matching solution variant.

    A sequence made only of booleans becomes a ``BinarySolution``; anything
    else is treated as per-line frequencies.
    """
    if isinstance(value, (BinarySolution, FrequencySolution)):
        return value
    entries = list(value)
    if all(isinstance(entry, (bool, np.bool_)) for entry in entries):
        return BinarySolution(tuple(bool(entry) for entry in entries))
    return FrequencySolution(tuple(entries))


def line_frequencies(instance: ProblemInstance, solution: Union[Solution, Iterable[object]]) -> List[int]:
    """Return the frequency each line is operated at under ``solution``."""
    solution = as_solution(solution)
    if len(solution) != instance.num_lines:
        raise ValueError(
            f"Solution has {len(solution)} entries but the instance has "
            f"{instance.num_lines} lines."
        )
    if isinstance(solution, BinarySolution):
        return [
            int(line.frequency) if taken else 0
            for line, taken in zip(instance.lines, solution.selected)
        ]
    return [int(freq) for freq in solution.frequencies]


def calculate_cost(instance: ProblemInstance, solution: Union[Solution, Iterable[object]]) -> float:
    """Total line cost: each line's cost per frequency unit times its frequency."""
    freqs = line_frequencies(instance, solution)
    return float(sum(line.cost * freq for line, freq in zip(instance.lines, freqs)))


def covered_edges(instance: ProblemInstance, solution: Union[Solution, Iterable[object]]) -> Set[EdgeId]:
    """Edges traversed by at least one operated line."""
    covered: Set[EdgeId] = set()
    for line, freq in zip(instance.lines, line_frequencies(instance, solution)):
        if freq > 0:
            covered.update(line.walk)
    return covered


def edge_frequencies(
    instance: ProblemInstance, solution: Union[Solution, Iterable[object]]
) -> Dict[EdgeId, int]:
    """Served frequency on every network edge, 0 where no operated line passes."""
    freqs = line_frequencies(instance, solution)
    served: Dict[EdgeId, int] = {}
    for edge in instance.network.edges:
        served[edge] = sum(freqs[idx] for idx in instance.lines_on_edge(edge))
    return served
