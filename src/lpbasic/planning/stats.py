"""Summary statistics for a solution on an instance."""

from __future__ import annotations

from typing import Dict, Iterable, Union

import numpy as np

from .problem_instance import ProblemInstance
from .solution import Solution, calculate_cost, edge_frequencies, line_frequencies


def basic_stats(
    instance: ProblemInstance, solution: Union[Solution, Iterable[object]]
) -> Dict[str, Union[int, float]]:
    """Return counts, edge-frequency statistics and line cost.

    Frequency statistics are taken over every network edge, including edges
    no operated line serves. The standard deviation and variance are sample
    estimates (``ddof=1``) and are 0.0 with fewer than two edges.
    """
    freqs = line_frequencies(instance, solution)
    served = np.array(list(edge_frequencies(instance, solution).values()), dtype=float)

    if served.size:
        average = float(served.mean())
        median = float(np.median(served))
        lowest = int(served.min())
        highest = int(served.max())
    else:
        average = median = 0.0
        lowest = highest = 0
    if served.size > 1:
        variance = float(served.var(ddof=1))
    else:
        variance = 0.0

    return {
        "num_lines": instance.num_lines,
        "num_stops": instance.network.num_stops,
        "num_edges": instance.network.num_edges,
        "taken_lines": sum(1 for freq in freqs if freq > 0),
        "average_frequency": average,
        "standard_deviation": float(np.sqrt(variance)),
        "variance": variance,
        "median": median,
        "lowest_frequency": lowest,
        "highest_frequency": highest,
        "line_cost": calculate_cost(instance, solution),
    }
