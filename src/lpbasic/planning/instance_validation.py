"""Construction-time consistency checks for problem instances."""

from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, Optional, Tuple, Union

import numpy as np

from lpbasic.network.domain_types import EdgeAttributes, EdgeId, Line, LineId
from lpbasic.network.transit_network import TransitNetwork

from .problem_instance import ProblemInstance

logger = logging.getLogger(__name__)


class InstanceValidationError(ValueError):
    """Raised when an instance violates one of the model's requirements."""


def is_positive_integer(value: object) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer)) and value > 0


def is_non_negative_real(value: object) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    if not isinstance(value, (int, float, np.integer, np.floating)):
        return False
    return math.isfinite(float(value)) and value >= 0


def verify_instance(
    network: Union[TransitNetwork, ProblemInstance],
    lines: Optional[Iterable[Line]] = None,
) -> bool:
    """Verify that an instance is valid; raise on the first inconsistency.

    Accepts either ``(network, lines)`` or a single ``ProblemInstance``.

    Checks that:
      * line ids are integers or strings, frequencies positive integers and
        costs non-negative (checked before uniqueness)
      * ids, walks and (walk, frequency) combinations are unique (walks are
        compared as ordered edge sequences)
      * every walk is non-empty, contiguous and only uses network edges
      * every network edge carries a positive integer frequency and a
        non-negative weight

    Network connectivity is not checked. The redundant ``line_coverage``
    edge metadata is only consulted by ``verify_solution``.

    Returns:
        True when the instance is valid.
    Raises:
        InstanceValidationError: describing the first violation found.
    """
    if isinstance(network, ProblemInstance):
        if lines is not None:
            raise TypeError("Pass either a ProblemInstance or (network, lines), not both.")
        network, lines = network.network, network.lines
    elif lines is None:
        raise TypeError("verify_instance requires lines when given a bare network.")
    line_list = list(lines)

    for line in line_list:
        _check_line_values(line)
    _check_unique_lines(line_list)
    for edge, attributes in network.edges.items():
        _check_edge_attributes(edge, attributes)
    for line in line_list:
        _check_walk(network, line)

    logger.debug(
        "Instance with %s lines and %s edges is valid (connectivity "
        "not enforced).",
        len(line_list),
        network.num_edges,
    )
    return True


def _check_unique_lines(lines: Iterable[Line]) -> None:
    seen_ids: Dict[LineId, int] = {}
    seen_combos: Dict[Tuple[Tuple[EdgeId, ...], object], LineId] = {}
    seen_walks: Dict[Tuple[EdgeId, ...], LineId] = {}
    for position, line in enumerate(lines):
        if line.id in seen_ids:
            raise InstanceValidationError(
                f"Lines at positions {seen_ids[line.id]} and {position} share id {line.id!r}."
            )
        seen_ids[line.id] = position

        combo = (line.walk, line.frequency)
        if combo in seen_combos:
            raise InstanceValidationError(
                f"Lines {seen_combos[combo]!r} and {line.id!r} share the same walk "
                f"and frequency {line.frequency!r}."
            )
        seen_combos[combo] = line.id

        if line.walk in seen_walks:
            raise InstanceValidationError(
                f"Lines {seen_walks[line.walk]!r} and {line.id!r} share an identical walk."
            )
        seen_walks[line.walk] = line.id


def _check_line_values(line: Line) -> None:
    if isinstance(line.id, (bool, np.bool_)) or not isinstance(line.id, (int, np.integer, str)):
        raise InstanceValidationError(
            f"Line id must be an integer or a string, got {line.id!r}."
        )
    if not is_positive_integer(line.frequency):
        raise InstanceValidationError(
            f"Line {line.id!r} frequency must be a positive integer, got {line.frequency!r}."
        )
    if not is_non_negative_real(line.cost):
        raise InstanceValidationError(
            f"Line {line.id!r} cost must be a non-negative real, got {line.cost!r}."
        )


def _check_walk(network: TransitNetwork, line: Line) -> None:
    if not line.walk:
        raise InstanceValidationError(f"Line {line.id!r} has an empty walk.")

    previous: Optional[EdgeId] = None
    for edge in line.walk:
        if previous is not None and previous.destination != edge.origin:
            raise InstanceValidationError(
                f"Line {line.id!r} walk is not contiguous: {previous} is followed by {edge}."
            )
        previous = edge
        if not network.has_edge(edge):
            raise InstanceValidationError(
                f"Line {line.id!r} uses edge {edge} which is not in the network."
            )


def _check_edge_attributes(edge: EdgeId, attributes: EdgeAttributes) -> None:
    if attributes.frequency is None:
        raise InstanceValidationError(f"Edge {edge} has no base frequency defined.")
    if not is_positive_integer(attributes.frequency):
        raise InstanceValidationError(
            f"Edge {edge} frequency must be a positive integer, "
            f"got {attributes.frequency!r}."
        )
    if attributes.weight is None:
        raise InstanceValidationError(f"Edge {edge} has no weight defined.")
    if not is_non_negative_real(attributes.weight):
        raise InstanceValidationError(
            f"Edge {edge} weight must be a non-negative real, got {attributes.weight!r}."
        )
