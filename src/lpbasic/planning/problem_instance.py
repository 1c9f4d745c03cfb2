"""Problem instance pairing a network with its candidate lines."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Mapping, Tuple, Union

from lpbasic.network.domain_types import EdgeId, Line
from lpbasic.network.transit_network import TransitNetwork


@dataclass(frozen=True, init=False)
class ProblemInstance:
    """All data of a single line planning instance.

    The edge -> line-indices mapping is built once here and never mutated, so
    membership queries are dictionary lookups and the instance can be shared
    read-only between callers.
    """

    network: TransitNetwork
    lines: Tuple[Line, ...]
    edge_lines: Mapping[EdgeId, FrozenSet[int]] = field(repr=False, compare=False)

    def __init__(self, network: TransitNetwork, lines: Iterable[Line]) -> None:
        line_tuple = tuple(lines)
        object.__setattr__(self, "network", network)
        object.__setattr__(self, "lines", line_tuple)
        object.__setattr__(self, "edge_lines", _index_edges(line_tuple))

    @property
    def num_lines(self) -> int:
        return len(self.lines)

    def lines_on_edge(self, edge: object) -> FrozenSet[int]:
        """Indices of the lines whose walk traverses ``edge``."""
        return self.edge_lines.get(EdgeId.coerce(edge), frozenset())

    def is_edge_on_line(
        self,
        edge: object,
        line_index: int,
        *,
        numerical_returns: bool = False,
    ) -> Union[bool, int]:
        """Return whether ``edge`` lies on the line at ``line_index``.

        Returns 1/0 instead of True/False when ``numerical_returns`` is set.
        """
        if line_index < 0 or line_index >= len(self.lines):
            raise IndexError(
                f"line_index {line_index} out of range for {len(self.lines)} lines."
            )
        on_line = line_index in self.lines_on_edge(edge)
        if numerical_returns:
            return 1 if on_line else 0
        return on_line

    def line_coverage(self, line_index: int) -> FrozenSet[EdgeId]:
        """Set of edges traversed by the line at ``line_index``."""
        return frozenset(self.lines[line_index].walk)


def _index_edges(lines: Tuple[Line, ...]) -> Dict[EdgeId, FrozenSet[int]]:
    index: Dict[EdgeId, set] = {}
    for line_index, line in enumerate(lines):
        for edge in line.walk:
            index.setdefault(edge, set()).add(line_index)
    return {edge: frozenset(members) for edge, members in index.items()}
