"""Directed transit network of stops and connections."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from .domain_types import EdgeAttributes, EdgeId, Stop
from .geo import great_circle_distance

logger = logging.getLogger(__name__)


class TransitNetwork:
    """Registry of stops and directed edges with their model attributes."""

    def __init__(
        self,
        stops: Optional[Iterable[Stop]] = None,
        edges: Optional[Dict[EdgeId, EdgeAttributes]] = None,
    ) -> None:
        self._stops: Dict[int, Stop] = {}
        self._edges: Dict[EdgeId, EdgeAttributes] = {}
        self._incoming: Dict[int, List[EdgeId]] = {}
        self._outgoing: Dict[int, List[EdgeId]] = {}
        for stop in stops or ():
            self.add_stop(stop)
        for edge, attributes in (edges or {}).items():
            self._register_edge(EdgeId.coerce(edge), attributes)

    # ------------------------------------------------------------------ builders
    def add_stop(self, stop: Stop) -> Stop:
        """Register (or replace) a stop keyed by its node index."""
        self._stops[int(stop.id)] = stop
        return stop

    def add_edge(
        self,
        origin: int,
        destination: int,
        *,
        frequency: Optional[int],
        weight: Optional[float] = None,
        **metadata: object,
    ) -> EdgeId:
        """Add a directed edge; a missing weight defaults to the stops' distance."""
        edge = EdgeId(origin=int(origin), destination=int(destination))
        if weight is None:
            weight = self._distance_between(edge.origin, edge.destination)
        self._register_edge(
            edge,
            EdgeAttributes(frequency=frequency, weight=weight, metadata=dict(metadata)),
        )
        return edge

    def _register_edge(self, edge: EdgeId, attributes: EdgeAttributes) -> None:
        for node in (edge.origin, edge.destination):
            if node not in self._stops:
                self._stops[node] = Stop(id=node)
        if edge not in self._edges:
            self._outgoing.setdefault(edge.origin, []).append(edge)
            self._incoming.setdefault(edge.destination, []).append(edge)
        self._edges[edge] = attributes

    def _distance_between(self, origin: int, destination: int) -> Optional[float]:
        start = self._stops.get(origin)
        end = self._stops.get(destination)
        if start is None or end is None or not (start.has_coordinates and end.has_coordinates):
            logger.debug("No coordinates for %s->%s; leaving weight unset.", origin, destination)
            return None
        return great_circle_distance(start.latitude, start.longitude, end.latitude, end.longitude)

    # ---------------------------------------------------------------- accessors
    @property
    def stops(self) -> Dict[int, Stop]:
        return dict(self._stops)

    @property
    def edges(self) -> Dict[EdgeId, EdgeAttributes]:
        return dict(self._edges)

    @property
    def num_stops(self) -> int:
        return len(self._stops)

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    def has_edge(self, edge: object) -> bool:
        return EdgeId.coerce(edge) in self._edges

    def get_edge(self, edge: object) -> Optional[EdgeAttributes]:
        return self._edges.get(EdgeId.coerce(edge))

    def get_stop(self, node: int) -> Optional[Stop]:
        return self._stops.get(int(node))

    def get_incoming(self, node: int) -> List[EdgeId]:
        return list(self._incoming.get(int(node), []))

    def get_outgoing(self, node: int) -> List[EdgeId]:
        return list(self._outgoing.get(int(node), []))
