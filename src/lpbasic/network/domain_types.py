"""Core dataclasses shared across the network and planning packages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Tuple, Union

LineId = Union[int, str]


@dataclass(frozen=True)
class EdgeId:
    """Directed connection between two stops, referenced by node index."""

    origin: int
    destination: int

    @classmethod
    def coerce(cls, value: object) -> "EdgeId":
        """Accept an ``EdgeId`` or an ``(origin, destination)`` pair."""
        if isinstance(value, EdgeId):
            return value
        if isinstance(value, (tuple, list)) and len(value) == 2:
            return cls(origin=int(value[0]), destination=int(value[1]))
        raise TypeError(f"Cannot interpret {value!r} as a directed edge.")

    def as_tuple(self) -> Tuple[int, int]:
        return (self.origin, self.destination)

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.origin}->{self.destination}"


@dataclass(frozen=True)
class Stop:
    """Metadata describing a stop (graph node)."""

    id: int
    name: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    metadata: Dict[str, object] = field(default_factory=dict)

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


@dataclass
class EdgeAttributes:
    """Per-edge data the line planning model needs.

    ``frequency`` is the base service frequency and ``weight`` the cost or
    length of the connection. Either may be ``None`` when the source data was
    incomplete; ``verify_instance`` reports that.
    """

    frequency: Optional[int] = None
    weight: Optional[float] = None
    metadata: Dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True, init=False)
class Line:
    """A directed walk through the transportation network.

    Uniqueness of ``id`` is not enforced here, only by ``verify_instance``.
    ``cost`` is charged per unit of frequency.
    """

    id: LineId
    walk: Tuple[EdgeId, ...]
    frequency: int
    cost: float

    def __init__(
        self,
        id: LineId,
        walk: Iterable[object],
        frequency: int,
        cost: float,
    ) -> None:
        object.__setattr__(self, "id", id)
        object.__setattr__(self, "walk", tuple(EdgeId.coerce(edge) for edge in walk))
        object.__setattr__(self, "frequency", frequency)
        object.__setattr__(self, "cost", cost)

    @property
    def stops(self) -> Tuple[int, ...]:
        """Node sequence visited by the walk (empty for an empty walk)."""
        if not self.walk:
            return ()
        return (self.walk[0].origin,) + tuple(edge.destination for edge in self.walk)
