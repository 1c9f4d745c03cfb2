"""Plain YAML / CSV persistence for instances and solutions.

Instance YAML layout::

    stops:
      - {id: 0, name: Central, latitude: -22.90, longitude: -43.17}
    edges:
      - {origin: 0, destination: 1, frequency: 4, weight: 1.2}
    lines:
      - {id: 1, walk: [[0, 1], [1, 2]], frequency: 4, cost: 10.0}

An edge without ``weight`` gets the great-circle distance between its stops
when both have coordinates.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Mapping

import pandas as pd
import yaml

from lpbasic.network.domain_types import Line, Stop
from lpbasic.network.transit_network import TransitNetwork

from .problem_instance import ProblemInstance
from .solution import BinarySolution, FrequencySolution, Solution

logger = logging.getLogger(__name__)

_STOP_FIELDS = {"id", "name", "latitude", "longitude"}
_EDGE_FIELDS = {"origin", "destination", "frequency", "weight"}


def load_instance(path: str | Path) -> ProblemInstance:
    """Read an instance YAML file into a ``ProblemInstance``."""
    instance_path = Path(path)
    if not instance_path.exists():
        raise FileNotFoundError(f"Instance YAML not found at {instance_path}")
    with instance_path.open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or {}
    if not isinstance(payload, Mapping):
        raise TypeError("Instance YAML must contain a mapping at the top level")
    return instance_from_mapping(payload)


def instance_from_mapping(payload: Mapping[str, object]) -> ProblemInstance:
    network = TransitNetwork()
    for entry in payload.get("stops") or []:
        network.add_stop(
            Stop(
                id=int(entry["id"]),
                name=entry.get("name"),
                latitude=_optional_float(entry.get("latitude")),
                longitude=_optional_float(entry.get("longitude")),
                metadata={k: v for k, v in entry.items() if k not in _STOP_FIELDS},
            )
        )
    for entry in payload.get("edges") or []:
        try:
            origin, destination = entry["origin"], entry["destination"]
        except KeyError as exc:
            raise ValueError(f"Edge entry {entry!r} is missing {exc.args[0]!r}") from exc
        network.add_edge(
            origin,
            destination,
            frequency=entry.get("frequency"),
            weight=entry.get("weight"),
            **{k: v for k, v in entry.items() if k not in _EDGE_FIELDS},
        )

    lines: List[Line] = []
    for entry in payload.get("lines") or []:
        lines.append(
            Line(
                id=entry["id"],
                walk=[tuple(edge) for edge in entry.get("walk") or []],
                frequency=entry.get("frequency"),
                cost=entry.get("cost"),
            )
        )
    logger.info(
        "Loaded instance with %s stops, %s edges and %s lines.",
        network.num_stops,
        network.num_edges,
        len(lines),
    )
    return ProblemInstance(network, lines)


def instance_to_mapping(instance: ProblemInstance) -> Dict[str, object]:
    network = instance.network
    stops = []
    for stop in network.stops.values():
        entry: Dict[str, object] = {"id": stop.id, **stop.metadata}
        if stop.name is not None:
            entry["name"] = stop.name
        if stop.has_coordinates:
            entry["latitude"] = stop.latitude
            entry["longitude"] = stop.longitude
        stops.append(entry)
    edges = [
        {
            "origin": edge.origin,
            "destination": edge.destination,
            "frequency": attributes.frequency,
            "weight": attributes.weight,
            **attributes.metadata,
        }
        for edge, attributes in network.edges.items()
    ]
    lines = [
        {
            "id": line.id,
            "walk": [list(edge.as_tuple()) for edge in line.walk],
            "frequency": line.frequency,
            "cost": line.cost,
        }
        for line in instance.lines
    ]
    return {"stops": stops, "edges": edges, "lines": lines}


def save_instance(instance: ProblemInstance, path: str | Path) -> None:
    """Persist an instance in the layout read by ``load_instance``."""
    with Path(path).open("w", encoding="utf-8") as handle:
        yaml.safe_dump(instance_to_mapping(instance), handle, sort_keys=False)


def load_solution(path: str | Path) -> Solution:
    """Read a solution CSV with either a ``selected`` or a ``frequency`` column.

    Rows are taken in file order, aligned with the instance's lines.
    """
    df = pd.read_csv(path)
    if "selected" in df.columns:
        values = df["selected"]
        if values.dtype != bool:
            values = values.astype(str).str.strip().str.lower().map(
                {"true": True, "1": True, "false": False, "0": False}
            )
            if values.isna().any():
                raise ValueError("Column 'selected' must contain only true/false or 1/0 values.")
        return BinarySolution(tuple(bool(flag) for flag in values))
    if "frequency" in df.columns:
        if not pd.api.types.is_integer_dtype(df["frequency"]):
            raise ValueError("Column 'frequency' must contain integers.")
        return FrequencySolution(tuple(int(freq) for freq in df["frequency"]))
    raise ValueError("Solution CSV must have a 'selected' or 'frequency' column.")


def _optional_float(value: object):
    if value is None or value == "":
        return None
    return float(value)
