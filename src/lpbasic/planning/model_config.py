"""Knobs handed to the external optimization model, loadable from YAML."""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple

import yaml

from lpbasic.network.domain_types import EdgeId
from lpbasic.network.transit_network import TransitNetwork

logger = logging.getLogger(__name__)

_KEYS = (
    "use_slack",
    "slack_penalty",
    "use_binary_variant",
    "min_frequency_multiplier",
    "max_frequency_multiplier",
    "use_non_integer_variables",
)


@dataclass(frozen=True)
class ModelConfig:
    """Model construction options.

    The frequency multipliers derive each edge's minimum and maximum service
    frequency from its base frequency. With ``use_slack`` the minimum may be
    violated at ``slack_penalty`` per unit.
    """

    use_slack: bool = False
    slack_penalty: Optional[float] = None
    use_binary_variant: bool = False
    min_frequency_multiplier: float = 0.5
    max_frequency_multiplier: float = 2.0
    use_non_integer_variables: bool = False

    def __post_init__(self) -> None:
        if self.use_slack:
            if self.slack_penalty is None:
                raise ValueError("slack_penalty must be set when use_slack is enabled.")
            if not math.isfinite(self.slack_penalty) or self.slack_penalty < 0:
                raise ValueError("slack_penalty must be a non-negative number.")
        for multiplier in (self.min_frequency_multiplier, self.max_frequency_multiplier):
            if not math.isfinite(multiplier) or multiplier < 0:
                raise ValueError("Frequency multipliers must be finite and non-negative.")
        if self.min_frequency_multiplier > self.max_frequency_multiplier:
            raise ValueError(
                "min_frequency_multiplier cannot exceed max_frequency_multiplier."
            )

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, object]]) -> "ModelConfig":
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise TypeError("Model configuration must be a mapping")
        unknown = sorted(set(data) - set(_KEYS))
        if unknown:
            logger.warning("Ignoring unknown model config keys: %s", ", ".join(unknown))
        penalty = data.get("slack_penalty")
        return cls(
            use_slack=bool(data.get("use_slack", False)),
            slack_penalty=float(penalty) if penalty is not None else None,
            use_binary_variant=bool(data.get("use_binary_variant", False)),
            min_frequency_multiplier=float(data.get("min_frequency_multiplier", 0.5)),
            max_frequency_multiplier=float(data.get("max_frequency_multiplier", 2.0)),
            use_non_integer_variables=bool(data.get("use_non_integer_variables", False)),
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ModelConfig":
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Model config YAML not found at {config_path}")
        with config_path.open("r", encoding="utf-8") as handle:
            payload = yaml.safe_load(handle) or {}
        return cls.from_mapping(payload)

    def to_yaml(self, path: str | Path) -> None:
        with Path(path).open("w", encoding="utf-8") as handle:
            yaml.safe_dump(asdict(self), handle, sort_keys=True)

    def edge_frequency_bounds(self, network: TransitNetwork) -> Dict[EdgeId, Tuple[float, float]]:
        """Return (min, max) served frequency per edge; edges lacking a base frequency are skipped."""
        bounds: Dict[EdgeId, Tuple[float, float]] = {}
        for edge, attributes in network.edges.items():
            if attributes.frequency is None:
                continue
            base = float(attributes.frequency)
            bounds[edge] = (
                self.min_frequency_multiplier * base,
                self.max_frequency_multiplier * base,
            )
        return bounds
