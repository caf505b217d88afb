"""Base class for catalog entities."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class Entity:
    """Base entity with JSON-friendly serialization."""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict, dropping None values and private fields."""
        return {
            key: value
            for key, value in asdict(self).items()
            if value is not None and not key.startswith("_")
        }
