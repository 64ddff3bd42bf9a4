"""Kinds of autotile pieces."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class TileKind(Enum):
    """Shape of a tile, named as in the tileset file."""

    SOLO = "solo"
    END = "end"
    STRAIGHT = "straight"
    CORNER = "corner"
    TEE = "tee"
    CROSS = "cross"

    @classmethod
    def from_name(cls, name: str) -> Optional["TileKind"]:
        """Return the kind for a mesh name, or None if the name is unknown."""
        try:
            return cls(name)
        except ValueError:
            return None