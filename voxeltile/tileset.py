"""The set of tile meshes, one per tile kind, filled from a model file's named meshes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence

from .tile_kind import TileKind

logger = logging.getLogger(__name__)

DEFAULT_TILESET_PATH = "tiles/debug.glb"
DEFAULT_BASE_COLOR = (0.8, 0.8, 0.8)
TILE_COUNT = len(TileKind)


def _default_material() -> dict[str, Any]:
    return {"base_color": DEFAULT_BASE_COLOR}


@dataclass(frozen=True)
class TileAsset:
    """Mesh and material used to draw one tile kind."""

    mesh: Any
    material: Any


@dataclass
class Tileset:
    """Tile assets keyed by kind; ready once every kind has one."""

    source: str = DEFAULT_TILESET_PATH
    tiles: dict[TileKind, TileAsset] = field(default_factory=dict)
    ready: bool = False

    def populate(
        self,
        named_meshes: Mapping[str, Optional[Sequence[tuple[Any, Any]]]],
    ) -> bool:
        """Take tiles from named meshes, each a sequence of (mesh, material) primitives.

        Unknown names, kinds already present, unloaded meshes (None) and meshes
        without primitives are skipped; only the first primitive is used, and a
        missing material is replaced by a plain grey one. Returns True when this
        call made the tileset ready.
        """
        if self.ready:
            return False

        inserted = 0
        for name, primitives in named_meshes.items():
            kind = TileKind.from_name(name)
            if kind is None or kind in self.tiles:
                continue
            if not primitives:
                continue
            mesh, material = primitives[0]
            if material is None:
                material = _default_material()
            self.tiles[kind] = TileAsset(mesh=mesh, material=material)
            inserted += 1

        if inserted:
            logger.info("Tileset progress: %d/%d", len(self.tiles), TILE_COUNT)

        if len(self.tiles) == TILE_COUNT:
            self.ready = True
            logger.info("Tileset ready!")
            return True
        return False

    def get(self, kind: TileKind) -> Optional[TileAsset]:
        """Return the asset for a kind, or None if it has not been loaded."""
        return self.tiles.get(kind)