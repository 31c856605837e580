from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from .tiles import Phase, Tile


class TileCollection:
    """Ordered tiles with membership decided by tile id."""

    def __init__(self, tiles: Optional[Iterable[Tile]] = None) -> None:
        self._items: List[Tile] = list(tiles or [])

    @property
    def items(self) -> List[Tile]:
        return list(self._items)

    @property
    def count(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Tile:
        return self._items[index]

    def at(self, index: int) -> Tile:
        return self._items[index]

    def push(self, tile: Tile) -> None:
        self._items.append(tile)

    def ids(self) -> List[str]:
        return [tile.id for tile in self._items]

    def contains(self, tiles: Iterable[Tile]) -> bool:
        own = set(self.ids())
        return all(tile.id in own for tile in tiles)

    def find(self, tile_id: str) -> Optional[Tile]:
        for tile in self._items:
            if tile.id == tile_id:
                return tile
        return None

    def remove_tile(self, tile: Tile) -> None:
        for index, own in enumerate(self._items):
            if own.id == tile.id:
                del self._items[index]
                return

    def remove_tiles(self, tiles: Iterable[Tile]) -> None:
        for tile in tiles:
            self.remove_tile(tile)

    def replace(self, tiles: Iterable[Tile]) -> None:
        self._items = list(tiles)

    def of_phase(self, phase: Phase) -> List[Tile]:
        return [tile for tile in self._items if tile.phase == phase]

    def copy(self) -> "TileCollection":
        return type(self)(self._items)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, TileCollection) and self._items == other._items

    def __repr__(self) -> str:
        return f"{type(self).__name__}([{', '.join(self.ids())}])"
