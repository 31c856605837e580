from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .collection import TileCollection
from .tiles import Tile

MAX_FACE = 13


def must_be_three(tiles: Sequence[Tile]) -> bool:
    return len(tiles) > 2


def run_faces(tiles: Sequence[Tile]) -> Optional[List[int]]:
    """Faces of a run in order, jokers filled in from their position.

    Returns None when the tiles cannot form a run.
    """
    naturals = [(index, tile) for index, tile in enumerate(tiles) if not tile.is_joker()]
    if not naturals:
        return None
    if len({tile.color for _, tile in naturals}) != 1:
        return None
    first_index, first = naturals[0]
    start = first.value - first_index
    if any(tile.value != start + index for index, tile in naturals):
        return None
    if start < 1 or start + len(tiles) - 1 > MAX_FACE:
        return None
    return [start + index for index in range(len(tiles))]


def group_faces(tiles: Sequence[Tile]) -> Optional[List[int]]:
    naturals = [tile for tile in tiles if not tile.is_joker()]
    if not naturals or len(tiles) > 4:
        return None
    if len({tile.face for tile in naturals}) != 1:
        return None
    colors = [tile.color for tile in naturals]
    if len(set(colors)) != len(colors):
        return None
    return [naturals[0].value] * len(tiles)


def is_run(tiles: Sequence[Tile]) -> bool:
    return run_faces(tiles) is not None


def is_group(tiles: Sequence[Tile]) -> bool:
    return group_faces(tiles) is not None


def resolved_faces(tiles: Sequence[Tile]) -> Optional[List[int]]:
    """Faces with jokers filled in, or None for a malformed set.

    A set that reads both ways (one natural tile and two jokers) is scored as
    a run.
    """
    faces = run_faces(tiles)
    if faces is None:
        faces = group_faces(tiles)
    return faces


def set_points(tiles: Sequence[Tile]) -> int:
    faces = resolved_faces(tiles)
    if faces is None:
        return sum(tile.value for tile in tiles if not tile.is_joker())
    return sum(faces)


class TileSet(TileCollection):
    """A meld on (or headed for) the board; tiles are kept in the played phase."""

    def __init__(self, tiles: Optional[Iterable[Tile]] = None) -> None:
        super().__init__(tile.played() for tile in (tiles or []))

    def replace(self, tiles: Iterable[Tile]) -> None:
        super().replace(tile.played() for tile in tiles)

    def push(self, tile: Tile) -> None:
        super().push(tile.played())

    def is_valid(self) -> bool:
        tiles = self.items
        return must_be_three(tiles) and (is_run(tiles) or is_group(tiles))

    def points(self) -> int:
        return set_points(self.items)


class NewSet(TileSet):
    """A set that has not been committed to the board yet."""


class PersistedSet(TileSet):
    def __init__(self, tiles: Optional[Iterable[Tile]], set_id: int) -> None:
        super().__init__(tiles)
        self._id = set_id

    @property
    def id(self) -> int:
        return self._id

    def from_tiles(self, tiles: Iterable[Tile]) -> "PersistedSet":
        """Proposed new contents for this same set."""
        return PersistedSet(tiles, self._id)

    def copy(self) -> "PersistedSet":
        return PersistedSet(self._items, self._id)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, PersistedSet) and self._id == other._id and self._items == other._items

    def __repr__(self) -> str:
        return f"PersistedSet(id={self._id}, [{', '.join(self.ids())}])"
