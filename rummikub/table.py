from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional

from .meld import NewSet, PersistedSet
from .tiles import Tile


@dataclass
class Board:
    """Ordered arena of persisted sets keyed by a stable set id.

    Editing a set replaces the contents of the entry in place, so the set keeps
    its identity (and its position) across edits.
    """

    _sets: Dict[int, PersistedSet] = field(default_factory=dict)
    _next_id: int = 0

    @property
    def count(self) -> int:
        return len(self._sets)

    def __len__(self) -> int:
        return len(self._sets)

    def __iter__(self) -> Iterator[PersistedSet]:
        return iter(list(self._sets.values()))

    def at(self, index: int) -> PersistedSet:
        return list(self._sets.values())[index]

    def get(self, set_id: int) -> Optional[PersistedSet]:
        return self._sets.get(set_id)

    def push(self, new_set: NewSet) -> PersistedSet:
        persisted = PersistedSet(new_set.items, self._next_id)
        self._sets[persisted.id] = persisted
        self._next_id += 1
        return persisted

    def replace(self, set_id: int, tiles: Iterable[Tile]) -> None:
        tiles = list(tiles)
        if set_id not in self._sets:
            raise KeyError(f"set {set_id} is not on the board")
        if not tiles:
            del self._sets[set_id]
            return
        self._sets[set_id].replace(tiles)

    def valid(self) -> bool:
        return all(tile_set.is_valid() for tile_set in self._sets.values())

    def invalid_sets(self) -> List[PersistedSet]:
        return [tile_set for tile_set in self._sets.values() if not tile_set.is_valid()]

    def tile_ids(self) -> List[str]:
        return [tile_id for tile_set in self._sets.values() for tile_id in tile_set.ids()]

    def tile_count(self) -> int:
        return sum(len(tile_set) for tile_set in self._sets.values())

    def snapshot(self) -> "Board":
        return copy.deepcopy(self)

    def restore(self, snapshot: "Board") -> None:
        restored = copy.deepcopy(snapshot)
        self._sets = restored._sets
        self._next_id = restored._next_id

    def to_dict(self) -> List[dict]:
        return [
            {"id": tile_set.id, "tiles": tile_set.ids(), "valid": tile_set.is_valid()}
            for tile_set in self._sets.values()
        ]
