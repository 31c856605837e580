from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

from .tiles import Tile


class ActionKind(str, Enum):
    DREW = "DREW"
    ADD = "ADD"
    ADD_TO_SET = "ADD_TO_SET"
    MOVE = "MOVE"


@dataclass(frozen=True)
class TurnAction:
    """One validated step of the current turn.

    ``tiles`` are the tiles that left the hand with this action; ``points`` is
    only meaningful for ADD, the sole kind counted toward the initial meld.
    """

    kind: ActionKind
    tiles: Tuple[Tile, ...] = ()
    set_id: Optional[int] = None
    source_id: Optional[int] = None
    points: int = 0

    @staticmethod
    def drew(tile: Tile) -> "TurnAction":
        return TurnAction(ActionKind.DREW, (tile,))

    @staticmethod
    def add(tiles: Iterable[Tile], set_id: int, points: int) -> "TurnAction":
        return TurnAction(ActionKind.ADD, tuple(tiles), set_id=set_id, points=points)

    @staticmethod
    def add_to_set(tiles: Iterable[Tile], set_id: int) -> "TurnAction":
        return TurnAction(ActionKind.ADD_TO_SET, tuple(tiles), set_id=set_id)

    @staticmethod
    def move(tiles: Iterable[Tile], set_id: int, source_id: int) -> "TurnAction":
        return TurnAction(ActionKind.MOVE, tuple(tiles), set_id=set_id, source_id=source_id)

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "tiles": [tile.id for tile in self.tiles],
            "set": self.set_id,
            "from": self.source_id,
        }
