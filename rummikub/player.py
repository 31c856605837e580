from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, List, Optional, Union

from .collection import TileCollection
from .meld import PersistedSet, TileSet
from .move import ActionKind
from .tiles import Tile

if TYPE_CHECKING:
    from .game import Game


@dataclass
class PlayerIdentity:
    name: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    initial_hand: Optional[List[Tile]] = None


class GamePlayer:
    """A seat at a game: public identity plus the private hand.

    Every operation is forwarded to the game, which does all the checking.
    """

    def __init__(self, identity: PlayerIdentity, game: "Game") -> None:
        self._identity = identity
        self._game = game
        if identity.initial_hand is not None:
            self._hand = TileCollection(tile.unplayed() for tile in identity.initial_hand)
        else:
            self._hand = TileCollection(game.draw_hand())

    @property
    def id(self) -> str:
        return self._identity.id

    @property
    def name(self) -> str:
        return self._identity.name

    @property
    def hand(self) -> TileCollection:
        return self._hand

    def draw(self) -> Tile:
        return self._game.draw(self)

    def play(
        self,
        tiles: Optional[Union[TileSet, Iterable[Tile]]] = None,
        to: Optional[TileSet] = None,
        from_: Optional[PersistedSet] = None,
    ) -> None:
        """Place tiles on the board.

        ``play(tiles)`` or ``play(NewSet(...))`` lays down a new set.
        ``play(tiles, to=board_set)`` appends the tiles to an existing set,
        ``play(board_set.from_tiles(...))`` rewrites that set in one go, and
        ``from_`` turns the play into a move between two sets.
        """
        if isinstance(tiles, TileSet) and to is None:
            to, tiles = tiles, None
        if tiles is not None:
            tiles = list(tiles)
        if from_ is not None:
            kind = ActionKind.MOVE
        elif isinstance(to, PersistedSet):
            kind = ActionKind.ADD_TO_SET
        else:
            kind = ActionKind.ADD
        self._game.meld(self, kind, to=to, from_=from_, tiles=tiles)

    def end_turn(self) -> None:
        self._game.end_turn(self)

    def give_up(self) -> None:
        self._game.give_up(self)

    def pass_turn(self) -> None:
        self._game.pass_turn(self)

    def __repr__(self) -> str:
        return f"GamePlayer({self.name!r}, hand={len(self._hand)})"
