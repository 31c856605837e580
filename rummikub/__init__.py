"""Rummikub rules engine package."""

from .rules import Ruleset
from .tiles import JOKER, Color, Phase, Tile, parse_tiles, played_tiles, unplayed_tiles
from .collection import TileCollection
from .bag import Bag
from .meld import NewSet, PersistedSet, TileSet, is_group, is_run
from .table import Board
from .move import ActionKind, TurnAction
from .player import GamePlayer, PlayerIdentity
from .game import Game, GameEvent
from .rooms import Room, RoomRegistry
from .errors import (
    BoardInvalid,
    DrawAfterPlay,
    GameError,
    GameOver,
    MeldThresholdNotMet,
    GameInProgress,
    MissingExpectedTiles,
    NoMovesToUndo,
    NothingChanged,
    NothingPlayed,
    NotYourTurn,
    OutOfTiles,
    PassNotAllowed,
    RoomError,
    RoomExists,
    RoomNotFound,
    TilesNotInHand,
)

__all__ = [
    "Ruleset",
    "JOKER",
    "Color",
    "Phase",
    "Tile",
    "parse_tiles",
    "played_tiles",
    "unplayed_tiles",
    "TileCollection",
    "Bag",
    "TileSet",
    "NewSet",
    "PersistedSet",
    "is_run",
    "is_group",
    "Board",
    "ActionKind",
    "TurnAction",
    "PlayerIdentity",
    "GamePlayer",
    "Game",
    "GameEvent",
    "Room",
    "RoomRegistry",
    "GameError",
    "NotYourTurn",
    "OutOfTiles",
    "TilesNotInHand",
    "MissingExpectedTiles",
    "DrawAfterPlay",
    "MeldThresholdNotMet",
    "BoardInvalid",
    "NothingPlayed",
    "NoMovesToUndo",
    "NothingChanged",
    "PassNotAllowed",
    "GameOver",
    "RoomError",
    "RoomExists",
    "GameInProgress",
    "RoomNotFound",
]
