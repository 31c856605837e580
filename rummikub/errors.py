from __future__ import annotations

from typing import Optional


class GameError(ValueError):
    """Base class for every rule violation raised by the engine."""

    def __init__(self, message: str, player: Optional[str] = None, action: Optional[str] = None):
        super().__init__(message)
        self.player = player
        self.action = action


class NotYourTurn(GameError):
    def __init__(self, player: str, action: Optional[str] = None):
        super().__init__(f"Not {player}'s turn!", player=player, action=action)


class OutOfTiles(GameError):
    def __init__(self, player: Optional[str] = None):
        super().__init__("Out of tiles.", player=player, action="draw")


class TilesNotInHand(GameError):
    def __init__(self, player: str, action: Optional[str] = None):
        super().__init__(f"{player} tried to play tiles that they don't have in their hand.", player=player, action=action)


class MissingExpectedTiles(GameError):
    def __init__(self, player: str, action: Optional[str] = None):
        super().__init__(f"{player} tried to play a set that is missing expected tiles.", player=player, action=action)


class DrawAfterPlay(GameError):
    def __init__(self, player: str):
        super().__init__(
            f"{player} cannot draw because they have placed tiles on the board!", player=player, action="draw"
        )


class MeldThresholdNotMet(GameError):
    def __init__(self, player: str, points: int, threshold: int):
        super().__init__(f"{player} hasn't melded yet.", player=player, action="end_turn")
        self.points = points
        self.threshold = threshold


class BoardInvalid(GameError):
    def __init__(self, player: Optional[str] = None):
        super().__init__("Board is not in a valid state!", player=player, action="end_turn")


class NothingPlayed(GameError):
    def __init__(self, player: str):
        super().__init__(f"{player} has not melded this turn!", player=player, action="end_turn")


class NoMovesToUndo(GameError):
    def __init__(self, player: str):
        super().__init__(f"{player} cannot give up until they've moved tiles.", player=player, action="give_up")


class NothingChanged(GameError):
    def __init__(self, player: str, action: Optional[str] = None):
        super().__init__(f"{player}'s play does not change the board.", player=player, action=action)


class PassNotAllowed(GameError):
    def __init__(self, player: str, reason: str):
        super().__init__(f"{player} cannot pass: {reason}", player=player, action="pass")


class GameOver(GameError):
    def __init__(self, player: Optional[str] = None, action: Optional[str] = None):
        super().__init__("Game is over!", player=player, action=action)


class RoomError(Exception):
    """Base class for room registry failures."""


class RoomExists(RoomError):
    def __init__(self, room_id: str):
        self.room_id = room_id
        super().__init__(f"Room {room_id} already exists.")


class GameInProgress(RoomError):
    def __init__(self, room_id: str):
        self.room_id = room_id
        super().__init__(f"Room {room_id} already has a game in progress.")


class RoomNotFound(RoomError):
    def __init__(self, room_id: str):
        self.room_id = room_id
        super().__init__(f"Room {room_id} doesn't exist.")
