from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .bag import Bag
from .errors import GameInProgress, RoomExists, RoomNotFound
from .game import Game
from .player import PlayerIdentity
from .rules import Ruleset

logger = logging.getLogger(__name__)


@dataclass
class Room:
    id: str
    players: List[PlayerIdentity] = field(default_factory=list)
    game: Optional[Game] = None

    def start(self, bag: Optional[Bag] = None, ruleset: Optional[Ruleset] = None) -> Game:
        if self.game is not None and not self.game.over:
            raise GameInProgress(self.id)
        self.game = Game(self.players, bag=bag, ruleset=ruleset)
        return self.game


class RoomRegistry:
    """In-memory room store owned by whoever serves the rooms.

    Create one per process (or per test); nothing here is global.
    """

    def __init__(self, rooms: Optional[Iterable[Room]] = None) -> None:
        self._rooms: Dict[str, Room] = {}
        for room in rooms or []:
            self.add(room)

    def __len__(self) -> int:
        return len(self._rooms)

    def __contains__(self, room_id: object) -> bool:
        return room_id in self._rooms

    def get(self, room_id: str) -> Optional[Room]:
        return self._rooms.get(room_id)

    def add(self, room: Room) -> None:
        if room.id in self._rooms:
            raise RoomExists(room.id)
        self._rooms[room.id] = room
        logger.info("room %s created", room.id)

    def remove(self, room: Union[Room, str]) -> None:
        room_id = room.id if isinstance(room, Room) else room
        if room_id not in self._rooms:
            raise RoomNotFound(room_id)
        del self._rooms[room_id]
        logger.info("room %s removed", room_id)

    def clear(self) -> None:
        self._rooms.clear()

    def join(self, room_id: str, player: Optional[PlayerIdentity] = None) -> Tuple[Room, bool]:
        """Fetch or create a room, seating ``player`` if given.

        The flag is True when the room was created by this call.
        """
        room = self._rooms.get(room_id)
        created = room is None
        if room is None:
            room = Room(room_id)
            self.add(room)
        if player is not None and all(seated.id != player.id for seated in room.players):
            room.players.append(player)
        return room, created
