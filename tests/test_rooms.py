import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from rummikub.errors import GameInProgress, RoomExists, RoomNotFound
from rummikub.player import PlayerIdentity
from rummikub.rooms import Room, RoomRegistry


def test_add_and_get_room():
    rooms = RoomRegistry()
    rooms.add(Room("abc"))
    assert "abc" in rooms
    assert rooms.get("abc").id == "abc"
    assert rooms.get("missing") is None
    assert len(rooms) == 1


def test_duplicate_room_is_rejected():
    rooms = RoomRegistry([Room("abc")])
    with pytest.raises(RoomExists, match="Room abc already exists."):
        rooms.add(Room("abc"))


def test_remove_and_clear():
    rooms = RoomRegistry([Room("a"), Room("b")])
    rooms.remove("a")
    with pytest.raises(RoomNotFound):
        rooms.remove(Room("a"))
    rooms.clear()
    assert len(rooms) == 0


def test_registries_are_independent():
    first = RoomRegistry()
    first.add(Room("abc"))
    assert "abc" not in RoomRegistry()


def test_join_creates_once_and_seats_players():
    rooms = RoomRegistry()
    tom = PlayerIdentity(name="Tom", id="tom")
    room, created = rooms.join("abc", tom)
    assert created
    same, created_again = rooms.join("abc", tom)
    assert same is room
    assert not created_again
    assert [player.id for player in room.players] == ["tom"]


def test_room_starts_a_game():
    rooms = RoomRegistry()
    room, _ = rooms.join("abc", PlayerIdentity(name="Tom", id="tom"))
    rooms.join("abc", PlayerIdentity(name="Eileen", id="eileen"))
    game = room.start()
    assert game.current_player.name == "Tom"
    assert len(game.current_player.hand) == 14
    with pytest.raises(GameInProgress):
        room.start()
