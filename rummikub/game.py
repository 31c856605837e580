from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .bag import Bag
from .collection import TileCollection
from .errors import (
    BoardInvalid,
    DrawAfterPlay,
    GameError,
    GameOver,
    MeldThresholdNotMet,
    MissingExpectedTiles,
    NoMovesToUndo,
    NothingChanged,
    NothingPlayed,
    NotYourTurn,
    PassNotAllowed,
    TilesNotInHand,
)
from .meld import NewSet, PersistedSet, TileSet
from .move import ActionKind, TurnAction
from .player import GamePlayer, PlayerIdentity
from .rules import Ruleset
from .table import Board
from .tiles import Tile

logger = logging.getLogger(__name__)


@dataclass
class GameEvent:
    player: str
    move_kind: str
    payload: dict


class Game:
    """Turn state machine for one game.

    The game is either awaiting a move from the current player or over; there
    is no separate state object, the phase is read off the action log, the
    meld tracker and the winner. Calls must be serialized by the caller.
    """

    def __init__(
        self,
        players: Sequence[PlayerIdentity],
        bag: Optional[Bag] = None,
        ruleset: Optional[Ruleset] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.ruleset = ruleset or Ruleset()
        if not self.ruleset.min_players <= len(players) <= self.ruleset.max_players:
            raise ValueError(
                f"a game needs {self.ruleset.min_players} to {self.ruleset.max_players} players, got {len(players)}"
            )
        if len({identity.id for identity in players}) != len(players):
            raise ValueError("player ids must be unique")

        self._bag = bag if bag is not None else Bag(rng=rng, ruleset=self.ruleset)
        self._board = Board()
        self._player_index = 0
        self._actions: List[TurnAction] = []
        self._winner: Optional[GamePlayer] = None
        self._consecutive_passes = 0
        self.events: List[GameEvent] = []
        self._turn_start: Tuple[Board, TileCollection] = (Board(), TileCollection())

        fixed_hands = [tile for identity in players for tile in (identity.initial_hand or [])]
        if len({tile.id for tile in fixed_hands}) != len(fixed_hands):
            raise ValueError("initial hands must not share tiles")
        self._bag.remove_tiles(fixed_hands)

        self._players = [GamePlayer(identity, self) for identity in players]
        self._players_by_id: Dict[str, GamePlayer] = {player.id: player for player in self._players}
        self.meld_tracker: Dict[str, bool] = {player.id: False for player in self._players}
        self._begin_turn()
        logger.info("game started with %s", ", ".join(player.name for player in self._players))

    # -- read-only state -------------------------------------------------

    @property
    def player_order(self) -> List[GamePlayer]:
        return list(self._players)

    @property
    def current_player(self) -> GamePlayer:
        return self._players[self._player_index]

    @property
    def board(self) -> Board:
        return self._board

    @property
    def sets(self) -> Board:
        return self._board

    @property
    def bag(self) -> Bag:
        return self._bag

    @property
    def current_player_actions(self) -> List[TurnAction]:
        return list(self._actions)

    @property
    def winner(self) -> Optional[GamePlayer]:
        return self._winner

    @property
    def over(self) -> bool:
        return self._winner is not None or self._consecutive_passes >= len(self._players)

    def get_player(self, player_id: str) -> Optional[GamePlayer]:
        return self._players_by_id.get(player_id)

    def has_melded(self, player: GamePlayer) -> bool:
        return self.meld_tracker[player.id]

    def draw_hand(self) -> List[Tile]:
        return self._bag.draw_hand(self.ruleset.initial_hand_size)

    def tile_count(self) -> int:
        return len(self._bag) + sum(len(player.hand) for player in self._players) + self._board.tile_count()

    def snapshot(self, viewer_id: Optional[str] = None) -> dict:
        viewer = self.get_player(viewer_id) if viewer_id is not None else None
        return {
            "current_player": self.current_player.id,
            "players": [
                {
                    "id": player.id,
                    "name": player.name,
                    "hand_count": len(player.hand),
                    "melded": self.meld_tracker[player.id],
                }
                for player in self._players
            ],
            "board": self._board.to_dict(),
            "bag_count": len(self._bag),
            "actions": [action.to_dict() for action in self._actions],
            "over": self.over,
            "winner": self._winner.id if self._winner else None,
            "hand": viewer.hand.ids() if viewer else None,
        }

    # -- player operations -----------------------------------------------

    def draw(self, player: GamePlayer) -> Tile:
        self._check(player, "draw")
        if self._actions:
            raise DrawAfterPlay(player.name)

        tile = self._bag.draw()
        player.hand.push(tile)
        self._actions.append(TurnAction.drew(tile))
        logger.debug("%s drew %s", player.name, tile.id)
        # a lone draw always passes the end of turn checks
        self.end_turn(player)
        return tile

    def meld(
        self,
        player: GamePlayer,
        kind: ActionKind,
        to: Optional[TileSet] = None,
        from_: Optional[PersistedSet] = None,
        tiles: Optional[Iterable[Tile]] = None,
    ) -> None:
        """Apply one ADD, ADD_TO_SET or MOVE for the current player.

        ``to`` is the proposed contents of the target set. When ``tiles`` is
        given the tiles are appended: to a new set, to the existing set that
        ``to`` refers to, or to the target proposal of a move.
        """
        self._check(player, kind.value)
        to = self._append_tiles(player, kind, to, tiles)
        if kind == ActionKind.ADD:
            action = self._add_from_hand(player, to)
        elif kind == ActionKind.ADD_TO_SET:
            action = self._add_to_set(player, to)
        elif kind == ActionKind.MOVE:
            if from_ is None:
                raise GameError("moving tiles needs a source set", player=player.name, action=kind.value)
            action = self._move_between_sets(player, to, from_)
        else:
            raise GameError("Undefined action!", player=player.name, action=kind.value)
        self._actions.append(action)
        logger.debug("%s %s %s", player.name, action.kind.value, [tile.id for tile in action.tiles])

    def end_turn(self, player: GamePlayer) -> None:
        self._check(player, "end_turn")

        newly_melded = False
        if not self.meld_tracker[player.id] and any(a.kind != ActionKind.DREW for a in self._actions):
            points = self._initial_meld_points()
            if points <= self.ruleset.initial_meld_threshold:
                raise MeldThresholdNotMet(player.name, points, self.ruleset.initial_meld_threshold)
            newly_melded = True

        if not self._board.valid():
            raise BoardInvalid(player.name)

        if not self._actions:
            raise NothingPlayed(player.name)

        if newly_melded:
            self.meld_tracker[player.id] = True
            logger.info("%s made their initial meld", player.name)
        self._consecutive_passes = 0
        self.events.append(
            GameEvent(player.id, "END_TURN", {"actions": [action.to_dict() for action in self._actions]})
        )
        if not player.hand:
            self._winner = player
            logger.info("game over, %s wins", player.name)
        self._advance()

    def give_up(self, player: GamePlayer) -> None:
        self._check(player, "give_up")
        if not self._actions:
            raise NoMovesToUndo(player.name)

        board, hand = self._turn_start
        self._board.restore(board)
        player.hand.replace(hand.items)
        self.events.append(GameEvent(player.id, "GIVE_UP", {"undone": len(self._actions)}))
        self._actions = []
        logger.debug("%s gave up their turn changes", player.name)

    def pass_turn(self, player: GamePlayer) -> None:
        self._check(player, "pass")
        if self._actions:
            raise PassNotAllowed(player.name, "tiles were moved this turn")
        if not self._bag.is_empty():
            raise PassNotAllowed(player.name, "the bag still has tiles")

        self._consecutive_passes += 1
        self.events.append(GameEvent(player.id, "PASS", {}))
        logger.info("%s passed", player.name)
        if self.over:
            logger.info("game over, no player can move")
        self._advance()

    # -- internals -------------------------------------------------------

    def _check(self, player: GamePlayer, action: str) -> None:
        if self.over:
            raise GameOver(player.name, action)
        if player is not self.current_player:
            raise NotYourTurn(player.name, action)

    def _begin_turn(self) -> None:
        self._turn_start = (
            self._board.snapshot(),
            self.current_player.hand.copy(),
        )

    def _advance(self) -> None:
        self._player_index = (self._player_index + 1) % len(self._players)
        self._actions = []
        self._begin_turn()

    def _initial_meld_points(self) -> int:
        total = 0
        for action in self._actions:
            if action.kind == ActionKind.ADD:
                total += action.points
            elif action.kind in (ActionKind.DREW, ActionKind.ADD_TO_SET, ActionKind.MOVE):
                continue
            else:
                raise ValueError(f"Unknown action kind {action.kind}")
        return total

    def _require_from_hand(self, player: GamePlayer, tiles: List[Tile], action: ActionKind) -> None:
        ids = [tile.id for tile in tiles]
        if len(set(ids)) != len(ids) or not player.hand.contains(tiles):
            raise TilesNotInHand(player.name, action.value)

    def _board_set(self, player: GamePlayer, tile_set: TileSet, action: ActionKind) -> PersistedSet:
        current = self._board.get(tile_set.id) if isinstance(tile_set, PersistedSet) else None
        if current is None:
            raise GameError("That set is not on the board.", player=player.name, action=action.value)
        return current

    def _split_proposal(
        self, player: GamePlayer, prior: List[Tile], proposed: List[Tile], action: ActionKind
    ) -> List[Tile]:
        """Return the proposal's tiles that must come from the hand.

        Everything that was on the edited sets before has to stay on them.
        """
        prior_ids = {tile.id for tile in prior}
        from_hand = [tile for tile in proposed if tile.id not in prior_ids]
        self._require_from_hand(player, from_hand, action)
        proposed_ids = [tile.id for tile in proposed]
        if len(set(proposed_ids)) != len(proposed_ids):
            raise TilesNotInHand(player.name, action.value)
        if not prior_ids.issubset(proposed_ids):
            raise MissingExpectedTiles(player.name, action.value)
        return from_hand

    def _append_tiles(
        self, player: GamePlayer, kind: ActionKind, to: Optional[TileSet], tiles: Optional[Iterable[Tile]]
    ) -> TileSet:
        if tiles is None:
            if to is None:
                raise NothingChanged(player.name, kind.value)
            return to
        tiles = list(tiles)
        if to is None:
            if kind != ActionKind.ADD:
                raise GameError("Tiles need a target set.", player=player.name, action=kind.value)
            return NewSet(tiles)
        if isinstance(to, PersistedSet):
            if kind == ActionKind.ADD_TO_SET:
                current = self._board_set(player, to, kind)
                return current.from_tiles(current.items + tiles)
            return to.from_tiles(to.items + tiles)
        return NewSet(to.items + tiles)

    def _add_from_hand(self, player: GamePlayer, new_set: TileSet) -> TurnAction:
        tiles = new_set.items
        if not tiles:
            raise NothingChanged(player.name, ActionKind.ADD.value)
        self._require_from_hand(player, tiles, ActionKind.ADD)
        staged = NewSet(tiles)
        persisted = self._board.push(staged)
        player.hand.remove_tiles(tiles)
        return TurnAction.add(staged.items, persisted.id, staged.points())

    def _add_to_set(self, player: GamePlayer, proposal: TileSet) -> TurnAction:
        current = self._board_set(player, proposal, ActionKind.ADD_TO_SET)
        from_hand = self._split_proposal(player, current.items, proposal.items, ActionKind.ADD_TO_SET)
        if not from_hand and proposal.ids() == current.ids():
            raise NothingChanged(player.name, ActionKind.ADD_TO_SET.value)
        self._board.replace(current.id, proposal.items)
        player.hand.remove_tiles(from_hand)
        return TurnAction.add_to_set((tile.played() for tile in from_hand), current.id)

    def _move_between_sets(self, player: GamePlayer, to: TileSet, from_: PersistedSet) -> TurnAction:
        source = self._board_set(player, from_, ActionKind.MOVE)
        target = None if isinstance(to, NewSet) else self._board_set(player, to, ActionKind.MOVE)
        if target is not None and target.id == source.id:
            raise GameError("Tiles must move between two different sets.", player=player.name, action="MOVE")
        if target is None and not to.items:
            raise NothingChanged(player.name, ActionKind.MOVE.value)

        prior = source.items + (target.items if target is not None else [])
        from_hand = self._split_proposal(player, prior, to.items + from_.items, ActionKind.MOVE)
        if not from_hand and target is not None and (to.ids(), from_.ids()) == (target.ids(), source.ids()):
            raise NothingChanged(player.name, ActionKind.MOVE.value)

        self._board.replace(source.id, from_.items)
        if target is None:
            target_id = self._board.push(NewSet(to.items)).id
        else:
            target_id = target.id
            self._board.replace(target_id, to.items)
        player.hand.remove_tiles(from_hand)
        return TurnAction.move((tile.played() for tile in from_hand), target_id, source.id)
