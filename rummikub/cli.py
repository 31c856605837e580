from __future__ import annotations

import argparse
import logging
import random
from typing import Dict, List, Optional

from .errors import BoardInvalid, MeldThresholdNotMet
from .game import Game
from .meld import NewSet
from .player import GamePlayer, PlayerIdentity
from .tiles import COLORS, Tile

logger = logging.getLogger(__name__)

PLAYER_NAMES = ["Tom", "Eileen", "Hannah", "Ada"]


def _find_run_in_hand(tiles: List[Tile]) -> Optional[List[Tile]]:
    for color in COLORS:
        by_face: Dict[int, Tile] = {}
        for tile in tiles:
            if tile.color == color:
                by_face.setdefault(tile.value, tile)
        streak: List[Tile] = []
        for face in range(1, 14):
            if face in by_face:
                streak.append(by_face[face])
            else:
                if len(streak) >= 3:
                    return streak
                streak = []
        if len(streak) >= 3:
            return streak
    return None


def _find_group_in_hand(tiles: List[Tile]) -> Optional[List[Tile]]:
    for face in range(1, 14):
        available: Dict[str, Tile] = {}
        for tile in tiles:
            if not tile.is_joker() and tile.value == face:
                available.setdefault(tile.color.value, tile)
        if len(available) >= 3:
            return list(available.values())
    return None


def find_melds_in_hand(tiles: List[Tile]) -> List[List[Tile]]:
    """Greedily pick disjoint runs, then groups, out of a hand."""
    remaining = list(tiles)
    melds: List[List[Tile]] = []
    for finder in (_find_run_in_hand, _find_group_in_hand):
        while True:
            meld = finder(remaining)
            if meld is None:
                break
            melds.append(meld)
            taken = {tile.id for tile in meld}
            remaining = [tile for tile in remaining if tile.id not in taken]
    return melds


def take_turn(game: Game, player: GamePlayer) -> str:
    melds = find_melds_in_hand(player.hand.items)
    if melds:
        for meld in melds:
            player.play(NewSet(meld))
        try:
            player.end_turn()
            return "play"
        except (MeldThresholdNotMet, BoardInvalid) as exc:
            logger.debug("%s takes back their tiles: %s", player.name, exc)
            player.give_up()

    if not game.bag.is_empty():
        player.draw()
        return "draw"
    player.pass_turn()
    return "pass"


def run_game(num_players: int = 4, seed: Optional[int] = None, max_turns: int = 500) -> Game:
    rng = random.Random(seed)
    players = [PlayerIdentity(name=name, id=name.lower()) for name in PLAYER_NAMES[:num_players]]
    game = Game(players, rng=rng)
    for _ in range(max_turns):
        if game.over:
            break
        take_turn(game, game.current_player)
    return game


def main() -> None:
    parser = argparse.ArgumentParser(description="Run a Rummikub self-play simulation.")
    parser.add_argument("--players", type=int, default=4, choices=range(2, 5), help="Number of players.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible bag order.")
    parser.add_argument("--max-turns", type=int, default=500, help="Stop after this many turns.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every action.")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    game = run_game(num_players=args.players, seed=args.seed, max_turns=args.max_turns)
    turns = sum(1 for event in game.events if event.move_kind != "GIVE_UP")
    print(f"Game finished after {turns} turns")
    if game.winner is not None:
        print(f"Winner: {game.winner.name}")
    elif game.over:
        print("No winner (nobody could move)")
    else:
        print("No winner (turn limit reached)")
    print("Hand sizes:", {player.name: len(player.hand) for player in game.player_order})
    print("Board sets:", game.board.count)


if __name__ == "__main__":
    main()
