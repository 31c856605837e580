from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional

from .errors import OutOfTiles
from .rules import Ruleset
from .tiles import Tile, iter_full_deck

logger = logging.getLogger(__name__)


class Bag:
    """Shuffled supply of undealt tiles; draws come off the front."""

    def __init__(
        self,
        tiles: Optional[Iterable[Tile]] = None,
        rng: Optional[random.Random] = None,
        ruleset: Optional[Ruleset] = None,
    ) -> None:
        if tiles is not None:
            self._tiles: List[Tile] = [tile.unplayed() for tile in tiles]
        else:
            ruleset = ruleset or Ruleset()
            self._tiles = list(iter_full_deck(ruleset.values, ruleset.copies_per_tiletype, ruleset.num_jokers))
            (rng or random.Random()).shuffle(self._tiles)

    @property
    def count(self) -> int:
        return len(self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def is_empty(self) -> bool:
        return not self._tiles

    def ids(self) -> List[str]:
        return [tile.id for tile in self._tiles]

    def draw(self) -> Tile:
        if not self._tiles:
            raise OutOfTiles()
        return self._tiles.pop(0)

    def draw_hand(self, size: int = 14) -> List[Tile]:
        hand: List[Tile] = []
        try:
            for _ in range(size):
                hand.append(self.draw())
        except OutOfTiles:
            self._tiles[:0] = hand
            logger.debug("bag ran out while dealing; %d tiles returned", len(hand))
            raise
        return hand

    def remove_tile(self, tile: Tile) -> None:
        for index, own in enumerate(self._tiles):
            if own.id == tile.id:
                del self._tiles[index]
                return

    def remove_tiles(self, tiles: Iterable[Tile]) -> None:
        for tile in tiles:
            self.remove_tile(tile)

    def __str__(self) -> str:
        return ",".join(self.ids())
