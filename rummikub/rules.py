from dataclasses import dataclass


@dataclass(frozen=True)
class Ruleset:
    values: int = 13
    copies_per_tiletype: int = 2
    num_jokers: int = 2
    initial_hand_size: int = 14
    initial_meld_threshold: int = 29
    min_players: int = 2
    max_players: int = 4

    @property
    def colors(self) -> int:
        return 4

    def deck_size(self) -> int:
        normal_tiles = self.colors * self.values * self.copies_per_tiletype
        return normal_tiles + self.num_jokers
