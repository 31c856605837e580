from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, List, Union


class Color(str, Enum):
    RED = "RED"
    BLACK = "BLACK"
    BLUE = "BLUE"
    ORANGE = "ORANGE"
    JOKER = "JOKER"


class Phase(str, Enum):
    UNPLAYED = "UNPLAYED"
    PLAYED = "PLAYED"


JOKER = "JOKER"
COLORS = (Color.RED, Color.BLACK, Color.BLUE, Color.ORANGE)

COLOR_CODES = {
    Color.RED: "r",
    Color.BLACK: "b",
    Color.BLUE: "u",
    Color.ORANGE: "o",
    Color.JOKER: "j",
}
_CODE_COLORS = {code: color for color, code in COLOR_CODES.items()}

Face = Union[int, str]


def tile_code(face: Face, color: Color) -> str:
    if color == Color.JOKER:
        return COLOR_CODES[Color.JOKER]
    return f"{COLOR_CODES[color]}{face}"


def make_tile_id(face: Face, color: Color, copy: int) -> str:
    return f"{tile_code(face, color)}-{copy}"


@dataclass(frozen=True)
class Tile:
    id: str
    face: Face
    color: Color
    phase: Phase = Phase.UNPLAYED

    def __post_init__(self) -> None:
        if (self.face == JOKER) != (self.color == Color.JOKER):
            raise ValueError("joker face and joker color must go together")
        if self.face != JOKER and not (isinstance(self.face, int) and 1 <= self.face <= 13):
            raise ValueError(f"invalid face {self.face!r}")

    def is_joker(self) -> bool:
        return self.face == JOKER

    @property
    def value(self) -> int:
        if self.is_joker():
            raise ValueError("Joker has no inherent value")
        return int(self.face)

    @property
    def code(self) -> str:
        return tile_code(self.face, self.color)

    def same_value(self, other: "Tile") -> bool:
        return self.face == other.face and self.color == other.color

    def played(self) -> "Tile":
        return self if self.phase == Phase.PLAYED else replace(self, phase=Phase.PLAYED)

    def unplayed(self) -> "Tile":
        return self if self.phase == Phase.UNPLAYED else replace(self, phase=Phase.UNPLAYED)

    def __str__(self) -> str:
        return self.id


def iter_full_deck(values: int = 13, copies: int = 2, num_jokers: int = 2) -> Iterable[Tile]:
    for copy in range(num_jokers):
        yield Tile(make_tile_id(JOKER, Color.JOKER, copy), JOKER, Color.JOKER)
    for color in COLORS:
        for face in range(1, values + 1):
            for copy in range(copies):
                yield Tile(make_tile_id(face, color, copy), face, color)


def parse_tile_code(code: str) -> tuple:
    code = code.strip().lower()
    if not code:
        raise ValueError("empty tile code")
    color = _CODE_COLORS.get(code[0])
    if color is None:
        raise ValueError(f"unknown color in tile code {code!r}")
    if color == Color.JOKER:
        if code[1:]:
            raise ValueError(f"joker code takes no face: {code!r}")
        return JOKER, color
    try:
        face = int(code[1:])
    except ValueError:
        raise ValueError(f"invalid face in tile code {code!r}") from None
    return face, color


def parse_tiles(codes: str, phase: Phase = Phase.UNPLAYED) -> List[Tile]:
    """Build tiles from a comma separated list of codes such as ``"r10,o10,u10,j"``.

    Repeated codes get increasing copy numbers, so ``"r1,r1"`` yields the two
    distinct red ones ``r1-0`` and ``r1-1``.
    """
    seen: Counter = Counter()
    tiles = []
    for raw in codes.split(","):
        face, color = parse_tile_code(raw)
        key = tile_code(face, color)
        tiles.append(Tile(make_tile_id(face, color, seen[key]), face, color, phase))
        seen[key] += 1
    return tiles


def unplayed_tiles(codes: str) -> List[Tile]:
    return parse_tiles(codes, Phase.UNPLAYED)


def played_tiles(codes: str) -> List[Tile]:
    return parse_tiles(codes, Phase.PLAYED)
