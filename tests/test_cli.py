import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from rummikub.cli import find_melds_in_hand, main, run_game
from rummikub.meld import NewSet
from rummikub.tiles import unplayed_tiles


def test_find_melds_picks_disjoint_runs_and_groups():
    hand = unplayed_tiles("r1,r2,r3,r4,b9,u9,o9,j,r9")
    melds = find_melds_in_hand(hand)
    assert [[tile.id for tile in meld] for meld in melds] == [
        ["r1-0", "r2-0", "r3-0", "r4-0"],
        ["b9-0", "u9-0", "o9-0", "r9-0"],
    ]
    assert all(NewSet(meld).is_valid() for meld in melds)


def test_run_game_is_reproducible():
    first = run_game(num_players=2, seed=4, max_turns=60)
    second = run_game(num_players=2, seed=4, max_turns=60)
    assert first.snapshot() == second.snapshot()
    assert first.tile_count() == 106


def test_main_prints_summary(capsys, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["rummikub-sim", "--players", "3", "--seed", "2", "--max-turns", "30"])
    main()
    out = capsys.readouterr().out
    assert "Game finished after" in out
    assert "Board sets:" in out
