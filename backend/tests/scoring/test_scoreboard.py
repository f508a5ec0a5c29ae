import os, sys
import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))
from app.scoring import scoreboard
from app.scoring.bowling import ScoreEngine


@pytest.mark.parametrize(
    "rolls, symbols",
    [
        ([10], ["X"]),
        ([7, 3], ["7", "/"]),
        ([0, 10], ["-", "/"]),
        ([9, 0], ["9", "-"]),
        ([0, 0], ["-", "-"]),
        ([10, 10, 10], ["X", "X", "X"]),
        ([10, 4, 6], ["X", "4", "/"]),
        ([10, 0, 10], ["X", "-", "/"]),
        ([7, 3, 10], ["7", "/", "X"]),
        ([10, 10, 7], ["X", "X", "7"]),
    ],
)
def test_roll_symbols(rolls, symbols):
    assert scoreboard.roll_symbols(rolls, miss="-") == symbols


def test_roll_symbols_blank_miss():
    assert scoreboard.roll_symbols([0, 5], miss="") == ["", "5"]


def test_render_pending_and_unstarted_frames():
    engine = ScoreEngine.from_rolls([10, 5, 5, 3])
    rows = scoreboard.render(engine, placeholder="—", miss="0")

    assert len(rows) == 10
    assert rows[0] == {
        "frame": 1,
        "rolls": [10],
        "symbols": ["X"],
        "score": 20,
        "cumulative": 20,
        "display": "20",
    }
    assert rows[1]["symbols"] == ["5", "/"]
    assert rows[1]["score"] == 13
    assert rows[1]["display"] == "33"
    assert rows[2]["rolls"] == [3]
    assert rows[2]["score"] is None
    assert rows[2]["display"] == "—"
    for row in rows[3:]:
        assert row["rolls"] == []
        assert row["symbols"] == []
        assert row["display"] == ""


def test_render_placeholder_follows_first_pending_frame():
    # Frame 2 is an open frame but frame 1's strike bonus is not known yet.
    engine = ScoreEngine.from_rolls([10, 10, 4])
    rows = scoreboard.render(engine, placeholder="...")
    assert [row["display"] for row in rows[:3]] == ["24", "...", "..."]


def test_render_finished_game():
    engine = ScoreEngine.from_rolls([10] * 12)
    rows = scoreboard.render(engine)
    assert rows[-1]["symbols"] == ["X", "X", "X"]
    assert rows[-1]["display"] == "300"
