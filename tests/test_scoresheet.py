import pytest

from scoresheet import ScoreSheet, frame_table, parse_throw, summary_table
from scoring import GameConfig

TEN = GameConfig(frames=10, strike=10)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (7, 7),
        ("7", 7),
        (" 7", 7),
        ("8pins", 8),
        ("3.9", 3),
        ("-2", -2),
        ("+4", 4),
        (4.0, 4),
        ("", None),
        ("   ", None),
        ("abc", None),
        ("X", None),
        (None, None),
        (True, None),
        (float("nan"), None),
    ],
)
def test_parse_throw(raw, expected):
    assert parse_throw(raw) == expected


def test_new_sheet_has_default_names_and_empty_throws():
    sheet = ScoreSheet(TEN, players=2)
    assert [r.name for r in sheet.records] == ["Player 1", "Player 2"]
    assert all(r.throws == [None] * 21 for r in sheet.records)
    assert [s.total for s in sheet.summaries()] == [None, None]


def test_set_throw_parses_and_validates():
    sheet = ScoreSheet(TEN, players=2)
    sheet.set_throw(0, 0, "7")
    sheet.set_throw(0, 1, "6")
    assert sheet.records[0].throws[:2] == [7, 3]
    sheet.set_throw(0, 0, "12")
    assert sheet.records[0].throws[:2] == [10, None]
    assert sheet.records[1].throws[:2] == [None, None]


def test_invalid_input_clears_slot():
    sheet = ScoreSheet(TEN, players=1)
    sheet.set_throw(0, 4, 5)
    sheet.set_throw(0, 4, "oops")
    assert sheet.records[0].throws[4] is None


def test_discarded_bonus_stays_discarded():
    sheet = ScoreSheet(TEN, players=1)
    sheet.set_throw(0, 18, 3)
    sheet.set_throw(0, 20, 9)
    assert sheet.records[0].throws[20] == 9
    sheet.set_throw(0, 19, 4)
    assert sheet.records[0].throws[20] is None
    sheet.set_throw(0, 19, 7)
    assert sheet.records[0].throws[18:] == [3, 7, None]


def test_players_are_independent():
    sheet = ScoreSheet(GameConfig(frames=1, strike=10), players=2)
    for slot, value in enumerate([10, 10, 10]):
        sheet.set_throw(1, slot, value)
    totals = [s.total for s in sheet.summaries()]
    assert totals == [None, 30]


def test_set_name():
    sheet = ScoreSheet(TEN, players=2)
    sheet.set_name(1, "Kim")
    assert [s.name for s in sheet.summaries()] == ["Player 1", "Kim"]


def test_reset_applies_new_config():
    sheet = ScoreSheet(TEN, players=2)
    sheet.set_name(0, "Kim")
    sheet.set_throw(0, 0, 4)
    sheet.reset(GameConfig(frames=3, strike=5))
    assert sheet.config.frames == 3
    assert sheet.records[0].name == "Player 1"
    assert sheet.records[0].throws == [None] * 7
    sheet.set_throw(0, 0, 9)
    assert sheet.records[0].throws[0] == 5


@pytest.mark.parametrize("player, slot", [(-1, 0), (2, 0), (0, 21), (0, -1)])
def test_out_of_range_edits_raise(player, slot):
    sheet = ScoreSheet(TEN, players=2)
    with pytest.raises(IndexError):
        sheet.set_throw(player, slot, 1)


def test_frame_table():
    sheet = ScoreSheet(TEN, players=1)
    for slot, value in enumerate([5, 5, 3]):
        sheet.set_throw(0, slot, value)
    df = frame_table(sheet.summaries()[0])
    assert list(df.columns) == ["Frame", "R1", "R2", "R3", "Frame Score", "Cumulative"]
    assert len(df) == 10
    first = df.iloc[0]
    assert (first["R1"], first["R2"], first["Frame Score"], first["Cumulative"]) == ("5", "/", "13", "13")
    assert df.iloc[1]["Frame Score"] == ""
    assert df.iloc[1]["Cumulative"] == ""


def test_frame_table_bonus_column_only_on_last_frame():
    sheet = ScoreSheet(GameConfig(frames=2, strike=10), players=1)
    for slot, value in enumerate([10, None, 10, 10, 10]):
        sheet.set_throw(0, slot, value)
    df = frame_table(sheet.summaries()[0])
    assert list(df["R3"]) == ["", "X"]
    assert list(df["Cumulative"]) == ["30", "60"]


def test_summary_table():
    sheet = ScoreSheet(GameConfig(frames=2, strike=10), players=2)
    for slot, value in enumerate([1, 2, 3, 4]):
        sheet.set_throw(0, slot, value)
    df = summary_table(sheet.summaries())
    assert list(df.columns) == ["Player", "1", "2", "Total"]
    assert df.iloc[0].tolist() == ["Player 1", "3", "10", "10"]
    assert df.iloc[1].tolist() == ["Player 2", "", "", ""]
