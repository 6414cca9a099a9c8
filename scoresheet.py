# scoresheet.py
# Player score records for one game, plus the tables the page renders.

import logging
import math
import re
from dataclasses import dataclass, field

import pandas as pd

from scoring import GameConfig, PlayerSummary, empty_throws, summarize, validate_throws
from settings import PLAYERS

logger = logging.getLogger(__name__)

LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def default_name(player: int) -> str:
    return f"Player {player + 1}"


def parse_throw(raw) -> int | None:
    """
    Convert a raw field value to a throw.
    - ints pass through (booleans do not)
    - strings use their leading integer: ' 7' -> 7, '8pins' -> 8, '3.9' -> 3
    - anything else (blank, 'abc', None) -> None (unrecorded)
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None
    if not isinstance(raw, str):
        return None
    m = LEADING_INT.match(raw)
    if not m:
        return None
    return int(m.group(1))


@dataclass
class PlayerRecord:
    name: str
    throws: list[int | None] = field(default_factory=list)


class ScoreSheet:
    """The score records of a fixed set of players under one configuration."""

    def __init__(self, config: GameConfig, players: int = PLAYERS):
        self.players = players
        self.config = config
        self.records: list[PlayerRecord] = []
        self.reset(config)

    def reset(self, config: GameConfig | None = None) -> None:
        if config is not None:
            self.config = config
        self.records = [
            PlayerRecord(name=default_name(p), throws=empty_throws(self.config))
            for p in range(self.players)
        ]
        logger.debug(
            "score sheet reset: %d players, %d frames, strike %d",
            self.players, self.config.frames, self.config.strike,
        )

    def _record(self, player: int) -> PlayerRecord:
        if not 0 <= player < self.players:
            raise IndexError(f"player {player} out of range")
        return self.records[player]

    def set_throw(self, player: int, slot: int, raw) -> None:
        record = self._record(player)
        if not 0 <= slot < self.config.slots:
            raise IndexError(f"throw slot {slot} out of range")
        value = parse_throw(raw)
        record.throws[slot] = value
        # Keep the validated sequence so discarded throws stay discarded.
        record.throws = validate_throws(record.throws, self.config)
        logger.debug("player %d slot %d: %r -> %r", player, slot, raw, record.throws[slot])

    def set_name(self, player: int, name: str) -> None:
        self._record(player).name = name

    def summaries(self) -> list[PlayerSummary]:
        return [summarize(r.name, r.throws, self.config) for r in self.records]


# -------------------------
# Display tables
# -------------------------

def _cell(value: int | None) -> str:
    return "" if value is None else str(value)


def frame_table(summary: PlayerSummary) -> pd.DataFrame:
    """One row per frame: glyphs, frame score and running total."""
    frames = len(summary.frame_scores)
    glyphs = summary.glyphs
    rows = []
    for f in range(frames):
        rows.append({
            "Frame": f + 1,
            "R1": glyphs[f * 2],
            "R2": glyphs[f * 2 + 1],
            "R3": glyphs[frames * 2] if f == frames - 1 else "",
            "Frame Score": _cell(summary.frame_scores[f]),
            "Cumulative": _cell(summary.running[f]),
        })
    return pd.DataFrame(rows, columns=["Frame", "R1", "R2", "R3", "Frame Score", "Cumulative"])


def summary_table(summaries: list[PlayerSummary]) -> pd.DataFrame:
    rows = []
    for s in summaries:
        row = {"Player": s.name}
        row.update({str(f + 1): _cell(v) for f, v in enumerate(s.running)})
        row["Total"] = _cell(s.total)
        rows.append(row)
    return pd.DataFrame(rows)
