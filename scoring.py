# scoring.py
# Frame scoring for a configurable bowling-style game.
# Pure functions: every result is recomputed from (config, throws).

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

STRIKE_MARK = "X"
SPARE_MARK = "/"
GUTTER_MARK = "G"
MISS_MARK = "-"
BLANK_MARK = ""


@dataclass(frozen=True)
class GameConfig:
    frames: int = 10
    strike: int = 10

    @property
    def slots(self) -> int:
        """Number of throw slots per player (two per frame plus one bonus)."""
        return self.frames * 2 + 1

    @property
    def bonus_slot(self) -> int:
        return self.frames * 2


@dataclass(frozen=True)
class PlayerSummary:
    name: str
    throws: list[int | None]
    glyphs: list[str]
    frame_scores: list[int | None]
    running: list[int | None]
    total: int | None


def empty_throws(config: GameConfig) -> list[int | None]:
    return [None] * config.slots


# -------------------------
# Validation
# -------------------------

def clamp_throw(value: int | None, strike: int) -> int | None:
    if value is None:
        return None
    if value < 0:
        return 0
    if value > strike:
        return strike
    return value


def validate_throws(throws: list[int | None], config: GameConfig) -> list[int | None]:
    """
    Return a corrected copy of a throw sequence.
    - every recorded throw is clamped into 0..strike (before any frame repair)
    - a strike clears the second slot of a regular frame
    - two throws without a strike cannot knock down more than `strike` pins
    - the bonus slot is cleared when the last frame is open
    Never rejects input.
    """
    strike = config.strike
    fixed = [clamp_throw(v, strike) for v in throws]
    fixed += [None] * (config.slots - len(fixed))
    del fixed[config.slots:]

    for frame in range(config.frames):
        t = frame * 2
        first, second = fixed[t], fixed[t + 1]
        last = frame == config.frames - 1
        if first is not None and first >= strike:
            # In the last frame the second slot is the first bonus ball.
            if not last:
                fixed[t + 1] = None
        elif first is not None and second is not None and first + second > strike:
            fixed[t + 1] = second = strike - first
        if last and first is not None and second is not None and first + second < strike:
            fixed[config.bonus_slot] = None
    return fixed


# -------------------------
# Frame scoring
# -------------------------

def next_recorded(throws: list[int | None], slot: int | None) -> int | None:
    """Index of the first recorded throw after `slot`, or None if there is none."""
    if slot is None:
        return None
    for idx in range(slot + 1, len(throws)):
        if throws[idx] is not None:
            return idx
    return None


def frame_scores(throws: list[int | None], config: GameConfig) -> list[int | None]:
    """
    Compute the raw score of each frame, using None for frames that
    cannot be scored yet (missing throws or bonus throws not yet recorded).
    Expects a validated sequence.
    """
    strike = config.strike

    def bonus(slot: int | None) -> int | None:
        if slot is None:
            return None
        return min(throws[slot], strike)

    scores: list[int | None] = []
    for frame in range(config.frames):
        t = frame * 2
        first, second = throws[t], throws[t + 1]

        if first is not None and first >= strike:
            ball1 = next_recorded(throws, t)
            ball2 = next_recorded(throws, ball1)
            b1, b2 = bonus(ball1), bonus(ball2)
            if b1 is None or b2 is None:
                logger.debug("frame %d: strike bonus not yet recorded", frame + 1)
                scores.append(None)
            else:
                scores.append(strike + b1 + b2)
            continue

        if first is None or second is None:
            scores.append(None)
            continue

        if first + second >= strike:
            b1 = bonus(next_recorded(throws, t + 1))
            if b1 is None:
                logger.debug("frame %d: spare bonus not yet recorded", frame + 1)
                scores.append(None)
            else:
                scores.append(strike + b1)
            continue

        scores.append(first + second)
    return scores


# -------------------------
# Glyphs
# -------------------------

def is_first_ball(throws: list[int | None], config: GameConfig, slot: int) -> bool:
    if slot % 2 == 0:
        return True
    # After a strike in the last frame the second slot starts a fresh rack.
    prev = throws[slot - 1]
    return slot == config.bonus_slot - 1 and prev is not None and prev >= config.strike


def throw_glyph(throws: list[int | None], config: GameConfig, slot: int) -> str:
    """Bowling notation for one slot: X strike, / spare, G gutter, - miss."""
    value = throws[slot]
    if value is None:
        return BLANK_MARK
    if is_first_ball(throws, config, slot):
        if value >= config.strike:
            return STRIKE_MARK
        if value == 0:
            return GUTTER_MARK
        return str(value)
    prev = throws[slot - 1]
    if prev is not None and value + prev >= config.strike:
        return SPARE_MARK
    if value == 0:
        return MISS_MARK
    return str(value)


def throw_glyphs(throws: list[int | None], config: GameConfig) -> list[str]:
    return [throw_glyph(throws, config, slot) for slot in range(config.slots)]


# -------------------------
# Totals
# -------------------------

def running_totals(scores: list[int | None]) -> list[int | None]:
    """Cumulative score per frame; blank from the first incomplete frame on."""
    running: list[int | None] = []
    total = 0
    for score in scores:
        if score is None or (running and running[-1] is None):
            running.append(None)
            continue
        total += score
        running.append(total)
    return running


def grand_total(scores: list[int | None]) -> int | None:
    if any(score is None for score in scores):
        return None
    return sum(scores)


def summarize(name: str, throws: list[int | None], config: GameConfig) -> PlayerSummary:
    validated = validate_throws(throws, config)
    scores = frame_scores(validated, config)
    return PlayerSummary(
        name=name,
        throws=validated,
        glyphs=throw_glyphs(validated, config),
        frame_scores=scores,
        running=running_totals(scores),
        total=grand_total(scores),
    )
