import logging
import os

from scoring import GameConfig

logger = logging.getLogger(__name__)

DEFAULT_FRAMES = 10
DEFAULT_STRIKE = 10
DEFAULT_PLAYERS = 2


class SettingsError(Exception):
    """Raised when submitted game settings are invalid."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


def _parse_positive_int(env_var: str, default: int) -> int:
    raw_value = os.getenv(env_var)
    if raw_value is None or not raw_value.strip():
        return default

    try:
        value = int(raw_value)
    except ValueError:
        logger.warning(
            "%s is not a valid integer (got %r); defaulting to %d",
            env_var,
            raw_value,
            default,
        )
        return default

    if value <= 0:
        logger.warning("%s must be positive; defaulting to %d", env_var, default)
        return default

    return value


FRAMES = _parse_positive_int("BOWLING_FRAMES", DEFAULT_FRAMES)
STRIKE = _parse_positive_int("BOWLING_STRIKE", DEFAULT_STRIKE)
PLAYERS = _parse_positive_int("BOWLING_PLAYERS", DEFAULT_PLAYERS)


def load_config(frames, strike) -> GameConfig:
    """Build a GameConfig from submitted form values.

    Both values must be positive integers (booleans are rejected).
    """
    values = {}
    for label, raw in (("Frames", frames), ("Strike", strike)):
        if isinstance(raw, bool):
            raise SettingsError(f"{label} must be an integer (not a boolean).")
        try:
            value = int(raw)
        except (TypeError, ValueError):
            raise SettingsError(f"{label} must be an integer.")
        if value != raw and not isinstance(raw, str):
            raise SettingsError(f"{label} must be a whole number.")
        if value <= 0:
            raise SettingsError(f"{label} must be > 0.")
        values[label] = value
    return GameConfig(frames=values["Frames"], strike=values["Strike"])


def default_config() -> GameConfig:
    return GameConfig(frames=FRAMES, strike=STRIKE)
