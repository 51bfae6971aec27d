"""
config.py — Scoring Constants Loaded From the Environment
==========================================================

The dampening penalty, compounding threshold/bonus and reason cap are
tunable so they can be calibrated without touching the matching logic.
Values come from environment variables (optionally via a .env file).

    RAKSHAK_DAMPENING_PENALTY   points removed for trusted transactional SMS (60)
    RAKSHAK_COMPOUND_THRESHOLD  distinct matches needed for the bonus        (5)
    RAKSHAK_COMPOUND_BONUS      points added once when the threshold is met  (20)
    RAKSHAK_MAX_REASONS         reasons kept on a ScanResult, at most 5      (5)
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from rakshak.models import MAX_REASONS

# Load environment variables from .env file (if present)
load_dotenv()


DEFAULT_DAMPENING_PENALTY: int = 60
DEFAULT_COMPOUND_THRESHOLD: int = 5
DEFAULT_COMPOUND_BONUS: int = 20


def _env_int(name: str, default: int) -> int:
    """Read a non-negative integer from the environment."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


@dataclass(frozen=True)
class ScoringConfig:
    """Tunable constants for one FraudDetector."""
    dampening_penalty: int = DEFAULT_DAMPENING_PENALTY
    compound_threshold: int = DEFAULT_COMPOUND_THRESHOLD
    compound_bonus: int = DEFAULT_COMPOUND_BONUS
    max_reasons: int = MAX_REASONS

    def __post_init__(self) -> None:
        if not 0 < self.max_reasons <= MAX_REASONS:
            raise ValueError(f"max_reasons must be in 1..{MAX_REASONS}, got {self.max_reasons}")
        if self.compound_threshold < 1:
            raise ValueError(f"compound_threshold must be >= 1, got {self.compound_threshold}")

    @classmethod
    def from_env(cls) -> "ScoringConfig":
        return cls(
            dampening_penalty=_env_int("RAKSHAK_DAMPENING_PENALTY", DEFAULT_DAMPENING_PENALTY),
            compound_threshold=_env_int("RAKSHAK_COMPOUND_THRESHOLD", DEFAULT_COMPOUND_THRESHOLD),
            compound_bonus=_env_int("RAKSHAK_COMPOUND_BONUS", DEFAULT_COMPOUND_BONUS),
            max_reasons=_env_int("RAKSHAK_MAX_REASONS", MAX_REASONS),
        )
