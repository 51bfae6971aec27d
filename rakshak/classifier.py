"""Maps a numeric fraud score to a risk tier and a scam verdict.

The verdict threshold (50) intentionally sits inside the Medium tier
(40-59): a score of 50-59 is shown as "Suspicious" yet already blocked.
"""

from typing import Tuple

from rakshak.models import RiskLevel


SCAM_THRESHOLD: int = 50

# (lower bound, tier), highest first
TIER_BOUNDARIES: Tuple[Tuple[int, RiskLevel], ...] = (
    (80, RiskLevel.CRITICAL),
    (60, RiskLevel.HIGH),
    (40, RiskLevel.MEDIUM),
    (20, RiskLevel.LOW),
)


def classify(score: int) -> RiskLevel:
    """Return the tier for a score. Total over all integers."""
    for lower, level in TIER_BOUNDARIES:
        if score >= lower:
            return level
    return RiskLevel.SAFE


def is_scam(score: int) -> bool:
    return score >= SCAM_THRESHOLD
