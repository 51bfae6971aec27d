"""
models.py — Enums and the ScanResult Schema
============================================

Defines the closed vocabularies used by the rule catalogue and the single
output object returned by the scoring engine.

Scan flow:
    (sender, content) → FraudDetector.evaluate → ScanResult

Design decisions:
    - ScanResult is frozen: the caller owns it, the engine never mutates
      it after returning.
    - Validators reject impossible results (score outside 0..100, more than
      five reasons, duplicate reasons) so a bad engine change fails loudly
      in tests instead of reaching the UI.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


MAX_REASONS: int = 5


# ═══════════════════════════════════════════════════════════════════════
# ENUMS — Closed sets shared by the rule store, classifier and advice
# ═══════════════════════════════════════════════════════════════════════

class RuleCategory(Enum):
    """Severity bucket a content rule belongs to."""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    LANGUAGE_VARIANT = "language_variant"


class RiskLevel(Enum):
    """Discrete risk tier derived from the numeric score."""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    SAFE = "safe"

    @property
    def label(self) -> str:
        """Human-readable tier name shown next to the score."""
        return _RISK_LABELS[self]


_RISK_LABELS = {
    RiskLevel.CRITICAL: "Critical Danger",
    RiskLevel.HIGH: "High Risk",
    RiskLevel.MEDIUM: "Suspicious",
    RiskLevel.LOW: "Caution",
    RiskLevel.SAFE: "Safe",
}


# ═══════════════════════════════════════════════════════════════════════
# RESULT MODEL — Returned to the caller on every scan
# ═══════════════════════════════════════════════════════════════════════

class ScanResult(BaseModel):
    """Outcome of scanning one message.

    Attributes:
        sender:     Raw sender identifier as supplied by the capture layer.
        content:    Raw message body as supplied by the capture layer.
        score:      Fraud score, 0 (clean) to 100 (certain fraud).
        is_scam:    Block/warn verdict, true when score >= 50.
        risk_level: Descriptive tier for the score.
        reasons:    Up to five reasons, earliest-matched first.
        timestamp:  UTC time the scan finished.
    """
    model_config = ConfigDict(frozen=True)

    sender: str = Field(default="")
    content: str = Field(default="")
    score: int = Field(..., ge=0, le=100)
    is_scam: bool = Field(...)
    risk_level: RiskLevel = Field(...)
    reasons: List[str] = Field(default_factory=list)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("reasons")
    @classmethod
    def _check_reasons(cls, value: List[str]) -> List[str]:
        """Reasons are capped and unique; the UI renders them as a list."""
        if len(value) > MAX_REASONS:
            raise ValueError(f"at most {MAX_REASONS} reasons allowed, got {len(value)}")
        if len(set(value)) != len(value):
            raise ValueError("reasons must not contain duplicates")
        return value
