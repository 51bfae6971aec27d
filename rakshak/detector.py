"""
detector.py — Fraud-Signal Scoring Engine
==========================================

Scores one message against the rule store and returns a ScanResult.

Scoring mechanics:
    1. Sender is checked against the verified allow-list
    2. Every content rule that occurs at least once adds its weight once
    3. Untrusted senders are also scored against suspicious-sender rules
    4. Trusted senders with transactional wording (credited, balance, ...)
       lose a flat dampening penalty, floored at 0
    5. Five or more distinct matches add a single compounding bonus
    6. Score is clamped to 0..100; reasons are cut to the first five
       in catalogue order

Dampening is a subtraction, never a reset: a verified header that also
asks for an OTP keeps most of its credential-request weight.

Thread safety:
    No state survives a call. The store and config are immutable, so one
    FraudDetector can be shared by any number of threads without locks.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from rakshak import classifier
from rakshak.config import ScoringConfig
from rakshak.models import RuleCategory, ScanResult
from rakshak.rules import Rule, RuleStore, default_store

logger = logging.getLogger(__name__)


@dataclass
class RuleHit:
    """A rule that fired during one scan."""
    reason: str
    weight: int
    category: RuleCategory
    source: str  # "content" or "sender"


@dataclass
class ScanBreakdown:
    """Step-by-step record of how a score was reached.

    ``raw_score`` is the value before clamping; ``score`` is the final one.
    """
    sender: str
    content: str
    trusted_sender: bool = False
    hits: List[RuleHit] = field(default_factory=list)
    reasons: List[str] = field(default_factory=list)
    dampening_applied: bool = False
    compound_bonus_applied: bool = False
    raw_score: int = 0
    score: int = 0

    @property
    def match_count(self) -> int:
        return len(self.hits)


def _as_text(value) -> str:
    """Coerce any input to a string; None becomes empty."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


class FraudDetector:
    """Pure scoring engine over an immutable RuleStore.

    Usage:
        result = FraudDetector().evaluate("VK-HDFCBK", "Your a/c is credited ...")
    """

    def __init__(
        self,
        store: Optional[RuleStore] = None,
        config: Optional[ScoringConfig] = None,
    ) -> None:
        self.store = store if store is not None else default_store()
        self.config = config if config is not None else ScoringConfig.from_env()

    def evaluate(self, sender: str, content: str) -> ScanResult:
        """Score a message and return its ScanResult. Never raises for text input."""
        breakdown = self.explain(sender, content)
        reasons = breakdown.reasons[: self.config.max_reasons]
        result = ScanResult(
            sender=breakdown.sender,
            content=breakdown.content,
            score=breakdown.score,
            is_scam=classifier.is_scam(breakdown.score),
            risk_level=classifier.classify(breakdown.score),
            reasons=reasons,
            timestamp=datetime.now(timezone.utc),
        )
        logger.debug(
            f"SCAN sender={result.sender[:20]!r} score={result.score} "
            f"level={result.risk_level.value} matches={breakdown.match_count} "
            f"scam={result.is_scam}"
        )
        return result

    def explain(self, sender: str, content: str) -> ScanBreakdown:
        """Run the scoring pipeline and return every intermediate decision.

        ``reasons`` on the breakdown is the full ordered, de-duplicated list;
        evaluate() applies the reason cap.
        """
        sender = _as_text(sender)
        content = _as_text(content)
        breakdown = ScanBreakdown(sender=sender, content=content)
        score = 0

        # 1. Sender trust
        breakdown.trusted_sender = self.store.is_trusted_sender(sender)

        # 2. Content rules, catalogue order
        for rule in self.store.iter_content_rules():
            if rule.matches(content):
                score += rule.weight
                self._record(breakdown, rule, "content")

        # 3. Suspicious-sender rules, untrusted senders only
        if not breakdown.trusted_sender:
            candidate = sender.strip()
            for rule in self.store.iter_sender_rules():
                if candidate and rule.matches(candidate):
                    score += rule.weight
                    self._record(breakdown, rule, "sender")

        # 4. Trusted transactional dampening
        if breakdown.trusted_sender and self.store.has_transactional_keyword(content):
            score = max(0, score - self.config.dampening_penalty)
            breakdown.dampening_applied = True

        # 5. Compounding bonus, once per scan
        if breakdown.match_count >= self.config.compound_threshold:
            score += self.config.compound_bonus
            breakdown.compound_bonus_applied = True

        breakdown.raw_score = score
        breakdown.score = max(0, min(score, 100))
        return breakdown

    @staticmethod
    def _record(breakdown: ScanBreakdown, rule: Rule, source: str) -> None:
        breakdown.hits.append(RuleHit(rule.reason, rule.weight, rule.category, source))
        if rule.reason not in breakdown.reasons:
            breakdown.reasons.append(rule.reason)
        logger.debug(f"MATCH [{source}] +{rule.weight} {rule.reason}")


# Module-level singleton
detector = FraudDetector()


def evaluate(sender: str, content: str) -> ScanResult:
    """Scan one message with the default detector."""
    return detector.evaluate(sender, content)
