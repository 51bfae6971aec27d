"""
Rakshak — SMS Fraud-Signal Scoring Engine
==========================================

Classifies short free-text messages (SMS, clipboard text, OCR output,
notifications) as fraudulent or safe. Library only: no UI, storage or
network access.

Modules:
    - advice.py      : Per-tier alert text and safety tips (English/Hindi)
    - classifier.py  : Score → risk tier and scam verdict
    - config.py      : Tunable scoring constants from the environment
    - detector.py    : Scoring engine (evaluate / explain)
    - models.py      : RiskLevel, RuleCategory and the ScanResult schema
    - rules.py       : Immutable rule catalogue and sender-trust tables
"""

from rakshak.advice import Language, alert_message, safety_tips
from rakshak.classifier import SCAM_THRESHOLD, classify, is_scam
from rakshak.config import ScoringConfig
from rakshak.detector import FraudDetector, ScanBreakdown, evaluate
from rakshak.models import RiskLevel, RuleCategory, ScanResult
from rakshak.rules import Rule, RuleStore, build_store, default_store

__version__ = "1.0.0"

__all__ = [
    "FraudDetector",
    "Language",
    "RiskLevel",
    "Rule",
    "RuleCategory",
    "RuleStore",
    "SCAM_THRESHOLD",
    "ScanBreakdown",
    "ScanResult",
    "ScoringConfig",
    "alert_message",
    "build_store",
    "classify",
    "default_store",
    "evaluate",
    "is_scam",
    "safety_tips",
]
