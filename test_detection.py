"""Test that real scam messages are detected and scored consistently."""
import re
from pathlib import Path

import pytest

from rakshak.config import ScoringConfig
from rakshak.detector import FraudDetector, detector, evaluate
from rakshak.models import RiskLevel, RuleCategory
from rakshak.rules import Rule, RuleStore


SAMPLE_MESSAGES = [
    ("", ""),
    ("WINNER", "Congratulations you have won Rs 25 lakh in lottery, click http://bit.ly/xyz to claim"),
    ("HDFCBK", "Your account XX1234 credited with Rs.5000 on 01-Jan. Available balance Rs.15000"),
    ("+919876543210", "Share your OTP to receive refund of Rs 500"),
    ("AD-LOANAPP", "Instant loan approved! Pay processing fee of Rs 999 now. Limited time offer"),
    ("56789", "URGENT: Your account will be blocked. Update KYC immediately at http://kyc-verify.xyz"),
    ("", "Aapka account band ho jayega. Turant OTP share kare"),
    ("", "आपका खाता बंद हो जाएगा। तुरंत ओटीपी बताएं"),
    ("friend", "Let's meet for coffee tomorrow"),
]


# ═══════════════════════════════════════════════════════════════════════
# SCENARIOS
# ═══════════════════════════════════════════════════════════════════════

def test_lottery_with_short_link_is_critical():
    result = evaluate(
        "WINNER",
        "Congratulations you have won Rs 25 lakh in lottery, click http://bit.ly/xyz to claim",
    )
    assert result.score == 100
    assert result.is_scam is True
    assert result.risk_level is RiskLevel.CRITICAL
    assert "CRITICAL: Lottery/Prize scam" in result.reasons
    assert "Shortened URL - High risk phishing link" in result.reasons


def test_trusted_bank_credit_notice_is_dampened():
    content = "Your account XX1234 credited with Rs.5000 on 01-Jan. Available balance Rs.15000"
    breakdown = detector.explain("HDFCBK", content)
    result = evaluate("HDFCBK", content)

    assert breakdown.trusted_sender is True
    assert breakdown.dampening_applied is True
    assert result.score < 50
    assert result.is_scam is False


def test_personal_number_asking_for_otp_refund():
    result = evaluate("+919876543210", "Share your OTP to receive refund of Rs 500")
    breakdown = detector.explain("+919876543210", "Share your OTP to receive refund of Rs 500")

    assert result.is_scam is True
    assert result.score == 100
    assert "CRITICAL: Direct request for credentials" in result.reasons
    assert "CRITICAL: Fake refund scam" in result.reasons
    assert "Personal mobile number as sender" in result.reasons
    assert breakdown.trusted_sender is False
    assert any(hit.source == "sender" for hit in breakdown.hits)


def test_many_weak_signals_cross_into_scam():
    content = "Urgent: please verify your account within 24 hours. Act now and call us now"
    breakdown = detector.explain("", content)
    result = evaluate("", content)

    assert breakdown.match_count >= 5
    assert breakdown.compound_bonus_applied is True
    assert all(hit.category is not RuleCategory.CRITICAL for hit in breakdown.hits)
    assert result.is_scam is True


def test_verified_sender_cannot_erase_credential_request():
    result = evaluate("VK-HDFCBK", "Your account is credited. Share your OTP 123456 to confirm")
    assert result.is_scam is True
    assert "CRITICAL: Direct request for credentials" in result.reasons


# ═══════════════════════════════════════════════════════════════════════
# LANGUAGE VARIANTS
# ═══════════════════════════════════════════════════════════════════════

def test_hinglish_account_block_threat():
    result = evaluate("", "Aapka account band ho jayega. Turant OTP share kare")
    assert result.is_scam is True
    assert "Hindi: Account blocking threat" in result.reasons
    assert "Hindi: Direct OTP/PIN request" in result.reasons


def test_devanagari_account_block_threat():
    result = evaluate("", "आपका खाता बंद हो जाएगा। तुरंत ओटीपी बताएं")
    assert result.is_scam is True
    assert result.risk_level is RiskLevel.CRITICAL
    assert "Hindi: Account blocking threat" in result.reasons


def test_devanagari_lottery_single_rule():
    result = evaluate("", "बधाई हो! आपने लॉटरी में 10 लाख जीते")
    assert result.reasons == ["Hindi: Prize won scam"]
    assert result.score == 95
    assert result.risk_level is RiskLevel.CRITICAL


# ═══════════════════════════════════════════════════════════════════════
# PROPERTIES
# ═══════════════════════════════════════════════════════════════════════

@pytest.mark.parametrize("sender,content", SAMPLE_MESSAGES)
def test_result_invariants(sender, content):
    result = evaluate(sender, content)
    assert 0 <= result.score <= 100
    assert len(result.reasons) <= 5
    assert len(set(result.reasons)) == len(result.reasons)
    assert result.is_scam == (result.score >= 50)


@pytest.mark.parametrize("sender,content", SAMPLE_MESSAGES)
def test_same_input_same_result(sender, content):
    first = evaluate(sender, content)
    second = evaluate(sender, content)
    assert first.model_dump(exclude={"timestamp"}) == second.model_dump(exclude={"timestamp"})


def test_empty_input_is_safe():
    result = evaluate("", "")
    assert result.score == 0
    assert result.reasons == []
    assert result.risk_level is RiskLevel.SAFE
    assert result.is_scam is False


def test_missing_values_are_treated_as_empty():
    result = evaluate(None, None)
    assert result.score == 0
    assert result.sender == ""
    assert result.content == ""


def test_reasons_keep_first_five_in_catalogue_order():
    content = (
        "URGENT: Your account will be blocked. Share your OTP immediately, click here "
        "http://bit.ly/abc to update KYC within 24 hours or call us now"
    )
    breakdown = detector.explain("56789", content)
    result = evaluate("56789", content)

    assert len(breakdown.reasons) > 5
    assert result.reasons == breakdown.reasons[:5]
    assert result.reasons[0] == "Shortened URL - High risk phishing link"


def test_repeated_pattern_counts_once():
    once = evaluate("", "call us")
    many = evaluate("", "call us, call us, call us, call us, call us")
    assert once.score == many.score == 30
    assert once.reasons == many.reasons == ["Callback request"]


def test_very_large_input():
    benign = evaluate("", "hello world " * 20000)
    scam = evaluate("", "share your otp " * 10000)
    assert benign.score == 0
    assert scam.score == 100


# ═══════════════════════════════════════════════════════════════════════
# ENGINE MECHANICS — small injected stores
# ═══════════════════════════════════════════════════════════════════════

def _signal_store(count: int, weight: int = 6) -> RuleStore:
    rules = tuple(
        Rule(rf"\bsignal{i}\b", weight, f"Signal {i}", RuleCategory.LOW)
        for i in range(count)
    )
    return RuleStore(
        content_rules=rules,
        trusted_senders=(re.compile("BANKID", re.IGNORECASE),),
        transactional_keywords=frozenset(["credited"]),
    )


def test_compound_bonus_added_exactly_once():
    engine = FraudDetector(store=_signal_store(6), config=ScoringConfig())
    breakdown = engine.explain("", "signal0 signal1 signal2 signal3 signal4")
    result = engine.evaluate("", "signal0 signal1 signal2 signal3 signal4")

    assert breakdown.match_count == 5
    assert breakdown.raw_score == 5 * 6 + 20
    assert result.score == 50
    assert result.is_scam is True
    assert result.risk_level is RiskLevel.MEDIUM


def test_no_bonus_below_threshold():
    engine = FraudDetector(store=_signal_store(6), config=ScoringConfig())
    result = engine.evaluate("", "signal0 signal1 signal2 signal3")
    assert result.score == 24
    assert result.is_scam is False


def test_distinct_matches_not_repetitions_trigger_bonus():
    engine = FraudDetector(store=_signal_store(6), config=ScoringConfig())
    breakdown = engine.explain("", "signal0 signal0 signal0 signal0 signal0 signal0")
    assert breakdown.match_count == 1
    assert breakdown.compound_bonus_applied is False
    assert breakdown.score == 6


def test_dampening_is_flat_subtraction():
    engine = FraudDetector(store=_signal_store(2, weight=90), config=ScoringConfig())
    result = engine.evaluate("bankid", "signal0 credited")
    assert result.score == 30


def test_dampening_floors_at_zero():
    engine = FraudDetector(store=_signal_store(2, weight=10), config=ScoringConfig())
    result = engine.evaluate("BANKID", "signal0 signal1 credited")
    assert result.score == 0


def test_no_dampening_without_transactional_keyword():
    engine = FraudDetector(store=_signal_store(2, weight=40), config=ScoringConfig())
    result = engine.evaluate("BANKID", "signal0 signal1")
    assert result.score == 80


def test_dampening_penalty_is_configurable():
    engine = FraudDetector(store=_signal_store(1, weight=90), config=ScoringConfig(dampening_penalty=70))
    assert engine.evaluate("BANKID", "signal0 credited").score == 20


def test_reason_cap_is_configurable():
    engine = FraudDetector(store=_signal_store(4), config=ScoringConfig(max_reasons=2))
    result = engine.evaluate("", "signal0 signal1 signal2 signal3")
    assert result.reasons == ["Signal 0", "Signal 1"]


# ═══════════════════════════════════════════════════════════════════════
# PACKAGE README
# ═══════════════════════════════════════════════════════════════════════

ROOT = Path(__file__).resolve().parent


def test_readme_is_the_package_description():
    assert 'readme = "README.md"' in (ROOT / "pyproject.toml").read_text(encoding="utf-8")


def test_readme_usage_example_holds():
    readme = (ROOT / "README.md").read_text(encoding="utf-8")
    assert 'evaluate("+919876543210", "Share your OTP to receive refund of Rs 500")' in readme

    result = evaluate("+919876543210", "Share your OTP to receive refund of Rs 500")
    assert result.score == 100
    assert result.is_scam is True
    assert result.risk_level is RiskLevel.CRITICAL
