"""Test that innocent messages and real bank notices don't trigger false positives."""
import pytest

from rakshak.detector import detector, evaluate
from rakshak.models import RiskLevel, RuleCategory


INNOCENT_MESSAGES = [
    'Hi',
    'Just checking in.',
    'Hope you are well.',
    'Let me know if you need anything.',
    'Hello, how are you?',
    "Let's meet for coffee tomorrow",
    'Happy birthday! Have a great day',
]

OTP_NOTICE = (
    "123456 is the OTP for your transaction of INR 1,499 at AMAZON. "
    "OTP valid for 10 mins. Do not share OTP with anyone."
)


@pytest.mark.parametrize("message", INNOCENT_MESSAGES)
def test_innocent_message_scores_zero(message):
    result = evaluate("", message)
    assert result.score == 0, f"'{message}' matched {result.reasons}"
    assert result.is_scam is False
    assert result.risk_level is RiskLevel.SAFE


@pytest.mark.parametrize("sender,content", [
    ("AX-SBIINB", "Rs 5,000 credited to your A/c XX1234 on 12-Jan. Avl Bal Rs 25,000"),
    ("VK-HDFCBK", "Rs.1,200 debited from a/c **5678 on 05-Feb to VPA merchant@okicici. Not you? Call 18002586161"),
])
def test_bank_transaction_notice_is_safe(sender, content):
    result = evaluate(sender, content)
    assert result.score == 0
    assert result.is_scam is False


def test_trusted_otp_notice_is_dampened_below_caution():
    breakdown = detector.explain("VM-ICICIB", OTP_NOTICE)
    result = evaluate("VM-ICICIB", OTP_NOTICE)

    assert breakdown.trusted_sender is True
    assert breakdown.dampening_applied is True
    # "Do not share OTP" is a warning, not a request
    assert "CRITICAL: Direct request for credentials" not in result.reasons
    assert result.score == 15
    assert result.risk_level is RiskLevel.SAFE


def test_same_otp_notice_from_phone_number_is_flagged():
    result = evaluate("+919812345678", OTP_NOTICE)
    assert result.score == 100
    assert result.is_scam is True
    assert "Personal mobile number as sender" in result.reasons


def test_friend_number_is_not_a_scam_on_its_own():
    result = evaluate("+919812345678", "See you tomorrow!")
    assert result.score == 45
    assert result.is_scam is False
    assert result.reasons == ["Personal mobile number as sender"]


def test_lookalike_header_is_not_trusted():
    breakdown = detector.explain("XHDFCBK", "Your account is credited with Rs 500")
    assert breakdown.trusted_sender is False
    assert breakdown.dampening_applied is False


NEGATED_REQUESTS = [
    "Don't share your OTP with anyone.",
    "Do not  share your OTP with anyone.",
    "Don’t share the OTP.",
    "NEVER send your PIN to callers.",
    "Never provide your PIN to anyone.",
    "Do not enter your OTP on unknown sites.",
    "Please remember not to share your OTP.",
]


@pytest.mark.parametrize("content", NEGATED_REQUESTS)
def test_negated_credential_warning_is_not_a_request(content):
    breakdown = detector.explain("", content)
    assert all(hit.category is not RuleCategory.CRITICAL for hit in breakdown.hits), breakdown.reasons


@pytest.mark.parametrize("content", [
    "Please share your OTP to continue",
    "Kindly provide your PIN",
    "Enter your OTP here",
    "We need you to send the OTP",
])
def test_plain_credential_request_still_fires(content):
    breakdown = detector.explain("", content)
    assert any(hit.category is RuleCategory.CRITICAL for hit in breakdown.hits)


def test_bank_otp_notice_with_dont_share_warning_is_safe():
    result = evaluate(
        "VM-ICICIB",
        "123456 is the OTP for your txn of Rs 500. Don't share your OTP with anyone.",
    )
    assert "CRITICAL: Direct request for credentials" not in result.reasons
    assert result.score == 0
    assert result.is_scam is False
