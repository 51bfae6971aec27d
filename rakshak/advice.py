"""Per-tier warning text and fraud-prevention tips.

Keyed by RiskLevel and Language enums rather than free-form strings;
unsupported languages fall back to English.
"""

from enum import Enum
from typing import Dict, List, Union

from rakshak.models import RiskLevel


class Language(Enum):
    ENGLISH = "en"
    HINDI = "hi"


ALERT_MESSAGES: Dict[Language, Dict[RiskLevel, str]] = {
    Language.ENGLISH: {
        RiskLevel.CRITICAL: (
            "CRITICAL DANGER! This is almost certainly a SCAM. Do NOT click any links, "
            "share OTP, PIN, CVV, or send money. Delete it and report to cybercrime at 1930."
        ),
        RiskLevel.HIGH: (
            "HIGH RISK SCAM! This message shows multiple fraud indicators. Do NOT click links, "
            "share personal info, or send money. Verify with official sources only."
        ),
        RiskLevel.MEDIUM: (
            "SUSPICIOUS MESSAGE! Warning signs detected. Be extremely cautious and do not click links. "
            "Verify the sender through the official bank app or customer care."
        ),
        RiskLevel.LOW: (
            "BE CAREFUL! Some suspicious elements detected. "
            "Always verify the sender before taking any action."
        ),
        RiskLevel.SAFE: "This message appears safe, but always be careful with financial information.",
    },
    Language.HINDI: {
        RiskLevel.CRITICAL: (
            "गंभीर खतरा! यह निश्चित रूप से धोखाधड़ी है। किसी भी लिंक पर क्लिक न करें, OTP, PIN, CVV "
            "साझा न करें या पैसे न भेजें। तुरंत हटाएं और 1930 पर रिपोर्ट करें।"
        ),
        RiskLevel.HIGH: (
            "उच्च जोखिम घोटाला! यह संदेश कई धोखाधड़ी संकेतक दिखाता है। लिंक पर क्लिक न करें, "
            "व्यक्तिगत जानकारी साझा न करें या पैसे न भेजें।"
        ),
        RiskLevel.MEDIUM: (
            "संदिग्ध संदेश! चेतावनी के संकेत पाए गए। अत्यधिक सावधान रहें। लिंक पर क्लिक न करें। "
            "आधिकारिक बैंक ऐप से सत्यापित करें।"
        ),
        RiskLevel.LOW: (
            "सावधान रहें! कुछ संदिग्ध तत्व पाए गए। कोई भी कार्रवाई करने से पहले "
            "प्रेषक की प्रामाणिकता सत्यापित करें।"
        ),
        RiskLevel.SAFE: "यह संदेश सुरक्षित लगता है, लेकिन वित्तीय जानकारी के साथ हमेशा सावधानी बरतें।",
    },
}

SAFETY_TIPS: Dict[Language, List[str]] = {
    Language.ENGLISH: [
        "NEVER share OTP, PIN or CVV with anyone - banks never ask",
        "Banks NEVER ask for credentials via SMS or call",
        "Do NOT click links in unexpected SMS - verify the sender first",
        "There are no free lotteries or prizes - all are scams",
        "Verify through the official bank app, NOT SMS links",
        "Ignore urgent deadlines - scammers create false urgency",
        "KYC updates happen at the bank, NOT via SMS",
        "Call the official helpline to verify suspicious messages",
        "Report fraud SMS to 1930 (Cybercrime helpline)",
        "Real emergencies don't arrive via random SMS",
    ],
    Language.HINDI: [
        "कभी भी OTP, पिन, CVV किसी के साथ साझा न करें - बैंक कभी नहीं मांगते",
        "बैंक SMS या कॉल से क्रेडेंशियल नहीं मांगते",
        "अप्रत्याशित SMS में लिंक पर क्लिक न करें - पहले सत्यापित करें",
        "कोई मुफ्त लॉटरी/इनाम नहीं होता - सभी घोटाले हैं",
        "आधिकारिक बैंक ऐप से सत्यापित करें, SMS लिंक से नहीं",
        "जरूरी समय सीमा को अनदेखा करें - स्कैमर्स झूठी जल्दबाजी बनाते हैं",
        "KYC अपडेट बैंक में होते हैं, SMS से नहीं",
        "संदिग्ध संदेशों को सत्यापित करने के लिए आधिकारिक हेल्पलाइन पर कॉल करें",
        "धोखाधड़ी SMS को 1930 (साइबर क्राइम हेल्पलाइन) पर रिपोर्ट करें",
        "असली आपातकाल यादृच्छिक SMS से नहीं आते",
    ],
}


def _resolve(language: Union[Language, str]) -> Language:
    if isinstance(language, Language):
        return language
    try:
        return Language(str(language).strip().lower())
    except ValueError:
        return Language.ENGLISH


def alert_message(risk_level: RiskLevel, language: Union[Language, str] = Language.ENGLISH) -> str:
    """Warning line to show next to a ScanResult of the given tier."""
    return ALERT_MESSAGES[_resolve(language)][risk_level]


def safety_tips(language: Union[Language, str] = Language.ENGLISH) -> List[str]:
    return list(SAFETY_TIPS[_resolve(language)])
