"""
rules.py — Fraud Pattern Catalogue and Sender-Trust Tables
==========================================================

The immutable rule store read by the scoring engine. Built for the Indian
SMS landscape: bank/UPI impersonation, KYC and Aadhaar/PAN scams, lottery
and KBC prizes, job and investment fraud, courier fees, remote-access
support scams, plus Hinglish and Devanagari variants of the same intents.

Catalogue layout:
    1. CRITICAL_PATTERNS   (75-100)  credential theft, prizes, ID impersonation
    2. HIGH_RISK_PATTERNS  (65-80)   banking threats, KYC, jobs, investments
    3. MEDIUM_RISK_PATTERNS(40-55)   verify/update requests, deadlines, offers
    4. LOW_RISK_PATTERNS   (20-30)   bare urgency, banking nouns, call-to-action
    5. LANGUAGE_PATTERNS             Hinglish + Devanagari mirrors of the above

    The engine walks the tables in exactly this order, so reasons surface
    earliest-matched first.

Pattern conventions:
    - Every pattern is compiled with re.IGNORECASE; callers pass raw text.
    - Gaps between keywords are bounded (.{0,N}?) so no pattern can
      backtrack quadratically on very large input.
    - Devanagari patterns never use \\b: vowel signs (matras) are not word
      characters, so a boundary would split words in half.
    - Credential-request verbs (share, send, enter, provide) do not fire
      when the word before them is a negation (not, never, don't).
    - Link exemptions cover the listed official domains and their real
      subdomains only; lookalike hosts such as fake-amazon.in still fire.

Sender trust:
    - TRUSTED_SENDER_IDS: verified DLT headers, matched as the whole sender
      with an optional two-letter operator prefix (VK-, TX-, AD-, ...).
    - SUSPICIOUS_SENDER_PATTERNS: phone-number senders, short codes and
      scam-themed sender names. Only consulted for untrusted senders.
"""

import logging
import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import FrozenSet, Iterator, Tuple

from rakshak.models import RuleCategory

logger = logging.getLogger(__name__)


CATALOGUE_VERSION: str = "2024.2"

_FLAGS = re.IGNORECASE

# Start of a credential verb, unless the word before it is a negation
# ("do not share", "don't  send", "never provide", "not to share").
_UNNEGATED = r"(?:^\s*|[^\w\s'’]\s*|(?<![\w'’])(?!(?:not|never|don['’]?t)\b)(?<!\bnot\s)(?<!\bnever\s)[\w'’]+\s+)"


# ================================================================
# CRITICAL PATTERNS — each is a (regex, weight, reason) tuple
# ================================================================

CRITICAL_PATTERNS = [
    # Phishing links
    (r'\b(?:bit\.ly|tinyurl(?:\.com)?|goo\.gl|short\.link|ow\.ly|cutt\.ly|t\.co|tiny\.cc|rb\.gy|is\.gd)\b', 90, 'Shortened URL - High risk phishing link'),
    (r'\b(?:click|tap)\s+(?:here|below|(?:on\s+)?(?:this|the)\s+link)\b|\b(?:open|visit)\s+(?:now|this\s+link)\b', 80, 'Urgent link instruction - Phishing attempt'),
    (r'https?://(?!(?:[\w-]+\.)*(?:gov\.in|nic\.in|amazon\.in|flipkart\.com)(?![\w.-]))\S+',                  75, 'Suspicious external link detected'),
    (r'\bdownload\s+(?:the\s+|our\s+)?app\s+from\b|\binstall\s+(?:the\s+|our\s+)?app\b.{0,60}?\blink\b',   85, 'Fake app download link - Malware risk'),

    # Direct credential requests (never legitimate)
    (_UNNEGATED + r'share\s+(?:your\s+|the\s+)?(?:otp|pin|cvv|password|mpin|t-?pin|atm\s+pin)\b', 100, 'CRITICAL: Direct request for credentials'),
    (_UNNEGATED + r'send\s+(?:your\s+|the\s+)?(?:otp|pin|cvv|password|mpin|t-?pin)\b',          100, 'CRITICAL: Direct request for credentials'),
    (_UNNEGATED + r'enter\s+(?:your\s+)?(?:otp|pin|cvv|password|mpin)\b',                     95, 'CRITICAL: Credential entry request'),
    (_UNNEGATED + r'provide\s+(?:your\s+|the\s+)?(?:otp|pin|cvv|password|mpin)\b',          95, 'CRITICAL: Credential request'),
    (r'\bwhat\s+is\s+(?:your|the)\s+(?:otp|pin|cvv|password)\b',                                           100, 'CRITICAL: Direct credential query'),
    (r'\btell\s+(?:me|us)\s+(?:your|the)\s+(?:otp|pin|cvv)\b',                                             100, 'CRITICAL: Credential query'),
    (r'\bsms\s+(?:me|back)\b.{0,60}?\b(?:otp|pin|code)\b',                                                 100, 'CRITICAL: SMS back OTP scam'),

    # Money transfer, refund and reversal scams
    (r'\b(?:send|transfer)\s+(?:money|₹|rs\b|inr\b)|\bpay\s+now\b',                                         90, 'CRITICAL: Direct money transfer request'),
    (r'\brefund\b.{0,80}?\b(?:otp|pin|cvv|code|number)\b|\b(?:otp|pin|cvv|code)\b.{0,80}?\brefund',          95, 'CRITICAL: Fake refund scam'),
    (r'\brevers\w*\b.{0,60}?\b(?:transaction|payment)\b.{0,60}?\b(?:otp|pin|code)\b',                       95, 'CRITICAL: Fake reversal scam'),
    (r'\bcancel\w*\b.{0,60}?\b(?:order|transaction)\b.{0,60}?\b(?:otp|pin|code)\b',                         90, 'CRITICAL: Fake cancellation scam'),
    (r'\bwrong\s+(?:transaction|transfer|payment)\b.{0,80}?\b(?:otp|pin|code)\b',                           95, 'CRITICAL: Wrong transaction scam'),
    (r'\breturn\b.{0,40}?\bmoney\b.{0,80}?\b(?:otp|pin|account)\b',                                         90, 'CRITICAL: Fake money return scam'),

    # Lottery / prize scams
    (r'\byou\s+(?:have\s+)?won\b|\bcongratulations?\b.{0,80}?\b(?:prize|reward|lottery|bumper)',            100, 'CRITICAL: Lottery/Prize scam'),
    (r'\bselected\s+as\s+(?:a\s+|the\s+)?(?:winner|lucky|finalist)',                                       100, 'CRITICAL: Fake winner notification'),
    (r'\b(?:kbc|kaun\s+banega\s+crorepati)\b.{0,80}?\b(?:winner|selected|prize|lottery)',                  100, 'CRITICAL: Fake KBC lottery scam'),
    (r'(?:₹|\brs\.?|\binr)\s*\d[\d,.]*\s*(?:lakh|crore|lac)\b.{0,80}?\b(?:won|prize|winner|lottery)',       100, 'CRITICAL: Large prize amount scam'),
    (r'\blucky\s+draw\b.{0,80}?\b(?:winner|selected|won)',                                                 100, 'CRITICAL: Lucky draw scam'),
    (r'\bmega\s+prize\b|\bjackpot\b|\bbumper\s+(?:prize|draw)\b',                                          100, 'CRITICAL: Mega prize scam'),

    # Government identity impersonation
    (r'\baadh?aa?r\b.{0,60}?\b(?:update|verify|block|suspend|expire|deactivat)',                            90, 'CRITICAL: Fake Aadhaar update scam'),
    (r'\bpan\s*card\b.{0,60}?\b(?:update|verify|block|invalid|expire|deactivat)',                            90, 'CRITICAL: Fake PAN card scam'),
    (r'\bincome\s*tax\b.{0,60}?\b(?:refund|notice|verify|penalty|assessment)',                              85, 'Fake income tax communication'),
    (r'\beci\s+voter\b|\belection\s+commission\b.{0,60}?\b(?:update|verify)',                               85, 'Fake election commission scam'),
    (r'\be-?filing\b.{0,60}?\b(?:update|verify|refund)',                                                    85, 'Fake e-filing scam'),
    (r'\bgst\b.{0,60}?\b(?:registration|refund|update|notice)',                                             85, 'Fake GST scam'),
    (r'\bration\s+card\b.{0,60}?\b(?:update|verify|cancel)',                                                85, 'Fake ration card scam'),
    (r'\bvoter\s+id\b.{0,60}?\b(?:update|verify|delete)',                                                   85, 'Fake voter ID scam'),
    (r'\bpassport\b.{0,60}?\b(?:expire|renew|verify|cancel|block)',                                         85, 'Fake passport scam'),
    (r'\bdriving\s+licen[cs]e\b.{0,60}?\b(?:suspend|expire|renew|block)',                                   85, 'Fake driving license scam'),

    # Account takeover alerts
    (r'\bsomeone\b.{0,60}?\b(?:login|logged|access|tried|attempt)\w*\b.{0,60}?\baccount',                   85, 'Fake security alert - Account takeover'),
    (r'\bsuspicious\s+activity\b.{0,60}?\b(?:account|login|transaction)',                                   85, 'Fake suspicious activity alert'),
    (r'\bunauthori[sz]ed\b.{0,40}?\b(?:access|login|transaction)',                                          85, 'Fake unauthorized access alert'),
    (r'\b(?:security|data)\s+breach\b',                                                                     85, 'Fake security breach alert'),

    # Remote access and malware
    (r'\b(?:anydesk|teamviewer|quick\s*support|ultraviewer|airdroid)\b|\bremote\s+(?:access|desktop|control)\b|\bscreen\s*shar(?:e|ing)\b', 95, 'CRITICAL: Remote access scam - Screen sharing'),
    (r'\binstall\w*\b.{0,60}?\b(?:app|software|apk)\b.{0,60}?\b(?:help|refund|support)\b',                  90, 'CRITICAL: Malware installation attempt'),
]


# ================================================================
# HIGH RISK PATTERNS
# ================================================================

HIGH_RISK_PATTERNS = [
    # Banking threats
    (r'\b(?:account|a/c)\s+(?:will\s+be\s+|has\s+been\s+|is\s+)?(?:block|suspend|clos|deactivat|freez)',   75, 'Account threat - Banking fraud'),
    (r'\bkyc\b.{0,60}?\b(?:expir|update|complet|verify|pending)',                                           75, 'Fake KYC update scam'),
    (r'\bre-?kyc\b|\be-?kyc\s+update\b',                                                                    75, 'Fake KYC verification'),
    (r'\bcredit\s+card\b.{0,60}?\b(?:block|expire|limit)',                                                  70, 'Credit card scare tactic'),
    (r'\bdebit\s+card\b.{0,60}?\b(?:block|expire|update)',                                                  70, 'Debit card scare tactic'),
    (r'\bnet\s*banking\b.{0,60}?\b(?:suspend|block|disable)',                                               75, 'Netbanking threat scam'),
    (r'\bmobile\s+banking\b.{0,60}?\b(?:block|disable|suspend)',                                            75, 'Mobile banking threat scam'),

    # UPI / wallet impersonation
    (r'\bpaytm\b.{0,60}?\b(?:kyc|update|verify|suspend)',                                                   75, 'Fake Paytm verification'),
    (r'\bphone\s*pe\b.{0,60}?\b(?:kyc|update|verify|suspend)',                                              75, 'Fake PhonePe verification'),
    (r'\b(?:google\s*pay|gpay)\b.{0,60}?\b(?:kyc|update|verify|suspend)',                                   75, 'Fake Google Pay verification'),
    (r'\bbhim\b.{0,60}?\b(?:kyc|update|verify|suspend)',                                                    70, 'Fake BHIM UPI scam'),
    (r'\bupi\b.{0,40}?\b(?:pin|password|security)\b',                                                       75, 'UPI credential request'),
    (r'\bwallet\b.{0,60}?\b(?:blocked|suspend|verify)',                                                     70, 'Digital wallet scam'),

    # Job / employment
    (r'\bwork\s+from\s+home\b.{0,80}?(?:₹|\brs\b|\bearn|\bincome)',                                          70, 'Work from home scam'),
    (r'\bpart[\s-]?time\b.{0,60}?(?:\bjob|\bearn|\bincome|₹)',                                              70, 'Part-time job scam'),
    (r'\bearn\w*\b.{0,40}?(?:₹|\brs\.?)\s*\d[\d,]*\s*(?:daily|per\s+day|a\s+day|weekly|per\s+week)\b',      70, 'Unrealistic earning promise'),
    (r'\bregistration\s+fee\b.{0,60}?\b(?:job|position|post)',                                              75, 'Job registration fee scam'),
    (r'\btraining\s+fee\b.{0,60}?\b(?:job|employment)',                                                     75, 'Fake job training fee scam'),
    (r'\bdata\s+entry\b.{0,60}?\b(?:work|job|earn)',                                                        65, 'Data entry job scam'),
    (r'\bonline\s+typing\b.{0,60}?\b(?:job|work|earn)',                                                     65, 'Online typing job scam'),
    (r'\bsurvey\b.{0,60}?(?:\bearn|\bmoney|\bincome|₹)',                                                    65, 'Paid survey scam'),

    # Investment / trading
    (r'\bguaranteed\s+(?:returns?|profit|income)\b|\bdouble\s+your\s+money\b',                              75, 'Guaranteed return promise'),
    (r'\btrading\b.{0,60}?\b(?:profit|guaranteed|tips?)\b',                                                 70, 'Fake trading opportunity'),
    (r'\binvest\w*\b.{0,60}?\b(?:guaranteed|double|triple)',                                                75, 'Fake investment scheme'),
    (r'\bcrypto\w*\b.{0,60}?\b(?:profit|guaranteed|invest)',                                                70, 'Cryptocurrency scam'),
    (r'\bbinary\s+option|\bforex\b.{0,60}?\bprofit',                                                        75, 'Forex/Binary trading scam'),
    (r'\bstock\b.{0,40}?\b(?:tips?|sure\s+shot|guaranteed)\b',                                              65, 'Stock market scam'),
    (r'\bmlm\b|\bmulti-?level\s+market',                                                                    70, 'MLM/Pyramid scheme'),
    (r'\bnetwork\s+market\w*\b.{0,60}?\b(?:join|invest)',                                                   70, 'Network marketing scam'),

    # Delivery / customs fees
    (r'\bpackage\b.{0,60}?\b(?:undeliver|pending|customs?|held)',                                           65, 'Fake delivery notification'),
    (r'\bcourier\b.{0,60}?\b(?:pending|customs?|pay|held)',                                                 65, 'Fake courier scam'),
    (r'\bcustoms?\s+(?:duty|charge|clearance|fee)',                                                         70, 'Fake customs clearance scam'),
    (r'\bshipment\b.{0,60}?\b(?:held|pending|charge)',                                                      65, 'Fake shipment scam'),
    (r'\bparcel\b.{0,60}?\b(?:undeliver|return|charge|held)',                                               65, 'Fake parcel scam'),

    # Romance / loneliness
    (r'\bfriend\s+request\b.{0,60}?\b(?:accept|approve)',                                                   65, 'Fake friend request scam'),
    (r'\bbeautiful\b.{0,30}?\b(?:girl|lady|woman)\b.{0,60}?\b(?:chat|talk)',                                65, 'Romance scam attempt'),
    (r'\bdating\b.{0,40}?\b(?:site|app|profile)',                                                           65, 'Fake dating scam'),
    (r'\blonely\b.{0,60}?\b(?:chat|friend|talk)',                                                           65, 'Romance/loneliness scam'),

    # Medical emergencies
    (r'\bcovid\b.{0,60}?\b(?:vaccine|test|medicine)\b.{0,60}?\b(?:book|order)',                             70, 'COVID-19 related scam'),
    (r'\bmedicine\b.{0,60}?\b(?:deliver|urgent|emergency)',                                                 65, 'Fake medicine delivery scam'),
    (r'\b(?:health|medical)\b.{0,40}?\b(?:emergency|critical)\b.{0,80}?\b(?:pay|send|transfer|money)',      70, 'Medical emergency scam'),
    (r'\bhospital\b.{0,60}?\b(?:bill|payment|deposit)',                                                     65, 'Fake hospital bill scam'),

    # Insurance
    (r'\binsurance\b.{0,60}?\b(?:claim|refund|bonus)',                                                      65, 'Fake insurance claim'),
    (r'\bpolicy\b.{0,60}?\b(?:matur\w*|bonus)\b',                                                           65, 'Fake insurance policy scam'),
    (r'\blic\b.{0,60}?\b(?:bonus|maturity|claim)',                                                          65, 'Fake LIC scam'),

    # Education
    (r'\bscholarship\b.{0,60}?\b(?:select|approve|won)',                                                    70, 'Fake scholarship scam'),
    (r'\b(?:degree|diploma)\b.{0,40}?\b(?:without\s+exam|easy|quick|in\s+\d+\s+days)',                      65, 'Fake degree scam'),

    # SIM swap / OTP over call
    (r'\bsim\b.{0,40}?\b(?:swap|change|block|deactivat|upgrade)',                                           75, 'SIM swap scam warning'),
    (r'\bport(?:ing|ed)?\s+(?:your\s+)?(?:number|sim|mobile)\b',                                            70, 'Number porting scam'),
    (r'\breceive\b.{0,40}?\bcall\b.{0,40}?\b(?:otp|code|pin)\b',                                            80, 'OTP over call scam'),

    # Fake support numbers
    (r'\bcustomer\s+(?:care|support|service)\b.{0,60}?\b(?:number|call|contact)',                           65, 'Fake customer support scam'),
    (r'\bhelpline\b.{0,60}?\b(?:number|call|contact)',                                                      65, 'Fake helpline scam'),

    # Arrest / legal threats
    (r'\b(?:arrest|jail|warrant)\b',                                                                        80, 'Arrest threat scam'),

    # Loans
    (r'\bloan\b.{0,60}?\bprocessing\s+(?:fee|charge)',                                                      70, 'Loan processing fee scam'),
    (r'\bloan\b.{0,60}?\b(?:guarantee\w*|assured)\b',                                                       65, 'Guaranteed loan scam'),

    # Charity / rental advances
    (r'\bdonat(?:e|ion)\b.{0,60}?\b(?:urgent|help|needy|emergency)',                                        65, 'Fake charity/donation scam'),
    (r'\bngo\b.{0,60}?\b(?:help|donate|support)',                                                           65, 'Fake NGO scam'),
    (r'\badvance\b.{0,40}?\b(?:deposit|payment)\b.{0,40}?\b(?:rent|room|flat)',                              65, 'Rental advance scam'),
]


# ================================================================
# MEDIUM RISK PATTERNS
# ================================================================

MEDIUM_RISK_PATTERNS = [
    # Credential and account-detail mentions
    (r'\b(?:otp|pin|cvv|password)\b',                                                                       50, 'Sensitive credential mention'),
    (r'\baccount\b.{0,30}?\b(?:details?|number|info)\b|\bbank\s+details\b',                                  45, 'Account information request'),
    (r'\bcard\b.{0,30}?\b(?:details?|number|expiry)\b',                                                     45, 'Card information request'),
    (r'\bpersonal\s+(?:info|information|details)\b',                                                        45, 'Personal information request'),

    # Verification / update requests
    (r'\bverify\s+(?:your\s+)?(?:account|details?|info|identity)',                                          45, 'Verification request'),
    (r'\bupdate\s+(?:your\s+)?(?:account|details?|info)',                                                   45, 'Update request'),
    (r'\bconfirm\s+(?:your\s+)?(?:account|details?|identity)',                                              45, 'Confirmation request'),
    (r'\bvalidate\s+(?:your\s+)?(?:account|details?)',                                                      45, 'Validation request'),

    # Artificial deadlines
    (r'\b(?:within|next)\s+\d+\s*(?:hours?|hrs?|days?)\b',                                                   40, 'Artificial urgency - deadline'),
    (r'\blast\s+(?:chance|warning|reminder)\b|\bfinal\s+notice\b|\btoday\s+only\b',                         45, 'False urgency tactic'),
    (r'\bexpir(?:e|es|ing)\s+(?:today|soon|now|tonight)\b',                                                 45, 'Fake expiration urgency'),
    (r'\bact\s+now\b|\bhurry\b|\blimited\s+time\b',                                                         40, 'Pressure tactic'),
    (r'\baction\s+required\b|\bimmediate\s+action\b',                                                       45, 'Urgency tactics'),

    # Rewards / cashback
    (r'\bcashback\b.{0,40}?(?:₹|\brs\b|\brupee)',                                                           45, 'Suspicious cashback offer'),
    (r'\breward\b.{0,40}?(?:₹|\brs\b|\bpoints?\b)',                                                          45, 'Suspicious reward offer'),
    (r'\bfree\b.{0,40}?(?:₹|\brs\b|\bgift\b|\bprize\b|\brecharge\b)',                                         50, 'Free money/prize offer'),
    (r'\bclaim\b.{0,40}?\b(?:prize|reward|gift|cashback)',                                                  50, 'Prize claim request'),
    (r'\b(?:limited|exclusive)\b.{0,20}?\boffer\b',                                                         40, 'Limited time offer lure'),

    # Instant loans
    (r'\bloan\b.{0,40}?\b(?:approved|sanctioned|instant)\b|\binstant\s+loan\b',                              55, 'Unsolicited loan offer'),
    (r'\bcredit\b.{0,40}?(?:₹|\brs\b).{0,40}?\b(?:approved|instant)\b',                                      55, 'Instant credit offer'),
    (r'\bpersonal\s+loan\b.{0,60}?\b(?:approved|low\s+interest)',                                            55, 'Personal loan scam'),
]


# ================================================================
# LOW RISK PATTERNS
# ================================================================

LOW_RISK_PATTERNS = [
    # Generic urgency words
    (r'\bimmediately\b',                    25, 'Urgency indicator'),
    (r'\burgent(?:ly)?\b',                  25, 'Urgency indicator'),
    (r'\bnow\b',                            20, 'Urgency indicator'),
    (r'\basap\b',                           25, 'Urgency indicator'),

    # Generic financial terms
    (r'\bbank\b',                           30, 'Banking context'),
    (r'\baccount\b',                        30, 'Account mention'),
    (r'\btransaction\b',                    25, 'Transaction mention'),
    (r'\bpayment\b',                        25, 'Payment mention'),

    # Generic call to action
    (r'\bcall\s+(?:us|now|back)\b',         30, 'Callback request'),
    (r'\bcontact\s+(?:us|support)\b',       25, 'Contact request'),
    (r'\breply\b.{0,30}?\b(?:yes|no|y/n)\b', 30, 'Reply request'),
]


# ================================================================
# LANGUAGE VARIANTS — Hinglish (romanised) and Devanagari Hindi
# ================================================================

LANGUAGE_PATTERNS = [
    # Credential requests
    (r'\b(?:otp|pin)\s+(?:share|bataye|bataiye|batao|bheje|bhejo|dijiye|send)\b',                          100, 'Hindi: Direct OTP/PIN request'),
    (r'\bpassword\s+(?:bataye|bataiye|batao|bheje|bhejo|dijiye)\b',                                        100, 'Hindi: Password request'),
    (r'\bcvv\s+(?:number\s+)?(?:bataye|batao|bheje|bhejo|dijiye)\b',                                       100, 'Hindi: CVV request'),
    (r'(?:ओटीपी|पिन|पासवर्ड|सीवीवी).{0,20}?(?:बताएं|बताएँ|बताइए|बताओ|भेजें|भेजिए|भेजो|शेयर)',              100, 'Hindi: Direct OTP/PIN request'),

    # Account blocking threats
    (r'\baapka\s+(?:account|khata)\b.{0,40}?\b(?:band|block|suspend|close)',                                85, 'Hindi: Account blocking threat'),
    (r'\bkhata\b.{0,40}?\b(?:band|block|suspend)',                                                          85, 'Hindi: Bank account threat'),
    (r'\baccount\b.{0,40}?\b(?:band\s+ho|block\s+ho)',                                                      85, 'Hindi: Account will be blocked threat'),
    (r'(?:खाता|अकाउंट|खाते).{0,40}?(?:बंद|ब्लॉक|निलंबित)',                                                  85, 'Hindi: Account blocking threat'),

    # Urgency
    (r'\b(?:turant|jaldi|abhi\s+hi|foran|fauran)\b',                                                         30, 'Hindi: Urgency words'),
    (r'\baaj\s+hi\b|\b\d+\s+ghante\b',                                                                       35, 'Hindi: Time pressure tactic'),
    (r'(?:तुरंत|तुरन्त|जल्दी|फौरन)',                                                                           30, 'Hindi: Urgency words'),

    # Lottery / prize
    (r'\b(?:badhai|mubarak)\s+ho\b',                                                                         90, 'Hindi: Congratulations - Likely lottery scam'),
    (r'\binaam\b.{0,40}?\b(?:jeeta|jeete|mila|jeet)\b',                                                      95, 'Hindi: Prize won scam'),
    (r'\blottery\b.{0,40}?\b(?:jeeta|jeeti|lagi|nikli)\b',                                                  100, 'Hindi: Lottery scam'),
    (r'\b(?:crore|lakh)\b.{0,40}?\b(?:jeeta|jeet|inaam)\b',                                                 100, 'Hindi: Large prize scam'),
    (r'\blucky\s+draw\b.{0,40}?\b(?:jeeta|jeete|nikla)\b',                                                  100, 'Hindi: Lucky draw scam'),
    (r'(?:लॉटरी|इनाम|पुरस्कार).{0,40}?(?:जीत|जीता|जीते|मिला|निकली)|बधाई\s*हो',                                  95, 'Hindi: Prize won scam'),

    # Money transfer / refund
    (r'\bpaisa\b.{0,40}?\b(?:bheje|bhejo|send|transfer)\b',                                                 85, 'Hindi: Money transfer request'),
    (r'\brupa?y\w*\b.{0,40}?\b(?:bheje|bhejo|send|transfer)\b',                                              85, 'Hindi: Money sending request'),
    (r'\bpaise\b.{0,40}?\b(?:wapas|refund|return)\b',                                                        75, 'Hindi: Fake refund scam'),
    (r'(?:पैसे|रुपये|राशि).{0,30}?(?:भेजें|भेजो|ट्रांसफर)',                                                    85, 'Hindi: Money transfer request'),

    # KYC / documents
    (r'\b(?:re-?)?kyc\b.{0,40}?\b(?:kare|karein|karo|kijiye|karwaye)\b',                                     75, 'Hindi: KYC scam'),
    (r'\bdocument\b.{0,40}?\b(?:kare|karein|kijiye)\b',                                                      70, 'Hindi: Document update scam'),
    (r'\baadh?aa?r\b.{0,40}?\b(?:band|karwaye|kare)\b',                                                      85, 'Hindi: Fake Aadhaar update'),
    (r'\bpan\s+card\b.{0,40}?\b(?:band|karwaye|kare)\b',                                                     85, 'Hindi: Fake PAN update'),
    (r'(?:केवाईसी|kyc).{0,40}?(?:अपडेट|पूरा|करें|कराएं)',                                                      75, 'Hindi: KYC scam'),
    (r'(?:आधार|पैन\s*कार्ड).{0,40}?(?:अपडेट|बंद|ब्लॉक|सत्यापित)',                                               85, 'Hindi: Fake Aadhaar update'),

    # Job scams
    (r'\bghar\s+baithe\b.{0,40}?\b(?:kamaye|kamao|earn|paise)\b',                                            70, 'Hindi: Work from home scam'),
    (r'\bpart\s*time\b.{0,40}?\b(?:kaam|kamaye|kamao)\b',                                                    70, 'Hindi: Part-time job scam'),
    (r'\brozana\b.{0,40}?\b(?:kamaye|kamao|earn|income)\b',                                                  70, 'Hindi: Daily earning scam'),
    (r'\bregistration\b.{0,40}?\b(?:fees|shulk)\b',                                                          75, 'Hindi: Registration fee scam'),
    (r'घर\s*बैठे.{0,40}?(?:कमाएं|कमाएँ|कमाई|कमाओ)',                                                           70, 'Hindi: Work from home scam'),

    # Investment scams
    (r'\binvest\w*\b.{0,40}?\b(?:kare|kariye|karein|pakka|dugna)\b',                                         75, 'Hindi: Investment scam'),
    (r'\btrading\b.{0,40}?\b(?:pakka|munafa)\b',                                                             70, 'Hindi: Trading scam'),
    (r'(?:निवेश|इन्वेस्ट).{0,40}?(?:दोगुना|दुगना|गारंटी|पक्का)',                                                  75, 'Hindi: Investment scam'),

    # Link clicking
    (r'\blink\b.{0,40}?\b(?:kholo|kholein|kholiye|dabaye)\b',                                                75, 'Hindi: Link clicking instruction'),
    (r'\bclick\s+(?:kare|karein|kariye|karo)\b',                                                             75, 'Hindi: Click instruction'),
    (r'लिंक.{0,30}?(?:क्लिक|खोलें|खोलो|दबाएं)',                                                               75, 'Hindi: Link clicking instruction'),

    # Verification / call-back
    (r'\bverify\s+(?:kare|karein|kariye|kijiye)\b',                                                          60, 'Hindi: Verification request'),
    (r'\bconfirm\s+(?:kare|karein|kariye|kijiye)\b',                                                         60, 'Hindi: Confirmation request'),
    (r'\bupdate\s+(?:kare|karein|kariye|kijiye)\b',                                                          60, 'Hindi: Update request'),
    (r'\bcall\b.{0,30}?\b(?:kare|karein|kijiye|wapas)\b',                                                    55, 'Hindi: Call back request'),

    # Gift / cashback
    (r'\b(?:tohfa|gift|reward)\b.{0,40}?\b(?:mila|jeeta|jeete)\b',                                            90, 'Hindi: Gift/Reward scam'),
    (r'\bcashback\b.{0,40}?\b(?:mila|milega)\b',                                                             65, 'Hindi: Cashback scam'),

    # Police / legal threats
    (r'\bkanoo?ni?\b|\b(?:police|legal)\b.{0,40}?\b(?:karyawahi|kaarwahi|karwai)\b',                          75, 'Hindi: Police/Legal threat scam'),
    (r'\bgiraft?aa?r\w*',                                                                        80, 'Hindi: Arrest threat scam'),
    (r'(?:पुलिस|कानूनी\s*कार्रवाई)',                                                                              75, 'Hindi: Police/Legal threat scam'),
    (r'(?:गिरफ्तार|गिरफ़्तार|जेल)',                                                                                80, 'Hindi: Arrest threat scam'),

    # Tax refund scams
    (r'\btax\b.{0,40}?\b(?:refund|wapas|return)\b',                                                          80, 'Hindi: Tax refund scam'),
    (r'(?:टैक्स|आयकर).{0,30}?(?:रिफंड|वापसी|नोटिस)',                                                           80, 'Hindi: Tax refund scam'),
]


# ================================================================
# SENDER TRUST — allow-list and suspicious-sender rules
# ================================================================

# Verified DLT headers. An optional operator prefix (VK-, TX-, ...) is allowed.
TRUSTED_SENDER_IDS = (
    # Banks
    "SBIINB", "SBIPSG", "CBSSBI", "HDFCBK", "HDFCBA", "ICICIB", "ICICBA",
    "AXISBK", "AXISCRD", "KOTAKB", "KOTAKM", "PNBSMS", "PNBBKG", "BOIIND",
    "INDUSB", "YESBNK", "IDFCFB", "RBLBNK",
    # UPI / payments
    "PAYTMB", "PYTMRC", "PHONEPE", "PHPERC", "GOOGLEPAY", "GPAY", "BHIM", "NPCIUPI",
    # E-commerce
    "AMZIND", "AMAZON", "FKSHOP", "FLIPKART", "MYNTRA", "AJIORC", "SNAPDL", "BIGBSK",
    # Telecom
    "AIRTEL", "MYAIRT", "VODAIN", "MYIDEA", "VICARE", "JIOINF", "MYJIO", "BSNLMO",
    # Food delivery
    "SWIGGY", "ZOMATO", "DUNKIN", "DOMINOS",
    # Travel
    "IRCTC", "MAKEMY", "GOIBIBO", "YATRA", "OLA", "UBER",
    # Government
    "GOVTIN", "UIDAI", "ECISVEEP",
    # Utilities
    "BESCOM", "MSEDCL", "TATASKY", "DISHTV",
)

SUSPICIOUS_SENDER_PATTERNS = [
    # Sender formats
    (r'^[A-Z]{2}-[A-Z0-9]{6,}$',                  35, 'Suspicious sender ID format'),
    (r'^\d{5,6}$',                                40, 'Short code - Unverified sender'),
    (r'^\+?(?:\d[\s-]?){9,14}\d$',                45, 'Personal mobile number as sender'),

    # Scam keyword senders
    (r'PRIZE|REWARD|WINNER|LOTTERY|GIFT',         85, 'Prize/Lottery sender - 100% scam'),
    (r'KBC|CROREPATI',                            90, 'Fake KBC sender'),
    (r'INCOME.{0,10}TAX|IT-DEPT',                 70, 'Fake Income Tax sender'),
    (r'AADH?AA?R|UIDAI',                          70, 'Fake Aadhaar sender'),
    (r'LOAN|CREDIT',                              50, 'Unsolicited loan sender'),
    (r'JOB|HIRE|VACANCY',                         55, 'Job scam sender'),
]

# Substrings that mark an ordinary balance/debit notice from a verified sender.
TRANSACTIONAL_KEYWORDS: FrozenSet[str] = frozenset([
    "credited", "debited", "balance", "transaction",
    "txn", "deposit", "withdrawal", "transfer",
    "bill payment", "recharge", "successful",
    "confirmed", "reference number", "ref no",
    "available balance", "a/c", "account statement",
])


# ================================================================
# RULE RECORDS AND STORE
# ================================================================

@dataclass(frozen=True)
class Rule:
    """One weighted pattern.

    ``pattern`` accepts a regex string or a pre-compiled pattern; strings are
    compiled case-insensitively.
    """
    pattern: re.Pattern
    weight: int
    reason: str
    category: RuleCategory

    def __post_init__(self) -> None:
        if isinstance(self.pattern, str):
            object.__setattr__(self, "pattern", re.compile(self.pattern, _FLAGS))
        if not isinstance(self.category, RuleCategory):
            raise TypeError(f"category must be a RuleCategory, got {self.category!r}")
        if isinstance(self.weight, bool) or not isinstance(self.weight, int):
            raise TypeError(f"weight must be an int, got {self.weight!r}")
        if not 0 <= self.weight <= 100:
            raise ValueError(f"weight must be in 0..100, got {self.weight} for {self.reason!r}")
        if not self.reason:
            raise ValueError("reason must not be empty")

    def matches(self, text: str) -> bool:
        """True when the pattern occurs at least once in ``text``."""
        return self.pattern.search(text) is not None


def _build(table, category: RuleCategory) -> Tuple[Rule, ...]:
    return tuple(Rule(pattern, weight, reason, category) for pattern, weight, reason in table)


def _sender_category(weight: int) -> RuleCategory:
    if weight >= 85:
        return RuleCategory.CRITICAL
    if weight >= 60:
        return RuleCategory.HIGH
    if weight >= 40:
        return RuleCategory.MEDIUM
    return RuleCategory.LOW


@dataclass(frozen=True)
class RuleStore:
    """Immutable, versioned catalogue consumed by FraudDetector.

    Content rules are kept in catalogue order (critical, high, medium, low,
    language variants) and iterated in that order on every scan.
    """
    content_rules: Tuple[Rule, ...]
    sender_rules: Tuple[Rule, ...] = ()
    trusted_senders: Tuple[re.Pattern, ...] = ()
    transactional_keywords: FrozenSet[str] = field(default_factory=frozenset)
    version: str = CATALOGUE_VERSION

    def iter_content_rules(self) -> Iterator[Rule]:
        return iter(self.content_rules)

    def iter_sender_rules(self) -> Iterator[Rule]:
        return iter(self.sender_rules)

    def rules_by_category(self, category: RuleCategory) -> Tuple[Rule, ...]:
        return tuple(rule for rule in self.content_rules if rule.category is category)

    def is_trusted_sender(self, sender: str) -> bool:
        """Exact-format allow-list check, case-insensitive."""
        candidate = sender.strip()
        if not candidate:
            return False
        return any(pattern.fullmatch(candidate) for pattern in self.trusted_senders)

    def has_transactional_keyword(self, content: str) -> bool:
        lowered = content.lower()
        return any(keyword in lowered for keyword in self.transactional_keywords)


def build_store(version: str = CATALOGUE_VERSION) -> RuleStore:
    """Compile the module-level tables into a RuleStore."""
    content_rules = (
        _build(CRITICAL_PATTERNS, RuleCategory.CRITICAL)
        + _build(HIGH_RISK_PATTERNS, RuleCategory.HIGH)
        + _build(MEDIUM_RISK_PATTERNS, RuleCategory.MEDIUM)
        + _build(LOW_RISK_PATTERNS, RuleCategory.LOW)
        + _build(LANGUAGE_PATTERNS, RuleCategory.LANGUAGE_VARIANT)
    )
    sender_rules = tuple(
        Rule(pattern, weight, reason, _sender_category(weight))
        for pattern, weight, reason in SUSPICIOUS_SENDER_PATTERNS
    )
    trusted = tuple(
        re.compile(r'(?:[A-Z]{2}-)?' + re.escape(sender_id), _FLAGS)
        for sender_id in TRUSTED_SENDER_IDS
    )
    store = RuleStore(
        content_rules=content_rules,
        sender_rules=sender_rules,
        trusted_senders=trusted,
        transactional_keywords=TRANSACTIONAL_KEYWORDS,
        version=version,
    )
    logger.info(
        f"Rule store {version} built | content={len(content_rules)} "
        f"sender={len(sender_rules)} trusted={len(trusted)}"
    )
    return store


@lru_cache(maxsize=1)
def default_store() -> RuleStore:
    """The canonical process-wide store, built on first use."""
    return build_store()
