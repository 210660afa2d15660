"""
MobilePhoneValidator - validates mobile phone numbers (China).
"""

import re

from .regex_validator import RegexValidator

MOBILE_PHONE_PATTERN = r"\d{11}"


class MobilePhoneValidator(RegexValidator):
    """Exactly 11 ASCII digits: no country code, no separators."""

    def __init__(self):
        super().__init__([MOBILE_PHONE_PATTERN], flags=re.ASCII, rule_type="mobile_phone")
