"""
IDCardValidator - validates Chinese resident identity card numbers.
"""

import re

from .regex_validator import RegexValidator

# 6-digit region code, 2-digit year, month, day, 3-digit sequence.
ID_CARD_15_PATTERN = r"[1-9]\d{5}\d{2}(0[1-9]|10|11|12)([0-2][1-9]|10|20|30|31)\d{3}"

# 6-digit region code, 4-digit year, month, day, 3-digit sequence, check character.
ID_CARD_18_PATTERN = r"[1-9]\d{5}(18|19|[23]\d)\d{2}(0[1-9]|10|11|12)([0-2][1-9]|10|20|30|31)\d{3}[0-9xX]"


class IDCardValidator(RegexValidator):
    """
    Validates 15-digit (legacy) and 18-digit identity card numbers.

    Month and day are checked by pattern alternation only, so a date such
    as February 31st is accepted. The trailing check character of the
    18-digit form is not verified arithmetically.
    """

    def __init__(self):
        super().__init__([ID_CARD_15_PATTERN, ID_CARD_18_PATTERN], flags=re.ASCII, rule_type="id_card")
