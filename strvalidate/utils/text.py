"""
Unicode text helpers shared by the validators.

Length and classification always operate on codepoints, never on the
encoded bytes of a string.
"""

import unicodedata
from dataclasses import dataclass

# Codepoint ranges of the Han script (Unicode 15.1 Scripts.txt).
HAN_RANGES: tuple[tuple[int, int], ...] = (
    (0x2E80, 0x2E99),
    (0x2E9B, 0x2EF3),
    (0x2F00, 0x2FD5),
    (0x3005, 0x3005),
    (0x3007, 0x3007),
    (0x3021, 0x3029),
    (0x3038, 0x303B),
    (0x3400, 0x4DBF),
    (0x4E00, 0x9FFF),
    (0xF900, 0xFA6D),
    (0xFA70, 0xFAD9),
    (0x16FE2, 0x16FE3),
    (0x16FF0, 0x16FF1),
    (0x20000, 0x2A6DF),
    (0x2A700, 0x2B739),
    (0x2B740, 0x2B81D),
    (0x2B820, 0x2CEA1),
    (0x2CEB0, 0x2EBE0),
    (0x2EBF0, 0x2EE5D),
    (0x2F800, 0x2FA1D),
    (0x30000, 0x3134A),
    (0x31350, 0x323AF),
)


@dataclass(frozen=True)
class CharClasses:
    """Character classes found in a string by a single classification pass."""

    has_digit: bool = False
    has_upper: bool = False
    has_lower: bool = False
    has_special: bool = False


def decode_utf8(value: str | bytes) -> str | None:
    """
    Return value as a well-formed str, or None if it is not valid text.

    Bytes are decoded as strict UTF-8. A str is rejected when it carries
    surrogate codepoints (lone halves or ``surrogateescape`` leftovers),
    since those cannot be encoded back to UTF-8.

    Examples:
        >>> decode_utf8(b"caf\\xc3\\xa9")
        'café'
        >>> decode_utf8(b"\\xff\\xfe") is None
        True
    """
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError:
            return None

    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return value


def is_han(char: str) -> bool:
    """Return True if char belongs to the Han script."""
    code = ord(char)
    for start, end in HAN_RANGES:
        if code < start:
            return False
        if code <= end:
            return True
    return False


def codepoint_length(text: str) -> int:
    """Number of codepoints in text."""
    return len(text)


def display_width(text: str) -> int:
    """
    Approximate display width: Han codepoints count 2, everything else 1.

    Examples:
        >>> display_width("中文汉字")
        8
        >>> display_width("abcd1234")
        8
    """
    return sum(2 if is_han(char) else 1 for char in text)


def is_letter(char: str) -> bool:
    """Unicode letter of any script (general category L*)."""
    return unicodedata.category(char).startswith("L")


def is_combining_mark(char: str) -> bool:
    """Spacing or non-spacing combining mark (Mc, Mn), e.g. Indic vowel signs."""
    return unicodedata.category(char) in ("Mc", "Mn")


def is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


def classify(text: str) -> CharClasses:
    """
    Classify every codepoint of text exactly once.

    A digit is category Nd, an upper-case letter Lu, a lower-case letter Ll,
    and a special character any symbol (S*) or punctuation (P*).
    """
    has_digit = has_upper = has_lower = has_special = False

    for char in text:
        category = unicodedata.category(char)
        if category == "Nd":
            has_digit = True
        elif category == "Lu":
            has_upper = True
        elif category == "Ll":
            has_lower = True
        elif category[0] in ("S", "P"):
            has_special = True

    return CharClasses(
        has_digit=has_digit,
        has_upper=has_upper,
        has_lower=has_lower,
        has_special=has_special,
    )
