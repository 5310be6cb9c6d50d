"""
Roman numeral handling for ARTICLE numbers.

Texas omnibus bills number articles either with Arabic digits ("ARTICLE 4.")
or Roman numerals ("ARTICLE IV."). Section numbers inside an article always
use the Arabic form ("SECTION 4.01."), so article numbers are normalized to
an int before matching sections against them.

The original article string is never rewritten; normalization is only used
for comparisons.
"""
import re
from typing import Optional

ROMAN_VALUES: dict[str, int] = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

ROMAN_PATTERN = re.compile(r'[IVXLCDM]+', re.IGNORECASE)


def is_roman_numeral(value: str) -> bool:
    return bool(value) and bool(ROMAN_PATTERN.fullmatch(value))


def roman_to_arabic(roman: str) -> Optional[int]:
    """
    Convert a Roman numeral to an int using subtractive notation.

    Walks right-to-left: a symbol smaller than the one to its right is
    subtracted (IV = 4, XC = 90, CM = 900), otherwise added.

    Args:
        roman: Roman numeral, any case (e.g., "IV", "xii")

    Returns:
        Arabic value, or None if the string is not made of I/V/X/L/C/D/M
    """
    if not is_roman_numeral(roman):
        return None

    result = 0
    prev_value = 0
    for symbol in reversed(roman.upper()):
        value = ROMAN_VALUES[symbol]
        if value < prev_value:
            result -= value
        else:
            result += value
        prev_value = value
    return result


def normalize_article_number(article_number: str) -> int:
    """
    Normalize an article number ("3", "III") to an int for section matching.

    Returns 0 when the number is neither Arabic nor Roman.
    """
    if not article_number:
        return 0

    if article_number.isdecimal():
        return int(article_number)

    return roman_to_arabic(article_number) or 0
