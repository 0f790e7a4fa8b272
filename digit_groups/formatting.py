"""
Digit grouping for digit-groups
Inserts separators into the textual form of numbers according to a SeparatorPolicy
"""

import math
from decimal import Decimal
from typing import Iterable

from .policy import SeparatorPolicy
from .policies import (
    COMMA_SEPARATOR,
    SPACE_SEPARATOR,
    DOT_SEPARATOR,
    UNDERSCORE_SEPARATOR
)

Number = int | float | Decimal


# ============================================================================
# Grouping
# ============================================================================

def _chunk(digits: str, grouping: Iterable[int], repeat_last: bool) -> list[str]:
    """
    Split digits into groups from the left

    Once grouping is exhausted the last size repeats, or with repeat_last
    off the rest of the digits form a single final group.
    """
    if not digits:
        return []

    chunks = []
    sizes = iter(grouping)
    size = None
    pos = 0

    while pos < len(digits):
        size = next(sizes, size if repeat_last else None)
        if size is None:
            chunks.append(digits[pos:])
            break
        chunks.append(digits[pos:pos + size])
        pos += size

    return chunks


def _group_integer(digits: str, policy: SeparatorPolicy) -> str:
    """Group digits right to left using policy.grouping"""
    if not policy.grouping or not policy.digit_separator:
        return digits

    # Group the reversed digits from the left, then flip everything back
    chunks = _chunk(digits[::-1], policy.grouping, policy.repeat_last)
    return policy.digit_separator.join(chunk[::-1] for chunk in reversed(chunks))


def _group_fraction(digits: str, policy: SeparatorPolicy) -> str:
    """Group digits left to right using policy.fractional_grouping"""
    separator = policy.effective_fractional_separator
    if not policy.fractional_grouping or not separator:
        return digits

    return separator.join(_chunk(digits, policy.fractional_grouping, policy.repeat_last))


# ============================================================================
# Number Conversion
# ============================================================================

def _canonical_text(value: Number) -> str | None:
    """
    Plain decimal text for a finite number, or None for NaN and infinities

    Raises:
        TypeError: If value is not an int, float or Decimal
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise TypeError(f"Expected int, float or Decimal, got {type(value).__name__}")

    if isinstance(value, int):
        # Decimal avoids the interpreter limit on int-to-str conversion
        return format(Decimal(int(value)), 'f')

    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        text = float.__repr__(value)
        if 'e' in text or 'E' in text:
            # repr switches to exponent notation for very large/small floats
            text = format(Decimal(text), 'f')
            if '.' not in text:
                text += '.0'
        return text

    if not value.is_finite():
        return None
    return format(value, 'f')


def _split_number(text: str) -> tuple[str, str, str | None]:
    """Split canonical text into sign, integer digits and fractional digits"""
    sign = ''
    if text[0] in '+-':
        sign, text = text[0], text[1:]

    if '.' in text:
        integer, fraction = text.split('.', 1)
        return sign, integer or '0', fraction

    return sign, text, None


# ============================================================================
# Public API
# ============================================================================

def format_number(value: Number, policy: SeparatorPolicy = COMMA_SEPARATOR) -> str:
    """
    Format a number with separators between digit groups

    Args:
        value: int, float or Decimal to format
        policy: Grouping and separators to use (default: comma every 3 digits)

    Returns:
        Formatted string. NaN and infinities come back as str(value).

    Raises:
        TypeError: If value is not a supported number

    Examples:
        1234567 -> "1,234,567"
        -1234.5 -> "-1,234.5"
        999 -> "999"
    """
    text = _canonical_text(value)
    if text is None:
        return str(value)

    sign, integer, fraction = _split_number(text)
    result = sign + _group_integer(integer, policy)

    if fraction is not None:
        result += policy.decimal_separator + _group_fraction(fraction, policy)

    return result


def _find_digit_span(text: str, digits: frozenset[str]) -> tuple[str, str, str]:
    """Split text around its first run of digit characters"""
    start = next((i for i, c in enumerate(text) if c in digits), None)
    if start is None:
        return text, '', ''

    stop = start
    while stop < len(text) and text[stop] in digits:
        stop += 1

    return text[:start], text[start:stop], text[stop:]


def separate(text: str, policy: SeparatorPolicy = COMMA_SEPARATOR) -> str:
    """
    Insert separators into the first run of digits found in text

    Characters outside that run are copied unchanged, so signs, decimal
    points and units survive. Only policy.grouping is applied.

    Examples:
        "12345" -> "12,345"
        "-1234.5" -> "-1,234.5"
        "deadbeef" with HEX_FOUR -> "dead beef"
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    before, number, after = _find_digit_span(text, policy.digits)
    return before + _group_integer(number, policy) + after


def format_with_commas(value: Number) -> str:
    return format_number(value, COMMA_SEPARATOR)


def format_with_spaces(value: Number) -> str:
    return format_number(value, SPACE_SEPARATOR)


def format_with_dots(value: Number) -> str:
    return format_number(value, DOT_SEPARATOR)


def format_with_underscores(value: Number) -> str:
    return format_number(value, UNDERSCORE_SEPARATOR)


class Separable:
    """Wraps a number or string and formats it on demand"""

    def __init__(self, value: Number | str):
        self.value = value

    def separate_by_policy(self, policy: SeparatorPolicy) -> str:
        if isinstance(self.value, str):
            return separate(self.value, policy)
        return format_number(self.value, policy)

    def separate_with_commas(self) -> str:
        """Insert a comma every three digits from the right"""
        return self.separate_by_policy(COMMA_SEPARATOR)

    def separate_with_spaces(self) -> str:
        """Insert a space every three digits from the right"""
        return self.separate_by_policy(SPACE_SEPARATOR)

    def separate_with_dots(self) -> str:
        """Insert a period every three digits from the right"""
        return self.separate_by_policy(DOT_SEPARATOR)

    def separate_with_underscores(self) -> str:
        """Insert an underscore every three digits from the right"""
        return self.separate_by_policy(UNDERSCORE_SEPARATOR)

    def __str__(self):
        return self.separate_with_commas()

    def __repr__(self):
        return f"Separable({self.value!r})"
