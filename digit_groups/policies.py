"""
Predefined separator policies
"""

from .constants import (
    ASCII_HEX,
    DEFAULT_GROUP_SIZE,
    HEX_GROUP_SIZE,
    INDIAN_GROUPING
)
from .policy import SeparatorPolicy

# Comma every three digits: 1,234,567.89
COMMA_SEPARATOR = SeparatorPolicy(grouping=(DEFAULT_GROUP_SIZE,), digit_separator=",")

# Space every three digits: 1 234 567.89
SPACE_SEPARATOR = SeparatorPolicy(grouping=(DEFAULT_GROUP_SIZE,), digit_separator=" ")

# Period every three digits, comma as decimal mark: 1.234.567,89
DOT_SEPARATOR = SeparatorPolicy(
    grouping=(DEFAULT_GROUP_SIZE,),
    digit_separator=".",
    decimal_separator=","
)

# Underscore every three digits, as in Python literals: 1_234_567.89
UNDERSCORE_SEPARATOR = SeparatorPolicy(grouping=(DEFAULT_GROUP_SIZE,), digit_separator="_")

# Lakh/crore grouping: 1,23,45,678
INDIAN_SEPARATOR = SeparatorPolicy(grouping=INDIAN_GROUPING, digit_separator=",")

# Space every four hexadecimal digits: dead beef
HEX_FOUR = SeparatorPolicy(grouping=(HEX_GROUP_SIZE,), digit_separator=" ", digits=ASCII_HEX)

PREDEFINED_POLICIES: dict[str, SeparatorPolicy] = {
    'comma': COMMA_SEPARATOR,
    'space': SPACE_SEPARATOR,
    'dot': DOT_SEPARATOR,
    'underscore': UNDERSCORE_SEPARATOR,
    'indian': INDIAN_SEPARATOR,
    'hex': HEX_FOUR,
}


def get_policy(name: str) -> SeparatorPolicy:
    """
    Look up a predefined policy by short name (case-insensitive)

    Raises:
        KeyError: If no predefined policy has that name
    """
    try:
        return PREDEFINED_POLICIES[name.strip().lower()]
    except KeyError:
        raise KeyError(f"Unknown policy: {name}") from None
