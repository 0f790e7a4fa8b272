"""
digit-groups - Format numbers with digit group separators

Turns 1234567 into "1,234,567", with configurable group sizes,
separators and fractional grouping.
"""

__version__ = "1.0.0"
__author__ = "Sathia Musso"

from .policy import SeparatorPolicy, ConfigurationError
from .policies import (
    COMMA_SEPARATOR,
    SPACE_SEPARATOR,
    DOT_SEPARATOR,
    UNDERSCORE_SEPARATOR,
    INDIAN_SEPARATOR,
    HEX_FOUR,
    PREDEFINED_POLICIES,
    get_policy
)
from .formatting import (
    format_number,
    separate,
    format_with_commas,
    format_with_spaces,
    format_with_dots,
    format_with_underscores,
    Separable
)
from .settings import SettingsManager, resolve_policy

__all__ = [
    "SeparatorPolicy",
    "ConfigurationError",
    "COMMA_SEPARATOR",
    "SPACE_SEPARATOR",
    "DOT_SEPARATOR",
    "UNDERSCORE_SEPARATOR",
    "INDIAN_SEPARATOR",
    "HEX_FOUR",
    "PREDEFINED_POLICIES",
    "get_policy",
    "format_number",
    "separate",
    "format_with_commas",
    "format_with_spaces",
    "format_with_dots",
    "format_with_underscores",
    "Separable",
    "SettingsManager",
    "resolve_policy",
]
