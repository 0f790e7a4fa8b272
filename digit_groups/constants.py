"""
Constants and configuration values for digit-groups
Centralized location for digit sets and default values
"""

# ============================================================================
# Digit Sets
# ============================================================================

# The decimal digits, in ASCII
ASCII_DECIMAL = frozenset('0123456789')

# The hexadecimal digits, in ASCII (both cases)
ASCII_HEX = frozenset('0123456789abcdefABCDEF')

# ============================================================================
# Grouping Defaults
# ============================================================================

# Digits per group for the usual thousands grouping
DEFAULT_GROUP_SIZE = 3

# Digits per group for hexadecimal output
HEX_GROUP_SIZE = 4

# Indian numbering: first group of three, then groups of two (1,23,45,678)
INDIAN_GROUPING = (3, 2)

DEFAULT_DECIMAL_SEPARATOR = "."

# ============================================================================
# Settings
# ============================================================================

# File in the user's home directory holding saved policies
SETTINGS_FILE_NAME = '.digit_groups_settings.json'
