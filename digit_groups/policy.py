"""
Separator policy definition for digit-groups
Describes how digits are grouped and which strings separate them
"""

from dataclasses import dataclass, asdict, fields, replace as dataclass_replace
from typing import Any

from .constants import ASCII_DECIMAL, DEFAULT_DECIMAL_SEPARATOR


class ConfigurationError(ValueError):
    """Raised when a SeparatorPolicy is built with invalid settings"""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Invalid '{field}': {message}")


def _validate_groups(field: str, groups) -> tuple[int, ...]:
    """Check that every group size is a positive integer and return them as a tuple"""
    if isinstance(groups, (str, bytes)):
        raise ConfigurationError(field, "expected a sequence of group sizes, not a string")

    try:
        groups = tuple(groups)
    except TypeError:
        raise ConfigurationError(field, f"expected a sequence of group sizes, got {groups!r}") from None

    for size in groups:
        # bool is an int subclass, but True/False are never meant as sizes
        if isinstance(size, bool) or not isinstance(size, int):
            raise ConfigurationError(field, f"group size {size!r} is not an integer")
        if size <= 0:
            raise ConfigurationError(field, f"group size {size} must be positive")

    return groups


def _validate_separator(field: str, value):
    if not isinstance(value, str):
        raise ConfigurationError(field, f"separator must be a string, got {value!r}")


@dataclass(frozen=True)
class SeparatorPolicy:
    """
    A policy for inserting separators into numbers

    Attributes:
        grouping: Group sizes from right to left across the integer part.
            ``(3,)`` means every three digits, ``(3, 2)`` gives ``1,23,45,678``.
        digit_separator: String inserted between integer groups
        decimal_separator: String joining integer and fractional parts
        fractional_grouping: Group sizes from left to right across the fraction
        fractional_separator: String between fractional groups,
            ``None`` reuses digit_separator
        repeat_last: Repeat the last group size once the sequence runs out,
            otherwise leave the remaining digits ungrouped
        digits: Characters treated as digits when separating free text
    """

    grouping: tuple[int, ...] = (3,)
    digit_separator: str = ","
    decimal_separator: str = DEFAULT_DECIMAL_SEPARATOR
    fractional_grouping: tuple[int, ...] = ()
    fractional_separator: str | None = None
    repeat_last: bool = True
    digits: frozenset[str] = ASCII_DECIMAL

    def __post_init__(self):
        # Frozen dataclass: normalized values go through object.__setattr__
        object.__setattr__(self, 'grouping', _validate_groups('grouping', self.grouping))
        object.__setattr__(
            self, 'fractional_grouping',
            _validate_groups('fractional_grouping', self.fractional_grouping)
        )

        _validate_separator('digit_separator', self.digit_separator)
        _validate_separator('decimal_separator', self.decimal_separator)
        if self.fractional_separator is not None:
            _validate_separator('fractional_separator', self.fractional_separator)

        if not isinstance(self.repeat_last, bool):
            raise ConfigurationError('repeat_last', f"expected True or False, got {self.repeat_last!r}")

        try:
            object.__setattr__(self, 'digits', frozenset(self.digits))
        except TypeError:
            raise ConfigurationError('digits', f"expected a collection of characters, got {self.digits!r}") from None
        if not self.digits:
            raise ConfigurationError('digits', "at least one digit character is required")
        if not all(isinstance(c, str) and len(c) == 1 for c in self.digits):
            raise ConfigurationError('digits', "digits must be single characters")

    @property
    def effective_fractional_separator(self) -> str:
        """Separator actually used between fractional groups"""
        if self.fractional_separator is None:
            return self.digit_separator
        return self.fractional_separator

    def replace(self, **changes) -> "SeparatorPolicy":
        """Return a validated copy with the given fields changed"""
        return dataclass_replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dict"""
        data = asdict(self)
        data['grouping'] = list(self.grouping)
        data['fractional_grouping'] = list(self.fractional_grouping)
        data['digits'] = ''.join(sorted(self.digits))
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SeparatorPolicy":
        """
        Build a policy from a dict produced by to_dict()

        Missing keys fall back to the defaults.

        Raises:
            ConfigurationError: On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            name = sorted(unknown)[0]
            raise ConfigurationError(name, "unknown policy setting")
        return cls(**data)
