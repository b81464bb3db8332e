# Clikit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `StringType`, the clikit type for free-form text values.

Length is measured in Unicode code points (`len(value)`). Patterns are Python
regular expressions matched with `re.search`, so anchor them when the whole value
must match. An optional validator callback receives the string and must return a
truthy value for the input to be accepted.

Error reasons and their template fields:
- require_string: name
- length_lt_min: name, value, min
- length_gt_max: name, value, max
- pattern_check_fails: name, value
- validator_fails: name, value
"""
from __future__ import annotations

import re
from typing import Any, Callable

from clikit.exceptions import ConfigurationError
from clikit.types.base_type import BaseType


def compile_pattern(pattern: str | re.Pattern) -> re.Pattern:
    """Compile a regular expression, raising `ConfigurationError` when it is invalid."""
    if isinstance(pattern, re.Pattern):
        return pattern
    if not isinstance(pattern, str) or not pattern:
        raise ConfigurationError(f"invalid regular expression: {pattern!r}")
    try:
        return re.compile(pattern)
    except re.error as error:
        raise ConfigurationError(
            f"invalid regular expression: {pattern} ({error})"
        ) from error


def check_count(value: Any, label: str) -> int:
    """Ensure `value` is an integer greater than zero."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigurationError(f'"{value}" is not a valid {label} (integer > 0).')
    return value


class StringType(BaseType):
    """
    Text value with optional length bounds, pattern and validator callback.

    Args:
        min_length (int | None): Minimum length (inclusive).
        max_length (int | None): Maximum length (inclusive).

    Example:
        StringType(min_length=2).pattern(r"^[a-z]+$", "lowercase letters only")
    """

    kind = "string"
    error_messages = {
        "require_string": 'option "{name}" requires a string as value.',
        "length_lt_min": 'option "{name}" requires at least {min} character(s).',
        "length_gt_max": 'option "{name}" accepts at most {max} character(s).',
        "pattern_check_fails": '"{value}" fails on regular expression for option "{name}".',
        "validator_fails": '"{value}" is not a valid value for option "{name}".',
    }

    def __init__(self, min_length: int | None = None, max_length: int | None = None):
        super().__init__()
        self._min: int | None = None
        self._max: int | None = None
        self._pattern: re.Pattern | None = None
        self._validator: Callable[[str], Any] | None = None
        if min_length is not None:
            self.min(min_length)
        if max_length is not None:
            self.max(max_length)

    def min(self, value: int, message: str | None = None) -> StringType:
        """Set the minimum string length."""
        self._ensure_unlocked()
        check_count(value, "minimum length")
        if self._max is not None and value > self._max:
            raise ConfigurationError(
                f"min={value} and max={self._max} is not a valid condition."
            )
        self._min = value
        self._set_message("length_lt_min", message)
        return self

    def max(self, value: int, message: str | None = None) -> StringType:
        """Set the maximum string length."""
        self._ensure_unlocked()
        check_count(value, "maximum length")
        if self._min is not None and value < self._min:
            raise ConfigurationError(
                f"min={self._min} and max={value} is not a valid condition."
            )
        self._max = value
        self._set_message("length_gt_max", message)
        return self

    def pattern(self, pattern: str | re.Pattern, message: str | None = None) -> StringType:
        """Require values to match a regular expression."""
        self._ensure_unlocked()
        self._pattern = compile_pattern(pattern)
        self._set_message("pattern_check_fails", message)
        return self

    def validator(
        self, func: Callable[[str], Any], message: str | None = None
    ) -> StringType:
        """Require `func(value)` to return a truthy value."""
        self._ensure_unlocked()
        if not callable(func):
            raise ConfigurationError(f"string validator must be callable, got {func!r}")
        self._validator = func
        self._set_message("validator_fails", message)
        return self

    @property
    def min_length(self) -> int | None:
        return self._min

    @property
    def max_length(self) -> int | None:
        return self._max

    def validate(self, name: str, value: Any) -> str:
        if not isinstance(value, str):
            self._fail("require_string", name=name)

        length = len(value)
        if self._min is not None and length < self._min:
            self._fail("length_lt_min", name=name, value=value, min=self._min)
        if self._max is not None and length > self._max:
            self._fail("length_gt_max", name=name, value=value, max=self._max)
        if self._pattern is not None and not self._pattern.search(value):
            self._fail("pattern_check_fails", name=name, value=value)
        if self._validator is not None and not self._validator(value):
            self._fail("validator_fails", name=name, value=value)
        return value

    def __str__(self) -> str:
        if self._min is None and self._max is None:
            return self.kind
        low = "" if self._min is None else self._min
        high = "" if self._max is None else self._max
        return f"{self.kind}[{low}..{high}]"
