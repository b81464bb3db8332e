# Clikit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `NumberType`, the clikit type for numeric values.

Accepted input is any Python `int`/`float` (but not `bool`) or a string holding a
decimal literal such as `42`, `-3.5`, `.5` or `1e3`. Integral literals come back as
`int`, everything else as `float`.

When `integer()` is requested the value must have no fractional part. The check is
done on the exact decimal text through `decimal.Decimal`, so `"10.0"` is accepted
(returned as `10`) while `"1.0000000000000001"` is rejected even though it rounds to
`1.0` as a float.

Error reasons and their template fields:
- require_number: name, value
- require_integer: name, value
- number_lt_min: name, value, min
- number_gt_max: name, value, max
"""
from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any

from clikit.exceptions import ConfigurationError
from clikit.types.base_type import BaseType

NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
INTEGER_PATTERN = re.compile(r"[+-]?\d+")

Number = int | float


def to_number(value: Any) -> Number | None:
    """Coerce `value` to an `int` or `float`, or return None when it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if not isinstance(value, str):
        return None
    text = value.strip()
    if INTEGER_PATTERN.fullmatch(text):
        return int(text)
    if NUMBER_PATTERN.fullmatch(text):
        number = float(text)
        return number if math.isfinite(number) else None
    return None


def integral_value(value: Any, number: Number) -> int | None:
    """Return `number` as an `int` when it has no fractional part, else None."""
    if isinstance(number, int):
        return number
    exact = Decimal(value.strip()) if isinstance(value, str) else Decimal(number)
    if exact == exact.to_integral_value():
        return int(exact)
    return None


class NumberType(BaseType):
    """
    Numeric value with optional inclusive bounds and an integer-only constraint.

    Args:
        min (int | float | str | None): Minimum value (inclusive).
        max (int | float | str | None): Maximum value (inclusive).
    """

    kind = "number"
    error_messages = {
        "require_number": 'option "{name}" requires a number as value.',
        "require_integer": '"{value}" is not a valid integer for option "{name}".',
        "number_lt_min": '"{value}" fails on min={min} for option "{name}".',
        "number_gt_max": '"{value}" fails on max={max} for option "{name}".',
    }

    def __init__(self, min: Any = None, max: Any = None):
        super().__init__()
        self._min: Number | None = None
        self._max: Number | None = None
        self._integer: bool = False
        if min is not None:
            self.min(min)
        if max is not None:
            self.max(max)

    def min(self, value: Any, message: str | None = None) -> NumberType:
        """Set the minimum accepted value."""
        self._ensure_unlocked()
        number = self._bound(value)
        if self._max is not None and number > self._max:
            raise ConfigurationError(
                f"min={value} and max={self._max} is not a valid condition."
            )
        self._min = number
        self._set_message("number_lt_min", message)
        return self

    def max(self, value: Any, message: str | None = None) -> NumberType:
        """Set the maximum accepted value."""
        self._ensure_unlocked()
        number = self._bound(value)
        if self._min is not None and number < self._min:
            raise ConfigurationError(
                f"min={self._min} and max={value} is not a valid condition."
            )
        self._max = number
        self._set_message("number_gt_max", message)
        return self

    def integer(self, message: str | None = None) -> NumberType:
        """Only accept values without a fractional part."""
        self._ensure_unlocked()
        self._integer = True
        self._set_message("require_integer", message)
        return self

    @property
    def is_integer(self) -> bool:
        return self._integer

    def _bound(self, value: Any) -> Number:
        number = to_number(value)
        if number is None:
            raise ConfigurationError(f'"{value}" is not a valid number.')
        return number

    def validate(self, name: str, value: Any) -> Number:
        number = to_number(value)
        if number is None:
            self._fail("require_number", name=name, value=value)

        if self._integer:
            integral = integral_value(value, number)
            if integral is None:
                self._fail("require_integer", name=name, value=value)
            number = integral

        if self._min is not None and number < self._min:
            self._fail("number_lt_min", name=name, value=value, min=self._min)
        if self._max is not None and number > self._max:
            self._fail("number_gt_max", name=name, value=value, max=self._max)
        return number

    def __str__(self) -> str:
        kind = "integer" if self._integer else self.kind
        if self._min is None and self._max is None:
            return kind
        low = "" if self._min is None else self._min
        high = "" if self._max is None else self._max
        return f"{kind}[{low}..{high}]"
