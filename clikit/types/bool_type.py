# Clikit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `BoolType`, the clikit type for boolean switches and answers.

Strict mode accepts `true`, `false`, `1` and `0`. Extended mode also accepts
`yes`, `no`, `y` and `n`. Matching is case-insensitive and surrounding whitespace
is ignored. Python `bool` values pass through unchanged and the integers `1`/`0`
map to `True`/`False`.

Error reasons and their template fields:
- require_bool: name, value
"""
from __future__ import annotations

from typing import Any

from clikit.types.base_type import BaseType

STRICT_VALUES: dict[str, bool] = {
    "1": True,
    "0": False,
    "true": True,
    "false": False,
}

EXTENDED_VALUES: dict[str, bool] = {
    **STRICT_VALUES,
    "yes": True,
    "no": False,
    "y": True,
    "n": False,
}


class BoolType(BaseType):
    """
    Boolean value.

    Args:
        strict (bool): Limit accepted words to true/false/1/0.
        message (str | None): Custom template for the `require_bool` reason.
    """

    kind = "bool"
    error_messages = {
        "require_bool": 'option "{name}" requires a boolean.',
    }

    def __init__(self, strict: bool = True, message: str | None = None):
        super().__init__()
        self._strict = bool(strict)
        self._set_message("require_bool", message)

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def accepted_values(self) -> dict[str, bool]:
        return STRICT_VALUES if self._strict else EXTENDED_VALUES

    def validate(self, name: str, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, int) and value in (0, 1):
            return bool(value)
        if isinstance(value, str):
            key = value.strip().lower()
            if key in self.accepted_values:
                return self.accepted_values[key]
        self._fail("require_bool", name=name, value=value)
