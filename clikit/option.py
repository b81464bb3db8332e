# Clikit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Option` class, a named and typed input belonging to an `Action`.

An option carries:
- identity: a canonical `name`, an optional single-character `flag` (`-n`) and
  any number of long `aliases` (`--name`);
- a value type (`StringType` by default, see `clikit.types`);
- a resolution policy: `required`, an option-level `default`, and prompting
  (`prompt`, message, password masking);
- an optional offset binding `[at, to]` claiming anonymous arguments by position
  when the option is not passed explicitly (`to` may be `math.inf`).

Identity rules:
- A one-character name is its own flag. Passing a different `flag` is an error.
- A longer name is registered as an alias so `--name` always works.

Options are built with fluent methods and are locked when added to an `Action`.
Every builder called on a locked option (or on its locked type) raises
`ConfigurationError`.

Example:
    name = Option("name", "n").alias("who").required().prompt()
    name.string().min(2)
"""
from __future__ import annotations

import math
import re
from typing import Any

from clikit.exceptions import ConfigurationError
from clikit.types import BaseType, BoolType, NumberType, PathType, StringType

NAME_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9_-]*")
FLAG_PATTERN = re.compile(r"[A-Za-z0-9?]")
ALIAS_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9_-]+")


class Option:
    """
    A typed option of an action.

    Args:
        name (str): Canonical option name, key of the parsed value in `Args`.
        flag (str | None): Single-character short form.
        description (str): Text shown in help output.

    Raises:
        ConfigurationError: If the name or flag is invalid.
    """

    def __init__(self, name: str, flag: str | None = None, description: str = ""):
        if not isinstance(name, str) or not NAME_PATTERN.fullmatch(name):
            raise ConfigurationError(f'"{name}" is not a valid option name.')
        if flag is not None and (
            not isinstance(flag, str) or not FLAG_PATTERN.fullmatch(flag)
        ):
            raise ConfigurationError(f'"{flag}" is not a valid option flag.')
        if len(name) == 1:
            if flag is not None and flag != name:
                raise ConfigurationError(
                    f'option "{name}" is its own flag, it can\'t use "-{flag}".'
                )
            flag = name

        self.name: str = name
        self.flag: str | None = flag
        self.description: str = description.strip()
        self._aliases: list[str] = []
        self._type: BaseType = StringType()
        self._required: bool = False
        self._default: Any = None
        self._has_default: bool = False
        self._prompt: bool = False
        self._prompt_message: str | None = None
        self._password: bool = False
        self._offsets: tuple[int, int | float] | None = None
        self._locked: bool = False

        if len(name) > 1:
            self._aliases.append(name)

    def alias(self, *aliases: str) -> Option:
        """Add long aliases usable as `--alias`."""
        self._ensure_unlocked("aliases")
        for alias in aliases:
            if not isinstance(alias, str) or not ALIAS_PATTERN.fullmatch(alias):
                raise ConfigurationError(f'"{alias}" is not a valid alias.')
            if alias not in self._aliases:
                self._aliases.append(alias)
        return self

    def offsets(self, at: int, to: int | float | None = None) -> Option:
        """
        Bind anonymous arguments by position.

        With only `at`, the anonymous argument at that index is used. With `to`,
        every contiguous anonymous argument from `at` up to `to` (inclusive, may be
        `math.inf`) is collected into a list.
        """
        self._ensure_unlocked("offsets")
        if isinstance(at, bool) or not isinstance(at, int) or at < 0:
            raise ConfigurationError(f'"{at}" is not a valid arg offset.')
        if to is not None:
            valid_to = (
                not isinstance(to, bool)
                and (isinstance(to, int) or (isinstance(to, float) and math.isinf(to)))
                and to >= at
            )
            if not valid_to:
                raise ConfigurationError(
                    f"from={at} to={to} is not a valid arg offset range."
                )
        self._offsets = (at, at if to is None else to)
        return self

    def required(self, required: bool = True) -> Option:
        self._ensure_unlocked("required")
        self._required = bool(required)
        return self

    def default(self, value: Any) -> Option:
        """Set the option-level default, preferred over the type default."""
        self._ensure_unlocked("default")
        self._default = value
        self._has_default = True
        return self

    def prompt(
        self,
        enabled: bool = True,
        message: str | None = None,
        password: bool = False,
    ) -> Option:
        """Ask for the value interactively when a required option is missing."""
        self._ensure_unlocked("prompt")
        self._prompt = bool(enabled)
        if message is not None:
            self._prompt_message = message.strip()
        self._password = bool(password)
        return self

    def describe(self, description: str) -> Option:
        self._ensure_unlocked("description")
        self.description = description.strip()
        return self

    def set_type(self, value_type: BaseType) -> Option:
        """Replace the value type of this option."""
        self._ensure_unlocked("type")
        if not isinstance(value_type, BaseType):
            raise ConfigurationError(
                f'option "{self.name}" type must be a BaseType, got {value_type!r}'
            )
        self._type = value_type
        return self

    def string(self, min_length: int | None = None, max_length: int | None = None) -> StringType:
        value_type = StringType(min_length, max_length)
        self.set_type(value_type)
        return value_type

    def number(self, min: Any = None, max: Any = None) -> NumberType:
        value_type = NumberType(min, max)
        self.set_type(value_type)
        return value_type

    def boolean(self, strict: bool = True) -> BoolType:
        value_type = BoolType(strict)
        self.set_type(value_type)
        return value_type

    def path(self, min: int | None = None, max: int | None = None) -> PathType:
        value_type = PathType(min, max)
        self.set_type(value_type)
        return value_type

    def lock(self) -> Option:
        """Freeze the option and its type. Called by `Action.add_option`."""
        self._locked = True
        self._type.lock()
        return self

    @property
    def locked(self) -> bool:
        return self._locked

    @property
    def type(self) -> BaseType:
        return self._type

    @property
    def aliases(self) -> tuple[str, ...]:
        return tuple(self._aliases)

    @property
    def is_required(self) -> bool:
        return self._required

    @property
    def has_default(self) -> bool:
        return self._has_default or self._type.has_default

    @property
    def default_value(self) -> Any:
        if self._has_default:
            return self._default
        if self._type.has_default:
            return self._type.default_value
        return None

    @property
    def prompt_enabled(self) -> bool:
        return self._prompt

    @property
    def prompt_password(self) -> bool:
        return self._password

    @property
    def prompt_message(self) -> str:
        return self._prompt_message or f"Please provide --{self.name}"

    @property
    def offset_range(self) -> tuple[int, int | float] | None:
        return self._offsets

    def forms(self) -> list[str]:
        """Return every form this option accepts on the command line."""
        forms = [f"--{alias}" for alias in self._aliases]
        if self.flag:
            forms.insert(0, f"-{self.flag}")
        return forms

    def validate(self, presented: str, value: Any) -> Any:
        """Run a raw value (or each item of a list) through the option type."""
        if isinstance(value, list):
            return [self._type.validate(presented, item) for item in value]
        return self._type.validate(presented, value)

    def _ensure_unlocked(self, what: str) -> None:
        if self._locked:
            raise ConfigurationError(
                f'can\'t define {what} of option "{self.name}", option is locked.'
            )

    def __str__(self) -> str:
        return f"Option({', '.join(self.forms()) or self.name})"

    def __repr__(self) -> str:
        return (
            f"Option(name={self.name!r}, flag={self.flag!r}, aliases={self._aliases!r}, "
            f"type={self._type}, required={self._required}, offsets={self._offsets})"
        )
