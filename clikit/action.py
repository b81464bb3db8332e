# Clikit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Action` class, a named operation of a `Command` owning its options.

An action keeps its options in registration order together with three lookup
tables built at registration time:

- name  -> option
- flag  -> option name
- alias -> option name

`add_option()` enforces, before locking the option:
- unique option names,
- unique flags,
- unique aliases,
- non-overlapping offset ranges (`[a, b]` and `[c, d]` conflict unless
  `a > d or b < c`).

Violations raise `OptionConflictError`, a `ConfigurationError`. Failed lookups
at request time raise `UnrecognizedOptionError`, an `InputError`.

Example:
    say = Action("say", "Say hello.")
    say.option("name", "n", default="John Doe")
    say.option("age", "a", type=NumberType().integer(), default=18)
"""
from __future__ import annotations

import re
from typing import Any

from clikit.exceptions import (
    ConfigurationError,
    OptionConflictError,
    UnrecognizedOptionError,
)
from clikit.option import Option
from clikit.protocols import Handler
from clikit.types import BaseType

ACTION_NAME_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9_:-]+")


class Action:
    """
    A named operation within a command.

    Args:
        name (str): Action name, as typed after the command name.
        description (str): Text shown in help output.
        handler (Handler | None): Called as `handler(action, args)` after a
            successful parse.
    """

    def __init__(
        self,
        name: str,
        description: str = "",
        handler: Handler | None = None,
    ):
        if not isinstance(name, str) or not ACTION_NAME_PATTERN.fullmatch(name):
            raise ConfigurationError(f'"{name}" is not a valid action name.')
        self.name: str = name
        self.description: str = description.strip()
        self._handler: Handler | None = None
        self._options: dict[str, Option] = {}
        self._flags: dict[str, str] = {}
        self._aliases: dict[str, str] = {}
        self._offset_locks: dict[str, tuple[int, int | float]] = {}
        if handler is not None:
            self.handler(handler)

    def add_option(self, *options: Option) -> Action:
        """Register and lock options."""
        for option in options:
            self._register_option(option)
        return self

    def _register_option(self, option: Option) -> None:
        if not isinstance(option, Option):
            raise ConfigurationError(f"expected an Option, got {option!r}")

        name = option.name
        if name in self._options:
            raise OptionConflictError(
                f'option "{name}" is already defined in action "{self.name}".'
            )

        if option.flag is not None and option.flag in self._flags:
            raise OptionConflictError(
                f'flag "-{option.flag}" is already used by option '
                f'"{self._flags[option.flag]}" in action "{self.name}".'
            )

        for alias in option.aliases:
            if alias in self._aliases:
                raise OptionConflictError(
                    f'alias "--{alias}" is already used by option '
                    f'"{self._aliases[alias]}" in action "{self.name}".'
                )

        offsets = option.offset_range
        if offsets is not None:
            a, b = offsets
            for owner, (c, d) in self._offset_locks.items():
                if not (a > d or b < c):
                    raise OptionConflictError(
                        f"all or parts of offsets({a},{b}) is used by option "
                        f'"{owner}" of action "{self.name}".'
                    )

        self._options[name] = option
        if option.flag is not None:
            self._flags[option.flag] = name
        for alias in option.aliases:
            self._aliases[alias] = name
        if offsets is not None:
            self._offset_locks[name] = offsets
        option.lock()

    def option(
        self,
        name: str,
        flag: str | None = None,
        *,
        type: BaseType | None = None,
        aliases: list[str] | tuple[str, ...] = (),
        required: bool = False,
        default: Any = None,
        prompt: bool = False,
        prompt_message: str | None = None,
        password: bool = False,
        offsets: tuple[int, int | float | None] | None = None,
        description: str = "",
    ) -> Option:
        """
        Build, register and return an option in one call.

        `default=None` means "no default"; use `Option.default(None)` before
        `add_option()` for an explicit `None` default.

        Args:
            name (str): Canonical option name.
            flag (str | None): Single-character short form.
            type (BaseType | None): Value type, `StringType()` when omitted.
            aliases (Sequence[str]): Extra long forms.
            required (bool): Whether a value must be resolved.
            default (Any): Option-level default.
            prompt (bool): Prompt for the value when required and missing.
            prompt_message (str | None): Custom prompt text.
            password (bool): Mask the prompt answer.
            offsets (tuple | None): `(at, to)` anonymous argument binding.
            description (str): Help text.

        Returns:
            Option: The locked option.
        """
        option = Option(name, flag, description)
        if type is not None:
            option.set_type(type)
        if aliases:
            option.alias(*aliases)
        if required:
            option.required()
        if default is not None:
            option.default(default)
        if prompt:
            option.prompt(True, prompt_message, password)
        if offsets is not None:
            option.offsets(*offsets)
        self.add_option(option)
        return option

    def handler(self, handler: Handler) -> Handler:
        """Set the execution handler. Usable as a decorator."""
        if not callable(handler):
            raise ConfigurationError(
                f'handler of action "{self.name}" must be callable, got {handler!r}'
            )
        self._handler = handler
        return handler

    @property
    def execution_handler(self) -> Handler | None:
        return self._handler

    @property
    def options(self) -> dict[str, Option]:
        return dict(self._options)

    def has_option(self, name: str) -> bool:
        return name in self._options

    def resolve_alias(self, alias: str) -> str | None:
        """Return the option name for a long form (alias or canonical name)."""
        if alias in self._aliases:
            return self._aliases[alias]
        if alias in self._options:
            return alias
        return None

    def resolve_flag(self, flag: str) -> str | None:
        """Return the option name for a single-character flag."""
        return self._flags.get(flag)

    def get_option(self, name: str) -> Option:
        """
        Look up an option by canonical name, alias or flag.

        Raises:
            UnrecognizedOptionError: If nothing matches.
        """
        resolved = self.resolve_alias(name) or self.resolve_flag(name)
        if resolved is None:
            raise UnrecognizedOptionError(
                f'unrecognized option "{name}" for action "{self.name}"'
            )
        return self._options[resolved]

    def __iter__(self):
        return iter(self._options.values())

    def __len__(self) -> int:
        return len(self._options)

    def __str__(self) -> str:
        return f"Action(name={self.name!r}, options={list(self._options)})"
