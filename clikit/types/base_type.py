# Clikit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Core base class for every clikit option type.

A type owns the constraints of one option value (length, range, pattern, path
filters...) together with an optional type-level default, and exposes a single
runtime entry point:

    validate(name, value) -> cleaned value

`name` is the option form presented to the user (`--name`, `-n` or the canonical
option name) and is only used to build error messages. Invalid input raises
`InputError`; invalid constraints raise `ConfigurationError` at build time.

Constraints are configured through fluent builder methods that return the type
itself. Once the owning `Option` is added to an `Action` the type is locked and
every further builder call raises `ConfigurationError`.

Error messages are `str.format` templates keyed by failure reason. Subclasses
declare their templates in `error_messages`; each builder accepts an optional
`message` to override the template of the reason it introduces, and `message()`
overrides any of them. Templates may use `{name}`, `{value}` and the
reason-specific fields documented by each type.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, NoReturn

from clikit.exceptions import ConfigurationError, InputError


class BaseType(ABC):
    """
    Base class for option value types.

    Attributes:
        kind (str): Short name of the type used in help output and schema files.
        error_messages (dict[str, str]): Default error templates keyed by reason.
    """

    kind: str = "value"
    error_messages: dict[str, str] = {}

    def __init__(self) -> None:
        self._messages: dict[str, str] = dict(self.error_messages)
        self._default: Any = None
        self._has_default: bool = False
        self._locked: bool = False

    @abstractmethod
    def validate(self, name: str, value: Any) -> Any:
        """
        Validate a raw value and return the cleaned value.

        Args:
            name (str): The option form to mention in error messages.
            value (Any): The raw value (a string, `True` for bare flags, or a
                value already typed by the caller).

        Returns:
            Any: The cleaned value.

        Raises:
            InputError: If the value does not satisfy the type constraints.
        """

    def default(self, value: Any) -> BaseType:
        """Set the type-level default, used when the option has none of its own."""
        self._ensure_unlocked()
        self._default = value
        self._has_default = True
        return self

    @property
    def default_value(self) -> Any:
        return self._default

    @property
    def has_default(self) -> bool:
        return self._has_default

    def message(self, reason: str, message: str) -> BaseType:
        """Override the error message template used for `reason`."""
        self._ensure_unlocked()
        if reason not in self._messages:
            raise ConfigurationError(
                f"unknown error reason '{reason}' for {self.kind} type, "
                f"expected one of: {', '.join(sorted(self._messages))}"
            )
        self._set_message(reason, message)
        return self

    def lock(self) -> BaseType:
        """Freeze the constraints of this type."""
        self._locked = True
        return self

    @property
    def locked(self) -> bool:
        return self._locked

    def _set_message(self, reason: str, message: str | None) -> None:
        if message is None:
            return
        if not isinstance(message, str) or not message.strip():
            raise ConfigurationError(
                f"error message for '{reason}' must be a non-empty string"
            )
        self._messages[reason] = message

    def _ensure_unlocked(self) -> None:
        if self._locked:
            raise ConfigurationError(
                f"can't change {self.kind} type constraints, option is locked."
            )

    def _fail(self, reason: str, **fields: Any) -> NoReturn:
        raise InputError(self._messages[reason].format(**fields))

    def __str__(self) -> str:
        return self.kind

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"
