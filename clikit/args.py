# Clikit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Args`, the immutable result of a successful parse.

`Args` holds the validated values keyed by canonical option name and the
anonymous arguments left over after offset binding (including everything after a
bare `--`). Values are read with `get()`, which accepts any form of an option
(name, alias or flag) and resolves it through the owning `Action`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping

if TYPE_CHECKING:
    from clikit.action import Action


@dataclass(frozen=True)
class Args:
    """
    Parsed arguments of an action.

    Attributes:
        action (Action): The action the arguments were parsed for.
        named (Mapping[str, Any]): Read-only map of option name to value.
        anonymous (tuple[str, ...]): Remaining anonymous arguments, in order.
    """

    action: Action
    named: Mapping[str, Any] = field(default_factory=dict)
    anonymous: tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "named", MappingProxyType(dict(self.named)))
        object.__setattr__(self, "anonymous", tuple(self.anonymous))

    def get(self, name: str) -> Any:
        """
        Return the value of an option by name, alias or flag.

        Raises:
            UnrecognizedOptionError: If the action has no such option.
        """
        option = self.action.get_option(name)
        return self.named.get(option.name)

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def anonymous_at(self, index: int, default: Any = None) -> Any:
        if 0 <= index < len(self.anonymous):
            return self.anonymous[index]
        return default

    def to_dict(self) -> dict[str, Any]:
        return dict(self.named)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Args):
            return NotImplemented
        return (
            self.action is other.action
            and dict(self.named) == dict(other.named)
            and self.anonymous == other.anonymous
        )

    def __hash__(self) -> int:
        return hash((id(self.action), self.anonymous))

    def __repr__(self) -> str:
        return f"Args(action={self.action.name!r}, named={dict(self.named)!r}, anonymous={list(self.anonymous)!r})"
