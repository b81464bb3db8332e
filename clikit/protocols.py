# Clikit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines structural protocols for the collaborators of the clikit parser.

These runtime-checkable `Protocol` classes specify the narrow interfaces the
option parser and the dispatcher rely on, so a terminal, a test double or a
whole `Cli` can be plugged in without a common base class.

Protocols:
- LineReader: Reads one line of text, optionally without echoing it.
- Reporter: Surfaces a message (typically a validation error) to the user.
- Handler: Executes a parsed action.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from clikit.action import Action
    from clikit.args import Args


@runtime_checkable
class LineReader(Protocol):
    def read_line(self, prompt: str, masked: bool = False) -> str: ...


@runtime_checkable
class Reporter(Protocol):
    def report(self, message: str) -> None: ...


@runtime_checkable
class Handler(Protocol):
    def __call__(self, action: Action, args: Args) -> Any: ...
