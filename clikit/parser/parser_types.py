# Clikit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
State model shared by the stages of `OptionParser`.

`ScanState` collects what the tokenizer found: raw values keyed by canonical
option name, the form the user typed for each of them, and the anonymous
arguments keyed by their original position. Positions are kept sparse so that
binding one option never shifts the offsets seen by another.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ScanState:
    """Working state of one parse."""

    raw: dict[str, Any] = field(default_factory=dict)
    presented: dict[str, str] = field(default_factory=dict)
    anonymous: dict[int, str] = field(default_factory=dict)
    next_position: int = 0
    stop_parsing: bool = False

    def set_value(self, name: str, value: Any, presented: str) -> None:
        """Store a raw value. A later occurrence of the same option wins."""
        self.raw[name] = value
        self.presented[name] = presented

    def add_anonymous(self, token: str) -> None:
        self.anonymous[self.next_position] = token
        self.next_position += 1

    def take_anonymous(self, position: int) -> str:
        return self.anonymous.pop(position)

    def remaining_anonymous(self) -> list[str]:
        return [self.anonymous[position] for position in sorted(self.anonymous)]
