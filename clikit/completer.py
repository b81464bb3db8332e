# Clikit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `CliCompleter`, the autocompletion engine of the clikit interactive mode.

The completer follows the shape of a clikit command line:
- first token: command names plus the `quit`/`exit` built-ins,
- second token: action names of the typed command,
- following tokens: option forms (`-f`, `--alias`) of the typed action that are
  not already present on the line.

Integrated with `Cli.prompt_session`.
"""
from __future__ import annotations

import os
import shlex
from typing import TYPE_CHECKING, Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from clikit.action import Action

if TYPE_CHECKING:
    from clikit.cli import Cli

EXIT_WORDS = ("quit", "exit")


class CliCompleter(Completer):
    """
    Prompt Toolkit completer for clikit command lines.

    Args:
        cli (Cli): The application providing the command schema.
    """

    def __init__(self, cli: Cli):
        self.cli = cli

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        text = document.text_before_cursor
        try:
            tokens = shlex.split(text)
        except ValueError:
            return
        cursor_at_end_of_token = text.endswith((" ", "\t"))

        if not tokens or (len(tokens) == 1 and not cursor_at_end_of_token):
            stub = tokens[0] if tokens else ""
            names = list(self.cli.commands) + list(EXIT_WORDS)
            yield from self._yield_lcp_completions(names, stub)
            return

        command = self.cli.commands.get(tokens[0])
        if command is None:
            return

        if len(tokens) == 1 or (len(tokens) == 2 and not cursor_at_end_of_token):
            stub = "" if len(tokens) == 1 else tokens[1]
            yield from self._yield_lcp_completions(list(command.actions), stub)
            return

        action = command.actions.get(tokens[1])
        if action is None:
            return

        typed = tokens[2:] if cursor_at_end_of_token else tokens[2:-1]
        stub = "" if cursor_at_end_of_token else tokens[-1]
        if stub and not stub.startswith("-"):
            return
        if "--" in typed:
            return
        yield from self._yield_lcp_completions(self._unused_forms(action, typed), stub)

    def _unused_forms(self, action: Action, typed: list[str]) -> list[str]:
        """Return the option forms of options not yet present in `typed`."""
        used: set[str] = set()
        for token in typed:
            if token.startswith("--"):
                name = action.resolve_alias(token[2:].split("=", 1)[0])
                if name:
                    used.add(name)
            elif token.startswith("-"):
                for flag in token[1:].split("=", 1)[0]:
                    name = action.resolve_flag(flag)
                    if name:
                        used.add(name)

        forms: list[str] = []
        for option in action:
            if option.name not in used:
                forms.extend(option.forms())
        return forms

    def _ensure_quote(self, text: str) -> str:
        if " " in text or "\t" in text:
            return f'"{text}"'
        return text

    def _yield_lcp_completions(self, suggestions, stub):
        """
        Yield completions for the current stub using longest-common-prefix logic.

        - If only one match, yield it fully.
        - If multiple matches share a longer prefix, insert the prefix and also
          list all matches in the menu.
        - Otherwise list all matches individually.
        """
        matches = [s for s in suggestions if s.startswith(stub)]
        if not matches:
            return

        lcp = os.path.commonprefix(matches)

        if len(matches) == 1:
            yield Completion(
                self._ensure_quote(matches[0]),
                start_position=-len(stub),
                display=matches[0],
            )
        elif stub and len(lcp) > len(stub) and not lcp.startswith("-"):
            yield Completion(lcp, start_position=-len(stub), display=lcp)
            for match in matches:
                yield Completion(
                    self._ensure_quote(match), start_position=-len(stub), display=match
                )
        else:
            for match in matches:
                yield Completion(
                    self._ensure_quote(match), start_position=-len(stub), display=match
                )
