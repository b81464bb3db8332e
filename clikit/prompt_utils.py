# Clikit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Utilities for prompting the user for missing option values.

Provides the prompt loop used by the option parser when a required option with
prompting enabled received no value, plus the default terminal collaborators.

Includes:
- `build_prompt_message()` to render the prompt text with its default hint.
- `prompt_for_option()`, the "keep asking until valid" loop.
- `PromptToolkitLineReader`, a `LineReader` backed by a prompt_toolkit session
  (masked input uses `is_password=True`).
- `ConsoleReporter`, a `Reporter` printing errors through the rich console.
"""
from __future__ import annotations

from typing import Any

from prompt_toolkit import PromptSession
from rich.console import Console
from rich.markup import escape

from clikit.console import console as default_console
from clikit.exceptions import InputError, MissingOptionError
from clikit.logger import logger
from clikit.option import Option
from clikit.protocols import LineReader, Reporter
from clikit.themes import OneColors
from clikit.types import BoolType


def build_prompt_message(option: Option) -> str:
    """
    Build the prompt text for an option.

    Boolean options show their default as `[Y/n]`, `[y/N]` or `[y/n]`; other
    options show a default as `(value)`.
    """
    message = option.prompt_message
    if isinstance(option.type, BoolType):
        if option.has_default and option.default_value is True:
            hint = "[Y/n]"
        elif option.has_default and option.default_value is False:
            hint = "[y/N]"
        else:
            hint = "[y/n]"
        return f"{message} {hint}: "
    if option.has_default and option.default_value not in (None, ""):
        return f"{message} ({option.default_value}): "
    return f"{message}: "


def prompt_for_option(option: Option, reader: LineReader, reporter: Reporter) -> Any:
    """
    Ask for the value of `option` until a valid answer is given.

    - An empty answer resolves to the default, or asks again when there is none.
    - A non-empty answer is validated by the option type; an `InputError` is
      reported and the question is asked again.
    - End of input resolves to the default.

    A `None` default counts as no default.

    Raises:
        MissingOptionError: On end of input when the option has no default.
    """
    prompt = build_prompt_message(option)
    while True:
        try:
            answer = reader.read_line(prompt, option.prompt_password)
        except EOFError as error:
            if option.default_value is not None:
                return option.default_value
            raise MissingOptionError(
                f'no value provided for option "{option.name}".'
            ) from error

        if answer is None or answer == "":
            if option.default_value is not None:
                return option.default_value
            continue

        try:
            return option.validate(option.name, answer)
        except InputError as error:
            logger.debug("Rejected answer for option '%s': %s", option.name, error)
            reporter.report(str(error))


class PromptToolkitLineReader:
    """Read lines from the terminal with prompt_toolkit."""

    def __init__(self, session: PromptSession | None = None):
        self._session = session

    @property
    def session(self) -> PromptSession:
        if self._session is None:
            self._session = PromptSession()
        return self._session

    def read_line(self, prompt: str, masked: bool = False) -> str:
        return self.session.prompt(prompt, is_password=masked).strip()


class ConsoleReporter:
    """Print messages as errors on a rich console."""

    def __init__(self, console: Console | None = None):
        self.console = console or default_console

    def report(self, message: str) -> None:
        self.console.print(f"[{OneColors.DARK_RED}]❌ {escape(message)}")
