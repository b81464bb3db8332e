# Clikit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Main class for registering commands and dispatching command lines.

`Cli` owns the command tree and routes an argument vector to the right action:

    prog                          interactive mode (when enabled) or help
    prog --help | -?              full help
    prog command                  list the actions of a command
    prog command --help | -?      command help
    prog command action --help    action help
    prog command action [tokens]  parse tokens, then run the handler

User input errors (`InputError`) are printed in the error colour and turn into
exit status 1; schema errors (`ConfigurationError`) propagate.

`Cli` is also the line reader and the reporter of its `OptionParser`, so option
prompts and their validation errors go through the same terminal as the rest of
the application.

Example:
    cli = Cli("demo")
    hello = cli.command("hello", "Say hello.")
    say = hello.action("say")
    say.option("name", "n", default="John Doe")

    @say.handler
    def run_say(action, args):
        print(f"Hello {args.get('name')}!")

    cli.run()
"""
from __future__ import annotations

import sys
from typing import Any, NoReturn, Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.table import Table

from clikit.action import Action
from clikit.command import Command
from clikit.completer import CliCompleter
from clikit.console import console as default_console
from clikit.exceptions import CommandAlreadyExistsError, ConfigurationError, InputError
from clikit.logger import logger
from clikit.option import Option
from clikit.parser import OptionParser
from clikit.prompt_utils import ConsoleReporter, PromptToolkitLineReader
from clikit.protocols import Handler, LineReader
from clikit.signals import QuitSignal
from clikit.themes import OneColors
from clikit.utils import get_program_invocation, split_command_line

HELP_TOKENS = ("--help", "-?")
EXIT_WORDS = ("quit", "exit")


class Cli:
    """
    Command registry, dispatcher and interactive shell.

    Args:
        title (str): Name shown in help and in the interactive prompt. Defaults to
            the program name.
        program (str | None): Program name used in usage lines and prepended to
            interactive input. Detected from `sys.argv[0]` when omitted.
        interactive (bool): Enter interactive mode when run without arguments.
        console (Console | None): Rich console for all output.
        reader (LineReader | None): Line source for option prompts and, when
            given, for the interactive loop. Defaults to prompt_toolkit.
        welcome_message (str | Markdown | dict): Printed when interactive mode starts.
        exit_message (str | Markdown | dict): Printed when interactive mode stops.
        prompt (str | None): Interactive prompt, `"<title>> "` by default.
    """

    def __init__(
        self,
        title: str = "",
        *,
        program: str | None = None,
        interactive: bool = False,
        console: Console | None = None,
        reader: LineReader | None = None,
        welcome_message: str | Markdown | dict[str, Any] = "",
        exit_message: str | Markdown | dict[str, Any] = "",
        prompt: str | None = None,
    ) -> None:
        self.program: str = program or get_program_invocation()
        self.title: str = title or self.program
        self.interactive: bool = interactive
        self.console: Console = console or default_console
        self.welcome_message = welcome_message
        self.exit_message = exit_message
        self.prompt: str = prompt if prompt is not None else f"{self.title}> "
        self._custom_reader: LineReader | None = reader
        self._reader: LineReader = reader or PromptToolkitLineReader()
        self._commands: dict[str, Command] = {}
        self._is_interactive: bool = False
        self._prompt_session: PromptSession | None = None
        self.parser = OptionParser(reader=self, reporter=self)

    @property
    def commands(self) -> dict[str, Command]:
        return dict(self._commands)

    @property
    def is_interactive(self) -> bool:
        return self._is_interactive

    def add_command(self, *commands: Command) -> Cli:
        for command in commands:
            if not isinstance(command, Command):
                raise ConfigurationError(f"expected a Command, got {command!r}")
            if command.name in self._commands:
                raise CommandAlreadyExistsError(
                    f'command "{command.name}" is already defined.'
                )
            self._commands[command.name] = command
        return self

    def command(
        self,
        name: str,
        description: str = "",
        handler: Handler | None = None,
    ) -> Command:
        """Create, register and return a new command."""
        command = Command(name, description, handler)
        self.add_command(command)
        return command

    def has_command(self, name: str) -> bool:
        return name in self._commands

    def get_command(self, name: str) -> Command:
        """
        Raises:
            InputError: If no command has this name.
        """
        if name not in self._commands:
            raise InputError(f"unknown command: {name}")
        return self._commands[name]

    def read_line(self, prompt: str, masked: bool = False) -> str:
        """Read one line of input, without echo when `masked`."""
        return self._reader.read_line(prompt, masked)

    def report(self, message: str) -> None:
        """Print an error message."""
        ConsoleReporter(self.console).report(message)

    def print_message(self, message: str | Markdown | dict[str, Any]) -> None:
        """Prints a message to the console."""
        if isinstance(message, (str, Markdown)):
            self.console.print(message)
        elif isinstance(message, dict):
            self.console.print(
                *message.get("args", tuple()),
                **message.get("kwargs", {}),
            )
        else:
            raise TypeError(
                "Message must be a string, Markdown, or dictionary with args and kwargs."
            )

    def execute(self, argv: Sequence[str]) -> int:
        """
        Dispatch an argument vector. `argv[0]` is the program name.

        Returns:
            int: 0 on success, 1 when an input error was reported.
        """
        try:
            self._dispatch(list(argv)[1:])
        except InputError as error:
            self.report(str(error))
            return 1
        return 0

    def execute_string(self, line: str) -> int:
        """Dispatch a command line typed after the program name."""
        try:
            tokens = split_command_line(line)
        except InputError as error:
            self.report(str(error))
            return 1
        return self.execute([self.program, *tokens])

    def run(self, argv: Sequence[str] | None = None) -> NoReturn:
        """Dispatch `argv` (default `sys.argv`) and exit with its status."""
        try:
            status = self.execute(sys.argv if argv is None else argv)
        except QuitSignal:
            status = 0
        sys.exit(status)

    def _dispatch(self, tokens: list[str]) -> None:
        if not tokens:
            if self.interactive and not self._is_interactive:
                self.interactive_mode()
            else:
                self.render_help()
            return

        if tokens[0] in HELP_TOKENS:
            self.render_help()
            return

        command = self.get_command(tokens[0])
        if len(tokens) == 1:
            self.console.print(
                f'actions available for the command "{command.name}": '
                f"{escape(', '.join(command.actions)) or '(none)'}"
            )
            return

        if tokens[1] in HELP_TOKENS:
            self.render_help(command.name)
            return

        action = command.get_action(tokens[1])
        if len(tokens) > 2 and tokens[2] in HELP_TOKENS:
            self.render_help(command.name, action.name)
            return

        args = self.parser.parse(action, tokens[2:])
        command.execute(action, args)

    @property
    def prompt_session(self) -> PromptSession:
        """Returns the prompt session of the interactive mode."""
        if self._prompt_session is None:
            self._prompt_session = PromptSession(
                message=self.prompt,
                history=InMemoryHistory(),
                multiline=False,
                completer=CliCompleter(self),
                interrupt_exception=QuitSignal,
                eof_exception=QuitSignal,
            )
        return self._prompt_session

    def _read_command_line(self) -> str:
        if self._custom_reader is None:
            return self.prompt_session.prompt()
        try:
            return self._custom_reader.read_line(self.prompt)
        except (EOFError, KeyboardInterrupt) as error:
            raise QuitSignal() from error

    def interactive_mode(self) -> None:
        """
        Run command lines typed by the user until `quit`, `exit` or EOF.

        Ctrl-C while a command runs (for example at an option prompt) cancels
        that command only.
        """
        if self._is_interactive:
            return
        self._is_interactive = True
        logger.info("Starting interactive mode: %s", self.title)
        if self.welcome_message:
            self.print_message(self.welcome_message)
        self.console.print(
            f'[{OneColors.COMMENT_GREY}]Hint: type "quit" or "exit" to stop.'
        )
        try:
            while True:
                try:
                    line = self._read_command_line().strip()
                    if not line:
                        continue
                    if line in EXIT_WORDS:
                        break
                    self.execute_string(line)
                except KeyboardInterrupt:
                    logger.info("Command interrupted in interactive mode.")
                    self.console.print(f"[{OneColors.DARK_YELLOW}]⚠️ Command cancelled.")
                except QuitSignal:
                    logger.info("[QuitSignal]. <- Exiting interactive mode.")
                    break
        finally:
            self._is_interactive = False
            logger.info("Exiting interactive mode: %s", self.title)
            if self.exit_message:
                self.print_message(self.exit_message)

    def render_help(
        self, command_name: str | None = None, action_name: str | None = None
    ) -> None:
        """Print usage, then the commands, actions and options selected."""
        program = escape(self.program)
        self.console.print(f"[{OneColors.CYAN_b}]{escape(self.title)}")
        self.console.print(
            f"[bold]Usage:[/bold]\n"
            f"  > {program} command action \\[options]\n"
            f"For interactive mode.\n"
            f"  > {program}\n"
            f"To show help message.\n"
            f"  > {program} \\[command \\[action]] -? or --help\n"
        )

        if command_name is None:
            for command in self._commands.values():
                self._render_command(command)
            return

        command = self.get_command(command_name)
        if action_name is None:
            self._render_command(command)
        else:
            self._render_action(command, command.get_action(action_name))

    def _render_command(self, command: Command) -> None:
        self.console.print(
            f"[{OneColors.GREEN_b}]{escape(command.name)}"
            + (f"  [{OneColors.WHITE}]{escape(command.description)}" if command.description else "")
        )
        for action in command:
            self._render_action(command, action)
        self.console.print()

    def _render_action(self, command: Command, action: Action) -> None:
        self.console.print(
            f"  [{OneColors.BLUE_b}]{escape(command.name)} {escape(action.name)}"
            + (f"  [{OneColors.WHITE}]{escape(action.description)}" if action.description else "")
        )
        if not len(action):
            return
        grid = Table.grid(padding=(0, 2))
        grid.add_column(no_wrap=True)
        grid.add_column(no_wrap=True, style=OneColors.LIGHT_YELLOW)
        grid.add_column()
        for option in action:
            grid.add_row(
                f"    {escape(', '.join(option.forms()))}",
                escape(str(option.type)),
                escape(self._option_summary(option)),
            )
        self.console.print(grid)

    def _option_summary(self, option: Option) -> str:
        parts = []
        if option.description:
            parts.append(option.description)
        if option.is_required:
            parts.append("(required)")
        if option.has_default:
            parts.append(f"(default: {option.default_value})")
        if option.offset_range is not None:
            at, to = option.offset_range
            parts.append(f"(offset: {at})" if at == to else f"(offsets: {at}..{to})")
        return " ".join(parts)
