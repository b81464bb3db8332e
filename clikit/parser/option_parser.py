# Clikit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionParser`, the parser turning an argument list into an `Args` bundle.

Parsing an action's tokens runs three stages:

1. Scan: tokens are read left to right.
   - `--` stops option parsing; every following token is anonymous.
   - `--name` sets the option to `True`; `--name=value` sets it to `value`
     (the name must be at least two characters long). The name may be an
     alias or the canonical option name.
   - `-f` sets the flag to `True`; `-f=value` sets it to `value` (exactly one
     character before `=`); `-fgh` sets each of `f`, `g` and `h` to `True`.
   - anything else is an anonymous argument.
2. Offset binding: every option with an offset binding that received no
   explicit value claims anonymous arguments by position, in registration
   order. A single offset takes one argument; a range collects the contiguous
   arguments from `at` to `to` into a list.
3. Resolution: every option of the action, in registration order, is resolved:
   - a bound raw value is validated by the option type, reported under the form
     the user typed (`--name`, `-n`) when there is one;
   - a missing required option is prompted for when prompting is enabled,
     else falls back to its default, else raises `MissingOptionError`;
   - a missing optional option takes its default (option-level first, then
     type-level, else `None`).

Unknown or malformed option tokens raise `UnrecognizedOptionError`. The parser
holds no state between calls, so parsing the same tokens twice yields equal
`Args`.

Example:
    parser = OptionParser()
    args = parser.parse(say, ["--name=Harry", "-a=25"])
    args.get("name")  # "Harry"
"""
from __future__ import annotations

from typing import Any, Sequence

from clikit.action import Action
from clikit.args import Args
from clikit.exceptions import MissingOptionError, UnrecognizedOptionError
from clikit.logger import logger
from clikit.option import Option
from clikit.parser.parser_types import ScanState
from clikit.prompt_utils import ConsoleReporter, PromptToolkitLineReader, prompt_for_option
from clikit.protocols import LineReader, Reporter

STOP_PARSING = "--"


class OptionParser:
    """
    Parse argument lists against an action schema.

    Args:
        reader (LineReader | None): Source of prompt answers. Defaults to a
            prompt_toolkit session.
        reporter (Reporter | None): Sink for errors raised while prompting.
            Defaults to the shared rich console.
    """

    def __init__(
        self,
        reader: LineReader | None = None,
        reporter: Reporter | None = None,
    ):
        self.reader: LineReader = reader or PromptToolkitLineReader()
        self.reporter: Reporter = reporter or ConsoleReporter()

    def parse(self, action: Action, tokens: Sequence[str]) -> Args:
        """
        Parse `tokens` (everything after `command action`) for `action`.

        Returns:
            Args: The validated values and remaining anonymous arguments.

        Raises:
            InputError: On unknown or malformed options, values rejected by a
                type, or missing required options.
        """
        state = self.scan(action, tokens)
        self.bind_offsets(action, state)
        named = self.resolve(action, state)
        anonymous = state.remaining_anonymous()
        logger.debug(
            "[%s] Parsed named=%s anonymous=%s", action.name, named, anonymous
        )
        return Args(action, named, tuple(anonymous))

    def scan(self, action: Action, tokens: Sequence[str]) -> ScanState:
        """Split tokens into raw option values and anonymous arguments."""
        state = ScanState()
        for token in tokens:
            if state.stop_parsing:
                state.add_anonymous(token)
            elif token == STOP_PARSING:
                state.stop_parsing = True
            elif token.startswith("--"):
                self._scan_long(action, token, state)
            elif token.startswith("-"):
                self._scan_short(action, token, state)
            else:
                state.add_anonymous(token)
        return state

    def _scan_long(self, action: Action, token: str, state: ScanState) -> None:
        body = token[2:]
        value: Any = True
        if "=" in body:
            position = body.index("=")
            if position < 2:
                raise UnrecognizedOptionError(f'invalid option: "{token[:position + 2]}"')
            body, value = body[:position], body[position + 1 :]

        name = action.resolve_alias(body)
        if name is None:
            raise UnrecognizedOptionError(
                f'unrecognized option "{body}" for action "{action.name}"'
            )
        state.set_value(name, value, f"--{body}")

    def _scan_short(self, action: Action, token: str, state: ScanState) -> None:
        if "=" in token:
            position = token.index("=")
            if position != 2:
                raise UnrecognizedOptionError(f'invalid option: "{token[:position]}"')
            flag = token[1]
            state.set_value(self._flag_name(action, flag), token[3:], f"-{flag}")
            return

        flags = token[1:]
        if not flags:
            raise UnrecognizedOptionError(f'invalid option: "{token}"')
        for flag in flags:
            state.set_value(self._flag_name(action, flag), True, f"-{flag}")

    def _flag_name(self, action: Action, flag: str) -> str:
        name = action.resolve_flag(flag)
        if name is None:
            raise UnrecognizedOptionError(
                f'unrecognized option "{flag}" for action "{action.name}"'
            )
        return name

    def bind_offsets(self, action: Action, state: ScanState) -> None:
        """Assign anonymous arguments to offset-bound options without a value."""
        if not state.anonymous:
            return
        for option in action:
            if option.name in state.raw or option.offset_range is None:
                continue
            at, to = option.offset_range
            if at == to:
                if at in state.anonymous:
                    state.raw[option.name] = state.take_anonymous(at)
                    logger.debug(
                        "[%s] Bound offset %d to option '%s'.",
                        action.name,
                        at,
                        option.name,
                    )
                continue

            values = []
            position = at
            while position <= to and position in state.anonymous:
                values.append(state.take_anonymous(position))
                position += 1
            if values:
                state.raw[option.name] = values
                logger.debug(
                    "[%s] Bound offsets %d..%d to option '%s'.",
                    action.name,
                    at,
                    position - 1,
                    option.name,
                )

    def resolve(self, action: Action, state: ScanState) -> dict[str, Any]:
        """Validate, prompt for or default every option of the action."""
        named: dict[str, Any] = {}
        for option in action:
            if option.name in state.raw:
                presented = state.presented.get(option.name, option.name)
                named[option.name] = option.validate(presented, state.raw[option.name])
            elif option.is_required:
                named[option.name] = self._resolve_required(action, option)
            else:
                named[option.name] = option.default_value
        return named

    def _resolve_required(self, action: Action, option: Option) -> Any:
        if option.prompt_enabled:
            return prompt_for_option(option, self.reader, self.reporter)
        if option.default_value is not None:
            logger.debug(
                "[%s] Using default for required option '%s'.", action.name, option.name
            )
            return option.default_value
        raise MissingOptionError(f'"{action.name}" requires option: --{option.name}')
