# Clikit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Command` class, a named group of `Action`s.

A command enforces action-name uniqueness and routes execution: the handler of
the action runs when it has one, otherwise the command-level handler receives the
call. Handlers are invoked as `handler(action, args)`.

Example:
    hello = Command("hello", "Greetings.")
    say = hello.action("say")

    @hello.handler
    def run(action, args):
        print(f"Hello {args.get('name')}!")
"""
from __future__ import annotations

import re
from typing import Any

from clikit.action import Action
from clikit.args import Args
from clikit.exceptions import ActionAlreadyExistsError, ConfigurationError, InputError
from clikit.logger import logger
from clikit.protocols import Handler

COMMAND_NAME_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9_-]+")


class Command:
    """
    A named group of actions.

    Args:
        name (str): Command name, the first argument after the program name.
        description (str): Text shown in help output.
        handler (Handler | None): Fallback handler for actions without one.
    """

    def __init__(
        self,
        name: str,
        description: str = "",
        handler: Handler | None = None,
    ):
        if not isinstance(name, str) or not COMMAND_NAME_PATTERN.fullmatch(name):
            raise ConfigurationError(f'"{name}" is not a valid command name.')
        self.name: str = name
        self.description: str = description.strip()
        self._actions: dict[str, Action] = {}
        self._handler: Handler | None = None
        if handler is not None:
            self.handler(handler)

    def add_action(self, *actions: Action) -> Command:
        for action in actions:
            if not isinstance(action, Action):
                raise ConfigurationError(f"expected an Action, got {action!r}")
            if action.name in self._actions:
                raise ActionAlreadyExistsError(
                    f'action "{action.name}" is already defined in command "{self.name}".'
                )
            self._actions[action.name] = action
        return self

    def action(
        self,
        name: str,
        description: str = "",
        handler: Handler | None = None,
    ) -> Action:
        """Create, register and return a new action."""
        action = Action(name, description, handler)
        self.add_action(action)
        return action

    def handler(self, handler: Handler) -> Handler:
        """Set the command-level handler. Usable as a decorator."""
        if not callable(handler):
            raise ConfigurationError(
                f'handler of command "{self.name}" must be callable, got {handler!r}'
            )
        self._handler = handler
        return handler

    @property
    def execution_handler(self) -> Handler | None:
        return self._handler

    @property
    def actions(self) -> dict[str, Action]:
        return dict(self._actions)

    def has_action(self, name: str) -> bool:
        return name in self._actions

    def get_action(self, name: str) -> Action:
        """
        Raises:
            InputError: If the command has no such action.
        """
        if name not in self._actions:
            raise InputError(f'{self.name}: unknown action "{name}"')
        return self._actions[name]

    def execute(self, action: Action, args: Args) -> Any:
        """
        Run the handler for a parsed action.

        Raises:
            InputError: If neither the action nor the command has a handler.
        """
        handler = action.execution_handler or self._handler
        if handler is None:
            raise InputError(
                f'no handler defined for action "{action.name}" of command "{self.name}"'
            )
        logger.info("[%s] Dispatching action '%s'.", self.name, action.name)
        return handler(action, args)

    def __iter__(self):
        return iter(self._actions.values())

    def __str__(self) -> str:
        return f"Command(name={self.name!r}, actions={list(self._actions)})"
