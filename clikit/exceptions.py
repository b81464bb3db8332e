# Clikit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by clikit.

Two families of errors exist and they are never mixed:

- `ConfigurationError` signals a mistake in the schema written by the CLI author
  (duplicate names, overlapping offsets, bad patterns, invalid ranges...). These are
  raised while commands, actions, options and types are being built and are meant
  to abort startup.
- `InputError` signals bad input from the end user (unknown option, malformed token,
  missing required value, value rejected by a type). These are raised while parsing
  and are caught by the `Cli` dispatcher, which reports them and carries on.

Exception Hierarchy:
- ClikitError
    ├── ConfigurationError
    │   ├── CommandAlreadyExistsError
    │   ├── ActionAlreadyExistsError
    │   └── OptionConflictError
    └── InputError
        ├── UnrecognizedOptionError
        └── MissingOptionError
"""


class ClikitError(Exception):
    """Base exception for clikit."""


class ConfigurationError(ClikitError):
    """Exception raised when the CLI schema is defined incorrectly."""


class CommandAlreadyExistsError(ConfigurationError):
    """Exception raised when a command with the same name is already registered."""


class ActionAlreadyExistsError(ConfigurationError):
    """Exception raised when an action with the same name already exists in a command."""


class OptionConflictError(ConfigurationError):
    """Exception raised when an option name, flag, alias or offset range is taken."""


class InputError(ClikitError):
    """Exception raised when user input does not satisfy the CLI schema."""


class UnrecognizedOptionError(InputError):
    """Exception raised when a token names an option the action does not define."""


class MissingOptionError(InputError):
    """Exception raised when a required option received no value."""
