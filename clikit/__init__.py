"""
Clikit CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .action import Action
from .args import Args
from .cli import Cli
from .command import Command
from .exceptions import (
    ActionAlreadyExistsError,
    ClikitError,
    CommandAlreadyExistsError,
    ConfigurationError,
    InputError,
    MissingOptionError,
    OptionConflictError,
    UnrecognizedOptionError,
)
from .option import Option
from .parser import OptionParser
from .table import Table, TableFormatter
from .types import BoolType, NumberType, PathType, StringType
from .version import __version__

__all__ = [
    "Action",
    "ActionAlreadyExistsError",
    "Args",
    "BoolType",
    "Cli",
    "ClikitError",
    "Command",
    "CommandAlreadyExistsError",
    "ConfigurationError",
    "InputError",
    "MissingOptionError",
    "NumberType",
    "Option",
    "OptionConflictError",
    "OptionParser",
    "PathType",
    "StringType",
    "Table",
    "TableFormatter",
    "UnrecognizedOptionError",
    "__version__",
]
