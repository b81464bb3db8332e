"""
Clikit CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .option_parser import OptionParser
from .parser_types import ScanState

__all__ = [
    "OptionParser",
    "ScanState",
]
