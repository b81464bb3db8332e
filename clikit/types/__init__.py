"""
Clikit CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .base_type import BaseType
from .bool_type import BoolType
from .number_type import NumberType
from .path_type import PathType
from .string_type import StringType

TYPE_KINDS: dict[str, type[BaseType]] = {
    StringType.kind: StringType,
    NumberType.kind: NumberType,
    BoolType.kind: BoolType,
    PathType.kind: PathType,
}

__all__ = [
    "BaseType",
    "BoolType",
    "NumberType",
    "PathType",
    "StringType",
    "TYPE_KINDS",
]
