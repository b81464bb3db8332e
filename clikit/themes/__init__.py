"""
Clikit CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .colors import ColorsMeta, NordColors, OneColors, get_nord_theme

__all__ = [
    "OneColors",
    "NordColors",
    "get_nord_theme",
    "ColorsMeta",
]
