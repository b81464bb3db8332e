# Clikit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for clikit applications."""
from rich.console import Console

from clikit.themes import get_nord_theme

console = Console(color_system="auto", theme=get_nord_theme())
