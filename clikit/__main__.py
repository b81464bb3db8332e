"""
Clikit CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import os
import sys
from pathlib import Path
from typing import Any

from rich.markup import escape

from clikit.config import loader
from clikit.console import console
from clikit.exceptions import ConfigurationError
from clikit.themes import OneColors
from clikit.utils import setup_logging


def find_clikit_config() -> Path | None:
    candidates = []
    if os.environ.get("CLIKIT_CONFIG"):
        candidates.append(Path(os.environ["CLIKIT_CONFIG"]))
    candidates.extend(
        [
            Path.cwd() / "clikit.yaml",
            Path.cwd() / "clikit.toml",
            Path.cwd() / ".clikit.yaml",
            Path.cwd() / ".clikit.toml",
        ]
    )
    return next((p for p in candidates if p.is_file()), None)


def bootstrap() -> Path | None:
    config_path = find_clikit_config()
    if config_path and str(config_path.parent) not in sys.path:
        sys.path.insert(0, str(config_path.parent))
    return config_path


def main(argv: list[str] | None = None) -> Any:
    config_path = bootstrap()
    if not config_path:
        console.print(
            f"[{OneColors.DARK_RED}]❌ No clikit schema file found.[/]\n"
            f"[{OneColors.COMMENT_GREY}]Create clikit.yaml or clikit.toml in the current "
            "directory, or point CLIKIT_CONFIG at one."
        )
        return 1

    setup_logging()
    try:
        cli = loader(config_path)
    except ConfigurationError as error:
        console.print(f"[{OneColors.DARK_RED}]❌ {escape(str(error))}")
        return 1
    return cli.execute(argv if argv is not None else sys.argv)


if __name__ == "__main__":
    sys.exit(main())
