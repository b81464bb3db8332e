# Clikit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `PathType`, the clikit type for filesystem paths.

Validation runs in fixed stages, each one raising `InputError` with its own reason
when it leaves nothing behind:

1. resolve the raw string: a single existing path resolved with
   `Path.resolve()`, or every match of `glob.glob()` when `glob()` is enabled
   (`require_valid_path`);
2. keep paths matching the regular expression, if any (`pattern_check_fails`);
3. keep directories when `dir()` was requested (`require_dir_path`);
4. keep regular files when `file()` was requested (`require_file_path`);
5. keep writable paths when `writable()` was requested (`require_writable_path`);
6. enforce the minimum (default 1) and maximum path counts
   (`path_count_lt_min`, `path_count_gt_max`).

A single `Path` is returned unless `multiple()` was requested, in which case the
whole filtered list is returned.

Template fields: `name` and `value` for every reason, plus `min`/`max` and
`count` for the count reasons.
"""
from __future__ import annotations

import glob
import os
import re
from pathlib import Path
from typing import Any

from clikit.exceptions import ConfigurationError
from clikit.types.base_type import BaseType
from clikit.types.string_type import check_count, compile_pattern


class PathType(BaseType):
    """
    Filesystem path value.

    Args:
        min (int | None): Minimum number of resolved paths (default 1).
        max (int | None): Maximum number of resolved paths.

    Example:
        PathType().glob().multiple().file().pattern(r"\\.py$")
    """

    kind = "path"
    error_messages = {
        "require_valid_path": 'option "{name}" requires a valid path.',
        "require_writable_path": 'option "{name}" requires a writable path.',
        "require_file_path": 'option "{name}" requires a file.',
        "require_dir_path": 'option "{name}" requires a directory.',
        "path_count_lt_min": 'option "{name}" requires at least {min} path(s) (found={count}).',
        "path_count_gt_max": 'option "{name}" accepts at most {max} path(s) (found={count}).',
        "pattern_check_fails": '"{value}" fails on regular expression for option "{name}".',
    }

    def __init__(self, min: int | None = None, max: int | None = None):
        super().__init__()
        self._min: int = 1
        self._max: int | None = None
        self._multiple: bool = False
        self._glob: bool = False
        self._accept_file: bool = True
        self._accept_dir: bool = True
        self._writable: bool = False
        self._pattern: re.Pattern | None = None
        if min is not None:
            self.min(min)
        if max is not None:
            self.max(max)

    def min(self, value: int, message: str | None = None) -> PathType:
        """Set the minimum number of paths."""
        self._ensure_unlocked()
        check_count(value, "minimum path count")
        if self._max is not None and value > self._max:
            raise ConfigurationError(
                f"min={value} and max={self._max} is not a valid condition."
            )
        self._min = value
        self._set_message("path_count_lt_min", message)
        return self

    def max(self, value: int, message: str | None = None) -> PathType:
        """Set the maximum number of paths."""
        self._ensure_unlocked()
        check_count(value, "maximum path count")
        if value < self._min:
            raise ConfigurationError(
                f"min={self._min} and max={value} is not a valid condition."
            )
        self._max = value
        self._set_message("path_count_gt_max", message)
        return self

    def pattern(self, pattern: str | re.Pattern, message: str | None = None) -> PathType:
        """Only keep paths matching a regular expression."""
        self._ensure_unlocked()
        self._pattern = compile_pattern(pattern)
        self._set_message("pattern_check_fails", message)
        return self

    def multiple(self) -> PathType:
        """Return every matching path instead of the first one."""
        self._ensure_unlocked()
        self._multiple = True
        return self

    def glob(self) -> PathType:
        """Expand the raw value as a glob pattern."""
        self._ensure_unlocked()
        self._glob = True
        return self

    def file(self, message: str | None = None) -> PathType:
        """Accept regular files only."""
        self._ensure_unlocked()
        self._accept_file = True
        self._accept_dir = False
        self._set_message("require_file_path", message)
        return self

    def dir(self, message: str | None = None) -> PathType:
        """Accept directories only."""
        self._ensure_unlocked()
        self._accept_file = False
        self._accept_dir = True
        self._set_message("require_dir_path", message)
        return self

    def writable(self, message: str | None = None) -> PathType:
        """Accept writable paths only."""
        self._ensure_unlocked()
        self._writable = True
        self._set_message("require_writable_path", message)
        return self

    @property
    def is_multiple(self) -> bool:
        return self._multiple

    def _resolve(self, value: str) -> list[Path]:
        if not value:
            return []
        if self._glob:
            matches = sorted(glob.glob(os.path.expanduser(value)))
            return [Path(match).resolve() for match in matches]
        path = Path(value).expanduser()
        if not path.exists():
            return []
        return [path.resolve()]

    def validate(self, name: str, value: Any) -> Path | list[Path]:
        if isinstance(value, Path):
            value = str(value)
        if not isinstance(value, str):
            self._fail("require_valid_path", name=name, value=value)

        paths = self._resolve(value)
        if not paths:
            self._fail("require_valid_path", name=name, value=value)

        if self._pattern is not None:
            paths = [path for path in paths if self._pattern.search(str(path))]
            if not paths:
                self._fail("pattern_check_fails", name=name, value=value)

        if not self._accept_file:
            paths = [path for path in paths if path.is_dir()]
            if not paths:
                self._fail("require_dir_path", name=name, value=value)

        if not self._accept_dir:
            paths = [path for path in paths if path.is_file()]
            if not paths:
                self._fail("require_file_path", name=name, value=value)

        if self._writable:
            paths = [path for path in paths if os.access(path, os.W_OK)]
            if not paths:
                self._fail("require_writable_path", name=name, value=value)

        count = len(paths)
        if count < self._min:
            self._fail(
                "path_count_lt_min", name=name, value=value, min=self._min, count=count
            )
        if self._max is not None and count > self._max:
            self._fail(
                "path_count_gt_max", name=name, value=value, max=self._max, count=count
            )

        return paths if self._multiple else paths[0]

    def __str__(self) -> str:
        if not self._accept_file:
            kind = "dir"
        elif not self._accept_dir:
            kind = "file"
        else:
            kind = self.kind
        return f"{kind}..." if self._multiple else kind
