import os

import pytest

from clikit.exceptions import ConfigurationError, InputError
from clikit.types import PathType


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "a.py").write_text("a")
    (tmp_path / "b.py").write_text("b")
    (tmp_path / "notes.txt").write_text("n")
    (tmp_path / "sub").mkdir()
    return tmp_path


def test_path_resolves_single_file(tree):
    path = PathType().validate("--file", str(tree / "a.py"))
    assert path == (tree / "a.py").resolve()


def test_path_missing(tree):
    with pytest.raises(InputError, match="requires a valid path"):
        PathType().validate("--file", str(tree / "missing.py"))


def test_path_empty_value():
    with pytest.raises(InputError, match="requires a valid path"):
        PathType().validate("--file", "")


def test_path_file_only(tree):
    with pytest.raises(InputError, match="requires a file"):
        PathType().file().validate("--file", str(tree / "sub"))


def test_path_dir_only(tree):
    assert PathType().dir().validate("--dir", str(tree / "sub")) == (tree / "sub").resolve()
    with pytest.raises(InputError, match="requires a directory"):
        PathType().dir().validate("--dir", str(tree / "a.py"))


def test_path_glob_multiple(tree):
    paths = PathType().glob().multiple().validate("--src", str(tree / "*.py"))
    assert paths == [(tree / "a.py").resolve(), (tree / "b.py").resolve()]


def test_path_glob_single_returns_first(tree):
    path = PathType().glob().validate("--src", str(tree / "*.py"))
    assert path == (tree / "a.py").resolve()


def test_path_pattern_filter(tree):
    paths = PathType().glob().multiple().pattern(r"\.txt$").validate("--src", str(tree / "*"))
    assert paths == [(tree / "notes.txt").resolve()]
    with pytest.raises(InputError, match="regular expression"):
        PathType().glob().pattern(r"\.rs$").validate("--src", str(tree / "*"))


def test_path_glob_and_file_filter(tree):
    paths = PathType().glob().multiple().file().validate("--src", str(tree / "*"))
    assert (tree / "sub").resolve() not in paths
    assert len(paths) == 3


def test_path_count_bounds(tree):
    with pytest.raises(InputError, match="at least 3"):
        PathType(min=3).glob().multiple().validate("--src", str(tree / "*.py"))
    with pytest.raises(InputError, match="at most 1"):
        PathType(max=1).glob().multiple().validate("--src", str(tree / "*.py"))


@pytest.mark.skipif(os.geteuid() == 0, reason="root can write anywhere")
def test_path_writable(tree):
    target = tree / "a.py"
    target.chmod(0o444)
    try:
        with pytest.raises(InputError, match="writable"):
            PathType().writable().validate("--out", str(target))
    finally:
        target.chmod(0o644)


def test_path_writable_accepts_writable(tree):
    assert PathType().writable().validate("--out", str(tree / "b.py")) == (tree / "b.py").resolve()


def test_path_invalid_counts():
    with pytest.raises(ConfigurationError):
        PathType(min=3, max=2)
    with pytest.raises(ConfigurationError):
        PathType().max(0)


def test_path_str():
    assert str(PathType()) == "path"
    assert str(PathType().file().multiple()) == "file..."
