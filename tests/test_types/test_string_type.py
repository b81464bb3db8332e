import pytest

from clikit.exceptions import ConfigurationError, InputError
from clikit.types import StringType


def test_string_accepts_plain_text():
    assert StringType().validate("--name", "Harry") == "Harry"


def test_string_rejects_non_string():
    with pytest.raises(InputError, match="requires a string"):
        StringType().validate("--name", True)


@pytest.mark.parametrize("value", ["a", "abcdefghijk"])
def test_string_length_bounds(value):
    string = StringType(min_length=2, max_length=10)
    with pytest.raises(InputError):
        string.validate("--name", value)


def test_string_length_reasons():
    string = StringType(2, 4)
    with pytest.raises(InputError, match="at least 2"):
        string.validate("--name", "a")
    with pytest.raises(InputError, match="at most 4"):
        string.validate("--name", "abcde")


def test_string_length_counts_code_points():
    assert StringType(max_length=3).validate("-n", "été") == "été"


def test_string_pattern():
    string = StringType().pattern(r"^[a-z]+$")
    assert string.validate("--slug", "hello") == "hello"
    with pytest.raises(InputError, match="regular expression"):
        string.validate("--slug", "Hello")


def test_string_validator_callback():
    string = StringType().validator(lambda value: value.startswith("x"), "must start with x")
    assert string.validate("--code", "xyz") == "xyz"
    with pytest.raises(InputError, match="must start with x"):
        string.validate("--code", "abc")


def test_string_custom_message_template():
    string = StringType().min(3, 'option "{name}" is too short: {value}')
    with pytest.raises(InputError, match='option "--name" is too short: ab'):
        string.validate("--name", "ab")


def test_string_invalid_constraints():
    with pytest.raises(ConfigurationError):
        StringType(min_length=5, max_length=2)
    with pytest.raises(ConfigurationError):
        StringType().min(0)
    with pytest.raises(ConfigurationError):
        StringType().pattern("[unclosed")
    with pytest.raises(ConfigurationError):
        StringType().message("unknown_reason", "nope")


def test_string_locked():
    string = StringType().lock()
    with pytest.raises(ConfigurationError, match="locked"):
        string.min(1)


def test_string_str():
    assert str(StringType()) == "string"
    assert str(StringType(2, 10)) == "string[2..10]"
