import pytest

from clikit.action import Action
from clikit.exceptions import MissingOptionError
from clikit.option import Option
from clikit.parser import OptionParser
from clikit.prompt_utils import build_prompt_message, prompt_for_option
from clikit.types import BoolType, NumberType


def test_prompt_for_missing_required(make_reader, reporter):
    action = Action("login")
    action.option("user", "u", required=True, prompt=True, prompt_message="User name")
    reader = make_reader(["harry"])
    args = OptionParser(reader, reporter).parse(action, [])
    assert args.get("user") == "harry"
    assert reader.prompts == [("User name: ", False)]


def test_prompt_not_used_when_value_given(reader, reporter):
    action = Action("login")
    action.option("user", "u", required=True, prompt=True)
    OptionParser(reader, reporter).parse(action, ["-u=harry"])
    assert reader.prompts == []


def test_prompt_retries_until_valid(make_reader, reporter):
    action = Action("resize")
    action.option("width", "w", type=NumberType(min=10), required=True, prompt=True)
    reader = make_reader(["wide", "5", "20"])
    args = OptionParser(reader, reporter).parse(action, [])
    assert args.get("width") == 20
    assert len(reader.prompts) == 3
    assert len(reporter.messages) == 2
    assert "requires a number" in reporter.messages[0]
    assert "min=10" in reporter.messages[1]


def test_prompt_empty_answer_uses_default(make_reader, reporter):
    action = Action("resize")
    action.option("width", "w", type=NumberType(), required=True, prompt=True, default=80)
    reader = make_reader([""])
    assert OptionParser(reader, reporter).parse(action, []).get("width") == 80
    assert reader.prompts[0][0] == "Please provide --width (80): "


def test_prompt_empty_answer_without_default_asks_again(make_reader, reporter):
    option = Option("user").required().prompt()
    reader = make_reader(["", "", "harry"])
    assert prompt_for_option(option, reader, reporter) == "harry"
    assert len(reader.prompts) == 3


def test_prompt_eof_without_default(make_reader, reporter):
    option = Option("user").required().prompt()
    with pytest.raises(MissingOptionError):
        prompt_for_option(option, make_reader(), reporter)


def test_prompt_eof_with_default(make_reader, reporter):
    option = Option("user").required().prompt().default("root")
    assert prompt_for_option(option, make_reader(), reporter) == "root"


def test_prompt_eof_with_none_default(make_reader, reporter):
    option = Option("user").required().prompt().default(None)
    with pytest.raises(MissingOptionError):
        prompt_for_option(option, make_reader(), reporter)


def test_password_prompt_is_masked(make_reader, reporter):
    option = Option("password", "p").required().prompt(password=True)
    reader = make_reader(["s3cret"])
    assert prompt_for_option(option, reader, reporter) == "s3cret"
    assert reader.prompts == [("Please provide --password: ", True)]


@pytest.mark.parametrize(
    "default, hint", [(True, "[Y/n]"), (False, "[y/N]"), (None, "[y/n]")]
)
def test_bool_prompt_hints(default, hint):
    option = Option("force", "f").prompt(message="Overwrite?")
    option.set_type(BoolType(strict=False))
    if default is not None:
        option.default(default)
    assert build_prompt_message(option) == f"Overwrite? {hint}: "


def test_prompt_message_without_default():
    assert build_prompt_message(Option("user")) == "Please provide --user: "
