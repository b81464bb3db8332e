import math

import pytest

from clikit.action import Action
from clikit.exceptions import ConfigurationError, OptionConflictError, UnrecognizedOptionError
from clikit.option import Option
from clikit.types import NumberType


@pytest.fixture
def say():
    action = Action("say", "Say hello.")
    action.option("name", "n", aliases=["who"], default="John Doe")
    action.option("age", "a", type=NumberType().integer(), default=18)
    return action


@pytest.mark.parametrize("name", ["s", "-say", "say hello"])
def test_invalid_action_names(name):
    with pytest.raises(ConfigurationError):
        Action(name)


def test_action_name_allows_colon():
    assert Action("db:migrate").name == "db:migrate"


def test_options_keep_registration_order(say):
    assert list(say.options) == ["name", "age"]


def test_option_is_locked_on_add(say):
    assert say.get_option("name").locked
    with pytest.raises(ConfigurationError):
        say.get_option("name").alias("other")


def test_duplicate_name(say):
    with pytest.raises(OptionConflictError, match='option "name"'):
        say.add_option(Option("name"))


def test_duplicate_flag(say):
    with pytest.raises(OptionConflictError, match='flag "-n"'):
        say.add_option(Option("nick", "n"))


def test_duplicate_alias(say):
    with pytest.raises(OptionConflictError, match='alias "--who"'):
        say.add_option(Option("person").alias("who"))


def test_conflict_leaves_action_unchanged(say):
    with pytest.raises(OptionConflictError):
        say.add_option(Option("nick", "n"))
    assert not say.has_option("nick")
    assert say.resolve_alias("nick") is None


@pytest.mark.parametrize(
    "first, second",
    [((0, 0), (0, 2)), ((1, 3), (3, 5)), ((2, math.inf), (10, 10)), ((0, 5), (2, 3))],
)
def test_overlapping_offsets(first, second):
    action = Action("copy")
    action.add_option(Option("src").offsets(*first))
    with pytest.raises(OptionConflictError, match="offsets"):
        action.add_option(Option("dest").offsets(*second))


def test_disjoint_offsets():
    action = Action("copy")
    action.add_option(Option("src").offsets(0), Option("dest").offsets(1, math.inf))
    assert action.has_option("dest")


def test_lookup_by_any_form(say):
    assert say.get_option("name").name == "name"
    assert say.get_option("who").name == "name"
    assert say.get_option("n").name == "name"
    assert say.resolve_flag("a") == "age"
    assert say.resolve_alias("age") == "age"


def test_unknown_option(say):
    with pytest.raises(UnrecognizedOptionError, match='unrecognized option "x" for action "say"'):
        say.get_option("x")


def test_handler_decorator(say):
    @say.handler
    def run(action, args):
        return "ran"

    assert say.execution_handler is run
    with pytest.raises(ConfigurationError):
        say.handler("not callable")
