import math

import pytest

from clikit.action import Action
from clikit.exceptions import InputError
from clikit.option import Option
from clikit.parser import OptionParser
from clikit.types import NumberType


def test_range_binding():
    action = Action("copy")
    action.add_option(Option("files").offsets(0, 1))
    args = OptionParser().parse(action, ["a", "b", "c"])
    assert args.get("files") == ["a", "b"]
    assert args.anonymous == ("c",)


def test_single_binding():
    action = Action("copy")
    action.add_option(Option("dest").offsets(1))
    args = OptionParser().parse(action, ["a", "b"])
    assert args.get("dest") == "b"
    assert args.anonymous == ("a",)


def test_bindings_follow_registration_order_without_shifting():
    action = Action("copy")
    action.add_option(Option("dest").offsets(2))
    action.add_option(Option("src").offsets(0, 1))
    args = OptionParser().parse(action, ["a", "b", "c", "d"])
    assert args.get("dest") == "c"
    assert args.get("src") == ["a", "b"]
    assert args.anonymous == ("d",)


def test_unbounded_range():
    action = Action("cat")
    action.add_option(Option("first").offsets(0))
    action.add_option(Option("rest").offsets(1, math.inf))
    args = OptionParser().parse(action, ["a", "b", "c", "d"])
    assert args.get("first") == "a"
    assert args.get("rest") == ["b", "c", "d"]
    assert args.anonymous == ()


def test_explicit_value_skips_binding():
    action = Action("copy")
    action.add_option(Option("dest", "d").offsets(0))
    args = OptionParser().parse(action, ["-d=x", "a"])
    assert args.get("dest") == "x"
    assert args.anonymous == ("a",)


def test_missing_offset_uses_default():
    action = Action("copy")
    action.add_option(Option("dest").offsets(3).default("out"))
    args = OptionParser().parse(action, ["a"])
    assert args.get("dest") == "out"
    assert args.anonymous == ("a",)


def test_range_values_are_validated_elementwise():
    action = Action("sum")
    numbers = Option("numbers").offsets(0, math.inf)
    numbers.number().integer()
    action.add_option(numbers)
    args = OptionParser().parse(action, ["1", "2", "3"])
    assert args.get("numbers") == [1, 2, 3]


def test_offsets_include_tokens_after_stop():
    action = Action("run")
    action.add_option(Option("script").offsets(0))
    args = OptionParser().parse(action, ["--", "-x", "y"])
    assert args.get("script") == "-x"
    assert args.anonymous == ("y",)


def test_offset_value_type_error_uses_option_name():
    action = Action("sleep")
    action.add_option(Option("seconds").offsets(0).set_type(NumberType()))
    with pytest.raises(InputError, match='option "seconds" requires a number'):
        OptionParser().parse(action, ["soon"])
