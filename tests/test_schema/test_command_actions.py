import pytest

from clikit.action import Action
from clikit.args import Args
from clikit.command import Command
from clikit.exceptions import ActionAlreadyExistsError, ConfigurationError, InputError
from clikit.protocols import Handler


def test_invalid_command_name():
    with pytest.raises(ConfigurationError):
        Command("h")
    with pytest.raises(ConfigurationError):
        Command("db:migrate")


def test_duplicate_action():
    hello = Command("hello")
    hello.action("say")
    with pytest.raises(ActionAlreadyExistsError):
        hello.add_action(Action("say"))


def test_unknown_action():
    hello = Command("hello")
    with pytest.raises(InputError, match='hello: unknown action "talk"'):
        hello.get_action("talk")


def test_action_handler_runs_first():
    calls = []
    hello = Command("hello", handler=lambda action, args: calls.append("command"))
    say = hello.action("say", handler=lambda action, args: calls.append("action"))
    hello.execute(say, Args(say))
    assert calls == ["action"]


def test_command_handler_is_fallback():
    calls = []
    hello = Command("hello")
    say = hello.action("say")

    @hello.handler
    def run(action, args):
        calls.append(action.name)

    hello.execute(say, Args(say))
    assert calls == ["say"]


def test_no_handler():
    hello = Command("hello")
    say = hello.action("say")
    with pytest.raises(InputError, match="no handler"):
        hello.execute(say, Args(say))


def test_handlers_satisfy_handler_protocol():
    def run(action, args):
        return action.name

    hello = Command("hello", handler=run)
    say = hello.action("say", handler=run)
    assert isinstance(hello.execution_handler, Handler)
    assert isinstance(say.execution_handler, Handler)
    assert hello.execute(say, Args(say, {}, ())) == "say"
