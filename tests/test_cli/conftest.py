import io

import pytest
from rich.console import Console

from clikit.cli import Cli
from clikit.themes import get_nord_theme
from clikit.types import NumberType


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def console(output):
    return Console(file=output, width=120, color_system=None, theme=get_nord_theme())


@pytest.fixture
def build_cli(console, make_reader):
    def build(answers=(), **kwargs):
        greetings = []
        cli = Cli("demo", program="prog", console=console, reader=make_reader(answers), **kwargs)
        hello = cli.command("hello", "Greetings.")
        say = hello.action("say", "Say hello.")
        say.option("name", "n", default="John Doe", description="Who to greet.")
        say.option("age", "a", type=NumberType().integer(), default=18)

        @say.handler
        def run_say(action, args):
            greetings.append(
                f"Hello {args.get('name')}, you are {args.get('age')} years old."
            )

        cli.greetings = greetings
        return cli

    return build
