import math

from clikit import BoolType, Cli, NumberType, PathType, Table, TableFormatter
from clikit.utils import setup_logging

setup_logging()

cli = Cli("👋 Hello Demo", interactive=True, welcome_message="Welcome to the hello demo!")

hello = cli.command("hello", "Say hello to someone.")
say = hello.action("say", "Greet a person.")
say.option("name", "n", default="John Doe", description="Who to greet.")
say.option(
    "age",
    "a",
    type=NumberType().min(0).integer(),
    required=True,
    prompt=True,
    prompt_message="How old are you?",
)
say.option("shout", "s", type=BoolType(strict=False), default=False)


@say.handler
def run_say(action, args):
    greeting = f"Hello {args.get('name')}, you are {args.get('age')}!"
    if args.get("shout"):
        greeting = greeting.upper()
    cli.console.print(greeting)


files = cli.command("files", "Inspect files.")
sizes = files.action("sizes", "Print the size of the given files.")
sizes.option(
    "files",
    type=PathType().multiple().glob().file(),
    offsets=(0, math.inf),
    required=True,
)


@sizes.handler
def run_sizes(action, args):
    table = Table("File sizes")
    table.add_header("File", "path")
    table.add_header("Bytes", "size").align_right().set_cell_formatter(TableFormatter.number())
    table.add_rows({"path": str(path), "size": path.stat().st_size} for path in args["files"])
    cli.console.print(table.build())


if __name__ == "__main__":
    cli.run()
