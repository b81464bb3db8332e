import math
import sys
import textwrap

import pytest

from clikit.__main__ import find_clikit_config, main
from clikit.cli import Cli
from clikit.config import import_handler, loader
from clikit.exceptions import ConfigurationError
from clikit.types import NumberType, PathType

HANDLERS = textwrap.dedent(
    """
    calls = []


    def hello(action, args):
        calls.append(("command", action.name, dict(args.named)))


    def say(action, args):
        calls.append(("say", args.get("name"), args.get("age")))
    """
)

YAML_CONFIG = textwrap.dedent(
    """
    title: demo
    program: prog
    commands:
      - name: hello
        description: Say hello to someone.
        handler: clikit_test_handlers.hello
        actions:
          - name: say
            handler: clikit_test_handlers.say
            options:
              - {name: name, flag: n, type: string, default: John Doe}
              - {name: age, flag: a, type: {kind: number, min: 0, integer: true}, default: 18}
          - name: list
            options:
              - {name: files, type: {kind: path, multiple: true, glob: true}, offsets: [0, null]}
    """
)


@pytest.fixture
def handlers(tmp_path, monkeypatch):
    (tmp_path / "clikit_test_handlers.py").write_text(HANDLERS)
    monkeypatch.syspath_prepend(str(tmp_path))
    sys.modules.pop("clikit_test_handlers", None)
    import clikit_test_handlers

    yield clikit_test_handlers
    sys.modules.pop("clikit_test_handlers", None)


def write(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content)
    return path


def test_load_yaml(tmp_path, handlers):
    cli = loader(write(tmp_path, "clikit.yaml", YAML_CONFIG))
    assert isinstance(cli, Cli)
    assert cli.title == "demo"
    assert cli.program == "prog"

    say = cli.get_command("hello").get_action("say")
    assert say.get_option("age").default_value == 18
    age_type = say.get_option("age").type
    assert isinstance(age_type, NumberType)
    assert age_type.is_integer

    files = cli.get_command("hello").get_action("list").get_option("files")
    assert isinstance(files.type, PathType)
    assert files.offset_range == (0, math.inf)


def test_loaded_cli_runs_handlers(tmp_path, handlers):
    cli = loader(write(tmp_path, "clikit.yml", YAML_CONFIG))
    assert cli.execute(["prog", "hello", "say", "-n=Harry", "-a=25"]) == 0
    assert handlers.calls == [("say", "Harry", 25)]


def test_command_handler_from_config(tmp_path, handlers):
    cli = loader(write(tmp_path, "clikit.yaml", YAML_CONFIG))
    (tmp_path / "x.txt").write_text("x")
    assert cli.execute(["prog", "hello", "list", str(tmp_path / "x.txt")]) == 0
    assert handlers.calls[0][0:2] == ("command", "list")


def test_load_toml(tmp_path):
    config = textwrap.dedent(
        """
        title = "demo"

        [[commands]]
        name = "db"

        [[commands.actions]]
        name = "db:migrate"

        [[commands.actions.options]]
        name = "steps"
        flag = "s"
        required = true
        type = { kind = "number", integer = true }
        offsets = [0]
        """
    )
    cli = loader(write(tmp_path, "clikit.toml", config))
    steps = cli.get_command("db").get_action("db:migrate").get_option("steps")
    assert steps.is_required
    assert steps.offset_range == (0, 0)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "missing.yaml")


def test_unsupported_suffix(tmp_path):
    with pytest.raises(ConfigurationError, match="Unsupported config format"):
        loader(write(tmp_path, "clikit.json", "{}"))


def test_invalid_yaml(tmp_path):
    with pytest.raises(ConfigurationError, match="could not parse"):
        loader(write(tmp_path, "clikit.yaml", "commands: [\n"))


def test_not_a_mapping(tmp_path):
    with pytest.raises(ConfigurationError):
        loader(write(tmp_path, "clikit.yaml", "- just\n- a list\n"))


def test_unsupported_constraint(tmp_path):
    config = textwrap.dedent(
        """
        commands:
          - name: hello
            actions:
              - name: say
                options:
                  - {name: name, type: {kind: string, integer: true}}
        """
    )
    with pytest.raises(ConfigurationError, match="integer"):
        loader(write(tmp_path, "clikit.yaml", config))


def test_schema_conflict_in_config(tmp_path):
    config = textwrap.dedent(
        """
        commands:
          - name: hello
            actions:
              - name: say
                options:
                  - {name: name, flag: n}
                  - {name: nick, flag: n}
        """
    )
    with pytest.raises(ConfigurationError, match='flag "-n"'):
        loader(write(tmp_path, "clikit.yaml", config))


def test_bad_handler_path():
    with pytest.raises(ConfigurationError):
        import_handler("no_such_module_for_clikit.handler")
    with pytest.raises(ConfigurationError):
        import_handler("handler")
    with pytest.raises(ConfigurationError):
        import_handler("os.path:no_such_function")


def test_import_handler_colon_form():
    import os.path

    assert import_handler("os.path:join") is os.path.join


def test_find_config_from_env(tmp_path, monkeypatch):
    path = write(tmp_path, "custom.yaml", "commands: []\n")
    monkeypatch.setenv("CLIKIT_CONFIG", str(path))
    assert find_clikit_config() == path


def test_find_config_in_cwd(tmp_path, monkeypatch):
    monkeypatch.delenv("CLIKIT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    assert find_clikit_config() is None
    write(tmp_path, ".clikit.toml", "")
    assert find_clikit_config() == tmp_path / ".clikit.toml"


def test_main_without_config(tmp_path, monkeypatch, capsys):
    monkeypatch.delenv("CLIKIT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    assert main(["clikit"]) == 1
    assert "No clikit schema file found" in capsys.readouterr().out
