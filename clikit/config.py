# Clikit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Declarative schema loader for clikit applications.

A YAML or TOML file describes the command tree; `loader()` validates it with
pydantic and returns a ready-to-run `Cli`:

    title: demo
    interactive: true
    commands:
      - name: hello
        description: Say hello to someone.
        handler: my_module.hello
        actions:
          - name: say
            options:
              - {name: name, flag: n, type: string, default: John Doe}
              - {name: age, flag: a, type: {kind: number, min: 0, integer: true}, default: 18}
              - {name: files, type: {kind: path, multiple: true, glob: true}, offsets: [0, null]}

`type` is a kind name or a mapping with `kind` and the constraints of that kind.
`offsets: [at]` binds one anonymous argument, `[at, to]` a range and
`[at, null]` an unbounded range. Handlers are dotted import paths
(`package.module.function` or `package.module:function`).
"""
from __future__ import annotations

import importlib
import math
from pathlib import Path
from typing import Any, Literal

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from clikit.action import Action
from clikit.cli import Cli
from clikit.command import Command
from clikit.exceptions import ConfigurationError
from clikit.logger import logger
from clikit.option import Option
from clikit.protocols import Handler
from clikit.types import TYPE_KINDS, BaseType, BoolType, NumberType, PathType, StringType

KIND_CONSTRAINTS: dict[str, set[str]] = {
    "string": {"min", "max", "pattern"},
    "number": {"min", "max", "integer"},
    "bool": {"strict"},
    "path": {"min", "max", "pattern", "multiple", "glob", "file", "dir", "writable"},
}

Kind = Literal["string", "number", "bool", "path"]


def import_handler(dotted_path: str) -> Handler:
    """Import a callable from a dotted path like 'my.module.func'."""
    if ":" in dotted_path:
        module_path, _, attr = dotted_path.partition(":")
    else:
        module_path, _, attr = dotted_path.rpartition(".")
    if not module_path or not attr:
        raise ConfigurationError(f"invalid handler path: {dotted_path}")
    try:
        module = importlib.import_module(module_path)
    except ImportError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ConfigurationError(
            f"could not import '{dotted_path}': {error}"
        ) from error
    try:
        handler = getattr(module, attr)
    except AttributeError as error:
        raise ConfigurationError(
            f"module '{module_path}' has no attribute '{attr}'"
        ) from error
    if not callable(handler):
        raise ConfigurationError(f"handler '{dotted_path}' is not callable")
    return handler


class RawType(BaseModel):
    """Type of an option and its constraints."""

    model_config = ConfigDict(extra="forbid")

    kind: Kind = "string"
    min: float | int | None = None
    max: float | int | None = None
    pattern: str | None = None
    integer: bool = False
    strict: bool = True
    multiple: bool = False
    glob: bool = False
    file: bool = False
    dir: bool = False
    writable: bool = False
    default: Any = None
    messages: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def validate_constraints(self) -> RawType:
        allowed = KIND_CONSTRAINTS[self.kind] | {"kind", "default", "messages"}
        unexpected = sorted(self.model_fields_set - allowed)
        if unexpected:
            raise ValueError(
                f"constraints {', '.join(unexpected)} are not supported by the "
                f"{self.kind} type"
            )
        if self.file and self.dir:
            raise ValueError("a path type can't be both file-only and dir-only")
        return self

    def build(self) -> BaseType:
        value_type = TYPE_KINDS[self.kind]()
        if isinstance(value_type, StringType):
            self._apply_counts(value_type)
            if self.pattern is not None:
                value_type.pattern(self.pattern)
        elif isinstance(value_type, NumberType):
            if self.min is not None:
                value_type.min(self.min)
            if self.max is not None:
                value_type.max(self.max)
            if self.integer:
                value_type.integer()
        elif isinstance(value_type, BoolType):
            value_type = BoolType(strict=self.strict)
        elif isinstance(value_type, PathType):
            self._apply_counts(value_type)
            if self.pattern is not None:
                value_type.pattern(self.pattern)
            if self.multiple:
                value_type.multiple()
            if self.glob:
                value_type.glob()
            if self.file:
                value_type.file()
            if self.dir:
                value_type.dir()
            if self.writable:
                value_type.writable()
        if "default" in self.model_fields_set:
            value_type.default(self.default)
        for reason, message in self.messages.items():
            value_type.message(reason, message)
        return value_type

    def _apply_counts(self, value_type: StringType | PathType) -> None:
        for bound, setter in ((self.min, value_type.min), (self.max, value_type.max)):
            if bound is None:
                continue
            if isinstance(bound, float) and not bound.is_integer():
                raise ConfigurationError(f'"{bound}" is not a valid {self.kind} bound.')
            setter(int(bound))


class RawOption(BaseModel):
    """Option of an action."""

    model_config = ConfigDict(extra="forbid")

    name: str
    flag: str | None = None
    aliases: list[str] = Field(default_factory=list)
    type: RawType = Field(default_factory=RawType)
    required: bool = False
    default: Any = None
    prompt: bool = False
    prompt_message: str | None = None
    password: bool = False
    offsets: list[int | None] | None = None
    description: str = ""

    @field_validator("type", mode="before")
    @classmethod
    def parse_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return {"kind": value}
        return value

    @field_validator("offsets")
    @classmethod
    def validate_offsets(cls, value: list[int | None] | None) -> list[int | None] | None:
        if value is None:
            return value
        if len(value) not in (1, 2) or value[0] is None:
            raise ValueError("offsets must be [at] or [at, to] (to may be null)")
        return value

    def build(self) -> Option:
        option = Option(self.name, self.flag, self.description)
        option.set_type(self.type.build())
        if self.aliases:
            option.alias(*self.aliases)
        if self.required:
            option.required()
        if "default" in self.model_fields_set:
            option.default(self.default)
        if self.prompt:
            option.prompt(True, self.prompt_message, self.password)
        if self.offsets is not None:
            at = self.offsets[0]
            if len(self.offsets) == 1:
                option.offsets(at)
            else:
                to = self.offsets[1]
                option.offsets(at, math.inf if to is None else to)
        return option


class RawAction(BaseModel):
    """Action of a command."""

    model_config = ConfigDict(extra="forbid")

    name: str
    description: str = ""
    handler: str | None = None
    options: list[RawOption] = Field(default_factory=list)

    def build(self) -> Action:
        handler = import_handler(self.handler) if self.handler else None
        action = Action(self.name, self.description, handler)
        for raw_option in self.options:
            action.add_option(raw_option.build())
        return action


class RawCommand(BaseModel):
    """Command of the application."""

    model_config = ConfigDict(extra="forbid")

    name: str
    description: str = ""
    handler: str | None = None
    actions: list[RawAction] = Field(default_factory=list)

    def build(self) -> Command:
        handler = import_handler(self.handler) if self.handler else None
        command = Command(self.name, self.description, handler)
        for raw_action in self.actions:
            command.add_action(raw_action.build())
        return command


class CliConfig(BaseModel):
    """clikit application configuration model."""

    model_config = ConfigDict(extra="forbid")

    title: str = ""
    program: str | None = None
    interactive: bool = False
    welcome_message: str = ""
    exit_message: str = ""
    prompt: str | None = None
    commands: list[RawCommand] = Field(default_factory=list)

    def to_cli(self) -> Cli:
        cli = Cli(
            self.title,
            program=self.program,
            interactive=self.interactive,
            welcome_message=self.welcome_message,
            exit_message=self.exit_message,
            prompt=self.prompt,
        )
        for raw_command in self.commands:
            cli.add_command(raw_command.build())
        return cli


def loader(file_path: Path | str) -> Cli:
    """
    Load a clikit application from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the schema file.

    Returns:
        Cli: The application with every command registered.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigurationError: If the file cannot be parsed or describes an invalid
            schema.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    try:
        with path.open("r", encoding="UTF-8") as config_file:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigurationError(f"Unsupported config format: {suffix}")
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ConfigurationError(f"could not parse {path}: {error}") from error

    if not isinstance(raw_config, dict):
        raise ConfigurationError(
            "Configuration file must contain a mapping with a list of commands.\n"
            "Example:\n"
            "title: 'My CLI'\n"
            "commands:\n"
            "  - name: 'hello'\n"
            "    handler: 'my_module.hello'\n"
            "    actions:\n"
            "      - name: 'say'"
        )

    try:
        config = CliConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigurationError(f"invalid configuration in {path}:\n{error}") from error

    logger.debug("Loaded %d command(s) from %s", len(config.commands), path)
    return config.to_cli()
