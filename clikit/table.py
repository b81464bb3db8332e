# Clikit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders rows of mappings as a bordered table built on `rich.table.Table`.

Columns are declared with `add_header(label, key)`; each row is a mapping and a
cell shows `row[key]` (missing keys render as empty cells). Headers control
alignment, fixed width (longer cells are truncated with an ellipsis), header
style, and an optional `CellFormatter` deciding both the text and the style of
each cell.

`TableFormatter` builds the formatters for the common cases: Yes/No flags,
numbers with fixed decimals and separators, and dates.

Example:
    table = Table("Users")
    table.add_header("Name", "name")
    table.add_header("Age", "age").align_right()
    table.add_rows([{"name": "Harry", "age": 25}, {"name": "John Doe", "age": 18}])
    print(table)
"""
from __future__ import annotations

import io
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Iterable, Mapping, Protocol, runtime_checkable

from dateutil import parser as date_parser
from rich import box as rich_box
from rich.box import Box
from rich.console import Console
from rich.table import Table as RichTable
from rich.text import Text

from clikit.exceptions import ConfigurationError
from clikit.themes import get_nord_theme

ALIGNMENTS = ("left", "right", "center")


@runtime_checkable
class CellFormatter(Protocol):
    def format(self, value: Any, header: TableHeader, row: Mapping[str, Any]) -> str: ...

    def get_style(
        self, value: Any, header: TableHeader, row: Mapping[str, Any]
    ) -> str | None: ...


class DefaultCellFormatter:
    """Render `None` as an empty cell and anything else with `str()`."""

    def format(self, value: Any, header: TableHeader, row: Mapping[str, Any]) -> str:
        return "" if value is None else str(value)

    def get_style(
        self, value: Any, header: TableHeader, row: Mapping[str, Any]
    ) -> str | None:
        return None


class StyledCellFormatter(DefaultCellFormatter):
    """Base of the built-in formatters: one rich style for every cell of the column."""

    def __init__(self, style: str | None = None):
        self.style = style

    def get_style(
        self, value: Any, header: TableHeader, row: Mapping[str, Any]
    ) -> str | None:
        return self.style


class BoolCellFormatter(StyledCellFormatter):
    """Render truthy values as `Yes` and falsy ones as `No`."""

    def format(self, value: Any, header: TableHeader, row: Mapping[str, Any]) -> str:
        return "Yes" if value else "No"


class NumberCellFormatter(StyledCellFormatter):
    """
    Render numbers with a fixed number of decimals and custom separators.

    Rounding is half away from zero. `None` renders as an empty cell and values
    that are not numbers are rendered unchanged.
    """

    def __init__(
        self,
        decimals: int = 0,
        decimal_point: str = ".",
        thousands_sep: str = ",",
        style: str | None = None,
    ):
        super().__init__(style)
        if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
            raise ConfigurationError(f'"{decimals}" is not a valid number of decimals.')
        self.decimals = decimals
        self.decimal_point = decimal_point
        self.thousands_sep = thousands_sep

    def format(self, value: Any, header: TableHeader, row: Mapping[str, Any]) -> str:
        if value is None:
            return ""
        try:
            number = Decimal(str(value))
        except InvalidOperation:
            return str(value)
        if not number.is_finite():
            return str(value)
        rounded = number.quantize(Decimal(1).scaleb(-self.decimals), ROUND_HALF_UP)
        integral, _, fraction = f"{rounded:,.{self.decimals}f}".partition(".")
        integral = integral.replace(",", self.thousands_sep)
        return f"{integral}{self.decimal_point}{fraction}" if fraction else integral


class DateCellFormatter(StyledCellFormatter):
    """
    Render dates with `strftime`.

    Accepts `datetime` and `date` objects, date strings (parsed with dateutil)
    and Unix timestamps (local time). Empty values render as `N/A`.
    """

    def __init__(self, format: str = "%Y-%m-%d %H:%M:%S", style: str | None = None):
        super().__init__(style)
        self.date_format = format

    def format(self, value: Any, header: TableHeader, row: Mapping[str, Any]) -> str:
        if not value:
            return "N/A"
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = datetime.fromtimestamp(value)
        elif isinstance(value, str):
            try:
                value = date_parser.parse(value)
            except (ValueError, OverflowError):
                return value
        if isinstance(value, date):
            return value.strftime(self.date_format)
        return str(value)


class TableFormatter:
    """Factories for the built-in cell formatters."""

    @staticmethod
    def bool(style: str | None = None) -> BoolCellFormatter:
        return BoolCellFormatter(style)

    @staticmethod
    def number(
        decimals: int = 0,
        decimal_point: str = ".",
        thousands_sep: str = ",",
        style: str | None = None,
    ) -> NumberCellFormatter:
        return NumberCellFormatter(decimals, decimal_point, thousands_sep, style)

    @staticmethod
    def date(
        format: str = "%Y-%m-%d %H:%M:%S", style: str | None = None
    ) -> DateCellFormatter:
        return DateCellFormatter(format, style)


class TableHeader:
    """A column of a `Table`."""

    def __init__(self, label: str, key: str):
        self.label: str = label
        self.key: str = key
        self.align: str = "left"
        self.width: int | None = None
        self.style: str | None = None
        self.cell_formatter: CellFormatter = DefaultCellFormatter()

    def align_left(self) -> TableHeader:
        self.align = "left"
        return self

    def align_right(self) -> TableHeader:
        self.align = "right"
        return self

    def align_center(self) -> TableHeader:
        self.align = "center"
        return self

    def set_width(self, width: int | None) -> TableHeader:
        if width is not None and (isinstance(width, bool) or not isinstance(width, int) or width < 1):
            raise ConfigurationError(f'"{width}" is not a valid column width.')
        self.width = width
        return self

    def set_style(self, style: str | None) -> TableHeader:
        self.style = style
        return self

    def set_cell_formatter(self, formatter: CellFormatter) -> TableHeader:
        if not isinstance(formatter, CellFormatter):
            raise ConfigurationError(
                f"cell formatter must implement format() and get_style(), got {formatter!r}"
            )
        self.cell_formatter = formatter
        return self


class Table:
    """
    Table of mapping rows.

    Args:
        title (str | None): Title printed above the table.
        box (Box): Rich box style of the borders.
        border_style (str | None): Rich style of the borders.
    """

    def __init__(
        self,
        title: str | None = None,
        *,
        box: Box = rich_box.DOUBLE_EDGE,
        border_style: str | None = None,
    ):
        self.title = title
        self.box = box
        self.border_style = border_style
        self.headers: list[TableHeader] = []
        self.rows: list[Mapping[str, Any]] = []

    def add_header(self, label: str, key: str) -> TableHeader:
        header = TableHeader(label, key)
        self.headers.append(header)
        return header

    def add_row(self, row: Mapping[str, Any]) -> Table:
        if not isinstance(row, Mapping):
            raise TypeError(f"table rows must be mappings, got {type(row).__name__}")
        self.rows.append(row)
        return self

    def add_rows(self, rows: Iterable[Mapping[str, Any]]) -> Table:
        for row in rows:
            self.add_row(row)
        return self

    def build(self) -> RichTable:
        """Return the equivalent `rich.table.Table`."""
        table = RichTable(
            title=self.title,
            box=self.box,
            border_style=self.border_style,
            show_lines=True,
        )
        for header in self.headers:
            table.add_column(
                header.label,
                justify=header.align,
                header_style=header.style or "bold",
                width=header.width,
                no_wrap=header.width is not None,
                overflow="ellipsis" if header.width is not None else "fold",
            )
        for row in self.rows:
            cells = []
            for header in self.headers:
                value = row.get(header.key)
                formatter = header.cell_formatter
                text = formatter.format(value, header, row)
                style = formatter.get_style(value, header, row) or ""
                cells.append(Text(text, style=style))
            table.add_row(*cells)
        return table

    def render(self, width: int | None = None, styled: bool = False) -> str:
        """Render the table to a string, plain text unless `styled`."""
        output = io.StringIO()
        console = Console(
            file=output,
            width=width or 200,
            color_system="truecolor" if styled else None,
            force_terminal=styled,
            theme=get_nord_theme(),
        )
        console.print(self.build())
        return output.getvalue()

    def __str__(self) -> str:
        return self.render()
