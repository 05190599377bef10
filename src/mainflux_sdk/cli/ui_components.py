"""CLI UI components (Rich).

Why separate:
- Keeps command logic apart from rendering details.
- Tables/panels are reused by several commands.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from pydantic import BaseModel
from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from mainflux_sdk.core.domain.models import Page


def print_entity(console: Console, entity: BaseModel, *, title: str | None = None) -> None:
    """Pretty JSON of a single entity."""

    body = JSON(entity.model_dump_json(exclude_none=True, by_alias=True))
    console.print(Panel(body, title=title, border_style="cyan") if title else body)


def build_page_table(
    title: str,
    columns: Sequence[str],
    items: Iterable[BaseModel],
    *,
    page: Page | None = None,
) -> Table:
    """Table with one row per item; missing attributes render as empty cells."""

    caption = None
    if page is not None:
        caption = f"offset {page.offset or 0} • limit {page.limit or 0} • total {page.total or 0}"
    table = Table(title=title, caption=caption)
    for i, column in enumerate(columns):
        table.add_column(column, style="cyan" if i == 0 else "white", no_wrap=i == 0)
    for item in items:
        row = []
        for column in columns:
            value = getattr(item, column, None)
            row.append("" if value is None else str(value))
        table.add_row(*row)
    return table


def build_health_table() -> Table:
    table = Table(title="Mainflux services")
    table.add_column("Service", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table


def print_error(console: Console, message: str) -> None:
    console.print(Text(message, style="bold red"))
