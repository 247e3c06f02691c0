"""Render a screen template to the console with rich."""

from __future__ import annotations

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from waymark.screens.templates import MapTemplate, Row


def _secondary(row: Row) -> Text:
    out = Text()
    for i, line in enumerate(row.texts):
        if i:
            out.append("\n")
        out.append(line if isinstance(line, Text) else Text(line, style="dim"))
    return out


def template_table(template: MapTemplate) -> Table:
    table = Table(show_header=True, header_style="bold cyan", expand=True)
    table.add_column("#", justify="right", style="dim", no_wrap=True)
    table.add_column("", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Details")
    for i, row in enumerate(template.item_list, 1):
        title = Text(row.title)
        if row.browsable:
            title.append(" ›", style="dim")
        table.add_row(str(i), row.image or "", title, _secondary(row))
    return table


def render_template(template: MapTemplate) -> Panel:
    """Build a rich renderable for a whole template."""
    back = template.header.start_action
    title = Text()
    if back is not None:
        title.append("← ", style="dim")
    title.append(template.header.title, style="bold")

    if len(template.item_list):
        body = template_table(template)
    else:
        body = Text(template.item_list.no_items_message or "", style="dim italic")

    controls = Text("  ".join(f"[{a.title}]" for a in template.map_actions), style="dim")
    return Panel(Group(body, controls), title=title, title_align="left")


__all__ = ["render_template", "template_table"]
