"""Render an access URL section for the terminal with Rich."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.spinner import Spinner
from rich.table import Table
from rich.text import Text

from accessurls.table.messages import LOADING, NO_PUBLIC_URL
from accessurls.table.models import AccessURLSection, Note, SectionState, URLCell


def render_url(cell: URLCell) -> Text:
    """Links render one per line with a link style; plain text as is."""
    if not cell.is_link:
        return Text(cell.text or "")
    text = Text()
    for i, url in enumerate(cell.links):
        if i:
            text.append("\n")
        text.append(url, style=f"link {url}")
    return text


def render_note(note: Note) -> Text:
    text = Text(note.text)
    if note.help:
        text.append("\n")
        text.append(note.help, style="dim italic")
    return text


def render_section(section: AccessURLSection) -> RenderableType | None:
    """Return the section body, or None when the section is hidden."""
    if section.state == SectionState.HIDDEN:
        return None
    if section.state == SectionState.LOADING:
        body: RenderableType = Spinner("dots", text=LOADING)
    elif section.state == SectionState.NO_PUBLIC_URL:
        body = Text(NO_PUBLIC_URL)
    else:
        table = Table(expand=True)
        for column in section.columns:
            table.add_column(column)
        for row in section.rows:
            table.add_row(render_url(row.url), row.type, render_note(row.notes))
        body = table
    return Panel(Group(body), title=section.title, border_style="blue")
