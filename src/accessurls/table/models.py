"""Rows and section state produced by the access URL table builder."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from accessurls.table.messages import COLUMNS, SECTION_TITLE


class URLCell(BaseModel):
    """URL column: either hyperlinks or plain text."""

    links: list[str] = Field(default_factory=list)
    text: str | None = None

    @property
    def is_link(self) -> bool:
        return self.text is None


class Note(BaseModel):
    """Notes column, with optional advisory help text."""

    text: str
    help: str | None = None


class Row(BaseModel):
    url: URLCell
    type: str
    notes: Note


class SectionState(str, Enum):
    """What the access URL section shows."""

    LOADING = "loading"
    HIDDEN = "hidden"  # nothing to show, not even the no-public-URL message
    NO_PUBLIC_URL = "no_public_url"
    TABLE = "table"


class AccessURLSection(BaseModel):
    """Result of one render pass. Rebuilt from the observations every time."""

    state: SectionState
    rows: list[Row] = Field(default_factory=list)
    title: str = SECTION_TITLE
    columns: tuple[str, ...] = COLUMNS
