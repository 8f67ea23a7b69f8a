"""Access URL table: gates, normalization, row projection and rendering."""

from accessurls.table.builder import (
    build_access_url_section,
    filter_public_services,
    flatten_ingresses,
    get_notes,
    has_items,
    is_some_resource_loading,
)
from accessurls.table.models import AccessURLSection, Note, Row, SectionState, URLCell
from accessurls.table.render import render_section

__all__ = [
    "AccessURLSection",
    "Note",
    "Row",
    "SectionState",
    "URLCell",
    "build_access_url_section",
    "filter_public_services",
    "flatten_ingresses",
    "get_notes",
    "has_items",
    "is_some_resource_loading",
    "render_section",
]
