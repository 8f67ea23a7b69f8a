"""Structured outputs of the URL extractors."""

from __future__ import annotations

from pydantic import BaseModel, Field


class URLItem(BaseModel):
    """URLs exposed by one Service or Ingress."""

    name: str = Field(..., description="Name of the resource the URLs belong to")
    type: str = Field(..., description="Label shown in the Type column, e.g. 'Ingress'")
    is_link: bool = Field(
        default=False,
        description="Whether the URLs are reachable addresses that should render as links",
    )
    urls: list[str] = Field(default_factory=list)
