"""URL extraction for Services and Ingresses."""

from accessurls.urls.extractors import url_item_from_ingress, url_item_from_service
from accessurls.urls.models import URLItem

__all__ = [
    "URLItem",
    "url_item_from_ingress",
    "url_item_from_service",
]
