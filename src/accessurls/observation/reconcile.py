"""Issue fetch requests for references that were not requested before."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from accessurls.observation.models import ResourceRef

logger = logging.getLogger(__name__)


class RefReconciler:
    """Diffs the current reference set against the requested one.

    ``request`` is fire-and-forget: its results arrive later as updated
    observations. A reference that drops out of the set is forgotten, so it is
    requested again if it comes back.
    """

    def __init__(self, request: Callable[[ResourceRef], None]) -> None:
        self._request = request
        self._requested: set[ResourceRef] = set()

    @property
    def requested(self) -> frozenset[ResourceRef]:
        return frozenset(self._requested)

    def reconcile(self, refs: Iterable[ResourceRef]) -> list[ResourceRef]:
        """Request every new reference once, in order, and return them."""
        current: list[ResourceRef] = []
        for ref in refs:
            if ref not in current:
                current.append(ref)
        new_refs = [ref for ref in current if ref not in self._requested]
        self._requested &= set(current)
        for ref in new_refs:
            logger.debug("Requesting %s", ref)
            self._request(ref)
            # recorded only once requested, so a failing request is retried next pass
            self._requested.add(ref)
        return new_refs
