"""Turn Service and Ingress observations into access URL rows."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from accessurls.observation.models import (
    ObservationError,
    Resource,
    ResourceList,
    ResourceObservation,
)
from accessurls.table.messages import (
    ERROR_NOTE,
    INGRESS_TYPE,
    IPS_NOTE,
    PENDING_IP_HELP,
    PENDING_IP_NOTE,
    UNKNOWN_NOTE,
    UNKNOWN_URL,
)
from accessurls.table.models import AccessURLSection, Note, Row, SectionState, URLCell
from accessurls.urls import url_item_from_ingress, url_item_from_service

logger = logging.getLogger(__name__)

PUBLIC_SERVICE_TYPE = "LoadBalancer"


def is_some_resource_loading(observations: Iterable[ResourceObservation]) -> bool:
    """Return True if any observation is still in flight."""
    return any(o.is_fetching for o in observations)


def observation_has_items(observation: ResourceObservation) -> bool:
    """Errors always count; an explicitly empty list does not."""
    if observation.error is not None:
        return True
    if isinstance(observation.item, ResourceList):
        return len(observation.item.items) > 0
    return observation.item is not None


def has_items(
    services: Sequence[ResourceObservation],
    ingresses: Sequence[ResourceObservation],
) -> bool:
    return any(observation_has_items(s) for s in services) or any(
        observation_has_items(i) for i in ingresses
    )


def filter_public_services(services: Sequence[ResourceObservation]) -> list[ResourceObservation]:
    """
    Keep load-balanced Services. List members become fresh error-free observations;
    a single Service keeps its own observation, error included. Observations without
    an item are dropped.
    """
    result: list[ResourceObservation] = []
    for s in services:
        if s.item is None:
            if s.error is not None:
                logger.debug("Dropping Service observation without item: %s", s.error.message)
            continue
        if isinstance(s.item, ResourceList):
            for item in s.item.items:
                if item.service_type == PUBLIC_SERVICE_TYPE:
                    result.append(ResourceObservation(item=item))
        elif s.item.service_type == PUBLIC_SERVICE_TYPE:
            result.append(s)
    return result


def flatten_ingresses(ingresses: Sequence[ResourceObservation]) -> list[ResourceObservation]:
    """One observation per Ingress; list members inherit the error of the whole list."""
    result: list[ResourceObservation] = []
    for ingress in ingresses:
        if isinstance(ingress.item, ResourceList):
            for item in ingress.item.items:
                result.append(ResourceObservation(item=item, error=ingress.error))
        else:
            result.append(ingress)
    return result


def get_notes(resource: Resource | None) -> Note:
    """Status note for a resource: its load balancer IPs, or why there are none."""
    if resource is None:
        return Note(text=UNKNOWN_NOTE)
    addresses = resource.load_balancer_ingress
    if addresses:
        # hostname-only entries (e.g. AWS ELBs) have no ip
        ips = ", ".join(a.ip or a.hostname for a in addresses if a.ip or a.hostname)
        return Note(text=IPS_NOTE.format(ips=ips))
    return Note(text=PENDING_IP_NOTE, help=PENDING_IP_HELP)


def _error_note(error: ObservationError) -> Note:
    return Note(text=ERROR_NOTE.format(message=error.message))


def _notes(observation: ResourceObservation) -> Note:
    if observation.error is not None:
        return _error_note(observation.error)
    return get_notes(observation.item)


def service_row(service: ResourceObservation) -> Row:
    url_item = url_item_from_service(service.item)
    if url_item.is_link:
        url = URLCell(links=url_item.urls)
    else:
        url = URLCell(text=",".join(url_item.urls))
    return Row(url=url, type=url_item.type, notes=_notes(service))


def ingress_row(ingress: ResourceObservation) -> Row:
    if ingress.item is not None:
        url = URLCell(links=url_item_from_ingress(ingress.item).urls)
    else:
        url = URLCell(text=UNKNOWN_URL)
    return Row(url=url, type=INGRESS_TYPE, notes=_notes(ingress))


def build_rows(
    public_services: Sequence[ResourceObservation],
    ingresses: Sequence[ResourceObservation],
) -> list[Row]:
    """Service rows first, then one row per flattened Ingress."""
    rows = [service_row(s) for s in public_services]
    rows.extend(ingress_row(i) for i in flatten_ingresses(ingresses))
    return rows


def build_access_url_section(
    services: Sequence[ResourceObservation],
    ingresses: Sequence[ResourceObservation],
) -> AccessURLSection:
    """
    Apply the loading and emptiness gates, then project rows.

    Loading wins over emptiness. When there are resources but no public Service and
    no Ingress, the section shows the no-public-URL message instead of a table.
    """
    if is_some_resource_loading([*ingresses, *services]):
        return AccessURLSection(state=SectionState.LOADING)
    if not has_items(services, ingresses):
        return AccessURLSection(state=SectionState.HIDDEN)

    public_services = filter_public_services(services)
    if not public_services and not ingresses:
        return AccessURLSection(state=SectionState.NO_PUBLIC_URL)

    rows = build_rows(public_services, ingresses)
    logger.debug(
        "Built %d access URL row(s) from %d public Service(s) and %d Ingress observation(s)",
        len(rows),
        len(public_services),
        len(ingresses),
    )
    return AccessURLSection(state=SectionState.TABLE, rows=rows)
