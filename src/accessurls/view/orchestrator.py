"""Orchestrator: request references → gather observations → build and print the section."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from rich.console import Console

from accessurls.config import Settings, get_settings
from accessurls.observation import (
    RefReconciler,
    ResourceFetcher,
    ResourceKind,
    ResourceObservation,
    ResourceRef,
)
from accessurls.table import AccessURLSection, build_access_url_section, render_section

logger = logging.getLogger(__name__)


class AccessURLTable:
    """Host-facing access URL table.

    Services are expected to be kept fresh by the caller; Ingress references are
    requested through ``get_resource`` the first time they show up.
    """

    def __init__(self, get_resource: Callable[[ResourceRef], None]) -> None:
        self._reconciler = RefReconciler(get_resource)

    def render(
        self,
        services: Sequence[ResourceObservation],
        ingresses: Sequence[ResourceObservation],
        ingress_refs: Sequence[ResourceRef],
    ) -> AccessURLSection:
        self._reconciler.reconcile(ingress_refs)
        return build_access_url_section(services, ingresses)


@dataclass
class AccessURLResult:
    """Result of a full run."""

    section: AccessURLSection
    service_refs: list[ResourceRef] = field(default_factory=list)
    ingress_refs: list[ResourceRef] = field(default_factory=list)


def _refs(
    kind: ResourceKind,
    namespace: str,
    names: Sequence[str],
    selector: str | None,
    scoped_by_names: bool,
) -> list[ResourceRef]:
    """
    Named refs win over the selector. Without names or selector the whole namespace is
    listed, unless the other kind was named: then this kind is not part of the app.
    """
    if names:
        return [ResourceRef(kind=kind, namespace=namespace, name=n) for n in names]
    if selector is None and scoped_by_names:
        return []
    return [ResourceRef(kind=kind, namespace=namespace, label_selector=selector)]


def _is_settled_empty_list(observation: ResourceObservation) -> bool:
    return observation.is_list and not observation.item.items and observation.error is None


def _ingress_observations(fetcher: ResourceFetcher, refs: Sequence[ResourceRef]) -> list[ResourceObservation]:
    """Observations per Ingress ref; an error-free empty list stands for no Ingress at all."""
    observations = [fetcher.observation(r) for r in refs]
    return [o for o in observations if not _is_settled_empty_list(o)]


def run_access_urls(
    namespace: str | None = None,
    label_selector: str | None = None,
    service_names: Sequence[str] = (),
    ingress_names: Sequence[str] = (),
    kubeconfig: str | None = None,
    context: str | None = None,
    settings: Settings | None = None,
    fetcher: ResourceFetcher | None = None,
) -> AccessURLResult:
    """
    Fetch Services, request Ingresses through the table and build the section.
    Named references win over the label selector.
    """
    opts = settings or get_settings()
    ns = namespace or opts.namespace
    selector = label_selector or opts.label_selector
    if fetcher is None:
        fetcher = ResourceFetcher(
            kubeconfig=kubeconfig or (str(opts.kubeconfig) if opts.kubeconfig else None),
            context=context or opts.context,
            request_timeout=opts.request_timeout,
        )

    scoped = bool(service_names or ingress_names)
    service_refs = _refs(ResourceKind.SERVICE, ns, service_names, selector, scoped)
    ingress_refs = _refs(ResourceKind.INGRESS, ns, ingress_names, selector, scoped)
    services = [fetcher.fetch(ref) for ref in service_refs]

    table = AccessURLTable(fetcher.get_resource)
    # first pass issues the Ingress requests; the fetcher resolves them synchronously
    table.render(services, _ingress_observations(fetcher, ingress_refs), ingress_refs)
    section = table.render(services, _ingress_observations(fetcher, ingress_refs), ingress_refs)
    logger.info("Access URL section for namespace %s: %s", ns, section.state.value)
    return AccessURLResult(section=section, service_refs=service_refs, ingress_refs=ingress_refs)


def print_result(result: AccessURLResult, console: Console | None = None, as_json: bool = False) -> None:
    """Print the section using Rich, or as JSON."""
    c = console or Console()
    if as_json:
        c.print_json(result.section.model_dump_json())
        return
    renderable = render_section(result.section)
    if renderable is not None:
        c.print(renderable)
