"""Derive access URLs from Service and Ingress resources."""

from __future__ import annotations

from typing import Any

from accessurls.observation.models import LoadBalancerIngress, Resource
from accessurls.urls.models import URLItem

SERVICE_URL_TYPE = "Service LoadBalancer"
INGRESS_URL_TYPE = "Ingress"

# Shown instead of URLs while a load balancer has no address yet
PENDING_URL = "Pending"


def _address(ingress: LoadBalancerIngress) -> str:
    return ingress.hostname or ingress.ip or ""


def _service_url(host: str, port: int) -> str:
    if port == 443:
        return f"https://{host}"
    if port == 80:
        return f"http://{host}"
    return f"http://{host}:{port}"


def _tls_hosts(spec: dict[str, Any]) -> set[str]:
    hosts: set[str] = set()
    for tls in spec.get("tls") or []:
        hosts.update(tls.get("hosts") or [])
    return hosts


def url_item_from_service(service: Resource) -> URLItem:
    """One URL per load balancer address and service port; ``Pending`` until assigned."""
    addresses = service.load_balancer_ingress
    if not addresses:
        return URLItem(name=service.metadata.name, type=SERVICE_URL_TYPE, is_link=False, urls=[PENDING_URL])
    urls = []
    for address in addresses:
        for port in service.spec.get("ports") or []:
            urls.append(_service_url(_address(address), int(port.get("port", 80))))
    return URLItem(name=service.metadata.name, type=SERVICE_URL_TYPE, is_link=True, urls=urls)


def url_item_from_ingress(ingress: Resource) -> URLItem:
    """
    One URL per rule path (or per rule when it has no paths). The scheme is https when the
    rule host is covered by a TLS entry. Rules without a host, and ingresses without rules,
    fall back to the load balancer addresses.
    """
    spec = ingress.spec
    tls_hosts = _tls_hosts(spec)
    fallback_hosts = [_address(a) for a in ingress.load_balancer_ingress if _address(a)]

    def build(host: str, path: str = "") -> str:
        scheme = "https" if host in tls_hosts else "http"
        return f"{scheme}://{host}{path}"

    urls: list[str] = []
    rules = spec.get("rules") or []
    if not rules:
        urls.extend(build(host) for host in fallback_hosts)
    for rule in rules:
        hosts = [rule["host"]] if rule.get("host") else fallback_hosts
        paths = [p.get("path") or "" for p in (rule.get("http") or {}).get("paths") or []]
        for host in hosts:
            if paths:
                urls.extend(build(host, path) for path in paths)
            else:
                urls.append(build(host))
    return URLItem(name=ingress.metadata.name, type=INGRESS_URL_TYPE, is_link=True, urls=urls)
