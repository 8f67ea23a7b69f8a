"""Shared fixtures: builders for Service and Ingress payloads."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest


@pytest.fixture
def make_service() -> Callable[..., dict[str, Any]]:
    """Build a Service payload as returned by the Kubernetes API."""

    def _make(
        name: str = "svc",
        type: str = "LoadBalancer",
        ips: list[str] | None = None,
        ports: list[int] | None = None,
    ) -> dict[str, Any]:
        svc: dict[str, Any] = {
            "kind": "Service",
            "metadata": {"name": name, "namespace": "default"},
            "spec": {"type": type, "ports": [{"port": p} for p in (ports or [80])]},
        }
        if ips is not None:
            svc["status"] = {"loadBalancer": {"ingress": [{"ip": ip} for ip in ips]}}
        return svc

    return _make


@pytest.fixture
def make_ingress() -> Callable[..., dict[str, Any]]:
    """Build an Ingress payload with one rule per host."""

    def _make(
        name: str = "ing",
        hosts: list[str] | None = None,
        paths: list[str] | None = None,
        tls_hosts: list[str] | None = None,
        ips: list[str] | None = None,
    ) -> dict[str, Any]:
        rules = []
        for host in hosts or []:
            rule: dict[str, Any] = {"host": host}
            if paths:
                rule["http"] = {"paths": [{"path": p} for p in paths]}
            rules.append(rule)
        spec: dict[str, Any] = {"rules": rules}
        if tls_hosts:
            spec["tls"] = [{"hosts": tls_hosts}]
        ing: dict[str, Any] = {"kind": "Ingress", "metadata": {"name": name}, "spec": spec}
        if ips is not None:
            ing["status"] = {"loadBalancer": {"ingress": [{"ip": ip} for ip in ips]}}
        return ing

    return _make
