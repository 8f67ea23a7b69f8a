"""Fetch Services and Ingresses from a Kubernetes cluster as observations."""

from __future__ import annotations

import json
import logging
from typing import Any

from kubernetes import client, config
from kubernetes.client.rest import ApiException
from urllib3.exceptions import HTTPError

from accessurls.observation.models import (
    ResourceKind,
    ResourceList,
    ResourceObservation,
    ResourceRef,
)

logger = logging.getLogger(__name__)

# Seconds to wait for a single GET or LIST call
DEFAULT_REQUEST_TIMEOUT = 10


def _load_kube_config(kubeconfig_path: str | None, context: str | None) -> client.Configuration:
    """Load in-cluster or kubeconfig-based configuration."""
    try:
        config.load_incluster_config()
        return client.Configuration.get_default_copy()
    except config.ConfigException:
        pass
    kwargs: dict[str, Any] = {}
    if kubeconfig_path:
        kwargs["config_file"] = str(kubeconfig_path)
    if context:
        kwargs["context"] = context
    config.load_kube_config(**kwargs)
    return client.Configuration.get_default_copy()


def _error_message(e: ApiException) -> str:
    """Prefer the message of the API Status body over the bare HTTP reason."""
    if e.body:
        try:
            body = json.loads(e.body)
        except (TypeError, ValueError):
            body = None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
    return str(e.reason or e)


class ResourceFetcher:
    """Requests Services and Ingresses and keeps the latest observation per reference.

    Each request is a single GET (named reference) or LIST (selector reference).
    There is no watch, retry or refresh here.
    """

    def __init__(
        self,
        kubeconfig: str | None = None,
        context: str | None = None,
        api_client: client.ApiClient | None = None,
        request_timeout: int = DEFAULT_REQUEST_TIMEOUT,
    ) -> None:
        if api_client is None:
            api_client = client.ApiClient(_load_kube_config(kubeconfig, context))
        self.request_timeout = request_timeout
        self._api = api_client
        self._core = client.CoreV1Api(api_client)
        self._networking = client.NetworkingV1Api(api_client)
        self._observations: dict[ResourceRef, ResourceObservation] = {}

    def fetch(self, ref: ResourceRef) -> ResourceObservation:
        """Fetch the referenced resource (or list) and return its observation."""
        try:
            raw = self._read(ref)
        except ApiException as e:
            message = _error_message(e)
            logger.warning("Failed to get %s: %s", ref, message)
            return ResourceObservation.failed(message)
        except HTTPError as e:
            # connection-level failures (refused, timed out, retries exhausted)
            logger.warning("Failed to reach the API server for %s: %s", ref, e)
            return ResourceObservation.failed(str(e))
        payload = self._api.sanitize_for_serialization(raw)
        if ref.is_list:
            # serialization drops None, so an unset items list must be restored
            payload.setdefault("items", [])
            observation = ResourceObservation(item=ResourceList.model_validate(payload))
            logger.debug("Listed %d item(s) for %s", len(observation.item.items), ref)
            return observation
        return ResourceObservation.of(payload)

    def get_resource(self, ref: ResourceRef) -> None:
        """Request ``ref`` and store the outcome; callers read it via observation()."""
        self._observations[ref] = ResourceObservation.loading()
        self._observations[ref] = self.fetch(ref)

    def observation(self, ref: ResourceRef) -> ResourceObservation:
        """Latest observation for ``ref``; references never resolved read as loading."""
        return self._observations.get(ref, ResourceObservation.loading())

    def _read(self, ref: ResourceRef) -> Any:
        kwargs: dict[str, Any] = {"namespace": ref.namespace, "_request_timeout": self.request_timeout}
        if ref.kind == ResourceKind.SERVICE:
            if ref.is_list:
                return self._core.list_namespaced_service(label_selector=ref.label_selector or "", **kwargs)
            return self._core.read_namespaced_service(name=ref.name, **kwargs)
        if ref.is_list:
            return self._networking.list_namespaced_ingress(label_selector=ref.label_selector or "", **kwargs)
        return self._networking.read_namespaced_ingress(name=ref.name, **kwargs)
