"""Observation layer: resource models, fetching and request reconciliation."""

from accessurls.observation.fetcher import ResourceFetcher
from accessurls.observation.models import (
    ObservationError,
    Resource,
    ResourceKind,
    ResourceList,
    ResourceObservation,
    ResourceRef,
)
from accessurls.observation.reconcile import RefReconciler

__all__ = [
    "ObservationError",
    "RefReconciler",
    "Resource",
    "ResourceFetcher",
    "ResourceKind",
    "ResourceList",
    "ResourceObservation",
    "ResourceRef",
]
