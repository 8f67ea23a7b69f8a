"""Structured models for Kubernetes resources and fetch observations."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, model_validator


class ResourceKind(str, Enum):
    """Resource kinds the access URL table consumes."""

    SERVICE = "Service"
    INGRESS = "Ingress"


class ObjectMeta(BaseModel):
    """Subset of Kubernetes object metadata."""

    name: str
    namespace: str | None = None
    labels: dict[str, str] = Field(default_factory=dict)


class LoadBalancerIngress(BaseModel):
    """One address assigned by a load balancer."""

    ip: str | None = None
    hostname: str | None = None


class LoadBalancerStatus(BaseModel):
    ingress: list[LoadBalancerIngress] = Field(default_factory=list)


class ResourceStatus(BaseModel):
    """Resource status; only the load balancer part is of interest."""

    model_config = ConfigDict(populate_by_name=True)

    load_balancer: LoadBalancerStatus | None = Field(default=None, alias="loadBalancer")


class Resource(BaseModel):
    """A single Service or Ingress as returned by the API (camelCase keys accepted)."""

    kind: str | None = None
    metadata: ObjectMeta
    spec: dict[str, Any] = Field(default_factory=dict)
    status: ResourceStatus | None = None

    @property
    def service_type(self) -> str | None:
        return self.spec.get("type")

    @property
    def load_balancer_ingress(self) -> list[LoadBalancerIngress]:
        """Addresses from status.loadBalancer.ingress, empty when absent."""
        if self.status is None or self.status.load_balancer is None:
            return []
        return self.status.load_balancer.ingress


class ResourceList(BaseModel):
    """A list wrapper around resources of one kind (possibly empty)."""

    kind: str | None = None
    items: list[Resource] = Field(default_factory=list)


def _item_shape(value: Any) -> str:
    """Tag raw payloads: a mapping carrying ``items`` is a list, anything else a single resource."""
    if isinstance(value, dict):
        return "list" if "items" in value else "single"
    return "list" if isinstance(value, ResourceList) else "single"


ResourceOrList = Annotated[
    Union[Annotated[Resource, Tag("single")], Annotated[ResourceList, Tag("list")]],
    Discriminator(_item_shape),
]


class ObservationError(BaseModel):
    message: str


class ResourceObservation(BaseModel):
    """Tri-state result of fetching one resource or one resource list.

    While ``is_fetching`` is set the observation carries neither an item nor an
    error; once settled it holds an item, an error, or both.
    """

    is_fetching: bool = False
    item: ResourceOrList | None = None
    error: ObservationError | None = None

    @model_validator(mode="after")
    def _no_partial_results(self) -> ResourceObservation:
        if self.is_fetching and (self.item is not None or self.error is not None):
            raise ValueError("an in-flight observation cannot carry an item or an error")
        return self

    @classmethod
    def loading(cls) -> ResourceObservation:
        return cls(is_fetching=True)

    @classmethod
    def of(
        cls,
        item: Resource | ResourceList | dict[str, Any] | None,
        error: ObservationError | str | None = None,
    ) -> ResourceObservation:
        if isinstance(error, str):
            error = ObservationError(message=error)
        return cls(item=item, error=error)

    @classmethod
    def failed(cls, message: str) -> ResourceObservation:
        return cls(error=ObservationError(message=message))

    @property
    def is_list(self) -> bool:
        return isinstance(self.item, ResourceList)


class ResourceRef(BaseModel):
    """Identifies one resource (by name) or a list of resources (by label selector)."""

    model_config = ConfigDict(frozen=True)

    kind: ResourceKind
    namespace: str = "default"
    name: str | None = None
    label_selector: str | None = None

    @property
    def is_list(self) -> bool:
        return self.name is None

    def __str__(self) -> str:
        if self.name:
            return f"{self.kind.value}/{self.namespace}/{self.name}"
        return f"{self.kind.value}/{self.namespace}?{self.label_selector or ''}"
