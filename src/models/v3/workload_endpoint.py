from __future__ import annotations

from pydantic import Field

from ..base_resource import ResourceBase
from ..net import EndpointPort

API_VERSION = "projectcalico.org/v3"
KIND = "WorkloadEndpoint"


class IPNATv3(ResourceBase):
    """NAT mapping in the v3 API; addresses are plain text."""

    internal_ip: str = Field(..., alias="internalIP")
    external_ip: str = Field(..., alias="externalIP")


class ObjectMeta(ResourceBase):
    """Object-level metadata of a v3 resource."""

    name: str = Field(..., description="Generated resource name.")
    namespace: str | None = Field(
        default=None, description="Namespace of k8s workloads; unset otherwise."
    )
    labels: dict[str, str] = Field(default_factory=dict)


class WorkloadEndpointSpecV3(ResourceBase):
    """Spec of a v3 workload endpoint. Networks of both families are merged."""

    orchestrator: str
    workload: str | None = Field(
        default=None, description="Workload name for orchestrators other than k8s."
    )
    node: str
    container_id: str = Field(default="", alias="containerID")
    pod: str | None = Field(default=None, description="Pod name (k8s only).")
    endpoint: str
    ip_networks: list[str] = Field(default_factory=list, alias="ipNetworks")
    ip_nats: list[IPNATv3] = Field(default_factory=list, alias="ipNATs")
    ipv4_gateway: str | None = Field(default=None, alias="ipv4Gateway")
    ipv6_gateway: str | None = Field(default=None, alias="ipv6Gateway")
    profiles: list[str] = Field(default_factory=list)
    interface_name: str = Field(default="", alias="interfaceName")
    mac: str | None = Field(default=None)
    ports: list[EndpointPort] = Field(default_factory=list)


class WorkloadEndpointV3(ResourceBase):
    """Client-facing v3 API WorkloadEndpoint."""

    metadata: ObjectMeta
    spec: WorkloadEndpointSpecV3

    def to_document(self) -> dict:
        return {"apiVersion": API_VERSION, "kind": KIND, **super().to_document()}
