from __future__ import annotations

from pydantic import Field, field_validator

from ..base_resource import ResourceBase
from ..net import EndpointPort, IPAddress, IPNetwork, normalize_mac

API_VERSION = "v1"
KIND = "workloadEndpoint"


class IPNATv1(ResourceBase):
    """One-to-one NAT mapping as declared in the v1 API."""

    internal_ip: IPAddress = Field(
        ..., alias="internalIP", description="Address inside the workload."
    )
    external_ip: IPAddress = Field(
        ..., alias="externalIP", description="Address the workload is reached on."
    )


class WorkloadEndpointMetadataV1(ResourceBase):
    """
    Identity of a v1 workload endpoint.

    The four fields ``node``, ``orchestrator``, ``workload`` and ``name``
    together identify the endpoint; none of them is derived.
    """

    name: str = Field(..., description="Endpoint id (e.g. 'eth0').")
    workload: str = Field(
        ..., description="Workload id; '<namespace>.<pod>' for orchestrator 'k8s'."
    )
    orchestrator: str = Field(..., description="Orchestrator id (e.g. 'k8s').")
    node: str = Field(..., description="Hostname the endpoint lives on.")
    active_instance_id: str = Field(
        default="",
        alias="activeInstanceID",
        description="Opaque id of the running workload instance.",
    )
    labels: dict[str, str] = Field(
        default_factory=dict, description="Legacy label map."
    )


class WorkloadEndpointSpecV1(ResourceBase):
    """Payload of a v1 workload endpoint; networks of both families mixed."""

    ip_networks: list[IPNetwork] = Field(default_factory=list, alias="ipNetworks")
    ip_nats: list[IPNATv1] = Field(default_factory=list, alias="ipNATs")
    ipv4_gateway: IPAddress | None = Field(default=None, alias="ipv4Gateway")
    ipv6_gateway: IPAddress | None = Field(default=None, alias="ipv6Gateway")
    profiles: list[str] = Field(default_factory=list)
    interface_name: str = Field(default="", alias="interfaceName")
    mac: str | None = Field(default=None)
    ports: list[EndpointPort] = Field(default_factory=list)

    @field_validator("mac")
    @classmethod
    def _canonical_mac(cls, v: str | None) -> str | None:
        return normalize_mac(v)

    @field_validator("ipv4_gateway")
    @classmethod
    def _gateway_is_v4(cls, v):
        if v is not None and v.version != 4:
            raise ValueError(f"ipv4Gateway '{v}' is not an IPv4 address")
        return v

    @field_validator("ipv6_gateway")
    @classmethod
    def _gateway_is_v6(cls, v):
        if v is not None and v.version != 6:
            raise ValueError(f"ipv6Gateway '{v}' is not an IPv6 address")
        return v


class WorkloadEndpointV1(ResourceBase):
    """Client-facing v1 API WorkloadEndpoint (the legacy shape)."""

    metadata: WorkloadEndpointMetadataV1
    spec: WorkloadEndpointSpecV1 = Field(default_factory=WorkloadEndpointSpecV1)

    def to_document(self) -> dict:
        return {"apiVersion": API_VERSION, "kind": KIND, **super().to_document()}
