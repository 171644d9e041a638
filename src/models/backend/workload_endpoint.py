from __future__ import annotations

from pydantic import Field, field_validator

from ..base_resource import ResourceBase
from ..net import EndpointPort, IPAddress, IPNetwork, normalize_mac

KIND = "WorkloadEndpointKVPair"


class IPNATBackend(ResourceBase):
    """NAT mapping as stored in the backend; one list per address family."""

    int_ip: IPAddress = Field(..., description="Internal address.")
    ext_ip: IPAddress = Field(..., description="External address.")


class WorkloadEndpointKey(ResourceBase):
    """Four-part key the backend stores a workload endpoint under."""

    hostname: str
    orchestrator_id: str
    workload_id: str
    endpoint_id: str


class WorkloadEndpointValue(ResourceBase):
    """
    Stored payload of a workload endpoint.

    Unlike the API shapes, networks and NAT mappings are split into one list
    per address family. Labels and profile ids keep their legacy form.
    """

    state: str = Field(default="", description="Lifecycle state, e.g. 'active'.")
    name: str = Field(default="", description="Host-side interface name.")
    active_instance_id: str = Field(default="")
    mac: str | None = Field(default=None)
    profile_ids: list[str] = Field(default_factory=list)
    ipv4_nets: list[IPNetwork] = Field(default_factory=list)
    ipv6_nets: list[IPNetwork] = Field(default_factory=list)
    ipv4_nat: list[IPNATBackend] = Field(default_factory=list)
    ipv6_nat: list[IPNATBackend] = Field(default_factory=list)
    labels: dict[str, str] = Field(default_factory=dict)
    ipv4_gateway: IPAddress | None = Field(default=None)
    ipv6_gateway: IPAddress | None = Field(default=None)
    ports: list[EndpointPort] = Field(default_factory=list)

    @field_validator("mac")
    @classmethod
    def _canonical_mac(cls, v: str | None) -> str | None:
        return normalize_mac(v)

    @field_validator("ipv4_nets")
    @classmethod
    def _only_v4_nets(cls, v):
        for net in v:
            if net.version != 4:
                raise ValueError(f"ipv4_nets contains non-IPv4 network '{net}'")
        return v

    @field_validator("ipv6_nets")
    @classmethod
    def _only_v6_nets(cls, v):
        for net in v:
            if net.version != 6:
                raise ValueError(f"ipv6_nets contains non-IPv6 network '{net}'")
        return v

    # NAT family is that of the internal address.
    @field_validator("ipv4_nat")
    @classmethod
    def _only_v4_nats(cls, v):
        for nat in v:
            if nat.int_ip.version != 4:
                raise ValueError(f"ipv4_nat contains non-IPv4 mapping '{nat.int_ip}'")
        return v

    @field_validator("ipv6_nat")
    @classmethod
    def _only_v6_nats(cls, v):
        for nat in v:
            if nat.int_ip.version != 6:
                raise ValueError(f"ipv6_nat contains non-IPv6 mapping '{nat.int_ip}'")
        return v

    @field_validator("ipv4_gateway")
    @classmethod
    def _gateway_is_v4(cls, v):
        if v is not None and v.version != 4:
            raise ValueError(f"ipv4_gateway '{v}' is not an IPv4 address")
        return v

    @field_validator("ipv6_gateway")
    @classmethod
    def _gateway_is_v6(cls, v):
        if v is not None and v.version != 6:
            raise ValueError(f"ipv6_gateway '{v}' is not an IPv6 address")
        return v


class WorkloadEndpointKVPair(ResourceBase):
    """A backend key together with its stored value."""

    key: WorkloadEndpointKey
    value: WorkloadEndpointValue

    def to_document(self) -> dict:
        return {"kind": KIND, **super().to_document()}
