"""
net.py – network value types shared by all WorkloadEndpoint generations
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Addresses and networks are held as :mod:`ipaddress` objects so that the
address family is always known. Networks keep their host bits
(``10.0.0.1/24`` stays ``10.0.0.1/24``), which is why they are modelled as
interfaces rather than as strict networks.
"""

from __future__ import annotations

import re
from ipaddress import IPv4Address, IPv4Interface, IPv6Address, IPv6Interface
from typing import TypeAlias

from pydantic import Field, IPvAnyAddress, IPvAnyInterface, field_validator

from .base_resource import ResourceBase

IPNetwork: TypeAlias = IPvAnyInterface
IPAddress: TypeAlias = IPvAnyAddress

AnyIPNetwork: TypeAlias = IPv4Interface | IPv6Interface
AnyIPAddress: TypeAlias = IPv4Address | IPv6Address

_MAC_RE = re.compile(r"^[0-9a-fA-F]{2}([:-])(?:[0-9a-fA-F]{2}\1){4}[0-9a-fA-F]{2}$")


def normalize_mac(value: str | None) -> str | None:
    """
    Return the canonical lower-case, colon-separated form of a MAC address.

    Both ``:`` and ``-`` separators are accepted on input, but not mixed.
    ``None`` and the empty string mean "no hardware address".
    """
    if value is None or value == "":
        return None
    if not _MAC_RE.match(value):
        raise ValueError(f"Invalid MAC address '{value}'")
    return value.replace("-", ":").lower()


def format_network(network: AnyIPNetwork) -> str:
    """Canonical CIDR text of a network, host bits included."""
    return str(network.with_prefixlen)


def format_address(address: AnyIPAddress | None) -> str | None:
    """Canonical text of an address; ``None`` stays ``None``."""
    if address is None:
        return None
    return str(address)


class EndpointPort(ResourceBase):
    """A named port exposed by the endpoint; identical in every generation."""

    name: str = Field(..., description="Port name, unique within the endpoint.")
    protocol: int | str = Field(
        ..., description="Protocol name (e.g. 'tcp') or IANA protocol number."
    )
    port: int = Field(..., ge=1, le=65535, description="Port number.")

    @field_validator("name")
    @classmethod
    def _name_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("EndpointPort.name must not be empty")
        return v
