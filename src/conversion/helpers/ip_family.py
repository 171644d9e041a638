"""
Small, pure helpers that split address lists by IP family and join them back.

The backend keeps one list per family. The API shapes keep a single list,
with every IPv4 entry before every IPv6 entry. Relative order inside a
family is preserved in both directions.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from src.models.backend import IPNATBackend
from src.models.net import AnyIPAddress, AnyIPNetwork, format_address, format_network
from src.models.v1 import IPNATv1
from src.models.v3 import IPNATv3

T = TypeVar("T")


def partition_by_family(
    items: Iterable[T], family_of: Callable[[T], int]
) -> tuple[list[T], list[T]]:
    """Split ``items`` into (IPv4, IPv6) lists, keeping order in each."""
    v4: list[T] = []
    v6: list[T] = []
    for item in items:
        version = family_of(item)
        if version == 4:
            v4.append(item)
        elif version == 6:
            v6.append(item)
        else:
            raise ValueError(f"Unknown IP version {version} for {item!r}")
    return v4, v6


def partition_networks(
    networks: Iterable[AnyIPNetwork],
) -> tuple[list[AnyIPNetwork], list[AnyIPNetwork]]:
    """Split a mixed network list into (IPv4, IPv6) lists."""
    return partition_by_family(networks, lambda net: net.version)


def merge_networks(
    ipv4_nets: Iterable[AnyIPNetwork], ipv6_nets: Iterable[AnyIPNetwork]
) -> list[str]:
    """Join per-family network lists into CIDR strings, IPv4 first."""
    return [format_network(net) for net in [*ipv4_nets, *ipv6_nets]]


def partition_nats(
    nats: Iterable[IPNATv1],
) -> tuple[list[IPNATBackend], list[IPNATBackend]]:
    """
    Split v1 NAT mappings into backend (IPv4, IPv6) lists.

    The family is taken from the internal address only.
    """
    v4, v6 = partition_by_family(nats, lambda nat: nat.internal_ip.version)
    return _to_backend_nats(v4), _to_backend_nats(v6)


def _to_backend_nats(nats: list[IPNATv1]) -> list[IPNATBackend]:
    return [
        IPNATBackend(int_ip=nat.internal_ip, ext_ip=nat.external_ip) for nat in nats
    ]


def merge_nats(
    ipv4_nat: Iterable[IPNATBackend], ipv6_nat: Iterable[IPNATBackend]
) -> list[IPNATv3]:
    """Join per-family backend NAT lists into v3 mappings, IPv4 first."""
    return [
        IPNATv3(internal_ip=str(nat.int_ip), external_ip=str(nat.ext_ip))
        for nat in [*ipv4_nat, *ipv6_nat]
    ]


def format_gateway(gateway: AnyIPAddress | None) -> str | None:
    """Text form of a gateway; an absent gateway stays absent."""
    return format_address(gateway)
