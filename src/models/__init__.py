from .base_resource import ResourceBase
from .net import EndpointPort, format_address, format_network, normalize_mac

__all__ = [
    "ResourceBase",
    "EndpointPort",
    "format_address",
    "format_network",
    "normalize_mac",
]
