from .workload_endpoint import (
    IPNATBackend,
    WorkloadEndpointKey,
    WorkloadEndpointKVPair,
    WorkloadEndpointValue,
)

__all__ = [
    "IPNATBackend",
    "WorkloadEndpointKey",
    "WorkloadEndpointKVPair",
    "WorkloadEndpointValue",
]
