from .workload_endpoint import (
    IPNATv3,
    ObjectMeta,
    WorkloadEndpointSpecV3,
    WorkloadEndpointV3,
)

__all__ = [
    "IPNATv3",
    "ObjectMeta",
    "WorkloadEndpointSpecV3",
    "WorkloadEndpointV3",
]
