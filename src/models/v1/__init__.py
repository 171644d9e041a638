from .workload_endpoint import (
    IPNATv1,
    WorkloadEndpointMetadataV1,
    WorkloadEndpointSpecV1,
    WorkloadEndpointV1,
)

__all__ = [
    "IPNATv1",
    "WorkloadEndpointMetadataV1",
    "WorkloadEndpointSpecV1",
    "WorkloadEndpointV1",
]
