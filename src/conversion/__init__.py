"""
Conversion package

Converts WorkloadEndpoint records between the v1 API, the v1 backend and
the v3 API shapes without performing any I/O.

Public helpers
--------------
convert_v1_to_backend(resource) -> WorkloadEndpointKVPair
convert_backend_to_v3(kvp) -> WorkloadEndpointV3
    Convenience wrappers around a shared, stateless
    WorkloadEndpointConverter.
"""

from __future__ import annotations

from src.models.backend import WorkloadEndpointKVPair
from src.models.v1 import WorkloadEndpointV1
from src.models.v3 import WorkloadEndpointV3

from .exceptions import ConversionError, MalformedIdentifierError
from .workload_endpoint import WorkloadEndpointConverter

__all__ = [
    "ConversionError",
    "MalformedIdentifierError",
    "WorkloadEndpointConverter",
    "convert_backend_to_v3",
    "convert_v1_to_backend",
]

_converter = WorkloadEndpointConverter()


def convert_v1_to_backend(resource: WorkloadEndpointV1) -> WorkloadEndpointKVPair:
    """High-level helper used by the migration driver."""
    return _converter.to_backend(resource)


def convert_backend_to_v3(kvp: WorkloadEndpointKVPair) -> WorkloadEndpointV3:
    """High-level helper used by the migration driver."""
    return _converter.to_modern_api(kvp)
