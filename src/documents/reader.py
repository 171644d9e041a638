"""Turn loaded documents into WorkloadEndpoint models, dispatching on `kind`."""

from __future__ import annotations

import logging
from typing import Any, Dict

from pydantic import ValidationError as PydanticValidationError

from src.conversion.exceptions import DocumentLoadError, UnsupportedDocumentError
from src.models.backend import WorkloadEndpointKVPair
from src.models.backend import workload_endpoint as backend
from src.models.v1 import WorkloadEndpointV1
from src.models.v1 import workload_endpoint as v1

logger = logging.getLogger(__name__)

# kind -> (expected apiVersion or None, model class)
_DOCUMENT_TYPES: Dict[str, tuple[str | None, type]] = {
    v1.KIND: (v1.API_VERSION, WorkloadEndpointV1),
    backend.KIND: (None, WorkloadEndpointKVPair),
}


def read_document(
    data: Dict[str, Any],
) -> WorkloadEndpointV1 | WorkloadEndpointKVPair:
    """
    Build the model described by a single document.

    Args:
        data: One loaded document with a ``kind`` header

    Returns:
        A v1 API WorkloadEndpoint or a backend key/value pair

    Raises:
        UnsupportedDocumentError: If the kind or apiVersion is not converted
        DocumentLoadError: If the document body does not validate
    """
    body = dict(data)
    kind = body.pop("kind", None)
    api_version = body.pop("apiVersion", None)

    if kind not in _DOCUMENT_TYPES:
        supported = ", ".join(sorted(_DOCUMENT_TYPES))
        raise UnsupportedDocumentError(
            f"Unsupported document kind '{kind}'. Supported: {supported}"
        )

    expected_version, model_cls = _DOCUMENT_TYPES[kind]
    if expected_version is not None and api_version != expected_version:
        raise UnsupportedDocumentError(
            f"Unsupported apiVersion '{api_version}' for kind '{kind}'. "
            f"Expected: {expected_version}"
        )

    try:
        model = model_cls.model_validate(body)
    except PydanticValidationError as exc:
        raise DocumentLoadError(f"Invalid {kind} document: {exc}") from exc

    logger.debug("Read %s document", kind)
    return model
