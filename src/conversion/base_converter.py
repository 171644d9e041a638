"""Abstract base class for all v1 → v3 resource converters."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from src.core.protocols import Converter

logger = logging.getLogger(__name__)


class BaseConverter(Converter, ABC):
    """
    Abstract base class for converting one resource kind across API versions.

    Concrete converters are stateless: every call works only on its argument
    and returns a new record, so a single instance may be shared between
    callers. Converters never log on the failure path; errors are raised to
    the caller unchanged.
    """

    #: Resource kind handled by the converter, used in log messages.
    kind: str = "resource"

    def __init__(self) -> None:
        self._logger = logger.getChild(self.__class__.__name__)

    @abstractmethod
    def to_backend(self, resource: Any) -> Any:
        """Convert a v1 API resource to the v1 backend key/value form."""

    @abstractmethod
    def to_modern_api(self, kvp: Any) -> Any:
        """Convert a v1 backend key/value pair to a v3 API resource."""

    def _log_conversion(self, direction: str, source_id: str, target_id: str) -> None:
        """
        Log a successful conversion.

        Args:
            direction: Conversion direction (e.g. "v1 API -> backend")
            source_id: Identifier of the input record
            target_id: Identifier of the produced record
        """
        self._logger.debug(
            "Converted %s (%s): %s -> %s", self.kind, direction, source_id, target_id
        )
