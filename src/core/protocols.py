from typing import Any, Protocol


class Converter(Protocol):
    """Defines the contract for converting one resource kind from v1 to v3."""

    def to_backend(self, resource: Any) -> Any:
        """
        Convert a v1 API resource into its v1 backend key/value form.

        Args:
            resource: The v1 API resource to convert

        Returns:
            The backend key/value pair holding the same data
        """
        ...

    def to_modern_api(self, kvp: Any) -> Any:
        """
        Convert a v1 backend key/value pair into a v3 API resource.

        Args:
            kvp: The backend key/value pair to convert

        Returns:
            The v3 API resource

        Raises:
            ConversionError: If the stored record cannot be expressed in v3
        """
        ...
