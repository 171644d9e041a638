"""Label map rewriting between the v1 and v3 key namespaces."""

from __future__ import annotations

from collections.abc import Mapping

from ..constants import LABEL_NAMESPACE_V1, LABEL_NAMESPACE_V3


def convert_label_key(key: str) -> str:
    """Return the v3 name of a v1 label key."""
    if key == LABEL_NAMESPACE_V1:
        return LABEL_NAMESPACE_V3
    return key


def convert_labels(labels: Mapping[str, str] | None) -> dict[str, str]:
    """
    Rewrite a v1 label map for the v3 API.

    The legacy namespace label is renamed; every other pair is copied. The
    result is always a new dict, empty when there are no labels.
    """
    if not labels:
        return {}
    return {convert_label_key(key): value for key, value in labels.items()}
