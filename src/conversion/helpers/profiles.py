"""Profile id rewriting between the v1 and v3 namespace prefixes."""

from __future__ import annotations

from collections.abc import Iterable

from ..constants import PROFILE_NAMESPACE_PREFIX_V1, PROFILE_NAMESPACE_PREFIX_V3


def convert_profile_id(profile_id: str) -> str:
    """Shorten the legacy namespace prefix of a profile id, if it has one."""
    if profile_id.startswith(PROFILE_NAMESPACE_PREFIX_V1):
        return (
            PROFILE_NAMESPACE_PREFIX_V3
            + profile_id[len(PROFILE_NAMESPACE_PREFIX_V1):]
        )
    return profile_id


def convert_profile_ids(profile_ids: Iterable[str]) -> list[str]:
    """Rewrite every profile id; order matters to policy evaluation and is kept."""
    return [convert_profile_id(profile_id) for profile_id in profile_ids]
