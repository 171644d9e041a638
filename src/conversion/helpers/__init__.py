from .ip_family import (
    format_gateway,
    merge_nats,
    merge_networks,
    partition_by_family,
    partition_nats,
    partition_networks,
)
from .labels import convert_label_key, convert_labels
from .profiles import convert_profile_id, convert_profile_ids

__all__ = [
    "convert_label_key",
    "convert_labels",
    "convert_profile_id",
    "convert_profile_ids",
    "format_gateway",
    "merge_nats",
    "merge_networks",
    "partition_by_family",
    "partition_nats",
    "partition_networks",
]
