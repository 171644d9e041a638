"""Conversion of WorkloadEndpoint records from the v1 data model to v3."""

from __future__ import annotations

from src.models.backend import (
    WorkloadEndpointKey,
    WorkloadEndpointKVPair,
    WorkloadEndpointValue,
)
from src.models.v1 import WorkloadEndpointV1
from src.models.v3 import ObjectMeta, WorkloadEndpointSpecV3, WorkloadEndpointV3

from . import names
from .base_converter import BaseConverter
from .constants import ORCHESTRATOR_K8S, STATE_ACTIVE
from .helpers import (
    convert_labels,
    convert_profile_ids,
    format_gateway,
    merge_nats,
    merge_networks,
    partition_nats,
    partition_networks,
)


class WorkloadEndpointConverter(BaseConverter):
    """
    Converts WorkloadEndpoints v1 API → v1 backend → v3 API.

    The backend form keeps legacy labels and profile ids; both are rewritten
    only on the way to v3. Address text is validated when the input models are
    built, so :meth:`to_backend` has no failure path of its own.
    """

    kind = "WorkloadEndpoint"

    def to_backend(self, resource: WorkloadEndpointV1) -> WorkloadEndpointKVPair:
        """
        Convert a v1 API WorkloadEndpoint into its backend key/value pair.

        Networks and NAT mappings are split per address family; the state is
        always "active".
        """
        metadata = resource.metadata
        spec = resource.spec

        ipv4_nets, ipv6_nets = partition_networks(spec.ip_networks)
        ipv4_nat, ipv6_nat = partition_nats(spec.ip_nats)

        key = WorkloadEndpointKey(
            hostname=metadata.node,
            orchestrator_id=metadata.orchestrator,
            workload_id=metadata.workload,
            endpoint_id=metadata.name,
        )
        value = WorkloadEndpointValue(
            state=STATE_ACTIVE,
            name=spec.interface_name,
            active_instance_id=metadata.active_instance_id,
            mac=spec.mac,
            profile_ids=list(spec.profiles),
            ipv4_nets=ipv4_nets,
            ipv6_nets=ipv6_nets,
            ipv4_nat=ipv4_nat,
            ipv6_nat=ipv6_nat,
            labels=dict(metadata.labels),
            ipv4_gateway=spec.ipv4_gateway,
            ipv6_gateway=spec.ipv6_gateway,
            ports=list(spec.ports),
        )

        kvp = WorkloadEndpointKVPair(key=key, value=value)
        self._log_conversion(
            "v1 API -> backend",
            f"{metadata.node}/{metadata.orchestrator}/{metadata.workload}/{metadata.name}",
            f"{key.hostname}/{key.orchestrator_id}/{key.workload_id}/{key.endpoint_id}",
        )
        return kvp

    def to_modern_api(self, kvp: WorkloadEndpointKVPair) -> WorkloadEndpointV3:
        """
        Convert a backend WorkloadEndpoint key/value pair into a v3 resource.

        Raises:
            MalformedIdentifierError: The key holds a k8s workload id without
                the '<namespace>.<pod>' separator.
        """
        key = kvp.key
        value = kvp.value

        workload = names.decode_workload_id(key.orchestrator_id, key.workload_id)
        name = names.encode(
            key.hostname, key.orchestrator_id, key.workload_id, key.endpoint_id
        )
        is_k8s = key.orchestrator_id == ORCHESTRATOR_K8S

        metadata = ObjectMeta(
            name=name,
            namespace=workload.namespace,
            labels=convert_labels(value.labels),
        )
        spec = WorkloadEndpointSpecV3(
            orchestrator=key.orchestrator_id,
            workload=None if is_k8s else workload.name,
            node=key.hostname.lower(),
            container_id=value.active_instance_id,
            pod=workload.name if is_k8s else None,
            endpoint=key.endpoint_id,
            ip_networks=merge_networks(value.ipv4_nets, value.ipv6_nets),
            ip_nats=merge_nats(value.ipv4_nat, value.ipv6_nat),
            ipv4_gateway=format_gateway(value.ipv4_gateway),
            ipv6_gateway=format_gateway(value.ipv6_gateway),
            profiles=convert_profile_ids(value.profile_ids),
            interface_name=value.name,
            mac=value.mac,
            ports=list(value.ports),
        )

        resource = WorkloadEndpointV3(metadata=metadata, spec=spec)
        self._log_conversion(
            "backend -> v3 API",
            f"{key.hostname}/{key.orchestrator_id}/{key.workload_id}/{key.endpoint_id}",
            name,
        )
        return resource
