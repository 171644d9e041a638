"""Unit tests for WorkloadEndpointConverter (v1 API -> backend -> v3 API)."""

from __future__ import annotations

import logging
from ipaddress import IPv4Address, IPv4Interface, IPv6Address, IPv6Interface
from typing import Any

import pytest

from src.conversion import (
    MalformedIdentifierError,
    WorkloadEndpointConverter,
    convert_backend_to_v3,
    convert_v1_to_backend,
)
from src.models.backend import (
    IPNATBackend,
    WorkloadEndpointKey,
    WorkloadEndpointKVPair,
    WorkloadEndpointValue,
)
from src.models.net import EndpointPort
from src.models.v1 import (
    IPNATv1,
    WorkloadEndpointMetadataV1,
    WorkloadEndpointSpecV1,
    WorkloadEndpointV1,
)
from src.models.v3 import IPNATv3

MAC = "02:42:7d:c6:f0:80"
INSTANCE_ID = "1337495556942031415926535"

# -------------------- Fixture builders --------------------


def make_labels_v1() -> dict[str, str]:
    return {"calico/k8s_ns": "default", "test": "someValue"}


def make_labels_v3() -> dict[str, str]:
    return {"projectcalico.org/namespace": "default", "test": "someValue"}


def make_profiles_v1() -> list[str]:
    return ["k8s_ns.profile1", "profile2"]


def make_profiles_v3() -> list[str]:
    return ["kns.profile1", "profile2"]


def make_ports() -> list[EndpointPort]:
    return [EndpointPort(name="ep1", protocol="tcp", port=80)]


def make_ipnat_v1() -> list[IPNATv1]:
    return [
        IPNATv1(internal_ip="10.0.0.1", external_ip="172.0.0.1"),
        IPNATv1(internal_ip="2001::", external_ip="2002::"),
    ]


def make_v1(
    ip_networks: list[str],
    ip_nats: list[IPNATv1],
    ipv4_gateway: str | None = None,
    ipv6_gateway: str | None = None,
    labels: dict[str, str] | None = None,
    workload: str = "default.frontend-5gs43",
) -> WorkloadEndpointV1:
    return WorkloadEndpointV1(
        metadata=WorkloadEndpointMetadataV1(
            name="eth0",
            workload=workload,
            orchestrator="k8s",
            node="TestNode",
            active_instance_id=INSTANCE_ID,
            labels=make_labels_v1() if labels is None else labels,
        ),
        spec=WorkloadEndpointSpecV1(
            ip_networks=ip_networks,
            ip_nats=ip_nats,
            ipv4_gateway=ipv4_gateway,
            ipv6_gateway=ipv6_gateway,
            profiles=make_profiles_v1(),
            interface_name="cali1234",
            mac=MAC,
            ports=make_ports(),
        ),
    )


def make_kvp(workload_id: str = "default.frontend-5gs43", **value: Any) -> WorkloadEndpointKVPair:
    fields: dict[str, Any] = {
        "labels": make_labels_v1(),
        "active_instance_id": INSTANCE_ID,
        "state": "active",
        "name": "cali1234",
        "mac": MAC,
        "profile_ids": make_profiles_v1(),
        "ipv4_nets": ["10.0.0.1/32"],
        "ipv4_nat": [IPNATBackend(int_ip="10.0.0.1", ext_ip="172.0.0.1")],
        "ipv4_gateway": "10.0.0.254",
        "ports": make_ports(),
    }
    fields.update(value)
    return WorkloadEndpointKVPair(
        key=WorkloadEndpointKey(
            hostname="TestNode",
            orchestrator_id="k8s",
            workload_id=workload_id,
            endpoint_id="eth0",
        ),
        value=WorkloadEndpointValue(**fields),
    )


@pytest.fixture
def converter() -> WorkloadEndpointConverter:
    return WorkloadEndpointConverter()


@pytest.fixture
def full_v1() -> WorkloadEndpointV1:
    """Fully populated dual-stack endpoint."""
    return make_v1(
        ip_networks=["10.0.0.1/32", "2001::/128"],
        ip_nats=make_ipnat_v1(),
        ipv4_gateway="10.0.0.254",
        ipv6_gateway="2001::",
    )


# --------------------------- Tests ---------------------------


class TestToBackend:
    def test_key_maps_identity_unencoded(
        self, converter: WorkloadEndpointConverter, full_v1: WorkloadEndpointV1
    ) -> None:
        kvp = converter.to_backend(full_v1)
        assert kvp.key == WorkloadEndpointKey(
            hostname="TestNode",
            orchestrator_id="k8s",
            workload_id="default.frontend-5gs43",
            endpoint_id="eth0",
        )

    def test_fully_populated_value(
        self, converter: WorkloadEndpointConverter, full_v1: WorkloadEndpointV1
    ) -> None:
        value = converter.to_backend(full_v1).value
        assert value.state == "active"
        assert value.name == "cali1234"
        assert value.active_instance_id == INSTANCE_ID
        assert value.mac == MAC
        assert value.ipv4_nets == [IPv4Interface("10.0.0.1/32")]
        assert value.ipv6_nets == [IPv6Interface("2001::/128")]
        assert value.ipv4_nat == [
            IPNATBackend(int_ip=IPv4Address("10.0.0.1"), ext_ip=IPv4Address("172.0.0.1"))
        ]
        assert value.ipv6_nat == [
            IPNATBackend(int_ip=IPv6Address("2001::"), ext_ip=IPv6Address("2002::"))
        ]
        assert value.ipv4_gateway == IPv4Address("10.0.0.254")
        assert value.ipv6_gateway == IPv6Address("2001::")
        assert value.ports == make_ports()

    def test_labels_and_profiles_keep_legacy_form(
        self, converter: WorkloadEndpointConverter, full_v1: WorkloadEndpointV1
    ) -> None:
        value = converter.to_backend(full_v1).value
        assert value.labels == make_labels_v1()
        assert value.profile_ids == make_profiles_v1()

    def test_ipv4_only_leaves_empty_ipv6_lists(
        self, converter: WorkloadEndpointConverter
    ) -> None:
        wep = make_v1(
            ip_networks=["10.0.0.1/32"],
            ip_nats=[IPNATv1(internal_ip="10.0.0.1", external_ip="172.0.0.1")],
            ipv4_gateway="10.0.0.254",
        )
        value = converter.to_backend(wep).value
        assert value.ipv6_nets == []
        assert value.ipv6_nat == []
        assert value.ipv6_gateway is None

    def test_ipv6_only_leaves_empty_ipv4_lists(
        self, converter: WorkloadEndpointConverter
    ) -> None:
        wep = make_v1(
            ip_networks=["2001::/128"],
            ip_nats=[IPNATv1(internal_ip="2001::", external_ip="2002::")],
            ipv6_gateway="2001::",
        )
        value = converter.to_backend(wep).value
        assert value.ipv4_nets == []
        assert value.ipv4_nat == []
        assert value.ipv4_gateway is None
        assert value.ipv6_nets == [IPv6Interface("2001::/128")]

    def test_interleaved_networks_keep_order_within_family(
        self, converter: WorkloadEndpointConverter
    ) -> None:
        wep = make_v1(
            ip_networks=["2001::1/128", "10.0.0.2/32", "2001::2/128", "10.0.0.1/32"],
            ip_nats=[],
        )
        value = converter.to_backend(wep).value
        assert [str(n) for n in value.ipv4_nets] == ["10.0.0.2/32", "10.0.0.1/32"]
        assert [str(n) for n in value.ipv6_nets] == ["2001::1/128", "2001::2/128"]

    def test_input_is_not_mutated(
        self, converter: WorkloadEndpointConverter, full_v1: WorkloadEndpointV1
    ) -> None:
        before = full_v1.model_dump()
        converter.to_backend(full_v1)
        assert full_v1.model_dump() == before

    def test_malformed_workload_id_is_accepted(
        self, converter: WorkloadEndpointConverter
    ) -> None:
        wep = make_v1(ip_networks=[], ip_nats=[], workload="default/frontend-5gs43")
        kvp = converter.to_backend(wep)
        assert kvp.key.workload_id == "default/frontend-5gs43"


class TestToModernAPI:
    def test_fully_populated(self, converter: WorkloadEndpointConverter) -> None:
        kvp = make_kvp(
            ipv6_nets=["2001::/128"],
            ipv6_nat=[IPNATBackend(int_ip="2001::", ext_ip="2002::")],
            ipv6_gateway="2001::",
        )
        wep = converter.to_modern_api(kvp)

        assert wep.metadata.name == "testnode-k8s-frontend--5gs43-eth0"
        assert wep.metadata.namespace == "default"
        assert wep.metadata.labels == make_labels_v3()

        spec = wep.spec
        assert spec.orchestrator == "k8s"
        assert spec.node == "testnode"
        assert spec.pod == "frontend-5gs43"
        assert spec.workload is None
        assert spec.endpoint == "eth0"
        assert spec.container_id == INSTANCE_ID
        assert spec.ip_networks == ["10.0.0.1/32", "2001::/128"]
        assert spec.ip_nats == [
            IPNATv3(internal_ip="10.0.0.1", external_ip="172.0.0.1"),
            IPNATv3(internal_ip="2001::", external_ip="2002::"),
        ]
        assert spec.ipv4_gateway == "10.0.0.254"
        assert spec.ipv6_gateway == "2001::"
        assert spec.profiles == make_profiles_v3()
        assert spec.interface_name == "cali1234"
        assert spec.mac == MAC
        assert spec.ports == make_ports()

    def test_absent_gateway_is_omitted(self, converter: WorkloadEndpointConverter) -> None:
        wep = converter.to_modern_api(make_kvp())
        assert wep.spec.ipv6_gateway is None
        assert "ipv6Gateway" not in wep.to_document()["spec"]
        assert wep.to_document()["spec"]["ipv4Gateway"] == "10.0.0.254"

    def test_missing_labels_give_empty_map(
        self, converter: WorkloadEndpointConverter
    ) -> None:
        wep = converter.to_modern_api(make_kvp(labels={}))
        assert wep.metadata.labels == {}

    def test_non_k8s_orchestrator_uses_workload(
        self, converter: WorkloadEndpointConverter
    ) -> None:
        kvp = WorkloadEndpointKVPair(
            key=WorkloadEndpointKey(
                hostname="host1",
                orchestrator_id="openstack",
                workload_id="vm-42",
                endpoint_id="tap0",
            ),
            value=WorkloadEndpointValue(state="active"),
        )
        wep = converter.to_modern_api(kvp)
        assert wep.metadata.name == "host1-openstack-vm--42-tap0"
        assert wep.metadata.namespace is None
        assert wep.spec.workload == "vm-42"
        assert wep.spec.pod is None
        assert wep.spec.ip_networks == []
        assert wep.spec.ip_nats == []

    def test_bad_k8s_workload_id_fails(
        self, converter: WorkloadEndpointConverter
    ) -> None:
        kvp = make_kvp(workload_id="default/frontend-5gs43")
        with pytest.raises(MalformedIdentifierError) as exc_info:
            converter.to_modern_api(kvp)
        assert str(exc_info.value) == (
            "malformed k8s workload ID 'default/frontend-5gs43': workload was not "
            "added through the Calico CNI plugin and cannot be converted"
        )
        assert exc_info.value.identifier == "default/frontend-5gs43"

    def test_failure_is_not_logged(
        self, converter: WorkloadEndpointConverter, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG)
        with pytest.raises(MalformedIdentifierError):
            converter.to_modern_api(make_kvp(workload_id="nodot"))
        assert caplog.records == []

    def test_success_logs_at_debug(
        self, converter: WorkloadEndpointConverter, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG)
        converter.to_modern_api(make_kvp())
        assert any(
            "testnode-k8s-frontend--5gs43-eth0" in r.message for r in caplog.records
        )


class TestEndToEnd:
    @pytest.mark.parametrize(
        "networks,nats,v4_gw,v6_gw,expected_networks,expected_nats",
        [
            (
                ["10.0.0.1/32", "2001::/128"],
                make_ipnat_v1(),
                "10.0.0.254",
                "2001::",
                ["10.0.0.1/32", "2001::/128"],
                [("10.0.0.1", "172.0.0.1"), ("2001::", "2002::")],
            ),
            (
                ["10.0.0.1/32"],
                make_ipnat_v1()[:1],
                "10.0.0.254",
                None,
                ["10.0.0.1/32"],
                [("10.0.0.1", "172.0.0.1")],
            ),
            (
                ["2001::/128"],
                make_ipnat_v1()[1:],
                None,
                "2001::",
                ["2001::/128"],
                [("2001::", "2002::")],
            ),
            (
                ["2001::/128", "10.0.0.1/32"],
                list(reversed(make_ipnat_v1())),
                None,
                None,
                ["10.0.0.1/32", "2001::/128"],
                [("10.0.0.1", "172.0.0.1"), ("2001::", "2002::")],
            ),
        ],
        ids=["dual-stack", "ipv4-only", "ipv6-only", "interleaved"],
    )
    def test_v1_to_v3(
        self,
        networks: list[str],
        nats: list[IPNATv1],
        v4_gw: str | None,
        v6_gw: str | None,
        expected_networks: list[str],
        expected_nats: list[tuple[str, str]],
    ) -> None:
        wep = convert_backend_to_v3(
            convert_v1_to_backend(make_v1(networks, nats, v4_gw, v6_gw))
        )
        assert wep.metadata.name == "testnode-k8s-frontend--5gs43-eth0"
        assert wep.spec.ip_networks == expected_networks
        assert [(n.internal_ip, n.external_ip) for n in wep.spec.ip_nats] == expected_nats
        assert wep.spec.ipv4_gateway == v4_gw
        assert wep.spec.ipv6_gateway == v6_gw

    def test_conversion_is_deterministic(self, full_v1: WorkloadEndpointV1) -> None:
        first = convert_backend_to_v3(convert_v1_to_backend(full_v1))
        second = convert_backend_to_v3(convert_v1_to_backend(full_v1))
        assert first.to_document() == second.to_document()

    def test_v3_document_shape(self, full_v1: WorkloadEndpointV1) -> None:
        doc = convert_backend_to_v3(convert_v1_to_backend(full_v1)).to_document()
        assert doc["apiVersion"] == "projectcalico.org/v3"
        assert doc["kind"] == "WorkloadEndpoint"
        assert doc["metadata"] == {
            "name": "testnode-k8s-frontend--5gs43-eth0",
            "namespace": "default",
            "labels": make_labels_v3(),
        }
        assert doc["spec"]["containerID"] == INSTANCE_ID
        assert doc["spec"]["ipNATs"][0] == {
            "internalIP": "10.0.0.1",
            "externalIP": "172.0.0.1",
        }
        assert doc["spec"]["ports"] == [{"name": "ep1", "protocol": "tcp", "port": 80}]
