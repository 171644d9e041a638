"""
names.py – identity codec for v3 WorkloadEndpoint names
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
A v1 endpoint is identified by four fields (host, orchestrator, workload id,
endpoint id). A v3 endpoint has a single name. The name is built as::

    <lower-host>-<orchestrator>-<escaped-pod>-<endpoint>

where every hyphen of the pod name is doubled. A single hyphen therefore
always marks a field boundary, and a doubled one is a literal hyphen.

For orchestrator ``k8s`` the workload id is ``<namespace>.<pod>``; the
namespace does not appear in the name and travels as the v3 resource
namespace instead.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    ESCAPED_SEPARATOR,
    K8S_WORKLOAD_SEPARATOR,
    NAME_SEPARATOR,
    ORCHESTRATOR_K8S,
)
from .exceptions import MalformedIdentifierError

_NAME_FIELDS = 4


@dataclass(frozen=True)
class WorkloadIdentity:
    """A workload id split into its namespace (k8s only) and workload name."""

    namespace: str | None
    name: str


@dataclass(frozen=True)
class WorkloadEndpointIdentifiers:
    """The four fields identifying a workload endpoint."""

    host: str
    orchestrator: str
    workload_id: str
    endpoint_id: str


def decode_workload_id(orchestrator: str, workload_id: str) -> WorkloadIdentity:
    """
    Split a workload id into namespace and workload name.

    Only k8s workload ids carry a namespace; any other orchestrator's id is
    returned whole as the workload name.

    Raises:
        MalformedIdentifierError: a k8s workload id has no '.' separator.
    """
    if orchestrator != ORCHESTRATOR_K8S:
        return WorkloadIdentity(namespace=None, name=workload_id)

    namespace, sep, pod = workload_id.partition(K8S_WORKLOAD_SEPARATOR)
    if not sep:
        raise MalformedIdentifierError(
            f"malformed k8s workload ID '{workload_id}': workload was not added "
            "through the Calico CNI plugin and cannot be converted",
            identifier=workload_id,
        )
    return WorkloadIdentity(namespace=namespace, name=pod)


def escape(value: str) -> str:
    """Double every hyphen so it cannot be mistaken for a field boundary."""
    return value.replace(NAME_SEPARATOR, ESCAPED_SEPARATOR)


def encode(host: str, orchestrator: str, workload_id: str, endpoint_id: str) -> str:
    """Build the v3 resource name of a workload endpoint."""
    workload = decode_workload_id(orchestrator, workload_id)
    return NAME_SEPARATOR.join(
        [host.lower(), orchestrator, escape(workload.name), endpoint_id]
    )


def _split_fields(name: str) -> list[str]:
    fields: list[str] = []
    current: list[str] = []
    i = 0
    while i < len(name):
        if name.startswith(ESCAPED_SEPARATOR, i):
            current.append(NAME_SEPARATOR)
            i += len(ESCAPED_SEPARATOR)
        elif name.startswith(NAME_SEPARATOR, i):
            fields.append("".join(current))
            current = []
            i += len(NAME_SEPARATOR)
        else:
            current.append(name[i])
            i += 1
    fields.append("".join(current))
    return fields


def parse(name: str, namespace: str | None = None) -> WorkloadEndpointIdentifiers:
    """
    Recover the four identity fields from a name produced by :func:`encode`.

    ``namespace`` is the v3 resource namespace and is required for k8s
    endpoints. Hosts, orchestrators and endpoint ids are not escaped by
    :func:`encode`, so some names split more than one way. A name is only
    accepted when encoding the recovered fields gives it back unchanged. The
    recovered host is lower-case.

    Raises:
        MalformedIdentifierError: the name does not split into four fields, a
            k8s name comes without a namespace, or the split is ambiguous.
    """
    fields = _split_fields(name)
    if len(fields) != _NAME_FIELDS or not all(fields):
        raise MalformedIdentifierError(
            f"malformed workload endpoint name '{name}': expected "
            "'<node>-<orchestrator>-<workload>-<endpoint>'",
            identifier=name,
        )
    host, orchestrator, workload, endpoint_id = fields

    if orchestrator == ORCHESTRATOR_K8S:
        if not namespace:
            raise MalformedIdentifierError(
                f"k8s workload endpoint name '{name}' needs a namespace to "
                "recover its workload ID",
                identifier=name,
            )
        workload_id = f"{namespace}{K8S_WORKLOAD_SEPARATOR}{workload}"
    else:
        workload_id = workload

    if encode(host, orchestrator, workload_id, endpoint_id) != name:
        raise MalformedIdentifierError(
            f"workload endpoint name '{name}' cannot be decoded unambiguously",
            identifier=name,
        )

    return WorkloadEndpointIdentifiers(
        host=host,
        orchestrator=orchestrator,
        workload_id=workload_id,
        endpoint_id=endpoint_id,
    )
