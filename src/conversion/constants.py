"""Fixed rules of the v1 → v3 WorkloadEndpoint upgrade."""

from typing import Final

ORCHESTRATOR_K8S: Final[str] = "k8s"

# Separator between namespace and pod name in a k8s workload id.
K8S_WORKLOAD_SEPARATOR: Final[str] = "."

# Structural separator of generated v3 names, and its escaped literal form.
NAME_SEPARATOR: Final[str] = "-"
ESCAPED_SEPARATOR: Final[str] = "--"

# The v1 API has no non-active manually created endpoint.
STATE_ACTIVE: Final[str] = "active"

LABEL_NAMESPACE_V1: Final[str] = "calico/k8s_ns"
LABEL_NAMESPACE_V3: Final[str] = "projectcalico.org/namespace"

PROFILE_NAMESPACE_PREFIX_V1: Final[str] = "k8s_ns."
PROFILE_NAMESPACE_PREFIX_V3: Final[str] = "kns."
