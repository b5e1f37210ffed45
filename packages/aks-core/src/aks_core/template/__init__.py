"""ARM template serialization for resolved clusters."""

from __future__ import annotations

from aks_core.template.serializer import (
    MANAGED_CLUSTER_API_VERSION,
    MANAGED_CLUSTER_TYPE,
    template_to_json,
    to_arm_resource,
    to_arm_template,
    write_template,
)

__all__ = [
    "MANAGED_CLUSTER_API_VERSION",
    "MANAGED_CLUSTER_TYPE",
    "template_to_json",
    "to_arm_resource",
    "to_arm_template",
    "write_template",
]
