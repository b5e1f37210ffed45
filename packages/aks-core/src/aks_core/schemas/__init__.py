"""Schema definitions for aks-core.

This module exports the cluster configuration Pydantic models:

Root Model:
- ClusterConfig: Everything a user can say about one AKS cluster

Component Models:
- AgentPoolConfig: One node pool (size, count, network attachment)
- LinuxProfileConfig: Admin account and SSH keys
- AzureCniNetworkProfileConfig / KubenetNetworkProfileConfig: Network profile variants
- UnsetIdentity / ManagedIdentity / ServicePrincipal / ConflictingIdentity: Identity variants
"""

from __future__ import annotations

from aks_core.schemas.agent_pool import (
    DEFAULT_AGENT_POOL_NAME,
    DEFAULT_NODE_COUNT,
    DEFAULT_VM_SIZE,
    AgentPoolConfig,
    OsType,
)
from aks_core.schemas.cluster_config import (
    DEFAULT_LOCATION,
    MAX_DNS_PREFIX_LENGTH,
    ClusterConfig,
)
from aks_core.schemas.identity import (
    ConflictingIdentity,
    IdentityMode,
    ManagedIdentity,
    ServicePrincipal,
    UnsetIdentity,
    merge_identity,
)
from aks_core.schemas.linux_profile import LinuxProfileConfig
from aks_core.schemas.network_profile import (
    AzureCniNetworkProfileConfig,
    HasLoadBalancerSku,
    KubenetNetworkProfileConfig,
    LoadBalancerSku,
    NetworkPlugin,
    NetworkProfileConfig,
)

__all__ = [
    # Root
    "ClusterConfig",
    "DEFAULT_LOCATION",
    "MAX_DNS_PREFIX_LENGTH",
    # Agent pools
    "AgentPoolConfig",
    "OsType",
    "DEFAULT_AGENT_POOL_NAME",
    "DEFAULT_NODE_COUNT",
    "DEFAULT_VM_SIZE",
    # Identity
    "IdentityMode",
    "UnsetIdentity",
    "ManagedIdentity",
    "ServicePrincipal",
    "ConflictingIdentity",
    "merge_identity",
    # Linux profile
    "LinuxProfileConfig",
    # Network profile
    "NetworkProfileConfig",
    "AzureCniNetworkProfileConfig",
    "KubenetNetworkProfileConfig",
    "LoadBalancerSku",
    "NetworkPlugin",
    "HasLoadBalancerSku",
]
