"""Builders for aks-core.

This module provides the pieces that turn ClusterConfig into a
ResolvedClusterResource:
- build_agent_pool: Resolve one agent pool
- build_network_profile: Resolve a network profile (derives the DNS service IP)
- resolve_identity: Resolve the identity / service principal choice
- validate_cluster: Run every cross-field rule over a draft
- AksResourceBuilder / build_cluster: Orchestrate the above
"""

from __future__ import annotations

from aks_core.builder.agent_pool import build_agent_pool, default_agent_pool
from aks_core.builder.identity import (
    MSI_CLIENT_ID,
    resolve_identity,
    secret_parameter_name,
)
from aks_core.builder.models import (
    AgentPoolProfile,
    ApiServerAccessProfile,
    ClusterDraft,
    ClusterIdentity,
    IdentityType,
    LinuxProfile,
    NetworkProfile,
    ResolvedClusterResource,
    ResolvedIdentity,
    ServicePrincipalProfile,
    TemplateParameter,
)
from aks_core.builder.network_profile import (
    build_network_profile,
    effective_load_balancer_sku,
)
from aks_core.builder.resource_builder import (
    AksResourceBuilder,
    build_cluster,
    default_dns_prefix,
)
from aks_core.builder.validator import validate_cluster

__all__ = [
    # Orchestration
    "AksResourceBuilder",
    "build_cluster",
    "default_dns_prefix",
    # Sub-builders
    "build_agent_pool",
    "default_agent_pool",
    "build_network_profile",
    "effective_load_balancer_sku",
    "resolve_identity",
    "secret_parameter_name",
    "MSI_CLIENT_ID",
    "validate_cluster",
    # Models
    "AgentPoolProfile",
    "ApiServerAccessProfile",
    "ClusterDraft",
    "ClusterIdentity",
    "IdentityType",
    "LinuxProfile",
    "NetworkProfile",
    "ResolvedClusterResource",
    "ResolvedIdentity",
    "ServicePrincipalProfile",
    "TemplateParameter",
]
