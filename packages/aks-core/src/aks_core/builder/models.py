"""Builder output models for aks-core.

This module defines the models produced by the builders:
- AgentPoolProfile / NetworkProfile / LinuxProfile: resolved sub-resources
- ResolvedIdentity: identity type, service principal profile, and any
  generated secret parameter
- ResolvedClusterResource: the immutable, fully defaulted cluster description
  consumed by the template serializer
- ClusterDraft: the intermediate value inspected by the validator
"""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from aks_core.errors import ClusterConfigError
from aks_core.network import IPv4Cidr
from aks_core.schemas import (
    DEFAULT_LOCATION,
    MAX_DNS_PREFIX_LENGTH,
    HasLoadBalancerSku,
    IdentityMode,
    LoadBalancerSku,
    NetworkPlugin,
    OsType,
)


class IdentityType(str, Enum):
    """ARM ``identity.type`` of a managed cluster."""

    SYSTEM_ASSIGNED = "SystemAssigned"
    NONE = "None"


class TemplateParameter(BaseModel):
    """Deployment-time template parameter generated by a builder.

    Attributes:
        name: Parameter name.
        type: ARM parameter type.
        description: Human-readable description (emitted as metadata).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Parameter name")
    type: Literal["securestring", "string"] = Field(
        default="securestring",
        description="ARM parameter type",
    )
    description: str | None = Field(default=None, description="Parameter description")

    @property
    def reference(self) -> str:
        """ARM expression referencing this parameter."""
        return f"[parameters('{self.name}')]"


class AgentPoolProfile(BaseModel):
    """Resolved agent pool: lowercase name, defaults applied."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Lowercase pool name")
    vm_size: str = Field(..., description="Azure VM size")
    count: int = Field(..., gt=0, description="Number of nodes")
    os_type: OsType = Field(default=OsType.LINUX, description="Node operating system")
    os_disk_size_gb: int | None = Field(default=None, description="OS disk size in GB")
    max_pods: int | None = Field(default=None, description="Maximum pods per node")
    vnet: str | None = Field(default=None, description="Virtual network name")
    subnet: str | None = Field(default=None, description="Subnet name")

    @property
    def is_network_attached(self) -> bool:
        return self.vnet is not None and self.subnet is not None


class NetworkProfile(BaseModel):
    """Resolved network profile.

    ``service_cidr`` and ``dns_service_ip`` are only ever set together, and
    only for the Azure CNI plugin.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    plugin: NetworkPlugin = Field(..., description="Network plugin")
    service_cidr: IPv4Cidr | None = Field(default=None, description="Service CIDR")
    dns_service_ip: ipaddress.IPv4Address | None = Field(
        default=None,
        description="Cluster DNS service IP (derived from service_cidr)",
    )
    docker_bridge_cidr: ipaddress.IPv4Interface | None = Field(
        default=None,
        description="Docker bridge interface address and prefix",
    )
    load_balancer_sku: LoadBalancerSku = Field(
        default=LoadBalancerSku.STANDARD,
        description="Load balancer tier",
    )


class LinuxProfile(BaseModel):
    """Resolved Linux admin profile."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    admin_username: str = Field(..., description="Admin username")
    ssh_public_keys: tuple[str, ...] = Field(..., description="SSH public keys")


class ClusterIdentity(BaseModel):
    """ARM ``identity`` block."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: IdentityType = Field(..., description="Identity type")


class ServicePrincipalProfile(BaseModel):
    """ARM ``servicePrincipalProfile`` block.

    Attributes:
        client_id: Service principal client ID, or "msi" for managed identity.
        secret: ARM parameter reference for the client secret; None for MSI.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    client_id: str = Field(..., min_length=1, description="Client ID or 'msi'")
    secret: str | None = Field(default=None, description="Secret parameter reference")


class ApiServerAccessProfile(BaseModel):
    """ARM ``apiServerAccessProfile`` block."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    enable_private_cluster: bool = Field(default=False, description="Private API server")
    authorized_ip_ranges: tuple[str, ...] = Field(
        default=(),
        description="CIDR blocks allowed to reach the API server",
    )


class ResolvedIdentity(BaseModel):
    """Outcome of identity resolution."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    identity: ClusterIdentity
    service_principal_profile: ServicePrincipalProfile
    secret_parameter: TemplateParameter | None = None


class ResolvedClusterResource(BaseModel):
    """Immutable, validated description of one managed cluster.

    Every default has been applied and every cross-field rule has passed.
    This is the only value the template serializer consumes.

    Contract Rules:
    - Model is immutable (frozen=True)
    - Unknown fields are rejected (extra="forbid")
    - Constructed once per build; never mutated

    Attributes:
        name: Cluster name, verbatim.
        location: Azure region or ARM location expression.
        dns_prefix: Resolved DNS prefix.
        agent_pool_profiles: Resolved agent pools, in declaration order.
        identity: ARM identity block.
        service_principal_profile: ARM service principal block.
        linux_profile: Linux admin profile, if configured.
        network_profile: Network profile, if configured.
        api_server_access_profile: Private cluster flag and authorized ranges.
        enable_rbac: Kubernetes RBAC flag.
        kubernetes_version: Kubernetes version, if pinned.
        parameters: Template parameters the deployer must supply.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1)
    location: str = Field(default=DEFAULT_LOCATION)
    dns_prefix: str = Field(..., min_length=1, max_length=MAX_DNS_PREFIX_LENGTH)
    agent_pool_profiles: tuple[AgentPoolProfile, ...] = Field(..., min_length=1)
    identity: ClusterIdentity
    service_principal_profile: ServicePrincipalProfile
    linux_profile: LinuxProfile | None = None
    network_profile: NetworkProfile | None = None
    api_server_access_profile: ApiServerAccessProfile = Field(
        default_factory=ApiServerAccessProfile
    )
    enable_rbac: bool = False
    kubernetes_version: str | None = None
    parameters: tuple[TemplateParameter, ...] = ()


@dataclass(frozen=True)
class ClusterDraft:
    """Assembled-but-unvalidated cluster, as seen by the validator.

    Attributes:
        name: Cluster name.
        identity: Identity choice, not yet resolved.
        network_profile: Whatever reports the load balancer SKU (the network
            profile configuration), or None when no profile was supplied.
        enable_private_cluster: Private API server flag.
        authorized_ip_ranges: Raw authorized range strings.
        build_errors: Errors raised by sub-builders (agent pools, network
            profile), in build order.
    """

    name: str
    identity: IdentityMode
    network_profile: HasLoadBalancerSku | None = None
    enable_private_cluster: bool = False
    authorized_ip_ranges: tuple[str, ...] = ()
    build_errors: tuple[ClusterConfigError, ...] = field(default=())
