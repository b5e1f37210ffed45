"""ClusterConfig root model for an AKS cluster.

This module defines the ClusterConfig root configuration model that
represents everything a user can say about one managed cluster. A
ClusterConfig is always constructible; whether it is deployable is decided
by the builder's validation pass.

Configuration is accumulated either by passing fields directly, by loading
a YAML document, or through the fluent ``with_*``/``add_*`` methods, each of
which returns a new frozen value.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from aks_core.errors import ConfigurationError
from aks_core.schemas.agent_pool import AgentPoolConfig
from aks_core.schemas.identity import (
    IdentityMode,
    ManagedIdentity,
    ServicePrincipal,
    UnsetIdentity,
    merge_identity,
)
from aks_core.schemas.linux_profile import LinuxProfileConfig
from aks_core.schemas.network_profile import NetworkProfileConfig

# ARM expression resolving to the deployment resource group's location
DEFAULT_LOCATION = "[resourceGroup().location]"

MAX_DNS_PREFIX_LENGTH = 54


class ClusterConfig(BaseModel):
    """Root configuration model for a managed AKS cluster.

    Attributes:
        name: Cluster name (case preserved). Also the base of the default
            DNS prefix and of the generated secret parameter name.
        location: Azure region or ARM location expression.
        dns_prefix: DNS prefix override.
        agent_pools: Agent pools in declaration order. A single default pool
            is used when empty.
        identity: Identity choice (managed identity or service principal).
        linux_profile: Admin account and SSH keys for Linux nodes.
        network_profile: Azure CNI or kubenet network profile.
        enable_private_cluster: Restrict the API server to private networking.
        authorized_ip_ranges: CIDR blocks allowed to reach the API server.
            Duplicates are dropped; first-seen order is kept.
        enable_rbac: Enable Kubernetes RBAC.
        kubernetes_version: Kubernetes version; platform default when unset.

    Example:
        >>> config = (
        ...     ClusterConfig(name="k8s-cluster")
        ...     .with_dns_prefix("testaks")
        ...     .add_agent_pools([AgentPoolConfig(name="linuxPool", count=3)])
        ...     .with_linux_profile("aksuser", "public-key-here")
        ...     .with_service_principal_client_id("some-spn-client-id")
        ... )

        >>> config = ClusterConfig.from_yaml("cluster.yaml")
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(
        ...,
        min_length=1,
        max_length=63,
        description="Cluster name",
    )
    location: str = Field(
        default=DEFAULT_LOCATION,
        min_length=1,
        description="Azure region or ARM location expression",
    )
    dns_prefix: str | None = Field(
        default=None,
        min_length=1,
        max_length=MAX_DNS_PREFIX_LENGTH,
        description="DNS prefix override (derived from name when unset)",
    )
    agent_pools: tuple[AgentPoolConfig, ...] = Field(
        default=(),
        description="Agent pools in declaration order",
    )
    identity: IdentityMode = Field(
        default_factory=UnsetIdentity,
        description="Cluster identity choice",
    )
    linux_profile: LinuxProfileConfig | None = Field(
        default=None,
        description="Admin account and SSH keys for Linux nodes",
    )
    network_profile: NetworkProfileConfig | None = Field(
        default=None,
        description="Azure CNI or kubenet network profile",
    )
    enable_private_cluster: bool = Field(
        default=False,
        description="Restrict the API server to private networking",
    )
    authorized_ip_ranges: tuple[str, ...] = Field(
        default=(),
        description="CIDR blocks allowed to reach the API server",
    )
    enable_rbac: bool = Field(
        default=False,
        description="Enable Kubernetes RBAC",
    )
    kubernetes_version: str | None = Field(
        default=None,
        pattern=r"^\d+\.\d+(\.\d+)?$",
        description="Kubernetes version (e.g., '1.28.3')",
    )

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        """Reject whitespace-only names; the name itself is kept verbatim."""
        if not v.strip():
            raise ValueError("Cluster name cannot be blank")
        return v

    @field_validator("authorized_ip_ranges")
    @classmethod
    def dedupe_ranges(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Strip surrounding whitespace and drop duplicates, keeping first-seen order.

        Ranges are not parsed here; malformed entries are reported by the
        builder's validation pass together with every other problem.
        """
        return tuple(dict.fromkeys(ip_range.strip() for ip_range in v))

    @classmethod
    def from_dict(cls, data: Any, *, source: str | None = None) -> ClusterConfig:
        """Validate a parsed configuration document.

        Args:
            data: Parsed document (must be a mapping).
            source: Where the document came from, for error context.

        Raises:
            ConfigurationError: If the document is empty or not a mapping.
            pydantic.ValidationError: If schema validation fails.
        """
        if data is None:
            raise ConfigurationError("Cluster configuration is empty", file_path=source)
        if not isinstance(data, dict):
            raise ConfigurationError(
                "Cluster configuration must be a mapping",
                file_path=source,
                internal_details=f"got {type(data).__name__}",
            )
        return cls.model_validate(data)

    @classmethod
    def from_yaml(cls, path: str | Path) -> ClusterConfig:
        """Load and validate ClusterConfig from a YAML file.

        Args:
            path: Path to the cluster YAML file.

        Returns:
            Validated ClusterConfig instance.

        Raises:
            FileNotFoundError: If file doesn't exist.
            yaml.YAMLError: If YAML syntax is invalid.
            ConfigurationError: If the document is empty or not a mapping.
            pydantic.ValidationError: If schema validation fails.

        Example:
            >>> config = ClusterConfig.from_yaml("cluster.yaml")
            >>> config.name
            'k8s-cluster'
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        with path.open("r") as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data, source=str(path))

    def _replace(self, **changes: Any) -> ClusterConfig:
        return type(self).model_validate({**dict(self), **changes})

    def with_dns_prefix(self, dns_prefix: str) -> ClusterConfig:
        """Return a copy with an explicit DNS prefix."""
        return self._replace(dns_prefix=dns_prefix)

    def add_agent_pools(self, pools: Iterable[AgentPoolConfig]) -> ClusterConfig:
        """Return a copy with ``pools`` appended to the agent pools."""
        return self._replace(agent_pools=(*self.agent_pools, *pools))

    def use_managed_identity(self) -> ClusterConfig:
        """Return a copy that uses a system-assigned managed identity."""
        return self._replace(identity=merge_identity(self.identity, ManagedIdentity()))

    def with_service_principal_client_id(self, client_id: str) -> ClusterConfig:
        """Return a copy that uses the service principal ``client_id``."""
        principal = ServicePrincipal(client_id=client_id)
        return self._replace(identity=merge_identity(self.identity, principal))

    def with_linux_profile(self, admin_username: str, *public_keys: str) -> ClusterConfig:
        """Return a copy with a Linux admin account and SSH keys."""
        profile = LinuxProfileConfig(admin_username=admin_username, ssh_public_keys=public_keys)
        return self._replace(linux_profile=profile)

    def with_network_profile(self, profile: NetworkProfileConfig) -> ClusterConfig:
        """Return a copy with the given network profile."""
        return self._replace(network_profile=profile)

    def with_private_cluster(self, enabled: bool = True) -> ClusterConfig:
        """Return a copy with the private API server flag set."""
        return self._replace(enable_private_cluster=enabled)

    def add_authorized_ip_ranges(self, ranges: Iterable[str]) -> ClusterConfig:
        """Return a copy with ``ranges`` added to the authorized IP ranges."""
        return self._replace(authorized_ip_ranges=(*self.authorized_ip_ranges, *ranges))
