"""AKS resource builder.

This module implements the AksResourceBuilder, which turns a ClusterConfig
into a ResolvedClusterResource:

1. Resolve agent pools (a single default pool when none are declared)
2. Resolve the DNS prefix (explicit, or derived from the cluster name)
3. Resolve the network profile, if any
4. Validate the assembled draft, collecting every error
5. Resolve the identity and assemble the immutable resource

A configuration that fails validation never yields a resource; the builder
raises a single ClusterValidationError carrying every problem.
"""

from __future__ import annotations

import structlog

from aks_core.builder.agent_pool import build_agent_pool, default_agent_pool
from aks_core.builder.identity import resolve_identity
from aks_core.builder.models import (
    AgentPoolProfile,
    ApiServerAccessProfile,
    ClusterDraft,
    LinuxProfile,
    NetworkProfile,
    ResolvedClusterResource,
)
from aks_core.builder.network_profile import build_network_profile
from aks_core.builder.validator import validate_cluster
from aks_core.errors import ClusterConfigError, ClusterValidationError
from aks_core.schemas import MAX_DNS_PREFIX_LENGTH, ClusterConfig

logger = structlog.get_logger(__name__)

DNS_PREFIX_SUFFIX = "-dns"


def default_dns_prefix(cluster_name: str) -> str:
    """Derive the DNS prefix used when none is configured.

    The cluster name is truncated so the result never exceeds the length
    allowed for an explicit prefix.

    Example:
        >>> default_dns_prefix("aks-cluster")
        'aks-cluster-dns'
    """
    base = cluster_name[: MAX_DNS_PREFIX_LENGTH - len(DNS_PREFIX_SUFFIX)]
    return f"{base}{DNS_PREFIX_SUFFIX}"


class AksResourceBuilder:
    """Build validated AKS cluster resources from ClusterConfig.

    The builder holds no state between calls; ``build`` is safe to call
    concurrently and calling it twice with the same configuration yields
    equal resources.

    Example:
        >>> builder = AksResourceBuilder()
        >>> resource = builder.build(
        ...     ClusterConfig(name="aks-cluster").use_managed_identity()
        ... )
        >>> resource.agent_pool_profiles[0].name
        'nodepool1'
    """

    def build(self, config: ClusterConfig) -> ResolvedClusterResource:
        """Build the resolved cluster resource.

        Args:
            config: Cluster configuration.

        Returns:
            Immutable ResolvedClusterResource ready for serialization.

        Raises:
            ClusterValidationError: If any validation rule fails. The error
                carries the full list of problems.
        """
        log = logger.bind(cluster=config.name)
        log.debug("cluster_build_started")

        build_errors: list[ClusterConfigError] = []

        agent_pools = self._resolve_agent_pools(config, build_errors)
        dns_prefix = config.dns_prefix or default_dns_prefix(config.name)
        network_profile = self._resolve_network_profile(config, build_errors)

        draft = ClusterDraft(
            name=config.name,
            identity=config.identity,
            network_profile=config.network_profile,
            enable_private_cluster=config.enable_private_cluster,
            authorized_ip_ranges=config.authorized_ip_ranges,
            build_errors=tuple(build_errors),
        )
        errors = validate_cluster(draft)
        if errors:
            log.warning(
                "cluster_validation_failed",
                error_count=len(errors),
                codes=[e.code for e in errors],
            )
            raise ClusterValidationError(config.name, errors)

        identity = resolve_identity(config.name, config.identity)
        parameters = (identity.secret_parameter,) if identity.secret_parameter else ()

        linux_profile = None
        if config.linux_profile is not None:
            linux_profile = LinuxProfile(
                admin_username=config.linux_profile.admin_username,
                ssh_public_keys=config.linux_profile.ssh_public_keys,
            )

        resource = ResolvedClusterResource(
            name=config.name,
            location=config.location,
            dns_prefix=dns_prefix,
            agent_pool_profiles=tuple(agent_pools),
            identity=identity.identity,
            service_principal_profile=identity.service_principal_profile,
            linux_profile=linux_profile,
            network_profile=network_profile,
            api_server_access_profile=ApiServerAccessProfile(
                enable_private_cluster=config.enable_private_cluster,
                authorized_ip_ranges=config.authorized_ip_ranges,
            ),
            enable_rbac=config.enable_rbac,
            kubernetes_version=config.kubernetes_version,
            parameters=parameters,
        )
        log.info(
            "cluster_build_completed",
            agent_pools=len(resource.agent_pool_profiles),
            identity_type=resource.identity.type.value,
            parameters=[p.name for p in resource.parameters],
        )
        return resource

    def _resolve_agent_pools(
        self,
        config: ClusterConfig,
        errors: list[ClusterConfigError],
    ) -> list[AgentPoolProfile]:
        """Build every pool, collecting per-pool failures into ``errors``."""
        pools = config.agent_pools or (default_agent_pool(),)
        profiles: list[AgentPoolProfile] = []
        for pool in pools:
            try:
                profiles.append(build_agent_pool(pool))
            except ClusterConfigError as e:
                errors.append(e)
        return profiles

    def _resolve_network_profile(
        self,
        config: ClusterConfig,
        errors: list[ClusterConfigError],
    ) -> NetworkProfile | None:
        if config.network_profile is None:
            return None
        try:
            return build_network_profile(config.network_profile)
        except ClusterConfigError as e:
            errors.append(e)
            return None


def build_cluster(config: ClusterConfig) -> ResolvedClusterResource:
    """Build a cluster resource with a default AksResourceBuilder."""
    return AksResourceBuilder().build(config)
