"""Agent pool builder.

Turns an AgentPoolConfig into a resolved AgentPoolProfile.
"""

from __future__ import annotations

import structlog

from aks_core.builder.models import AgentPoolProfile
from aks_core.errors import IncompleteNetworkAttachmentError
from aks_core.schemas import AgentPoolConfig

logger = structlog.get_logger(__name__)


def default_agent_pool() -> AgentPoolConfig:
    """Return the pool used when a cluster declares none (nodepool1, 3 nodes)."""
    return AgentPoolConfig()


def build_agent_pool(pool: AgentPoolConfig) -> AgentPoolProfile:
    """Resolve one agent pool.

    Pool names are case-insensitive on the platform and are emitted in
    lowercase. The vnet/subnet pair must be complete or absent.

    Args:
        pool: Agent pool configuration.

    Returns:
        Resolved AgentPoolProfile.

    Raises:
        IncompleteNetworkAttachmentError: If only one of vnet/subnet is set.

    Example:
        >>> build_agent_pool(AgentPoolConfig(name="linuxPool")).name
        'linuxpool'
    """
    if (pool.vnet is None) != (pool.subnet is None):
        raise IncompleteNetworkAttachmentError(pool.name, vnet=pool.vnet, subnet=pool.subnet)

    profile = AgentPoolProfile(
        name=pool.name.lower(),
        vm_size=pool.vm_size,
        count=pool.count,
        os_type=pool.os_type,
        os_disk_size_gb=pool.os_disk_size_gb,
        max_pods=pool.max_pods,
        vnet=pool.vnet,
        subnet=pool.subnet,
    )
    logger.debug(
        "agent_pool_built",
        pool=profile.name,
        vm_size=profile.vm_size,
        count=profile.count,
        network_attached=profile.is_network_attached,
    )
    return profile
