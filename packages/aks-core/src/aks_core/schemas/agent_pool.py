"""Agent pool configuration model.

This module defines AgentPoolConfig, the user-facing description of one
homogeneous group of worker nodes (size, count, optional network attachment).
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_AGENT_POOL_NAME = "nodepool1"
DEFAULT_VM_SIZE = "Standard_DS2_v2"
DEFAULT_NODE_COUNT = 3


class OsType(str, Enum):
    """Operating system of the pool's nodes.

    Values:
        LINUX: Linux nodes (default).
        WINDOWS: Windows Server nodes.
    """

    LINUX = "Linux"
    WINDOWS = "Windows"


class AgentPoolConfig(BaseModel):
    """Configuration for a single AKS agent pool.

    The pool name is normalised to lowercase when the pool is built. The
    vnet/subnet pair must be given together or not at all; that rule is
    checked by the agent pool builder so it can be reported alongside every
    other problem in the cluster.

    Attributes:
        name: Pool name (case-insensitive).
        vm_size: Azure VM size for every node.
        count: Number of nodes (positive).
        vnet: Virtual network the pool's subnet belongs to.
        subnet: Subnet the nodes attach to.
        os_type: Node operating system.
        os_disk_size_gb: OS disk size; platform default when unset.
        max_pods: Maximum pods per node; platform default when unset.

    Example:
        >>> pool = AgentPoolConfig(name="linuxPool", count=3)
        >>> pool = pool.with_network_attachment("my-vnet", "containernet")
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(
        default=DEFAULT_AGENT_POOL_NAME,
        min_length=1,
        description="Agent pool name (normalised to lowercase)",
    )
    vm_size: str = Field(
        default=DEFAULT_VM_SIZE,
        min_length=1,
        description="Azure VM size",
    )
    count: int = Field(
        default=DEFAULT_NODE_COUNT,
        gt=0,
        description="Number of nodes in the pool",
    )
    vnet: str | None = Field(
        default=None,
        min_length=1,
        description="Virtual network name (requires subnet)",
    )
    subnet: str | None = Field(
        default=None,
        min_length=1,
        description="Subnet name (requires vnet)",
    )
    os_type: OsType = Field(
        default=OsType.LINUX,
        description="Node operating system",
    )
    os_disk_size_gb: int | None = Field(
        default=None,
        gt=0,
        le=2048,
        description="OS disk size in GB",
    )
    max_pods: int | None = Field(
        default=None,
        gt=0,
        description="Maximum pods per node",
    )

    def with_network_attachment(self, vnet: str, subnet: str) -> AgentPoolConfig:
        """Return a copy of this pool attached to ``vnet``/``subnet``."""
        return type(self).model_validate({**dict(self), "vnet": vnet, "subnet": subnet})
