"""Network profile configuration models.

A cluster's network profile is a closed union of two plugin variants:
- AzureCniNetworkProfileConfig: Azure CNI, with an optional service CIDR
- KubenetNetworkProfileConfig: kubenet, tracking only the load balancer SKU

Both variants expose ``load_balancer_sku`` so that callers can read the
effective SKU without knowing which variant is active.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Protocol

from pydantic import BaseModel, ConfigDict, Discriminator, Field


class LoadBalancerSku(str, Enum):
    """Azure load balancer tier.

    Values:
        BASIC: Basic tier (no private cluster support).
        STANDARD: Standard tier.
    """

    BASIC = "Basic"
    STANDARD = "Standard"


class NetworkPlugin(str, Enum):
    """Kubernetes network plugin."""

    AZURE = "azure"
    KUBENET = "kubenet"


class HasLoadBalancerSku(Protocol):
    """Anything that reports the load balancer SKU it will deploy."""

    @property
    def load_balancer_sku(self) -> LoadBalancerSku: ...


class AzureCniNetworkProfileConfig(BaseModel):
    """Azure CNI network profile.

    The DNS service IP is not configurable: it is derived from
    ``service_cidr`` when the profile is built.

    Attributes:
        plugin: Variant discriminator ("azure").
        service_cidr: Kubernetes service address block (a.b.c.d/n).
        docker_bridge_cidr: Docker bridge address block (a.b.c.d/n).
        load_balancer_sku: Load balancer tier.

    Example:
        >>> profile = AzureCniNetworkProfileConfig(service_cidr="10.250.0.0/16")
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    plugin: Literal["azure"] = Field(
        default="azure",
        description="Network plugin discriminator",
    )
    service_cidr: str | None = Field(
        default=None,
        description="Kubernetes service CIDR (e.g., '10.250.0.0/16')",
    )
    docker_bridge_cidr: str | None = Field(
        default=None,
        description="Docker bridge CIDR (e.g., '172.17.0.1/16')",
    )
    load_balancer_sku: LoadBalancerSku = Field(
        default=LoadBalancerSku.STANDARD,
        description="Load balancer tier",
    )


class KubenetNetworkProfileConfig(BaseModel):
    """Kubenet network profile.

    Attributes:
        plugin: Variant discriminator ("kubenet").
        load_balancer_sku: Load balancer tier.

    Example:
        >>> profile = KubenetNetworkProfileConfig(load_balancer_sku="Basic")
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    plugin: Literal["kubenet"] = Field(
        default="kubenet",
        description="Network plugin discriminator",
    )
    load_balancer_sku: LoadBalancerSku = Field(
        default=LoadBalancerSku.STANDARD,
        description="Load balancer tier",
    )


# Union type with discriminator on "plugin" field
NetworkProfileConfig = Annotated[
    AzureCniNetworkProfileConfig | KubenetNetworkProfileConfig,
    Discriminator("plugin"),
]
"""Network profile with discriminated union for Azure CNI and kubenet."""
