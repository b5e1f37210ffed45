"""Network profile builder.

Resolves a network profile configuration, deriving the cluster DNS service
IP from the service CIDR for Azure CNI profiles.
"""

from __future__ import annotations

import ipaddress

import structlog

from aks_core.builder.models import NetworkProfile
from aks_core.network import DNS_SERVICE_IP_OFFSET, offset_address, parse_cidr
from aks_core.schemas import (
    AzureCniNetworkProfileConfig,
    HasLoadBalancerSku,
    KubenetNetworkProfileConfig,
    LoadBalancerSku,
    NetworkPlugin,
    NetworkProfileConfig,
)

logger = structlog.get_logger(__name__)

# SKU assumed by the platform when a cluster has no network profile at all
IMPLICIT_LOAD_BALANCER_SKU = LoadBalancerSku.BASIC


def effective_load_balancer_sku(profile: HasLoadBalancerSku | None) -> LoadBalancerSku:
    """Return the load balancer SKU a cluster will deploy with.

    Works for either network profile variant (configured or resolved)
    without inspecting which one it is.
    """
    if profile is None:
        return IMPLICIT_LOAD_BALANCER_SKU
    return profile.load_balancer_sku


def build_azure_cni_profile(config: AzureCniNetworkProfileConfig) -> NetworkProfile:
    """Resolve an Azure CNI profile.

    When ``service_cidr`` is set it is canonicalised and the DNS service IP
    is placed at a fixed offset inside it. When it is unset, both stay unset
    and the platform defaults apply. The docker bridge CIDR is checked but
    emitted as written.

    Raises:
        InvalidCidrFormatError: If a CIDR field does not parse.
        AddressOutOfRangeError: If the service CIDR is too small to hold
            the DNS service IP.

    Example:
        >>> profile = build_azure_cni_profile(
        ...     AzureCniNetworkProfileConfig(service_cidr="10.250.0.0/16")
        ... )
        >>> str(profile.dns_service_ip)
        '10.250.0.2'
    """
    service_cidr = None
    dns_service_ip = None
    if config.service_cidr is not None:
        service_cidr = parse_cidr(config.service_cidr)
        dns_service_ip = offset_address(service_cidr, DNS_SERVICE_IP_OFFSET)

    # The bridge CIDR names the bridge interface itself, so host bits are kept.
    docker_bridge_cidr = None
    if config.docker_bridge_cidr is not None:
        parse_cidr(config.docker_bridge_cidr)
        docker_bridge_cidr = ipaddress.IPv4Interface(config.docker_bridge_cidr.strip())

    return NetworkProfile(
        plugin=NetworkPlugin.AZURE,
        service_cidr=service_cidr,
        dns_service_ip=dns_service_ip,
        docker_bridge_cidr=docker_bridge_cidr,
        load_balancer_sku=config.load_balancer_sku,
    )


def build_kubenet_profile(config: KubenetNetworkProfileConfig) -> NetworkProfile:
    """Resolve a kubenet profile (load balancer SKU only)."""
    return NetworkProfile(
        plugin=NetworkPlugin.KUBENET,
        load_balancer_sku=config.load_balancer_sku,
    )


def build_network_profile(config: NetworkProfileConfig) -> NetworkProfile:
    """Resolve either network profile variant.

    Errors from CIDR parsing and address derivation propagate to the caller.
    """
    if isinstance(config, AzureCniNetworkProfileConfig):
        profile = build_azure_cni_profile(config)
    else:
        profile = build_kubenet_profile(config)

    logger.debug(
        "network_profile_built",
        plugin=profile.plugin.value,
        service_cidr=str(profile.service_cidr) if profile.service_cidr else None,
        dns_service_ip=str(profile.dns_service_ip) if profile.dns_service_ip else None,
        load_balancer_sku=profile.load_balancer_sku.value,
    )
    return profile
