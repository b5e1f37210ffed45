"""Shared pytest fixtures for aks-core tests.

This module provides common fixtures used across the unit tests: structlog
configuration and a handful of cluster configurations in the shapes the
builder most often sees.
"""

from __future__ import annotations

from typing import Any

import pytest
import structlog

from aks_core.schemas import (
    AgentPoolConfig,
    AzureCniNetworkProfileConfig,
    ClusterConfig,
    KubenetNetworkProfileConfig,
    LoadBalancerSku,
)


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Configure structlog to print to stdout for test capture.

    Loggers are created per call, so each one writes to whatever
    sys.stdout is at that moment and capsys sees the events.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


@pytest.fixture
def sample_cluster_yaml() -> dict[str, Any]:
    """Return a cluster.yaml document exercising most fields.

    Returns:
        Dictionary representing a valid cluster.yaml structure.
    """
    return {
        "name": "k8s-cluster",
        "dns_prefix": "testaks",
        "agent_pools": [
            {
                "name": "linuxPool",
                "count": 3,
                "vnet": "my-vnet",
                "subnet": "containernet",
            }
        ],
        "identity": {"mode": "service_principal", "client_id": "some-spn-client-id"},
        "linux_profile": {
            "admin_username": "aksuser",
            "ssh_public_keys": ["ssh-rsa AAAAB3NzaC1yc2E aksuser@example"],
        },
        "network_profile": {
            "plugin": "azure",
            "service_cidr": "10.250.0.0/16",
            "docker_bridge_cidr": "172.17.0.1/16",
            "load_balancer_sku": "Standard",
        },
        "enable_private_cluster": True,
        "authorized_ip_ranges": ["88.77.66.0/24"],
    }


@pytest.fixture
def managed_cluster() -> ClusterConfig:
    """Return the smallest deployable cluster: a name and managed identity."""
    return ClusterConfig(name="aks-cluster").use_managed_identity()


@pytest.fixture
def service_principal_cluster() -> ClusterConfig:
    """Return a networked cluster using a service principal."""
    return (
        ClusterConfig(name="k8s-cluster")
        .with_dns_prefix("testaks")
        .add_agent_pools(
            [AgentPoolConfig(name="linuxPool").with_network_attachment("my-vnet", "containernet")]
        )
        .with_linux_profile("aksuser", "ssh-rsa AAAAB3NzaC1yc2E aksuser@example")
        .with_service_principal_client_id("some-spn-client-id")
        .with_network_profile(AzureCniNetworkProfileConfig(service_cidr="10.250.0.0/16"))
    )


@pytest.fixture
def basic_kubenet_profile() -> KubenetNetworkProfileConfig:
    """Return a kubenet profile on the Basic load balancer tier."""
    return KubenetNetworkProfileConfig(load_balancer_sku=LoadBalancerSku.BASIC)
