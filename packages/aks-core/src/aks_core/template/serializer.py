"""ARM template serializer.

Lowers ResolvedClusterResource values into Azure Resource Manager JSON.
This module holds no cluster rules of its own: every value it writes has
already been defaulted and validated by the builder.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from aks_core.builder.models import (
    AgentPoolProfile,
    NetworkProfile,
    ResolvedClusterResource,
    TemplateParameter,
)
from aks_core.errors import TemplateError

MANAGED_CLUSTER_TYPE = "Microsoft.ContainerService/managedClusters"
MANAGED_CLUSTER_API_VERSION = "2020-09-01"

DEPLOYMENT_TEMPLATE_SCHEMA = (
    "https://schema.management.azure.com/schemas/2019-04-01/deploymentTemplate.json#"
)
CONTENT_VERSION = "1.0.0.0"


def _arm_literal(value: str) -> str:
    """Escape a value for use inside a single-quoted ARM expression string."""
    return value.replace("'", "''")


def _vnet_id(vnet: str) -> str:
    return f"[resourceId('Microsoft.Network/virtualNetworks', '{_arm_literal(vnet)}')]"


def _subnet_id(vnet: str, subnet: str) -> str:
    return (
        "[resourceId('Microsoft.Network/virtualNetworks/subnets', "
        f"'{_arm_literal(vnet)}', '{_arm_literal(subnet)}')]"
    )


def _agent_pool_to_arm(pool: AgentPoolProfile, *, system: bool) -> dict[str, Any]:
    arm: dict[str, Any] = {
        "name": pool.name,
        "count": pool.count,
        "vmSize": pool.vm_size,
        "osType": pool.os_type.value,
        "type": "VirtualMachineScaleSets",
        "mode": "System" if system else "User",
    }
    if pool.os_disk_size_gb is not None:
        arm["osDiskSizeGB"] = pool.os_disk_size_gb
    if pool.max_pods is not None:
        arm["maxPods"] = pool.max_pods
    if pool.vnet is not None and pool.subnet is not None:
        arm["vnetSubnetID"] = _subnet_id(pool.vnet, pool.subnet)
    return arm


def _network_profile_to_arm(profile: NetworkProfile) -> dict[str, Any]:
    arm: dict[str, Any] = {"networkPlugin": profile.plugin.value}
    if profile.service_cidr is not None:
        arm["serviceCidr"] = str(profile.service_cidr)
    if profile.dns_service_ip is not None:
        arm["dnsServiceIP"] = str(profile.dns_service_ip)
    if profile.docker_bridge_cidr is not None:
        arm["dockerBridgeCidr"] = str(profile.docker_bridge_cidr)
    # ARM expects the SKU in lowercase
    arm["loadBalancerSku"] = profile.load_balancer_sku.value.lower()
    return arm


def to_arm_resource(resource: ResolvedClusterResource) -> dict[str, Any]:
    """Lower one resolved cluster into an ARM resource object.

    Args:
        resource: Validated cluster resource.

    Returns:
        JSON-compatible ``Microsoft.ContainerService/managedClusters`` resource.

    Example:
        >>> arm = to_arm_resource(build_cluster(config))
        >>> arm["identity"]["type"]
        'SystemAssigned'
    """
    properties: dict[str, Any] = {
        "dnsPrefix": resource.dns_prefix,
        "enableRBAC": resource.enable_rbac,
        "agentPoolProfiles": [
            _agent_pool_to_arm(pool, system=index == 0)
            for index, pool in enumerate(resource.agent_pool_profiles)
        ],
    }
    if resource.kubernetes_version is not None:
        properties["kubernetesVersion"] = resource.kubernetes_version

    if resource.linux_profile is not None:
        properties["linuxProfile"] = {
            "adminUsername": resource.linux_profile.admin_username,
            "ssh": {
                "publicKeys": [
                    {"keyData": key} for key in resource.linux_profile.ssh_public_keys
                ]
            },
        }

    if resource.network_profile is not None:
        properties["networkProfile"] = _network_profile_to_arm(resource.network_profile)

    service_principal: dict[str, Any] = {
        "clientId": resource.service_principal_profile.client_id,
    }
    if resource.service_principal_profile.secret is not None:
        service_principal["secret"] = resource.service_principal_profile.secret
    properties["servicePrincipalProfile"] = service_principal

    properties["apiServerAccessProfile"] = {
        "authorizedIPRanges": list(resource.api_server_access_profile.authorized_ip_ranges),
        "enablePrivateCluster": resource.api_server_access_profile.enable_private_cluster,
    }

    vnets = dict.fromkeys(
        pool.vnet for pool in resource.agent_pool_profiles if pool.is_network_attached
    )

    return {
        "type": MANAGED_CLUSTER_TYPE,
        "apiVersion": MANAGED_CLUSTER_API_VERSION,
        "name": resource.name,
        "location": resource.location,
        "identity": {"type": resource.identity.type.value},
        "properties": properties,
        "dependsOn": [_vnet_id(vnet) for vnet in vnets if vnet is not None],
    }


def _parameter_to_arm(parameter: TemplateParameter) -> dict[str, Any]:
    arm: dict[str, Any] = {"type": parameter.type}
    if parameter.description:
        arm["metadata"] = {"description": parameter.description}
    return arm


def to_arm_template(*resources: ResolvedClusterResource) -> dict[str, Any]:
    """Assemble a deployment template from one or more resolved clusters.

    Every generated parameter (e.g. ``client-secret-for-<clusterName>``) is
    declared in the template's ``parameters`` section.

    Raises:
        TemplateError: If two clusters share a name, or two resources
            declare the same parameter differently.

    Example:
        >>> template = to_arm_template(build_cluster(config))
        >>> list(template["parameters"])
        ['client-secret-for-k8s-cluster']
    """
    seen_names: set[str] = set()
    parameters: dict[str, dict[str, Any]] = {}
    arm_resources: list[dict[str, Any]] = []

    for resource in resources:
        if resource.name in seen_names:
            raise TemplateError(f"Cluster '{resource.name}' appears more than once in the template")
        seen_names.add(resource.name)

        for parameter in resource.parameters:
            declaration = _parameter_to_arm(parameter)
            existing = parameters.get(parameter.name)
            if existing is not None and existing != declaration:
                raise TemplateError(
                    f"Parameter '{parameter.name}' is declared with conflicting definitions",
                    internal_details=f"{existing!r} != {declaration!r}",
                )
            parameters[parameter.name] = declaration

        arm_resources.append(to_arm_resource(resource))

    return {
        "$schema": DEPLOYMENT_TEMPLATE_SCHEMA,
        "contentVersion": CONTENT_VERSION,
        "parameters": parameters,
        "variables": {},
        "resources": arm_resources,
        "outputs": {},
    }


def template_to_json(template: dict[str, Any]) -> str:
    """Render a template as pretty-printed JSON."""
    return json.dumps(template, indent=2)


def write_template(template: dict[str, Any], path: Path | str) -> Path:
    """Write a template to ``path``, creating parent directories.

    Returns:
        The path written.
    """
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(template_to_json(template))
    return output_path
