"""aks-core: Validated AKS cluster resources and ARM templates.

This package provides:
- ClusterConfig: Pydantic schema for an AKS cluster configuration
- AksResourceBuilder: Validate ClusterConfig → ResolvedClusterResource
- to_arm_template: Lower resolved clusters into an ARM deployment template
- CIDR helpers used for network address derivation
- JSON Schema export utilities
"""

from __future__ import annotations

__version__ = "0.1.0"

# Builders and output models
from aks_core.builder import (
    AksResourceBuilder,
    ResolvedClusterResource,
    build_cluster,
    validate_cluster,
)

# Error types
from aks_core.errors import (
    AddressOutOfRangeError,
    AksBuilderError,
    ClusterConfigError,
    ClusterValidationError,
    ConfigurationError,
    ConflictingIdentityError,
    IncompleteNetworkAttachmentError,
    InvalidCidrFormatError,
    MissingServicePrincipalError,
    PrivateClusterRequiresStandardLBError,
    TemplateError,
)

# JSON Schema export functions
from aks_core.export import (
    export_cluster_config_schema,
    export_resolved_resource_schema,
)

# CIDR helpers
from aks_core.network import IPv4Cidr, format_cidr, offset_address, parse_cidr

# Schema models
from aks_core.schemas import (
    AgentPoolConfig,
    AzureCniNetworkProfileConfig,
    ClusterConfig,
    KubenetNetworkProfileConfig,
    LinuxProfileConfig,
    LoadBalancerSku,
)

# Template serialization
from aks_core.template import template_to_json, to_arm_resource, to_arm_template, write_template

__all__ = [
    "__version__",
    # Builders
    "AksResourceBuilder",
    "ResolvedClusterResource",
    "build_cluster",
    "validate_cluster",
    # Errors
    "AksBuilderError",
    "ConfigurationError",
    "TemplateError",
    "ClusterConfigError",
    "ClusterValidationError",
    "InvalidCidrFormatError",
    "AddressOutOfRangeError",
    "IncompleteNetworkAttachmentError",
    "MissingServicePrincipalError",
    "ConflictingIdentityError",
    "PrivateClusterRequiresStandardLBError",
    # JSON Schema exports
    "export_cluster_config_schema",
    "export_resolved_resource_schema",
    # CIDR
    "IPv4Cidr",
    "parse_cidr",
    "format_cidr",
    "offset_address",
    # Schema models
    "ClusterConfig",
    "AgentPoolConfig",
    "LinuxProfileConfig",
    "AzureCniNetworkProfileConfig",
    "KubenetNetworkProfileConfig",
    "LoadBalancerSku",
    # Templates
    "to_arm_resource",
    "to_arm_template",
    "template_to_json",
    "write_template",
]
