"""Custom exception hierarchy for aks-core.

This module defines the exception classes used throughout aks-core:
- AksBuilderError: Base exception for all builder errors
- ConfigurationError: Raised when a cluster configuration file cannot be loaded
- TemplateError: Raised when resources cannot share one deployment template
- ClusterConfigError: Base for static configuration problems found while building
- ClusterValidationError: Composite raised when a build fails validation

Every ClusterConfigError carries a stable ``code`` and the ``subject`` it is
attributed to (pool name, CIDR string, cluster name) so that callers can
report every problem of a configuration in one pass.

User-facing messages are safe to display; technical details are logged
internally via structlog.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

logger = structlog.get_logger(__name__)


class AksBuilderError(Exception):
    """Base exception for aks-core.

    All aks-core exceptions inherit from this class. User-facing messages
    are safe to display; technical details are logged internally.

    Args:
        user_message: Safe message to display to the user.
        internal_details: Optional technical details for logging. This is
            logged internally but NEVER exposed to the user.

    Example:
        >>> raise AksBuilderError(
        ...     "Cluster configuration invalid",
        ...     internal_details="agent_pools[0].count: got 0",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize AksBuilderError with user message and optional internal details.

        Args:
            user_message: Safe message to display to the user.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(user_message)
        self.user_message = user_message

        if internal_details:
            logger.error(
                "aks_builder_error",
                error_type=self.__class__.__name__,
                user_message=user_message,
                internal_details=internal_details,
            )


class ConfigurationError(AksBuilderError):
    """Raised when a cluster configuration file cannot be loaded.

    Use this exception when:
    - The YAML document is not a mapping
    - The configuration file is empty

    Attributes:
        file_path: Path to the configuration file (if known).
        field_path: Dot-separated path to the invalid field (if known).

    Example:
        >>> raise ConfigurationError(
        ...     "Expected a mapping at document root",
        ...     file_path="cluster.yaml",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        file_path: str | None = None,
        field_path: str | None = None,
        internal_details: str | None = None,
    ) -> None:
        """Initialize ConfigurationError with context.

        Args:
            user_message: Safe message to display to the user.
            file_path: Path to the configuration file (optional).
            field_path: Dot-separated path to the field (optional).
            internal_details: Technical details for internal logging only.
        """
        context_parts: list[str] = []
        if file_path:
            context_parts.append(f"in {file_path}")
        if field_path:
            context_parts.append(f"field '{field_path}'")

        if context_parts:
            full_message = f"{user_message} ({', '.join(context_parts)})"
        else:
            full_message = user_message

        super().__init__(full_message, internal_details=internal_details)

        self.file_path = file_path
        self.field_path = field_path


class TemplateError(AksBuilderError):
    """Raised when resources cannot be combined into one deployment template.

    Use this exception when:
    - Two clusters in one template share a name
    - Two resources declare the same parameter differently
    """

    pass


class ClusterConfigError(AksBuilderError):
    """Base class for static cluster configuration errors.

    These errors are detected from the configuration alone; none of them
    represent a runtime or environmental failure.

    Attributes:
        code: Stable error code (e.g. "InvalidCidrFormat").
        subject: The entity the error is attributed to.
    """

    code: str = "ClusterConfigError"

    def __init__(
        self,
        user_message: str,
        *,
        subject: str | None = None,
        internal_details: str | None = None,
    ) -> None:
        super().__init__(user_message, internal_details=internal_details)
        self.subject = subject


class InvalidCidrFormatError(ClusterConfigError):
    """Raised when a string is not a valid ``a.b.c.d/n`` IPv4 CIDR block.

    Example:
        >>> raise InvalidCidrFormatError("10.0.0.0/33")
        # User sees: "Invalid CIDR '10.0.0.0/33': expected a.b.c.d/n ..."
    """

    code = "InvalidCidrFormat"

    def __init__(self, value: str, *, reason: str | None = None) -> None:
        detail = reason or "expected a.b.c.d/n with octets 0-255 and prefix 0-32"
        super().__init__(f"Invalid CIDR '{value}': {detail}", subject=value)
        self.value = value


class AddressOutOfRangeError(ClusterConfigError):
    """Raised when an address offset falls outside its CIDR block."""

    code = "AddressOutOfRange"

    def __init__(self, cidr: str, offset: int, num_addresses: int) -> None:
        super().__init__(
            f"Offset {offset} is outside CIDR block '{cidr}' "
            f"({num_addresses} addresses available)",
            subject=cidr,
        )
        self.cidr = cidr
        self.offset = offset
        self.num_addresses = num_addresses


class IncompleteNetworkAttachmentError(ClusterConfigError):
    """Raised when an agent pool sets only one of vnet/subnet.

    Attributes:
        pool_name: Name of the offending agent pool.
        vnet: Virtual network name given (if any).
        subnet: Subnet name given (if any).
    """

    code = "IncompleteNetworkAttachment"

    def __init__(self, pool_name: str, *, vnet: str | None, subnet: str | None) -> None:
        missing = "subnet" if subnet is None else "vnet"
        super().__init__(
            f"Agent pool '{pool_name}' must set both vnet and subnet, or neither "
            f"(missing {missing})",
            subject=pool_name,
        )
        self.pool_name = pool_name
        self.vnet = vnet
        self.subnet = subnet


class MissingServicePrincipalError(ClusterConfigError):
    """Raised when neither managed identity nor a service principal is chosen."""

    code = "MissingServicePrincipal"

    def __init__(self, cluster_name: str) -> None:
        super().__init__(
            f"Cluster '{cluster_name}' needs a managed identity or a service "
            "principal client ID",
            subject=cluster_name,
        )
        self.cluster_name = cluster_name


class ConflictingIdentityError(ClusterConfigError):
    """Raised when more than one identity choice was made for a cluster."""

    code = "ConflictingIdentity"

    def __init__(self, cluster_name: str, choices: Sequence[str]) -> None:
        super().__init__(
            f"Cluster '{cluster_name}' has conflicting identity settings: "
            f"{', '.join(choices)}",
            subject=cluster_name,
        )
        self.cluster_name = cluster_name
        self.choices = list(choices)


class PrivateClusterRequiresStandardLBError(ClusterConfigError):
    """Raised when a private cluster is not fronted by a Standard load balancer."""

    code = "PrivateClusterRequiresStandardLB"

    def __init__(self, sku: str) -> None:
        super().__init__(
            f"Private clusters require a Standard load balancer, got '{sku}'",
            subject=sku,
        )
        self.sku = sku


class ClusterValidationError(AksBuilderError):
    """Raised when a cluster build fails validation.

    Carries every problem found in the configuration, not just the first.

    Attributes:
        cluster_name: Name of the cluster being built.
        errors: All configuration errors, in rule order.

    Example:
        >>> try:
        ...     build_cluster(config)
        ... except ClusterValidationError as e:
        ...     for err in e.errors:
        ...         print(err.code, err.subject)
    """

    def __init__(self, cluster_name: str, errors: Sequence[ClusterConfigError]) -> None:
        self.cluster_name = cluster_name
        self.errors: list[ClusterConfigError] = list(errors)
        lines = [f"Cluster '{cluster_name}' failed validation with {len(self.errors)} error(s):"]
        lines.extend(f"  - [{e.code}] {e.user_message}" for e in self.errors)
        super().__init__(
            "\n".join(lines),
            internal_details=", ".join(self.codes) if self.errors else None,
        )

    @property
    def codes(self) -> list[str]:
        """Error codes in the order the errors were found."""
        return [e.code for e in self.errors]
