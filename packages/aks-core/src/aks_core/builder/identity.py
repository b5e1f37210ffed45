"""Identity and service principal resolution.

Maps the cluster's identity choice onto the ARM ``identity`` and
``servicePrincipalProfile`` blocks:

- Managed identity: identity type "SystemAssigned", client ID "msi"
- Service principal: identity type "None", the given client ID, and a secret
  supplied at deployment time through a generated ``securestring`` parameter
  named ``client-secret-for-<clusterName>``
- Unset or conflicting choices fail resolution
"""

from __future__ import annotations

from aks_core.builder.models import (
    ClusterIdentity,
    IdentityType,
    ResolvedIdentity,
    ServicePrincipalProfile,
    TemplateParameter,
)
from aks_core.errors import ConflictingIdentityError, MissingServicePrincipalError
from aks_core.schemas import (
    ConflictingIdentity,
    IdentityMode,
    ManagedIdentity,
    ServicePrincipal,
)

# Client ID the platform expects when the cluster uses its managed identity
MSI_CLIENT_ID = "msi"

SECRET_PARAMETER_PREFIX = "client-secret-for-"


def secret_parameter_name(cluster_name: str) -> str:
    """Return the name of the client secret parameter for a cluster.

    Example:
        >>> secret_parameter_name("k8s-cluster")
        'client-secret-for-k8s-cluster'
    """
    return f"{SECRET_PARAMETER_PREFIX}{cluster_name}"


def resolve_identity(cluster_name: str, identity: IdentityMode) -> ResolvedIdentity:
    """Resolve the identity choice of a cluster.

    Args:
        cluster_name: Cluster name (used for the secret parameter name).
        identity: The identity choice from the configuration.

    Returns:
        ResolvedIdentity with any generated secret parameter.

    Raises:
        MissingServicePrincipalError: If no identity was chosen.
        ConflictingIdentityError: If different identities were chosen.

    Example:
        >>> resolved = resolve_identity("k8s-cluster", ServicePrincipal(client_id="x"))
        >>> resolved.service_principal_profile.secret
        "[parameters('client-secret-for-k8s-cluster')]"
    """
    if isinstance(identity, ManagedIdentity):
        return ResolvedIdentity(
            identity=ClusterIdentity(type=IdentityType.SYSTEM_ASSIGNED),
            service_principal_profile=ServicePrincipalProfile(client_id=MSI_CLIENT_ID),
        )

    if isinstance(identity, ServicePrincipal):
        parameter = TemplateParameter(
            name=secret_parameter_name(cluster_name),
            description=f"Client secret of the service principal for cluster {cluster_name}",
        )
        return ResolvedIdentity(
            identity=ClusterIdentity(type=IdentityType.NONE),
            service_principal_profile=ServicePrincipalProfile(
                client_id=identity.client_id,
                secret=parameter.reference,
            ),
            secret_parameter=parameter,
        )

    if isinstance(identity, ConflictingIdentity):
        raise ConflictingIdentityError(
            cluster_name, [choice.describe() for choice in identity.choices]
        )

    raise MissingServicePrincipalError(cluster_name)
