"""Cluster validation pass.

All cross-field rules run over a ClusterDraft and every failure is
collected; nothing short-circuits, so a caller sees every problem at once.

Rules, in reporting order:
1. The identity resolves (managed identity or exactly one service principal).
2. A private cluster deploys a Standard load balancer.
3. Sub-builder failures (agent pools, network profile) are surfaced as-is.
4. Every authorized IP range parses as a CIDR.
"""

from __future__ import annotations

from collections.abc import Callable

from aks_core.builder.identity import resolve_identity
from aks_core.builder.models import ClusterDraft
from aks_core.builder.network_profile import effective_load_balancer_sku
from aks_core.errors import (
    ClusterConfigError,
    ConflictingIdentityError,
    InvalidCidrFormatError,
    MissingServicePrincipalError,
    PrivateClusterRequiresStandardLBError,
)
from aks_core.network import parse_cidr
from aks_core.schemas import LoadBalancerSku


def check_identity(draft: ClusterDraft) -> list[ClusterConfigError]:
    try:
        resolve_identity(draft.name, draft.identity)
    except (MissingServicePrincipalError, ConflictingIdentityError) as e:
        return [e]
    return []


def check_private_cluster_load_balancer(draft: ClusterDraft) -> list[ClusterConfigError]:
    if not draft.enable_private_cluster:
        return []
    sku = effective_load_balancer_sku(draft.network_profile)
    if sku != LoadBalancerSku.STANDARD:
        return [PrivateClusterRequiresStandardLBError(sku.value)]
    return []


def check_build_errors(draft: ClusterDraft) -> list[ClusterConfigError]:
    return list(draft.build_errors)


def check_authorized_ip_ranges(draft: ClusterDraft) -> list[ClusterConfigError]:
    errors: list[ClusterConfigError] = []
    for ip_range in draft.authorized_ip_ranges:
        try:
            parse_cidr(ip_range)
        except InvalidCidrFormatError as e:
            errors.append(e)
    return errors


VALIDATION_RULES: tuple[Callable[[ClusterDraft], list[ClusterConfigError]], ...] = (
    check_identity,
    check_private_cluster_load_balancer,
    check_build_errors,
    check_authorized_ip_ranges,
)


def validate_cluster(draft: ClusterDraft) -> list[ClusterConfigError]:
    """Run every validation rule over a draft.

    Args:
        draft: The assembled, unvalidated cluster.

    Returns:
        Every error found, in rule order. An empty list means the draft is
        deployable.

    Example:
        >>> errors = validate_cluster(ClusterDraft(name="aks", identity=UnsetIdentity()))
        >>> [e.code for e in errors]
        ['MissingServicePrincipal']
    """
    errors: list[ClusterConfigError] = []
    for rule in VALIDATION_RULES:
        errors.extend(rule(draft))
    return errors
