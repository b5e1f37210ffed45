"""Unit tests for the cluster validation pass."""

from __future__ import annotations

from aks_core.builder import ClusterDraft, validate_cluster
from aks_core.errors import IncompleteNetworkAttachmentError
from aks_core.schemas import (
    AzureCniNetworkProfileConfig,
    KubenetNetworkProfileConfig,
    LoadBalancerSku,
    ManagedIdentity,
    ServicePrincipal,
    UnsetIdentity,
    merge_identity,
)


def _draft(**overrides: object) -> ClusterDraft:
    values: dict[str, object] = {"name": "aks-cluster", "identity": ManagedIdentity()}
    values.update(overrides)
    return ClusterDraft(**values)  # type: ignore[arg-type]


class TestIdentityRule:
    """Tests for the identity rule."""

    def test_valid_identity(self) -> None:
        """A single identity choice passes."""
        assert validate_cluster(_draft()) == []
        assert validate_cluster(_draft(identity=ServicePrincipal(client_id="abc"))) == []

    def test_unset_identity(self) -> None:
        """No identity is reported."""
        errors = validate_cluster(_draft(identity=UnsetIdentity()))
        assert [e.code for e in errors] == ["MissingServicePrincipal"]

    def test_conflicting_identity(self) -> None:
        """Both identities are reported as a conflict."""
        conflict = merge_identity(ManagedIdentity(), ServicePrincipal(client_id="abc"))
        errors = validate_cluster(_draft(identity=conflict))
        assert [e.code for e in errors] == ["ConflictingIdentity"]


class TestPrivateClusterRule:
    """Tests for the private cluster load balancer rule."""

    def test_private_without_profile(self) -> None:
        """No network profile means Basic, which a private cluster rejects."""
        errors = validate_cluster(_draft(enable_private_cluster=True))
        assert [e.code for e in errors] == ["PrivateClusterRequiresStandardLB"]
        assert errors[0].subject == "Basic"

    def test_private_with_basic_kubenet(self) -> None:
        """A Basic kubenet profile is rejected for a private cluster."""
        errors = validate_cluster(
            _draft(
                enable_private_cluster=True,
                network_profile=KubenetNetworkProfileConfig(
                    load_balancer_sku=LoadBalancerSku.BASIC
                ),
            )
        )
        assert [e.code for e in errors] == ["PrivateClusterRequiresStandardLB"]

    def test_private_with_standard(self) -> None:
        """Standard profiles of either plugin pass."""
        for profile in (KubenetNetworkProfileConfig(), AzureCniNetworkProfileConfig()):
            assert validate_cluster(_draft(enable_private_cluster=True, network_profile=profile)) == []

    def test_public_with_basic(self) -> None:
        """A public cluster may use the Basic tier."""
        profile = KubenetNetworkProfileConfig(load_balancer_sku=LoadBalancerSku.BASIC)
        assert validate_cluster(_draft(network_profile=profile)) == []


class TestAuthorizedRangesRule:
    """Tests for the authorized IP range rule."""

    def test_valid_ranges(self) -> None:
        """Well-formed ranges pass."""
        assert validate_cluster(_draft(authorized_ip_ranges=("88.77.66.0/24",))) == []

    def test_every_bad_range_reported(self) -> None:
        """Each malformed range is its own error, naming the entry."""
        errors = validate_cluster(
            _draft(authorized_ip_ranges=("88.77.66.0/24", "88.77.66.0", "10.0.0.0/99"))
        )
        assert [e.code for e in errors] == ["InvalidCidrFormat", "InvalidCidrFormat"]
        assert [e.subject for e in errors] == ["88.77.66.0", "10.0.0.0/99"]


class TestRuleAggregation:
    """Tests for collecting errors across rules."""

    def test_build_errors_surfaced(self) -> None:
        """Sub-builder errors on the draft are reported as-is."""
        build_error = IncompleteNetworkAttachmentError("pool1", vnet="vnet", subnet=None)
        errors = validate_cluster(_draft(build_errors=(build_error,)))
        assert errors == [build_error]

    def test_all_rules_run(self) -> None:
        """Errors from every rule are returned together, in rule order."""
        errors = validate_cluster(
            _draft(
                identity=UnsetIdentity(),
                enable_private_cluster=True,
                authorized_ip_ranges=("bogus",),
                build_errors=(
                    IncompleteNetworkAttachmentError("pool1", vnet=None, subnet="subnet"),
                ),
            )
        )
        assert [e.code for e in errors] == [
            "MissingServicePrincipal",
            "PrivateClusterRequiresStandardLB",
            "IncompleteNetworkAttachment",
            "InvalidCidrFormat",
        ]
