"""Tests for the aks validate command."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from aks_cli.commands.validate import validate


class TestValidateCommand:
    """Tests for validate command."""

    def test_validate_valid_file(self, cli_runner: CliRunner, valid_cluster_yaml: Path) -> None:
        """A deployable cluster validates with exit code 0."""
        result = cli_runner.invoke(validate, ["--file", str(valid_cluster_yaml)])
        assert result.exit_code == 0
        assert "Cluster 'k8s-cluster' is valid" in result.output

    def test_validate_lists_parameters(
        self, cli_runner: CliRunner, valid_cluster_yaml: Path
    ) -> None:
        """Deployment parameters the cluster needs are listed."""
        result = cli_runner.invoke(validate, ["--file", str(valid_cluster_yaml)])
        assert "client-secret-for-k8s-cluster" in result.output

    def test_validate_invalid_file(
        self, cli_runner: CliRunner, invalid_cluster_yaml: Path
    ) -> None:
        """Every validation error is reported with exit code 1."""
        result = cli_runner.invoke(validate, ["--file", str(invalid_cluster_yaml)])
        assert result.exit_code == 1
        assert "4 validation error(s)" in result.output
        for code in (
            "MissingServicePrincipal",
            "PrivateClusterRequiresStandardLB",
            "IncompleteNetworkAttachment",
            "InvalidCidrFormat",
        ):
            assert code in result.output

    def test_validate_missing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """A missing file exits with code 2."""
        result = cli_runner.invoke(validate, ["--file", str(tmp_path / "nonexistent.yaml")])
        assert result.exit_code == 2
        assert "not found" in result.output.lower()

    def test_validate_default_path(self, isolated_runner: CliRunner) -> None:
        """The default path is ./cluster.yaml."""
        result = isolated_runner.invoke(validate)
        assert result.exit_code == 2
        assert "cluster.yaml" in result.output

    def test_validate_default_path_exists(
        self, isolated_runner: CliRunner, temp_cluster_yaml: Path
    ) -> None:
        """./cluster.yaml is picked up without --file."""
        result = isolated_runner.invoke(validate)
        assert result.exit_code == 0


class TestValidateConfigErrors:
    """Tests for YAML and schema errors."""

    def test_yaml_syntax_error(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """YAML syntax errors are reported with their line."""
        bad_yaml = tmp_path / "bad.yaml"
        bad_yaml.write_text("name: aks\n  bad_indent: true\n")
        result = cli_runner.invoke(validate, ["--file", str(bad_yaml)])
        assert result.exit_code == 1
        assert "YAML syntax error at line 2" in result.output

    def test_schema_error(self, cli_runner: CliRunner, schema_invalid_yaml: Path) -> None:
        """Schema errors name the failing field."""
        result = cli_runner.invoke(validate, ["--file", str(schema_invalid_yaml)])
        assert result.exit_code == 1
        assert "agent_pools.0.count" in result.output

    def test_missing_name(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """A document without a name is a schema error."""
        path = tmp_path / "cluster.yaml"
        path.write_text("dns_prefix: testaks\n")
        result = cli_runner.invoke(validate, ["--file", str(path)])
        assert result.exit_code == 1
        assert "name" in result.output

    def test_empty_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """An empty document is rejected."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        result = cli_runner.invoke(validate, ["--file", str(path)])
        assert result.exit_code == 1
        assert "empty" in result.output.lower()

    def test_non_mapping(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """A list document is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- name: aks\n")
        result = cli_runner.invoke(validate, ["--file", str(path)])
        assert result.exit_code == 1
        assert "mapping" in result.output
