"""Tests for the aks build command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from aks_cli.commands.build import build


class TestBuildCommand:
    """Tests for build command."""

    def test_build_writes_template(
        self, cli_runner: CliRunner, valid_cluster_yaml: Path, tmp_path: Path
    ) -> None:
        """A valid cluster is written as an ARM template."""
        output = tmp_path / "out" / "azuredeploy.json"
        result = cli_runner.invoke(
            build, ["--file", str(valid_cluster_yaml), "--output", str(output)]
        )

        assert result.exit_code == 0, result.output
        assert "Template written" in result.output
        template = json.loads(output.read_text())
        assert "client-secret-for-k8s-cluster" in template["parameters"]
        resource = template["resources"][0]
        assert resource["name"] == "k8s-cluster"
        assert resource["properties"]["networkProfile"]["dnsServiceIP"] == "10.250.0.2"

    def test_build_default_output(
        self, isolated_runner: CliRunner, temp_cluster_yaml: Path
    ) -> None:
        """Without --output the template goes to ./azuredeploy.json."""
        result = isolated_runner.invoke(build)
        assert result.exit_code == 0, result.output
        assert Path("azuredeploy.json").exists()

    def test_build_stdout(self, cli_runner: CliRunner, valid_cluster_yaml: Path) -> None:
        """--stdout prints the template instead of writing it."""
        result = cli_runner.invoke(build, ["--file", str(valid_cluster_yaml), "--stdout"])
        assert result.exit_code == 0
        assert "Microsoft.ContainerService/managedClusters" in result.output

    def test_build_invalid_cluster(
        self, cli_runner: CliRunner, invalid_cluster_yaml: Path, tmp_path: Path
    ) -> None:
        """Invalid clusters produce no template and exit with code 1."""
        output = tmp_path / "azuredeploy.json"
        result = cli_runner.invoke(
            build, ["--file", str(invalid_cluster_yaml), "--output", str(output)]
        )
        assert result.exit_code == 1
        assert not output.exists()

    def test_build_missing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """A missing file exits with code 2."""
        result = cli_runner.invoke(build, ["--file", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 2
