"""Shared test fixtures for aks-cli tests.

Provides CliRunner fixtures and paths to the cluster.yaml fixtures.
"""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

CLUSTER_YAML_FILENAME = "cluster.yaml"


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Keep builder log events out of the command output under test."""
    structlog.configure(
        processors=[structlog.dev.ConsoleRenderer(colors=False)],
        logger_factory=structlog.ReturnLoggerFactory(),
        cache_logger_on_first_use=False,
    )


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture
def isolated_runner(cli_runner: CliRunner) -> Generator[CliRunner, None, None]:
    """Create a Click test runner inside a temporary working directory.

    Yields:
        CliRunner instance with isolated filesystem.
    """
    with cli_runner.isolated_filesystem():
        yield cli_runner


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def valid_cluster_yaml(fixtures_dir: Path) -> Path:
    """Return the path to a deployable cluster.yaml."""
    return fixtures_dir / "valid_cluster.yaml"


@pytest.fixture
def invalid_cluster_yaml(fixtures_dir: Path) -> Path:
    """Return the path to a cluster.yaml that parses but fails validation."""
    return fixtures_dir / "invalid_cluster.yaml"


@pytest.fixture
def schema_invalid_yaml(fixtures_dir: Path) -> Path:
    """Return the path to a cluster.yaml that fails schema validation."""
    return fixtures_dir / "schema_invalid.yaml"


@pytest.fixture
def temp_cluster_yaml(isolated_runner: CliRunner, valid_cluster_yaml: Path) -> Path:
    """Copy the valid fixture to ./cluster.yaml in the isolated filesystem."""
    path = Path(CLUSTER_YAML_FILENAME)
    path.write_text(valid_cluster_yaml.read_text())
    return path
