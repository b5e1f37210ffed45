"""aks validate command - Validate a cluster configuration file."""

from __future__ import annotations

import click

from aks_cli.errors import build_or_exit, load_cluster
from aks_cli.output import info, success


@click.command()
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(exists=False),
    default="./cluster.yaml",
    help="Path to cluster configuration [default: ./cluster.yaml]",
)
def validate(file_path: str) -> None:
    """Validate a cluster configuration.

    Checks the file against the ClusterConfig schema, then runs every
    cluster rule (identity, private cluster load balancer, agent pool
    network attachment, CIDR formats) and reports all problems at once.

    Examples:

        aks validate

        aks validate --file clusters/prod.yaml
    """
    config = load_cluster(file_path)
    resource = build_or_exit(config)

    success(f"Cluster '{resource.name}' is valid")
    for parameter in resource.parameters:
        info(f"  Deployment parameter required: {parameter.name}")
