"""aks schema command - Export JSON Schema."""

from __future__ import annotations

import click

from aks_cli.errors import handle_permission_error
from aks_cli.output import success


@click.group()
def schema() -> None:
    """Export JSON Schema for cluster configuration files.

    **Commands:**

    - `aks schema export` - Export the ClusterConfig JSON Schema
    - `aks schema export-resource` - Export the ResolvedClusterResource JSON Schema
    """


@schema.command("export")
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(),
    default="./schemas/cluster.schema.json",
    help="Output path [default: ./schemas/cluster.schema.json]",
)
def export_schema(output_path: str) -> None:
    """Export the ClusterConfig JSON Schema for IDE autocomplete.

    Examples:

        aks schema export

        aks schema export --output custom/path/schema.json
    """
    from aks_core import export_cluster_config_schema

    try:
        export_cluster_config_schema(output_path)
    except PermissionError:
        handle_permission_error(output_path)

    success(f"Schema exported to {output_path}")


@schema.command("export-resource")
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(),
    default="./schemas/resolved-cluster.schema.json",
    help="Output path [default: ./schemas/resolved-cluster.schema.json]",
)
def export_resource_schema(output_path: str) -> None:
    """Export the ResolvedClusterResource JSON Schema."""
    from aks_core import export_resolved_resource_schema

    try:
        export_resolved_resource_schema(output_path)
    except PermissionError:
        handle_permission_error(output_path)

    success(f"Resource schema exported to {output_path}")
