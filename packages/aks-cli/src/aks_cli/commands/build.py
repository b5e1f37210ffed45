"""aks build command - Generate an ARM template from a cluster configuration."""

from __future__ import annotations

from pathlib import Path

import click

from aks_cli.errors import build_or_exit, handle_permission_error, load_cluster
from aks_cli.output import print_json, success


@click.command("build")
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(exists=False),
    default="./cluster.yaml",
    help="Path to cluster configuration [default: ./cluster.yaml]",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(),
    default="azuredeploy.json",
    help="Template output path [default: azuredeploy.json]",
)
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    default=False,
    help="Print the template instead of writing a file.",
)
def build(file_path: str, output_path: str, to_stdout: bool) -> None:
    """Build an ARM deployment template.

    Validates the cluster configuration and writes a template containing
    the managed cluster resource and every parameter the deployer must
    supply (such as the service principal client secret).

    Examples:

        aks build

        aks build --file clusters/prod.yaml --output build/prod.json

        aks build --stdout
    """
    from aks_core import to_arm_template, write_template

    config = load_cluster(file_path)
    resource = build_or_exit(config)
    template = to_arm_template(resource)

    if to_stdout:
        print_json(template)
        return

    try:
        written = write_template(template, Path(output_path))
    except PermissionError:
        handle_permission_error(output_path)

    success(f"Template written to {written}")
