"""Rich console output for aks-cli.

Colored status lines, a table renderer for cluster validation errors, and
JSON printing. Color is disabled by the NO_COLOR environment variable or
the ``--no-color`` flag.
"""

from __future__ import annotations

import json
import os
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from aks_core.errors import ClusterConfigError

_env_no_color = os.environ.get("NO_COLOR") is not None


def create_console(no_color: bool = False) -> Console:
    """Create a Console honouring ``no_color`` and NO_COLOR.

    Long lines are not wrapped so paths and messages stay copyable.
    """
    disabled = no_color or _env_no_color
    return Console(
        force_terminal=False if disabled else None,
        no_color=disabled,
        soft_wrap=True,
    )


console = create_console()


def success(message: str, **kwargs: Any) -> None:
    """Print a success line.

    Example:
        >>> success("Cluster 'k8s-cluster' is valid")
        ✓ Cluster 'k8s-cluster' is valid
    """
    console.print(f"[green]✓[/green] {escape(message)}", **kwargs)


def error(message: str, **kwargs: Any) -> None:
    """Print an error line."""
    console.print(f"[red]✗[/red] {escape(message)}", **kwargs)


def info(message: str, **kwargs: Any) -> None:
    """Print a plain informational line."""
    console.print(escape(message), **kwargs)


def print_json(data: dict[str, Any]) -> None:
    """Print a JSON document with syntax highlighting."""
    console.print_json(json.dumps(data))


def print_validation_errors(cluster_name: str, errors: Sequence[ClusterConfigError]) -> None:
    """Render every validation error of a cluster as one table.

    Args:
        cluster_name: Name of the cluster that failed validation.
        errors: Errors in the order they were found.
    """
    error(f"Cluster '{cluster_name}' has {len(errors)} validation error(s)")
    table = Table(show_header=True, header_style="bold", expand=False)
    table.add_column("Code", no_wrap=True)
    table.add_column("Subject", no_wrap=True)
    table.add_column("Problem")
    for err in errors:
        table.add_row(err.code, escape(err.subject or "-"), escape(err.user_message))
    console.print(table)


def set_no_color(no_color: bool) -> None:
    """Replace the module console with one that has color disabled."""
    global console
    console = create_console(no_color=no_color)
