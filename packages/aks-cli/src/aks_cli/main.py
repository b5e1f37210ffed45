"""CLI entry point for aks-builder.

Commands are registered on a LazyGroup so ``aks --help`` does not import
the builder or its dependencies.
"""

from __future__ import annotations

import importlib
from typing import Any

import click
import rich_click as rclick

from aks_cli import __version__
from aks_cli.output import set_no_color

rclick.rich_click.TEXT_MARKUP = "markdown"
rclick.rich_click.SHOW_ARGUMENTS = True
rclick.rich_click.GROUP_ARGUMENTS_OPTIONS = True


class LazyGroup(rclick.RichGroup):
    """Click group that imports subcommands only when they are requested.

    Attributes:
        lazy_subcommands: Mapping of command names to ``module.attribute`` paths.
    """

    def __init__(
        self,
        *args: Any,
        lazy_subcommands: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialise the group.

        Args:
            lazy_subcommands: Command name to ``module.attribute`` import path.
        """
        super().__init__(*args, **kwargs)
        self.lazy_subcommands: dict[str, str] = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        """Return eager and lazy command names, sorted."""
        commands = set(super().list_commands(ctx))
        commands.update(self.lazy_subcommands.keys())
        return sorted(commands)

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Resolve a command, importing its module on first use.

        Args:
            ctx: Current click context.
            cmd_name: Name typed on the command line.

        Returns:
            The command, or None when the name is unknown.
        """
        cmd = super().get_command(ctx, cmd_name)  # type: ignore[arg-type]
        if cmd is not None:
            return cmd

        if cmd_name not in self.lazy_subcommands:
            return None

        module_name, attr_name = self.lazy_subcommands[cmd_name].rsplit(".", 1)
        mod = importlib.import_module(module_name)
        return getattr(mod, attr_name)  # type: ignore[no-any-return]


LAZY_COMMANDS = {
    "validate": "aks_cli.commands.validate.validate",
    "build": "aks_cli.commands.build.build",
    "schema": "aks_cli.commands.schema.schema",
}


@click.command(cls=LazyGroup, lazy_subcommands=LAZY_COMMANDS)
@click.version_option(version=__version__, prog_name="aks")
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output.",
    is_eager=True,
    expose_value=False,
    callback=lambda ctx, param, value: set_no_color(value) if value else None,
)
def cli() -> None:
    """AKS Builder - Validated ARM templates for Azure Kubernetes Service.

    Describe a managed cluster in cluster.yaml, validate it, and build an
    ARM deployment template from it.

    **Getting Started:**

    - `aks validate` - Check a cluster configuration
    - `aks build` - Write azuredeploy.json
    - `aks schema export` - Export JSON Schema for IDE support
    """


if __name__ == "__main__":
    cli()
