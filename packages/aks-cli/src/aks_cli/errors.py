"""CLI error handling for aks-cli.

Maps aks-core, YAML and Pydantic failures onto user-friendly messages and
exit codes. Every command loads its cluster file through ``load_cluster``
and builds through ``build_or_exit`` so failures are reported the same way.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

import click
import yaml
from pydantic import ValidationError as PydanticValidationError

from aks_cli.output import error, print_validation_errors

if TYPE_CHECKING:
    from aks_core import ClusterConfig, ResolvedClusterResource
    from pydantic_core import ErrorDetails


EXIT_SUCCESS = 0
EXIT_USER_ERROR = 1  # Invalid YAML, schema or cluster validation failure
EXIT_SYSTEM_ERROR = 2  # Missing file, permission denied


class CLIError(click.ClickException):
    """CLI exception rendered through Rich with a chosen exit code.

    Attributes:
        message: User-facing error message.
        exit_code: Exit code for the CLI (default: 1).
    """

    def __init__(self, message: str, exit_code: int = EXIT_USER_ERROR) -> None:
        super().__init__(message)
        self.exit_code = exit_code

    def show(self, file: object = None) -> None:
        """Display the error message using Rich formatting."""
        error(self.format_message())


def format_pydantic_error(err: PydanticValidationError) -> str:
    """Format a Pydantic ValidationError as one line per failing field.

    Example:
        >>> format_pydantic_error(err)
        "Validation failed:\\n  - agent_pools.0.count: Input should be greater than 0"
    """
    errors: list[ErrorDetails] = err.errors()
    lines = ["Validation failed:"]
    for e in errors:
        loc = ".".join(str(x) for x in e["loc"])
        lines.append(f"  - {loc}: {e['msg']}")
    return "\n".join(lines)


def yaml_error_message(err: yaml.YAMLError) -> str:
    """Describe a YAML error, with line and column when available."""
    mark = getattr(err, "problem_mark", None)
    if mark is not None:
        problem = getattr(err, "problem", None) or "syntax error"
        return f"YAML syntax error at line {mark.line + 1}, column {mark.column + 1}: {problem}"
    return str(err)


def load_cluster(file_path: str) -> ClusterConfig:
    """Load a cluster file, converting failures into CLIError.

    Raises:
        CLIError: Exit code 2 if the file is missing, 1 if it is not valid.
    """
    from aks_core import ClusterConfig, ConfigurationError

    path = Path(file_path)
    if not path.exists():
        raise CLIError(
            f"File not found: {file_path}\n\nUse --file to specify a cluster configuration.",
            exit_code=EXIT_SYSTEM_ERROR,
        )

    try:
        return ClusterConfig.from_yaml(path)
    except yaml.YAMLError as e:
        raise CLIError(f"Invalid YAML in {file_path}: {yaml_error_message(e)}") from None
    except PydanticValidationError as e:
        raise CLIError(f"Invalid configuration in {file_path}:\n{format_pydantic_error(e)}") from None
    except ConfigurationError as e:
        raise CLIError(e.user_message) from None


def build_or_exit(config: ClusterConfig) -> ResolvedClusterResource:
    """Build a cluster, printing every validation error and exiting on failure."""
    from aks_core import ClusterValidationError, build_cluster

    try:
        return build_cluster(config)
    except ClusterValidationError as e:
        print_validation_errors(e.cluster_name, e.errors)
        raise SystemExit(EXIT_USER_ERROR) from None


def handle_permission_error(path: str, operation: str = "write") -> NoReturn:
    """Raise a CLIError for a permission failure on ``path``."""
    raise CLIError(
        f"Permission denied: Cannot {operation} {path}",
        exit_code=EXIT_SYSTEM_ERROR,
    )
