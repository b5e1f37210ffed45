"""JSON Schema export functions for aks-core.

This module provides functions to export JSON Schema Draft 2020-12 schemas
from the Pydantic models, for IDE autocomplete on cluster YAML files and
for validating resolved resources outside Python.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from aks_core.builder.models import ResolvedClusterResource
from aks_core.schemas import ClusterConfig

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"
SCHEMA_ID_BASE = "https://aks-builder.dev/schemas"


def _export_schema(
    model: type[BaseModel],
    schema_id: str,
    output_path: Path | str | None,
) -> dict[str, Any]:
    schema = model.model_json_schema()

    schema["$schema"] = JSON_SCHEMA_DIALECT
    schema["$id"] = f"{SCHEMA_ID_BASE}/{schema_id}"

    # Ensure additionalProperties is set at root level
    if "additionalProperties" not in schema:
        schema["additionalProperties"] = False

    if output_path is not None:
        _write_schema_file(schema, output_path)

    return schema


def export_cluster_config_schema(
    output_path: Path | str | None = None,
) -> dict[str, Any]:
    """Export ClusterConfig JSON Schema for IDE autocomplete.

    Args:
        output_path: Optional path to write schema file. If provided,
            creates parent directories as needed.

    Returns:
        Dictionary containing the JSON Schema.

    Example:
        >>> schema = export_cluster_config_schema()
        >>> schema["$schema"]
        'https://json-schema.org/draft/2020-12/schema'
    """
    return _export_schema(ClusterConfig, "cluster-config.schema.json", output_path)


def export_resolved_resource_schema(
    output_path: Path | str | None = None,
) -> dict[str, Any]:
    """Export ResolvedClusterResource JSON Schema.

    Args:
        output_path: Optional path to write schema file.

    Returns:
        Dictionary containing the JSON Schema.
    """
    return _export_schema(
        ResolvedClusterResource,
        "resolved-cluster-resource.schema.json",
        output_path,
    )


def _write_schema_file(schema: dict[str, Any], path: Path | str) -> None:
    """Write schema to JSON file.

    Args:
        schema: Schema dictionary to write.
        path: Output file path.
    """
    output_path = Path(path)

    # Create parent directories if needed
    output_path.parent.mkdir(parents=True, exist_ok=True)

    output_path.write_text(json.dumps(schema, indent=2))
