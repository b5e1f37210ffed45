"""aks-cli: Command line interface for aks-core.

Validate cluster configuration files and build ARM templates from them.
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
