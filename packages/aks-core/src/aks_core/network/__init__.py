"""IPv4 address-block arithmetic used by the cluster builders."""

from __future__ import annotations

from aks_core.network.cidr import (
    DNS_SERVICE_IP_OFFSET,
    IPv4Cidr,
    contains,
    format_cidr,
    offset_address,
    parse_cidr,
)

__all__ = [
    "DNS_SERVICE_IP_OFFSET",
    "IPv4Cidr",
    "contains",
    "format_cidr",
    "offset_address",
    "parse_cidr",
]
