"""IPv4 CIDR arithmetic for cluster network configuration.

This module provides the small amount of address arithmetic the builders need:
- parse_cidr: Strict ``a.b.c.d/n`` parsing into a canonical IPv4Cidr
- format_cidr: Canonical text form (round-trips with parse_cidr)
- offset_address: Network address plus an integer offset, bounded by the block
- contains: Address / block containment

Non-canonical input such as ``10.250.1.7/16`` is accepted and canonicalised
to ``10.250.0.0/16``; it is never rejected.
"""

from __future__ import annotations

import ipaddress
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from aks_core.errors import AddressOutOfRangeError, InvalidCidrFormatError

# The in-cluster DNS service sits at a fixed offset inside the service CIDR.
DNS_SERVICE_IP_OFFSET = 2

_CIDR_PATTERN = re.compile(r"^([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})/([0-9]{1,2})$")


class IPv4Cidr(BaseModel):
    """An IPv4 address block in canonical form.

    Host bits of ``network_address`` are always masked off on construction.

    Attributes:
        network_address: First address of the block.
        prefix_length: Number of leading network bits (0-32).

    Example:
        >>> cidr = IPv4Cidr(network_address="10.250.3.4", prefix_length=16)
        >>> str(cidr)
        '10.250.0.0/16'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    network_address: ipaddress.IPv4Address = Field(
        ...,
        description="First address of the block",
    )
    prefix_length: int = Field(
        ...,
        ge=0,
        le=32,
        description="Number of leading network bits",
    )

    @model_validator(mode="before")
    @classmethod
    def canonicalize(cls, data: Any) -> Any:
        """Mask host bits off the network address."""
        if not isinstance(data, dict):
            return data
        address = data.get("network_address")
        prefix = data.get("prefix_length")
        if address is None or not isinstance(prefix, int) or not 0 <= prefix <= 32:
            return data
        try:
            network = ipaddress.IPv4Network(f"{address}/{prefix}", strict=False)
        except ValueError:
            # Let field validation report the bad address.
            return data
        return {**data, "network_address": network.network_address}

    @property
    def num_addresses(self) -> int:
        """Number of addresses in the block."""
        return 2 ** (32 - self.prefix_length)

    def to_network(self) -> ipaddress.IPv4Network:
        """Return the equivalent ``ipaddress.IPv4Network``."""
        return ipaddress.IPv4Network((self.network_address, self.prefix_length))

    def __str__(self) -> str:
        return format_cidr(self)


def parse_cidr(text: str) -> IPv4Cidr:
    """Parse ``a.b.c.d/n`` into a canonical IPv4Cidr.

    Args:
        text: CIDR string. Surrounding whitespace is ignored.

    Returns:
        Canonical IPv4Cidr.

    Raises:
        InvalidCidrFormatError: If the text is not four decimal octets in
            [0, 255] followed by a prefix length in [0, 32].

    Example:
        >>> parse_cidr("10.250.0.0/16").prefix_length
        16
    """
    if not isinstance(text, str):
        raise InvalidCidrFormatError(repr(text), reason="expected a string")

    match = _CIDR_PATTERN.match(text.strip())
    if match is None:
        raise InvalidCidrFormatError(text)

    *octets, prefix = match.groups()
    for octet in octets:
        if len(octet) > 1 and octet.startswith("0"):
            raise InvalidCidrFormatError(text, reason=f"octet '{octet}' has a leading zero")
        if int(octet) > 255:
            raise InvalidCidrFormatError(text, reason=f"octet {octet} is out of range 0-255")

    if len(prefix) > 1 and prefix.startswith("0"):
        raise InvalidCidrFormatError(text, reason=f"prefix /{prefix} has a leading zero")

    prefix_length = int(prefix)
    if prefix_length > 32:
        raise InvalidCidrFormatError(text, reason=f"prefix /{prefix_length} is out of range 0-32")

    return IPv4Cidr(network_address=".".join(octets), prefix_length=prefix_length)


def format_cidr(cidr: IPv4Cidr) -> str:
    """Return the canonical ``a.b.c.d/n`` form of a block."""
    return f"{cidr.network_address}/{cidr.prefix_length}"


def offset_address(cidr: IPv4Cidr, offset: int) -> ipaddress.IPv4Address:
    """Return the network address of ``cidr`` plus ``offset``.

    Args:
        cidr: Address block.
        offset: Non-negative offset from the network address.

    Returns:
        The address at that offset.

    Raises:
        AddressOutOfRangeError: If the offset is negative or the result
            would fall outside the block.

    Example:
        >>> str(offset_address(parse_cidr("10.250.0.0/16"), 2))
        '10.250.0.2'
    """
    if offset < 0 or offset >= cidr.num_addresses:
        raise AddressOutOfRangeError(format_cidr(cidr), offset, cidr.num_addresses)
    return cidr.network_address + offset


def contains(cidr: IPv4Cidr, other: IPv4Cidr | ipaddress.IPv4Address | str) -> bool:
    """Check whether an address or another block lies entirely inside ``cidr``.

    Strings are read as a CIDR when they contain ``/`` and as a plain
    address otherwise.
    """
    network = cidr.to_network()
    if isinstance(other, str):
        if "/" in other:
            other = parse_cidr(other)
        else:
            try:
                other = ipaddress.IPv4Address(other)
            except ValueError as e:
                raise InvalidCidrFormatError(other, reason="not an IPv4 address") from e
    if isinstance(other, IPv4Cidr):
        return other.to_network().subnet_of(network)
    return other in network
