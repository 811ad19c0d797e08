"""RFC 1918 private network classes."""

import ipaddress
from enum import Enum
from typing import Union

from random_private_ip.errors import InvalidClassError


class PrivateClass(str, Enum):
    """One of the three reserved private IPv4 blocks."""

    A = "A"
    B = "B"
    C = "C"

    @property
    def start_address(self) -> str:
        """Lowest address of the block, e.g. ``10.0.0.0``."""
        return _START_ADDRESSES[self]

    @property
    def mask_bits(self) -> int:
        """Prefix length of the whole block."""
        return _MASK_BITS[self]

    @property
    def network(self) -> ipaddress.IPv4Network:
        return ipaddress.IPv4Network(f"{self.start_address}/{self.mask_bits}")

    @classmethod
    def parse(cls, value: Union["PrivateClass", str]) -> "PrivateClass":
        """Return the class for a member or its exact letter.

        Raises:
            InvalidClassError: If value is not A, B or C.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidClassError(value) from None


_START_ADDRESSES = {
    PrivateClass.A: "10.0.0.0",
    PrivateClass.B: "172.16.0.0",
    PrivateClass.C: "192.168.0.0",
}

_MASK_BITS = {
    PrivateClass.A: 8,
    PrivateClass.B: 12,
    PrivateClass.C: 16,
}
