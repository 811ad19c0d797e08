"""Mask bits and CIDR string helpers."""

import re
from typing import Optional, Tuple

from random_private_ip.errors import InvalidMaskBitsError

_INT_PATTERN = re.compile(r"^\s*[+-]?\d+\s*$")


def parse_mask_bits(value: object) -> int:
    """
    Coerce mask bits to an integer.

    Args:
        value: An int, or a string holding a decimal integer (surrounding
            whitespace and a leading sign are allowed)

    Returns:
        The mask bits as int

    Raises:
        InvalidMaskBitsError: If value is not an integer
    """
    if isinstance(value, bool):
        raise InvalidMaskBitsError("The bits parameter has to be an integer.")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INT_PATTERN.match(value):
        return int(value)
    raise InvalidMaskBitsError("The bits parameter has to be an integer.")


def format_cidr(address: object, bits: int) -> str:
    """
    Join an address and mask bits into CIDR notation.

    Args:
        address: Address string or ipaddress object
        bits: Prefix length

    Returns:
        String in format <address>/<bits>
    """
    return f"{address}/{bits}"


def split_cidr(value: str) -> Tuple[str, Optional[int]]:
    """
    Split CIDR notation into address and mask bits.

    Args:
        value: Address string with or without /bits

    Returns:
        Tuple of address and mask bits (None when no prefix is given)
    """
    if '/' not in value:
        return value, None
    address, bits = value.split('/', 1)
    return address, parse_mask_bits(bits)
