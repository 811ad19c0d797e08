"""Random IPv4 addresses and subnets inside the RFC 1918 private ranges."""

from random_private_ip.errors import (
    HostRangeError,
    InvalidClassError,
    InvalidMaskBitsError,
    RandomIPError,
)
from random_private_ip.generator import (
    PrivateNetworkGenerator,
    network_mask_bits,
    network_start_address,
    random_ip,
    random_network,
)
from random_private_ip.ip.classes import PrivateClass

__version__ = "1.0.0"

__all__ = [
    "PrivateClass",
    "PrivateNetworkGenerator",
    "random_network",
    "random_ip",
    "network_start_address",
    "network_mask_bits",
    "RandomIPError",
    "InvalidClassError",
    "InvalidMaskBitsError",
    "HostRangeError",
]
