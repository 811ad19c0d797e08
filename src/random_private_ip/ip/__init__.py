"""Private class definitions, classification and CIDR helpers."""

from random_private_ip.ip.classes import PrivateClass
from random_private_ip.ip.classifier import classify_address, is_private_ip, network_in_class
from random_private_ip.ip.utils import format_cidr, parse_mask_bits, split_cidr

__all__ = [
    "PrivateClass",
    "classify_address",
    "is_private_ip",
    "network_in_class",
    "format_cidr",
    "parse_mask_bits",
    "split_cidr",
]
