"""Private class membership checks."""

import ipaddress
import logging
from typing import Optional, Union

from random_private_ip.ip.classes import PrivateClass
from random_private_ip.ip.utils import split_cidr

logger = logging.getLogger(__name__)


def classify_address(ip_address: str) -> Optional[PrivateClass]:
    """
    Find the private class an address belongs to.

    Args:
        ip_address: IP address string (with or without CIDR notation)

    Returns:
        The matching PrivateClass, or None for public or unparsable input
    """
    try:
        ip_str, _ = split_cidr(ip_address)
        ip_obj = ipaddress.IPv4Address(ip_str)
    except (ValueError, TypeError) as e:
        logger.debug(f"Could not parse IP {ip_address}: {e}")
        return None

    for private_class in PrivateClass:
        if ip_obj in private_class.network:
            return private_class
    return None


def is_private_ip(ip_address: str) -> bool:
    """Check if an IP address is inside one of the RFC 1918 blocks."""
    return classify_address(ip_address) is not None


def network_in_class(
    network: str, private_class: Union[PrivateClass, str]
) -> bool:
    """
    Check that a whole network lies inside a private class block.

    Args:
        network: Network in CIDR notation; host bits must be zero
        private_class: Class to check against

    Returns:
        True if every address of the network is inside the block
    """
    block = PrivateClass.parse(private_class).network
    try:
        net = ipaddress.IPv4Network(network)
    except ValueError as e:
        logger.debug(f"Could not parse network {network}: {e}")
        return False
    return net.subnet_of(block)
