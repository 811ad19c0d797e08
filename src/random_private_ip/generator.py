"""Random subnets and host addresses inside the private IPv4 classes."""

import ipaddress
import logging
import random
from typing import Any, Optional, Union

from random_private_ip.config import Config
from random_private_ip.errors import HostRangeError, InvalidMaskBitsError
from random_private_ip.ip.classes import PrivateClass
from random_private_ip.ip.utils import format_cidr, parse_mask_bits

logger = logging.getLogger(__name__)

MAX_MASK_BITS = 32

ClassLike = Union[PrivateClass, str]


class PrivateNetworkGenerator:
    """Picks random networks and addresses from the RFC 1918 blocks.

    The random source only needs a ``randint(a, b)`` method. Each generator
    owns its source, so callers sharing one across threads must make sure
    the source is safe for that.
    """

    def __init__(self, rng: Optional[Any] = None):
        self.rng = rng if rng is not None else random.Random()

    @classmethod
    def from_config(cls, config: Config) -> "PrivateNetworkGenerator":
        """Build a generator whose source is seeded from the config."""
        return cls(random.Random(config.seed))

    def random_network(self, private_class: ClassLike, bits: Any) -> str:
        """Generate a random private network of the given size.

        Args:
            private_class: Which private network class: A, B or C.
            bits: Mask bits of the desired network, at least the class minimum.

        Returns:
            A random network range in format <network address>/<bits>.

        Raises:
            InvalidClassError: If the class is not A, B or C.
            InvalidMaskBitsError: If bits is not an integer or does not fit
                the class.
        """
        cls_ = PrivateClass.parse(private_class)
        min_mask_bits = cls_.mask_bits

        mask_bits = parse_mask_bits(bits)
        if mask_bits < min_mask_bits:
            raise InvalidMaskBitsError(
                f"A class {cls_.value} network has at least {min_mask_bits} mask bits."
            )
        if mask_bits > MAX_MASK_BITS:
            raise InvalidMaskBitsError(
                f"An IPv4 network has at most {MAX_MASK_BITS} mask bits."
            )

        # Only one subnet of the class size exists
        if mask_bits == min_mask_bits:
            return format_cidr(cls_.start_address, mask_bits)

        random_ip = self.random_ip(cls_.start_address, min_mask_bits)
        network = ipaddress.IPv4Network(format_cidr(random_ip, mask_bits), strict=False)
        logger.debug("Picked %s from class %s", network, cls_.value)
        return format_cidr(network.network_address, mask_bits)

    def random_ip(self, network: str, bits: Any) -> str:
        """Choose a random host address within a network.

        The network address and the broadcast address are never returned.
        Host bits set in ``network`` are ignored.

        Args:
            network: The network address of the network.
            bits: The mask bits of the network.

        Returns:
            A random IP address within the given network.

        Raises:
            HostRangeError: If the network has fewer than three addresses.
            ValueError: From ipaddress for a malformed network.
        """
        net = ipaddress.IPv4Network(format_cidr(network, bits), strict=False)
        host_count = net.num_addresses
        if host_count < 3:
            raise HostRangeError(
                f"Network {net} has no host address besides network and broadcast."
            )
        offset = self.rng.randint(1, host_count - 2)
        logger.debug("Picked offset %d of %d in %s", offset, host_count, net)
        return str(net[offset])

    def network_start_address(self, private_class: ClassLike) -> str:
        """Return the starting address of a private network class.

        Raises:
            InvalidClassError: If the class is not A, B or C.
        """
        return PrivateClass.parse(private_class).start_address

    def network_mask_bits(self, private_class: ClassLike) -> int:
        """Return the number of mask bits of a private network class.

        Raises:
            InvalidClassError: If the class is not A, B or C.
        """
        return PrivateClass.parse(private_class).mask_bits


_default_generator = PrivateNetworkGenerator()


def random_network(private_class: ClassLike, bits: Any) -> str:
    """Module-level shortcut for PrivateNetworkGenerator.random_network."""
    return _default_generator.random_network(private_class, bits)


def random_ip(network: str, bits: Any) -> str:
    """Module-level shortcut for PrivateNetworkGenerator.random_ip."""
    return _default_generator.random_ip(network, bits)


def network_start_address(private_class: ClassLike) -> str:
    return _default_generator.network_start_address(private_class)


def network_mask_bits(private_class: ClassLike) -> int:
    return _default_generator.network_mask_bits(private_class)
