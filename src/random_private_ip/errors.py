"""Exceptions raised for invalid generator input."""


class RandomIPError(ValueError):
    """Base class for errors raised by random_private_ip."""


class InvalidClassError(RandomIPError):
    """The private network class is not A, B or C."""

    def __init__(self, value: object = None):
        self.value = value
        super().__init__("Unknown private network class. Choose either A, B or C!")


class InvalidMaskBitsError(RandomIPError):
    """The mask bits are not an integer or do not fit the network class."""


class HostRangeError(RandomIPError):
    """The network has no address left after excluding network and broadcast."""
