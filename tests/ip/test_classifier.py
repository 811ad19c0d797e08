"""Tests for random_private_ip.ip.classifier module."""

import pytest

from random_private_ip.errors import InvalidClassError
from random_private_ip.ip.classes import PrivateClass
from random_private_ip.ip.classifier import classify_address, is_private_ip, network_in_class


class TestClassifyAddress:
    def test_class_a(self):
        assert classify_address("10.128.0.5") is PrivateClass.A

    def test_class_b(self):
        assert classify_address("172.20.1.1") is PrivateClass.B

    def test_class_b_upper_edge(self):
        assert classify_address("172.31.255.255") is PrivateClass.B

    def test_just_outside_class_b(self):
        assert classify_address("172.32.0.0") is None

    def test_class_c(self):
        assert classify_address("192.168.0.1") is PrivateClass.C

    def test_with_cidr(self):
        assert classify_address("10.0.0.1/24") is PrivateClass.A

    def test_public_ip(self):
        assert classify_address("8.8.8.8") is None

    def test_invalid_ip(self):
        assert classify_address("invalid") is None

    def test_invalid_prefix(self):
        assert classify_address("10.0.0.1/abc") is None

    def test_none(self):
        assert classify_address(None) is None


class TestIsPrivateIP:
    def test_private(self):
        assert is_private_ip("192.168.10.10") is True

    def test_public(self):
        assert is_private_ip("1.1.1.1") is False

    def test_loopback_is_not_rfc1918(self):
        assert is_private_ip("127.0.0.1") is False

    def test_link_local_is_not_rfc1918(self):
        assert is_private_ip("169.254.1.1") is False

    def test_empty_string(self):
        assert is_private_ip("") is False


class TestNetworkInClass:
    def test_whole_block(self):
        assert network_in_class("172.16.0.0/12", "B") is True

    def test_subnet(self):
        assert network_in_class("10.200.3.0/24", PrivateClass.A) is True

    def test_larger_than_block(self):
        assert network_in_class("192.168.0.0/15", "C") is False

    def test_other_class(self):
        assert network_in_class("10.0.0.0/24", "C") is False

    def test_host_bits_set(self):
        assert network_in_class("10.0.0.1/24", "A") is False

    def test_invalid_class(self):
        with pytest.raises(InvalidClassError):
            network_in_class("10.0.0.0/24", "X")
