import ipaddress

import pytest

from icecore.errors import DetermineNetworkTypeError
from icecore.network import NetworkType, determine_network_type, supported_network_types

IPV4 = ipaddress.ip_address("192.168.0.1")
IPV6 = ipaddress.ip_address("fe80::a3:6ff:fec4:5454")


@pytest.mark.parametrize(
    "network, ip, expected",
    [
        ("udp", IPV4, NetworkType.UDP4),
        ("UDP", IPV4, NetworkType.UDP4),
        ("udp", IPV6, NetworkType.UDP6),
        ("UDP", IPV6, NetworkType.UDP6),
    ],
)
def test_network_type_parsing_success(network, ip, expected):
    assert determine_network_type(network, ip) == expected


def test_network_type_parsing_accepts_strings():
    assert determine_network_type("tcp", "192.168.0.1") == NetworkType.TCP4
    assert determine_network_type("tcp", "fe80::a3:6ff:fec4:5454") == NetworkType.TCP6


def test_network_type_parsing_ipv4_mapped_is_ipv4():
    assert determine_network_type("udp", "::ffff:192.168.0.1") == NetworkType.UDP4


def test_network_type_parsing_failure():
    with pytest.raises(DetermineNetworkTypeError):
        determine_network_type("junkNetwork", IPV6)


def test_network_type_is_udp():
    assert NetworkType.UDP4.is_udp()
    assert NetworkType.UDP6.is_udp()
    assert not NetworkType.UDP4.is_tcp()
    assert not NetworkType.UDP6.is_tcp()


def test_network_type_is_tcp():
    assert NetworkType.TCP4.is_tcp()
    assert NetworkType.TCP6.is_tcp()
    assert not NetworkType.TCP4.is_udp()
    assert not NetworkType.TCP6.is_udp()


@pytest.mark.parametrize(
    "network_type, name, short",
    [
        (NetworkType.UDP4, "udp4", "udp"),
        (NetworkType.UDP6, "udp6", "udp"),
        (NetworkType.TCP4, "tcp4", "tcp"),
        (NetworkType.TCP6, "tcp6", "tcp"),
    ],
)
def test_network_type_names(network_type, name, short):
    assert str(network_type) == name
    assert network_type.network_short() == short


def test_reliability_and_family():
    for network_type in supported_network_types():
        assert network_type.is_reliable() == network_type.is_tcp()
        assert network_type.is_ipv4() != network_type.is_ipv6()
    assert NetworkType.UDP4.is_ipv4()
    assert NetworkType.TCP6.is_ipv6()


def test_supported_network_types_order():
    assert supported_network_types() == [
        NetworkType.UDP4,
        NetworkType.UDP6,
        NetworkType.TCP4,
        NetworkType.TCP6,
    ]