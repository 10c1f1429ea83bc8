import pytest

from netveil.matchers.patterns import (
    IPV4_PATTERN,
    IPV6_PATTERN,
    MAC_PATTERN,
    find_all,
    normalize_ipv4,
    normalize_ipv6,
    normalize_mac,
)


def test_ipv4_pattern_finds_dotted_and_dashed():
    text = "obfuscate 10.0.129.220 and ip-10-0-129-220.ec2"
    assert find_all(IPV4_PATTERN, text) == ["10.0.129.220", "10-0-129-220"]


@pytest.mark.parametrize(
    "text",
    [
        "version: 4.8.12",
        "version: 4.8.0-0.nightly-2021-07-31-065602",
        "ip+10+0+129+220.ec2.aws.yaml",
    ],
)
def test_ipv4_pattern_ignores_non_addresses(text):
    assert find_all(IPV4_PATTERN, text) == []


def test_ipv6_pattern_finds_compressed_address():
    text = "received request from 2001:db8::ff00:42:8329"
    assert find_all(IPV6_PATTERN, text) == ["2001:db8::ff00:42:8329"]


def test_ipv6_pattern_is_loose():
    # the port is a candidate too, validation drops it later
    assert find_all(IPV6_PATTERN, "Listening on [::1]:8080") == ["::1", ":8080"]


def test_mac_pattern_requires_separators():
    text = "eth0 aa:bb:cc:dd:ee:ff eth1 00-1A-2B-3C-4D-5E squashed 69806FE67C05"
    assert find_all(MAC_PATTERN, text) == ["aa:bb:cc:dd:ee:ff", "00-1A-2B-3C-4D-5E"]


def test_mac_pattern_ignores_uuids():
    assert find_all(MAC_PATTERN, "uid 123e4567-e89b-12d3-a456-426614174000") == []


def test_normalize_ipv4():
    assert normalize_ipv4("192-168-1-10") == "192.168.1.10"
    assert normalize_ipv4("192.168.1.10") == "192.168.1.10"
    assert normalize_ipv4("300.1.1.1") is None


@pytest.mark.parametrize(
    "candidate, expected",
    [
        ("2001:db8::ff00:42:8329", "2001:db8::ff00:42:8329"),
        ("2001:0DB8:0000:0000:0000:FF00:0042:8329", "2001:db8::ff00:42:8329"),
        ("::1", "::1"),
        (":8080", None),
        ("12:34:56", None),
        ("aa:bb:cc:dd:ee:ff", None),
    ],
)
def test_normalize_ipv6(candidate, expected):
    assert normalize_ipv6(candidate) == expected


def test_normalize_mac():
    assert normalize_mac("aa-bb-cc-dd-ee-ff") == "AA:BB:CC:DD:EE:FF"
    assert normalize_mac("AA:bb:CC:dd:EE:ff") == "AA:BB:CC:DD:EE:FF"
