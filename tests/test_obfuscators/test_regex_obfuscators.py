import pytest

from netveil.obfuscators.regex import (
    STATIC_IPV6,
    IPv4Obfuscator,
    IPv6Obfuscator,
)

IPV4_R1 = "x-ipv4-0000000001-x"
IPV4_R2 = "x-ipv4-0000000002-x"
IPV6_R1 = "xx-ipv6-000000000000000001-xx"
IPV6_R2 = "xx-ipv6-000000000000000002-xx"


class TestIPv4Obfuscator:
    def test_skips_loopback_and_unspecified(self):
        obfuscator = IPv4Obfuscator()
        text = "from 127.0.0.1 and 0.0.0.0 to 192.168.0.1"

        assert obfuscator.contents(text) == f"from 127.0.0.1 and 0.0.0.0 to {IPV4_R1}"
        assert obfuscator.report() == {"192.168.0.1": IPV4_R1}

    def test_dashed_spelling_shares_replacement(self):
        obfuscator = IPv4Obfuscator()
        text = "192.168.0.1 is ip-192-168-0-1"

        assert obfuscator.contents(text) == f"{IPV4_R1} is ip-{IPV4_R1}"
        assert obfuscator.report() == {
            "192.168.0.1": IPV4_R1,
            "192-168-0-1": IPV4_R1,
        }

    def test_prefix_addresses_are_replaced_independently(self):
        obfuscator = IPv4Obfuscator()
        text = "1.2.3.4 and 1.2.3.45"

        assert obfuscator.contents(text) == f"{IPV4_R1} and {IPV4_R2}"

    def test_unspecified_listener_is_left_alone(self):
        obfuscator = IPv4Obfuscator()
        text = "Listening on 0.0.0.0:8080"

        assert obfuscator.contents(text) == text
        assert obfuscator.report() == {}

    def test_out_of_range_octets_are_left_alone(self):
        obfuscator = IPv4Obfuscator()
        text = "build 999.1.1.1"

        assert obfuscator.contents(text) == text
        assert obfuscator.report() == {}

    def test_leading_zero_address_is_matched(self):
        # unlike the fast scanner, the pattern accepts a first octet of 0
        obfuscator = IPv4Obfuscator()
        assert obfuscator.contents("net 0.1.2.3") == f"net {IPV4_R1}"


class TestIPv6Obfuscator:
    def test_equivalent_spellings_share_replacement(self):
        obfuscator = IPv6Obfuscator()
        text = "addr 2001:db8::1 and 2001:0db8:0000::1"

        assert obfuscator.contents(text) == f"addr {IPV6_R1} and {IPV6_R1}"
        assert obfuscator.report() == {
            "2001:db8::1": IPV6_R1,
            "2001:0db8:0000::1": IPV6_R1,
        }

    def test_uppercase_is_keyed_by_compressed_form(self):
        obfuscator = IPv6Obfuscator()
        text = "FE80::1FF:FE23:4567:890A"

        assert obfuscator.contents(text) == IPV6_R1
        assert obfuscator.report() == {
            "fe80::1ff:fe23:4567:890a": IPV6_R1,
            "FE80::1FF:FE23:4567:890A": IPV6_R1,
        }

    def test_full_form_address(self):
        obfuscator = IPv6Obfuscator()
        text = "2001:0DB8:0000:0000:0000:FF00:0042:8329 up"

        assert obfuscator.contents(text) == f"{IPV6_R1} up"
        assert "2001:db8::ff00:42:8329" in obfuscator.report()

    def test_skips_loopback(self):
        obfuscator = IPv6Obfuscator()
        text = "Listening on [::1]:8080"

        assert obfuscator.contents(text) == text
        assert obfuscator.report() == {}

    @pytest.mark.parametrize("text", ["at 12:34:56", "mac aa:bb:cc:dd:ee:ff"])
    def test_invalid_candidates_are_left_alone(self, text):
        assert IPv6Obfuscator().contents(text) == text

    def test_two_addresses(self):
        obfuscator = IPv6Obfuscator()
        text = "fe80::1 -> fe80::2"

        assert obfuscator.contents(text) == f"{IPV6_R1} -> {IPV6_R2}"

    def test_static_replacement(self):
        obfuscator = IPv6Obfuscator("static")
        assert obfuscator.contents("gw fe80::1") == f"gw {STATIC_IPV6}"
        assert obfuscator.report() == {"fe80::1": STATIC_IPV6}
