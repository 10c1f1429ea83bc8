from .ipv4 import IPv4Match, find_next_ipv4
from .patterns import (
    IPV4_PATTERN,
    IPV6_PATTERN,
    MAC_PATTERN,
    find_all,
    normalize_ipv4,
    normalize_ipv6,
    normalize_mac,
)

__all__ = [
    "IPv4Match",
    "find_next_ipv4",
    "IPV4_PATTERN",
    "IPV6_PATTERN",
    "MAC_PATTERN",
    "find_all",
    "normalize_ipv4",
    "normalize_ipv6",
    "normalize_mac",
]
