"""
Regex based matchers for IPv4, IPv6 and MAC addresses.

The patterns over-match on purpose; every candidate goes through a
normalizer which returns ``None`` for anything that is not a real address.
"""

import ipaddress
import re
from typing import List, Optional, Pattern

IPV4_PATTERN: Pattern[str] = re.compile(
    r"\b(([0-9]{1,3}[.]){3}|([0-9]{1,3}[-]){3})([0-9]{1,3})"
)

# Not perfect: words like ":face:bad" match too and are dropped by validation.
IPV6_PATTERN: Pattern[str] = re.compile(r"([a-fA-F0-9]{0,4}:){1,8}[a-fA-F0-9]{1,4}")

# Unlike the common `(?:[0-9a-fA-F]([:-])?){12}` this needs all separators, so
# squashed forms like 69806FE67C05 and UUID fragments are left alone.
MAC_PATTERN: Pattern[str] = re.compile(r"([0-9a-fA-F]{2}[:-]){5}[0-9a-fA-F]{2}")


def find_all(pattern: Pattern[str], text: str) -> List[str]:
    """Return every non-overlapping candidate in ``text``, in order."""
    return [match.group(0) for match in pattern.finditer(text)]


def normalize_ipv4(candidate: str) -> Optional[str]:
    cleaned = candidate.replace("-", ".")
    try:
        ipaddress.IPv4Address(cleaned)
    except ValueError:
        return None
    return cleaned


def normalize_ipv6(candidate: str) -> Optional[str]:
    try:
        return str(ipaddress.IPv6Address(candidate))
    except ValueError:
        return None


def normalize_mac(candidate: str) -> str:
    # collapse spellings so aa-bb-.. and AA:BB:.. share one report entry
    return candidate.replace("-", ":").upper()
