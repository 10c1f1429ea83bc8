"""
Linear IPv4 scanner.

This is the hottest path when scrubbing large log bundles, so it walks the
text by hand instead of going through the regex engine. It is deliberately
narrower than a full parser: a candidate never starts with ``0`` and an octet
of 255 or more is rejected.
"""

from typing import NamedTuple, Optional, Tuple

MAX_OCTET = 0xFF
SEPARATORS = ".-"


class IPv4Match(NamedTuple):
    """
    Result of :func:`find_next_ipv4`.

    ``address`` is the dotted form, or empty when nothing was found; in that
    case ``start``/``end`` cover the whole scanned range.
    """

    address: str
    start: int
    end: int

    def __bool__(self) -> bool:
        return bool(self.address)


def find_next_ipv4(text: str, pos: int = 0) -> IPv4Match:
    """
    Find the first IPv4 address in ``text`` at or after ``pos``.

    Octets may be separated by ``.`` or ``-`` but not by a mix of both, so
    ``ip-10-0-129-220`` yields ``10.0.129.220`` while ``4.8.0-0`` does not.
    Offsets refer to ``text`` and delimit the literal as it was written.
    """
    length = len(text)
    for start in range(pos, length):
        if "1" <= text[start] <= "9":
            parsed = _parse_ipv4(text, start, length)
            if parsed is not None:
                address, end = parsed
                return IPv4Match(address, start, end)
    return IPv4Match("", pos, length)


def _parse_ipv4(text: str, pos: int, length: int) -> Optional[Tuple[str, int]]:
    octets = []
    separator = ""
    i = pos
    for index in range(4):
        if index:
            if i >= length:
                return None
            char = text[i]
            # one separator style per address
            if char not in SEPARATORS or (separator and char != separator):
                return None
            separator = char
            i += 1
        value, i = _parse_octet(text, i, length)
        if value < 0:
            return None
        octets.append(value)
    return ".".join(map(str, octets)), i


def _parse_octet(text: str, pos: int, length: int) -> Tuple[int, int]:
    """Return the octet value and the position after it, or -1 on failure."""
    value = 0
    i = pos
    while i < length and "0" <= text[i] <= "9":
        value = value * 10 + ord(text[i]) - 48
        if value >= MAX_OCTET:
            return -1, i
        i += 1
    if i == pos:
        return -1, i
    return value, i
