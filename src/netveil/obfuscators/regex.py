import re
from typing import ClassVar, FrozenSet, Optional, Pattern

from netveil.core.generator import ReplacementTemplate
from netveil.matchers.patterns import (
    IPV4_PATTERN,
    IPV6_PATTERN,
    normalize_ipv4,
    normalize_ipv6,
)
from netveil.obfuscators.base import Obfuscator
from netveil.obfuscators.fast_ipv4 import IPV4_TEMPLATE

STATIC_IPV6 = "xxxx:xxxx:xxxx:xxxx:xxxx:xxxx:xxxx:xxxx"
CONSISTENT_IPV6 = "xx-ipv6-{counter:018d}-xx"

IPV6_TEMPLATE = ReplacementTemplate(
    sequenced_format=CONSISTENT_IPV6,
    static_value=STATIC_IPV6,
    counter_ceiling=999999999999999999,
)


class PatternObfuscator(Obfuscator):
    """
    Replace every candidate a regex finds, in a single pass over the text.

    Candidates are normalized first; anything the normalizer rejects, and
    anything in ``excluded``, is left in place. Both the normalized form and
    the literal spelling are recorded.
    """

    pattern: ClassVar[Pattern[str]]
    excluded: ClassVar[FrozenSet[str]] = frozenset()

    def normalize(self, candidate: str) -> Optional[str]:
        return candidate

    def replace(self, text: str) -> str:
        return self.pattern.sub(self._substitute, text)

    def _substitute(self, match: "re.Match[str]") -> str:
        literal = match.group(0)
        normalized = self.normalize(literal)
        if normalized is None or normalized in self.excluded:
            return literal

        replacement = self.replacement_for(normalized)
        self.tracker.add_replacement(literal, replacement)
        return replacement


class IPv4Obfuscator(PatternObfuscator):
    """Regex based IPv4 obfuscator. Skips loopback and the unspecified address."""

    name = "ipv4_pattern"
    template = IPV4_TEMPLATE
    pattern = IPV4_PATTERN
    excluded = frozenset({"127.0.0.1", "0.0.0.0"})

    def normalize(self, candidate: str) -> Optional[str]:
        return normalize_ipv4(candidate)


class IPv6Obfuscator(PatternObfuscator):
    """
    IPv6 obfuscator.

    Addresses are keyed by their compressed form, so ``2001:0db8::1`` and
    ``2001:db8::1`` share a replacement.
    """

    name = "ipv6"
    template = IPV6_TEMPLATE
    pattern = IPV6_PATTERN
    excluded = frozenset({"::1"})

    def normalize(self, candidate: str) -> Optional[str]:
        return normalize_ipv6(candidate)
