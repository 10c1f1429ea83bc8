from typing import List

from netveil.core.generator import ReplacementTemplate
from netveil.matchers.ipv4 import find_next_ipv4
from netveil.obfuscators.base import Obfuscator

STATIC_IPV4 = "xxx.xxx.xxx.xxx"
# 4,294,967,296 possible addresses fit into 10 digits
CONSISTENT_IPV4 = "x-ipv4-{counter:010d}-x"

IPV4_TEMPLATE = ReplacementTemplate(
    sequenced_format=CONSISTENT_IPV4,
    static_value=STATIC_IPV4,
    counter_ceiling=9999999999,
)


class FastIPv4Obfuscator(Obfuscator):
    """
    Replace IPv4 addresses found by the hand-written scanner.

    Dotted and dashed spellings of one address (``10.0.129.220`` and
    ``ip-10-0-129-220``) get the same replacement, and both spellings are
    reported.
    """

    name = "ipv4"
    template = IPV4_TEMPLATE

    def replace(self, text: str) -> str:
        parts: List[str] = []
        cursor = 0
        while cursor < len(text):
            match = find_next_ipv4(text, cursor)
            if not match:
                break

            replacement = self.replacement_for(match.address)
            self.tracker.add_replacement(match.address, replacement)
            # the original spelling may use dashes
            self.tracker.add_replacement(text[match.start : match.end], replacement)

            parts.append(text[cursor : match.start])
            parts.append(replacement)
            cursor = match.end

        if not parts:
            return text

        parts.append(text[cursor:])
        return "".join(parts)
