from typing import Optional

from netveil.core.generator import ReplacementTemplate
from netveil.matchers.patterns import MAC_PATTERN, normalize_mac
from netveil.obfuscators.regex import PatternObfuscator

STATIC_MAC = "xx:xx:xx:xx:xx:xx"
# there are far more MACs than this, but a single bundle only holds a few
CONSISTENT_MAC = "xxx-mac-{counter:06d}-xxx"

MAC_TEMPLATE = ReplacementTemplate(
    sequenced_format=CONSISTENT_MAC,
    static_value=STATIC_MAC,
    counter_ceiling=999999,
)


class MacAddressObfuscator(PatternObfuscator):
    """Replace colon or dash separated MAC addresses, case insensitively."""

    name = "mac"
    template = MAC_TEMPLATE
    pattern = MAC_PATTERN

    def normalize(self, candidate: str) -> Optional[str]:
        return normalize_mac(candidate)
