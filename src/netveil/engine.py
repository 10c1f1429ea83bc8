import logging
from typing import Dict, List, Optional, Tuple, Union

from netveil.compose import Compose
from netveil.core.config import (
    NetVeilConfig,
    ReplacementType,
    TrackerKind,
    load_config,
)
from netveil.core.tracker import ReplacementTracker, build_tracker
from netveil.exceptions import UnsupportedObfuscatorError
from netveil.obfuscators.base import Obfuscator

logger = logging.getLogger(__name__)

OBFUSCATOR_REGISTRY: Dict[str, str] = {
    "ipv4": "netveil.obfuscators.fast_ipv4.FastIPv4Obfuscator",
    "ipv4_pattern": "netveil.obfuscators.regex.IPv4Obfuscator",
    "ipv6": "netveil.obfuscators.regex.IPv6Obfuscator",
    "mac": "netveil.obfuscators.mac.MacAddressObfuscator",
}


def list_available_obfuscators() -> List[str]:
    """Return the registered obfuscator names."""
    return list(OBFUSCATOR_REGISTRY.keys())


def list_obfuscators() -> List[Tuple[str, str]]:
    return [
        ("ipv4", "Hand-written IPv4 scanner, dotted and dashed forms (fast)."),
        ("ipv4_pattern", "Regex IPv4 matcher, skips 127.0.0.1 and 0.0.0.0."),
        ("ipv6", "Regex IPv6 matcher validated by ipaddress, skips ::1."),
        ("mac", "Colon or dash separated MAC addresses."),
    ]


def _lazy_import(dotted_path: str):
    """
    Import a class by dotted string path:
    e.g. "netveil.obfuscators.mac.MacAddressObfuscator"
    """
    module_path, cls_name = dotted_path.rsplit(".", 1)
    module = __import__(module_path, fromlist=[cls_name])
    return getattr(module, cls_name)


def build_obfuscator(
    name: str,
    replacement_type: Union[ReplacementType, str] = ReplacementType.CONSISTENT,
    tracker: Union[ReplacementTracker, TrackerKind, str] = TrackerKind.SIMPLE,
) -> Obfuscator:
    """
    Build one obfuscator by registry name.

    ``tracker`` is either an existing tracker to write into or the kind of
    tracker to create.

    Raises:
        UnsupportedObfuscatorError: for unknown names.
        UnsupportedReplacementTypeError: for unknown replacement types.
    """
    name = getattr(name, "value", name)
    if name not in OBFUSCATOR_REGISTRY:
        raise UnsupportedObfuscatorError(
            f"Unknown obfuscator '{name}'. "
            f"Available: {', '.join(list_available_obfuscators())}"
        )

    if not isinstance(tracker, ReplacementTracker):
        tracker = build_tracker(tracker)

    cls = _lazy_import(OBFUSCATOR_REGISTRY[name])
    logger.debug("Loading obfuscator: %s", name)
    return cls(replacement_type, tracker=tracker)


def build_obfuscators(
    config: Optional[NetVeilConfig] = None,
    config_path: Optional[str] = None,
    verbose: bool = False,
) -> Compose:
    """
    Factory function to build the obfuscator chain from configuration.
    """
    if config is None:
        config = load_config(config_path, verbose=verbose)

    obfuscators = [
        build_obfuscator(
            entry.type, replacement_type=entry.replacement_type, tracker=entry.tracker
        )
        for entry in config.obfuscators
    ]
    return Compose(obfuscators)
