from netveil.compose import Compose
from netveil.core.config import ReplacementType, TrackerKind
from netveil.core.tracker import SimpleTracker, StripedTracker
from netveil.engine import build_obfuscator, build_obfuscators
from netveil.exceptions import FatalReplacementError
from netveil.obfuscators import (
    FastIPv4Obfuscator,
    IPv4Obfuscator,
    IPv6Obfuscator,
    MacAddressObfuscator,
    Obfuscator,
)

__all__ = [
    "Compose",
    "FastIPv4Obfuscator",
    "FatalReplacementError",
    "IPv4Obfuscator",
    "IPv6Obfuscator",
    "MacAddressObfuscator",
    "Obfuscator",
    "ReplacementType",
    "SimpleTracker",
    "StripedTracker",
    "TrackerKind",
    "build_obfuscator",
    "build_obfuscators",
]
