from .base import Obfuscator
from .fast_ipv4 import FastIPv4Obfuscator
from .mac import MacAddressObfuscator
from .regex import IPv4Obfuscator, IPv6Obfuscator, PatternObfuscator

__all__ = [
    "Obfuscator",
    "PatternObfuscator",
    "FastIPv4Obfuscator",
    "IPv4Obfuscator",
    "IPv6Obfuscator",
    "MacAddressObfuscator",
]
