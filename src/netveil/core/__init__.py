from netveil.core.generator import Generator, ReplacementTemplate
from netveil.core.tracker import (
    ReplacementTracker,
    SimpleTracker,
    StripedTracker,
    build_tracker,
)

__all__ = [
    "Generator",
    "ReplacementTemplate",
    "ReplacementTracker",
    "SimpleTracker",
    "StripedTracker",
    "build_tracker",
]
