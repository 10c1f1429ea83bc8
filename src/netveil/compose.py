from typing import Dict, List, Mapping

from netveil.obfuscators.base import Obfuscator


class Compose:
    """
    Chain several obfuscators (MAC, IPv4, IPv6, ...) into a single callable.

    Each obfuscator sees the output of the one before it, so order matters.
    """

    def __init__(self, obfuscators: List[Obfuscator]):
        self.obfuscators = obfuscators

    def __call__(self, text: str, **kwargs) -> str:
        """Run all obfuscators sequentially on the input text."""
        for obfuscator in self.obfuscators:
            text = obfuscator.contents(text)
        return text

    def contents(self, text: str) -> str:
        return self(text)

    def path(self, path: str) -> str:
        for obfuscator in self.obfuscators:
            path = obfuscator.path(path)
        return path

    def initialize(self, seed: Mapping[str, Mapping[str, str]]) -> None:
        """Seed every obfuscator from a report of an earlier run."""
        for obfuscator in self.obfuscators:
            obfuscator.initialize(seed.get(obfuscator.name, {}))

    def report(self) -> Dict[str, Dict[str, str]]:
        """Replacement reports keyed by obfuscator name."""
        reports: Dict[str, Dict[str, str]] = {}
        for obfuscator in self.obfuscators:
            reports.setdefault(obfuscator.name, {}).update(obfuscator.report())
        return reports

    def __repr__(self):
        names = [o.__class__.__name__ for o in self.obfuscators]
        return f"Compose({', '.join(names)})"
