import re
import threading
from dataclasses import dataclass
from typing import Iterable, Optional

from netveil.exceptions import ReplacementsExhaustedError

_COUNTER_FIELD = re.compile(r"\{counter[^}]*\}")


@dataclass(frozen=True)
class ReplacementTemplate:
    """How one address family turns into placeholder text."""

    sequenced_format: str
    static_value: str
    counter_ceiling: int

    def render(self, counter: int) -> str:
        return self.sequenced_format.format(counter=counter)

    def parse(self, value: str) -> Optional[int]:
        """Return the counter a rendered placeholder carries, or None."""
        prefix, suffix = _COUNTER_FIELD.split(self.sequenced_format, maxsplit=1)
        match = re.fullmatch(
            re.escape(prefix) + r"([0-9]+)" + re.escape(suffix), value
        )
        if match is None:
            return None
        return int(match.group(1))


class Generator:
    """
    Produce placeholders for one address family.

    Every instance owns its own counter, starting at 1. The counter moves on
    each call to :meth:`generate_consistent`, whatever the key, so callers
    should only ask once per distinct address (the tracker's
    ``generate_if_absent`` takes care of that).
    """

    def __init__(self, template: ReplacementTemplate) -> None:
        self.template = template
        self._counter = 0
        self._lock = threading.Lock()

    @property
    def counter(self) -> int:
        """Last value handed out, 0 when nothing was generated yet."""
        return self._counter

    def advance_past(self, replacements: Iterable[str]) -> None:
        """
        Skip every counter already used by ``replacements``.

        Values that are not placeholders of this template are ignored.
        """
        seen = [self.template.parse(value) for value in replacements]
        highest = max((n for n in seen if n is not None), default=0)
        with self._lock:
            self._counter = max(self._counter, highest)

    def generate_static(self, key: str) -> str:
        return self.template.static_value

    def generate_consistent(self, key: str) -> str:
        with self._lock:
            counter = self._counter + 1
            if counter > self.template.counter_ceiling:
                raise ReplacementsExhaustedError(
                    f"cannot generate replacement for '{key}': "
                    f"more than {self.template.counter_ceiling} values requested "
                    f"from template '{self.template.sequenced_format}'"
                )
            self._counter = counter
        return self.template.render(counter)
