import logging
from abc import ABC, abstractmethod
from typing import ClassVar, Dict, Mapping, Optional, Union

from netveil.core.config import ReplacementType
from netveil.core.generator import Generator, ReplacementTemplate
from netveil.core.tracker import ReplacementTracker, SimpleTracker
from netveil.exceptions import UnsupportedReplacementTypeError

logger = logging.getLogger(__name__)


def coerce_replacement_type(value: Union[ReplacementType, str]) -> ReplacementType:
    try:
        return ReplacementType(value)
    except ValueError:
        raise UnsupportedReplacementTypeError(
            f"unsupported replacement type: {value}"
        ) from None


class Obfuscator(ABC):
    """
    Replace one family of network identifiers in text.

    An obfuscator binds a matcher to a :class:`Generator` and a
    :class:`ReplacementTracker`. Sharing one instance between threads is the
    way to get one consistent report for a whole run.

    Args:
        replacement_type: ``"static"`` for one fixed placeholder or
            ``"consistent"`` for numbered placeholders.
        tracker: Tracker to record replacements in. A fresh
            :class:`SimpleTracker` is used when omitted.

    Raises:
        UnsupportedReplacementTypeError: for any other replacement type.
    """

    name: ClassVar[str]
    template: ClassVar[ReplacementTemplate]

    def __init__(
        self,
        replacement_type: Union[ReplacementType, str] = ReplacementType.CONSISTENT,
        tracker: Optional[ReplacementTracker] = None,
    ) -> None:
        self.replacement_type = coerce_replacement_type(replacement_type)
        self.tracker = tracker if tracker is not None else SimpleTracker()
        self.generator = Generator(self.template)
        if self.replacement_type is ReplacementType.STATIC:
            self._generate = self.generator.generate_static
        else:
            self._generate = self.generator.generate_consistent
        logger.debug(
            "Created %s obfuscator (%s, %s)",
            self.name,
            self.replacement_type.value,
            type(self.tracker).__name__,
        )

    def path(self, path: str) -> str:
        """Scrub a file path."""
        return self.replace(path)

    def contents(self, text: str) -> str:
        """Scrub file contents."""
        return self.replace(text)

    def report(self) -> Dict[str, str]:
        """Every original spelling replaced so far, mapped to its replacement."""
        return self.tracker.report()

    def initialize(self, seed: Mapping[str, str]) -> None:
        """
        Start from the report of an earlier run.

        The generator skips the numbers already taken by ``seed`` so a new
        address never reuses the placeholder of a seeded one.

        Raises:
            TrackerInitializationError: if the tracker was already seeded or
                written to.
        """
        self.tracker.initialize(seed)
        self.generator.advance_past(seed.values())

    def __call__(self, text: str, **kwargs) -> str:
        return self.contents(text)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.replacement_type.value!r})"

    def replacement_for(self, original: str) -> str:
        """Look up, or create, the replacement for a normalized address."""
        return self.tracker.generate_if_absent(original, original, self._generate)

    @abstractmethod
    def replace(self, text: str) -> str:
        """Return ``text`` with every address of this family replaced."""
