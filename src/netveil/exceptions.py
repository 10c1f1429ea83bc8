class NetVeilError(Exception):
    """Base class for all netveil errors."""


class ConfigMissingError(NetVeilError):
    """Raised when an explicitly requested configuration file does not exist."""


class UnsupportedReplacementTypeError(NetVeilError, ValueError):
    """Raised when an obfuscator is built with an unknown replacement type."""


class UnsupportedObfuscatorError(NetVeilError, ValueError):
    """Raised when an obfuscator name is not in the registry."""


class FatalReplacementError(NetVeilError):
    """
    The replacement mapping can no longer be trusted.

    Callers must stop the whole run when they see this error and discard any
    report gathered so far. It is never a per-call failure to log and skip.
    """


class ReplacementConflictError(FatalReplacementError):
    """An original was reported with a replacement different from the recorded one."""

    def __init__(self, original: str, existing: str, replacement: str) -> None:
        super().__init__(
            f"'{original}' already has a value reported as '{existing}', "
            f"tried to report '{replacement}'"
        )
        self.original = original
        self.existing = existing
        self.replacement = replacement


class TrackerInitializationError(FatalReplacementError):
    """A tracker was initialized twice or after replacements were already added."""


class ReplacementsExhaustedError(FatalReplacementError):
    """A consistent generator ran past the largest number its template can hold."""


class ScrubbedKeyCollisionError(NetVeilError, ValueError):
    """Two keys of one mapping scrubbed to the same key, so one value would be lost."""

    def __init__(self, first: str, second: str, scrubbed: str) -> None:
        super().__init__(
            f"keys '{first}' and '{second}' both scrub to '{scrubbed}'"
        )
        self.first = first
        self.second = second
        self.scrubbed = scrubbed
