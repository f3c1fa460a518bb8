"""
Exception hierarchy for the simulator.

Precondition violations are raised loudly instead of being silently absorbed,
persistence failures are wrapped so callers only deal with one failure kind.
"""


class SkirmishError(Exception):
    """Base class for every error raised by the simulator."""


class PreconditionError(SkirmishError):
    """A caller broke the contract of an operation (empty party, no target, ...)."""


class BossLimitError(PreconditionError):
    """An encounter would end up holding more than one boss."""


class PersistenceError(SkirmishError):
    """Loading or saving records failed."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause
