"""
Exception classes for the compatibility gate.

Every gate error carries a severity. FATAL errors abort the build, RECOVERABLE
ones are reported as warnings and only stop processing of the current module.
The severity is decided where the error is raised and inspected once, by the
caller that runs the gate.
"""

from enum import Enum
from pathlib import Path
from typing import Union


class Severity(Enum):
    FATAL = "fatal"
    RECOVERABLE = "recoverable"


class GateError(Exception):
    """Base exception for all gate errors."""

    def __init__(self, message: str, severity: Severity = Severity.FATAL):
        self.message = message
        self.severity = severity
        super().__init__(message)

    @property
    def is_fatal(self) -> bool:
        return self.severity is Severity.FATAL


class PreconditionError(GateError):
    """Raised when the module cannot be checked (missing artifact, bad version...).

    Whether this aborts the build depends on ``halt_on_failure``.
    """

    @classmethod
    def for_policy(cls, message: str, halt_on_failure: bool) -> "PreconditionError":
        severity = Severity.FATAL if halt_on_failure else Severity.RECOVERABLE
        return cls(message, severity)


class ResolutionError(GateError):
    """Raised when versions of an artifact cannot be listed or fetched."""

    def __init__(self, message: str):
        super().__init__(message, Severity.FATAL)


class AnalysisError(GateError):
    """Raised when the compatibility analyzer fails."""

    def __init__(self, message: str):
        super().__init__(message, Severity.FATAL)


class GateViolation(GateError):
    """Raised when the declared version does not match the required bump."""

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Determined SemVer type as {expected} and is currently {actual}",
            Severity.FATAL,
        )


class OutputWriteError(GateError):
    """Raised when the next-version marker file cannot be written."""

    def __init__(self, path: Union[str, Path], reason: str = ""):
        self.path = str(path)
        if reason:
            message = f"Unable to write {self.path}: {reason}"
        else:
            message = f"Unable to write {self.path}"
        super().__init__(message, Severity.FATAL)
