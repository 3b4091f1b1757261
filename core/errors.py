"""Error taxonomy for the labeling pipeline.

Everything except FatalConfig is caught by the runner where it happens,
logged with the offending filename or pattern, and processing continues.
"""

from enum import Enum


class ImageLabelsError(Exception):
    """Base class for all pipeline errors."""


class FatalConfig(ImageLabelsError):
    """Missing credentials or an invalid provider selection."""


class PatternInvalid(ImageLabelsError):
    """A file pattern that cannot be expanded."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid file pattern {pattern}: {reason}")


class LoadErrorKind(Enum):
    STAT_FAILED = "stat failed"
    TOO_LARGE = "too large"
    READ_FAILED = "read failed"
    DECODE_FAILED = "decode failed"
    TOO_SMALL = "too small"


class LoadError(ImageLabelsError):
    """A file rejected by the loader.

    Attributes:
        kind: Which validation step failed.
        filename: The offending file.
        cause: Human-readable cause.
    """

    def __init__(self, kind: LoadErrorKind, filename: str, cause: str) -> None:
        self.kind = kind
        self.filename = filename
        self.cause = cause
        super().__init__(f"Unable to load {filename}: {cause}")


class BackendErrorKind(Enum):
    REQUEST_CONSTRUCTION_FAILED = "request construction failed"
    TRANSPORT_FAILED = "transport failed"
    RESPONSE_DECODE_FAILED = "response decode failed"


class BackendError(ImageLabelsError):
    """A provider call that failed for every file it carried.

    Attributes:
        kind: Stage of the call that failed.
        filenames: Files affected by the failure.
        cause: Human-readable cause.
    """

    def __init__(self, kind: BackendErrorKind, filenames: list[str], cause: str) -> None:
        self.kind = kind
        self.filenames = list(filenames)
        self.cause = cause
        super().__init__(f"{kind.value} for {', '.join(self.filenames)}: {cause}")
