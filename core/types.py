"""Type definitions for the labeling pipeline.

Provides dataclasses and named tuples for the data flowing through
loader -> packer -> annotator -> ranker.
"""

from dataclasses import dataclass, field
from typing import Any, NamedTuple

# ===================================================================
# File Types
# ===================================================================


@dataclass(frozen=True)
class LoadedFile:
    """An image file that passed size and dimension validation.

    Attributes:
        filename: Path as it was matched by the glob pattern.
        data: Raw file contents.
        width: Decoded image width in pixels.
        height: Decoded image height in pixels.
    """

    filename: str
    data: bytes = field(repr=False)
    width: int
    height: int

    @property
    def size(self) -> int:
        """Size of the raw contents in bytes."""
        return len(self.data)


@dataclass
class Batch:
    """Ordered group of files submitted as one request.

    The position of a file in ``files`` is the position of its response
    in the provider's reply.
    """

    files: list[LoadedFile] = field(default_factory=list)
    total_bytes: int = 0

    def add(self, loaded: LoadedFile) -> None:
        """Append a file and account for its size."""
        self.files.append(loaded)
        self.total_bytes += loaded.size

    @property
    def filenames(self) -> list[str]:
        """Filenames in submission order."""
        return [f.filename for f in self.files]

    def __len__(self) -> int:
        return len(self.files)

    def __bool__(self) -> bool:
        return bool(self.files)


# ===================================================================
# Annotation Types
# ===================================================================

# Decoded JSON object describing one file's annotations
RawAnnotationResponse = dict[str, Any]


class Label(NamedTuple):
    """A detected label and the provider's score for it."""

    description: str
    confidence: float


@dataclass
class AnnotationResult:
    """Labels for a single file."""

    filename: str
    labels: list[Label] = field(default_factory=list)


# ===================================================================
# Configuration Types
# ===================================================================


@dataclass(frozen=True)
class ProviderConfig:
    """Provider selection resolved once at startup.

    Attributes:
        provider: Registered annotator mode ('google' or 'microsoft').
        verbose: Dump decoded provider responses to the log.
        timeout: Seconds to wait for each HTTP call.
        microsoft_api_key: Subscription key for the Microsoft provider.
        google_endpoint: URL of the batch annotate endpoint.
        microsoft_endpoint: URL of the analyze endpoint.
    """

    provider: str
    verbose: bool = False
    timeout: float = 60.0
    microsoft_api_key: str | None = field(default=None, repr=False)
    google_endpoint: str = ""
    microsoft_endpoint: str = ""


# ===================================================================
# Processing Types
# ===================================================================


@dataclass
class RunSummary:
    """Counts reported at the end of a run.

    Attributes:
        printed: Files whose result was printed.
        failed: Files that failed at the provider.
        skipped: Files rejected by the loader.
    """

    printed: int = 0
    failed: int = 0
    skipped: int = 0

    @property
    def total(self) -> int:
        """Total files attempted."""
        return self.printed + self.failed + self.skipped
