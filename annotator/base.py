"""Abstract base class for image annotation providers."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator

from core.types import Batch, LoadedFile, ProviderConfig, RawAnnotationResponse


class Annotator(ABC):
    """Abstract base class for annotation providers.

    Implements the Template Method pattern - the runner drives every
    provider through the same steps while subclasses decide how files are
    grouped into requests, how a request is sent and how a response is
    shown.

    Subclasses must implement:
        - name: Human-readable name of the annotator
        - mode: Provider identifier ('google', 'microsoft', etc.)
        - authenticate: Resolve credentials before any file is read
        - plan: Group loaded files into request batches
        - send: Submit one batch and return one response per file
        - render: Format one file's response for printing

    Example:
        class EchoAnnotator(Annotator):
            name = "Echo"
            mode = "echo"

            def authenticate(self) -> None:
                pass

            def plan(self, files):
                for f in files:
                    yield Batch(files=[f], total_bytes=f.size)

            def send(self, batch):
                return [{"size": f.size} for f in batch.files]

            def render(self, loaded, response):
                return str(response["size"])
    """

    def __init__(self, config: ProviderConfig) -> None:
        """Initialize the annotator.

        Args:
            config: Provider configuration resolved at startup.
        """
        self.config = config

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of the annotator."""
        ...

    @property
    @abstractmethod
    def mode(self) -> str:
        """Provider identifier: 'google', 'microsoft', etc."""
        ...

    @abstractmethod
    def authenticate(self) -> None:
        """Acquire credentials eagerly.

        Raises:
            FatalConfig: If credentials are missing or unusable.
        """
        ...

    @abstractmethod
    def plan(self, files: Iterable[LoadedFile]) -> Iterator[Batch]:
        """Group loaded files into the batches that send() accepts.

        Args:
            files: Loaded files in discovery order.

        Yields:
            Batches in order; every file appears in exactly one.
        """
        ...

    @abstractmethod
    def send(self, batch: Batch) -> list[RawAnnotationResponse]:
        """Submit a batch with a single provider call.

        Args:
            batch: Files to annotate.

        Returns:
            One decoded response per file, in batch order.

        Raises:
            BackendError: If the call fails; the error covers the whole batch.
        """
        ...

    @abstractmethod
    def render(self, loaded: LoadedFile, response: RawAnnotationResponse) -> str:
        """Format a file's response for the '<filename>: <text>' output line.

        Raises:
            BackendError: If the response reports an error for this file.
        """
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
