"""Microsoft Computer Vision analyze annotator.

Sends one request per image with the raw bytes as the body and prints
the decoded response as indented JSON.
"""

import json
from collections.abc import Iterable, Iterator

import requests

from core.errors import BackendError, BackendErrorKind
from core.types import Batch, LoadedFile, ProviderConfig, RawAnnotationResponse

from .base import Annotator
from .client import SubscriptionKeyMixin, describe_request_error


class MicrosoftVisionAnnotator(SubscriptionKeyMixin, Annotator):
    """Single-image analysis (Description, Tags) using Computer Vision.

    Each file is its own request, so one failure never affects another.
    """

    def __init__(self, config: ProviderConfig) -> None:
        """Initialize the Computer Vision annotator.

        Args:
            config: Provider configuration resolved at startup.
        """
        super().__init__(config)
        self._session = None  # Initialize for mixin

    @property
    def name(self) -> str:
        """Human-readable annotator name."""
        return "Microsoft Computer Vision (description, tags)"

    @property
    def mode(self) -> str:
        """Provider identifier."""
        return "microsoft"

    def authenticate(self) -> None:
        """Check that a subscription key is configured."""
        _ = self.subscription_key

    def plan(self, files: Iterable[LoadedFile]) -> Iterator[Batch]:
        """One batch per file."""
        for loaded in files:
            batch = Batch()
            batch.add(loaded)
            yield batch

    def _build_request(self, loaded: LoadedFile) -> requests.PreparedRequest:
        """Prepare the analyze POST for a single file."""
        request = requests.Request(
            "POST",
            self.config.microsoft_endpoint,
            data=loaded.data,
            headers={
                "Content-Type": "application/octet-stream",
                "Ocp-Apim-Subscription-Key": self.subscription_key,
            },
        )
        return self.session.prepare_request(request)

    def send(self, batch: Batch) -> list[RawAnnotationResponse]:
        """Analyze each file of the batch with its own call.

        plan() only produces single-file batches, so in practice this is
        one call.

        Raises:
            BackendError: If building, sending or decoding a request fails.
        """
        responses = []
        for loaded in batch.files:
            filenames = [loaded.filename]

            try:
                prepared = self._build_request(loaded)
            except (requests.RequestException, ValueError) as e:
                raise BackendError(
                    BackendErrorKind.REQUEST_CONSTRUCTION_FAILED,
                    filenames,
                    f"Unable to create request: {e}",
                ) from e

            try:
                http_response = self.session.send(prepared, timeout=self.config.timeout)
                http_response.raise_for_status()
            except requests.RequestException as e:
                raise BackendError(
                    BackendErrorKind.TRANSPORT_FAILED,
                    filenames,
                    f"HTTP request failed: {describe_request_error(e)}",
                ) from e

            try:
                decoded = http_response.json()
            except ValueError as e:
                raise BackendError(
                    BackendErrorKind.RESPONSE_DECODE_FAILED, filenames, f"invalid JSON: {e}"
                ) from e
            responses.append(decoded)
        return responses

    def render(self, loaded: LoadedFile, response: RawAnnotationResponse) -> str:
        """Pretty-print the decoded response with sorted keys."""
        return json.dumps(response, indent=2, sort_keys=True, ensure_ascii=False)
