"""Google Cloud Vision label-detection annotator.

Packs files into size-bounded batches and submits each batch with a
single images:annotate call. Responses come back in request order.
"""

import base64
import json
import logging
from collections.abc import Iterable, Iterator
from typing import Any

import requests
from google.auth.exceptions import GoogleAuthError

from core.config import LABEL_DETECTION, MAX_BATCH_BYTES
from core.errors import BackendError, BackendErrorKind
from core.packer import pack
from core.ranker import render_labels
from core.types import (
    AnnotationResult,
    Batch,
    Label,
    LoadedFile,
    ProviderConfig,
    RawAnnotationResponse,
)

from .base import Annotator
from .client import GoogleSessionMixin, describe_request_error

logger = logging.getLogger(__name__)


def build_request_body(batch: Batch) -> dict[str, Any]:
    """Build the images:annotate body, one request entry per file."""
    return {
        "requests": [
            {
                "image": {"content": base64.standard_b64encode(f.data).decode("ascii")},
                "features": [{"type": LABEL_DETECTION}],
            }
            for f in batch.files
        ]
    }


def parse_labels(response: RawAnnotationResponse) -> list[Label]:
    """Extract (description, confidence) pairs from one file's response.

    Uses 'score', falling back to the older 'confidence' field.

    Raises:
        ValueError: If an annotation is not an object or has a non-numeric score.
    """
    labels = []
    for annotation in response.get("labelAnnotations") or []:
        if not isinstance(annotation, dict):
            raise ValueError(f"unexpected label annotation: {annotation!r}")
        confidence = annotation.get("score", annotation.get("confidence", 0.0))
        labels.append(Label(str(annotation.get("description", "")), float(confidence)))
    return labels


class GoogleVisionAnnotator(GoogleSessionMixin, Annotator):
    """Batch label detection using the Cloud Vision REST API.

    A failed call fails every file in the batch; nothing is retried.

    Attributes:
        config: Provider configuration (endpoint, timeout, verbosity).
        max_batch_bytes: Byte budget for one request.
    """

    def __init__(self, config: ProviderConfig, max_batch_bytes: int = MAX_BATCH_BYTES) -> None:
        """Initialize the Cloud Vision annotator.

        Args:
            config: Provider configuration resolved at startup.
            max_batch_bytes: Byte budget for one request.
        """
        super().__init__(config)
        self.max_batch_bytes = max_batch_bytes
        self._session = None  # Initialize for mixin

    @property
    def name(self) -> str:
        """Human-readable annotator name."""
        return "Google Cloud Vision (label detection)"

    @property
    def mode(self) -> str:
        """Provider identifier."""
        return "google"

    def authenticate(self) -> None:
        """Resolve application default credentials."""
        _ = self.session

    def plan(self, files: Iterable[LoadedFile]) -> Iterator[Batch]:
        """Pack files into byte-bounded batches."""
        return pack(files, self.max_batch_bytes)

    def send(self, batch: Batch) -> list[RawAnnotationResponse]:
        """Annotate a whole batch with one images:annotate call.

        Args:
            batch: Files to annotate.

        Returns:
            One response object per file, in batch order.

        Raises:
            BackendError: On any failure; covers every file in the batch.
        """
        filenames = batch.filenames

        try:
            payload = json.dumps(build_request_body(batch)).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise BackendError(
                BackendErrorKind.REQUEST_CONSTRUCTION_FAILED, filenames, str(e)
            ) from e

        try:
            http_response = self.session.post(
                self.config.google_endpoint,
                data=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.config.timeout,
            )
            http_response.raise_for_status()
        except (requests.RequestException, GoogleAuthError) as e:
            raise BackendError(
                BackendErrorKind.TRANSPORT_FAILED,
                filenames,
                f"Cloud Vision API request failed: {describe_request_error(e)}",
            ) from e

        try:
            decoded = http_response.json()
        except ValueError as e:
            raise BackendError(
                BackendErrorKind.RESPONSE_DECODE_FAILED, filenames, f"invalid JSON: {e}"
            ) from e

        if self.config.verbose:
            logger.info(json.dumps(decoded, indent=2))

        responses = decoded.get("responses") if isinstance(decoded, dict) else None
        if not isinstance(responses, list) or len(responses) != len(filenames):
            count = len(responses) if isinstance(responses, list) else 0
            raise BackendError(
                BackendErrorKind.RESPONSE_DECODE_FAILED,
                filenames,
                f"expected {len(filenames)} responses, got {count}",
            )
        return responses

    def parse_result(
        self, loaded: LoadedFile, response: RawAnnotationResponse
    ) -> AnnotationResult:
        """Build one file's AnnotationResult from its response entry.

        Raises:
            BackendError: If the provider reported an error for this image
                or the entry is malformed.
        """
        if not isinstance(response, dict):
            raise BackendError(
                BackendErrorKind.RESPONSE_DECODE_FAILED,
                [loaded.filename],
                f"unexpected response: {response!r}",
            )
        if response.get("error"):
            error = response["error"]
            message = error.get("message", error) if isinstance(error, dict) else error
            raise BackendError(
                BackendErrorKind.RESPONSE_DECODE_FAILED,
                [loaded.filename],
                f"provider reported an error: {message}",
            )
        try:
            return AnnotationResult(loaded.filename, parse_labels(response))
        except (TypeError, ValueError) as e:
            raise BackendError(
                BackendErrorKind.RESPONSE_DECODE_FAILED, [loaded.filename], str(e)
            ) from e

    def render(self, loaded: LoadedFile, response: RawAnnotationResponse) -> str:
        """Format labels as a bracketed list ranked by ascending confidence."""
        return render_labels(self.parse_result(loaded, response).labels)
