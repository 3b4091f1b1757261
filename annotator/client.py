"""HTTP session utilities for the annotation providers.

Provides mixin classes for lazy-loaded, authenticated sessions,
reducing code duplication across annotator implementations.
"""

from typing import TYPE_CHECKING

import requests

from core.config import CLOUD_PLATFORM_SCOPE, MICROSOFT_API_KEY_ENV_VAR, MICROSOFT_KEY_URL
from core.errors import FatalConfig

if TYPE_CHECKING:
    from google.auth.transport.requests import AuthorizedSession

    from core.types import ProviderConfig


class GoogleSessionMixin:
    """Mixin providing a lazy-loaded Google authorized session.

    Credentials come from Application Default Credentials
    (GOOGLE_APPLICATION_CREDENTIALS, gcloud auth or the metadata server).

    Example:
        class MyAnnotator(Annotator, GoogleSessionMixin):
            def send(self, batch):
                response = self.session.post(url, json=body)
    """

    _session: "AuthorizedSession | None" = None

    @property
    def session(self) -> "AuthorizedSession":
        """Get or create the authorized session.

        Returns:
            requests-compatible session that attaches OAuth2 tokens.

        Raises:
            FatalConfig: If no default credentials can be found.
        """
        if self._session is None:
            import google.auth
            from google.auth.exceptions import DefaultCredentialsError
            from google.auth.transport.requests import AuthorizedSession

            try:
                credentials, _ = google.auth.default(scopes=[CLOUD_PLATFORM_SCOPE])
            except DefaultCredentialsError as e:
                raise FatalConfig(
                    f"Google application default credentials not found: {e}. "
                    "Run 'gcloud auth application-default login' or set "
                    "GOOGLE_APPLICATION_CREDENTIALS"
                ) from e
            self._session = AuthorizedSession(credentials)
        return self._session

    def reset_session(self) -> None:
        """Reset the session (useful for testing or reconnection)."""
        self._session = None


class SubscriptionKeyMixin:
    """Mixin providing a plain requests session and a subscription key.

    The key is read from ProviderConfig, which takes it from the
    MICROSOFT_API_KEY environment variable (or a .env file).
    """

    config: "ProviderConfig"
    _session: requests.Session | None = None

    @property
    def subscription_key(self) -> str:
        """Subscription key for the Ocp-Apim-Subscription-Key header.

        Raises:
            FatalConfig: If the key is not configured.
        """
        key = self.config.microsoft_api_key
        if not key:
            raise FatalConfig(
                f"Must set {MICROSOFT_API_KEY_ENV_VAR} environment variable to a valid key "
                f"obtained from {MICROSOFT_KEY_URL}"
            )
        return key

    @property
    def session(self) -> requests.Session:
        """Get or create the HTTP session."""
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def reset_session(self) -> None:
        """Reset the session (useful for testing or reconnection)."""
        self._session = None


def describe_request_error(error: Exception, limit: int = 500) -> str:
    """Describe a failed call, including the provider's error body when there is one.

    Args:
        error: Exception raised while sending or by raise_for_status().
        limit: Maximum number of body characters to include.
    """
    body = getattr(getattr(error, "response", None), "text", None)
    if not isinstance(body, str) or not body.strip():
        return str(error)
    body = body.strip()
    if len(body) > limit:
        body = body[:limit] + "..."
    return f"{error}: {body}"
