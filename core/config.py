"""Centralized configuration for the labeling pipeline.

This module is the single source of truth for:
- Provider size limits
- Endpoints and credential environment variables
- Provider selection (ProviderConfig)
"""

import math
import os
from collections.abc import Mapping

from dotenv import load_dotenv

from core.errors import FatalConfig
from core.types import ProviderConfig

load_dotenv()

# ===================================================================
# Size Limits
# https://cloud.google.com/vision/docs/best-practices#file_sizes
# https://cloud.google.com/vision/docs/best-practices#image_sizing
# ===================================================================
MAX_FILE_BYTES = 4 << 20
MAX_BATCH_BYTES = 8 << 20
MIN_WIDTH = 640
MIN_HEIGHT = 480

# ===================================================================
# Google Cloud Vision
# ===================================================================
GOOGLE_PROVIDER = "google"
GOOGLE_VISION_ENDPOINT = "https://vision.googleapis.com/v1/images:annotate"
GOOGLE_VISION_ENDPOINT_ENV_VAR = "GOOGLE_VISION_ENDPOINT"
CLOUD_PLATFORM_SCOPE = "https://www.googleapis.com/auth/cloud-platform"
LABEL_DETECTION = "LABEL_DETECTION"

# ===================================================================
# Microsoft Computer Vision
# https://www.microsoft.com/cognitive-services/en-us/computer-vision-api/documentation/howtocallvisionapi
# ===================================================================
MICROSOFT_PROVIDER = "microsoft"
MICROSOFT_VISION_ENDPOINT = (
    "https://api.projectoxford.ai/vision/v1.0/analyze?visualFeatures=Description,Tags"
)
MICROSOFT_VISION_ENDPOINT_ENV_VAR = "MICROSOFT_VISION_ENDPOINT"
MICROSOFT_API_KEY_ENV_VAR = "MICROSOFT_API_KEY"
MICROSOFT_KEY_URL = "https://www.microsoft.com/cognitive-services/en-US/subscriptions"

# ===================================================================
# Provider Selection
# ===================================================================
AUTO_PROVIDER = "auto"
PROVIDERS = (GOOGLE_PROVIDER, MICROSOFT_PROVIDER)
PROVIDER_CHOICES = (AUTO_PROVIDER, *PROVIDERS)
DEFAULT_TIMEOUT = 60.0


def resolve_provider(api: str, environ: Mapping[str, str] | None = None) -> str:
    """Resolve 'auto' to a concrete provider.

    'auto' picks microsoft when a subscription key is present, google
    otherwise.

    Args:
        api: 'google', 'microsoft' or 'auto' (case-insensitive).
        environ: Environment to inspect (default: os.environ).

    Returns:
        Concrete provider name.

    Raises:
        FatalConfig: If api is not a known choice.
    """
    environ = os.environ if environ is None else environ
    api = api.lower()
    if api == AUTO_PROVIDER:
        if environ.get(MICROSOFT_API_KEY_ENV_VAR):
            return MICROSOFT_PROVIDER
        return GOOGLE_PROVIDER
    if api not in PROVIDERS:
        raise FatalConfig(
            f"Invalid --api({api}), must be 'auto', 'google' or 'microsoft'"
        )
    return api


def load_provider_config(
    api: str = AUTO_PROVIDER,
    verbose: bool = False,
    timeout: float = DEFAULT_TIMEOUT,
    environ: Mapping[str, str] | None = None,
) -> ProviderConfig:
    """Build the ProviderConfig for this run.

    Args:
        api: Requested provider ('google', 'microsoft' or 'auto').
        verbose: Dump decoded responses to the log.
        timeout: Seconds to wait for each HTTP call.
        environ: Environment to read keys and endpoints from (default: os.environ).

    Returns:
        Frozen ProviderConfig.

    Raises:
        FatalConfig: On an unknown provider or a timeout that is not a positive,
            finite number.
    """
    environ = os.environ if environ is None else environ
    if not math.isfinite(timeout) or timeout <= 0:
        raise FatalConfig(f"Invalid --timeout({timeout}), must be a positive number of seconds")
    return ProviderConfig(
        provider=resolve_provider(api, environ),
        verbose=verbose,
        timeout=timeout,
        microsoft_api_key=environ.get(MICROSOFT_API_KEY_ENV_VAR) or None,
        google_endpoint=environ.get(GOOGLE_VISION_ENDPOINT_ENV_VAR) or GOOGLE_VISION_ENDPOINT,
        microsoft_endpoint=(
            environ.get(MICROSOFT_VISION_ENDPOINT_ENV_VAR) or MICROSOFT_VISION_ENDPOINT
        ),
    )
