"""Tests for core/config.py - provider selection and constants."""

import pytest

from core.config import (
    GOOGLE_VISION_ENDPOINT,
    MAX_BATCH_BYTES,
    MAX_FILE_BYTES,
    MICROSOFT_VISION_ENDPOINT,
    MIN_HEIGHT,
    MIN_WIDTH,
    load_provider_config,
    resolve_provider,
)
from core.errors import FatalConfig


class TestLimits:
    """Tests for the size limits."""

    def test_values(self):
        """Limits should match the provider recommendations."""
        assert MAX_FILE_BYTES == 4 * 1024 * 1024
        assert MAX_BATCH_BYTES == 8 * 1024 * 1024
        assert (MIN_WIDTH, MIN_HEIGHT) == (640, 480)


class TestResolveProvider:
    """Tests for resolve_provider."""

    def test_auto_with_microsoft_key(self):
        """auto should pick microsoft when the key is set."""
        assert resolve_provider("auto", {"MICROSOFT_API_KEY": "k"}) == "microsoft"

    def test_auto_without_key(self):
        """auto should fall back to google."""
        assert resolve_provider("auto", {}) == "google"

    def test_auto_with_empty_key(self):
        """An empty key should count as absent."""
        assert resolve_provider("auto", {"MICROSOFT_API_KEY": ""}) == "google"

    def test_explicit_is_case_insensitive(self):
        """Provider names should be matched case-insensitively."""
        assert resolve_provider("Google", {}) == "google"
        assert resolve_provider("MICROSOFT", {}) == "microsoft"

    def test_explicit_google_ignores_key(self):
        """Explicit google should win over a present microsoft key."""
        assert resolve_provider("google", {"MICROSOFT_API_KEY": "k"}) == "google"

    def test_invalid_raises(self):
        """Unknown providers should be fatal."""
        with pytest.raises(FatalConfig, match="Invalid --api"):
            resolve_provider("amazon", {})


class TestLoadProviderConfig:
    """Tests for load_provider_config."""

    def test_defaults(self):
        """Should use default endpoints when no overrides are set."""
        config = load_provider_config("google", environ={})
        assert config.provider == "google"
        assert config.verbose is False
        assert config.google_endpoint == GOOGLE_VISION_ENDPOINT
        assert config.microsoft_endpoint == MICROSOFT_VISION_ENDPOINT
        assert config.microsoft_api_key is None

    def test_reads_key_and_overrides(self):
        """Should pick up the key and endpoint overrides from the environment."""
        environ = {
            "MICROSOFT_API_KEY": "abc",
            "MICROSOFT_VISION_ENDPOINT": "https://westus.example/analyze",
            "GOOGLE_VISION_ENDPOINT": "https://proxy.example/annotate",
        }
        config = load_provider_config("auto", verbose=True, timeout=3, environ=environ)
        assert config.provider == "microsoft"
        assert config.verbose is True
        assert config.timeout == 3
        assert config.microsoft_api_key == "abc"
        assert config.microsoft_endpoint == "https://westus.example/analyze"
        assert config.google_endpoint == "https://proxy.example/annotate"

    def test_non_positive_timeout_raises(self):
        """A zero timeout should be fatal."""
        with pytest.raises(FatalConfig, match="timeout"):
            load_provider_config("google", timeout=0, environ={})

    @pytest.mark.parametrize("timeout", [-1.0, float("nan"), float("inf")])
    def test_non_finite_timeout_raises(self, timeout):
        """Negative, NaN and infinite timeouts should be fatal."""
        with pytest.raises(FatalConfig, match="timeout"):
            load_provider_config("google", timeout=timeout, environ={})
