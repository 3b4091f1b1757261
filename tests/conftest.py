"""Shared fixtures for the test suite."""

from pathlib import Path

import pytest
from PIL import Image

from core.types import LoadedFile, ProviderConfig


@pytest.fixture
def make_image(tmp_path: Path):
    """Factory writing a solid-color PNG of the given size; returns its path as str."""

    def _make(name: str, width: int = 640, height: int = 480) -> str:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new("RGB", (width, height), color=(200, 120, 40)).save(path, format="PNG")
        return str(path)

    return _make


@pytest.fixture
def google_config() -> ProviderConfig:
    return ProviderConfig(
        provider="google",
        timeout=5.0,
        google_endpoint="https://vision.example.test/v1/images:annotate",
    )


@pytest.fixture
def microsoft_config() -> ProviderConfig:
    return ProviderConfig(
        provider="microsoft",
        timeout=5.0,
        microsoft_api_key="secret-key",
        microsoft_endpoint="https://cv.example.test/analyze?visualFeatures=Description,Tags",
    )


@pytest.fixture
def make_loaded():
    """Factory for a LoadedFile holding size bytes of dummy content."""

    def _make(name: str, size: int) -> LoadedFile:
        return LoadedFile(filename=name, data=b"\0" * size, width=640, height=480)

    return _make
