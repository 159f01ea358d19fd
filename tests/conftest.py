"""Shared pytest fixtures for Podcraft tests."""

import shutil
import tempfile
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Generator

import pytest
from fastapi.testclient import TestClient

from podcraft.api.main import create_app
from podcraft.core.adapters.base import AdapterBase
from podcraft.core.artifact_store import ArtifactStore
from podcraft.core.config import PodcraftConfig


class StubAdapter(AdapterBase):
    """In-process adapter returning canned outputs.

    Each ``invoke`` pops the next item from *outputs*; an exception instance
    is raised instead of returned.  When the list runs out, *default* is
    returned.  Every payload is recorded in ``calls``.
    """

    name = "Stub"
    description = "Canned outputs for tests"

    def __init__(self, config: PodcraftConfig, kind: str, outputs: Iterable[Any] = (), default: Any = None) -> None:
        super().__init__(config)
        self.kind = kind
        self.outputs = list(outputs)
        self.default = default
        self.calls: list[Any] = []

    def invoke(self, payload: Any) -> Any:
        self.calls.append(payload)
        output = self.outputs.pop(0) if self.outputs else self.default
        if isinstance(output, Exception):
            raise output
        return output


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config(temp_dir: Path) -> PodcraftConfig:
    """Create a test configuration with temporary artifact directories.

    Args:
        temp_dir: Temporary directory from fixture

    Returns:
        PodcraftConfig instance for testing (no .env file, no optional stages)
    """
    return PodcraftConfig(
        _env_file=None,
        gemini_api_key="test-gemini-key",
        huggingface_api_key="hf_test_token",
        images_dir=temp_dir / "images",
        audio_dir=temp_dir / "audio",
        request_timeout=5.0,
        optional_stages=[],
        public_base_url="",
    )


@pytest.fixture
def artifact_store(test_config: PodcraftConfig) -> ArtifactStore:
    """Artifact store rooted in the test configuration's directories."""
    return ArtifactStore(test_config.images_dir, test_config.audio_dir)


@pytest.fixture
def text_adapter(test_config: PodcraftConfig) -> StubAdapter:
    """Text adapter that answers every prompt with Markdown-flavoured text."""
    return StubAdapter(test_config, "text", default="## Welcome to *the* show\nToday we talk.")


@pytest.fixture
def image_adapter(test_config: PodcraftConfig) -> StubAdapter:
    """Image adapter returning a fixed 10-byte payload."""
    return StubAdapter(test_config, "image", default=b"\x89PNG\r\n\x1a\n\x00\x01")


@pytest.fixture
def audio_adapter(test_config: PodcraftConfig) -> StubAdapter:
    """Audio adapter returning a small fake MP3 payload."""
    return StubAdapter(test_config, "audio", default=b"ID3\x04\x00fake-mp3")


@pytest.fixture
def stub_adapters(text_adapter, image_adapter, audio_adapter) -> dict[str, StubAdapter]:
    """All three stub adapters keyed by kind."""
    return {"text": text_adapter, "image": image_adapter, "audio": audio_adapter}


@pytest.fixture
def test_client(test_config: PodcraftConfig, stub_adapters) -> Generator[TestClient, None, None]:
    """TestClient for an app wired to the stub adapters."""
    app = create_app(test_config, adapters=stub_adapters)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def make_stub(test_config: PodcraftConfig):
    """Factory for extra stub adapters: ``make_stub(kind, outputs=..., default=...)``."""

    def _make(kind: str, outputs: Iterable[Any] = (), default: Any = None) -> StubAdapter:
        return StubAdapter(test_config, kind, outputs=outputs, default=default)

    return _make
