"""Tests for podcraft.core.config - configuration management.

Tests cover:
- Default values for all configuration fields.
- Environment variable overrides via the PODCRAFT_ prefix.
- Automatic directory creation on initialisation.
- Pydantic validation constraints (port range, timeout, stage names).
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from podcraft.core.config import PodcraftConfig


def _make_config(temp_dir: Path, **overrides) -> PodcraftConfig:
    return PodcraftConfig(
        _env_file=None,
        images_dir=temp_dir / "images",
        audio_dir=temp_dir / "audio",
        **overrides,
    )


class TestConfigDefaults:
    """Verify that PodcraftConfig provides sensible defaults."""

    def test_default_server_port(self, monkeypatch, temp_dir):
        """Default server port should be 3000."""
        monkeypatch.delenv("PODCRAFT_SERVER_PORT", raising=False)
        assert _make_config(temp_dir).server_port == 3000

    def test_default_gemini_model(self, monkeypatch, temp_dir):
        monkeypatch.delenv("PODCRAFT_GEMINI_MODEL", raising=False)
        assert _make_config(temp_dir).gemini_model == "gemini-1.5-flash"

    def test_default_image_endpoint(self, monkeypatch, temp_dir):
        monkeypatch.delenv("PODCRAFT_IMAGE_MODEL_URL", raising=False)
        assert _make_config(temp_dir).image_model_url.endswith("black-forest-labs/FLUX.1-dev")

    def test_no_optional_stages_by_default(self, monkeypatch, temp_dir):
        monkeypatch.delenv("PODCRAFT_OPTIONAL_STAGES", raising=False)
        cfg = _make_config(temp_dir)
        assert cfg.optional_stages == []
        assert cfg.stage_enabled("poster") is False
        assert cfg.stage_enabled("narration") is False

    def test_default_timeout_is_bounded(self, monkeypatch, temp_dir):
        monkeypatch.delenv("PODCRAFT_REQUEST_TIMEOUT", raising=False)
        assert 0 < _make_config(temp_dir).request_timeout <= 300

    def test_api_keys_hidden_in_repr(self, test_config: PodcraftConfig):
        """Credentials are SecretStr and must not leak through repr()."""
        assert "test-gemini-key" not in repr(test_config)
        assert "hf_test_token" not in repr(test_config)
        assert test_config.gemini_api_key.get_secret_value() == "test-gemini-key"


class TestConfigEnvironment:
    """Verify PODCRAFT_ environment variable overrides."""

    def test_port_from_env(self, monkeypatch, temp_dir):
        monkeypatch.setenv("PODCRAFT_SERVER_PORT", "8080")
        assert _make_config(temp_dir).server_port == 8080

    def test_optional_stages_from_env(self, monkeypatch, temp_dir):
        monkeypatch.setenv("PODCRAFT_OPTIONAL_STAGES", '["poster", "narration"]')
        cfg = _make_config(temp_dir)
        assert cfg.stage_enabled("poster")
        assert cfg.stage_enabled("narration")

    def test_api_key_from_env(self, monkeypatch, temp_dir):
        monkeypatch.setenv("PODCRAFT_GEMINI_API_KEY", "from-env")
        assert _make_config(temp_dir).gemini_api_key.get_secret_value() == "from-env"


class TestConfigDirectoryCreation:
    """Verify that PodcraftConfig creates the artifact directories."""

    def test_images_dir_created(self, test_config: PodcraftConfig):
        assert test_config.images_dir.is_dir()

    def test_audio_dir_created(self, test_config: PodcraftConfig):
        assert test_config.audio_dir.is_dir()

    def test_nested_dirs_created(self, temp_dir):
        cfg = PodcraftConfig(
            _env_file=None,
            images_dir=temp_dir / "a" / "b" / "images",
            audio_dir=temp_dir / "a" / "b" / "audio",
        )
        assert cfg.images_dir.is_dir()
        assert cfg.audio_dir.is_dir()


class TestConfigValidation:
    """Pydantic constraints on configuration values."""

    def test_unknown_stage_rejected(self, temp_dir):
        with pytest.raises(ValidationError):
            _make_config(temp_dir, optional_stages=["subtitles"])

    def test_port_out_of_range(self, temp_dir):
        with pytest.raises(ValidationError):
            _make_config(temp_dir, server_port=70000)

    def test_timeout_must_be_positive(self, temp_dir):
        with pytest.raises(ValidationError):
            _make_config(temp_dir, request_timeout=0)

    def test_config_is_frozen(self, test_config: PodcraftConfig):
        with pytest.raises(ValidationError):
            test_config.server_port = 9999
