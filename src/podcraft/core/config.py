"""Configuration management for the Podcraft gateway.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the PODCRAFT_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (PODCRAFT_* prefix)
2. .env file in the working directory
3. Default values defined in PodcraftConfig

Example .env file:
    PODCRAFT_GEMINI_API_KEY=...
    PODCRAFT_HUGGINGFACE_API_KEY=hf_...
    PODCRAFT_SERVER_PORT=3000
    PODCRAFT_OPTIONAL_STAGES=["poster", "narration"]

Explicit Configuration
----------------------
There is no import-time global instance.  A single ``PodcraftConfig`` is built
by :func:`podcraft.api.main.main` (or by the caller of
:func:`podcraft.api.main.create_app`) and passed by reference to the adapters,
the artifact store and the orchestrator.

Usage Example
-------------
    from podcraft.core.config import PodcraftConfig

    config = PodcraftConfig()
    print(config.server_port)
    print(config.stage_enabled("poster"))

Directory Management
--------------------
The artifact directories are created on initialization:
- images_dir: generated poster / image artifacts (``.png``)
- audio_dir: generated narration / speech artifacts (``.mp3``)
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

OptionalStage = Literal["poster", "narration"]


class PodcraftConfig(BaseSettings):
    """Main configuration for the Podcraft gateway.

    Values are loaded from environment variables with the PODCRAFT_ prefix,
    with fallback to defaults defined here.

    Attributes
    ----------
    Provider Credentials:
        huggingface_api_key : SecretStr
            Bearer token for the Hugging Face inference API (image generation)
        gemini_api_key : SecretStr
            API key for the Gemini generative language API (text generation)

    Provider Settings:
        gemini_model : str
            Gemini model identifier used for every text generation
        gemini_api_base : str
            Base URL of the Gemini REST API
        image_model_url : str
            Hugging Face inference endpoint of the image model
        tts_language : str
            Language code passed to gTTS
        tts_tld : str
            Google Translate top-level domain used by gTTS (accent selection)
        tts_slow : bool
            Read the narration slowly
        request_timeout : float
            Timeout in seconds applied to every remote generation call

    Pipeline Settings:
        optional_stages : list[OptionalStage]
            Optional orchestration stages to run (``poster``, ``narration``)

    Storage:
        images_dir : Path
            Directory for stored image artifacts
        audio_dir : Path
            Directory for stored audio artifacts
        public_base_url : str
            Prefix for returned artifact URLs; empty means "use the request's
            own scheme and host"

    Server Settings:
        server_host : str
            Bind address for uvicorn
        server_port : int
            Listening port (defaults to 3000)
        log_level : str
            Root logging level

    Notes
    -----
    - API keys are ``SecretStr`` and never appear in reprs or log output
    - Configuration is immutable after initialization; restart to change it
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PODCRAFT_",
        case_sensitive=False,
        frozen=True,
    )

    # Provider credentials
    huggingface_api_key: SecretStr = Field(
        default=SecretStr(""),
        description="Hugging Face inference API token",
    )
    gemini_api_key: SecretStr = Field(
        default=SecretStr(""),
        description="Gemini generative language API key",
    )

    # Text generation
    gemini_model: str = Field(
        default="gemini-1.5-flash",
        description="Gemini model used for script and title generation",
    )
    gemini_api_base: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Base URL of the Gemini REST API",
    )

    # Image generation
    image_model_url: str = Field(
        default="https://api-inference.huggingface.co/models/black-forest-labs/FLUX.1-dev",
        description="Hugging Face inference endpoint for image synthesis",
    )

    # Speech synthesis
    tts_language: str = Field(default="en", description="gTTS language code")
    tts_tld: str = Field(default="com", description="gTTS top-level domain (accent)")
    tts_slow: bool = Field(default=False, description="Slow narration")

    request_timeout: float = Field(
        default=120.0,
        description="Timeout in seconds for each remote generation call",
        gt=0,
    )

    # Pipeline
    optional_stages: list[OptionalStage] = Field(
        default_factory=list,
        description="Optional orchestration stages to enable (poster, narration)",
    )

    # Paths
    images_dir: Path = Field(
        default=Path("images"),
        description="Directory for stored image artifacts",
    )
    audio_dir: Path = Field(
        default=Path("audio"),
        description="Directory for stored audio artifacts",
    )
    public_base_url: str = Field(
        default="",
        description="Prefix for artifact URLs (empty = derive from request)",
    )

    # Server
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address",
    )
    server_port: int = Field(
        default=3000,
        description="Server port",
        ge=1,
        le=65535,
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root logging level",
    )

    def __init__(self, **kwargs):
        """Initialize configuration and create the artifact directories.

        Args:
            **kwargs: Configuration overrides (typically from environment variables)
        """
        super().__init__(**kwargs)

        self.images_dir.mkdir(parents=True, exist_ok=True)
        self.audio_dir.mkdir(parents=True, exist_ok=True)

    def stage_enabled(self, stage: str) -> bool:
        """Return True if the optional orchestration *stage* is switched on."""
        return stage in self.optional_stages
