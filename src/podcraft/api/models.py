"""Pydantic request and response models for the Podcraft API.

These models define the JSON schema for every API endpoint.  FastAPI uses
them for request parsing, serialisation, and OpenAPI documentation.

Required fields are declared optional on purpose: a missing or blank field is
reported by the gateway itself as a ``400`` with the ``{error, details}``
body (see :meth:`RequiredFieldsMixin.missing_fields`) rather than FastAPI's
generic ``422``.

JSON keys follow the public API's camelCase (``guidanceScale``,
``podcastTitle``); Python attributes are snake_case.

Models
------
ImageRequest
    Payload for ``POST /generate-image``.
TextRequest
    Payload for ``POST /generateText``.
AudioRequest
    Payload for ``POST /generate-audio``.
LegacyAudioRequest
    Payload for ``POST /convert-to-audio`` (``prompt`` instead of ``text``).
FullProcessRequest
    Payload for ``POST /generate-full-process``.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class RequiredFieldsMixin:
    """Report which of the model's required fields are absent or blank."""

    required_fields: ClassVar[tuple[str, ...]] = ()

    def missing_fields(self) -> list[str]:
        """Return the names of required fields that are ``None`` or whitespace."""
        missing = []
        for name in self.required_fields:
            value = getattr(self, name)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(name)
        return missing


class ImageRequest(RequiredFieldsMixin, BaseModel):
    """Request body for ``POST /generate-image``.

    Attributes:
        prompt: Text description of the image.  Required.
        height: Image height in pixels (default 1024).
        width: Image width in pixels (default 1024).
        guidance_scale: Classifier-free guidance scale (default 3.5).
        steps: Number of inference steps (default 50).
        max_sequence: Maximum prompt sequence length (default 512).
    """

    model_config = ConfigDict(populate_by_name=True)

    required_fields: ClassVar[tuple[str, ...]] = ("prompt",)

    prompt: str | None = Field(default=None, description="Image prompt (required).")
    height: int | None = Field(default=None, gt=0, description="Image height in pixels.")
    width: int | None = Field(default=None, gt=0, description="Image width in pixels.")
    guidance_scale: float | None = Field(
        default=None,
        ge=0,
        alias="guidanceScale",
        description="Classifier-free guidance scale.",
    )
    steps: int | None = Field(default=None, gt=0, description="Number of inference steps.")
    max_sequence: int | None = Field(
        default=None,
        gt=0,
        alias="maxSequence",
        description="Maximum prompt sequence length.",
    )


class TextRequest(RequiredFieldsMixin, BaseModel):
    """Request body for ``POST /generateText``."""

    required_fields: ClassVar[tuple[str, ...]] = ("prompt",)

    prompt: str | None = Field(default=None, description="Text prompt (required).")


class AudioRequest(RequiredFieldsMixin, BaseModel):
    """Request body for ``POST /generate-audio``."""

    required_fields: ClassVar[tuple[str, ...]] = ("text",)

    text: str | None = Field(default=None, description="Text to speak (required).")


class LegacyAudioRequest(RequiredFieldsMixin, BaseModel):
    """Request body for the legacy ``POST /convert-to-audio`` route."""

    required_fields: ClassVar[tuple[str, ...]] = ("prompt",)

    prompt: str | None = Field(default=None, description="Text to speak (required).")


class FullProcessRequest(RequiredFieldsMixin, BaseModel):
    """Request body for ``POST /generate-full-process``.

    Attributes:
        topic: Subject of the episode.
        points: Key points the host should cover.
        duration: Target spoken length, free text (e.g. ``"10 minutes"``).
    """

    required_fields: ClassVar[tuple[str, ...]] = ("topic", "points", "duration")

    topic: str | None = Field(default=None, description="Episode topic (required).")
    points: str | None = Field(default=None, description="Key points (required).")
    duration: str | None = Field(default=None, description="Target duration (required).")


# ---------------------------------------------------------------------------
# Responses.
# ---------------------------------------------------------------------------


class _CamelResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ImageResponse(_CamelResponse):
    image_url: str = Field(..., alias="imageUrl")


class TextResponse(BaseModel):
    text: str


class AudioResponse(_CamelResponse):
    audio_url: str = Field(..., alias="audioUrl")


class FullProcessResponse(_CamelResponse):
    """Response body for ``POST /generate-full-process``.

    ``posterRef`` and ``audioRef`` are omitted when their stage is disabled.
    """

    podcast_title: str = Field(..., alias="podcastTitle")
    full_podcast: str = Field(..., alias="fullPodcast")
    poster_ref: str | None = Field(default=None, alias="posterRef")
    audio_ref: str | None = Field(default=None, alias="audioRef")


class ErrorResponse(BaseModel):
    """Error body shared by every endpoint.

    Attributes:
        error: Short summary of what failed.
        details: Underlying error message.
        status: Upstream HTTP status, for generation failures.
        stage: Failing pipeline stage, for orchestration failures.
    """

    error: str
    details: str
    status: int | None = None
    stage: str | None = None
