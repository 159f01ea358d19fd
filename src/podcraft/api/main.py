"""Podcraft gateway - FastAPI Application.

This module defines the :func:`create_app` factory, all REST API routes, and
the ``main()`` CLI function that launches the uvicorn server.

Architecture
------------
The application is a stateless JSON gateway:

- **Configuration** is a single :class:`~podcraft.core.config.PodcraftConfig`
  built at startup and passed to :func:`create_app`; the adapters, artifact
  store and orchestrator it wires up are kept on ``app.state``.
- **Generation** is delegated to the adapters in
  :mod:`podcraft.core.adapters`.  Routes are plain ``def`` functions, so
  FastAPI runs each request in its threadpool while the blocking remote call
  is in flight.
- **Artifacts** are written by :class:`~podcraft.core.artifact_store.ArtifactStore`
  and served back by Starlette's ``StaticFiles`` under ``/images`` and
  ``/audio``.
- **Errors** are raised as :mod:`podcraft.core.errors` exceptions and turned
  into ``{error, details}`` JSON bodies by the exception handlers registered
  in :func:`create_app`.

Endpoints
---------
========  ==========================  =========================================
Method    Path                        Purpose
========  ==========================  =========================================
GET       ``/``                       Health check and version
POST      ``/generate-image``         Generate and store an image
POST      ``/generateText``           Generate (sanitized) text
POST      ``/generate-audio``         Synthesize and store speech
POST      ``/convert-to-audio``       Legacy alias of ``/generate-audio``
POST      ``/generate-full-process``  Run the podcast orchestration pipeline
GET       ``/images/{name}``          Stored image artifacts
GET       ``/audio/{name}``           Stored audio artifacts
========  ==========================  =========================================

Usage
-----
CLI (installed entry point)::

    podcraft

Direct invocation::

    python -m podcraft.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from podcraft import __version__
from podcraft.api.models import (
    AudioRequest,
    AudioResponse,
    ErrorResponse,
    FullProcessRequest,
    FullProcessResponse,
    ImageRequest,
    ImageResponse,
    LegacyAudioRequest,
    TextRequest,
    TextResponse,
)
from podcraft.core.adapters import AdapterBase, ImageGenerationParams, build_default_adapters
from podcraft.core.artifact_store import ArtifactStore
from podcraft.core.config import PodcraftConfig
from podcraft.core.errors import (
    GenerationError,
    OrchestrationError,
    StoreError,
    ValidationError,
)
from podcraft.core.orchestrator import OPTIONAL_STAGES, PodcastOrchestrator
from podcraft.core.sanitizer import sanitize

logger = logging.getLogger(__name__)

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or invalid request field"},
    500: {"model": ErrorResponse, "description": "Generation, storage or pipeline failure"},
}

router = APIRouter()


# ---------------------------------------------------------------------------
# Request helpers.
# ---------------------------------------------------------------------------


def _require(body) -> None:
    """Raise :class:`ValidationError` if *body* lacks any required field."""
    missing = body.missing_fields()
    if missing:
        raise ValidationError(missing)


def _absolute_url(request: Request, reference: str) -> str:
    """Turn a root-relative artifact reference into an absolute URL.

    References that already carry a scheme (``public_base_url`` configured)
    are returned unchanged.
    """
    if reference.startswith("/"):
        return str(request.base_url).rstrip("/") + reference
    return reference


def _adapter(request: Request, kind: str) -> AdapterBase:
    return request.app.state.adapters[kind]


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@router.get("/")
async def index(request: Request) -> dict:
    """Health check.

    Returns:
        Dictionary with ``status``, ``version`` and the enabled
        ``optional_stages``.
    """
    return {
        "status": "ok",
        "version": __version__,
        "optional_stages": sorted(request.app.state.orchestrator.enabled_stages),
    }


@router.post("/generate-image", response_model=ImageResponse, responses=_ERROR_RESPONSES)
def generate_image(body: ImageRequest, request: Request) -> ImageResponse:
    """Generate an image from a prompt and store it.

    Unspecified sampling parameters fall back to the adapter defaults
    (1024x1024, guidance 3.5, 50 steps, max sequence 512).

    Raises:
        ValidationError: 400 if ``prompt`` is missing.
        GenerationError: 500 if the image provider fails.
        StoreError: 500 if the image cannot be written.
    """
    _require(body)

    overrides = {
        "height": body.height,
        "width": body.width,
        "guidance_scale": body.guidance_scale,
        "steps": body.steps,
        "max_sequence_length": body.max_sequence,
    }
    params = ImageGenerationParams(
        prompt=body.prompt,
        **{name: value for name, value in overrides.items() if value is not None},
    )

    image = _adapter(request, "image").invoke(params)
    reference = request.app.state.store.store("image", image)
    return ImageResponse(image_url=_absolute_url(request, reference))


@router.post("/generateText", response_model=TextResponse, responses=_ERROR_RESPONSES)
def generate_text(body: TextRequest, request: Request) -> TextResponse:
    """Generate text from a prompt.

    The returned text is sanitized (no ``#``, ``*``, backslashes or line
    breaks).

    Raises:
        ValidationError: 400 if ``prompt`` is missing.
        GenerationError: 500 if the text provider fails or nothing is left
            after sanitization.
    """
    _require(body)
    text = sanitize(_adapter(request, "text").invoke(body.prompt)).strip()
    if not text:
        raise GenerationError("text", "generated text was empty after sanitization")
    return TextResponse(text=text)


def _synthesize(request: Request, text: str) -> AudioResponse:
    audio = _adapter(request, "audio").invoke(text)
    reference = request.app.state.store.store("audio", audio)
    return AudioResponse(audio_url=_absolute_url(request, reference))


@router.post("/generate-audio", response_model=AudioResponse, responses=_ERROR_RESPONSES)
def generate_audio(body: AudioRequest, request: Request) -> AudioResponse:
    """Synthesize speech for ``text`` and store it as MP3.

    Raises:
        ValidationError: 400 if ``text`` is missing.
        GenerationError: 500 if speech synthesis fails.
        StoreError: 500 if the audio cannot be written.
    """
    _require(body)
    return _synthesize(request, body.text)


@router.post("/convert-to-audio", response_model=AudioResponse, responses=_ERROR_RESPONSES)
def convert_to_audio(body: LegacyAudioRequest, request: Request) -> AudioResponse:
    """Legacy form of ``/generate-audio`` taking the text as ``prompt``."""
    _require(body)
    return _synthesize(request, body.prompt)


@router.post(
    "/generate-full-process",
    response_model=FullProcessResponse,
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
)
def generate_full_process(body: FullProcessRequest, request: Request) -> FullProcessResponse:
    """Run the podcast pipeline: script, title, and the enabled optional stages.

    Raises:
        ValidationError: 400 if ``topic``, ``points`` or ``duration`` is missing.
        OrchestrationError: 500 naming the first failing stage.
    """
    _require(body)

    orchestrator: PodcastOrchestrator = request.app.state.orchestrator
    result = orchestrator.run_full_process(body.topic, body.points, body.duration)

    return FullProcessResponse(
        podcast_title=result.title,
        full_podcast=result.script,
        poster_ref=_absolute_url(request, result.poster_ref) if result.poster_ref else None,
        audio_ref=_absolute_url(request, result.audio_ref) if result.audio_ref else None,
    )


# ---------------------------------------------------------------------------
# Exception handlers.
# ---------------------------------------------------------------------------


def _error_response(status_code: int, error: str, details: str, **extra) -> JSONResponse:
    body = ErrorResponse(error=error, details=details, **extra)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def _handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info(f"Rejected {request.method} {request.url.path}: {exc}")
    return _error_response(400, "Missing required field", str(exc))


async def _handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'] if part != 'body') or 'body'}: {error['msg']}"
        for error in exc.errors()
    )
    logger.info(f"Rejected {request.method} {request.url.path}: {problems}")
    return _error_response(400, "Invalid request body", problems)


async def _handle_generation_error(request: Request, exc: GenerationError) -> JSONResponse:
    return _error_response(500, f"Error generating {exc.kind}", exc.details, status=exc.status)


async def _handle_store_error(request: Request, exc: StoreError) -> JSONResponse:
    return _error_response(500, f"Error storing {exc.category}", exc.details)


async def _handle_orchestration_error(request: Request, exc: OrchestrationError) -> JSONResponse:
    status = exc.cause.status if isinstance(exc.cause, GenerationError) else None
    return _error_response(500, "Error generating podcast", exc.details, stage=exc.stage, status=status)


# ---------------------------------------------------------------------------
# Application factory.
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log the effective setup on startup and shutdown."""
    config: PodcraftConfig = app.state.config
    logger.info(
        f"Podcraft {__version__} ready: images in {config.images_dir}, audio in {config.audio_dir}, "
        f"optional stages: {sorted(config.optional_stages) or 'none'}"
    )

    yield

    logger.info("Podcraft shutting down.")


def create_app(
    config: PodcraftConfig | None = None,
    adapters: Mapping[str, AdapterBase] | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        config: Gateway configuration.  Loaded from the environment if omitted.
        adapters: Adapters keyed by kind (``text``, ``image``, ``audio``).
            Defaults to the built-in Gemini / FLUX / gTTS adapters.

    Returns:
        The configured application.
    """
    config = config or PodcraftConfig()
    adapters = dict(adapters) if adapters is not None else build_default_adapters(config)
    store = ArtifactStore(config.images_dir, config.audio_dir, base_url=config.public_base_url)

    app = FastAPI(
        title="Podcraft",
        description="Gateway for generated podcast scripts, posters and narration.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.adapters = adapters
    app.state.store = store
    enabled_stages = [stage for stage in sorted(OPTIONAL_STAGES) if config.stage_enabled(stage)]
    app.state.orchestrator = PodcastOrchestrator(adapters, store, enabled_stages)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ValidationError, _handle_validation_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation_error)
    app.add_exception_handler(GenerationError, _handle_generation_error)
    app.add_exception_handler(StoreError, _handle_store_error)
    app.add_exception_handler(OrchestrationError, _handle_orchestration_error)

    app.include_router(router)

    # Stored artifacts are served straight from their category directories.
    app.mount("/images", StaticFiles(directory=str(config.images_dir)), name="images")
    app.mount("/audio", StaticFiles(directory=str(config.audio_dir)), name="audio")

    return app


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host, port and log level from :class:`PodcraftConfig` (environment
    variables ``PODCRAFT_SERVER_HOST``, ``PODCRAFT_SERVER_PORT``,
    ``PODCRAFT_LOG_LEVEL``).  Defaults to ``0.0.0.0:3000``.

    This function is registered as the ``podcraft`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    config = PodcraftConfig()

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    uvicorn.run(
        create_app(config),
        host=config.server_host,
        port=config.server_port,
    )


if __name__ == "__main__":
    main()
