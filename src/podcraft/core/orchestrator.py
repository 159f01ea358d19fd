"""Podcast orchestration pipeline.

:class:`PodcastOrchestrator` chains the generation adapters into the fixed,
strictly sequential "full process":

1. **script** - text adapter, sanitized
2. **title** - text adapter, sanitized (depends on the topic only)
3. **poster** - image adapter + artifact store (optional)
4. **narration** - audio adapter + artifact store (optional)

Optional stages are switched on through ``PodcraftConfig.optional_stages``;
the set is read once per run.

Failure Policy
--------------
The first failing stage aborts the run, mandatory or optional alike, and is
reported as :class:`~podcraft.core.errors.OrchestrationError` carrying the
stage name and the underlying error.  A partial result is never returned, so
a missing ``poster_ref`` always means the stage was disabled.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import TypeVar

from podcraft.core.adapters.base import AdapterBase, ImageGenerationParams
from podcraft.core.artifact_store import ArtifactStore
from podcraft.core.errors import (
    GenerationError,
    OrchestrationError,
    StoreError,
    ValidationError,
)
from podcraft.core.prompts import build_poster_prompt, build_script_prompt, build_title_prompt
from podcraft.core.sanitizer import sanitize

logger = logging.getLogger(__name__)

OPTIONAL_STAGES: frozenset[str] = frozenset({"poster", "narration"})

T = TypeVar("T")


@dataclass
class OrchestrationResult:
    """Aggregate output of one full-process run.

    Attributes:
        title: Sanitized episode title.
        script: Sanitized episode script.
        poster_ref: Reference of the stored poster, if the stage ran.
        audio_ref: Reference of the stored narration, if the stage ran.
    """

    title: str
    script: str
    poster_ref: str | None = None
    audio_ref: str | None = None


class PodcastOrchestrator:
    """Run the full-process pipeline against a set of adapters.

    Args:
        adapters: Adapters keyed by kind.  ``"text"`` is always required;
            ``"image"`` and ``"audio"`` only when the matching optional stage
            is enabled.
        store: Artifact store for poster and narration payloads.
        enabled_stages: Optional stages to run (``"poster"``, ``"narration"``).

    Raises:
        ValueError: If an unknown optional stage is requested or an enabled
            stage has no adapter.
    """

    def __init__(
        self,
        adapters: Mapping[str, AdapterBase],
        store: ArtifactStore,
        enabled_stages: Iterable[str] = (),
    ) -> None:
        self.adapters = adapters
        self.store = store
        self.enabled_stages = frozenset(enabled_stages)

        unknown = self.enabled_stages - OPTIONAL_STAGES
        if unknown:
            raise ValueError(f"Unknown optional stage(s): {', '.join(sorted(unknown))}")

        required = {"text"}
        if "poster" in self.enabled_stages:
            required.add("image")
        if "narration" in self.enabled_stages:
            required.add("audio")
        missing = required - set(adapters)
        if missing:
            raise ValueError(f"No adapter configured for kind(s): {', '.join(sorted(missing))}")

    def run_full_process(self, topic: str | None, points: str | None, duration: str | None) -> OrchestrationResult:
        """Generate a podcast script and title, plus poster and narration if enabled.

        Args:
            topic: Subject of the episode.
            points: Key points to cover.
            duration: Target spoken length.

        Returns:
            The assembled :class:`OrchestrationResult`.

        Raises:
            ValidationError: If any argument is missing or blank.  No adapter
                is invoked.
            OrchestrationError: If any stage fails.  Later stages are not run.
        """
        fields = {"topic": topic, "points": points, "duration": duration}
        missing = [name for name, value in fields.items() if not value or not value.strip()]
        if missing:
            raise ValidationError(missing)

        enabled = self.enabled_stages
        logger.info(f"Starting full process for topic '{topic}' (optional stages: {sorted(enabled) or 'none'})")

        script = self._run_stage("script", lambda: self._generate_text(build_script_prompt(topic, points, duration)))
        title = self._run_stage("title", lambda: self._generate_text(build_title_prompt(topic)))
        result = OrchestrationResult(title=title, script=script)

        if "poster" in enabled:
            image = self.adapters["image"]
            params = ImageGenerationParams(prompt=build_poster_prompt(title, topic))
            result.poster_ref = self._run_stage("poster", lambda: self.store.store("image", image.invoke(params)))

        if "narration" in enabled:
            audio = self.adapters["audio"]
            result.audio_ref = self._run_stage("narration", lambda: self.store.store("audio", audio.invoke(script)))

        logger.info(f"Full process finished: '{result.title}'")
        return result

    def _generate_text(self, prompt: str) -> str:
        """Invoke the text adapter and sanitize its output.

        Raises:
            GenerationError: If nothing is left after sanitization.
        """
        text = sanitize(self.adapters["text"].invoke(prompt)).strip()
        if not text:
            raise GenerationError("text", "generated text was empty after sanitization")
        return text

    def _run_stage(self, stage: str, action: Callable[[], T]) -> T:
        """Execute one stage, converting its failure into an OrchestrationError."""
        logger.info(f"Stage '{stage}' started")
        try:
            output = action()
        except (GenerationError, StoreError) as e:
            logger.error(f"Stage '{stage}' failed, aborting pipeline: {e}")
            raise OrchestrationError(stage, e) from e
        logger.info(f"Stage '{stage}' finished")
        return output
