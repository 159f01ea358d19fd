"""Error taxonomy for the Podcraft gateway.

Every failure the gateway can report to a caller is one of the exceptions
defined here.  The transport layer maps them onto HTTP responses:

==========================  ======  ==========================================
Exception                   Status  Raised by
==========================  ======  ==========================================
:class:`ValidationError`    400     request validation, orchestrator precheck
:class:`GenerationError`    500     generation adapters (remote call failed)
:class:`StoreError`         500     :class:`~podcraft.core.artifact_store.ArtifactStore`
:class:`OrchestrationError` 500     :class:`~podcraft.core.orchestrator.PodcastOrchestrator`
==========================  ======  ==========================================

None of these are retried.  Messages never include credentials.
"""

from __future__ import annotations


class PodcraftError(Exception):
    """Base class for all gateway errors."""


class ValidationError(PodcraftError):
    """One or more required request fields are missing or empty.

    Attributes:
        missing: Names of the offending fields, in request order.
    """

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"Missing required field(s): {', '.join(self.missing)}")


class GenerationError(PodcraftError):
    """A generation adapter's remote call failed.

    Attributes:
        kind: Adapter kind (``"text"``, ``"image"`` or ``"audio"``).
        status: Upstream HTTP status, or ``None`` when the provider could not
            be reached (network failure, timeout) or returned no usable content.
        details: Human-readable description of the failure.
    """

    def __init__(self, kind: str, details: str, status: int | None = None) -> None:
        self.kind = kind
        self.status = status
        self.details = details
        prefix = f"{kind} generation failed"
        if status is not None:
            prefix = f"{prefix} (upstream status {status})"
        super().__init__(f"{prefix}: {details}")


class StoreError(PodcraftError):
    """An artifact could not be persisted (or a reference could not be resolved)."""

    def __init__(self, category: str, details: str) -> None:
        self.category = category
        self.details = details
        super().__init__(f"Could not store {category} artifact: {details}")


class OrchestrationError(PodcraftError):
    """A pipeline stage failed and the remaining stages were aborted.

    Attributes:
        stage: Identifier of the first failing stage.
        cause: The underlying :class:`GenerationError` or :class:`StoreError`.
    """

    def __init__(self, stage: str, cause: PodcraftError) -> None:
        self.stage = stage
        self.cause = cause
        super().__init__(f"Stage '{stage}' failed: {cause}")

    @property
    def details(self) -> str:
        return str(self.cause)
