"""Flat-file artifact storage for generated media.

Generated binaries (poster images, narration audio) are written to one
directory per category and identified afterwards only by the URL reference
returned from :meth:`ArtifactStore.store`.  The store is intentionally simple:

- no index or manifest file, retrieval is purely by reference
- file names are random ``uuid4`` hex strings plus the category extension
- artifacts are immutable; there is no update or delete path

Writes go to a temporary file in the target directory and are moved into
place with :func:`os.replace`, so a reference is only ever returned for a
fully written file.  Because names come from ``uuid4`` rather than a counter,
concurrent calls need no locking.
"""

from __future__ import annotations

import logging
import os
import tempfile
import uuid
from dataclasses import dataclass
from pathlib import Path

from podcraft.core.errors import StoreError

logger = logging.getLogger(__name__)

# File mode of stored artifacts; mkstemp alone creates them 0600.
ARTIFACT_MODE = 0o644


@dataclass(frozen=True)
class ArtifactCategory:
    """Storage layout for one kind of artifact.

    Attributes:
        name: Category tag used by callers (``"image"`` or ``"audio"``).
        extension: Canonical file extension, including the dot.
        route: URL path segment the static surface serves the directory under.
    """

    name: str
    extension: str
    route: str


IMAGE = ArtifactCategory(name="image", extension=".png", route="images")
AUDIO = ArtifactCategory(name="audio", extension=".mp3", route="audio")

CATEGORIES: dict[str, ArtifactCategory] = {IMAGE.name: IMAGE, AUDIO.name: AUDIO}


class ArtifactStore:
    """Persist binary payloads and hand back resolvable references.

    Args:
        images_dir: Storage root for the ``image`` category.
        audio_dir: Storage root for the ``audio`` category.
        base_url: Prefix for returned references.  With the default empty
            string references are root-relative (``/images/<name>.png``) and
            the transport layer prepends the request's scheme and host.
    """

    def __init__(self, images_dir: Path, audio_dir: Path, base_url: str = "") -> None:
        self.base_url = base_url.rstrip("/")
        self._roots: dict[str, Path] = {
            IMAGE.name: Path(images_dir),
            AUDIO.name: Path(audio_dir),
        }

    def root_for(self, category: str) -> Path:
        """Return the storage directory for *category*.

        Raises:
            StoreError: If the category is unknown.
        """
        if category not in self._roots:
            raise StoreError(category, f"unknown artifact category '{category}'")
        return self._roots[category]

    def store(self, category: str, payload: bytes) -> str:
        """Write *payload* under a fresh unique name and return its reference.

        Args:
            category: ``"image"`` or ``"audio"``.
            payload: Non-empty binary content.

        Returns:
            Reference of the form ``<base_url>/<route>/<uuid>.<ext>``.

        Raises:
            StoreError: For an unknown category, an empty payload, or any
                filesystem failure.  No partial file is left behind.
        """
        root = self.root_for(category)
        category_info = CATEGORIES[category]

        if not payload:
            raise StoreError(category, "payload is empty")

        filename = f"{uuid.uuid4().hex}{category_info.extension}"
        target = root / filename

        try:
            root.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=root, prefix=".", suffix=".part")
        except OSError as e:
            logger.error(f"Cannot prepare {category} directory {root}: {e}")
            raise StoreError(category, str(e)) from e

        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(payload)
            os.chmod(tmp_name, ARTIFACT_MODE)
            os.replace(tmp_name, target)
        except OSError as e:
            # Never leave a half-written temp file in the served directory.
            Path(tmp_name).unlink(missing_ok=True)
            logger.error(f"Failed to write {category} artifact {filename}: {e}")
            raise StoreError(category, str(e)) from e

        reference = f"{self.base_url}/{category_info.route}/{filename}"
        logger.info(f"Stored {category} artifact {filename} ({len(payload)} bytes)")
        return reference

    def resolve(self, reference: str) -> Path:
        """Map a reference returned by :meth:`store` back to its file path.

        Only the trailing ``<route>/<name>`` part of the reference is used, so
        both root-relative and absolute URLs are accepted.

        Raises:
            StoreError: If the route is not one of the known categories or the
                name is not a plain file name.
        """
        parts = reference.split("/")
        if len(parts) < 2:
            raise StoreError("unknown", f"reference '{reference}' does not point at a stored artifact")
        route, name = parts[-2], parts[-1]

        for category_info in CATEGORIES.values():
            if category_info.route == route:
                if not name or name in (".", "..") or "\\" in name:
                    raise StoreError(category_info.name, f"invalid artifact name '{name}'")
                return self._roots[category_info.name] / name
        raise StoreError("unknown", f"reference '{reference}' does not point at a stored artifact")
