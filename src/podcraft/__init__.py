"""Podcraft - generative-media gateway for podcast scripts, posters and narration."""

__version__ = "0.1.0"

from podcraft.core.config import PodcraftConfig

__all__ = [
    "PodcraftConfig",
    "__version__",
]
