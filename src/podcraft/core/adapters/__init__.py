"""Generation adapters for the remote providers the gateway consumes.

Importing this package registers the built-in adapters with
:data:`adapter_registry`.
"""

from podcraft.core.adapters.base import (
    AdapterBase,
    AdapterKind,
    AdapterRegistry,
    ImageGenerationParams,
    adapter_registry,
)
from podcraft.core.adapters.flux_image import FluxImageAdapter
from podcraft.core.adapters.gemini_text import GeminiTextAdapter
from podcraft.core.adapters.gtts_audio import GTTSAudioAdapter
from podcraft.core.config import PodcraftConfig

DEFAULT_ADAPTERS: dict[str, str] = {
    "text": GeminiTextAdapter.name,
    "image": FluxImageAdapter.name,
    "audio": GTTSAudioAdapter.name,
}


def build_default_adapters(config: PodcraftConfig) -> dict[str, AdapterBase]:
    """Instantiate the built-in adapter for every kind, keyed by kind."""
    return {
        kind: adapter_registry.instantiate(adapter_name, config)
        for kind, adapter_name in DEFAULT_ADAPTERS.items()
    }


__all__ = [
    "AdapterBase",
    "AdapterKind",
    "AdapterRegistry",
    "DEFAULT_ADAPTERS",
    "FluxImageAdapter",
    "GTTSAudioAdapter",
    "GeminiTextAdapter",
    "ImageGenerationParams",
    "adapter_registry",
    "build_default_adapters",
]
