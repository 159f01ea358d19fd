"""Base classes and registry for generation adapters.

Every remote generation capability the gateway consumes (text, image, speech)
is wrapped in an adapter that presents the same tiny interface to the rest of
the application: a ``kind`` tag and a blocking :meth:`AdapterBase.invoke`.

Adapter Pattern
---------------
The orchestrator and the HTTP routes never talk to a provider directly.  They
look an adapter up by kind and call ``invoke``; the adapter owns:
- Request construction and authentication
- The bounded timeout on the remote call
- Translation of every provider failure into
  :class:`~podcraft.core.errors.GenerationError`

Adapter Kinds
-------------
- **text**: prompt ``str`` in, generated ``str`` out
- **image**: :class:`ImageGenerationParams` in, PNG ``bytes`` out
- **audio**: text ``str`` in, MP3 ``bytes`` out

Usage Example
-------------
    >>> from podcraft.core.adapters import adapter_registry
    >>> from podcraft.core.config import PodcraftConfig
    >>>
    >>> print(adapter_registry.list_available())
    ['Gemini Text', 'FLUX Image', 'gTTS Audio']
    >>> text = adapter_registry.instantiate("Gemini Text", PodcraftConfig())
    >>> text.invoke("Say hello")
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Literal

from podcraft.core.config import PodcraftConfig
from podcraft.core.errors import GenerationError

logger = logging.getLogger(__name__)

AdapterKind = Literal["text", "image", "audio"]


@dataclass(frozen=True)
class ImageGenerationParams:
    """Input of an image adapter.

    Defaults match the provider documentation for FLUX.1-dev.
    """

    prompt: str
    height: int = 1024
    width: int = 1024
    guidance_scale: float = 3.5
    steps: int = 50
    max_sequence_length: int = 512


class AdapterBase(ABC):
    """Abstract base class for all generation adapters.

    Attributes
    ----------
    name : str
        Human-readable adapter name, also its registry key
    description : str
        Brief description of the provider behind the adapter
    kind : AdapterKind
        Which capability the adapter provides
    config : PodcraftConfig
        Configuration holding credentials, model ids and the timeout

    Notes
    -----
    - ``invoke`` blocks until the remote call completes or times out
    - Adapters keep no per-call state, so one instance serves concurrent
      requests
    """

    name: str = "Base Adapter"
    description: str = "Base class for generation adapters"
    kind: AdapterKind = "text"

    def __init__(self, config: PodcraftConfig) -> None:
        self.config = config
        logger.info(f"Initialized {self.name} adapter")

    @abstractmethod
    def invoke(self, payload: Any) -> Any:
        """Run one remote generation call.

        Raises
        ------
        GenerationError
            If the provider returns a non-success status, cannot be reached,
            times out, or returns no usable content
        """

    def _require_text(self, value: str, field: str) -> str:
        """Reject empty input before spending a remote call on it."""
        if not value or not value.strip():
            raise GenerationError(self.kind, f"{field} must not be empty")
        return value

    def get_adapter_info(self) -> dict[str, Any]:
        """Get information about this adapter."""
        return {
            "name": self.name,
            "description": self.description,
            "kind": self.kind,
        }


class AdapterRegistry:
    """Registry for the available generation adapters.

    Follows the same register / instantiate / list pattern as the rest of the
    codebase's registries.
    """

    def __init__(self) -> None:
        self._adapters: dict[str, type[AdapterBase]] = {}

    def register(self, adapter_class: type[AdapterBase]) -> None:
        """Register an adapter class under its ``name``."""
        adapter_name = adapter_class.name

        if adapter_name in self._adapters:
            logger.warning(f"Adapter '{adapter_name}' is already registered, overwriting")

        self._adapters[adapter_name] = adapter_class
        logger.debug(f"Registered adapter: {adapter_name}")

    def instantiate(self, adapter_name: str, config: PodcraftConfig, **kwargs) -> AdapterBase:
        """Create an instance of a registered adapter.

        Raises
        ------
        KeyError
            If adapter_name is not registered
        """
        if adapter_name not in self._adapters:
            available = ", ".join(self.list_available())
            raise KeyError(f"Adapter '{adapter_name}' not found. Available adapters: {available}")

        return self._adapters[adapter_name](config, **kwargs)

    def list_available(self) -> list[str]:
        """List all registered adapter names."""
        return list(self._adapters.keys())

    def get_adapter_info(self, adapter_name: str) -> dict[str, Any] | None:
        """Get metadata about a registered adapter, or None if unknown."""
        adapter_class = self._adapters.get(adapter_name)
        if adapter_class is None:
            return None
        return {
            "name": adapter_class.name,
            "description": adapter_class.description,
            "kind": adapter_class.kind,
        }


# Global adapter registry instance
adapter_registry = AdapterRegistry()
