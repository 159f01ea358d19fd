"""Core functionality of the Podcraft gateway.

Architecture Overview
---------------------
The core module follows a layered architecture:

1. **Configuration Layer** (config.py):
   - Environment-based configuration using Pydantic Settings
   - All settings prefixed with PODCRAFT_ in .env files
   - Built once at startup and passed explicitly

2. **Adapter Layer** (adapters/):
   - Uniform ``invoke`` interface over the remote providers
   - Gemini (text), FLUX.1-dev on Hugging Face (image), gTTS (audio)
   - Registry pattern for adapter discovery

3. **Pipeline Layer** (orchestrator.py, prompts.py):
   - Sequential script / title / poster / narration stages
   - Abort-and-report failure policy

4. **Support Utilities**:
   - artifact_store.py: Atomic flat-file storage of generated media
   - sanitizer.py: Markup removal for generated text
   - errors.py: Error taxonomy shared by every layer
"""

from podcraft.core.artifact_store import ArtifactStore
from podcraft.core.config import PodcraftConfig
from podcraft.core.errors import (
    GenerationError,
    OrchestrationError,
    PodcraftError,
    StoreError,
    ValidationError,
)
from podcraft.core.sanitizer import sanitize

__all__ = [
    "ArtifactStore",
    "GenerationError",
    "OrchestrationError",
    "PodcraftConfig",
    "PodcraftError",
    "StoreError",
    "ValidationError",
    "sanitize",
]
