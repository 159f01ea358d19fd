"""FLUX.1-dev image generation adapter.

Sends the prompt and sampling parameters to the Hugging Face inference
endpoint configured in ``image_model_url`` and returns the raw image bytes.

Parameter Mapping
-----------------
=======================  ==========================  =======
ImageGenerationParams    Inference API parameter     Default
=======================  ==========================  =======
``height``               ``height``                  1024
``width``                ``width``                   1024
``guidance_scale``       ``guidance_scale``          3.5
``steps``                ``num_inference_steps``     50
``max_sequence_length``  ``max_sequence_length``     512
=======================  ==========================  =======
"""

import logging

import httpx

from podcraft.core.adapters.base import AdapterBase, ImageGenerationParams, adapter_registry
from podcraft.core.config import PodcraftConfig
from podcraft.core.errors import GenerationError

logger = logging.getLogger(__name__)


class FluxImageAdapter(AdapterBase):
    """Image adapter backed by the Hugging Face inference API.

    Args:
        config: Gateway configuration (token, endpoint, timeout).
        transport: Optional httpx transport, used by tests to intercept
            requests.
    """

    name = "FLUX Image"
    description = "Text-to-image synthesis with FLUX.1-dev on Hugging Face inference"
    kind = "image"

    def __init__(self, config: PodcraftConfig, transport: httpx.BaseTransport | None = None) -> None:
        super().__init__(config)
        self._transport = transport

    def invoke(self, payload: ImageGenerationParams) -> bytes:
        """Generate an image for *payload*.

        Returns:
            The binary image payload as returned by the provider.

        Raises:
            GenerationError: On empty prompt, transport failure, non-2xx
                status or an empty body.
        """
        self._require_text(payload.prompt, "prompt")
        body = {
            "inputs": payload.prompt,
            "parameters": {
                "height": payload.height,
                "width": payload.width,
                "guidance_scale": payload.guidance_scale,
                "num_inference_steps": payload.steps,
                "max_sequence_length": payload.max_sequence_length,
            },
        }
        headers = {
            "Authorization": f"Bearer {self.config.huggingface_api_key.get_secret_value()}",
            "Accept": "image/png",
        }

        logger.info(
            f"Requesting {payload.width}x{payload.height} image "
            f"({payload.steps} steps, guidance {payload.guidance_scale})"
        )
        try:
            with httpx.Client(timeout=self.config.request_timeout, transport=self._transport) as client:
                response = client.post(self.config.image_model_url, json=body, headers=headers)
        except httpx.TimeoutException as e:
            logger.error(f"Image request timed out after {self.config.request_timeout}s")
            raise GenerationError(self.kind, f"request timed out: {e}") from e
        except httpx.HTTPError as e:
            logger.error(f"Image request failed: {e}")
            raise GenerationError(self.kind, f"request failed: {e}") from e

        if not response.is_success:
            logger.error(f"Image endpoint returned status {response.status_code}: {response.text[:500]}")
            raise GenerationError(self.kind, _error_message(response), status=response.status_code)

        if not response.content:
            raise GenerationError(self.kind, "provider returned an empty image", status=response.status_code)

        return response.content


def _error_message(response: httpx.Response) -> str:
    # The inference API answers errors with {"error": "..."}.
    try:
        message = response.json().get("error")
    except (ValueError, AttributeError):
        message = None
    if isinstance(message, list):
        message = "; ".join(str(m) for m in message)
    return str(message) if message else response.reason_phrase or f"HTTP {response.status_code}"


adapter_registry.register(FluxImageAdapter)
