"""Speech synthesis adapter using gTTS.

Text is spoken through Google Translate's text-to-speech endpoint via the
``gTTS`` library and returned as MP3 bytes.  Voice selection is fixed by
configuration (``tts_language``, ``tts_tld``, ``tts_slow``).

gTTS splits long input into chunks and issues one request per chunk; the
configured ``request_timeout`` applies to each of them.
"""

import io
import logging

from gtts import gTTS, gTTSError

from podcraft.core.adapters.base import AdapterBase, adapter_registry
from podcraft.core.errors import GenerationError

logger = logging.getLogger(__name__)


class GTTSAudioAdapter(AdapterBase):
    """Audio adapter backed by gTTS."""

    name = "gTTS Audio"
    description = "Text-to-speech through Google Translate (gTTS)"
    kind = "audio"

    def invoke(self, payload: str) -> bytes:
        """Synthesize *payload* and return the MP3 bytes.

        Raises:
            GenerationError: On empty text, an unsupported language, or any
                failed request to the speech endpoint.
        """
        text = self._require_text(payload, "text")

        logger.info(f"Synthesizing {len(text)} chars of speech (lang={self.config.tts_language})")
        buffer = io.BytesIO()
        try:
            tts = gTTS(
                text,
                lang=self.config.tts_language,
                tld=self.config.tts_tld,
                slow=self.config.tts_slow,
                timeout=self.config.request_timeout,
            )
            tts.write_to_fp(buffer)
        except gTTSError as e:
            response = getattr(e, "rsp", None)
            status = getattr(response, "status_code", None)
            logger.error(f"Speech synthesis failed (status {status}): {e}")
            raise GenerationError(self.kind, str(e), status=status) from e
        except (ValueError, AssertionError) as e:
            # gTTS signals unsupported languages with ValueError and text that
            # tokenizes to nothing with AssertionError.
            logger.error(f"Speech synthesis rejected input: {e}")
            raise GenerationError(self.kind, str(e) or "no speakable text") from e

        audio = buffer.getvalue()
        if not audio:
            raise GenerationError(self.kind, "speech endpoint returned no audio")
        return audio


adapter_registry.register(GTTSAudioAdapter)
