import io
import logging

from gtts import gTTS, gTTSError

from ..exceptions import AudioSynthesisError
from .base import AudioEngine

logger = logging.getLogger(__name__)


class GTTSEngine(AudioEngine):
    """
    Audio Engine using Google Text-to-Speech (gTTS library).
    Audio is rendered into memory; nothing is written to disk.
    """

    def synthesize(self, text: str, voice: str = 'en') -> bytes:
        # 'en-US' -> 'en', 'vi-VN' -> 'vi'
        lang = (voice or 'en').split('-')[0]
        buffer = io.BytesIO()
        try:
            gTTS(text=text, lang=lang).write_to_fp(buffer)
        except (gTTSError, ValueError, AssertionError) as exc:
            logger.error("gTTS failed for %d characters (lang=%s): %s", len(text), lang, exc)
            raise AudioSynthesisError() from exc
        return buffer.getvalue()
