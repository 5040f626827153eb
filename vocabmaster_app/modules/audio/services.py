from flask import current_app

from .engines.base import AudioEngine
from .engines.gtts_engine import GTTSEngine


class AudioService:
    """Thin wrapper around the configured engine. No retry, no caching."""

    engine: AudioEngine = GTTSEngine()

    @classmethod
    def synthesize(cls, text: str) -> bytes:
        voice = current_app.config.get('TTS_LANG', 'en')
        audio = cls.engine.synthesize(text, voice)
        current_app.logger.info(f"Generated {len(audio)} bytes of audio for {len(text)} characters")
        return audio
