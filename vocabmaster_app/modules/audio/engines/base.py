from abc import ABC, abstractmethod


class AudioEngine(ABC):
    """
    Abstract Base Class for Text-to-Speech engines.
    """

    @abstractmethod
    def synthesize(self, text: str, voice: str = 'en') -> bytes:
        """
        Convert text to speech.

        Args:
            text: The text to convert to speech.
            voice: Language or locale identifier (``'en'``, ``'en-US'``).

        Returns:
            bytes: MP3 audio.

        Raises:
            AudioSynthesisError: If the engine could not produce audio.
        """
        pass
