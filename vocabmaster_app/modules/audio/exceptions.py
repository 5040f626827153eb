from ...core.error_handlers import VocabMasterError


class AudioSynthesisError(VocabMasterError):
    """The text-to-speech engine could not produce audio."""

    def __init__(self, message: str = 'Failed to generate audio'):
        super().__init__(message=message, code='TTS_ERROR', status_code=500)
