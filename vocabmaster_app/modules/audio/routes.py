from flask import Response, request
from flask_login import login_required

from ...core.error_handlers import ValidationError
from ...core.validation import validate_payload
from . import audio_bp
from .schemas import TTSRequest
from .services import AudioService


@audio_bp.route('/tts', methods=['POST'])
@login_required
def text_to_speech():
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get('text'), str) or not data['text'].strip():
        raise ValidationError('Text is required')

    payload = validate_payload(TTSRequest, data, 'Invalid text')
    audio = AudioService.synthesize(payload.text)
    return Response(audio, mimetype='audio/mpeg', headers={'Content-Length': str(len(audio))})
