from flask import jsonify, request
from flask_login import current_user, login_required

from ...core.validation import validate_payload
from . import study_bp
from .schemas import SessionActionRequest, StartSessionRequest
from .services.study_service import StudySessionService


@study_bp.route('/study/sessions', methods=['POST'])
@login_required
def start_session():
    payload = validate_payload(StartSessionRequest, request.get_json(silent=True), 'Invalid session request')
    session = StudySessionService.start(current_user.id, payload.mode, payload.collection_id)
    return jsonify(session.to_dict()), 201


@study_bp.route('/study/sessions/actions', methods=['POST'])
@login_required
def session_action():
    """Apply one action to a client-held session and return the new state."""
    payload = validate_payload(SessionActionRequest, request.get_json(silent=True), 'Invalid session action')
    session, result = StudySessionService.apply(
        current_user.id,
        payload.session,
        payload.action.model_dump(),
    )
    body = session.to_dict()
    body['result'] = result.to_dict() if result is not None else None
    return jsonify(body)
