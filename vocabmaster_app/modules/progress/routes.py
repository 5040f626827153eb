from flask import current_app, jsonify, request
from flask_login import current_user, login_required

from ...core.validation import validate_payload
from . import progress_bp
from .schemas import QuizResultRequest
from .services import ResultService


@progress_bp.route('/quiz-results', methods=['POST'])
@login_required
def create_quiz_result():
    payload = validate_payload(QuizResultRequest, request.get_json(silent=True), 'Invalid quiz result data')
    result = ResultService.save_quiz_result(
        current_user.id,
        payload.mode,
        payload.total_questions,
        payload.correct_answers,
        payload.score,
        collection_id=payload.collection_id,
    )
    return jsonify(result.to_dict()), 201


@progress_bp.route('/quiz-results/recent', methods=['GET'])
@login_required
def recent_quiz_results():
    default_limit = current_app.config.get('RECENT_RESULTS_DEFAULT_LIMIT', 10)
    max_limit = current_app.config.get('RECENT_RESULTS_MAX_LIMIT', 50)
    limit = request.args.get('limit', default=default_limit, type=int)
    if limit is None or limit < 1:
        limit = default_limit
    limit = min(limit, max_limit)

    results = ResultService.recent_results(current_user.id, limit)
    return jsonify([result.to_dict() for result in results])
