"""
Tests for result persistence and the progress rollup.
"""

from datetime import datetime, timedelta, timezone

from vocabmaster_app import db
from vocabmaster_app.models import ProgressRecord, QuizResult, User
from vocabmaster_app.modules.progress.services import ProgressService, ResultService

from conftest import make_collection


def _result_payload(**overrides):
    payload = {'mode': 'quiz', 'totalQuestions': 10, 'correctAnswers': 7, 'score': 70.0}
    payload.update(overrides)
    return payload


class TestQuizResultEndpoint:

    def test_first_result_creates_progress(self, auth_client, user):
        collection = make_collection(user.id)
        response = auth_client.post('/api/quiz-results', json=_result_payload(collectionId=collection.id))
        assert response.status_code == 201
        body = response.get_json()
        assert body['score'] == 70.0
        assert body['collectionId'] == collection.id

        progress = ProgressRecord.query.filter_by(user_id=user.id, collection_id=collection.id).one()
        assert progress.total_quizzes == 1
        assert progress.correct_answers == 7

    def test_results_accumulate(self, auth_client, user):
        collection = make_collection(user.id)
        auth_client.post('/api/quiz-results', json=_result_payload(collectionId=collection.id))
        auth_client.post('/api/quiz-results', json=_result_payload(
            collectionId=collection.id, mode='spelling', totalQuestions=4, correctAnswers=3, score=75.0,
        ))

        progress = ProgressRecord.query.filter_by(collection_id=collection.id).one()
        assert progress.total_quizzes == 2
        assert progress.correct_answers == 10

    def test_result_without_collection_skips_progress(self, auth_client):
        response = auth_client.post('/api/quiz-results', json=_result_payload())
        assert response.status_code == 201
        assert response.get_json()['collectionId'] is None
        assert ProgressRecord.query.count() == 0

    def test_validation(self, auth_client):
        bad_payloads = [
            _result_payload(correctAnswers=11),
            _result_payload(mode='matching'),
            _result_payload(score=120),
            _result_payload(totalQuestions=0, correctAnswers=0),
            {'mode': 'quiz'},
        ]
        for payload in bad_payloads:
            response = auth_client.post('/api/quiz-results', json=payload)
            assert response.status_code == 400, payload
        assert QuizResult.query.count() == 0

    def test_foreign_collection(self, auth_client):
        stranger = User(email='stranger@example.com')
        db.session.add(stranger)
        db.session.commit()
        foreign = make_collection(stranger.id)

        response = auth_client.post('/api/quiz-results', json=_result_payload(collectionId=foreign.id))
        assert response.status_code == 404
        assert QuizResult.query.count() == 0


class TestRecentResults:

    def _add_results(self, user_id, count):
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        for i in range(count):
            db.session.add(QuizResult(
                user_id=user_id, mode='quiz', total_questions=10,
                correct_answers=i, score=i * 10.0, completed_at=base + timedelta(hours=i),
            ))
        db.session.commit()

    def test_newest_first_with_limit(self, auth_client, user):
        self._add_results(user.id, 4)
        body = auth_client.get('/api/quiz-results/recent?limit=2').get_json()
        assert [item['correctAnswers'] for item in body] == [3, 2]

    def test_default_limit(self, auth_client, user):
        self._add_results(user.id, 12)
        assert len(auth_client.get('/api/quiz-results/recent').get_json()) == 10

    def test_limit_is_capped(self, app, auth_client, user):
        app.config['RECENT_RESULTS_MAX_LIMIT'] = 3
        self._add_results(user.id, 5)
        assert len(auth_client.get('/api/quiz-results/recent?limit=500').get_json()) == 3


class TestRollupService:

    def test_rollup_creates_then_increments(self, app, user):
        collection = make_collection(user.id)
        first = ResultService.save_quiz_result(user.id, 'quiz', 10, 7, 70.0, collection_id=collection.id)
        assert first.score == 70.0

        record = ProgressService.get_progress(user.id, collection.id)
        assert (record.total_quizzes, record.correct_answers) == (1, 7)

        ResultService.save_quiz_result(user.id, 'flashcard', 5, 3, 60.0, collection_id=collection.id)
        record = ProgressService.get_progress(user.id, collection.id)
        assert (record.total_quizzes, record.correct_answers) == (2, 10)

    def test_rollup_ignores_uncategorised_results(self, app, user):
        result = ResultService.save_quiz_result(user.id, 'quiz', 2, 1, 50.0)
        assert ProgressService.rollup(result) is None
        assert ProgressRecord.query.count() == 0
