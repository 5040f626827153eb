from datetime import datetime, timedelta, timezone

from vocabmaster_app import db
from vocabmaster_app.models import QuizResult, User
from vocabmaster_app.modules.dashboard.services import DashboardService

from conftest import make_collection, make_words


def test_empty_dashboard(auth_client):
    body = auth_client.get('/api/dashboard/stats').get_json()
    assert body == {
        'totalWords': 0,
        'totalCollections': 0,
        'wordsLearned': 0,
        'averageAccuracy': 0,
        'studyStreak': 0,
        'recentActivity': [],
    }
    assert isinstance(body['averageAccuracy'], float)


def test_stats_are_scoped_to_the_caller(auth_client, user):
    collection = make_collection(user.id)
    entries = make_words(user.id, [('a', '1'), ('b', '2'), ('c', '3')], collection.id)
    entries[0].mastered = True
    db.session.add(QuizResult(user_id=user.id, mode='quiz', total_questions=2, correct_answers=1, score=50.0))
    db.session.add(QuizResult(user_id=user.id, mode='spelling', total_questions=4, correct_answers=4, score=100.0))

    stranger = User(email='stranger@example.com')
    db.session.add(stranger)
    db.session.commit()
    make_words(stranger.id, [('x', 'y')])
    db.session.add(QuizResult(user_id=stranger.id, mode='quiz', total_questions=1, correct_answers=0, score=0.0))
    db.session.commit()

    body = auth_client.get('/api/dashboard/stats').get_json()
    assert body['totalWords'] == 3
    assert body['wordsLearned'] == 1
    assert body['totalCollections'] == 1
    assert body['averageAccuracy'] == 75.0
    assert body['studyStreak'] == 0
    assert len(body['recentActivity']) == 2


def test_recent_activity_limit_and_order(app, user):
    base = datetime(2024, 5, 1, tzinfo=timezone.utc)
    for i in range(7):
        db.session.add(QuizResult(
            user_id=user.id, mode='quiz', total_questions=7, correct_answers=i,
            score=i * 100 / 7, completed_at=base + timedelta(days=i),
        ))
    db.session.commit()

    stats = DashboardService.get_stats(user.id, recent_limit=5)
    assert [item['correctAnswers'] for item in stats['recentActivity']] == [6, 5, 4, 3, 2]
