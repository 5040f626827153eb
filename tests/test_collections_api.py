from datetime import datetime, timedelta, timezone

from vocabmaster_app import db
from vocabmaster_app.models import Collection, ProgressRecord, QuizResult, User, VocabularyEntry

from conftest import make_collection, make_words


def test_create_collection_defaults_color(auth_client):
    response = auth_client.post('/api/collections', json={'name': 'Travel'})
    assert response.status_code == 201
    body = response.get_json()
    assert body['name'] == 'Travel'
    assert body['color'] == '#3B82F6'


def test_create_collection_validates(auth_client):
    response = auth_client.post('/api/collections', json={'name': '', 'color': 'blue'})
    assert response.status_code == 400
    body = response.get_json()
    assert body['code'] == 'VALIDATION_ERROR'
    fields = {error['field'] for error in body['details']['errors']}
    assert fields == {'name', 'color'}


def test_list_includes_counts_and_progress(auth_client, user):
    collection = make_collection(user.id, name='Business')
    entries = make_words(user.id, [('synergy', 'working together'), ('leverage', 'use')], collection.id)
    entries[0].mastered = True
    db.session.add(ProgressRecord(user_id=user.id, collection_id=collection.id, total_quizzes=2, correct_answers=5))
    db.session.commit()
    make_collection(user.id, name='Empty')

    response = auth_client.get('/api/collections')
    assert response.status_code == 200
    by_name = {item['name']: item for item in response.get_json()}
    assert by_name['Business']['wordCount'] == 2
    assert by_name['Business']['masteredCount'] == 1
    assert by_name['Business']['progress']['totalQuizzes'] == 2
    assert by_name['Empty']['wordCount'] == 0
    assert by_name['Empty']['progress'] is None


def test_collections_are_owner_only(auth_client):
    stranger = User(email='stranger@example.com')
    db.session.add(stranger)
    db.session.commit()
    foreign = make_collection(stranger.id, name='Private')

    assert auth_client.get(f'/api/collections/{foreign.id}').status_code == 404
    assert auth_client.patch(f'/api/collections/{foreign.id}', json={'name': 'Mine'}).status_code == 404
    assert auth_client.delete(f'/api/collections/{foreign.id}').status_code == 404
    assert auth_client.get('/api/collections').get_json() == []


def test_update_collection(auth_client, user):
    collection = make_collection(user.id, name='Old', description='keep me')
    response = auth_client.patch(f'/api/collections/{collection.id}', json={'name': 'New', 'color': '#10B981'})
    assert response.status_code == 200
    body = response.get_json()
    assert body['name'] == 'New'
    assert body['color'] == '#10B981'
    assert body['description'] == 'keep me'


def test_words_endpoint_newest_first(auth_client, user):
    collection = make_collection(user.id)
    older, newer = make_words(user.id, [('first', 'one'), ('second', 'two')], collection.id)
    now = datetime.now(timezone.utc)
    older.created_at = now - timedelta(minutes=5)
    newer.created_at = now
    db.session.commit()

    response = auth_client.get(f'/api/collections/{collection.id}/vocabulary/words')
    assert response.status_code == 200
    assert [item['word'] for item in response.get_json()] == ['second', 'first']


def test_collection_with_vocabulary(auth_client, user):
    collection = make_collection(user.id)
    make_words(user.id, [('a', 'b'), ('c', 'd')], collection.id)

    body = auth_client.get(f'/api/collections/{collection.id}/vocabulary').get_json()
    assert body['id'] == collection.id
    assert body['wordCount'] == 2
    assert len(body['vocabulary']) == 2


def test_delete_detaches_vocabulary_and_results(auth_client, user):
    collection = make_collection(user.id)
    collection_id = collection.id
    make_words(user.id, [('keep', 'me')], collection_id)
    db.session.add(ProgressRecord(user_id=user.id, collection_id=collection_id, total_quizzes=1, correct_answers=1))
    db.session.add(QuizResult(
        user_id=user.id, collection_id=collection_id, mode='quiz',
        total_questions=1, correct_answers=1, score=100.0,
    ))
    db.session.commit()

    response = auth_client.delete(f'/api/collections/{collection_id}')
    assert response.status_code == 204

    db.session.expire_all()
    assert Collection.query.filter_by(id=collection_id).count() == 0
    entry = VocabularyEntry.query.filter_by(word='keep').one()
    assert entry.collection_id is None
    assert QuizResult.query.one().collection_id is None
    assert ProgressRecord.query.count() == 0


def test_seed_creates_sample_data_once(auth_client, user):
    response = auth_client.post('/api/seed')
    assert response.status_code == 200
    assert Collection.query.filter_by(user_id=user.id).count() == 5
    assert VocabularyEntry.query.filter_by(user_id=user.id).count() == response.get_json()['imported']

    again = auth_client.post('/api/seed')
    assert again.status_code == 400
    assert Collection.query.filter_by(user_id=user.id).count() == 5
