import os
import tempfile

import pytest

from vocabmaster_app import create_app, db
from vocabmaster_app.config import Config
from vocabmaster_app.models import Collection, User, VocabularyEntry


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
    WTF_CSRF_ENABLED = False
    LOG_DIR = os.path.join(tempfile.gettempdir(), 'vocabmaster-test-logs')
    LOG_LEVEL = 'WARNING'


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def login_client(client, user_id):
    with client.session_transaction() as session:
        session['_user_id'] = str(user_id)
        session['_fresh'] = True


@pytest.fixture
def user(app):
    user = User(email='learner@example.com', first_name='Ada', last_name='Learner')
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def auth_client(client, user):
    login_client(client, user.id)
    return client


def make_collection(user_id, name='Core Words', **kwargs):
    collection = Collection(name=name, user_id=user_id, **kwargs)
    db.session.add(collection)
    db.session.commit()
    return collection


def make_words(user_id, pairs, collection_id=None):
    entries = [
        VocabularyEntry(word=word, meaning=meaning, user_id=user_id, collection_id=collection_id)
        for word, meaning in pairs
    ]
    db.session.add_all(entries)
    db.session.commit()
    return entries
