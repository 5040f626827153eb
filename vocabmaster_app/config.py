# File: vocabmaster_app/config.py

import os

from dotenv import load_dotenv

load_dotenv()

# Project root (the directory that holds the vocabmaster_app package)
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

DATABASE_PATH = os.path.join(BASE_DIR, "database", "vocabmaster.db")


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """VocabMaster application configuration."""

    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        # Fallback for development, though env is preferred
        SECRET_KEY = 'dev-secret-key-replace-in-production'

    SQLALCHEMY_DATABASE_URI = os.environ.get('SQLALCHEMY_DATABASE_URI') or f'sqlite:///{DATABASE_PATH}'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'connect_args': {'timeout': 30},
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR') or os.path.join(BASE_DIR, 'logs')
    LOG_JSON = _env_bool('LOG_JSON', False)

    # Dashboard / results
    DASHBOARD_RECENT_LIMIT = 5
    RECENT_RESULTS_DEFAULT_LIMIT = 10
    RECENT_RESULTS_MAX_LIMIT = 50

    # Study modes
    QUIZ_MIN_WORDS = 2
    QUIZ_DISTRACTOR_COUNT = 2
    QUIZ_DEDUPE_DISTRACTORS = _env_bool('QUIZ_DEDUPE_DISTRACTORS', False)
    SPELLING_MASK_CHAR = '_'
    SPELLING_EXAMPLE_PLACEHOLDER = '___'

    # Bulk import
    IMPORT_MAX_ROWS = int(os.environ.get('IMPORT_MAX_ROWS', 1000))
    MAX_CONTENT_LENGTH = int(os.environ.get('IMPORT_MAX_UPLOAD_BYTES', 5 * 1024 * 1024))

    # Pronunciation
    TTS_LANG = os.environ.get('TTS_LANG', 'en')

    # Stand-in for the external sign-in provider
    ALLOW_DEV_LOGIN = _env_bool('ALLOW_DEV_LOGIN', True)

    @classmethod
    def init_app(cls, app):
        """Create the folders the configured database and logs live in."""
        if app.config['SQLALCHEMY_DATABASE_URI'] == f'sqlite:///{DATABASE_PATH}':
            os.makedirs(os.path.dirname(DATABASE_PATH), exist_ok=True)
        os.makedirs(app.config['LOG_DIR'], exist_ok=True)
