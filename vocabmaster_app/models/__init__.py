"""Database models package for VocabMaster."""

from ..db_instance import db

from .user import User
from .collection import Collection
from .vocabulary import VocabularyEntry
from .progress import ProgressRecord, QuizResult

__all__ = [
    'db',
    'User',
    'Collection',
    'VocabularyEntry',
    'ProgressRecord',
    'QuizResult',
]
