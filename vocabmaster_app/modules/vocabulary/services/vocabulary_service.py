# File: vocabmaster_app/modules/vocabulary/services/vocabulary_service.py
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import joinedload

from ....core.error_handlers import NotFoundError
from ....db_instance import db
from ....models import VocabularyEntry
from ...collections.services import CollectionService

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ('word', 'meaning', 'example', 'collection_id', 'mastered')


class VocabularyService:
    @staticmethod
    def list_for_user(user_id: str) -> List[VocabularyEntry]:
        """All of the user's entries, newest first, with their collection loaded."""
        return (
            VocabularyEntry.query.options(joinedload(VocabularyEntry.collection))
            .filter_by(user_id=user_id)
            .order_by(VocabularyEntry.created_at.desc())
            .all()
        )

    @staticmethod
    def get_owned_entry(user_id: str, entry_id: str) -> VocabularyEntry:
        entry = db.session.get(VocabularyEntry, entry_id)
        if entry is None or entry.user_id != user_id:
            raise NotFoundError('Vocabulary not found', resource='vocabulary')
        return entry

    @staticmethod
    def create(
        user_id: str,
        word: str,
        meaning: str,
        example: Optional[str] = None,
        collection_id: Optional[str] = None,
        mastered: bool = False,
    ) -> VocabularyEntry:
        if collection_id:
            CollectionService.get_owned_collection(user_id, collection_id)
        entry = VocabularyEntry(
            word=word,
            meaning=meaning,
            example=example,
            user_id=user_id,
            collection_id=collection_id,
            mastered=mastered,
        )
        db.session.add(entry)
        db.session.commit()
        return entry

    @staticmethod
    def update(user_id: str, entry_id: str, changes: Dict[str, Any]) -> VocabularyEntry:
        entry = VocabularyService.get_owned_entry(user_id, entry_id)
        if changes.get('collection_id'):
            CollectionService.get_owned_collection(user_id, changes['collection_id'])
        for field in EDITABLE_FIELDS:
            if field in changes:
                setattr(entry, field, changes[field])
        db.session.commit()
        return entry

    @staticmethod
    def toggle_mastered(user_id: str, entry_id: str) -> VocabularyEntry:
        entry = VocabularyService.get_owned_entry(user_id, entry_id)
        entry.mastered = not entry.mastered
        db.session.commit()
        return entry

    @staticmethod
    def delete(user_id: str, entry_id: str) -> None:
        entry = VocabularyService.get_owned_entry(user_id, entry_id)
        db.session.delete(entry)
        db.session.commit()
        logger.info("Deleted vocabulary %s for user %s", entry_id, user_id)

    @staticmethod
    def list_study_words(user_id: str, collection_id: Optional[str] = None) -> List[VocabularyEntry]:
        """Word set for a study session: one collection, or everything the user owns."""
        if collection_id:
            return CollectionService.list_words(user_id, collection_id)
        return (
            VocabularyEntry.query.filter_by(user_id=user_id)
            .order_by(VocabularyEntry.created_at.desc())
            .all()
        )
