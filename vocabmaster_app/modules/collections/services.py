"""Collection CRUD scoped to the owning user."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import case, func

from ...core.error_handlers import NotFoundError
from ...db_instance import db
from ...models import Collection, ProgressRecord, QuizResult, VocabularyEntry
from ...models.collection import DEFAULT_COLOR

logger = logging.getLogger(__name__)


class CollectionService:
    @staticmethod
    def get_owned_collection(user_id: str, collection_id: str) -> Collection:
        """Return the collection if it exists and belongs to ``user_id``."""
        collection = db.session.get(Collection, collection_id)
        if collection is None or collection.user_id != user_id:
            raise NotFoundError('Collection not found', resource='collection')
        return collection

    @staticmethod
    def list_with_stats(user_id: str) -> List[Dict[str, Any]]:
        """Collections newest-updated first, each with word/mastered counts and progress."""
        collections = (
            Collection.query.filter_by(user_id=user_id)
            .order_by(Collection.updated_at.desc())
            .all()
        )
        if not collections:
            return []

        ids = [c.id for c in collections]
        rows = (
            db.session.query(
                VocabularyEntry.collection_id,
                func.count(VocabularyEntry.id).label('word_count'),
                func.coalesce(func.sum(case((VocabularyEntry.mastered.is_(True), 1), else_=0)), 0).label('mastered_count'),
            )
            .filter(VocabularyEntry.collection_id.in_(ids))
            .group_by(VocabularyEntry.collection_id)
            .all()
        )
        counts = {row.collection_id: (row.word_count, row.mastered_count) for row in rows}
        progress = {
            p.collection_id: p
            for p in ProgressRecord.query.filter(
                ProgressRecord.user_id == user_id, ProgressRecord.collection_id.in_(ids)
            )
        }

        result = []
        for collection in collections:
            word_count, mastered_count = counts.get(collection.id, (0, 0))
            data = collection.to_dict()
            data['wordCount'] = int(word_count)
            data['masteredCount'] = int(mastered_count)
            data['progress'] = progress[collection.id].to_dict() if collection.id in progress else None
            result.append(data)
        return result

    @staticmethod
    def get_with_vocabulary(user_id: str, collection_id: str) -> Dict[str, Any]:
        collection = CollectionService.get_owned_collection(user_id, collection_id)
        entries = CollectionService.list_words(user_id, collection_id)
        data = collection.to_dict()
        data['vocabulary'] = [entry.to_dict() for entry in entries]
        data['wordCount'] = len(entries)
        data['masteredCount'] = sum(1 for entry in entries if entry.mastered)
        return data

    @staticmethod
    def list_words(user_id: str, collection_id: str) -> List[VocabularyEntry]:
        """Entries of one collection, newest first."""
        CollectionService.get_owned_collection(user_id, collection_id)
        return (
            VocabularyEntry.query.filter_by(collection_id=collection_id)
            .order_by(VocabularyEntry.created_at.desc())
            .all()
        )

    @staticmethod
    def create(user_id: str, name: str, description: Optional[str] = None, color: Optional[str] = None) -> Collection:
        collection = Collection(
            name=name,
            description=description,
            color=color or DEFAULT_COLOR,
            user_id=user_id,
        )
        db.session.add(collection)
        db.session.commit()
        logger.info("Created collection %s for user %s", collection.id, user_id)
        return collection

    @staticmethod
    def update(user_id: str, collection_id: str, changes: Dict[str, Any]) -> Collection:
        collection = CollectionService.get_owned_collection(user_id, collection_id)
        for field in ('name', 'description', 'color'):
            if field in changes:
                setattr(collection, field, changes[field])
        db.session.commit()
        return collection

    @staticmethod
    def delete(user_id: str, collection_id: str) -> None:
        """Delete a collection, detaching (not deleting) its vocabulary and results."""
        collection = CollectionService.get_owned_collection(user_id, collection_id)

        VocabularyEntry.query.filter_by(collection_id=collection_id).update(
            {VocabularyEntry.collection_id: None}, synchronize_session=False
        )
        QuizResult.query.filter_by(collection_id=collection_id).update(
            {QuizResult.collection_id: None}, synchronize_session=False
        )
        ProgressRecord.query.filter_by(collection_id=collection_id).delete(synchronize_session=False)
        db.session.delete(collection)
        db.session.commit()
        logger.info("Deleted collection %s for user %s", collection_id, user_id)
