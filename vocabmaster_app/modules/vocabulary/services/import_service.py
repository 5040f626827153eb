# File: vocabmaster_app/modules/vocabulary/services/import_service.py
"""Persist a parsed import batch in a single transaction."""

import logging
from typing import Iterable, Optional

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from ....core.error_handlers import StoreError, ValidationError
from ....db_instance import db
from ....models import VocabularyEntry
from ...collections.services import CollectionService

logger = logging.getLogger(__name__)


class ImportService:
    @staticmethod
    def check_row_limit(row_count: int, field: str = 'vocabulary') -> None:
        """Reject batches larger than ``IMPORT_MAX_ROWS``."""
        max_rows = current_app.config.get('IMPORT_MAX_ROWS', 1000)
        if row_count > max_rows:
            raise ValidationError(
                f'Too many rows: at most {max_rows} words can be imported at once',
                errors=[{'field': field, 'message': f'{row_count} rows submitted'}],
            )

    @staticmethod
    def import_entries(user_id: str, items: Iterable, collection_id: Optional[str] = None) -> int:
        """Create one entry per item and return how many were written.

        ``items`` are objects with ``word``, ``meaning`` and ``example``
        attributes. Entries are never merged with existing words. Either the
        whole batch is committed or nothing is.
        """
        items = list(items)
        ImportService.check_row_limit(len(items))

        if collection_id:
            CollectionService.get_owned_collection(user_id, collection_id)

        entries = [
            VocabularyEntry(
                word=item.word,
                meaning=item.meaning,
                example=item.example or None,
                user_id=user_id,
                collection_id=collection_id or None,
                mastered=False,
            )
            for item in items
        ]

        try:
            db.session.add_all(entries)
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            logger.error("Import of %d words failed for user %s: %s", len(entries), user_id, exc)
            raise StoreError('Failed to import vocabulary') from exc

        logger.info(
            "Imported %d words for user %s into collection %s",
            len(entries), user_id, collection_id or '-',
        )
        return len(entries)
