"""Vocabulary entries."""

from __future__ import annotations

from ..db_instance import db
from .base import generate_id, isoformat, utcnow

WORD_MAX_LENGTH = 255
MEANING_MAX_LENGTH = 1000
EXAMPLE_MAX_LENGTH = 1000


class VocabularyEntry(db.Model):
    """A single word with its meaning and an optional example sentence.

    ``collection_id`` is nullable: entries without a collection are
    "uncategorized". Deleting a collection detaches its entries instead of
    deleting them.
    """

    __tablename__ = 'vocabulary'

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    word = db.Column(db.String(WORD_MAX_LENGTH), nullable=False)
    meaning = db.Column(db.Text, nullable=False)
    example = db.Column(db.Text)
    user_id = db.Column(
        db.String(255), db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True
    )
    collection_id = db.Column(
        db.String(36), db.ForeignKey('collections.id', ondelete='SET NULL'), nullable=True, index=True
    )
    mastered = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    collection = db.relationship('Collection', lazy=True)

    def to_dict(self, include_collection: bool = False) -> dict[str, object]:
        data = {
            'id': self.id,
            'word': self.word,
            'meaning': self.meaning,
            'example': self.example,
            'userId': self.user_id,
            'collectionId': self.collection_id,
            'mastered': bool(self.mastered),
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }
        if include_collection:
            data['collection'] = self.collection.to_dict() if self.collection else None
        return data
