"""Collection model: a named group of vocabulary owned by one user."""

from __future__ import annotations

from ..db_instance import db
from .base import generate_id, isoformat, utcnow

DEFAULT_COLOR = '#3B82F6'


class Collection(db.Model):
    __tablename__ = 'collections'

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    color = db.Column(db.String(7), default=DEFAULT_COLOR)
    user_id = db.Column(
        db.String(255), db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True
    )
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    def to_dict(self) -> dict[str, object]:
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'color': self.color,
            'userId': self.user_id,
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }
