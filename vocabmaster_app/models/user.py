"""User model."""

from __future__ import annotations

from flask_login import UserMixin

from ..db_instance import db
from .base import generate_id, isoformat, utcnow


class User(UserMixin, db.Model):
    """Application user, created on first successful sign-in."""

    __tablename__ = 'users'

    id = db.Column(db.String(255), primary_key=True, default=generate_id)
    email = db.Column(db.String(255), unique=True)
    first_name = db.Column(db.String(255))
    last_name = db.Column(db.String(255))
    profile_image_url = db.Column(db.String(1024))
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    collections = db.relationship('Collection', backref='owner', lazy=True, cascade='all, delete-orphan')
    vocabulary = db.relationship('VocabularyEntry', backref='owner', lazy=True, cascade='all, delete-orphan')

    def to_dict(self) -> dict[str, object]:
        return {
            'id': self.id,
            'email': self.email,
            'firstName': self.first_name,
            'lastName': self.last_name,
            'profileImageUrl': self.profile_image_url,
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }
