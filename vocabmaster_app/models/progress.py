"""Progress counters and quiz results."""

from __future__ import annotations

from ..db_instance import db
from .base import generate_id, isoformat, utcnow


class ProgressRecord(db.Model):
    """Cumulative study counters for one (user, collection) pair."""

    __tablename__ = 'progress'

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    user_id = db.Column(
        db.String(255), db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True
    )
    collection_id = db.Column(
        db.String(36), db.ForeignKey('collections.id', ondelete='CASCADE'), nullable=False, index=True
    )
    total_quizzes = db.Column(db.Integer, default=0, nullable=False)
    correct_answers = db.Column(db.Integer, default=0, nullable=False)
    last_studied = db.Column(db.DateTime(timezone=True))
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    __table_args__ = (db.UniqueConstraint('user_id', 'collection_id', name='_user_collection_progress_uc'),)

    def to_dict(self) -> dict[str, object]:
        return {
            'id': self.id,
            'userId': self.user_id,
            'collectionId': self.collection_id,
            'totalQuizzes': self.total_quizzes,
            'correctAnswers': self.correct_answers,
            'lastStudied': isoformat(self.last_studied),
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }


class QuizResult(db.Model):
    """Write-once record of one finished study session.

    ``score`` is stored as computed at completion time and never recomputed.
    """

    __tablename__ = 'quiz_results'

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    user_id = db.Column(
        db.String(255), db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True
    )
    collection_id = db.Column(
        db.String(36), db.ForeignKey('collections.id', ondelete='SET NULL'), nullable=True, index=True
    )
    mode = db.Column(db.String(50), nullable=False)
    total_questions = db.Column(db.Integer, nullable=False)
    correct_answers = db.Column(db.Integer, nullable=False)
    score = db.Column(db.Float, nullable=False)
    completed_at = db.Column(db.DateTime(timezone=True), default=utcnow, index=True)

    __table_args__ = (
        db.CheckConstraint('correct_answers <= total_questions', name='ck_quiz_results_correct_le_total'),
    )

    def to_dict(self) -> dict[str, object]:
        return {
            'id': self.id,
            'userId': self.user_id,
            'collectionId': self.collection_id,
            'mode': self.mode,
            'totalQuestions': self.total_questions,
            'correctAnswers': self.correct_answers,
            'score': self.score,
            'completedAt': isoformat(self.completed_at),
        }
