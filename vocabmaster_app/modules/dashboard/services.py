"""Summary statistics for the dashboard."""

from __future__ import annotations

from typing import Any, Dict

from sqlalchemy import func

from ...db_instance import db
from ...models import Collection, QuizResult, VocabularyEntry
from ..progress.services import ResultService


class DashboardService:
    @staticmethod
    def get_stats(user_id: str, recent_limit: int = 5) -> Dict[str, Any]:
        total_words = VocabularyEntry.query.filter_by(user_id=user_id).count()
        words_learned = VocabularyEntry.query.filter_by(user_id=user_id, mastered=True).count()
        total_collections = Collection.query.filter_by(user_id=user_id).count()
        average = (
            db.session.query(func.avg(QuizResult.score))
            .filter(QuizResult.user_id == user_id)
            .scalar()
        )
        recent = ResultService.recent_results(user_id, recent_limit)

        return {
            'totalWords': total_words,
            'totalCollections': total_collections,
            'wordsLearned': words_learned,
            'averageAccuracy': float(average) if average is not None else 0.0,
            # Streaks are not tracked.
            'studyStreak': 0,
            'recentActivity': [result.to_dict() for result in recent],
        }
