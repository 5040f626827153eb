"""Result persistence and the progress rollup."""

from __future__ import annotations

import logging
from typing import List, Optional

from flask import current_app

from ...core.signals import quiz_result_saved
from ...db_instance import db
from ...models import ProgressRecord, QuizResult
from ...models.base import utcnow
from ..collections.services import CollectionService

logger = logging.getLogger(__name__)


class ResultService:
    @staticmethod
    def save_quiz_result(
        user_id: str,
        mode: str,
        total_questions: int,
        correct_answers: int,
        score: float,
        collection_id: Optional[str] = None,
    ) -> QuizResult:
        """Insert a finished session and announce it.

        The progress rollup is a second, separate write done by the
        ``quiz_result_saved`` receiver.
        """
        if collection_id:
            CollectionService.get_owned_collection(user_id, collection_id)

        result = QuizResult(
            user_id=user_id,
            collection_id=collection_id or None,
            mode=mode,
            total_questions=total_questions,
            correct_answers=correct_answers,
            score=float(score),
        )
        db.session.add(result)
        db.session.commit()
        logger.info(
            "Saved %s result for user %s: %d/%d (%.1f%%)",
            mode, user_id, correct_answers, total_questions, result.score,
        )

        quiz_result_saved.send(current_app._get_current_object(), result=result)
        return result

    @staticmethod
    def recent_results(user_id: str, limit: int) -> List[QuizResult]:
        """Most recent results first."""
        return (
            QuizResult.query.filter_by(user_id=user_id)
            .order_by(QuizResult.completed_at.desc())
            .limit(limit)
            .all()
        )


class ProgressService:
    @staticmethod
    def get_progress(user_id: str, collection_id: str) -> Optional[ProgressRecord]:
        return ProgressRecord.query.filter_by(user_id=user_id, collection_id=collection_id).first()

    @staticmethod
    def rollup(result: QuizResult) -> Optional[ProgressRecord]:
        """Fold one result into its (user, collection) counters.

        Results without a collection leave progress untouched. Read-then-write;
        not guarded against concurrent sessions of the same user.
        """
        if not result.collection_id:
            return None

        now = utcnow()
        record = ProgressService.get_progress(result.user_id, result.collection_id)
        if record is None:
            record = ProgressRecord(
                user_id=result.user_id,
                collection_id=result.collection_id,
                total_quizzes=1,
                correct_answers=result.correct_answers,
                last_studied=now,
            )
            db.session.add(record)
        else:
            record.total_quizzes += 1
            record.correct_answers += result.correct_answers
            record.last_studied = now

        db.session.commit()
        logger.info(
            "Progress for user %s collection %s: %d sessions, %d correct",
            result.user_id, result.collection_id, record.total_quizzes, record.correct_answers,
        )
        return record
