# File: vocabmaster_app/modules/study/services/study_service.py
"""
Study session orchestration: loads the word set, runs the pure engine and
persists the result once a session completes.
"""

import logging
import random
from typing import Any, Dict, Optional, Tuple

from flask import current_app

from ....core.error_handlers import ValidationError
from ....models import QuizResult
from ...progress.services import ResultService
from ...vocabulary.services.vocabulary_service import VocabularyService
from ..engine.session import SessionStatus, StudyAction, StudySession, StudySettings, WordCard
from ..engine.transitions import apply_action, start_session

logger = logging.getLogger(__name__)


class StudySessionService:
    @staticmethod
    def _settings() -> StudySettings:
        return StudySettings.from_config(current_app.config)

    @staticmethod
    def start(
        user_id: str,
        mode: str,
        collection_id: Optional[str] = None,
        rng: Optional[random.Random] = None,
    ) -> StudySession:
        """Build a session from one collection, or from all of the user's words."""
        entries = VocabularyService.list_study_words(user_id, collection_id)
        words = [WordCard.from_entry(entry) for entry in entries]
        session = start_session(mode, words, rng=rng, settings=StudySessionService._settings(), collection_id=collection_id)
        logger.info("Started %s session for user %s with %d words", mode, user_id, session.total_items)
        return session

    @staticmethod
    def apply(
        user_id: str,
        session_data: Dict[str, Any],
        action_data: Dict[str, Any],
        rng: Optional[random.Random] = None,
    ) -> Tuple[StudySession, Optional[QuizResult]]:
        """Apply one action; save a QuizResult when it completes the session."""
        try:
            session = StudySession.from_dict(session_data)
        except (KeyError, TypeError, ValueError) as exc:
            raise ValidationError(
                'Invalid session state',
                errors=[{'field': 'session', 'message': str(exc)}],
            ) from exc

        action = StudyAction.from_dict(action_data)
        updated = apply_action(session, action, rng=rng, settings=StudySessionService._settings())

        saved = None
        if updated.status is SessionStatus.COMPLETE and session.status is not SessionStatus.COMPLETE:
            outcome = updated.result()
            saved = ResultService.save_quiz_result(
                user_id,
                outcome.mode,
                outcome.total_questions,
                outcome.correct_answers,
                outcome.score,
                collection_id=outcome.collection_id,
            )
            logger.info("Completed %s session for user %s", outcome.mode, user_id)
        return updated, saved
