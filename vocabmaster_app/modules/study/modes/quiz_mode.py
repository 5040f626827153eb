# File: vocabmaster_app/modules/study/modes/quiz_mode.py
"""
Quiz Mode
=========
Multiple-choice questions: pick the meaning of the shown word.

Distractors are other words' meanings. Meanings textually equal to the
correct one are excluded; duplicates among the distractors themselves are
kept unless ``quiz_dedupe_distractors`` is set, so two options can read the
same. Grading compares indexes, never text.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ....core.error_handlers import InvalidActionError
from ..engine.session import StudyAction, StudySession, StudySettings, WordCard, require_mapping
from ..engine.transitions import advance
from .base_mode import BaseStudyMode


@dataclass(frozen=True)
class QuizQuestion:
    word: WordCard
    options: Tuple[str, ...]
    correct_index: int
    selected_index: Optional[int] = None

    @property
    def is_answered(self) -> bool:
        return self.selected_index is not None

    @property
    def is_correct(self) -> bool:
        return self.is_answered and self.selected_index == self.correct_index

    @property
    def counts_as_correct(self) -> bool:
        return self.is_correct

    def to_dict(self) -> Dict[str, Any]:
        return {
            'word': self.word.to_dict(),
            'options': list(self.options),
            'correctIndex': self.correct_index,
            'selectedIndex': self.selected_index,
            'isAnswered': self.is_answered,
            'isCorrect': self.is_correct if self.is_answered else None,
        }


def build_options(
    word: WordCard,
    all_meanings: Sequence[str],
    rng: random.Random,
    distractor_count: int = 2,
    dedupe: bool = False,
) -> Tuple[List[str], int]:
    """Return shuffled options and the index of the correct meaning."""
    pool = [meaning for meaning in all_meanings if meaning != word.meaning]
    if dedupe:
        pool = list(dict.fromkeys(pool))
    rng.shuffle(pool)

    options = [word.meaning] + pool[:distractor_count]
    rng.shuffle(options)
    return options, options.index(word.meaning)


class QuizMode(BaseStudyMode):
    actions = frozenset({'select', 'next'})

    def get_mode_id(self) -> str:
        return 'quiz'

    def min_words(self, settings: StudySettings) -> int:
        return max(settings.quiz_min_words, 1)

    def build_items(self, words: Sequence[WordCard], rng: random.Random, settings: StudySettings) -> List[QuizQuestion]:
        all_meanings = [word.meaning for word in words]
        questions = []
        for word in words:
            options, correct_index = build_options(
                word,
                all_meanings,
                rng,
                distractor_count=settings.quiz_distractor_count,
                dedupe=settings.quiz_dedupe_distractors,
            )
            questions.append(QuizQuestion(word=word, options=tuple(options), correct_index=correct_index))
        return questions

    def apply(self, session: StudySession, action: StudyAction, settings: StudySettings) -> StudySession:
        question = session.current_item

        if action.type == 'select':
            # First selection locks the question.
            if question.is_answered:
                return session
            index = action.index
            if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(question.options):
                raise InvalidActionError('Option index out of range', action='select')
            return session.with_item(replace(question, selected_index=index))

        if not question.is_answered:
            raise InvalidActionError('Answer the question before moving on', action='next')
        return advance(session)

    def item_from_dict(self, data: Dict[str, Any]) -> QuizQuestion:
        data = require_mapping(data, 'item')
        options = tuple(str(option) for option in data['options'])
        correct_index = int(data['correctIndex'])
        selected = data.get('selectedIndex')
        if not 0 <= correct_index < len(options):
            raise ValueError('correctIndex out of range')
        if selected is not None:
            selected = int(selected)
            if not 0 <= selected < len(options):
                raise ValueError('selectedIndex out of range')
        return QuizQuestion(
            word=WordCard.from_dict(data['word']),
            options=options,
            correct_index=correct_index,
            selected_index=selected,
        )
