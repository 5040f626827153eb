# File: vocabmaster_app/modules/study/modes/flashcard_mode.py
"""
Flashcard Mode
==============
Self-assessed cards with free navigation. Each card carries a ``learned``
toggle; only the final toggle states count toward the score. Completion is
an explicit action, never triggered by reaching the last card.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Sequence

from ..engine.session import StudyAction, StudySession, StudySettings, WordCard, require_mapping
from ..engine.transitions import finalize
from .base_mode import BaseStudyMode


@dataclass(frozen=True)
class FlashCard:
    word: WordCard
    learned: bool = False

    @property
    def counts_as_correct(self) -> bool:
        return self.learned

    def to_dict(self) -> Dict[str, Any]:
        return {'word': self.word.to_dict(), 'learned': self.learned}


class FlashcardMode(BaseStudyMode):
    actions = frozenset({'toggle_learned', 'previous', 'next', 'complete'})

    def get_mode_id(self) -> str:
        return 'flashcard'

    def build_items(self, words: Sequence[WordCard], rng: random.Random, settings: StudySettings) -> List[FlashCard]:
        return [FlashCard(word=word) for word in words]

    def apply(self, session: StudySession, action: StudyAction, settings: StudySettings) -> StudySession:
        if action.type == 'toggle_learned':
            card = session.current_item
            return session.with_item(replace(card, learned=not card.learned))

        if action.type == 'previous':
            if session.current_index == 0:
                return session
            return replace(session, current_index=session.current_index - 1)

        if action.type == 'next':
            if session.is_last:
                return session
            return replace(session, current_index=session.current_index + 1)

        return finalize(session)

    def item_from_dict(self, data: Dict[str, Any]) -> FlashCard:
        data = require_mapping(data, 'item')
        return FlashCard(word=WordCard.from_dict(data['word']), learned=bool(data.get('learned', False)))
