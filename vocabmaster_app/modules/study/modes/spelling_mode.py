# File: vocabmaster_app/modules/study/modes/spelling_mode.py
"""
Spelling Mode
=============
Show the meaning (and the example with the word masked); the learner types
the word. Checking is an exact, case-insensitive match of the trimmed guess.
"""

from __future__ import annotations

import math
import random
import re
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Sequence

from ....core.error_handlers import InvalidActionError
from ..engine.session import StudyAction, StudySession, StudySettings, WordCard, require_mapping
from ..engine.transitions import advance
from .base_mode import BaseStudyMode


def build_hint(word: str, mask_char: str = '_') -> str:
    """Reveal the first ``ceil(len/3)`` characters; only the first for words of length <= 2."""
    length = len(word)
    if length == 0:
        return ''
    shown = 1 if length <= 2 else math.ceil(length / 3)
    return word[:shown] + mask_char * (length - shown)


def mask_example(example: Optional[str], word: str, placeholder: str = '___') -> Optional[str]:
    """Replace every occurrence of ``word`` in ``example``, ignoring case."""
    if not example:
        return None
    return re.sub(re.escape(word), placeholder, example, flags=re.IGNORECASE)


def is_correct_spelling(guess: str, word: str) -> bool:
    return guess.strip().lower() == word.lower()


@dataclass(frozen=True)
class SpellingPrompt:
    word: WordCard
    hint: str
    masked_example: Optional[str] = None
    hint_shown: bool = False
    guess: Optional[str] = None
    is_correct: Optional[bool] = None

    @property
    def is_checked(self) -> bool:
        return self.is_correct is not None

    @property
    def counts_as_correct(self) -> bool:
        return bool(self.is_correct)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'word': self.word.to_dict(),
            'hint': self.hint,
            'maskedExample': self.masked_example,
            'hintShown': self.hint_shown,
            'guess': self.guess,
            'isChecked': self.is_checked,
            'isCorrect': self.is_correct,
        }


class SpellingMode(BaseStudyMode):
    actions = frozenset({'hint', 'check', 'next'})

    def get_mode_id(self) -> str:
        return 'spelling'

    def build_items(self, words: Sequence[WordCard], rng: random.Random, settings: StudySettings) -> List[SpellingPrompt]:
        return [
            SpellingPrompt(
                word=word,
                hint=build_hint(word.word, settings.mask_char),
                masked_example=mask_example(word.example, word.word, settings.example_placeholder),
            )
            for word in words
        ]

    def apply(self, session: StudySession, action: StudyAction, settings: StudySettings) -> StudySession:
        prompt = session.current_item

        if action.type == 'hint':
            if prompt.is_checked or prompt.hint_shown:
                return session
            return session.with_item(replace(prompt, hint_shown=True))

        if action.type == 'check':
            guess = action.guess if isinstance(action.guess, str) else ''
            # Checked prompts are locked; blank guesses are ignored.
            if prompt.is_checked or not guess.strip():
                return session
            return session.with_item(replace(
                prompt,
                guess=guess.strip(),
                is_correct=is_correct_spelling(guess, prompt.word.word),
            ))

        if not prompt.is_checked:
            raise InvalidActionError('Check the answer before moving on', action='next')
        return advance(session)

    def item_from_dict(self, data: Dict[str, Any]) -> SpellingPrompt:
        data = require_mapping(data, 'item')
        word = WordCard.from_dict(data['word'])
        guess = data.get('guess')
        if guess is not None:
            guess = str(guess)
        return SpellingPrompt(
            word=word,
            hint=str(data.get('hint', '')),
            masked_example=data.get('maskedExample'),
            hint_shown=bool(data.get('hintShown', False)),
            guess=guess,
            is_correct=None if guess is None else is_correct_spelling(guess, word.word),
        )
