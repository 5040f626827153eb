# File: vocabmaster_app/modules/study/engine/session.py
"""
Study Session State
===================
Immutable value objects describing one run through a word set.

A session moves ``LOADING -> IN_PROGRESS -> COMPLETE``. Nothing in this
module mutates a session: transitions return a new ``StudySession``
(see :mod:`.transitions`). The whole state serialises to a plain dict so
it can be held by the client between requests.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple


def require_mapping(data: Any, label: str) -> Mapping:
    """Return ``data`` if it is a JSON object, else raise ``TypeError``."""
    if not isinstance(data, Mapping):
        raise TypeError(f"{label} must be an object, got {type(data).__name__}")
    return data


class SessionStatus(str, Enum):
    LOADING = 'loading'
    IN_PROGRESS = 'in_progress'
    COMPLETE = 'complete'


def calculate_score(correct: int, total: int) -> float:
    """Percentage of ``correct`` over ``total``; ``0.0`` for an empty set."""
    if total <= 0:
        return 0.0
    return (correct / total) * 100


@dataclass(frozen=True)
class StudySettings:
    """Tunables for session construction, usually read from app config."""

    quiz_min_words: int = 2
    quiz_distractor_count: int = 2
    quiz_dedupe_distractors: bool = False
    mask_char: str = '_'
    example_placeholder: str = '___'

    @classmethod
    def from_config(cls, config) -> 'StudySettings':
        return cls(
            quiz_min_words=int(config.get('QUIZ_MIN_WORDS', 2)),
            quiz_distractor_count=int(config.get('QUIZ_DISTRACTOR_COUNT', 2)),
            quiz_dedupe_distractors=bool(config.get('QUIZ_DEDUPE_DISTRACTORS', False)),
            mask_char=config.get('SPELLING_MASK_CHAR', '_'),
            example_placeholder=config.get('SPELLING_EXAMPLE_PLACEHOLDER', '___'),
        )


@dataclass(frozen=True)
class WordCard:
    """The slice of a vocabulary entry a session needs."""

    id: Optional[str]
    word: str
    meaning: str
    example: Optional[str] = None

    @classmethod
    def from_entry(cls, entry) -> 'WordCard':
        return cls(id=entry.id, word=entry.word, meaning=entry.meaning, example=entry.example)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WordCard':
        data = require_mapping(data, 'word')
        return cls(
            id=data.get('id'),
            word=str(data['word']),
            meaning=str(data['meaning']),
            example=data.get('example') or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'word': self.word, 'meaning': self.meaning, 'example': self.example}


@dataclass(frozen=True)
class StudyAction:
    """One learner action: ``select``, ``next``, ``previous``, ``toggle_learned``,
    ``complete``, ``hint``, ``check`` or ``restart``."""

    type: str
    index: Optional[int] = None
    guess: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StudyAction':
        return cls(type=data['type'], index=data.get('index'), guess=data.get('guess'))


@dataclass(frozen=True)
class SessionResult:
    mode: str
    total_questions: int
    correct_answers: int
    score: float
    collection_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'mode': self.mode,
            'totalQuestions': self.total_questions,
            'correctAnswers': self.correct_answers,
            'score': self.score,
            'collectionId': self.collection_id,
        }


@dataclass(frozen=True)
class StudySession:
    mode: str
    status: SessionStatus = SessionStatus.LOADING
    words: Tuple[WordCard, ...] = ()
    items: Tuple[Any, ...] = ()
    current_index: int = 0
    collection_id: Optional[str] = None

    @classmethod
    def loading(cls, mode: str, collection_id: Optional[str] = None) -> 'StudySession':
        return cls(mode=mode, status=SessionStatus.LOADING, collection_id=collection_id)

    # ── derived state ────────────────────────────────────────────────

    @property
    def total_items(self) -> int:
        return len(self.items)

    @property
    def current_item(self):
        if not self.items:
            return None
        return self.items[self.current_index]

    @property
    def is_last(self) -> bool:
        return self.current_index >= len(self.items) - 1

    @property
    def correct_count(self) -> int:
        """Correct answers so far (learned cards in flashcard mode)."""
        return sum(1 for item in self.items if item.counts_as_correct)

    def with_item(self, item) -> 'StudySession':
        """Copy of the session with the current item replaced."""
        items = list(self.items)
        items[self.current_index] = item
        return replace(self, items=tuple(items))

    def result(self) -> Optional[SessionResult]:
        if self.status is not SessionStatus.COMPLETE:
            return None
        return SessionResult(
            mode=self.mode,
            total_questions=self.total_items,
            correct_answers=self.correct_count,
            score=calculate_score(self.correct_count, self.total_items),
            collection_id=self.collection_id,
        )

    # ── serialisation ────────────────────────────────────────────────

    def to_dict(self) -> Dict[str, Any]:
        return {
            'mode': self.mode,
            'status': self.status.value,
            'currentIndex': self.current_index,
            'correctCount': self.correct_count,
            'totalItems': self.total_items,
            'collectionId': self.collection_id,
            'words': [word.to_dict() for word in self.words],
            'items': [item.to_dict() for item in self.items],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StudySession':
        """Rebuild a session sent back by the client.

        Raises ``KeyError``, ``TypeError`` or ``ValueError`` on malformed state.
        """
        from ..modes.factory import ModeFactory

        data = require_mapping(data, 'session')
        mode = ModeFactory.create(data['mode'])
        status = SessionStatus(data.get('status', SessionStatus.LOADING.value))
        words = tuple(WordCard.from_dict(word) for word in data.get('words') or [])
        items = tuple(mode.item_from_dict(item) for item in data.get('items') or [])
        current_index = int(data.get('currentIndex', 0))

        if status is not SessionStatus.LOADING and not items:
            raise ValueError('Session has no items')
        if items and not 0 <= current_index < len(items):
            raise ValueError('currentIndex out of range')

        return cls(
            mode=mode.get_mode_id(),
            status=status,
            words=words,
            items=items,
            current_index=current_index,
            collection_id=data.get('collectionId') or None,
        )
