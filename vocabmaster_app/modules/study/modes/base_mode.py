# File: vocabmaster_app/modules/study/modes/base_mode.py
"""
Base Study Mode
===============
Abstract contract for the study modes (quiz, flashcard, spelling).

A *Mode* is responsible for three things:

1. **Building** the per-item state for a shuffled word set.
2. **Applying** the mode's own actions to a session.
3. **Restoring** its item state from the dict sent back by the client.

Modes are **stateless** – all context is passed via arguments and every
method returns new values instead of mutating the session.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Any, Dict, FrozenSet, List, Sequence

from ..engine.session import StudyAction, StudySession, StudySettings, WordCard


class BaseStudyMode(ABC):
    """
    Contract for study modes.

    Subclass checklist:
    * Implement ``get_mode_id``, ``build_items``, ``apply``, ``item_from_dict``.
    * List accepted action names in ``actions`` (``restart`` is handled by the engine).
    * Keep all logic **pure** – no DB access, no Flask context.
    """

    actions: FrozenSet[str] = frozenset()

    @abstractmethod
    def get_mode_id(self) -> str:
        """Return the mode tag stored on results: ``'quiz'``, ``'flashcard'`` or ``'spelling'``."""
        ...

    def min_words(self, settings: StudySettings) -> int:
        """Smallest word set a session can start with."""
        return 1

    @abstractmethod
    def build_items(
        self,
        words: Sequence[WordCard],
        rng: random.Random,
        settings: StudySettings,
    ) -> List[Any]:
        """Create one item per word, in the order given (already shuffled)."""
        ...

    @abstractmethod
    def apply(self, session: StudySession, action: StudyAction, settings: StudySettings) -> StudySession:
        """Apply a mode-specific action to a session in progress."""
        ...

    @abstractmethod
    def item_from_dict(self, data: Dict[str, Any]) -> Any:
        ...
