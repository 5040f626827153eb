# File: vocabmaster_app/modules/study/modes/factory.py
"""
Mode lookup by the tag stored on sessions and results
(``quiz``, ``flashcard``, ``spelling``).
"""

from __future__ import annotations

from typing import Dict, Optional, Type

from .base_mode import BaseStudyMode


class ModeFactory:
    _modes: Optional[Dict[str, Type[BaseStudyMode]]] = None

    @classmethod
    def _study_modes(cls) -> Dict[str, Type[BaseStudyMode]]:
        # Imported lazily: the mode modules import the engine, which imports us.
        if cls._modes is None:
            from .flashcard_mode import FlashcardMode
            from .quiz_mode import QuizMode
            from .spelling_mode import SpellingMode

            cls._modes = {
                mode_class().get_mode_id(): mode_class
                for mode_class in (QuizMode, FlashcardMode, SpellingMode)
            }
        return cls._modes

    @classmethod
    def create(cls, mode_name: str) -> BaseStudyMode:
        """Instantiate the mode registered under ``mode_name``.

        Raises ``KeyError`` for an unknown tag.
        """
        modes = cls._study_modes()
        if mode_name not in modes:
            raise KeyError(f"Unknown study mode: {mode_name!r}. Available: {sorted(modes)}")
        return modes[mode_name]()
