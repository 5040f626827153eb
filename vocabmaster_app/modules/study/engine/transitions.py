# File: vocabmaster_app/modules/study/engine/transitions.py
"""
Pure transition functions over :class:`StudySession`.

Every function takes a session and returns a new one. Randomness comes from
the ``rng`` argument so tests can pass a seeded ``random.Random``.
"""

from __future__ import annotations

import random
from dataclasses import replace
from typing import Optional, Sequence

from ....core.error_handlers import InsufficientDataError, InvalidActionError
from ..modes.factory import ModeFactory
from .session import SessionStatus, StudyAction, StudySession, StudySettings, WordCard

ACTION_RESTART = 'restart'


def shuffled(items: Sequence, rng: random.Random) -> list:
    """Uniform random permutation of ``items`` (Fisher-Yates via ``rng.shuffle``)."""
    result = list(items)
    rng.shuffle(result)
    return result


def load_words(
    session: StudySession,
    words: Sequence[WordCard],
    rng: Optional[random.Random] = None,
    settings: Optional[StudySettings] = None,
) -> StudySession:
    """Move a ``LOADING`` session to ``IN_PROGRESS`` with a freshly shuffled word set.

    Raises :class:`InsufficientDataError` when the word set is too small for
    the mode; no session is started in that case.
    """
    rng = rng or random.Random()
    settings = settings or StudySettings()
    mode = ModeFactory.create(session.mode)

    required = mode.min_words(settings)
    if len(words) < required:
        raise InsufficientDataError(mode.get_mode_id(), required, len(words))

    items = mode.build_items(shuffled(words, rng), rng, settings)
    return replace(
        session,
        status=SessionStatus.IN_PROGRESS,
        words=tuple(words),
        items=tuple(items),
        current_index=0,
    )


def start_session(
    mode_name: str,
    words: Sequence[WordCard],
    rng: Optional[random.Random] = None,
    settings: Optional[StudySettings] = None,
    collection_id: Optional[str] = None,
) -> StudySession:
    return load_words(StudySession.loading(mode_name, collection_id), words, rng, settings)


def restart(
    session: StudySession,
    rng: Optional[random.Random] = None,
    settings: Optional[StudySettings] = None,
) -> StudySession:
    """Re-shuffle the same word set and reset every per-item outcome."""
    return load_words(
        StudySession.loading(session.mode, session.collection_id), session.words, rng, settings
    )


def finalize(session: StudySession) -> StudySession:
    if session.status is not SessionStatus.IN_PROGRESS:
        raise InvalidActionError('Only a session in progress can be completed', action='complete')
    return replace(session, status=SessionStatus.COMPLETE)


def advance(session: StudySession) -> StudySession:
    """Move to the next item, or complete the session from the last one."""
    if session.is_last:
        return finalize(session)
    return replace(session, current_index=session.current_index + 1)


def apply_action(
    session: StudySession,
    action: StudyAction,
    rng: Optional[random.Random] = None,
    settings: Optional[StudySettings] = None,
) -> StudySession:
    """Apply one learner action and return the resulting session."""
    if action.type == ACTION_RESTART:
        return restart(session, rng, settings)

    if session.status is SessionStatus.COMPLETE:
        raise InvalidActionError('Session is already complete', action=action.type)
    if session.status is SessionStatus.LOADING:
        raise InvalidActionError('Session has not started', action=action.type)

    mode = ModeFactory.create(session.mode)
    if action.type not in mode.actions:
        raise InvalidActionError(
            f"Action {action.type!r} is not available in {session.mode} mode", action=action.type
        )
    return mode.apply(session, action, settings or StudySettings())
