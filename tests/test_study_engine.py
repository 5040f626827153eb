"""
Tests for the study session engine.

Sessions are immutable; every transition returns a new value, so each test
drives the engine with explicit actions and a seeded ``random.Random``.
"""

import random

import pytest

from vocabmaster_app.core.error_handlers import InsufficientDataError, InvalidActionError
from vocabmaster_app.modules.study.engine.session import (
    SessionStatus,
    StudyAction,
    StudySession,
    StudySettings,
    WordCard,
    calculate_score,
)
from vocabmaster_app.modules.study.engine.transitions import apply_action, load_words, restart, start_session
from vocabmaster_app.modules.study.modes.quiz_mode import build_options
from vocabmaster_app.modules.study.modes.spelling_mode import build_hint, mask_example


def make_cards(count):
    return [WordCard(id=str(i), word=f'word{i}', meaning=f'meaning {i}') for i in range(count)]


def act(session, action_type, **kwargs):
    return apply_action(session, StudyAction(type=action_type, **kwargs))


class TestSessionStart:

    def test_loading_to_in_progress(self):
        session = StudySession.loading('flashcard', collection_id='c1')
        assert session.status is SessionStatus.LOADING
        started = load_words(session, make_cards(3), random.Random(1))
        assert started.status is SessionStatus.IN_PROGRESS
        assert started.total_items == 3
        assert started.current_index == 0
        assert started.collection_id == 'c1'

    def test_same_seed_same_order(self):
        first = start_session('flashcard', make_cards(8), random.Random(42))
        second = start_session('flashcard', make_cards(8), random.Random(42))
        assert [c.word.id for c in first.items] == [c.word.id for c in second.items]

    def test_shuffle_is_a_permutation(self):
        cards = make_cards(10)
        session = start_session('spelling', cards, random.Random(3))
        assert sorted(p.word.id for p in session.items) == sorted(c.id for c in cards)

    def test_quiz_needs_two_words(self):
        with pytest.raises(InsufficientDataError) as excinfo:
            start_session('quiz', make_cards(1), random.Random(0))
        assert excinfo.value.status_code == 422
        assert excinfo.value.details == {'mode': 'quiz', 'required': 2, 'available': 1}

    @pytest.mark.parametrize('mode', ['quiz', 'flashcard', 'spelling'])
    def test_empty_word_set(self, mode):
        with pytest.raises(InsufficientDataError):
            start_session(mode, [], random.Random(0))

    def test_unknown_mode(self):
        with pytest.raises(KeyError):
            start_session('matching', make_cards(3))

    def test_score_of_empty_set_is_zero(self):
        assert calculate_score(0, 0) == 0.0
        assert calculate_score(7, 10) == 70.0

    def test_score_is_ratio_times_hundred(self):
        assert calculate_score(1, 3) == 33.33333333333333
        assert calculate_score(2, 3) == (2 / 3) * 100


class TestQuizMode:

    @pytest.mark.parametrize('seed', range(10))
    def test_two_words_give_at_most_two_options(self, seed):
        session = start_session('quiz', make_cards(2), random.Random(seed))
        for question in session.items:
            assert len(question.options) <= 2
            assert question.options[question.correct_index] == question.word.meaning

    def test_three_options_with_enough_words(self):
        session = start_session('quiz', make_cards(6), random.Random(5))
        for question in session.items:
            assert len(question.options) == 3
            assert question.options.count(question.word.meaning) == 1

    def test_duplicate_distractor_text_kept_by_default(self):
        word = WordCard(id='c', word='gamma', meaning='other')
        meanings = ['same', 'same', 'other']
        options, correct_index = build_options(word, meanings, random.Random(0))
        assert sorted(options) == ['other', 'same', 'same']
        assert options[correct_index] == 'other'

    def test_duplicate_distractor_text_removed_when_deduped(self):
        word = WordCard(id='c', word='gamma', meaning='other')
        options, _ = build_options(word, ['same', 'same', 'other'], random.Random(0), dedupe=True)
        assert sorted(options) == ['other', 'same']

    def test_correct_meaning_never_used_as_distractor(self):
        word = WordCard(id='a', word='alpha', meaning='shared')
        options, _ = build_options(word, ['shared', 'shared', 'x'], random.Random(0))
        assert options.count('shared') == 1

    def test_settings_change_distractor_count(self):
        settings = StudySettings(quiz_distractor_count=3)
        session = start_session('quiz', make_cards(6), random.Random(0), settings)
        assert all(len(q.options) == 4 for q in session.items)

    def test_selection_locks_question(self):
        session = start_session('quiz', make_cards(4), random.Random(2))
        question = session.current_item
        wrong = (question.correct_index + 1) % len(question.options)

        answered = act(session, 'select', index=wrong)
        again = act(answered, 'select', index=question.correct_index)

        assert again.current_item.selected_index == wrong
        assert again.current_item.is_correct is False
        assert again.correct_count == 0

    def test_next_requires_answer(self):
        session = start_session('quiz', make_cards(3), random.Random(0))
        with pytest.raises(InvalidActionError):
            act(session, 'next')

    def test_out_of_range_selection(self):
        session = start_session('quiz', make_cards(3), random.Random(0))
        with pytest.raises(InvalidActionError):
            act(session, 'select', index=7)

    def test_flashcard_action_rejected(self):
        session = start_session('quiz', make_cards(3), random.Random(0))
        with pytest.raises(InvalidActionError):
            act(session, 'toggle_learned')

    def test_original_session_not_mutated(self):
        session = start_session('quiz', make_cards(3), random.Random(0))
        act(session, 'select', index=0)
        assert session.current_item.selected_index is None

    def test_seven_of_ten_scores_seventy(self):
        session = start_session('quiz', make_cards(10), random.Random(11), collection_id='col')
        for position in range(10):
            question = session.current_item
            if position < 7:
                choice = question.correct_index
            else:
                choice = (question.correct_index + 1) % len(question.options)
            session = act(session, 'select', index=choice)
            session = act(session, 'next')

        assert session.status is SessionStatus.COMPLETE
        result = session.result()
        assert result.total_questions == 10
        assert result.correct_answers == 7
        assert result.score == 70.0
        assert result.collection_id == 'col'
        assert result.mode == 'quiz'

    def test_no_actions_after_completion(self):
        session = start_session('quiz', make_cards(2), random.Random(0))
        for _ in range(2):
            session = act(session, 'select', index=session.current_item.correct_index)
            session = act(session, 'next')
        assert session.status is SessionStatus.COMPLETE
        with pytest.raises(InvalidActionError):
            act(session, 'next')

    def test_restart_resets_everything(self):
        session = start_session('quiz', make_cards(3), random.Random(0))
        session = act(session, 'select', index=session.current_item.correct_index)
        session = act(session, 'next')

        fresh = restart(session, random.Random(9))
        assert fresh.status is SessionStatus.IN_PROGRESS
        assert fresh.current_index == 0
        assert fresh.correct_count == 0
        assert all(q.selected_index is None for q in fresh.items)
        assert sorted(q.word.id for q in fresh.items) == ['0', '1', '2']


class TestFlashcardMode:

    def test_final_toggle_states_decide_score(self):
        session = start_session('flashcard', make_cards(5), random.Random(4))
        session = act(session, 'toggle_learned')            # card 0 on
        session = act(session, 'next')
        session = act(session, 'toggle_learned')            # card 1 on
        session = act(session, 'toggle_learned')            # card 1 off
        session = act(session, 'next')
        session = act(session, 'toggle_learned')            # card 2 on
        session = act(session, 'next')
        session = act(session, 'next')
        session = act(session, 'toggle_learned')            # card 4 on
        session = act(session, 'previous')
        session = act(session, 'previous')
        session = act(session, 'previous')
        session = act(session, 'toggle_learned')            # card 1 on again
        session = act(session, 'toggle_learned')            # card 1 off again

        assert session.correct_count == 3
        assert session.status is SessionStatus.IN_PROGRESS

        done = act(session, 'complete')
        assert done.status is SessionStatus.COMPLETE
        assert done.result().score == 60.0
        assert done.result().correct_answers == 3
        assert done.result().total_questions == 5

    def test_navigation_is_bounded(self):
        session = start_session('flashcard', make_cards(2), random.Random(0))
        assert act(session, 'previous').current_index == 0

        at_end = act(session, 'next')
        assert at_end.current_index == 1
        still_at_end = act(at_end, 'next')
        assert still_at_end.current_index == 1
        assert still_at_end.status is SessionStatus.IN_PROGRESS

    def test_complete_without_marking(self):
        session = start_session('flashcard', make_cards(4), random.Random(0))
        done = act(session, 'complete')
        assert done.result().score == 0.0


class TestSpellingHelpers:

    @pytest.mark.parametrize('word,expected', [
        ('cat', 'c__'),
        ('a', 'a'),
        ('ab', 'a_'),
        ('abcd', 'ab__'),
        ('serendipity', 'sere_______'),
    ])
    def test_hint(self, word, expected):
        assert build_hint(word) == expected

    def test_hint_mask_char(self):
        assert build_hint('cat', '*') == 'c**'

    def test_example_masked_case_insensitively(self):
        assert mask_example('The Cat sat with a cat.', 'cat') == 'The ___ sat with a ___.'

    def test_example_with_regex_characters(self):
        assert mask_example('I write C++ daily.', 'c++') == 'I write ___ daily.'

    def test_no_example(self):
        assert mask_example(None, 'cat') is None
        assert mask_example('', 'cat') is None


class TestSpellingMode:

    def _session(self, count=2):
        cards = [
            WordCard(id=str(i), word=f'Word{i}', meaning=f'meaning {i}', example=f'Say word{i} twice.')
            for i in range(count)
        ]
        return start_session('spelling', cards, random.Random(0))

    def test_prompt_masks_example(self):
        session = self._session()
        prompt = session.current_item
        assert prompt.masked_example == 'Say ___ twice.'
        assert prompt.hint == build_hint(prompt.word.word)
        assert prompt.hint_shown is False

    def test_check_trims_and_ignores_case(self):
        session = self._session()
        target = session.current_item.word.word
        checked = act(session, 'check', guess=f'  {target.upper()} ')
        assert checked.current_item.is_correct is True
        assert checked.correct_count == 1

    def test_blank_guess_is_ignored(self):
        session = self._session()
        assert act(session, 'check', guess='   ') == session

    def test_check_locks_prompt(self):
        session = self._session()
        target = session.current_item.word.word
        wrong = act(session, 'check', guess='nope')
        again = act(wrong, 'check', guess=target)
        assert again.current_item.is_correct is False
        assert again.current_item.guess == 'nope'

    def test_hint_only_before_check(self):
        session = self._session()
        hinted = act(session, 'hint')
        assert hinted.current_item.hint_shown is True

        checked = act(session, 'check', guess='x')
        assert act(checked, 'hint').current_item.hint_shown is False

    def test_next_requires_check(self):
        with pytest.raises(InvalidActionError):
            act(self._session(), 'next')

    def test_last_advance_completes(self):
        session = self._session(2)
        session = act(session, 'check', guess=session.current_item.word.word)
        session = act(session, 'next')
        session = act(session, 'check', guess='wrong')
        session = act(session, 'next')
        assert session.status is SessionStatus.COMPLETE
        assert session.result().score == 50.0


class TestClientHeldState:

    def test_state_survives_serialisation(self):
        session = start_session('quiz', make_cards(4), random.Random(8), collection_id='c9')
        session = act(session, 'select', index=1)
        restored = StudySession.from_dict(session.to_dict())
        assert restored == session

    def test_spelling_correctness_recomputed_from_guess(self):
        session = start_session('spelling', make_cards(2), random.Random(0))
        session = act(session, 'check', guess='wrong')
        data = session.to_dict()
        data['items'][0]['isCorrect'] = True
        restored = StudySession.from_dict(data)
        assert restored.current_item.is_correct is False

    def test_index_out_of_range_rejected(self):
        data = start_session('flashcard', make_cards(2), random.Random(0)).to_dict()
        data['currentIndex'] = 5
        with pytest.raises(ValueError):
            StudySession.from_dict(data)
