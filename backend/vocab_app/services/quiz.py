"""
Quiz service - word selection, option building and answer grading.

Status decisions are delegated to the mastery policy and ownership checks
to the access guard; this module only orchestrates them around the store.
"""

from __future__ import annotations

import logging

from vocab_app.models.word import (
    AnswerResult,
    QuizOption,
    QuizWord,
    Word,
    status_from_filter,
)
from vocab_app.services.access import require_owned
from vocab_app.services.errors import NoCandidatesError
from vocab_app.services.mastery import MasteryProgress, apply_progress, record_outcome
from vocab_app.services.word_store import WordStore

logger = logging.getLogger(__name__)

# Wrong answers shown next to the correct one
DISTRACTOR_COUNT = 3


def normalize_answer(text: str) -> str:
    # casefold, not lower: "straße" and "STRASSE" compare equal
    return text.strip().casefold()


def answers_match(submitted: str, expected: str) -> bool:
    """Exact match after trimming, ignoring case. No partial credit."""
    return normalize_answer(submitted) == normalize_answer(expected)


def to_option(word: Word) -> QuizOption:
    return QuizOption(id=word.id, translation=word.translation)


class QuizService:
    """Quiz operations for one request, scoped by the acting user id."""

    def __init__(self, store: WordStore):
        self.store = store

    async def _owned_word(self, user_id: str, word_id: str) -> Word:
        word = await self.store.get_by_id(word_id)
        return require_owned(word, word_id, user_id)

    async def select_for_quiz(self, user_id: str, status_filter: str = "") -> QuizWord:
        """Pick one of the user's words uniformly at random.

        Raises NoCandidatesError when nothing matches the filter.
        """
        status = status_from_filter(status_filter)
        word = await self.store.find_random_by_owner_and_status(user_id, status)
        if word is None:
            logger.debug("No quiz candidates for user %s (status=%r)", user_id, status_filter)
            raise NoCandidatesError(status_filter)
        return QuizWord.from_word(word)

    async def build_options(self, user_id: str, word_id: str) -> list[QuizOption]:
        """Correct option first, then up to DISTRACTOR_COUNT distractors.

        Users with few words get a shorter list rather than an error.
        """
        word = await self._owned_word(user_id, word_id)
        distractors = await self.store.find_random_excluding(user_id, word.id, DISTRACTOR_COUNT)
        return [to_option(word)] + [to_option(d) for d in distractors]

    async def grade_answer(self, user_id: str, word_id: str, submitted: str) -> AnswerResult:
        """Grade a typed answer against the stored translation and persist progress."""
        word = await self._owned_word(user_id, word_id)
        expected = word.translation
        passed = answers_match(submitted, expected)

        before = MasteryProgress.of(word)
        after = record_outcome(before, passed)
        word = await self.store.update(apply_progress(word, after))

        if after.status != before.status:
            logger.info(
                "Word %s moved from %s to %s (margin %d)",
                word.id, before.status.value, after.status.value, after.margin,
            )
        logger.debug("Graded word %s for user %s: passed=%s", word.id, user_id, passed)

        return AnswerResult(
            passed=passed,
            word=QuizWord.from_word(word),
            correct_answer=None if passed else expected,
        )
