"""
Mastery policy - decides a word's learning status from its quiz record.

Pure functions only: no storage, no clock, no randomness.

A word is memorized while passes outnumber fails by at least
MEMORIZED_MARGIN. The margin is re-checked after every graded attempt, so a
memorized word that keeps being failed drops back to learning.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from vocab_app.models.word import Word, WordStatus

# passes - fails needed for a word to count as memorized
MEMORIZED_MARGIN = 10


@dataclass(frozen=True)
class MasteryProgress:
    """Status plus quiz counters of a single word."""
    status: WordStatus = WordStatus.LEARNING
    attempt_count: int = 0
    pass_count: int = 0
    fail_count: int = 0

    @property
    def margin(self) -> int:
        return self.pass_count - self.fail_count

    @classmethod
    def of(cls, word: Word) -> "MasteryProgress":
        return cls(
            status=WordStatus(word.status),
            attempt_count=word.attempt_count,
            pass_count=word.pass_count,
            fail_count=word.fail_count,
        )


def status_for_margin(margin: int) -> WordStatus:
    if margin >= MEMORIZED_MARGIN:
        return WordStatus.MEMORIZED
    return WordStatus.LEARNING


def record_outcome(progress: MasteryProgress, passed: bool) -> MasteryProgress:
    """Apply one graded attempt and return the new progress.

    The status is derived from the post-increment counters only; the
    incoming status is not consulted.
    """
    if passed:
        counted = replace(progress, pass_count=progress.pass_count + 1)
    else:
        counted = replace(progress, fail_count=progress.fail_count + 1)

    counted = replace(counted, attempt_count=progress.attempt_count + 1)
    return replace(counted, status=status_for_margin(counted.margin))


def apply_progress(word: Word, progress: MasteryProgress) -> Word:
    """Copy progress onto a word in place."""
    word.status = progress.status
    word.attempt_count = progress.attempt_count
    word.pass_count = progress.pass_count
    word.fail_count = progress.fail_count
    return word
