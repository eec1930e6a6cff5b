"""Ownership checks for word-targeted operations."""

from typing import Optional

from vocab_app.models.word import Word
from vocab_app.services.errors import WordAccessDeniedError, WordNotFoundError


def authorize(word: Word, user_id: str) -> Word:
    """Return the word if user_id owns it, else raise WordAccessDeniedError."""
    if word.owner_id != user_id:
        raise WordAccessDeniedError(word.id)
    return word


def require_owned(word: Optional[Word], word_id: str, user_id: str) -> Word:
    """Existence first, then ownership: a missing word is never reported as forbidden."""
    if word is None:
        raise WordNotFoundError(word_id)
    return authorize(word, user_id)
