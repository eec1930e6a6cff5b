"""Word CRUD and listing for the owning user."""

from __future__ import annotations

import logging
import math

from vocab_app.models.word import (
    Word,
    WordCreate,
    WordListResponse,
    WordRead,
    WordStatus,
    WordUpdate,
    status_from_filter,
)
from vocab_app.services.access import require_owned
from vocab_app.services.word_store import WordStore

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


def clamp_paging(page: int, page_size: int) -> tuple[int, int]:
    """Out-of-range values fall back to defaults instead of failing."""
    if page < 1:
        page = 1
    if page_size < 1 or page_size > MAX_PAGE_SIZE:
        page_size = DEFAULT_PAGE_SIZE
    return page, page_size


class VocabularyService:
    def __init__(self, store: WordStore):
        self.store = store

    async def create(self, user_id: str, data: WordCreate) -> Word:
        word = Word(
            owner_id=user_id,
            term=data.term,
            definition=data.definition,
            translation=data.translation,
            examples=list(data.examples),
            status=WordStatus.LEARNING,
            attempt_count=0,
            pass_count=0,
            fail_count=0,
        )
        word = await self.store.insert(word)
        logger.info("User %s created word %s", user_id, word.id)
        return word

    async def get(self, user_id: str, word_id: str) -> Word:
        word = await self.store.get_by_id(word_id)
        return require_owned(word, word_id, user_id)

    async def list_words(
        self,
        user_id: str,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        search: str = "",
        status_filter: str = "",
    ) -> WordListResponse:
        page, page_size = clamp_paging(page, page_size)
        search = search.strip()
        words, total = await self.store.find_by_owner(
            user_id, page, page_size, search, status_from_filter(status_filter)
        )
        return WordListResponse(
            data=[WordRead.model_validate(w, from_attributes=True) for w in words],
            total=total,
            page=page,
            page_size=page_size,
            total_pages=math.ceil(total / page_size),
            search=search,
            status=status_filter,
        )

    async def update(self, user_id: str, word_id: str, data: WordUpdate) -> Word:
        """Edit text fields. Blank term or examples keep the current value."""
        word = await self.get(user_id, word_id)

        if data.term and data.term.strip():
            word.term = data.term
        if data.examples:
            word.examples = list(data.examples)
        if data.definition is not None:
            word.definition = data.definition
        if data.translation is not None:
            word.translation = data.translation

        return await self.store.update(word)

    async def delete(self, user_id: str, word_id: str) -> None:
        word = await self.get(user_id, word_id)
        await self.store.delete(word)
        logger.info("User %s deleted word %s", user_id, word_id)
