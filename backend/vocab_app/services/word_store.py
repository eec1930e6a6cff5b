"""Word persistence.

WordStore is the contract the quiz and vocabulary services depend on.
SQLWordStore implements it on an AsyncSession.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from sqlalchemy import func, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from vocab_app.models.word import Word, WordStatus, utc_now

logger = logging.getLogger(__name__)


class WordStore(Protocol):
    async def insert(self, word: Word) -> Word: ...

    async def get_by_id(self, word_id: str) -> Optional[Word]: ...

    async def update(self, word: Word) -> Word: ...

    async def delete(self, word: Word) -> None: ...

    async def find_by_owner(
        self,
        user_id: str,
        page: int,
        page_size: int,
        search: str = "",
        status: Optional[WordStatus] = None,
    ) -> tuple[list[Word], int]: ...

    async def find_random_by_owner_and_status(
        self, user_id: str, status: Optional[WordStatus] = None
    ) -> Optional[Word]: ...

    async def find_random_excluding(self, user_id: str, exclude_id: str, count: int) -> list[Word]: ...

    async def count_by_owner_and_status(self, user_id: str, status: Optional[WordStatus] = None) -> int: ...


class SQLWordStore:
    """WordStore backed by SQLModel tables.

    Every write commits immediately. A failed commit is rolled back and
    re-raised so nothing half-written stays in the session.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

    async def insert(self, word: Word) -> Word:
        self.session.add(word)
        await self._commit()
        await self.session.refresh(word)
        return word

    async def get_by_id(self, word_id: str) -> Optional[Word]:
        result = await self.session.execute(select(Word).where(Word.id == word_id))
        return result.scalar_one_or_none()

    async def update(self, word: Word) -> Word:
        word.updated_at = utc_now()
        self.session.add(word)
        await self._commit()
        await self.session.refresh(word)
        return word

    async def delete(self, word: Word) -> None:
        await self.session.delete(word)
        await self._commit()

    async def find_by_owner(
        self,
        user_id: str,
        page: int,
        page_size: int,
        search: str = "",
        status: Optional[WordStatus] = None,
    ) -> tuple[list[Word], int]:
        conditions = [Word.owner_id == user_id]
        if search:
            pattern = f"%{search}%"
            conditions.append(
                or_(
                    Word.term.ilike(pattern),
                    Word.translation.ilike(pattern),
                    Word.definition.ilike(pattern),
                )
            )
        if status is not None:
            conditions.append(Word.status == status)

        total_result = await self.session.execute(
            select(func.count()).select_from(Word).where(*conditions)
        )
        total = total_result.scalar_one()

        stmt = (
            select(Word)
            .where(*conditions)
            .order_by(Word.created_at.desc(), Word.id)
            .offset((page - 1) * page_size)
            .limit(page_size)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total

    async def find_random_by_owner_and_status(
        self, user_id: str, status: Optional[WordStatus] = None
    ) -> Optional[Word]:
        stmt = select(Word).where(Word.owner_id == user_id)
        if status is not None:
            stmt = stmt.where(Word.status == status)
        result = await self.session.execute(stmt.order_by(func.random()).limit(1))
        return result.scalar_one_or_none()

    async def find_random_excluding(self, user_id: str, exclude_id: str, count: int) -> list[Word]:
        stmt = (
            select(Word)
            .where(
                Word.owner_id == user_id,
                Word.id != exclude_id,
                Word.translation.is_not(None),
                Word.translation != "",
            )
            .order_by(func.random())
            .limit(count)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_by_owner_and_status(self, user_id: str, status: Optional[WordStatus] = None) -> int:
        stmt = select(func.count()).select_from(Word).where(Word.owner_id == user_id)
        if status is not None:
            stmt = stmt.where(Word.status == status)
        result = await self.session.execute(stmt)
        return result.scalar_one()
