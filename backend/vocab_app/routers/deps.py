"""Per-request service wiring for the routers."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from vocab_app.auth.jwt import TokenIssuer, get_token_issuer
from vocab_app.auth.password import PasswordHasher, get_password_hasher
from vocab_app.database import get_session
from vocab_app.services.accounts import AccountService
from vocab_app.services.quiz import QuizService
from vocab_app.services.vocabulary import VocabularyService
from vocab_app.services.word_store import SQLWordStore, WordStore


def get_word_store(session: Annotated[AsyncSession, Depends(get_session)]) -> WordStore:
    return SQLWordStore(session)


def get_vocabulary_service(store: Annotated[WordStore, Depends(get_word_store)]) -> VocabularyService:
    return VocabularyService(store)


def get_quiz_service(store: Annotated[WordStore, Depends(get_word_store)]) -> QuizService:
    return QuizService(store)


def get_account_service(
    session: Annotated[AsyncSession, Depends(get_session)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> AccountService:
    return AccountService(session, hasher, issuer)
