"""Vocabulary endpoints: word CRUD, listing and stats."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from vocab_app.auth.dependencies import get_current_active_user
from vocab_app.models.user import User
from vocab_app.models.word import (
    StatusFilter,
    WordCreate,
    WordListResponse,
    WordRead,
    WordStats,
    WordUpdate,
)
from vocab_app.routers.deps import get_vocabulary_service, get_word_store
from vocab_app.services.stats import get_stats
from vocab_app.services.vocabulary import DEFAULT_PAGE_SIZE, VocabularyService
from vocab_app.services.word_store import WordStore

router = APIRouter(prefix="/api/vocabularies", tags=["vocabulary"])


@router.post("", response_model=WordRead, status_code=status.HTTP_201_CREATED)
async def create_word(
    data: WordCreate,
    current_user: Annotated[User, Depends(get_current_active_user)],
    service: Annotated[VocabularyService, Depends(get_vocabulary_service)],
):
    """Add a word. New words start as learning with zeroed counters."""
    return await service.create(current_user.id, data)


@router.get("", response_model=WordListResponse)
async def list_words(
    current_user: Annotated[User, Depends(get_current_active_user)],
    service: Annotated[VocabularyService, Depends(get_vocabulary_service)],
    page: int = Query(default=1),
    page_size: int = Query(default=DEFAULT_PAGE_SIZE),
    search: str = Query(default=""),
    status_filter: StatusFilter = Query(default="", alias="status"),
):
    """List the current user's words, newest first."""
    return await service.list_words(current_user.id, page, page_size, search, status_filter)


@router.get("/stats", response_model=WordStats)
async def word_stats(
    current_user: Annotated[User, Depends(get_current_active_user)],
    store: Annotated[WordStore, Depends(get_word_store)],
):
    """Word counts per status for the current user."""
    return await get_stats(store, current_user.id)


@router.get("/{word_id}", response_model=WordRead)
async def get_word(
    word_id: str,
    current_user: Annotated[User, Depends(get_current_active_user)],
    service: Annotated[VocabularyService, Depends(get_vocabulary_service)],
):
    return await service.get(current_user.id, word_id)


@router.put("/{word_id}", response_model=WordRead)
async def update_word(
    word_id: str,
    data: WordUpdate,
    current_user: Annotated[User, Depends(get_current_active_user)],
    service: Annotated[VocabularyService, Depends(get_vocabulary_service)],
):
    """Edit a word's text fields. Status and counters are not editable."""
    return await service.update(current_user.id, word_id, data)


@router.delete("/{word_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_word(
    word_id: str,
    current_user: Annotated[User, Depends(get_current_active_user)],
    service: Annotated[VocabularyService, Depends(get_vocabulary_service)],
):
    await service.delete(current_user.id, word_id)
    return None
