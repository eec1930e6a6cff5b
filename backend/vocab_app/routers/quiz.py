"""
Quiz router - API layer for vocabulary tests.

Delegates selection, option building and grading to QuizService.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from vocab_app.auth.dependencies import get_current_active_user
from vocab_app.models.user import User
from vocab_app.models.word import (
    AnswerResult,
    AnswerSubmission,
    QuizOptionsResponse,
    QuizWord,
    StatusFilter,
)
from vocab_app.routers.deps import get_quiz_service
from vocab_app.services.quiz import QuizService

router = APIRouter(prefix="/api/vocabularies", tags=["quiz"])


@router.get("/test/random", response_model=QuizWord)
async def random_word(
    current_user: Annotated[User, Depends(get_current_active_user)],
    quiz: Annotated[QuizService, Depends(get_quiz_service)],
    status_filter: StatusFilter = Query(default="", alias="status"),
):
    """Pick a random word to test, optionally restricted to one status."""
    return await quiz.select_for_quiz(current_user.id, status_filter)


@router.get("/{word_id}/test/options", response_model=QuizOptionsResponse)
async def test_options(
    word_id: str,
    current_user: Annotated[User, Depends(get_current_active_user)],
    quiz: Annotated[QuizService, Depends(get_quiz_service)],
):
    """
    Multiple-choice options for a word: the correct translation first,
    then up to three translations of the user's other words.
    """
    options = await quiz.build_options(current_user.id, word_id)
    return QuizOptionsResponse(options=options)


@router.post("/{word_id}/test", response_model=AnswerResult, response_model_exclude_none=True)
async def submit_answer(
    word_id: str,
    submission: AnswerSubmission,
    current_user: Annotated[User, Depends(get_current_active_user)],
    quiz: Annotated[QuizService, Depends(get_quiz_service)],
):
    """
    Grade an answer and update the word's progress.

    correct_answer is only included when the answer was wrong.
    """
    return await quiz.grade_answer(current_user.id, word_id, submission.answer)
