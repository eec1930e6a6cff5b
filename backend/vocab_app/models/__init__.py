from vocab_app.models.user import User, UserCreate, UserResponse, LoginRequest, AuthResponse
from vocab_app.models.word import (
    Word,
    WordStatus,
    StatusFilter,
    WordCreate,
    WordUpdate,
    WordRead,
    WordListResponse,
    WordStats,
    QuizWord,
    QuizOption,
    QuizOptionsResponse,
    AnswerSubmission,
    AnswerResult,
    status_from_filter,
)

__all__ = [
    "User",
    "UserCreate",
    "UserResponse",
    "LoginRequest",
    "AuthResponse",
    "Word",
    "WordStatus",
    "StatusFilter",
    "WordCreate",
    "WordUpdate",
    "WordRead",
    "WordListResponse",
    "WordStats",
    "QuizWord",
    "QuizOption",
    "QuizOptionsResponse",
    "AnswerSubmission",
    "AnswerResult",
    "status_from_filter",
]
