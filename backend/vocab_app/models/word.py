from datetime import datetime, timezone
from enum import Enum
from typing import Literal, Optional
import uuid

from pydantic import field_validator
from sqlmodel import SQLModel, Field, JSON, Column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class WordStatus(str, Enum):
    LEARNING = "learning"
    MEMORIZED = "memorized"


# "" and "all" both mean "no status filter"
StatusFilter = Literal["", "all", "learning", "memorized"]


def status_from_filter(status_filter: Optional[str]) -> Optional[WordStatus]:
    """Translate a pre-validated filter value into a status, or None for no filter."""
    if not status_filter or status_filter == "all":
        return None
    return WordStatus(status_filter)


class WordBase(SQLModel):
    """Shared fields for word data."""

    term: str
    definition: str
    translation: str = ""


class Word(WordBase, table=True):
    """Vocabulary entry owned by a single user, with mastery tracking."""

    __tablename__ = "words"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    examples: list[str] = Field(default_factory=list, sa_column=Column(JSON))
    owner_id: str = Field(foreign_key="users.id", index=True)
    status: WordStatus = Field(default=WordStatus.LEARNING, index=True)
    attempt_count: int = Field(default=0)
    pass_count: int = Field(default=0)
    fail_count: int = Field(default=0)
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)


class WordCreate(SQLModel):
    """Schema for creating a word."""

    term: str = Field(min_length=1)
    definition: str = Field(min_length=1)
    translation: str = ""
    examples: list[str] = []

    @field_validator("term", "definition")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class WordUpdate(SQLModel):
    """Schema for editing a word. Status and counters are not writable."""

    term: Optional[str] = None
    definition: Optional[str] = None
    translation: Optional[str] = None
    examples: Optional[list[str]] = None


class WordRead(WordBase):
    """Schema for word responses."""

    id: str
    owner_id: str
    examples: list[str]
    status: WordStatus
    attempt_count: int
    pass_count: int
    fail_count: int
    created_at: datetime
    updated_at: datetime


class WordListResponse(SQLModel):
    """One page of a user's words."""

    data: list[WordRead]
    total: int
    page: int
    page_size: int
    total_pages: int
    search: str = ""
    status: str = ""


class WordStats(SQLModel):
    total: int
    learning: int
    memorized: int


# Quiz projections

class QuizWord(SQLModel):
    """A word as shown during a quiz: no translation, definition or examples."""

    id: str
    term: str
    status: WordStatus
    attempt_count: int
    pass_count: int
    fail_count: int

    @classmethod
    def from_word(cls, word: Word) -> "QuizWord":
        return cls(
            id=word.id,
            term=word.term,
            status=word.status,
            attempt_count=word.attempt_count,
            pass_count=word.pass_count,
            fail_count=word.fail_count,
        )


class QuizOption(SQLModel):
    """A multiple-choice option. Carries no hint of which one is correct."""

    id: str
    translation: str


class QuizOptionsResponse(SQLModel):
    options: list[QuizOption]


class AnswerSubmission(SQLModel):
    answer: str


class AnswerResult(SQLModel):
    """Outcome of grading one answer.

    correct_answer is only set when the guess failed.
    """

    passed: bool
    word: QuizWord
    correct_answer: Optional[str] = None
