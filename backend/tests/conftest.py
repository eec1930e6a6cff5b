"""Shared fixtures: an in-memory word store and an API client on a scratch database."""
import os

# Settings are cached on first use, so these must be in place before any
# vocab_app import.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import asyncio
import random
from typing import Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import NullPool

from vocab_app.database import build_engine, build_session_maker, get_session, init_db
from vocab_app.main import app
from vocab_app.models.word import Word, WordStatus


def clone(word: Word) -> Word:
    data = word.model_dump()
    data["examples"] = list(data.get("examples") or [])
    return Word(**data)


class InMemoryWordStore:
    """WordStore fake. Hands out copies so unsaved edits never leak into storage."""

    def __init__(self, words=()):
        self.words: dict[str, Word] = {}
        self.fail_updates = False
        for word in words:
            self.words[word.id] = clone(word)

    async def insert(self, word: Word) -> Word:
        self.words[word.id] = clone(word)
        return clone(word)

    async def get_by_id(self, word_id: str) -> Optional[Word]:
        word = self.words.get(word_id)
        return clone(word) if word is not None else None

    async def update(self, word: Word) -> Word:
        if self.fail_updates:
            raise RuntimeError("storage unavailable")
        self.words[word.id] = clone(word)
        return clone(word)

    async def delete(self, word: Word) -> None:
        del self.words[word.id]

    def _owned(self, user_id: str, status: Optional[WordStatus] = None) -> list[Word]:
        return [
            w for w in self.words.values()
            if w.owner_id == user_id and (status is None or w.status == status)
        ]

    async def find_by_owner(self, user_id, page, page_size, search="", status=None):
        matches = self._owned(user_id, status)
        if search:
            needle = search.lower()
            matches = [
                w for w in matches
                if needle in w.term.lower()
                or needle in w.translation.lower()
                or needle in w.definition.lower()
            ]
        matches.sort(key=lambda w: w.created_at, reverse=True)
        start = (page - 1) * page_size
        return [clone(w) for w in matches[start:start + page_size]], len(matches)

    async def find_random_by_owner_and_status(self, user_id, status=None):
        candidates = self._owned(user_id, status)
        if not candidates:
            return None
        return clone(random.choice(candidates))

    async def find_random_excluding(self, user_id, exclude_id, count):
        candidates = [w for w in self._owned(user_id) if w.id != exclude_id and w.translation]
        random.shuffle(candidates)
        return [clone(w) for w in candidates[:count]]

    async def count_by_owner_and_status(self, user_id, status=None):
        return len(self._owned(user_id, status))


def make_word(owner_id: str = "alice", term: str = "house", translation: str = "casa", **kwargs) -> Word:
    kwargs.setdefault("definition", f"definition of {term}")
    return Word(owner_id=owner_id, term=term, translation=translation, **kwargs)


@pytest.fixture
def store():
    return InMemoryWordStore()


@pytest.fixture
def client(tmp_path):
    """TestClient whose requests use a fresh SQLite file per test."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)
    asyncio.run(init_db(engine))
    session_maker = build_session_maker(engine)

    async def override_get_session():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()
    asyncio.run(engine.dispose())


def register(client: TestClient, email: str, password: str = "secret123", name: str = "Tester") -> dict:
    """Register a user and return bearer auth headers."""
    response = client.post(
        "/api/auth/register",
        json={"email": email, "password": password, "name": name},
    )
    assert response.status_code == 201, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def alice(client):
    return register(client, "alice@example.com", name="Alice")


@pytest.fixture
def bob(client):
    return register(client, "bob@example.com", name="Bob")
