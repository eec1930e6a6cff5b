"""Tests for word CRUD, listing and stats."""
import asyncio
from datetime import datetime, timedelta

import pytest
from vocab_app.models.word import WordCreate, WordStatus, WordUpdate
from vocab_app.services.errors import WordAccessDeniedError, WordNotFoundError
from vocab_app.services.quiz import QuizService
from vocab_app.services.stats import get_stats
from vocab_app.services.vocabulary import VocabularyService, clamp_paging
from conftest import InMemoryWordStore, make_word


def run(coro):
    return asyncio.run(coro)


class TestClampPaging:
    def test_valid_values_kept(self):
        assert clamp_paging(3, 25) == (3, 25)

    def test_page_below_one(self):
        assert clamp_paging(0, 10) == (1, 10)
        assert clamp_paging(-4, 10) == (1, 10)

    def test_page_size_out_of_range(self):
        assert clamp_paging(1, 0) == (1, 10)
        assert clamp_paging(1, 101) == (1, 10)
        assert clamp_paging(1, 100) == (1, 100)


class TestCreateAndGet:
    def test_new_word_starts_learning(self, store):
        service = VocabularyService(store)
        word = run(service.create("alice", WordCreate(term="dog", definition="an animal", translation="perro")))
        assert word.owner_id == "alice"
        assert word.status == WordStatus.LEARNING
        assert (word.attempt_count, word.pass_count, word.fail_count) == (0, 0, 0)
        assert word.examples == []
        assert word.id in store.words

    def test_get_checks_existence_before_ownership(self, store):
        service = VocabularyService(store)
        with pytest.raises(WordNotFoundError):
            run(service.get("bob", "missing"))

    def test_get_other_users_word(self):
        word = make_word(owner_id="alice")
        service = VocabularyService(InMemoryWordStore([word]))
        with pytest.raises(WordAccessDeniedError):
            run(service.get("bob", word.id))

    def test_blank_term_rejected(self):
        with pytest.raises(ValueError):
            WordCreate(term="   ", definition="x")


class TestUpdate:
    def test_update_text_fields(self):
        word = make_word(examples=["old example"])
        store = InMemoryWordStore([word])
        updated = run(VocabularyService(store).update(
            "alice", word.id,
            WordUpdate(term="home", definition="where you live", translation="hogar", examples=["new"]),
        ))
        assert updated.term == "home"
        assert updated.definition == "where you live"
        assert updated.translation == "hogar"
        assert updated.examples == ["new"]

    def test_blank_term_and_empty_examples_keep_current(self):
        word = make_word(examples=["keep me"])
        store = InMemoryWordStore([word])
        updated = run(VocabularyService(store).update(
            "alice", word.id, WordUpdate(term="", examples=[])
        ))
        assert updated.term == "house"
        assert updated.examples == ["keep me"]

    def test_empty_translation_clears(self):
        word = make_word()
        store = InMemoryWordStore([word])
        updated = run(VocabularyService(store).update("alice", word.id, WordUpdate(translation="")))
        assert updated.translation == ""

    def test_counters_not_writable(self):
        word = make_word(attempt_count=4, pass_count=3, fail_count=1)
        store = InMemoryWordStore([word])
        update = WordUpdate.model_validate(
            {"term": "home", "status": "memorized", "pass_count": 99}
        )
        updated = run(VocabularyService(store).update("alice", word.id, update))
        assert updated.status == WordStatus.LEARNING
        assert (updated.attempt_count, updated.pass_count, updated.fail_count) == (4, 3, 1)

    def test_other_user_cannot_update(self):
        word = make_word(owner_id="alice")
        store = InMemoryWordStore([word])
        with pytest.raises(WordAccessDeniedError):
            run(VocabularyService(store).update("bob", word.id, WordUpdate(term="hacked")))
        assert store.words[word.id].term == "house"


class TestDelete:
    def test_delete_own_word(self):
        word = make_word()
        store = InMemoryWordStore([word])
        run(VocabularyService(store).delete("alice", word.id))
        assert word.id not in store.words

    def test_other_user_cannot_delete(self):
        word = make_word(owner_id="alice")
        store = InMemoryWordStore([word])
        with pytest.raises(WordAccessDeniedError):
            run(VocabularyService(store).delete("bob", word.id))
        assert word.id in store.words

    def test_delete_missing(self, store):
        with pytest.raises(WordNotFoundError):
            run(VocabularyService(store).delete("alice", "missing"))


class TestList:
    def _store(self):
        base = datetime(2024, 1, 1)
        words = [
            make_word(term=f"word{i}", translation=f"t{i}", created_at=base + timedelta(minutes=i))
            for i in range(25)
        ]
        words.append(make_word(owner_id="bob", term="word-bob"))
        return InMemoryWordStore(words)

    def test_pagination(self):
        service = VocabularyService(self._store())
        page = run(service.list_words("alice", page=3, page_size=10))
        assert page.total == 25
        assert page.total_pages == 3
        assert len(page.data) == 5
        assert page.page == 3

    def test_newest_first(self):
        page = run(VocabularyService(self._store()).list_words("alice"))
        assert page.data[0].term == "word24"

    def test_invalid_paging_falls_back(self):
        page = run(VocabularyService(self._store()).list_words("alice", page=0, page_size=500))
        assert (page.page, page.page_size) == (1, 10)

    def test_search_matches_any_text_field(self):
        word = make_word(term="serendipity", translation="casualidad", definition="happy accident")
        service = VocabularyService(InMemoryWordStore([word, make_word(term="dog", translation="perro")]))
        for needle in ("SEREN", "casual", "accident"):
            page = run(service.list_words("alice", search=needle))
            assert [w.id for w in page.data] == [word.id]
            assert page.search == needle

    def test_status_filter(self):
        memorized = make_word(term="cat", status=WordStatus.MEMORIZED)
        service = VocabularyService(InMemoryWordStore([memorized, make_word()]))
        page = run(service.list_words("alice", status_filter="memorized"))
        assert [w.id for w in page.data] == [memorized.id]
        assert run(service.list_words("alice", status_filter="all")).total == 2

    def test_empty_list(self, store):
        page = run(VocabularyService(store).list_words("alice"))
        assert page.total == 0
        assert page.total_pages == 0
        assert page.data == []


class TestStats:
    def test_counts_per_status(self):
        words = [make_word(term=f"l{i}") for i in range(3)]
        words += [make_word(term=f"m{i}", status=WordStatus.MEMORIZED) for i in range(2)]
        words.append(make_word(owner_id="bob"))
        stats = run(get_stats(InMemoryWordStore(words), "alice"))
        assert (stats.total, stats.learning, stats.memorized) == (5, 3, 2)

    def test_total_is_sum_after_quizzing(self):
        word = make_word(attempt_count=9, pass_count=9)
        store = InMemoryWordStore([word, make_word(term="dog", translation="perro")])
        quiz = QuizService(store)
        for answer in ["casa", "wrong", "casa", "casa"]:
            run(quiz.grade_answer("alice", word.id, answer))
            stats = run(get_stats(store, "alice"))
            assert stats.total == stats.learning + stats.memorized == 2

    def test_user_without_words(self, store):
        stats = run(get_stats(store, "nobody"))
        assert (stats.total, stats.learning, stats.memorized) == (0, 0, 0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
