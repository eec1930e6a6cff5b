"""Per-user word counts by status."""

from vocab_app.models.word import WordStats, WordStatus
from vocab_app.services.word_store import WordStore


async def get_stats(store: WordStore, user_id: str) -> WordStats:
    total = await store.count_by_owner_and_status(user_id)
    learning = await store.count_by_owner_and_status(user_id, WordStatus.LEARNING)
    memorized = await store.count_by_owner_and_status(user_id, WordStatus.MEMORIZED)
    return WordStats(total=total, learning=learning, memorized=memorized)
