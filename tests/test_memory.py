import pytest

from tomorrow_agents.config.settings import Settings
from tomorrow_agents.memory import FileMemoryStore, build_memory_store
from tomorrow_agents.memory.db_store import DbMemoryStore
from tomorrow_agents.memory.record_ops import rank_statements, terms


class TestRanking:
    def test_terms_skip_stop_words_and_short_words(self):
        assert terms("What does the user like about Tokyo ramen?") == {"tokyo", "ramen"}

    def test_rank_by_overlap_then_recency(self):
        statements = ["Likes Tokyo", "Loves ramen in Tokyo", "Visited Tokyo in May"]
        assert rank_statements(statements, "tokyo ramen", 5) == [
            "Loves ramen in Tokyo",
            "Visited Tokyo in May",
            "Likes Tokyo",
        ]

    def test_question_without_terms_returns_newest(self):
        assert rank_statements(["a1", "b2", "c3"], "what is it?", 2) == ["c3", "b2"]


@pytest.fixture(params=["file", "db"])
def store(request, tmp_path):
    template = "# Profile\n"
    if request.param == "file":
        return FileMemoryStore(tmp_path / "mem", working_memory_template=template)
    return DbMemoryStore(url=f"sqlite:///{tmp_path / 'mem.db'}", working_memory_template=template)


class TestMemoryStores:
    def test_remember_and_search(self, store):
        store.remember("u1", "Prefers window seats")
        store.remember("u1", "Allergic to peanuts")
        store.remember("u2", "Prefers aisle seats")

        assert store.search("u1", "which seats?") == ["Prefers window seats"]
        assert store.search("u2", "peanuts") == []

    def test_search_limit(self, store):
        for city in ("Rome", "Oslo", "Lima"):
            store.remember("u1", f"Visited {city}")
        assert store.search("u1", "visited", limit=2) == ["Visited Lima", "Visited Oslo"]

    def test_working_memory_defaults_to_template(self, store):
        assert store.working_memory("u1") == "# Profile\n"
        store.update_working_memory("u1", "# Profile\n- Name: Ana")
        store.update_working_memory("u1", "# Profile\n- Name: Ana Lima")
        assert store.working_memory("u1") == "# Profile\n- Name: Ana Lima"


class TestFileStore:
    def test_unreadable_file_starts_fresh(self, tmp_path):
        (tmp_path / "u1.json").write_text("{not json", encoding="utf-8")
        store = FileMemoryStore(tmp_path)
        assert store.search("u1", "anything") == []
        store.remember("u1", "Recovered")
        assert store.search("u1", "recovered") == ["Recovered"]

    def test_user_ids_cannot_escape_directory(self, tmp_path):
        store = FileMemoryStore(tmp_path / "mem")
        store.remember("../evil", "nope")
        assert not (tmp_path / "evil.json").exists()


class TestBuildMemoryStore:
    def test_none_disables_memory(self):
        assert build_memory_store(Settings(MEMORY_BACKEND="none")) is None

    def test_file_backend(self, tmp_path):
        store = build_memory_store(
            Settings(MEMORY_BACKEND="file", MEMORY_STORE_DIR=str(tmp_path)), "# T"
        )
        assert isinstance(store, FileMemoryStore)
        assert store.working_memory("u1") == "# T"

    def test_db_backend(self, tmp_path):
        store = build_memory_store(
            Settings(MEMORY_BACKEND="db", DATABASE_URL=f"sqlite:///{tmp_path / 'm.db'}")
        )
        assert isinstance(store, DbMemoryStore)

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="MEMORY_BACKEND"):
            build_memory_store(Settings(MEMORY_BACKEND="redis"))
