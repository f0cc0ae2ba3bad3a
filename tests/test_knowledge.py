import pytest
from langchain_core.documents import Document

from tomorrow_agents.config.settings import Settings
from tomorrow_agents.knowledge import TravelKnowledgeBase, build_knowledge_base, fallback_advice
from tomorrow_agents.knowledge.base import DEFAULT_ADVICE
from tomorrow_agents.knowledge.documents import ALL_DOCUMENTS, KnowledgeDocument


class RecordingStore:
    """Just enough of a LangChain VectorStore for the knowledge base."""

    def __init__(self, results=()):
        self.results = list(results)
        self.added = {}
        self.searches = []

    def add_documents(self, documents, ids=None):
        self.added.update(zip(ids, documents))

    def similarity_search_with_score(self, query, k=4, filter=None):
        self.searches.append((query, k, filter))
        return self.results[:k]


def hit(content, activities, score=0.5):
    return Document(page_content=content, metadata={"activities": activities}), score


class TestPopulate:
    def test_without_store_nothing_happens(self):
        knowledge = TravelKnowledgeBase()
        assert knowledge.available is False
        assert knowledge.populate() == 0
        assert knowledge.query("anything") == []

    def test_chunks_carry_metadata_and_stable_ids(self):
        store = RecordingStore()
        document = KnowledgeDocument(
            id="lisbon",
            name="Lisbon, Portugal",
            category="destination",
            region="Europe",
            activities=("food",),
            content="Lisbon guide. " * 100,
        )
        written = TravelKnowledgeBase(store).populate([document])

        assert written == len(store.added) > 1
        first = store.added["lisbon_chunk_0"]
        assert first.metadata["document_name"] == "Lisbon, Portugal"
        assert first.metadata["region"] == "Europe"
        assert first.metadata["chunk_index"] == 0
        assert first.metadata["total_chunks"] == written
        assert "country" not in first.metadata

    def test_ensure_populated_runs_once(self):
        store = RecordingStore()
        knowledge = TravelKnowledgeBase(store)
        knowledge.ensure_populated()
        count = len(store.added)
        knowledge.ensure_populated()
        assert len(store.added) == count
        assert {key.split("_chunk_")[0] for key in store.added} == {d.id for d in ALL_DOCUMENTS}


class TestQuery:
    def test_activities_filter_keeps_tagged_hits(self):
        store = RecordingStore(
            [
                hit("Nightlife", ["bars"]),
                hit("Beaches", ["Beaches", "food"]),
                hit("Temples", ["culture"]),
                hit("Street food", ["food"]),
            ]
        )
        hits = TravelKnowledgeBase(store).query("where to eat", top_k=1, activities=["food"])

        assert [h.content for h in hits] == ["Beaches"]
        assert hits[0].rank == 1
        assert store.searches == [("where to eat", 3, None)]

    def test_metadata_filter_is_passed_through(self):
        store = RecordingStore()
        TravelKnowledgeBase(store).query("tips", filter={"category": "safety"})
        assert store.searches == [("tips", 5, {"category": "safety"})]


class TestFallbackAdvice:
    @pytest.mark.parametrize(
        "query,start",
        [
            ("Trip to JAPAN", "Tokyo is best visited"),
            ("bali in july", "Bali is best"),
            ("budget ideas", "Budget travel tips"),
        ],
    )
    def test_rules(self, query, start):
        assert fallback_advice(query).startswith(start)

    def test_default(self):
        assert fallback_advice("anything else") == DEFAULT_ADVICE


def test_build_without_connection_string_has_no_store():
    assert build_knowledge_base(Settings(POSTGRES_CONNECTION_STRING="")).available is False
