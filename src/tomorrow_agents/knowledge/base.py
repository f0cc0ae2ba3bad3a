from __future__ import annotations

import logging
from typing import Any, Iterable

from langchain_core.documents import Document
from langchain_core.vectorstores import VectorStore
from langchain_text_splitters import RecursiveCharacterTextSplitter
from pydantic import BaseModel, Field

from tomorrow_agents.config.settings import Settings, get_settings
from tomorrow_agents.heuristics.rules import Rule, contains_any, first_match
from tomorrow_agents.knowledge.documents import ALL_DOCUMENTS, KnowledgeDocument

logger = logging.getLogger(__name__)

CHUNK_SIZE = 512
CHUNK_OVERLAP = 50


class KnowledgeHit(BaseModel):
    rank: int
    relevance_score: float | None = None
    content: str
    source: str = "Travel Knowledge Base"
    category: str = "general"
    region: str | None = None
    country: str | None = None
    budget_level: str | None = None
    activities: list[str] = Field(default_factory=list)


class TravelKnowledgeBase:
    """Destination guides and travel tips behind an optional vector store.

    Without a vector store every query returns no hits; callers decide what
    to say instead.
    """

    def __init__(self, vector_store: VectorStore | None = None) -> None:
        self._store = vector_store
        self._populated = False

    @property
    def available(self) -> bool:
        return self._store is not None

    def _chunks(self, document: KnowledgeDocument) -> list[Document]:
        splitter = RecursiveCharacterTextSplitter(
            chunk_size=CHUNK_SIZE, chunk_overlap=CHUNK_OVERLAP
        )
        texts = splitter.split_text(document.content.strip())
        return [
            Document(
                page_content=text,
                metadata={
                    **document.metadata(),
                    "chunk_index": index,
                    "total_chunks": len(texts),
                },
            )
            for index, text in enumerate(texts)
        ]

    def populate(self, documents: Iterable[KnowledgeDocument] = ALL_DOCUMENTS) -> int:
        """Chunk and upsert documents; returns the number of chunks written."""
        if self._store is None:
            logger.info("Vector store not available, skipping knowledge base population")
            return 0

        written = 0
        for document in documents:
            chunks = self._chunks(document)
            ids = [f"{document.id}_chunk_{i}" for i in range(len(chunks))]
            self._store.add_documents(chunks, ids=ids)
            written += len(chunks)
            logger.info("Added %s to knowledge base (%d chunks)", document.name or document.id, len(chunks))
        self._populated = True
        return written

    def ensure_populated(self) -> None:
        if self._store is not None and not self._populated:
            self.populate()

    def query(
        self,
        text: str,
        *,
        top_k: int = 5,
        filter: dict[str, Any] | None = None,
        activities: list[str] | None = None,
    ) -> list[KnowledgeHit]:
        """Similarity search; ``activities`` keeps hits tagged with any of them."""
        if self._store is None:
            logger.info("Vector store not available, returning empty results")
            return []

        fetch_k = top_k * 3 if activities else top_k
        results = self._store.similarity_search_with_score(text, k=fetch_k, filter=filter)

        hits: list[KnowledgeHit] = []
        wanted = {a.lower() for a in activities or []}
        for document, score in results:
            meta = document.metadata
            tagged = [str(a) for a in meta.get("activities") or []]
            if wanted and not wanted & {a.lower() for a in tagged}:
                continue
            hits.append(
                KnowledgeHit(
                    rank=len(hits) + 1,
                    relevance_score=round(float(score), 3),
                    content=document.page_content,
                    source=meta.get("document_name", "Travel Knowledge Base"),
                    category=meta.get("category", "general"),
                    region=meta.get("region"),
                    country=meta.get("country"),
                    budget_level=meta.get("budget_level"),
                    activities=tagged,
                )
            )
            if len(hits) == top_k:
                break
        return hits


def build_knowledge_base(settings: Settings | None = None) -> TravelKnowledgeBase:
    """Knowledge base wired to PGVector when a Postgres connection string is set."""
    settings = settings or get_settings()
    if not settings.postgres_connection_string:
        logger.info("No Postgres connection string configured, knowledge base runs without vectors")
        return TravelKnowledgeBase()

    from langchain_openai import OpenAIEmbeddings
    from langchain_postgres import PGVector

    store = PGVector(
        embeddings=OpenAIEmbeddings(
            model=settings.embedding_model, api_key=settings.openai_api_key or None
        ),
        collection_name=settings.knowledge_index_name,
        connection=settings.postgres_connection_string,
        use_jsonb=True,
    )
    logger.info("PGVector knowledge store initialized (%s)", settings.knowledge_index_name)
    return TravelKnowledgeBase(store)


FALLBACK_ADVICE: list[Rule[str, str]] = [
    Rule(
        contains_any("tokyo", "japan"),
        "Tokyo is best visited in spring (cherry blossoms) or fall. Must-see: Senso-ji "
        "Temple, Tokyo Skytree, Shibuya Crossing. Try authentic sushi and ramen. Use JR "
        "Pass for transportation.",
    ),
    Rule(
        contains_any("paris", "france"),
        "Paris is beautiful year-round. Visit Eiffel Tower, Louvre Museum, Notre-Dame. "
        "Try croissants, French cuisine, and local wines. Use Metro for transportation. "
        "Learn basic French phrases.",
    ),
    Rule(
        contains_any("bali", "indonesia"),
        "Bali is best April-October (dry season). Visit Ubud for culture, Seminyak for "
        "beaches. Try nasi goreng and fresh seafood. Rent a scooter for transportation. "
        "Respect Hindu temples and traditions.",
    ),
    Rule(
        contains_any("budget"),
        "Budget travel tips: Stay in hostels, eat street food, use public transport, book "
        "in advance, travel off-season, look for free activities like walking tours and "
        "museums.",
    ),
    Rule(
        contains_any("safety"),
        "Travel safety: Research destination, get travel insurance, keep copies of "
        "documents, stay alert, use reputable transportation, drink bottled water in "
        "developing countries.",
    ),
]

DEFAULT_ADVICE = (
    "For the best travel experience, research your destination, respect local customs, "
    "try local cuisine, use public transportation, and always prioritize safety."
)


def fallback_advice(query: str) -> str:
    return first_match(FALLBACK_ADVICE, query.lower(), DEFAULT_ADVICE)
