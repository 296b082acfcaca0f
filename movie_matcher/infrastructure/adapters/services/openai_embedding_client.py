from typing import List

from langchain_openai import OpenAIEmbeddings
from openai import OpenAIError

from movie_matcher.domain.exceptions import EmbeddingError
from movie_matcher.domain.models.preferences import UserPreferences
from movie_matcher.domain.ports.services.embedding_client import EmbeddingClientPort
from movie_matcher.domain.ports.services.logger import LoggerPort
from movie_matcher.infrastructure.config.settings import PipelineSettings, Settings


class OpenAIEmbeddingClient(EmbeddingClientPort):
    def __init__(self, settings: Settings, pipeline_settings: PipelineSettings, logger: LoggerPort):
        # raw text goes to the API as-is, no client-side token chunking
        self.embeddings = OpenAIEmbeddings(
            model=pipeline_settings.embedding_model,
            api_key=settings.OPENAI_API_KEY,
            check_embedding_ctx_length=False,
        )
        self.dimensions = pipeline_settings.embedding_dimensions
        self.logger = logger

    async def create_embedding(self, preferences: UserPreferences) -> List[float]:
        query = preferences.query_text
        self.logger.debug(f"Embedding preference query: {query!r}")
        try:
            vectors = await self.embeddings.aembed_documents([query])
        except OpenAIError as exc:
            raise EmbeddingError(f"Embedding generation failed: {exc}") from exc

        if not vectors:
            raise EmbeddingError("Embedding service returned no vectors")

        embedding = vectors[0]
        if len(embedding) != self.dimensions:
            raise EmbeddingError(f"Expected a {self.dimensions}-dim embedding, got {len(embedding)}")
        return embedding
