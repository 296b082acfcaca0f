from typing import Optional

from movie_matcher.domain.exceptions import DomainError, NoMatchFoundError
from movie_matcher.domain.models.preferences import UserPreferences
from movie_matcher.domain.models.recommendation import Recommendation
from movie_matcher.domain.ports.services.completion_client import CompletionClientPort
from movie_matcher.domain.ports.services.embedding_client import EmbeddingClientPort
from movie_matcher.domain.ports.services.logger import LoggerPort
from movie_matcher.domain.ports.services.presenter import RecommendationPresenterPort
from movie_matcher.domain.ports.services.recommendation_service_port import RecommendationServicePort
from movie_matcher.domain.ports.services.similarity_search import SimilaritySearchPort
from movie_matcher.domain.services.recommendation_parser import parse_recommendation
from movie_matcher.infrastructure.config.settings import PipelineSettings


class MovieRecommendationService(RecommendationServicePort):
    """Application service chaining embedding, similarity match and completion"""

    def __init__(
        self,
        pipeline_settings: PipelineSettings,
        embedding_client: EmbeddingClientPort,
        similarity_search: SimilaritySearchPort,
        completion_client: CompletionClientPort,
        presenter: RecommendationPresenterPort,
        logger: LoggerPort,
    ):
        self.pipeline_settings = pipeline_settings
        self.embedding_client = embedding_client
        self.similarity_search = similarity_search
        self.completion_client = completion_client
        self.presenter = presenter
        self.logger = logger

    async def run(self, preferences: UserPreferences) -> Optional[Recommendation]:
        self.logger.info("Starting recommendation run")
        try:
            recommendation = await self._recommend(preferences)
        except DomainError:
            self.logger.exception("Recommendation run aborted")
            return None
        except Exception:
            self.logger.exception("Unexpected error, recommendation run aborted")
            return None

        self.presenter.render_recommendation(recommendation)
        self.logger.info(f"Recommended: {recommendation.title}")
        return recommendation

    async def _recommend(self, preferences: UserPreferences) -> Recommendation:
        embedding = await self.embedding_client.create_embedding(preferences)

        outcome = await self.similarity_search.match_movies(
            embedding,
            match_threshold=self.pipeline_settings.match_threshold,
            match_count=self.pipeline_settings.match_count,
        )
        if outcome.failed:
            raise NoMatchFoundError(f"Similarity search failed: {outcome.error}")
        if not outcome.found:
            raise NoMatchFoundError("No stored movie passed the similarity threshold")

        text = await self.completion_client.get_chat_completion(outcome.match, preferences)
        return parse_recommendation(text)
