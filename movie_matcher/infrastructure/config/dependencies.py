from typing import Annotated, Optional

from fastapi import Depends
from pydantic import ValidationError

from movie_matcher.applications.services.movie_recommendation_service import MovieRecommendationService
from movie_matcher.domain.exceptions import ConfigurationError
from movie_matcher.domain.ports.services.completion_client import CompletionClientPort
from movie_matcher.domain.ports.services.embedding_client import EmbeddingClientPort
from movie_matcher.domain.ports.services.logger import LoggerPort
from movie_matcher.domain.ports.services.recommendation_service_port import RecommendationServicePort
from movie_matcher.domain.ports.services.similarity_search import SimilaritySearchPort
from movie_matcher.infrastructure.adapters.services.openai_completion_client import OpenAICompletionClient
from movie_matcher.infrastructure.adapters.services.openai_embedding_client import OpenAIEmbeddingClient
from movie_matcher.infrastructure.adapters.services.supabase_similarity_search_client import (
    SupabaseSimilaritySearchClient,
)
from movie_matcher.infrastructure.adapters.services.view_state_presenter import ViewStatePresenter
from movie_matcher.infrastructure.config.settings import PipelineSettings, Settings
from movie_matcher.infrastructure.logging.std_logger_adapter import StdLoggerAdapter


class _PresenterStore:
    presenter: Optional[ViewStatePresenter] = None


def get_presenter() -> ViewStatePresenter:
    """Process-wide presenter, shared by every request like a single page"""
    if _PresenterStore.presenter is None:
        _PresenterStore.presenter = ViewStatePresenter()
    return _PresenterStore.presenter


def reset_presenter() -> None:
    _PresenterStore.presenter = None


def get_logger() -> LoggerPort:
    return StdLoggerAdapter("movie_matcher")


def get_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as exc:
        missing = ", ".join(str(err["loc"][0]) for err in exc.errors() if err.get("loc"))
        raise ConfigurationError(f"Missing or invalid credentials: {missing}") from exc


def get_pipeline_settings() -> PipelineSettings:
    return PipelineSettings()


def get_embedding_client(
    settings: Annotated[Settings, Depends(get_settings)],
    pipeline_settings: Annotated[PipelineSettings, Depends(get_pipeline_settings)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> EmbeddingClientPort:
    return OpenAIEmbeddingClient(settings, pipeline_settings, logger)


def get_similarity_search(
    settings: Annotated[Settings, Depends(get_settings)],
    pipeline_settings: Annotated[PipelineSettings, Depends(get_pipeline_settings)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> SimilaritySearchPort:
    return SupabaseSimilaritySearchClient(settings, pipeline_settings, logger)


def get_completion_client(
    settings: Annotated[Settings, Depends(get_settings)],
    pipeline_settings: Annotated[PipelineSettings, Depends(get_pipeline_settings)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> CompletionClientPort:
    return OpenAICompletionClient(settings, pipeline_settings, logger)


def get_recommendation_service(
    pipeline_settings: Annotated[PipelineSettings, Depends(get_pipeline_settings)],
    embedding_client: Annotated[EmbeddingClientPort, Depends(get_embedding_client)],
    similarity_search: Annotated[SimilaritySearchPort, Depends(get_similarity_search)],
    completion_client: Annotated[CompletionClientPort, Depends(get_completion_client)],
    presenter: Annotated[ViewStatePresenter, Depends(get_presenter)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> RecommendationServicePort:
    return MovieRecommendationService(
        pipeline_settings=pipeline_settings,
        embedding_client=embedding_client,
        similarity_search=similarity_search,
        completion_client=completion_client,
        presenter=presenter,
        logger=logger,
    )
