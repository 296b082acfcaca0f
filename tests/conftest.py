from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from movie_matcher.app import app
from movie_matcher.applications.services.movie_recommendation_service import MovieRecommendationService
from movie_matcher.domain.models.match import MatchOutcome
from movie_matcher.domain.ports.services.completion_client import CompletionClientPort
from movie_matcher.domain.ports.services.embedding_client import EmbeddingClientPort
from movie_matcher.domain.ports.services.logger import LoggerPort
from movie_matcher.domain.ports.services.similarity_search import SimilaritySearchPort
from movie_matcher.infrastructure.adapters.services.view_state_presenter import ViewStatePresenter
from movie_matcher.infrastructure.config.dependencies import get_presenter, get_recommendation_service
from movie_matcher.infrastructure.config.settings import PipelineSettings, Settings

from factories import pipeline_factory


@pytest.fixture
def settings():
    return Settings(
        OPENAI_API_KEY="sk-test",
        SUPABASE_URL="https://project.supabase.co/",
        SUPABASE_API_KEY="supabase-test-key",
    )


@pytest.fixture
def pipeline_settings():
    return PipelineSettings()


@pytest.fixture
def mock_logger():
    return Mock(spec=LoggerPort)


@pytest.fixture
def preferences():
    return pipeline_factory.create_preferences()


@pytest.fixture
def movie_match():
    return pipeline_factory.create_match()


# Port doubles for orchestrator testing
@pytest.fixture
def mock_embedding_client():
    client = AsyncMock(spec=EmbeddingClientPort)
    client.create_embedding.return_value = pipeline_factory.create_embedding()
    return client


@pytest.fixture
def mock_similarity_search(movie_match):
    search = AsyncMock(spec=SimilaritySearchPort)
    search.match_movies.return_value = MatchOutcome.matched(movie_match)
    return search


@pytest.fixture
def mock_completion_client():
    client = AsyncMock(spec=CompletionClientPort)
    client.get_chat_completion.return_value = "Tenet (2020) - A mind-bending spy thriller"
    return client


@pytest.fixture
def presenter():
    return ViewStatePresenter()


@pytest.fixture
def recommendation_service(
    pipeline_settings, mock_embedding_client, mock_similarity_search, mock_completion_client, presenter, mock_logger
):
    return MovieRecommendationService(
        pipeline_settings=pipeline_settings,
        embedding_client=mock_embedding_client,
        similarity_search=mock_similarity_search,
        completion_client=mock_completion_client,
        presenter=presenter,
        logger=mock_logger,
    )


@pytest.fixture
def client(recommendation_service, presenter):
    """Test HTTP client with the pipeline wired to port doubles"""
    app.dependency_overrides[get_recommendation_service] = lambda: recommendation_service
    app.dependency_overrides[get_presenter] = lambda: presenter

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
