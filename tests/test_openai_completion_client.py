from unittest.mock import AsyncMock, Mock, patch

import pytest
from langchain_core.messages import HumanMessage, SystemMessage
from openai import OpenAIError

from movie_matcher.domain.exceptions import CompletionError
from movie_matcher.domain.models.preferences import UserPreferences
from movie_matcher.domain.services.prompt_builder import SYSTEM_PROMPT
from movie_matcher.infrastructure.adapters.services.openai_completion_client import OpenAICompletionClient

CHAT_CLASS = "movie_matcher.infrastructure.adapters.services.openai_completion_client.ChatOpenAI"


class TestOpenAICompletionClient:
    @pytest.fixture
    def mock_chat_class(self):
        with patch(CHAT_CLASS) as chat_class:
            chat_class.return_value.ainvoke = AsyncMock(
                return_value=Mock(content="Tenet (2020) - A mind-bending spy thriller")
            )
            yield chat_class

    @pytest.fixture
    def completion_client(self, mock_chat_class, settings, pipeline_settings, mock_logger):
        return OpenAICompletionClient(settings, pipeline_settings, mock_logger)

    def test_init_uses_sampling_parameters(self, completion_client, mock_chat_class):
        kwargs = mock_chat_class.call_args.kwargs
        assert kwargs["model"] == "gpt-4"
        assert kwargs["temperature"] == 0.8
        assert kwargs["frequency_penalty"] == 0.7
        assert kwargs["api_key"] == "sk-test"

    @pytest.mark.asyncio
    async def test_returns_text_verbatim(self, completion_client, movie_match, preferences):
        text = await completion_client.get_chat_completion(movie_match, preferences)

        assert text == "Tenet (2020) - A mind-bending spy thriller"

    @pytest.mark.asyncio
    async def test_sends_system_then_user_messages(self, completion_client, mock_chat_class, movie_match, preferences):
        await completion_client.get_chat_completion(movie_match, preferences)

        sent = mock_chat_class.return_value.ainvoke.await_args.args[0]
        assert isinstance(sent[0], SystemMessage)
        assert sent[0].content == SYSTEM_PROMPT
        assert all(isinstance(m, HumanMessage) for m in sent[1:])
        assert len(sent) == 5
        assert sent[-1].content.startswith(f"Context: {movie_match.content}.")

    @pytest.mark.asyncio
    async def test_empty_preferences_send_two_messages(self, completion_client, mock_chat_class, movie_match):
        await completion_client.get_chat_completion(movie_match, UserPreferences())

        sent = mock_chat_class.return_value.ainvoke.await_args.args[0]
        assert len(sent) == 2

    @pytest.mark.asyncio
    async def test_empty_content_becomes_empty_string(self, completion_client, mock_chat_class, movie_match, preferences):
        mock_chat_class.return_value.ainvoke.return_value = Mock(content=None)

        text = await completion_client.get_chat_completion(movie_match, preferences)

        assert text == ""

    @pytest.mark.asyncio
    async def test_service_error_is_wrapped(self, completion_client, mock_chat_class, movie_match, preferences):
        mock_chat_class.return_value.ainvoke.side_effect = OpenAIError("model overloaded")

        with pytest.raises(CompletionError, match="model overloaded"):
            await completion_client.get_chat_completion(movie_match, preferences)
