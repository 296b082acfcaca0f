from typing import List

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI
from openai import OpenAIError

from movie_matcher.domain.exceptions import CompletionError
from movie_matcher.domain.models.conversation import ChatMessage
from movie_matcher.domain.models.match import MovieMatch
from movie_matcher.domain.models.preferences import UserPreferences
from movie_matcher.domain.ports.services.completion_client import CompletionClientPort
from movie_matcher.domain.ports.services.logger import LoggerPort
from movie_matcher.domain.services.prompt_builder import build_conversation
from movie_matcher.infrastructure.config.settings import PipelineSettings, Settings


def to_langchain_messages(messages: List[ChatMessage]) -> List[BaseMessage]:
    return [
        SystemMessage(content=m.content) if m.role == "system" else HumanMessage(content=m.content) for m in messages
    ]


class OpenAICompletionClient(CompletionClientPort):
    def __init__(self, settings: Settings, pipeline_settings: PipelineSettings, logger: LoggerPort):
        self.llm = ChatOpenAI(
            model=pipeline_settings.chat_model,
            api_key=settings.OPENAI_API_KEY,
            temperature=pipeline_settings.temperature,
            frequency_penalty=pipeline_settings.frequency_penalty,
        )
        self.logger = logger

    async def get_chat_completion(self, match: MovieMatch, preferences: UserPreferences) -> str:
        messages = build_conversation(match, preferences)
        try:
            resp = await self.llm.ainvoke(to_langchain_messages(messages))
        except OpenAIError as exc:
            raise CompletionError(f"Chat completion failed: {exc}") from exc

        content = getattr(resp, "content", "") or ""
        self.logger.info(f"Completion: {content}")
        return content
