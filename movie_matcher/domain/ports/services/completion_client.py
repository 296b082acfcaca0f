from abc import ABC, abstractmethod

from movie_matcher.domain.models.match import MovieMatch
from movie_matcher.domain.models.preferences import UserPreferences


class CompletionClientPort(ABC):
    @abstractmethod
    async def get_chat_completion(self, match: MovieMatch, preferences: UserPreferences) -> str:
        """Ask the chat model for a recommendation, returning its raw text"""
        pass
