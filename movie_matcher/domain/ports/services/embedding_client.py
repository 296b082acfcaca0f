from abc import ABC, abstractmethod
from typing import List

from movie_matcher.domain.models.preferences import UserPreferences


class EmbeddingClientPort(ABC):
    @abstractmethod
    async def create_embedding(self, preferences: UserPreferences) -> List[float]:
        """Embed the joined preference answers into a single vector"""
        pass
