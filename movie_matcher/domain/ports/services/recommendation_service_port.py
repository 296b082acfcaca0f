from abc import ABC, abstractmethod
from typing import Optional

from movie_matcher.domain.models.preferences import UserPreferences
from movie_matcher.domain.models.recommendation import Recommendation


class RecommendationServicePort(ABC):
    """Port for one end-to-end recommendation run"""

    @abstractmethod
    async def run(self, preferences: UserPreferences) -> Optional[Recommendation]:
        """Run embedding, match and completion, then render the result.

        Returns None when any stage fails; nothing is rendered in that case.
        """
        pass
