from abc import ABC, abstractmethod
from typing import List

from movie_matcher.domain.models.match import MatchOutcome


class SimilaritySearchPort(ABC):
    @abstractmethod
    async def match_movies(
        self, embedding: List[float], match_threshold: float = 0.01, match_count: int = 1
    ) -> MatchOutcome:
        """Return the top stored passage for the embedding.

        Service-reported errors come back as a failed outcome, never raised.
        """
        pass
