from abc import ABC, abstractmethod

from movie_matcher.domain.models.recommendation import Recommendation


class RecommendationPresenterPort(ABC):
    """Presentation collaborator toggling between the form and a result"""

    @abstractmethod
    def render_recommendation(self, recommendation: Recommendation) -> None:
        pass

    @abstractmethod
    def render_form(self) -> None:
        pass
