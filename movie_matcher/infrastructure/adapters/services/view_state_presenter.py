from movie_matcher.domain.models.recommendation import Recommendation
from movie_matcher.domain.models.view_state import ViewState
from movie_matcher.domain.ports.services.presenter import RecommendationPresenterPort


class ViewStatePresenter(RecommendationPresenterPort):
    """Keeps the page state in memory; the last render wins"""

    def __init__(self):
        self._state = ViewState()

    @property
    def state(self) -> ViewState:
        return self._state.model_copy()

    def render_recommendation(self, recommendation: Recommendation) -> None:
        self._state = ViewState(view="recommendation", recommendation=recommendation)

    def render_form(self) -> None:
        self._state = ViewState(view="form")
