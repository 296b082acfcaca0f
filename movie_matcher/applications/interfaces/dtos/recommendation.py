from typing import Literal, Optional

from pydantic import BaseModel

from movie_matcher.domain.models.view_state import ViewState


class RecommendationResponse(BaseModel):
    """Response schema for a rendered recommendation"""

    title: str
    description: str


class ViewStateResponse(BaseModel):
    """Response schema for what the page currently shows"""

    view: Literal["form", "recommendation"]
    recommendation: Optional[RecommendationResponse] = None

    @classmethod
    def from_domain(cls, state: ViewState) -> "ViewStateResponse":
        recommendation = None
        if state.recommendation is not None:
            recommendation = RecommendationResponse(**state.recommendation.model_dump())
        return cls(view=state.view, recommendation=recommendation)
