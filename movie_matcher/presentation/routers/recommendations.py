from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from movie_matcher.applications.interfaces.dtos.preferences import PreferencesRequest
from movie_matcher.applications.interfaces.dtos.recommendation import ViewStateResponse
from movie_matcher.domain.ports.services.recommendation_service_port import RecommendationServicePort
from movie_matcher.infrastructure.adapters.services.view_state_presenter import ViewStatePresenter
from movie_matcher.infrastructure.config.dependencies import get_presenter, get_recommendation_service
from movie_matcher.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)

router = APIRouter(prefix="/recommendations", tags=["recommendations"])

PresenterDep = Annotated[ViewStatePresenter, Depends(get_presenter)]


@router.post("/", response_model=ViewStateResponse)
async def submit_preferences(
    request: PreferencesRequest,
    recommendation_service: Annotated[RecommendationServicePort, Depends(get_recommendation_service)],
    presenter: PresenterDep,
):
    """Run one recommendation pipeline for the submitted form"""
    recommendation = await recommendation_service.run(request.to_domain())
    if recommendation is None:
        logger.warning("Submission produced no recommendation")
        raise HTTPException(status_code=HTTPStatus.BAD_GATEWAY, detail="No recommendation could be produced")

    return ViewStateResponse.from_domain(presenter.state)


@router.get("/view", response_model=ViewStateResponse)
async def read_view(presenter: PresenterDep):
    return ViewStateResponse.from_domain(presenter.state)


@router.post("/reset", response_model=ViewStateResponse)
async def go_again(presenter: PresenterDep):
    """Switch the page back to the preferences form"""
    presenter.render_form()
    return ViewStateResponse.from_domain(presenter.state)


@router.get("/health")
async def recommendation_health_check():
    """Health check endpoint for recommendation service"""
    return {"status": "healthy", "service": "movie-matcher", "message": "Recommendation service is operational"}
