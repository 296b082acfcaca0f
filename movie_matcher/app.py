from http import HTTPStatus

from fastapi import FastAPI

from movie_matcher.applications.interfaces.dtos.message import Message
from movie_matcher.infrastructure.logging.logger import setup_logging
from movie_matcher.presentation.routers import recommendations

setup_logging()

app = FastAPI(title="movie-matcher")

app.include_router(recommendations.router)


@app.get("/", status_code=HTTPStatus.OK, response_model=Message)
def read_root():
    return {"message": "Tell us what you feel like watching at POST /recommendations/"}
