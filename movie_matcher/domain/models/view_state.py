from typing import Literal, Optional

from pydantic import BaseModel

from movie_matcher.domain.models.recommendation import Recommendation


class ViewState(BaseModel):
    """What the page currently shows: the input form or a recommendation"""

    view: Literal["form", "recommendation"] = "form"
    recommendation: Optional[Recommendation] = None
