from typing import Optional

from pydantic import BaseModel

from movie_matcher.domain.models.preferences import UserPreferences


class PreferencesRequest(BaseModel):
    """Request schema for the preferences form"""

    favorite_movie: Optional[str] = None
    new_classic: Optional[str] = None
    fun_serious: Optional[str] = None

    def to_domain(self) -> UserPreferences:
        return UserPreferences(**self.model_dump())
