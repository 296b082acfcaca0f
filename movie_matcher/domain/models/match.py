from typing import Optional

from pydantic import BaseModel


class MovieMatch(BaseModel):
    """Top stored passage returned by the similarity search"""

    content: str
    similarity: Optional[float] = None


class MatchOutcome(BaseModel):
    """Result of a similarity search: a match, nothing, or a service error"""

    match: Optional[MovieMatch] = None
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.match is not None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @classmethod
    def matched(cls, match: MovieMatch) -> "MatchOutcome":
        return cls(match=match)

    @classmethod
    def empty(cls) -> "MatchOutcome":
        return cls()

    @classmethod
    def failure(cls, error: str) -> "MatchOutcome":
        return cls(error=error)
