from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

PREFERENCE_QUESTIONS: List[Tuple[str, str]] = [
    ("favorite_movie", "What's your favorite movie and why?"),
    ("new_classic", "Are you in the mood for something new or a classic?"),
    ("fun_serious", "Do you wanna have fun or do you want something serious?"),
]


class UserPreferences(BaseModel):
    """The three answers collected from the preferences form"""

    model_config = ConfigDict(frozen=True)

    favorite_movie: Optional[str] = None
    new_classic: Optional[str] = None
    fun_serious: Optional[str] = None

    @property
    def query_text(self) -> str:
        """Space-joined answers, missing ones as empty strings"""
        return " ".join(getattr(self, field) or "" for field, _ in PREFERENCE_QUESTIONS)

    def answered_questions(self) -> List[Tuple[str, str]]:
        """(question, answer) pairs for every non-empty answer, in form order"""
        return [
            (question, getattr(self, field))
            for field, question in PREFERENCE_QUESTIONS
            if getattr(self, field)
        ]
