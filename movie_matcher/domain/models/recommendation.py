from pydantic import BaseModel


class Recommendation(BaseModel):
    """Domain model representing a single movie recommendation"""

    title: str
    description: str = ""
