from movie_matcher.domain.models.recommendation import Recommendation

TITLE_DELIMITER = " - "


def parse_recommendation(text: str) -> Recommendation:
    """Split "Title (Year) - Description" on the first delimiter.

    Text without the delimiter is kept whole as the title with an empty
    description. Later delimiters stay inside the description. Each part is
    trimmed after the split, so a delimiter at the very start still counts.
    """
    title, _, description = text.partition(TITLE_DELIMITER)
    return Recommendation(title=title.strip(), description=description.strip())
