from typing import List

from movie_matcher.domain.models.conversation import ChatMessage
from movie_matcher.domain.models.match import MovieMatch
from movie_matcher.domain.models.preferences import UserPreferences

REFUSAL_ANSWER = "Sorry, I don't know the answer."

SYSTEM_PROMPT = (
    "You are an enthusiastic movie expert who loves recommending movies to people.\n"
    "You will be given two pieces of information - some context about movies and a question.\n"
    "Your main job is to formulate a detailed answer to the question using the provided context.\n"
    f'If you are unsure and cannot find the answer in the context, say, "{REFUSAL_ANSWER}"\n'
    "Please do not make up the answer."
)

RECOMMENDATION_QUESTION = "A movie I would enjoy based on my preferences is."
RECOMMENDATION_FORMAT = (
    "Movie Title (Year) - Description. Don't use any quotation marks for the title and description."
)


def build_preference_message(question: str, answer: str) -> ChatMessage:
    return ChatMessage(role="user", content=f"You asked me: {question} My answer is: {answer}")


def build_context_message(match: MovieMatch) -> ChatMessage:
    return ChatMessage(
        role="user",
        content=(
            f"Context: {match.content}.\n"
            f"Question: {RECOMMENDATION_QUESTION}\n"
            f"Format: {RECOMMENDATION_FORMAT}"
        ),
    )


def build_conversation(match: MovieMatch, preferences: UserPreferences) -> List[ChatMessage]:
    """Build the chat messages for a recommendation request.

    The system instruction comes first, then one user message per answered
    preference (unanswered ones are skipped), then the context and output
    format as the final user message.
    """
    messages = [ChatMessage(role="system", content=SYSTEM_PROMPT)]
    messages.extend(
        build_preference_message(question, answer) for question, answer in preferences.answered_questions()
    )
    messages.append(build_context_message(match))
    return messages
