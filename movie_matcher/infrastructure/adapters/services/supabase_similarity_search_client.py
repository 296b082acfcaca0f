import asyncio
from typing import Any, Dict, List

import requests
from pydantic import ValidationError

from movie_matcher.domain.exceptions import SimilaritySearchError
from movie_matcher.domain.models.match import MatchOutcome, MovieMatch
from movie_matcher.domain.ports.services.logger import LoggerPort
from movie_matcher.domain.ports.services.similarity_search import SimilaritySearchPort
from movie_matcher.infrastructure.config.settings import PipelineSettings, Settings


class SupabaseSimilaritySearchClient(SimilaritySearchPort):
    """Calls the vector-search stored procedure through Supabase's PostgREST RPC endpoint"""

    def __init__(self, settings: Settings, pipeline_settings: PipelineSettings, logger: LoggerPort):
        self.base_url = settings.SUPABASE_URL.rstrip("/")
        self.api_key = settings.SUPABASE_API_KEY
        self.function_name = pipeline_settings.match_function
        self.timeout = pipeline_settings.request_timeout
        self.logger = logger

    @property
    def rpc_url(self) -> str:
        return f"{self.base_url}/rest/v1/rpc/{self.function_name}"

    def _headers(self) -> Dict[str, str]:
        return {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def _post(self, payload: Dict[str, Any]) -> requests.Response:
        self.logger.debug(f"rpc POST {self.rpc_url}")
        try:
            return await asyncio.to_thread(
                requests.post, self.rpc_url, json=payload, headers=self._headers(), timeout=self.timeout
            )
        except requests.RequestException as exc:
            raise SimilaritySearchError(f"Similarity search request failed: {exc}") from exc

    @staticmethod
    def _error_message(resp: requests.Response) -> str:
        try:
            body = resp.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return f"{resp.status_code}: {body['message']}"
        return f"{resp.status_code}: {resp.text or resp.reason}"

    async def match_movies(
        self, embedding: List[float], match_threshold: float = 0.01, match_count: int = 1
    ) -> MatchOutcome:
        payload = {
            "query_embedding": embedding,
            "match_threshold": match_threshold,
            "match_count": match_count,
        }
        resp = await self._post(payload)

        if resp.status_code >= 400:
            error = self._error_message(resp)
            self.logger.error(f"Semantic search error: {error}")
            return MatchOutcome.failure(error)

        try:
            rows = resp.json()
        except ValueError:
            self.logger.error("Semantic search returned a non-JSON body")
            return MatchOutcome.failure("Malformed search response")

        if not isinstance(rows, list):
            self.logger.error(f"Semantic search returned {type(rows).__name__}, expected a list")
            return MatchOutcome.failure("Malformed search response")
        if not rows:
            self.logger.info("No movies above the similarity threshold")
            return MatchOutcome.empty()

        top = rows[0]
        if not isinstance(top, dict) or "content" not in top:
            self.logger.error("Top search row has no content field")
            return MatchOutcome.failure("Malformed search response")

        try:
            match = MovieMatch(content=top["content"], similarity=top.get("similarity"))
        except ValidationError as exc:
            self.logger.error(f"Top search row is malformed: {exc}")
            return MatchOutcome.failure("Malformed search response")

        self.logger.info(f"Top match ({match.similarity}): {match.content}")
        return MatchOutcome.matched(match)
