"""Web search via the Tavily search API."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel, field_validator

from agentcli.features.errors import FeatureError, FeatureRequestError

logger = logging.getLogger(__name__)

TAVILY_SEARCH_URL = "https://api.tavily.com/search"


class SearchResult(BaseModel):
    title: str = ""
    url: str = ""
    content: str = ""

    @field_validator("title", "url", "content", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


async def search_web(
    query: str,
    *,
    api_key: str,
    max_results: int = 5,
    client: httpx.AsyncClient | None = None,
) -> list[SearchResult]:
    """Search the web and return the top results.

    Args:
        query: Free-text search query.
        api_key: Tavily API key.
        max_results: Upper bound on returned results.
        client: Optional pre-configured HTTP client (tests pass one with a
            mock transport).

    Raises:
        FeatureError: Empty query or missing key.
        FeatureRequestError: Transport or HTTP failure, or a response that
            is not shaped like a Tavily result list.
    """
    if not query.strip():
        raise FeatureError("Search query must not be empty")
    if not api_key:
        raise FeatureError("TAVILY_API_KEY not set")

    payload: dict[str, Any] = {
        "api_key": api_key,
        "query": query,
        "max_results": max_results,
    }

    logger.debug("search_web: %r (max_results=%d)", query, max_results)
    try:
        if client is not None:
            response = await client.post(TAVILY_SEARCH_URL, json=payload)
        else:
            async with httpx.AsyncClient(timeout=30.0) as owned:
                response = await owned.post(TAVILY_SEARCH_URL, json=payload)
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPError as exc:
        raise FeatureRequestError("search-web", str(exc)) from exc
    except ValueError as exc:
        raise FeatureRequestError("search-web", f"invalid JSON response: {exc}") from exc

    try:
        results = _parse_results(data)
    except (TypeError, ValueError) as exc:
        raise FeatureRequestError("search-web", f"unexpected response: {exc}") from exc
    return results[:max_results]


def _parse_results(data: Any) -> list[SearchResult]:
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")
    items = data.get("results") or []
    if not isinstance(items, list):
        raise TypeError("'results' is not a list")
    return [SearchResult.model_validate(item) for item in items]


def format_results(results: list[SearchResult]) -> str:
    """Render results as numbered plain-text entries."""
    if not results:
        return "No results found."
    blocks = []
    for index, result in enumerate(results, start=1):
        blocks.append(f"{index}. {result.title}\n   {result.url}\n   {result.content}".rstrip())
    return "\n\n".join(blocks)
