"""Recent tweets for a user via the X (Twitter) API v2."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from agentcli.features.errors import FeatureError, FeatureRequestError

logger = logging.getLogger(__name__)

TWITTER_API_BASE = "https://api.twitter.com/2"

# API v2 accepts max_results in [5, 100].
_MIN_PAGE = 5
_MAX_PAGE = 100


async def get_tweets(
    username: str,
    limit: int = 20,
    *,
    bearer_token: str,
    client: httpx.AsyncClient | None = None,
) -> list[str]:
    """Return the text of up to *limit* recent tweets by *username*.

    Retweets and replies are excluded. A leading ``@`` on *username* is
    ignored.

    Raises:
        FeatureError: Bad arguments, missing token or unknown user.
        FeatureRequestError: Transport or HTTP failure, or a malformed response.
    """
    handle = username.strip().lstrip("@")
    if not handle:
        raise FeatureError("A Twitter username is required")
    if limit < 1:
        raise FeatureError("limit must be at least 1")
    if not bearer_token:
        raise FeatureError("TWITTER_BEARER_TOKEN not set")

    headers = {"Authorization": f"Bearer {bearer_token}"}
    if client is not None:
        return await _fetch(client, handle, limit, headers)
    async with httpx.AsyncClient(timeout=30.0) as owned:
        return await _fetch(owned, handle, limit, headers)


async def _fetch(
    client: httpx.AsyncClient, handle: str, limit: int, headers: dict[str, str]
) -> list[str]:
    user = await _get_json(client, f"{TWITTER_API_BASE}/users/by/username/{handle}", headers)
    found = user.get("data")
    user_id = found.get("id") if isinstance(found, dict) else None
    if not user_id:
        raise FeatureError(f"Twitter user not found: {handle}")

    params = {
        "max_results": max(_MIN_PAGE, min(limit, _MAX_PAGE)),
        "tweet.fields": "created_at,text",
        "exclude": "retweets,replies",
    }
    timeline = await _get_json(client, f"{TWITTER_API_BASE}/users/{user_id}/tweets", headers, params)
    items = timeline.get("data") or []
    if not isinstance(items, list):
        raise FeatureRequestError("get-tweets", "unexpected response: 'data' is not a list")
    tweets = [item.get("text") or "" for item in items if isinstance(item, dict)]
    logger.debug("get_tweets: fetched %d tweet(s) for @%s", len(tweets), handle)
    return tweets[:limit]


async def _get_json(
    client: httpx.AsyncClient,
    url: str,
    headers: dict[str, str],
    params: dict[str, Any] | None = None,
) -> dict[str, Any]:
    try:
        response = await client.get(url, headers=headers, params=params)
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPError as exc:
        raise FeatureRequestError("get-tweets", str(exc)) from exc
    except ValueError as exc:
        raise FeatureRequestError("get-tweets", f"invalid JSON response: {exc}") from exc
    if not isinstance(data, dict):
        raise FeatureRequestError(
            "get-tweets", f"unexpected response: expected a JSON object, got {type(data).__name__}"
        )
    return data
