"""Feature commands agents can invoke: web search and tweet fetch."""

from agentcli.features.errors import FeatureError, FeatureRequestError
from agentcli.features.search import SearchResult, format_results, search_web
from agentcli.features.twitter import get_tweets

__all__ = [
    "FeatureError",
    "FeatureRequestError",
    "SearchResult",
    "format_results",
    "get_tweets",
    "search_web",
]
