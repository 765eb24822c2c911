"""``agentcli get-tweets`` — recent tweets from a user."""

from __future__ import annotations

import asyncio

import click

from agentcli.cli_commands._output import console


@click.command("get-tweets")
@click.argument("username")
@click.option(
    "--limit",
    default=20,
    show_default=True,
    type=click.IntRange(min=1),
    help="Maximum number of tweets to fetch.",
)
@click.option(
    "--bearer-token",
    envvar="TWITTER_BEARER_TOKEN",
    default=None,
    help="X API bearer token (defaults to $TWITTER_BEARER_TOKEN).",
)
def get_tweets_cmd(username: str, limit: int, bearer_token: str | None) -> None:
    """Get recent tweets from USERNAME. Do not include the @ symbol."""
    from agentcli.features.errors import FeatureError
    from agentcli.features.twitter import get_tweets

    try:
        tweets = asyncio.run(get_tweets(username, limit, bearer_token=bearer_token or ""))
    except FeatureError as exc:
        console.print(f"❌ Error fetching tweets: {exc}", markup=False)
        return

    if not tweets:
        console.print(f"📝 No recent tweets from @{username.lstrip('@')}", markup=False)
        return
    console.print("📝 " + "\n".join(tweets), markup=False)
