"""Shared error types for feature commands."""


class FeatureError(Exception):
    """Base error for all feature command failures."""


class FeatureRequestError(FeatureError):
    """An upstream HTTP API call failed."""

    def __init__(self, feature: str, detail: str = "") -> None:
        self.feature = feature
        self.detail = detail
        super().__init__(f"{feature} request failed" + (f": {detail}" if detail else ""))
