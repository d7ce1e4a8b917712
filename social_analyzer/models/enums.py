"""Enum types shared by request, upstream and response models."""

from enum import Enum


class SentimentLabel(str, Enum):
    """Overall sentiment classification returned by the backend."""
    positive = "positive"
    neutral = "neutral"
    negative = "negative"


class Platform(str, Enum):
    """Social platform to search. Only forwarded to the backend."""
    TWITTER = "TWITTER"
    REDDIT = "REDDIT"
    NEWS = "NEWS"


class Timeframe(str, Enum):
    """Search window offered by the search form."""
    last_24h = "24h"
    last_7d = "7d"
    last_30d = "30d"


class DistributionSource(str, Enum):
    """Where a resolved sentiment distribution came from."""
    upstream = "upstream"
    label_default = "label_default"


class SearchPhase(str, Enum):
    """Lifecycle of a single search request."""
    idle = "idle"
    requesting_scrape = "requesting_scrape"
    requesting_analyze = "requesting_analyze"
    prepared = "prepared"
    failed = "failed"
