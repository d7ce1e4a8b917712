"""Response models for the dashboard renderings.

These are derived view-model values recomputed for every analysis result:
the ranked keyword list, the hashtag bars, the word cloud, and the
sentiment donut.
"""

from pydantic import BaseModel, Field

from social_analyzer.models.enums import DistributionSource, SentimentLabel


# --- Keyword list ---

class FilteredKeyword(BaseModel):
    """A keyword that survived noise filtering and truncation."""
    word: str
    count: int


# --- Hashtag bars ---

class ScaledHashtag(BaseModel):
    """A hashtag with its count rescaled to 0-100 for relative sizing."""
    tag: str
    count: int
    normalized_count: int = Field(
        ..., ge=0, le=100, serialization_alias="normalizedCount"
    )


# --- Word cloud ---

class WordCloudEntry(BaseModel):
    """A word cloud term with a log-compressed display magnitude."""
    text: str
    value: float = Field(..., ge=0.0, le=100.0)


# --- Sentiment donut ---

class ResolvedDistribution(BaseModel):
    """Positive / neutral / negative percentages for the breakdown chart."""
    positive: int | float
    neutral: int | float
    negative: int | float


class PreparedResults(BaseModel):
    """Full response for POST /api/v1/results/prepare and /api/v1/search."""
    keywords: list[FilteredKeyword] = []
    hashtags: list[ScaledHashtag] = []
    word_cloud: list[WordCloudEntry] = Field(default=[], serialization_alias="wordCloud")
    distribution: ResolvedDistribution
    distribution_source: DistributionSource = Field(..., serialization_alias="distributionSource")
    label: SentimentLabel
    score: float
    score_percent: int = Field(..., serialization_alias="scorePercent")
