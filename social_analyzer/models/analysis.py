"""Pydantic models for the analysis backend's ``/analyze`` response.

An ``AnalysisResult`` is produced once per search and treated as read-only
while the dashboard datasets are prepared from it.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from social_analyzer.models.enums import SentimentLabel


class Keyword(BaseModel):
    """A keyword and its frequency across the analyzed posts."""
    model_config = ConfigDict(frozen=True)

    word: str
    count: int = Field(..., ge=0)


class Hashtag(BaseModel):
    """A hashtag and its frequency across the analyzed posts."""
    model_config = ConfigDict(frozen=True)

    tag: str
    count: int = Field(..., ge=0)


class SentimentDistribution(BaseModel):
    """Three-way percentage split, expected (not required) to sum to 100."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    positive: int | float
    neutral: int | float
    negative: int | float


class Sentiment(BaseModel):
    """Overall sentiment of the analyzed corpus.

    The backend sends the label under ``sentiment``; ``label`` is accepted
    as well.
    """
    model_config = ConfigDict(frozen=True)

    score: float = Field(..., ge=0.0, le=1.0, allow_inf_nan=False)
    label: SentimentLabel = Field(
        ..., validation_alias=AliasChoices("label", "sentiment")
    )
    distribution: SentimentDistribution | None = None


class AnalysisResult(BaseModel):
    """Full payload returned by the backend for one search."""
    model_config = ConfigDict(frozen=True)

    keywords: list[Keyword] = Field(default_factory=list)
    hashtags: list[Hashtag] = Field(default_factory=list)
    sentiment: Sentiment
