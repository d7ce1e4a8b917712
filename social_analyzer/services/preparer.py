"""Result preparation service for the dashboard renderings.

Turns one ``AnalysisResult`` into bounded datasets for the word cloud, the
ranked keyword list, the hashtag bars, and the sentiment donut.  Every
function here is pure and total: empty or all-zero input yields an empty
or zero result, never an exception.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from social_analyzer.core.constants import (
    DEFAULT_DOMINANT_WEIGHT,
    DEFAULT_MINOR_WEIGHT,
    DISTRIBUTION_SUM_TOLERANCE,
    HASHTAG_SCALE_MAX,
    KEYWORD_STOP_WORDS,
    MAX_KEYWORDS,
    WORDCLOUD_LOG_FACTOR,
    WORDCLOUD_MAX_VALUE,
)
from social_analyzer.models.analysis import (
    AnalysisResult,
    Hashtag,
    Keyword,
    Sentiment,
)
from social_analyzer.models.dashboard import (
    FilteredKeyword,
    PreparedResults,
    ResolvedDistribution,
    ScaledHashtag,
    WordCloudEntry,
)
from social_analyzer.models.enums import DistributionSource, SentimentLabel

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (display rounding)."""
    return math.floor(value + 0.5)


# ---------------------------------------------------------------------------
# Keyword list
# ---------------------------------------------------------------------------

def filter_keywords(keywords: Iterable[Keyword]) -> list[FilteredKeyword]:
    """Drop URL-fragment noise tokens and keep the first ``MAX_KEYWORDS``.

    Stop words are matched case-insensitively against the whole word.
    Input order is kept; the backend already sorts by frequency.
    """
    filtered: list[FilteredKeyword] = []
    for kw in keywords:
        if kw.word.lower() in KEYWORD_STOP_WORDS:
            continue
        filtered.append(FilteredKeyword(word=kw.word, count=kw.count))
        if len(filtered) >= MAX_KEYWORDS:
            break
    return filtered


# ---------------------------------------------------------------------------
# Hashtag bars
# ---------------------------------------------------------------------------

def normalize_hashtags(hashtags: Iterable[Hashtag]) -> list[ScaledHashtag]:
    """Rescale hashtag counts to 0-100 relative to the largest count.

    The divisor is floored at 1 so all-zero input scales to zeros.  No
    truncation and no re-sorting.
    """
    items = list(hashtags)
    max_count = max((h.count for h in items), default=0)
    max_count = max(max_count, 1)

    return [
        ScaledHashtag(
            tag=h.tag,
            count=h.count,
            normalized_count=_round_half_up(h.count / max_count * HASHTAG_SCALE_MAX),
        )
        for h in items
    ]


# ---------------------------------------------------------------------------
# Sentiment donut
# ---------------------------------------------------------------------------

def _default_distribution(label: SentimentLabel) -> ResolvedDistribution:
    """Build the label-only fallback split.

    This is a display heuristic so the donut always has three visible
    slices.  It is not an estimate of the real distribution.
    """
    weights = {
        member.value: (
            DEFAULT_DOMINANT_WEIGHT if member == label else DEFAULT_MINOR_WEIGHT
        )
        for member in SentimentLabel
    }
    return ResolvedDistribution(**weights)


def resolve_distribution(sentiment: Sentiment) -> ResolvedDistribution:
    """Return the backend's distribution, or the label-based fallback.

    A supplied distribution is passed through unchanged even if it does
    not sum to 100.  ``sentiment.score`` is not consulted.
    """
    supplied = sentiment.distribution
    if supplied is None:
        logger.debug(
            "sentiment_distribution_defaulted",
            extra={"label": sentiment.label.value},
        )
        return _default_distribution(sentiment.label)

    total = supplied.positive + supplied.neutral + supplied.negative
    if abs(total - 100) > DISTRIBUTION_SUM_TOLERANCE:
        logger.warning(
            "sentiment_distribution_sum_mismatch",
            extra={"total": total},
        )

    return ResolvedDistribution(
        positive=supplied.positive,
        neutral=supplied.neutral,
        negative=supplied.negative,
    )


# ---------------------------------------------------------------------------
# Word cloud
# ---------------------------------------------------------------------------

def project_word_cloud(filtered: Iterable[FilteredKeyword]) -> list[WordCloudEntry]:
    """Map filtered keywords to word cloud entries.

    ``value = min(ln(count + 1) * 20, 100)`` so a few very frequent terms
    do not swamp the layout.
    """
    return [
        WordCloudEntry(
            text=kw.word,
            value=min(math.log(kw.count + 1) * WORDCLOUD_LOG_FACTOR, WORDCLOUD_MAX_VALUE),
        )
        for kw in filtered
    ]


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------

def prepare_results(result: AnalysisResult) -> PreparedResults:
    """Prepare every dashboard dataset for a single analysis result."""
    keywords = filter_keywords(result.keywords)
    hashtags = normalize_hashtags(result.hashtags)
    distribution = resolve_distribution(result.sentiment)

    source = (
        DistributionSource.upstream
        if result.sentiment.distribution is not None
        else DistributionSource.label_default
    )

    logger.info(
        "results_prepared",
        extra={
            "keywords_in": len(result.keywords),
            "keywords_out": len(keywords),
            "hashtags": len(hashtags),
            "distribution_source": source.value,
        },
    )

    return PreparedResults(
        keywords=keywords,
        hashtags=hashtags,
        word_cloud=project_word_cloud(keywords),
        distribution=distribution,
        distribution_source=source,
        label=result.sentiment.label,
        score=result.sentiment.score,
        score_percent=_round_half_up(result.sentiment.score * 100),
    )
