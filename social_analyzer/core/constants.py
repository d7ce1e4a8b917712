"""Application constants.

Fixed parameters of the result preparation transforms: noise tokens,
list limits, display scaling, and the label-only sentiment fallback.
These are part of the algorithm, not configuration.
"""

# ---------------------------------------------------------------------------
# Keyword filtering
# Upstream tokenization leaks URL fragments into the keyword list.
# ---------------------------------------------------------------------------
KEYWORD_STOP_WORDS: frozenset[str] = frozenset({
    "https", "http", "com", "www", "tco",
})

MAX_KEYWORDS: int = 50

# ---------------------------------------------------------------------------
# Display scaling
# ---------------------------------------------------------------------------
HASHTAG_SCALE_MAX: int = 100

WORDCLOUD_LOG_FACTOR: float = 20.0
WORDCLOUD_MAX_VALUE: float = 100.0

# ---------------------------------------------------------------------------
# Sentiment distribution fallback
# Used only when the backend returns a single label without a distribution.
# Heuristic display weights, not an estimate.
# ---------------------------------------------------------------------------
DEFAULT_DOMINANT_WEIGHT: int = 60
DEFAULT_MINOR_WEIGHT: int = 20

# A supplied distribution is expected to sum to ~100; deviations beyond
# this are logged but the values are passed through untouched.
DISTRIBUTION_SUM_TOLERANCE: float = 1.0
