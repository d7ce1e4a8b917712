"""Search orchestration: scrape, analyze, then prepare.

Drives one search through ``idle -> requesting_scrape -> requesting_analyze
-> prepared | failed``.  A failure in either backend call, or an analysis
payload that does not validate, ends the search with ``BackendError`` and
no partial result.
"""

from __future__ import annotations

import logging
import time

from pydantic import ValidationError

from social_analyzer.models.analysis import AnalysisResult
from social_analyzer.models.dashboard import PreparedResults
from social_analyzer.models.enums import SearchPhase
from social_analyzer.models.search import SearchRequest
from social_analyzer.services import backend
from social_analyzer.services.backend import BackendError
from social_analyzer.services.preparer import prepare_results

logger = logging.getLogger(__name__)


def _log_phase(phase: SearchPhase, request: SearchRequest, **extra: object) -> None:
    logger.info(
        "search_phase",
        extra={
            "phase": phase.value,
            "keyword": request.keyword,
            "platform": request.platform.value,
            **extra,
        },
    )


async def run_search(request: SearchRequest) -> PreparedResults:
    """Run a full search and return the prepared dashboard datasets."""
    start = time.monotonic()
    phase = SearchPhase.idle
    _log_phase(phase, request, timeframe=request.timeframe.value)

    try:
        phase = SearchPhase.requesting_scrape
        _log_phase(phase, request)
        posts = await backend.scrape(request)

        phase = SearchPhase.requesting_analyze
        _log_phase(phase, request)
        payload = await backend.analyze(posts)

        try:
            result = AnalysisResult.model_validate(payload)
        except ValidationError as exc:
            raise BackendError(
                f"Invalid analysis payload: {exc.error_count()} validation error(s)"
            ) from exc

        prepared = prepare_results(result)
    except BackendError as exc:
        _log_phase(
            SearchPhase.failed,
            request,
            failed_during=phase.value,
            error_message=exc.message,
        )
        raise

    _log_phase(
        SearchPhase.prepared,
        request,
        duration_seconds=round(time.monotonic() - start, 3),
    )
    return prepared
