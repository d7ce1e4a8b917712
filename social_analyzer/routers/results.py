"""Dashboard result endpoints.

POST /results/prepare -- prepare datasets from an analysis payload.
POST /search          -- scrape + analyze via the backend, then prepare.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from social_analyzer.models.analysis import AnalysisResult
from social_analyzer.models.dashboard import PreparedResults
from social_analyzer.models.search import SearchRequest
from social_analyzer.services.backend import BackendError
from social_analyzer.services.preparer import prepare_results
from social_analyzer.services.search import run_search

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/results/prepare", response_model=PreparedResults)
async def prepare(result: AnalysisResult) -> PreparedResults:
    """Return word cloud, keyword, hashtag and sentiment datasets."""
    return prepare_results(result)


@router.post("/search", response_model=PreparedResults)
async def search(request: SearchRequest) -> PreparedResults:
    """Run a full search against the backend and prepare its result.

    Returns 502 with the backend's message when scraping or analysis fails.
    """
    try:
        return await run_search(request)
    except BackendError as exc:
        logger.error(
            "search_failed",
            extra={
                "keyword": request.keyword,
                "platform": request.platform.value,
                "error_message": exc.message,
            },
        )
        raise HTTPException(status_code=502, detail=exc.message) from exc
