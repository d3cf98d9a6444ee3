"""
API routes for the YouTube digest application.
"""

import traceback
from typing import Dict, Iterator

from fastapi import APIRouter, HTTPException, Depends, Path
from fastapi.responses import StreamingResponse

from ytdigest.api.schemas import HistoryItem, HistoryListResponse, HistoryDetailResponse
from ytdigest.core.pipeline import SummarizationPipeline, create_pipeline
from ytdigest.core.providers import check_api_key_availability
from ytdigest.db.crud import SummaryStore
from ytdigest.models.schemas import SummarizeRequest
from ytdigest.utils.exceptions import PersistenceError
from ytdigest.utils.logger import logging

router = APIRouter(prefix="/api", tags=["youtube"])

STREAM_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
}


def get_pipeline() -> SummarizationPipeline:
    """Dependency providing a pipeline wired with the default collaborators."""
    return create_pipeline()


def get_store() -> SummaryStore:
    """Dependency providing the summary store."""
    return SummaryStore()


@router.post("/summarize")
def summarize_video(
    request: SummarizeRequest,
    pipeline: SummarizationPipeline = Depends(get_pipeline),
):
    """
    Summarize a YouTube video by URL.

    The response body is a stream of newline-delimited JSON progress events
    ending with one ``complete`` or ``error`` event.
    """
    def event_lines() -> Iterator[str]:
        for event in pipeline.stream(request):
            yield event.to_line()

    return StreamingResponse(event_lines(), media_type="text/event-stream", headers=STREAM_HEADERS)


@router.get("/summarize")
def get_available_models() -> Dict[str, bool]:
    """Report which providers have an API key configured."""
    return check_api_key_availability()


@router.get("/history", response_model=HistoryListResponse)
def list_history(store: SummaryStore = Depends(get_store)):
    """List stored summaries, newest first."""
    try:
        summaries = store.list_recent()
    except PersistenceError as e:
        logging.error(f"Error fetching summaries: {e.message}")
        raise HTTPException(status_code=500, detail="Failed to fetch summaries")

    return HistoryListResponse(summaries=[HistoryItem.from_stored(s) for s in summaries])


@router.get("/history/{summary_id}", response_model=HistoryDetailResponse)
def get_history_entry(
    summary_id: int = Path(..., description="Stored summary ID"),
    store: SummaryStore = Depends(get_store),
):
    """Get one stored summary by ID."""
    try:
        summary = store.get(summary_id)
    except PersistenceError as e:
        logging.error(f"Error fetching summary: {e.message}")
        logging.error(traceback.format_exc())
        raise HTTPException(status_code=500, detail="Failed to fetch summary")

    if not summary:
        raise HTTPException(status_code=404, detail="Summary not found")

    return HistoryDetailResponse(summary=HistoryItem.from_stored(summary))
