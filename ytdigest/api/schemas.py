import datetime
from typing import List
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ytdigest.models.schemas import StoredSummary, TranscriptSource
from ytdigest.utils.helpers import extract_title_from_content


class HistoryItem(BaseModel):
    """Model for one stored summary in the history."""
    id: str
    video_id: str
    title: str
    content: str
    language: str
    mode: str
    source: TranscriptSource
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_stored(cls, summary: StoredSummary) -> "HistoryItem":
        return cls(
            id=str(summary.id),
            video_id=summary.video_id,
            title=extract_title_from_content(summary.content),
            content=summary.content,
            language=summary.language,
            mode=summary.mode,
            source=summary.source,
            created_at=summary.created_at,
            updated_at=summary.updated_at,
        )


class HistoryListResponse(BaseModel):
    """Model for the history list."""
    summaries: List[HistoryItem]


class HistoryDetailResponse(BaseModel):
    """Model for a single history entry."""
    summary: HistoryItem
