"""
Data models for the YouTube digest application.
"""
import datetime
from enum import Enum
from typing import Optional, Literal, Union
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ytdigest.config import config


class TranscriptSource(str, Enum):
    """Where a transcript came from."""
    CAPTIONED = "captioned"
    TRANSCRIBED = "transcribed"


class ProviderChoice(str, Enum):
    """LLM backends that can generate summaries."""
    GEMINI = "gemini"
    GROQ = "groq"
    GPT4 = "gpt4"

    @property
    def display_name(self) -> str:
        return PROVIDER_DISPLAY_NAMES[self]


PROVIDER_DISPLAY_NAMES = {
    ProviderChoice.GEMINI: "Google Gemini",
    ProviderChoice.GROQ: "Groq",
    ProviderChoice.GPT4: "GPT-4",
}


class Stage(str, Enum):
    """Pipeline stages reported in progress events."""
    ANALYZING = "analyzing"
    PROCESSING = "processing"
    FINALIZING = "finalizing"
    SAVING = "saving"


class Chunk(BaseModel):
    """A bounded span of transcript text."""
    index: int
    text: str
    overlap_words: int = 0


class VideoMetadata(BaseModel):
    """Descriptive metadata for a video."""
    video_id: str
    title: str
    author: Optional[str] = None
    duration: Optional[int] = None


class TranscriptResult(BaseModel):
    """Transcript text together with its provenance."""
    text: str
    source: TranscriptSource
    title: str


class SummarizeRequest(BaseModel):
    """Model for requesting video summarization."""
    url: str
    language: str = "English"
    mode: str = "video"
    ai_model: str = Field(default=config.DEFAULT_AI_MODEL, alias="aiModel")

    model_config = ConfigDict(populate_by_name=True)


class _Event(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, use_enum_values=True)

    def to_line(self) -> str:
        """Serialize as one newline-terminated JSON object."""
        return self.model_dump_json(by_alias=True, exclude_none=True) + "\n"


class ProgressEvent(_Event):
    """Non-terminal progress tick."""
    type: Literal["progress"] = "progress"
    current_chunk: int
    total_chunks: int
    stage: Stage
    message: str


class CompleteEvent(_Event):
    """Terminal event carrying the finished summary."""
    type: Literal["complete"] = "complete"
    summary: str
    source: TranscriptSource
    status: str = "completed"
    warning: Optional[str] = None


class ErrorEvent(_Event):
    """Terminal event carrying a failure description."""
    type: Literal["error"] = "error"
    error: str
    details: str


StreamEvent = Union[ProgressEvent, CompleteEvent, ErrorEvent]


class StoredSummary(BaseModel):
    """A persisted summary, keyed by (video_id, language)."""
    id: int
    video_id: str
    title: str
    content: str
    language: str
    mode: str
    source: TranscriptSource
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = {"from_attributes": True}

