"""
Incremental summarization pipeline.

``SummarizationPipeline.stream`` is a generator of progress events: it checks
the summary store, acquires the transcript, summarizes it chunk by chunk,
combines the chunk summaries and persists the result. Exactly one terminal
event (``complete`` or ``error``) ends every stream.
"""

import traceback
from typing import Dict, Iterator, Optional

from ytdigest.config import config
from ytdigest.core.acquirer import TranscriptAcquirer
from ytdigest.core.chunker import split_transcript
from ytdigest.core.prompts import SECTION_SEPARATOR, build_chunk_prompt, build_summary_prompt
from ytdigest.core.providers import SummaryProvider, build_providers, parse_provider_choice
from ytdigest.db.crud import SummaryStore
from ytdigest.models.schemas import (
    CompleteEvent,
    ErrorEvent,
    ProgressEvent,
    ProviderChoice,
    Stage,
    StreamEvent,
    SummarizeRequest,
    TranscriptResult,
)
from ytdigest.utils.exceptions import (
    ConfigurationError,
    InvalidRequestError,
    PersistenceError,
    ProviderError,
    YTDigestError,
)
from ytdigest.utils.helpers import extract_video_id
from ytdigest.utils.logger import logging

SAVE_WARNING = "Failed to save to history"


class SummarizationPipeline:
    """Class orchestrating acquisition, chunked generation and persistence."""

    def __init__(
        self,
        store: SummaryStore,
        acquirer: TranscriptAcquirer,
        providers: Optional[Dict[ProviderChoice, SummaryProvider]] = None,
        chunk_size: int = config.CHUNK_SIZE,
        chunk_overlap: int = config.CHUNK_OVERLAP,
    ):
        self.store = store
        self.acquirer = acquirer
        self.providers = providers if providers is not None else build_providers()
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap

    def stream(self, request: SummarizeRequest) -> Iterator[StreamEvent]:
        """
        Run the pipeline for one request, yielding events as it goes.

        No exception escapes the generator; failures become a single ``error``
        event. If the consumer stops iterating, the generator is closed and
        no further work is scheduled.
        """
        try:
            yield from self._run(request)
        except YTDigestError as e:
            logging.error(f"Error processing video: {e.message}")
            yield ErrorEvent(error=e.message, details=f"{type(e).__name__}: {e.message}")
        except Exception as e:
            logging.error(f"Error processing video: {str(e)}")
            logging.error(traceback.format_exc())
            yield ErrorEvent(error="Failed to process video", details=f"{type(e).__name__}: {str(e)}")
        finally:
            logging.debug("Progress stream closed")

    def _resolve_provider(self, request: SummarizeRequest) -> SummaryProvider:
        choice = parse_provider_choice(request.ai_model)
        provider = self.providers.get(choice)
        if provider is None:
            raise InvalidRequestError(f"{choice.display_name} is not available", provider=choice.value)
        return provider

    def _cached(self, video_id: str, language: str):
        try:
            return self.store.find(video_id, language)
        except PersistenceError as e:
            logging.warning(f"Summary cache lookup failed, continuing without cache: {e.message}")
            return None

    def _run(self, request: SummarizeRequest) -> Iterator[StreamEvent]:
        provider = self._resolve_provider(request)
        video_id = extract_video_id(request.url)
        if not video_id:
            raise InvalidRequestError("Invalid YouTube URL", url=request.url)

        logging.info(
            f"Processing video request: video={video_id} language={request.language} "
            f"mode={request.mode} model={provider.name}"
        )

        cached = self._cached(video_id, request.language)
        if cached:
            logging.info(f"Returning cached summary {cached.id} for {video_id}/{request.language}")
            yield CompleteEvent(summary=cached.content, source=cached.source)
            return

        if not provider.is_configured():
            raise ConfigurationError(provider.missing_key_message(), provider=provider.name)

        logging.info(f"Using {provider.display_name} model for generation...")
        yield ProgressEvent(
            current_chunk=0,
            total_chunks=1,
            stage=Stage.ANALYZING,
            message="Fetching video transcript...",
        )
        transcript = self.acquirer.acquire(video_id)

        summary, total_chunks = yield from self._summarize(transcript, request, provider)

        yield from self._save(video_id, request, transcript, summary, total_chunks)

    def _summarize(
        self,
        transcript: TranscriptResult,
        request: SummarizeRequest,
        provider: SummaryProvider,
    ) -> Iterator[StreamEvent]:
        chunks = split_transcript(transcript.text, self.chunk_size, self.chunk_overlap)
        total_chunks = len(chunks)
        logging.info(f"Transcript ({transcript.source}) of length {len(transcript.text)} split into {total_chunks} chunks")

        intermediate_summaries = []
        for chunk in chunks:
            yield ProgressEvent(
                current_chunk=chunk.index + 1,
                total_chunks=total_chunks,
                stage=Stage.PROCESSING,
                message=f"Processing section {chunk.index + 1} of {total_chunks}...",
            )
            prompt = build_chunk_prompt(chunk.index, request.language, chunk.text)
            intermediate_summaries.append(provider.generate(prompt))

        yield ProgressEvent(
            current_chunk=total_chunks,
            total_chunks=total_chunks,
            stage=Stage.FINALIZING,
            message="Creating final summary...",
        )
        combined_summary = SECTION_SEPARATOR.join(intermediate_summaries)
        summary = provider.generate(build_summary_prompt(combined_summary, request.language, request.mode))

        if not summary:
            raise ProviderError("No summary content generated", provider=provider.name)

        return summary, total_chunks

    def _save(
        self,
        video_id: str,
        request: SummarizeRequest,
        transcript: TranscriptResult,
        summary: str,
        total_chunks: int,
    ) -> Iterator[StreamEvent]:
        yield ProgressEvent(
            current_chunk=total_chunks,
            total_chunks=total_chunks,
            stage=Stage.SAVING,
            message="Saving summary to history...",
        )

        try:
            saved = self.store.upsert(
                video_id=video_id,
                language=request.language,
                content=summary,
                mode=request.mode,
                source=transcript.source,
                title=transcript.title,
            )
        except PersistenceError as e:
            logging.error(f"Failed to save to database: {e.message}")
            yield CompleteEvent(summary=summary, source=transcript.source, warning=SAVE_WARNING)
            return

        yield CompleteEvent(summary=saved.content, source=saved.source)


def create_pipeline() -> SummarizationPipeline:
    """Wire the pipeline with the default store, acquirer and providers."""
    return SummarizationPipeline(store=SummaryStore(), acquirer=TranscriptAcquirer())
