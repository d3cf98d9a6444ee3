"""
Module for resolving a video ID to transcript text.

Captions are tried first; when they are unavailable the audio is downloaded,
transcoded and sent to speech-to-text.
"""

import os
import tempfile
import traceback
from typing import Callable, Optional

from ytdigest.core.captions import CaptionFetcher, derive_caption_title
from ytdigest.core.transcriber import AudioTranscriber
from ytdigest.core.youtube_downloader import YouTubeDownloader, transcode_to_flac
from ytdigest.models.schemas import TranscriptResult, TranscriptSource
from ytdigest.utils.exceptions import AcquisitionError
from ytdigest.utils.logger import logging


class AudioTranscriptionPipeline:
    """Download, transcode and transcribe the audio track of a video."""

    def __init__(
        self,
        transcriber: Optional[AudioTranscriber] = None,
        downloader_factory: Callable[[str], YouTubeDownloader] = YouTubeDownloader,
        transcoder: Callable[[str, str], str] = transcode_to_flac,
    ):
        self.transcriber = transcriber or AudioTranscriber()
        self.downloader_factory = downloader_factory
        self.transcoder = transcoder

    def is_configured(self) -> bool:
        return self.transcriber.is_configured()

    def run(self, video_id: str) -> TranscriptResult:
        """
        Transcribe the audio of a video.

        All intermediate files live in a temporary directory that is removed
        whether or not a step fails.

        Raises:
            AcquisitionError: naming the stage that failed
        """
        stage = "metadata"
        try:
            downloader = self.downloader_factory(video_id)
            media_info = downloader.get_media_info()
            logging.info(f"Video info retrieved: title={media_info.title!r} duration={media_info.duration}")

            with tempfile.TemporaryDirectory(prefix=f"ytdigest_{video_id}_") as workdir:
                stage = "download"
                audio_path = downloader.download_audio(workdir)

                stage = "transcode"
                flac_path = self.transcoder(audio_path, os.path.join(workdir, f"{video_id}.flac"))

                stage = "transcribe"
                text = self.transcriber.transcribe(flac_path)
        except AcquisitionError:
            raise
        except Exception as e:
            logging.error(f"Audio transcription failed at {stage} stage for video {video_id}: {str(e)}")
            logging.debug(traceback.format_exc())
            raise AcquisitionError(
                f"Audio transcription failed during {stage}: {str(e)}",
                stage=stage,
                video_id=video_id,
            ) from e

        if not text or not text.strip():
            raise AcquisitionError("Speech-to-text returned an empty transcript", stage="transcribe", video_id=video_id)

        logging.info(f"Transcription completed successfully, transcript length {len(text)}")
        return TranscriptResult(text=text, source=TranscriptSource.TRANSCRIBED, title=media_info.title)


class TranscriptAcquirer:
    """Ordered fallback chain: captions, then audio transcription."""

    def __init__(
        self,
        caption_fetcher: Optional[CaptionFetcher] = None,
        audio_pipeline: Optional[AudioTranscriptionPipeline] = None,
    ):
        self.caption_fetcher = caption_fetcher or CaptionFetcher()
        self.audio_pipeline = audio_pipeline or AudioTranscriptionPipeline()

    def acquire(self, video_id: str) -> TranscriptResult:
        """
        Resolve a video ID to transcript text.

        Args:
            video_id: YouTube video ID

        Returns:
            TranscriptResult tagged with its source

        Raises:
            AcquisitionError: If neither captions nor transcription succeed
        """
        logging.info(f"Attempting to fetch YouTube transcript for video {video_id}")
        try:
            entries = self.caption_fetcher.fetch(video_id)
            if not entries:
                raise ValueError("Caption track is empty")

            title = derive_caption_title(entries)
            logging.info(f"Successfully retrieved YouTube transcript ({len(entries)} entries)")
            return TranscriptResult(
                text=" ".join(entries),
                source=TranscriptSource.CAPTIONED,
                title=title,
            )
        except Exception as e:
            logging.info(f"YouTube transcript not available, falling back to audio transcription: {str(e)}")

        if not self.audio_pipeline.is_configured():
            raise AcquisitionError(
                "Transcript not available and speech-to-text is not configured for the audio fallback. "
                "Set GROQ_API_KEY to enable it.",
                stage="captions",
                video_id=video_id,
            )

        return self.audio_pipeline.run(video_id)
