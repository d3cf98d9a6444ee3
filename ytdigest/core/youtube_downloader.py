"""
YouTube audio download and transcoding module.
"""

import os
import re
import subprocess
from typing import Optional

from pytubefix import YouTube

from ytdigest.models.schemas import VideoMetadata
from ytdigest.utils.logger import logging

PREFERRED_AUDIO_CODEC = "opus"

# Normalized speech-to-text input: mono, 16 kHz, FLAC
NORM_SAMPLE_RATE = 16000
NORM_CHANNELS = 1


def _bitrate_kbps(stream) -> int:
    """Parse a pytubefix ``abr`` string such as '160kbps'."""
    match = re.match(r"(\d+)", str(getattr(stream, "abr", "") or ""))
    return int(match.group(1)) if match else 0


def _is_preferred_codec(stream) -> bool:
    return PREFERRED_AUDIO_CODEC in str(getattr(stream, "audio_codec", "") or "").lower()


class YouTubeDownloader:
    """Class to handle fetching metadata and audio for one video."""

    def __init__(self, video_id: str):
        """
        Initialize the downloader for a video.

        Args:
            video_id: YouTube video ID
        """
        self.video_id = video_id
        self.url = f"https://www.youtube.com/watch?v={video_id}"
        self.yt = YouTube(self.url)

    def get_media_info(self) -> VideoMetadata:
        """Extract metadata from YouTube video."""
        return VideoMetadata(
            video_id=self.video_id,
            title=self.yt.title,
            author=self.yt.author,
            duration=self.yt.length,
        )

    def select_audio_stream(self):
        """
        Pick the audio-only stream to download.

        Opus streams are preferred; within the same codec preference the
        highest bitrate wins.
        """
        audio_streams = list(self.yt.streams.filter(only_audio=True))
        if not audio_streams:
            raise ValueError("No suitable audio format found")

        audio_streams.sort(key=lambda s: (_is_preferred_codec(s), _bitrate_kbps(s)), reverse=True)
        stream = audio_streams[0]
        logging.info(
            f"Selected audio format: codec={getattr(stream, 'audio_codec', None)} "
            f"bitrate={getattr(stream, 'abr', None)} mime={getattr(stream, 'mime_type', None)}"
        )
        return stream

    def download_audio(self, output_directory: str, filename: Optional[str] = None) -> str:
        """
        Download the selected audio stream.

        Args:
            output_directory: Directory to write into
            filename: File name (defaults to '<video_id>_temp.<subtype>')

        Returns:
            Path to the downloaded file
        """
        stream = self.select_audio_stream()
        subtype = getattr(stream, "subtype", None) or "webm"
        filename = filename or f"{self.video_id}_temp.{subtype}"

        logging.info(f"Downloading audio: {self.yt.title}")
        output_path = stream.download(output_path=output_directory, filename=filename)

        if not os.path.exists(output_path) or os.path.getsize(output_path) == 0:
            raise ValueError("Downloaded audio file is empty")

        logging.info(f"Audio saved to: {output_path} ({os.path.getsize(output_path)} bytes)")
        return output_path


def transcode_to_flac(input_path: str, output_path: str, timeout: int = 600) -> str:
    """
    Convert audio to mono 16 kHz FLAC with ffmpeg.

    Returns:
        Path to the converted file
    """
    args = [
        "ffmpeg",
        "-y",
        "-i", input_path,
        "-ar", str(NORM_SAMPLE_RATE),
        "-ac", str(NORM_CHANNELS),
        "-c:a", "flac",
        output_path,
    ]

    logging.info("Converting audio to FLAC format...")
    result = subprocess.run(args, capture_output=True, text=True, timeout=timeout)
    if result.returncode != 0:
        stderr = result.stderr or ""
        raise RuntimeError(f"ffmpeg failed (rc={result.returncode}): {stderr[-300:]}")

    if not os.path.exists(output_path) or os.path.getsize(output_path) == 0:
        raise RuntimeError("Converted FLAC file is empty")

    logging.info(f"Audio conversion completed: {output_path}")
    return output_path
