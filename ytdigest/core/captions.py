"""
Module for fetching existing caption tracks from YouTube.
"""

import re
from typing import List, Optional, Sequence

from youtube_transcript_api import YouTubeTranscriptApi, NoTranscriptFound

from ytdigest.utils.helpers import truncate_text
from ytdigest.utils.logger import logging

DEFAULT_VIDEO_TITLE = "YouTube Video Summary"


class CaptionFetcher:
    """Class to retrieve caption entries for a video."""

    def __init__(self, languages: Optional[Sequence[str]] = None, api: Optional[YouTubeTranscriptApi] = None):
        """
        Args:
            languages: Preferred caption languages, tried in order
            api: YouTubeTranscriptApi instance (one is created if None)
        """
        self.languages = list(languages or ["en", "de"])
        self.api = api or YouTubeTranscriptApi()

    def fetch(self, video_id: str) -> List[str]:
        """
        Fetch the caption entries of a video.

        Falls back to the first listed track when none of the preferred
        languages is available.

        Returns:
            Caption text entries in playback order

        Raises:
            Whatever youtube-transcript-api raises when captions are unavailable
        """
        transcript_list = self.api.list(video_id)
        try:
            transcript = transcript_list.find_transcript(self.languages)
        except NoTranscriptFound:
            transcript = next(iter(transcript_list), None)
            if transcript is None:
                raise

        fetched = transcript.fetch()
        entries = [snippet.text.strip() for snippet in fetched if snippet.text and snippet.text.strip()]
        logging.info(f"Fetched {len(entries)} caption entries for video {video_id} ({transcript.language_code})")
        return entries


def derive_caption_title(entries: List[str]) -> str:
    """
    Derive a fallback title from the first caption entries.

    Uses the text before the first sentence terminator in the first five
    entries, capped at 100 characters.
    """
    first_lines = " ".join(entries[:5])
    title = re.split(r"[.!?]", first_lines, maxsplit=1)[0].strip()
    title = truncate_text(title, 100)

    if len(title) < 10:
        title = DEFAULT_VIDEO_TITLE

    return title
