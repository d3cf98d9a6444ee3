"""
Helper utility functions for the YouTube digest application.
"""

import re
from typing import Optional


VIDEO_ID_PATTERNS = [
    r"(?:watch\?(?:.*&)?v=)([0-9A-Za-z_-]{11})",
    r"(?:youtu\.be\/)([0-9A-Za-z_-]{11})",
    r"(?:embed\/|shorts\/|live\/|\/v\/)([0-9A-Za-z_-]{11})",
]

TITLE_MARKERS = ("🎯 TITLE:", "🎯 TITEL:", "🎙️ TITLE:", "🎙️ TITEL:")

DEFAULT_HISTORY_TITLE = "Untitled Summary"


def extract_video_id(url: str) -> Optional[str]:
    """Extract the video ID from a YouTube URL (or accept a bare ID)."""
    if not url:
        return None

    url = url.strip()
    if re.fullmatch(r"[0-9A-Za-z_-]{11}", url):
        return url

    for pattern in VIDEO_ID_PATTERNS:
        match = re.search(pattern, url)
        if match:
            return match.group(1)

    return None


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length.

    Args:
        text: Text to truncate
        max_length: Maximum length
        suffix: Suffix to add if truncated

    Returns:
        Truncated text
    """
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix


def extract_title_from_content(content: Optional[str]) -> str:
    """
    Derive a display title from stored summary content.

    Looks for a ``🎯 TITLE:``-style header line first, then falls back to the
    first non-blank line without its leading marker glyph.
    """
    if not content:
        return DEFAULT_HISTORY_TITLE

    lines = content.split("\n")
    for line in lines:
        trimmed = line.strip()
        if trimmed.startswith(TITLE_MARKERS):
            title = trimmed.split(":", 1)[1].strip()
            if title:
                return title

    for line in lines:
        if line.strip():
            return re.sub(r"^(?:🎯|🎙️|🎙)\s*", "", line.strip())

    return DEFAULT_HISTORY_TITLE
