"""
YouTube Video Digest Application.

This application fetches the transcript of a YouTube video (captions first,
audio transcription as a fallback), summarizes it chunk by chunk with a
selectable LLM provider and streams progress while doing so.
"""

from ytdigest.config import config

__version__ = config.APP_VERSION
