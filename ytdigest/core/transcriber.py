"""
Module for transcribing audio files using Groq's API.
"""

import os
from pathlib import Path
from typing import Optional

from groq import Groq

from ytdigest.config import config
from ytdigest.utils.logger import logging


class AudioTranscriber:
    """Class to handle audio transcription operations."""

    def __init__(self, api_key: Optional[str] = None, model: str = config.DEFAULT_TRANSCRIPTION_MODEL):
        """
        Initialize the transcriber.

        Args:
            api_key: Groq API key (if None, will try to get from environment)
            model: Whisper model name
        """
        self._api_key = api_key
        self.model = model
        self._client = None

    @property
    def api_key(self) -> Optional[str]:
        return self._api_key or os.getenv("GROQ_API_KEY")

    def is_configured(self) -> bool:
        return bool(self.api_key)

    @property
    def client(self) -> Groq:
        if self._client is None:
            if not self.api_key:
                raise ValueError("Groq API key is required for audio transcription.")
            self._client = Groq(api_key=self.api_key)
        return self._client

    def transcribe(self, audio_path: str) -> str:
        """
        Transcribe an audio file.

        Args:
            audio_path: Path to the audio file

        Returns:
            Transcript text
        """
        if not os.path.isfile(audio_path):
            raise FileNotFoundError(f"Audio file not found at {audio_path}")

        audio_file_path = Path(audio_path)
        logging.info(f"Transcribing audio file: {audio_path} ({audio_file_path.stat().st_size} bytes)")

        with open(audio_path, "rb") as audio_file:
            transcription = self.client.audio.transcriptions.create(
                file=(audio_file_path.name, audio_file.read()),
                model=self.model,
                response_format="json",
                temperature=0.0,
            )

        logging.info("Transcription complete.")
        return transcription.text
