"""
Tests for the audio transcriber module.
"""

import os
import pytest
from unittest.mock import patch, MagicMock

from ytdigest.core.transcriber import AudioTranscriber


@pytest.fixture
def mock_groq_client():
    """Fixture to mock the Groq client."""
    with patch('ytdigest.core.transcriber.Groq') as mock_groq:
        mock_client = mock_groq.return_value

        mock_response = MagicMock()
        mock_response.text = "This is a test transcript"
        mock_client.audio.transcriptions.create.return_value = mock_response

        mock_client.groq_class = mock_groq
        yield mock_client


@pytest.fixture
def audio_file(tmp_path):
    path = tmp_path / "abc123def45.flac"
    path.write_bytes(b"test audio data")
    return str(path)


@patch.dict(os.environ, {"GROQ_API_KEY": "test_api_key"})
def test_init_transcriber():
    """Test initializing the transcriber."""
    transcriber = AudioTranscriber()
    assert transcriber.api_key == "test_api_key"
    assert transcriber.is_configured()


def test_unconfigured_without_key(clean_provider_env):
    transcriber = AudioTranscriber()

    assert transcriber.is_configured() is False
    with pytest.raises(ValueError):
        transcriber.client


@patch.dict(os.environ, {"GROQ_API_KEY": "test_api_key"})
def test_transcribe(mock_groq_client, audio_file):
    """Test transcribing audio file."""
    transcriber = AudioTranscriber(model="whisper-large-v3-turbo")
    text = transcriber.transcribe(audio_file)

    assert text == "This is a test transcript"
    mock_groq_client.groq_class.assert_called_once_with(api_key="test_api_key")

    kwargs = mock_groq_client.audio.transcriptions.create.call_args.kwargs
    assert kwargs["file"] == ("abc123def45.flac", b"test audio data")
    assert kwargs["model"] == "whisper-large-v3-turbo"
    assert kwargs["temperature"] == 0.0


def test_transcribe_file_not_found(mock_groq_client):
    """Test transcribing with non-existent audio file."""
    transcriber = AudioTranscriber(api_key="test_api_key")

    with pytest.raises(FileNotFoundError):
        transcriber.transcribe("/tmp/nonexistent_file.flac")

    mock_groq_client.audio.transcriptions.create.assert_not_called()
