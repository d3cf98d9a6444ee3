"""
Configuration for pytest tests.
"""

import os
import shutil
from pathlib import Path

# Must be set before the application modules read their configuration
TEST_DATA_DIR = Path("test_data")
os.environ.setdefault("DATA_DIR", str(TEST_DATA_DIR))
os.environ.setdefault("LOG_DIR", str(TEST_DATA_DIR / "logs"))
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "development"

import pytest
from unittest.mock import MagicMock
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ytdigest.core.providers import SummaryProvider
from ytdigest.db.crud import SummaryStore
from ytdigest.db.database import init_db
from ytdigest.models.schemas import ProviderChoice, TranscriptResult, TranscriptSource

PROVIDER_ENV_KEYS = ("GEMINI_API_KEY", "GROQ_API_KEY", "OPENAI_API_KEY")


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Remove the test data directory after the session."""
    yield
    shutil.rmtree(TEST_DATA_DIR, ignore_errors=True)


@pytest.fixture
def clean_provider_env(monkeypatch):
    """Remove every provider API key from the environment."""
    for key in PROVIDER_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class FakeProvider(SummaryProvider):
    """Provider returning canned responses, failing on selected calls."""

    choice = ProviderChoice.GEMINI
    env_key = "FAKE_PROVIDER_API_KEY"
    model = "fake-model"

    def __init__(self, responses=None, fail_on_call=None, api_key="test_api_key"):
        super().__init__(api_key=api_key)
        self.responses = list(responses or [])
        self.fail_on_call = fail_on_call
        self.prompts = []

    def _complete(self, prompt, api_key):
        self.prompts.append(prompt)
        if self.fail_on_call == len(self.prompts):
            raise RuntimeError("upstream timeout")
        if self.responses:
            return self.responses.pop(0)
        return f"Summary {len(self.prompts)}"


@pytest.fixture
def fake_provider():
    """A configured provider with default canned responses."""
    return FakeProvider()


@pytest.fixture
def sample_transcript():
    """Transcript splitting into three chunks at chunk_size=10, overlap=0."""
    return TranscriptResult(
        text="one two three four five six",
        source=TranscriptSource.CAPTIONED,
        title="Counting from one to six",
    )


@pytest.fixture
def fake_acquirer(sample_transcript):
    """Acquirer returning the sample transcript."""
    acquirer = MagicMock()
    acquirer.acquire.return_value = sample_transcript
    return acquirer


@pytest.fixture
def engine():
    """In-memory SQLite engine with the schema created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine):
    """SummaryStore backed by the in-memory engine."""
    return SummaryStore(sessionmaker(autocommit=False, autoflush=False, bind=engine))
