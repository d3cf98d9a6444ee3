"""
Configuration settings for the YouTube digest application.
"""

import os
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "YouTube Video Digest"
    APP_VERSION = "0.2.0"

    # Data directories
    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    DATA_DIR = Path(os.getenv("DATA_DIR", BASE_DIR / "data"))
    LOG_DIR = Path(os.getenv("LOG_DIR", BASE_DIR / "logs"))

    # Database
    DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{DATA_DIR}/ytdigest.db")

    # Provider credentials (read again at call time by the adapters)
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
    GROQ_API_KEY = os.getenv("GROQ_API_KEY")
    OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")

    # Default models
    DEFAULT_AI_MODEL = os.getenv("DEFAULT_AI_MODEL", "gemini")
    DEFAULT_TRANSCRIPTION_MODEL = "whisper-large-v3-turbo"

    # Chunking
    CHUNK_SIZE = int(os.getenv("CHUNK_SIZE", "7000"))
    CHUNK_OVERLAP = int(os.getenv("CHUNK_OVERLAP", "1000"))

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        cls.DATA_DIR.mkdir(parents=True, exist_ok=True)

        # Validate provider credentials
        if not any([cls.GEMINI_API_KEY, cls.GROQ_API_KEY, cls.OPENAI_API_KEY]):
            print("WARNING: no AI provider API key is set (GEMINI_API_KEY, GROQ_API_KEY, OPENAI_API_KEY).")
            print("Please set at least one in the .env file or environment variables.")


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
config.initialize()
