"""
Launch the YouTube Video Digest API with uvicorn.
"""

import os
import shutil
import argparse
import uvicorn
from dotenv import load_dotenv

from ytdigest.config import config
from ytdigest.core.providers import check_api_key_availability


def main():
    load_dotenv()

    parser = argparse.ArgumentParser(description="YouTube Video Digest API")
    parser.add_argument("--host", default=os.getenv("API_HOST", "0.0.0.0"), help="Interface to listen on")
    parser.add_argument("--port", type=int, default=int(os.getenv("API_PORT", "8000")), help="Port to listen on")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes (development)")
    args = parser.parse_args()

    config.initialize()

    print(f"{config.APP_NAME} v{config.APP_VERSION} on http://{args.host}:{args.port}")
    print(f"Summary store: {config.DATABASE_URL}")
    for name, configured in check_api_key_availability().items():
        print(f"  provider {name:<7} {'ready' if configured else 'no API key'}")

    # Audio fallback needs ffmpeg for the FLAC conversion
    if shutil.which("ffmpeg") is None:
        print("ffmpeg not found on PATH: videos without captions cannot be transcribed")

    uvicorn.run(
        "ytdigest.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
