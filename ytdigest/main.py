"""
Main entry point for the YouTube Video Digest application.
"""

import argparse
import sys
from typing import Optional

from dotenv import load_dotenv

from ytdigest.core.pipeline import SummarizationPipeline, create_pipeline
from ytdigest.db.database import init_db
from ytdigest.models.schemas import CompleteEvent, ErrorEvent, ProgressEvent, ProviderChoice, SummarizeRequest


def summarize_youtube_video(
    url: str,
    language: str = "English",
    mode: str = "video",
    ai_model: str = "gemini",
    pipeline: Optional[SummarizationPipeline] = None,
) -> int:
    """
    Summarize a video, printing progress as it arrives.

    Returns:
        Process exit code (0 on success)
    """
    pipeline = pipeline or create_pipeline()
    request = SummarizeRequest(url=url, language=language, mode=mode, ai_model=ai_model)

    exit_code = 1
    for event in pipeline.stream(request):
        if isinstance(event, ProgressEvent):
            print(f"[{event.stage}] {event.current_chunk}/{event.total_chunks} {event.message}")
        elif isinstance(event, CompleteEvent):
            print("\n" + "=" * 80)
            print(f"Summary (transcript source: {event.source})")
            print("=" * 80)
            print(event.summary)
            print("=" * 80)
            if event.warning:
                print(f"WARNING: {event.warning}", file=sys.stderr)
            exit_code = 0
        elif isinstance(event, ErrorEvent):
            print(f"ERROR: {event.error}", file=sys.stderr)
            print(event.details, file=sys.stderr)

    return exit_code


def main():
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="YouTube Video Digest")
    parser.add_argument("url", help="YouTube video URL")
    parser.add_argument("--language", default="English", help="Target language of the summary")
    parser.add_argument("--mode", default="video", help="Summary mode (video or podcast)")
    parser.add_argument("--model", default="gemini", choices=[c.value for c in ProviderChoice],
                        help="AI provider used for generation")

    args = parser.parse_args()

    # Load environment variables
    load_dotenv()
    init_db()

    sys.exit(summarize_youtube_video(args.url, args.language, args.mode, args.model))


if __name__ == "__main__":
    main()
