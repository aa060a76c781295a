"""
Command line entry point for ytdigest.
"""

import argparse
import sys
from dotenv import load_dotenv

from ytdigest.config import config
from ytdigest.core.history import JsonHistoryStore, SummaryHistory
from ytdigest.core.pipeline import save_summary, summarize_youtube_video
from ytdigest.core.strategies import build_summary_service
from ytdigest.utils.error_handling import SummarizerError
from ytdigest.utils.helpers import link_timestamps
from ytdigest.utils.logger import logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="YouTube Video Summarizer")
    parser.add_argument("url", help="YouTube video URL")
    parser.add_argument("--sentences", type=int, default=config.DEFAULT_NUM_SENTENCES,
                        help="Number of sentences or key points in the summary")
    parser.add_argument("--extractive", action="store_true",
                        help="Skip the LLM and use the extractive summarizer")
    parser.add_argument("--output", help="Output file path for the summary JSON")
    parser.add_argument("--history-file", default=str(config.HISTORY_FILE),
                        help="JSON file holding the summary history")
    parser.add_argument("--no-history", action="store_true",
                        help="Do not record the summary in the history")
    return parser


def main(argv=None) -> int:
    """Main function to run the application from command line."""
    args = build_parser().parse_args(argv)

    # Load environment variables
    load_dotenv()

    try:
        summary = summarize_youtube_video(
            args.url,
            service=build_summary_service(config, extractive_only=args.extractive),
            num_sentences=args.sentences,
        )
    except SummarizerError as e:
        logging.error(f"{e.message}: {e.details}" if e.details else e.message)
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    save_summary(summary, args.output)

    if not args.no_history:
        history = SummaryHistory(JsonHistoryStore(args.history_file), limit=config.HISTORY_LIMIT)
        history.add(summary.url, summary.video_id, summary.summary)

    print("\n" + "=" * 80)
    print(f"Summary of {summary.url} ({summary.method.value})")
    print("=" * 80)
    print(link_timestamps(summary.summary, summary.video_id))
    print("=" * 80)
    return 0


if __name__ == "__main__":
    sys.exit(main())
