#!/usr/bin/env python3
"""
Command-line interface for yt-extractor.

Usage:
  yt "https://youtube.com/watch?v=xxx"              # full JSON record
  yt --duration "https://youtu.be/xxx"              # minutes only
  yt --transcript "https://youtu.be/xxx"            # transcript text only
  yt --comments --length 300 --all "https://youtu.be/xxx"

Output modes (first flag wins):
  --duration    : Video length in whole minutes
  --transcript  : Transcript text
  --comments    : Comments as JSON
  (none)        : {"transcript", "duration", "comments"} as JSON
"""

import argparse
import logging
import sys
from dataclasses import replace

from . import __version__
from .collector import YouTubeCollector
from .config import Settings, EnvFileCredentialProvider
from .errors import ExtractorError
from .storage import JsonStorage, OutputMode


def select_mode(args) -> OutputMode:
    """Pick the output projection from the CLI flags."""
    if args.duration:
        return OutputMode.DURATION
    if args.transcript:
        return OutputMode.TRANSCRIPT
    if args.comments:
        return OutputMode.COMMENTS
    return OutputMode.FULL


def build_settings(args) -> Settings:
    """Load settings from --config (if any) and apply CLI overrides."""
    settings = Settings.from_file(args.config) if args.config else Settings()

    overrides = {}
    if args.lang is not None:
        overrides["lang"] = args.lang
    if args.length is not None:
        overrides["comment_limit"] = args.length
    if args.all:
        overrides["expand_replies"] = True
    if args.env_file:
        overrides["env_file"] = args.env_file
    if args.compact:
        overrides["pretty_json"] = False

    return replace(settings, **overrides)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='yt',
        description='yt-extractor - extract duration, transcript and comments from a YouTube video',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Full record as JSON
  yt "https://www.youtube.com/watch?v=xxx"

  # First 250 comments, with full replies for busy threads
  yt --comments --length 250 --all "https://youtu.be/xxx"

  # Save the transcript to a file as well
  yt --transcript -o transcript.txt "https://youtu.be/xxx"

The API key is read from YOUTUBE_API_KEY, seeded from ~/.config/fabric/.env.
        """,
    )

    parser.add_argument('--version', '-v', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('url', help='YouTube video URL')

    # Output projection
    parser.add_argument('--duration', action='store_true', help='Output only the duration')
    parser.add_argument('--transcript', action='store_true', help='Output only the transcript')
    parser.add_argument('--comments', action='store_true', help='Output only the comments')

    # Comment options
    parser.add_argument('--length', type=int, default=None,
                        help='Max comments to fetch (default: 100)')
    parser.add_argument('--all', action='store_true',
                        help='Fetch all replies for threads with more than 5 replies')

    # Transcript options
    parser.add_argument('--lang', default=None,
                        help='Language for the transcript (default: en)')

    # Output / config
    parser.add_argument('--output', '-o', help='Also save the output to this file')
    parser.add_argument('--compact', action='store_true', help='Compact JSON output')
    parser.add_argument('--config', '-c', help='YAML/JSON settings file')
    parser.add_argument('--env-file', help='Env file holding YOUTUBE_API_KEY')
    parser.add_argument('--verbose', action='store_true', help='Print progress to stderr')

    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    mode = select_mode(args)

    try:
        settings = build_settings(args)
        with YouTubeCollector(
            settings,
            credentials=EnvFileCredentialProvider(settings.env_file, settings.api_key_env),
        ) as collector:
            result = collector.collect(args.url, include_comments=mode.needs_comments)
    except (ExtractorError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    storage = JsonStorage(output_path=args.output, pretty=settings.pretty_json)
    print(storage.render(result, mode))

    if args.output:
        try:
            path = storage.save(result, mode)
        except OSError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        logging.getLogger(__name__).info("Saved: %s", path)

    return 0


if __name__ == '__main__':
    sys.exit(main())
