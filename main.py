#!/usr/bin/env python3
"""
Main entry point for Newslingo - crypto news cleaner, translator and summarizer.

Commands:
1. translate: Clean a text and translate it (Turkish) or just clean it (English)
2. summarize: Summarize a news item and classify its sentiment
3. batch: Translate every line of a file concurrently
"""
import argparse
import asyncio
import json
import sys

# Ensure environment is loaded before importing config-dependent modules
from utils import ensure_environment_loaded, env_utils
ensure_environment_loaded()

from utils.logging_utils import log_error, log_info, log_success

def parse_arguments(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description='Newslingo - crypto news cleaner, translator and summarizer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py translate "<p>Bitcoin hits $50k</p>"          # Translate to Turkish
  python main.py translate "<p>Bitcoin hits $50k</p>" --lang en # Clean only
  python main.py summarize "ETH surges" --body "Ether rose 10%"  # Turkish summary
  python main.py summarize "ETH surges" --lang en --json         # English summary as JSON
  python main.py batch headlines.txt                             # Translate one text per line
  python main.py --check-config                                  # Validate environment and exit
        """
    )

    parser.add_argument(
        '--check-config',
        action='store_true',
        help='Validate required environment variables and exit'
    )

    subparsers = parser.add_subparsers(dest='command')

    translate_parser = subparsers.add_parser('translate', help='Translate a single text')
    translate_parser.add_argument('text', help='Raw text, may contain HTML')

    summarize_parser = subparsers.add_parser('summarize', help='Summarize a news item')
    summarize_parser.add_argument('title', help='News title')
    summarize_parser.add_argument('--body', default=None, help='News body')

    batch_parser = subparsers.add_parser('batch', help='Translate every line of a file')
    batch_parser.add_argument('file', help='UTF-8 file with one text per line')

    for sub in (translate_parser, summarize_parser, batch_parser):
        sub.add_argument('--lang', choices=['tr', 'en'], default='tr', help='Target language (default: tr)')
        sub.add_argument('--json', action='store_true', help='Print the result as JSON')

    return parser.parse_args(argv)

async def run_command(args):
    """Run the selected command and return its printable result."""
    from enricher.models import EnrichmentRequest, TargetLanguage
    from enricher.summarizer import enrich
    from enricher.translator import translate, translate_batch

    language = TargetLanguage(args.lang)

    if args.command == 'translate':
        result = await translate(args.text, language)
        return json.dumps({"text": result}, ensure_ascii=False) if args.json else result

    if args.command == 'summarize':
        result = await enrich(EnrichmentRequest(args.title, args.body, language))
        if args.json:
            return json.dumps(result.to_dict(), ensure_ascii=False)
        return f"[{result.sentiment.value}] {result.summary}"

    if args.command == 'batch':
        with open(args.file, 'r', encoding='utf-8') as f:
            texts = [line.strip() for line in f if line.strip()]
        log_info('Pipeline', f"Translating {len(texts)} texts")
        results = await translate_batch(texts, language)
        if args.json:
            return json.dumps(results, ensure_ascii=False, indent=2)
        return "\n".join(results)

    raise ValueError(f"Unknown command: {args.command}")

def check_config():
    """Validate required configuration, exiting with status 1 when incomplete."""
    env_utils.validate_config()
    log_success('Pipeline', "Configuration is valid")

if __name__ == "__main__":
    try:
        args = parse_arguments()

        if args.check_config:
            check_config()
            sys.exit(0)

        if not args.command:
            log_error('Pipeline', "No command given, use --help for usage")
            sys.exit(2)

        print(asyncio.run(run_command(args)))

    except KeyboardInterrupt:
        log_info('Pipeline', "Interrupted by user")
        sys.exit(1)
    except OSError as e:
        log_error('Pipeline', f"Could not read input: {e}")
        sys.exit(1)
