"""Command-line interface for PlateLog."""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from .core.config import settings
from .core.constants import FileConstants
from .core.parser import parse_review
from .core.analysis import analyze_posts
from .utils.data_prep import (
    PostLoadError, load_posts, prepare_export, stamp_export, export_to_json,
)

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT,
    )


def cmd_parse(args):
    """Parse a single caption."""
    review = parse_review(args.caption, args.timestamp)
    if review is None:
        print("Not a review: no N/10 rating found")
        return
    print(json.dumps(asdict(review), indent=2, ensure_ascii=False))


def cmd_analyze(args):
    """Analyze command."""
    posts = load_posts(args.input_file)
    print(f"Analyzing {len(posts)} posts from {args.input_file}...")

    result = analyze_posts(posts, args.min_count)

    if args.out:
        export_to_json(prepare_export(result), args.out)
        print(f"Results exported to {args.out}")

    if not result.reviews:
        print("No reviews found!")
        return

    ratings = result.ratings
    advanced = result.advanced
    print(f"\nReviews: {ratings.total_reviews} ({advanced.approval_rate}% approved)")
    print(f"Average: {ratings.average:.2f}/10  Median: {ratings.median:.2f}  "
          f"Mode: {ratings.mode:.1f}  Std dev: {ratings.std_dev:.2f}")

    print("\nTop restaurants:")
    for item in result.restaurants[:5]:
        print(f"  {item.rank}. {item.name}: {item.average_rating:.2f}/10 ({item.visit_count} visits)")

    if advanced.categories:
        print("\nCategories:")
        for category in advanced.categories:
            print(f"  {category.category}: {category.count} reviews, avg {category.average_rating:.2f}")

    if result.words:
        print("\nTop words:")
        for word in result.words[:10]:
            print(f"  {word.word} ({word.count}, {word.sentiment})")


def cmd_export(args):
    """Export command: analyze a posts file and write the full result as JSON."""
    posts = load_posts(args.input_file)
    data = prepare_export(analyze_posts(posts, args.min_count))

    if args.pretty:
        print(json.dumps(stamp_export(data), indent=2, ensure_ascii=False))
        return

    output_file = args.output or str(Path(args.input_file).with_name(
        Path(args.input_file).stem + FileConstants.EXPORT_SUFFIX))
    export_to_json(data, output_file)
    print(f"Exported to {output_file}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="PlateLog - Restaurant Review Caption Analytics")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Parse command
    parse_parser = subparsers.add_parser('parse', help='Parse a single caption')
    parse_parser.add_argument('caption', help='Caption text')
    parse_parser.add_argument('--timestamp', default='', help='ISO-8601 post timestamp')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Analyze a file of posts')
    analyze_parser.add_argument('--in', dest='input_file', required=True,
                                help='Posts JSON file or Instagram export')
    analyze_parser.add_argument('--min-count', type=int, default=None,
                                help='Minimum word occurrences (default from settings)')
    analyze_parser.add_argument('--out', help='Output JSON file')

    # Export command
    export_parser = subparsers.add_parser('export', help='Analyze a file of posts and export the full result')
    export_parser.add_argument('--in', dest='input_file', required=True,
                               help='Posts JSON file or Instagram export')
    export_parser.add_argument('--min-count', type=int, default=None,
                               help='Minimum word occurrences (default from settings)')
    export_parser.add_argument('--out', dest='output',
                               help='Output file (default: <input>_analysis.json)')
    export_parser.add_argument('--pretty', action='store_true', help='Pretty print to stdout')

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging()

    try:
        if args.command == 'parse':
            cmd_parse(args)
        elif args.command == 'analyze':
            cmd_analyze(args)
        elif args.command == 'export':
            cmd_export(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
    except PostLoadError as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)
