"""Command-line interface for the DistSpell project."""

import argparse

from distspell.core import Accuracy
from distspell.distance import list_calculators


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="distspell",
        description="Spell check words against a dictionary using edit distance",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check words against the english-words dictionary
  %(prog)s recieve definately

  # Use a custom word list and the strictest accuracy
  %(prog)s --dictionary words.txt --accuracy high teh

  # Only the 20000 most frequent words, ranked with 4 workers
  %(prog)s --top-n 20000 -j 4 -v acommodate

  # Read words from standard input, one per line
  cat words.txt | %(prog)s --algorithm full-matrix

  # Using JSON config
  %(prog)s --config config.json wierd

Example config.json:
{
  "algorithm": "optimized-matrix",
  "accuracy": "medium",
  "top_n": 50000,
  "include": "settings/include.txt",
  "exclude": "settings/exclude.txt",
  "max_results": 10,
  "jobs": 4,
  "verbose": true
}
        """,
    )

    parser.add_argument("words", nargs="*", help="Words to check (default: read stdin)")

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Algorithm and accuracy
    parser.add_argument(
        "-a",
        "--algorithm",
        type=str,
        choices=list_calculators(),
        default="optimized-matrix",
        help="Edit distance algorithm",
    )
    parser.add_argument(
        "--accuracy",
        type=str,
        choices=[accuracy.value for accuracy in Accuracy],
        default=Accuracy.MEDIUM.value,
        help="Accuracy level (low: more matches, high: fewer, closer matches)",
    )
    parser.add_argument(
        "--list-algorithms",
        action="store_true",
        help="List available algorithms and exit",
    )

    # Word lists
    parser.add_argument("--dictionary", type=str, help="Word list file, one word per line")
    parser.add_argument("--top-n", type=int, help="Use the top N most common English words")
    parser.add_argument("--include", type=str, help="File with additional words to include")
    parser.add_argument("--exclude", type=str, help="File with exclusion patterns")

    # Output
    parser.add_argument("--max-results", type=int, help="Maximum number of matches shown")

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", type=str, help="Also write logs to this file")
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        default=1,
        help="Number of parallel workers for ranking (default: 1)",
    )

    return parser
