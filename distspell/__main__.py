"""Main entry point for distspell package."""

import sys

from loguru import logger

from distspell.cli import create_parser
from distspell.core import SpellcheckStatus, accuracy_description, load_config
from distspell.data import load_dictionary
from distspell.distance import RecursiveCalculator, get_calculator, list_calculators
from distspell.output import format_result
from distspell.ranking import check_word
from distspell.utils import add_log_file_handler, setup_logger


def _read_queries(words: list[str]) -> list[str]:
    """Return CLI words, or stdin lines when none were given."""
    if words:
        return words
    return [line.strip() for line in sys.stdin if line.strip()]


def main() -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    if args.list_algorithms:
        for name in list_calculators():
            print(f"{name:<18} {get_calculator(name).description}")
        return 0

    config = load_config(args.config, args, parser)

    setup_logger(verbose=config.verbose, debug=config.debug)
    if config.log_file:
        add_log_file_handler(config.log_file, verbose=config.verbose, debug=config.debug)

    calculator = get_calculator(config.algorithm)

    if config.verbose:
        logger.info("Configuration:")
        logger.info(f"  Algorithm: {calculator.description}")
        logger.info(f"  Accuracy: {accuracy_description(config.accuracy)}")
        if config.dictionary:
            logger.info(f"  Dictionary file: {config.dictionary}")
        if config.top_n:
            logger.info(f"  Top N words: {config.top_n}")
        logger.info(f"  Workers: {config.jobs}")
        logger.info("")

    dictionary = load_dictionary(config, config.verbose)

    all_correct = True
    try:
        for word in _read_queries(args.words):
            # The dictionary is lowercase, so queries are folded for lookup only.
            query = word.lower()
            if isinstance(calculator, RecursiveCalculator) and (
                len(query) > config.recursive_max_length
            ):
                logger.warning(
                    f"⚠️  '{query}' is longer than {config.recursive_max_length} characters; "
                    "the recursive algorithm may take a very long time"
                )

            result = check_word(
                query, dictionary, calculator, config.accuracy, config.jobs, config.verbose
            )
            all_correct = all_correct and result.status is SpellcheckStatus.CORRECT

            for line in format_result(result, config.max_results, word=word):
                print(line)
            print()
            if config.verbose:
                logger.info(f"  Checked '{query}' in {result.elapsed_time:.3f}s")
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Spell checking interrupted by user")
        raise

    return 0 if all_correct else 1


if __name__ == "__main__":
    sys.exit(main())
