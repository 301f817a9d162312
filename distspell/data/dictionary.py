"""Dictionary and word list loading."""

from english_words import get_english_words_set  # type: ignore[import-untyped]
from loguru import logger
from wordfreq import top_n_list

from distspell.core import Config
from distspell.matching import PatternMatcher
from distspell.utils import Constants, expand_file_path


def _read_lines(filepath: str, description: str) -> list[str]:
    """Read stripped, non-empty, non-comment lines from a UTF-8 file."""
    lines = []
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith(Constants.COMMENT_PREFIX):
                    lines.append(line)
    except FileNotFoundError:
        logger.error(f"✗ {description} file not found: {filepath}")
        logger.error("  Please check the file path and try again")
        raise
    except PermissionError:
        logger.error(f"✗ Permission denied reading file: {filepath}")
        logger.error("  Please check file permissions and try again")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading {filepath}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise
    return lines


def _is_valid_word(word: str) -> bool:
    return not any(c in word for c in Constants.INVALID_WORD_CHARS)


def load_word_list(filepath: str | None, verbose: bool = False) -> list[str]:
    """Load a word list file, one lowercase word per line."""
    filepath = expand_file_path(filepath)
    if not filepath:
        return []

    words = []
    invalid_count = 0
    for line in _read_lines(filepath, "Word list"):
        word = line.lower()
        if not _is_valid_word(word):
            invalid_count += 1
            continue
        words.append(word)

    if verbose and invalid_count > 0:
        logger.info(f"  Skipped {invalid_count} words with invalid characters")

    return words


def load_exclusions(filepath: str | None, verbose: bool = False) -> set[str]:
    """Load exclusion patterns from file."""
    filepath = expand_file_path(filepath)
    if not filepath:
        return set()

    exclusions = set(_read_lines(filepath, "Exclusions"))

    if verbose:
        logger.info(f"  Loaded {len(exclusions)} exclusion patterns")

    return exclusions


def _load_english_words() -> set[str]:
    try:
        # type: ignore[no-any-return]
        words: set[str] = get_english_words_set(
            list(Constants.ENGLISH_WORDS_SOURCES), lower=True
        )
    except Exception as e:
        logger.error(f"✗ Failed to load English words dictionary: {e}")
        logger.error("  This may indicate a problem with the 'english-words' package")
        logger.error("  Try reinstalling: pip install english-words")
        raise RuntimeError("Failed to load English words dictionary") from e
    return words


def _load_frequent_words(top_n: int) -> set[str]:
    try:
        words = top_n_list(Constants.WORDFREQ_LANGUAGE, top_n)
    except Exception as e:
        logger.error(f"✗ Failed to load words from wordfreq: {e}")
        logger.error("  This may indicate a problem with the 'wordfreq' package")
        raise RuntimeError("Failed to load words from wordfreq") from e
    return {word.lower() for word in words if _is_valid_word(word)}


def load_dictionary(config: Config, verbose: bool = False) -> frozenset[str]:
    """Build the lowercase dictionary used for spell checking.

    Base words come from the configured word list file, else the top N
    wordfreq words, else the english-words package. Words from the include
    file are added and words matching exclude patterns are removed.
    """
    if config.dictionary:
        if verbose:
            logger.info(f"  Loading dictionary from {config.dictionary}...")
        words = set(load_word_list(config.dictionary, verbose))
    elif config.top_n:
        if verbose:
            logger.info(f"  Loading top {config.top_n} words from wordfreq...")
        words = _load_frequent_words(config.top_n)
    else:
        if verbose:
            logger.info("  Loading English words dictionary...")
        words = _load_english_words()
    base_count = len(words)

    words.update(load_word_list(config.include, verbose))
    added_count = len(words) - base_count

    exclusion_patterns = load_exclusions(config.exclude, verbose)
    if exclusion_patterns:
        words = PatternMatcher(exclusion_patterns).filter_set(words)
    removed_count = base_count + added_count - len(words)

    if verbose:
        logger.info(f"  Loaded {len(words)} words")
        if added_count > 0:
            logger.info(f"  Added {added_count} custom words from include file")
        if removed_count > 0:
            logger.info(f"  Removed {removed_count} words based on exclude file")

    return frozenset(words)
