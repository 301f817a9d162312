"""Tuning constants for DistSpell."""


class Constants:
    """Shared constants. None of these change computed distances."""

    # Matrix cells (full matrix) or row width (optimized matrix) up to which a
    # plain list is used; anything larger goes into a compact typed array.
    FULL_MATRIX_LIST_LIMIT = 256
    OPTIMIZED_ROW_LIST_LIMIT = 128
    DISTANCE_ARRAY_TYPECODE = "l"

    # Parallel ranking
    PARALLEL_MIN_WORDS = 2000
    RANKING_CHUNKS_PER_WORKER = 4

    # Dictionary loading
    ENGLISH_WORDS_SOURCES = ("web2",)
    WORDFREQ_LANGUAGE = "en"
    INVALID_WORD_CHARS = ("\n", "\r", "\t", "\\")
    COMMENT_PREFIX = "#"

    # Recursive calculator usage guideline
    RECURSIVE_WARN_LENGTH = 12
