"""Utility functions for DistSpell."""

from distspell.utils.constants import Constants
from distspell.utils.helpers import chunk_evenly, compile_wildcard_regex, expand_file_path
from distspell.utils.logging import add_log_file_handler, setup_logger

__all__ = [
    "Constants",
    "add_log_file_handler",
    "chunk_evenly",
    "compile_wildcard_regex",
    "expand_file_path",
    "setup_logger",
]
