"""Data loading for DistSpell."""

from distspell.data.dictionary import load_dictionary, load_exclusions, load_word_list

__all__ = ["load_dictionary", "load_exclusions", "load_word_list"]
