"""Integer buffers for the iterative calculators."""

from array import array
from typing import MutableSequence

from distspell.utils.constants import Constants


def new_buffer(size: int, list_limit: int) -> MutableSequence[int]:
    """Return a zero-filled integer buffer of the given size.

    Buffers up to list_limit cells are plain lists, larger ones are compact
    typed arrays. Both index identically.
    """
    if size <= list_limit:
        return [0] * size
    return array(Constants.DISTANCE_ARRAY_TYPECODE, bytes(size * _itemsize()))


def _itemsize() -> int:
    return array(Constants.DISTANCE_ARRAY_TYPECODE).itemsize
