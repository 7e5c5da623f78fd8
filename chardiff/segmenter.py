"""
Splits normalized text into comparison units.

For every precision, "".join(segment(text, precision)) == text.
"""
import re
from typing import Callable, Dict, List

from .config import PRECISION_CHARACTER, PRECISION_LINE, PRECISION_WORD, PRECISIONS
from .exceptions import InvalidConfiguration

_WHITESPACE_RUN = re.compile(r'(\s+)')
_NEWLINE = re.compile(r'(\n)')


def split_into_chars(text: str) -> List[str]:
    # str iterates by code point, so astral characters stay whole.
    return list(text)


def split_into_words(text: str) -> List[str]:
    """Words and the whitespace runs between them, each as its own unit."""
    return [part for part in _WHITESPACE_RUN.split(text) if part]


def split_into_lines(text: str) -> List[str]:
    """Line bodies and '\\n' separators, each as its own unit."""
    return [part for part in _NEWLINE.split(text) if part]


SPLITTERS: Dict[str, Callable[[str], List[str]]] = {
    PRECISION_CHARACTER: split_into_chars,
    PRECISION_WORD: split_into_words,
    PRECISION_LINE: split_into_lines,
}


def segment(text: str, precision: str = PRECISION_CHARACTER) -> List[str]:
    """
    Materializes the unit sequence for one side of a comparison.

    Args:
        text (str): Normalized text.
        precision (str): 'character', 'word' or 'line'.

    Returns:
        List[str]: Units in document order.
    """
    try:
        splitter = SPLITTERS[precision]
    except KeyError:
        raise InvalidConfiguration(
            f"precision must be one of {', '.join(PRECISIONS)}, got {precision!r}",
            parameter_name="precision", parameter_value=precision) from None
    return splitter(text)


def unit_offsets(units: List[str]) -> List[int]:
    """
    Code-point offset of each unit, plus the total length as a final entry.

    offsets[i] is where unit i starts in "".join(units); offsets[len(units)]
    is the end of the text, which is where trailing inserts anchor.
    """
    offsets = [0]
    for unit in units:
        offsets.append(offsets[-1] + len(unit))
    return offsets
