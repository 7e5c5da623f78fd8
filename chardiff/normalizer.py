"""
Text preprocessing applied to both sides before a comparison.

Every function here is total: any str, including '', is accepted and
nothing raises.
"""
import re
from typing import Optional

from .config import NormalizeOptions
from .models import TextStats, TextValidation

BOM = "\ufeff"

_CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]')
_CRLF = re.compile(r'\r\n')
_LONE_LF = re.compile(r'(?<!\r)\n')
_LONE_CR = re.compile(r'\r(?!\n)')


def remove_bom(text: str) -> str:
    """Drops exactly one U+FEFF at offset 0."""
    if text.startswith(BOM):
        return text[1:]
    return text


def normalize_line_breaks(text: str) -> str:
    # CRLF first, otherwise the pair would turn into two LFs.
    return text.replace('\r\n', '\n').replace('\r', '\n')


def normalize_whitespace(text: str, preserve_tabs: bool = False,
                         max_consecutive_spaces: int = 2) -> str:
    """
    Converts tabs to single spaces and clamps runs of spaces.

    Args:
        text (str): Input text.
        preserve_tabs (bool): Leave tab characters untouched.
        max_consecutive_spaces (int): Runs longer than this are shortened to
            exactly this many spaces. 0 disables the clamp.
    """
    if not preserve_tabs:
        text = text.replace('\t', ' ')
    if max_consecutive_spaces > 0:
        run = re.compile(' {%d,}' % (max_consecutive_spaces + 1))
        text = run.sub(' ' * max_consecutive_spaces, text)
    return text


def normalize(text: str, options: Optional[NormalizeOptions] = None) -> str:
    """
    Full preprocessing pipeline: BOM, line breaks, whitespace.

    Args:
        text (str): Raw text as captured from a file or text box.
        options (NormalizeOptions, optional): Which steps to apply.
            Defaults to all of them.

    Returns:
        str: The normalized text.
    """
    options = options or NormalizeOptions()

    if options.remove_bom:
        text = remove_bom(text)
    if options.normalize_line_breaks:
        text = normalize_line_breaks(text)
    if options.normalize_whitespace:
        text = normalize_whitespace(
            text,
            preserve_tabs=options.preserve_tabs,
            max_consecutive_spaces=options.max_consecutive_spaces)
    return text


def flatten_text(text: str) -> str:
    """Folds a multi-line text into one line using a literal backslash-n."""
    return text.replace('\n', '\\n')


def unflatten_text(text: str) -> str:
    return text.replace('\\n', '\n')


def calculate_text_stats(text: str) -> TextStats:
    """Character, line, word and UTF-8 byte counts for a text."""
    words = text.split()
    return TextStats(
        char_count=len(text),
        line_count=len(text.split('\n')),
        word_count=len(words),
        byte_length=len(text.encode('utf-8', errors='surrogatepass')),
    )


def validate_text_content(text: Optional[str]) -> TextValidation:
    """
    Checks a text before it is handed to compute_diff().

    Empty (or whitespace-only) content is an error. Control characters and
    mixed line-break styles are reported as warnings since normalization
    handles them.
    """
    errors = []
    warnings = []

    if not text or not text.strip():
        errors.append("text content is empty")
        return TextValidation(is_valid=False, errors=errors, warnings=warnings)

    controls = _CONTROL_CHARS.findall(text)
    if controls:
        warnings.append(
            f"text contains {len(controls)} control character(s), which may affect the comparison")

    styles = sum(1 for pattern in (_CRLF, _LONE_LF, _LONE_CR) if pattern.search(text))
    if styles > 1:
        warnings.append("text mixes line-break styles; they will be normalized to LF")

    return TextValidation(is_valid=True, errors=errors, warnings=warnings)
