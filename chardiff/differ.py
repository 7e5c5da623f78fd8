"""
Entry points tying the pipeline together:

    normalize -> segment -> align -> optimize -> records -> similarity
"""
import asyncio
import logging
import re
from typing import Callable, Hashable, List, Optional

from .config import DiffOptions, OptionsLike, resolve_options
from .engine import AlignmentEngine
from .exceptions import ComputationTimeout, InvalidConfiguration
from .models import DiffResult
from .normalizer import normalize
from .optimizer import optimize
from .records import to_diff_records
from .segmenter import segment, unit_offsets
from .utils import SimilarityCalculator

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r'\s+')


def _whitespace_key(unit: str) -> str:
    if not unit.strip():
        return " "
    return _WHITESPACE_RUN.sub(" ", unit.strip())


def comparison_key(options: DiffOptions) -> Optional[Callable[[str], Hashable]]:
    """
    Builds the unit key used for equality tests, or None for exact matching.

    ignore_case folds with str.lower(); ignore_whitespace makes all
    whitespace-only units equal and collapses whitespace inside other units.
    """
    if options.ignore_case and options.ignore_whitespace:
        return lambda unit: _whitespace_key(unit).lower()
    if options.ignore_case:
        return str.lower
    if options.ignore_whitespace:
        return _whitespace_key
    return None


def validate_diff_options(options: OptionsLike = None) -> List[str]:
    """
    Non-raising validation.

    Returns:
        List[str]: Error messages; empty when the options are usable.
    """
    try:
        return resolve_options(options).errors()
    except InvalidConfiguration as e:
        return [e.message]


def compute_diff(text1: str, text2: str, options: OptionsLike = None) -> DiffResult:
    """
    Compares two texts and returns the complete, immutable result.

    Args:
        text1 (str): Original text.
        text2 (str): Changed text.
        options (DiffOptions | Mapping, optional): Comparison options.

    Returns:
        DiffResult: Distance, similarity, records and the normalized texts.

    Raises:
        InvalidConfiguration: Before any work, for unusable options.
        ComputationTimeout: The alignment exceeded options.timeout_ms.
    """
    options = resolve_options(options).validate()

    norm1 = normalize(text1, options.normalize)
    norm2 = normalize(text2, options.normalize)

    units1 = segment(norm1, options.precision)
    units2 = segment(norm2, options.precision)
    logger.debug("Comparing %d vs %d code points as %d vs %d %s units",
                 len(norm1), len(norm2), len(units1), len(units2), options.precision)

    engine = AlignmentEngine(units1, units2, key=comparison_key(options))
    try:
        alignment = engine.run(options.timeout_ms)
    except ComputationTimeout as e:
        logger.warning("Diff timed out after %s ms (%d/%d rows)",
                       options.timeout_ms, e.rows_completed, e.total_rows)
        raise ComputationTimeout(
            f"Diff computation failed: {e.message}. Retry with a larger timeout "
            f"or a coarser precision than {options.precision!r}.",
            timeout_ms=e.timeout_ms,
            rows_completed=e.rows_completed,
            total_rows=e.total_rows,
            original_error=e) from e

    operations = optimize(alignment.operations)
    records = to_diff_records(operations, unit_offsets(units1))
    similarity = SimilarityCalculator.similarity_percent(norm1, norm2, alignment.edit_distance)

    logger.debug("Diff complete: distance=%d, records=%d, similarity=%.2f",
                 alignment.edit_distance, len(records), similarity)

    return DiffResult(
        edit_distance=alignment.edit_distance,
        diffs=tuple(records),
        similarity=similarity,
        text1=norm1,
        text2=norm2,
        precision=options.precision,
    )


async def compute_diff_async(text1: str, text2: str, options: OptionsLike = None) -> DiffResult:
    """Runs compute_diff() in a worker thread so callers can await it."""
    return await asyncio.to_thread(compute_diff, text1, text2, options)
