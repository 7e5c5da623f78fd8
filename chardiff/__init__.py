"""
chardiff Package
================

Character-precise text differencing. Two texts are normalized, cut into
units (characters, words or lines), aligned with a Levenshtein matrix and
backtrace, and the resulting edits are merged into position-anchored
add / delete / modify records with a similarity score.

Modules:
    - normalizer: BOM, line-break and whitespace preprocessing.
    - segmenter: Character / word / line unit splitting.
    - engine: Alignment matrix and backtrace (AlignmentEngine).
    - optimizer: Merges colliding operations (OperationOptimizer).
    - records: Operation -> DiffRecord transcription and replay.
    - stats: Addition / deletion / modification counts.
    - differ: compute_diff() pipeline.
    - utils: Similarity calculations.
"""
from .config import DEFAULT_DIFF_OPTIONS, DiffOptions, NormalizeOptions
from .differ import compute_diff, compute_diff_async, validate_diff_options
from .engine import AlignmentEngine, align, calculate_edit_distance
from .exceptions import ChardiffError, ComputationTimeout, EmptyInput, InvalidConfiguration
from .models import DiffRecord, DiffResult, DiffStats, Operation
from .normalizer import calculate_text_stats, normalize, validate_text_content
from .optimizer import OperationOptimizer, optimize
from .records import apply_diff_records, to_diff_records
from .segmenter import segment
from .stats import compute_stats

__version__ = "1.0.0"
__all__ = [
    'AlignmentEngine',
    'ChardiffError',
    'ComputationTimeout',
    'DEFAULT_DIFF_OPTIONS',
    'DiffOptions',
    'DiffRecord',
    'DiffResult',
    'DiffStats',
    'EmptyInput',
    'InvalidConfiguration',
    'NormalizeOptions',
    'Operation',
    'OperationOptimizer',
    'align',
    'apply_diff_records',
    'calculate_edit_distance',
    'calculate_text_stats',
    'compute_diff',
    'compute_diff_async',
    'compute_stats',
    'normalize',
    'optimize',
    'segment',
    'to_diff_records',
    'validate_diff_options',
    'validate_text_content',
]
