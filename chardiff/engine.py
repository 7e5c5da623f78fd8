import logging
import time
from typing import Callable, Hashable, List, Optional, Sequence

from .config import DEFAULT_TIMEOUT_MS
from .exceptions import ComputationTimeout
from .models import OP_DELETE, OP_INSERT, OP_REPLACE, AlignmentResult, Operation

logger = logging.getLogger(__name__)

KeyFunc = Callable[[str], Hashable]


class AlignmentEngine:
    """
    Levenshtein alignment between two unit sequences.

    The (m+1)x(n+1) matrix is built row by row; cell (i, j) holds the
    minimum number of unit edits turning units_a[:i] into units_b[:j].
    The wall-clock budget is sampled once per row.
    """

    def __init__(self, units_a: Sequence[str], units_b: Sequence[str],
                 key: Optional[KeyFunc] = None):
        """
        Args:
            units_a (Sequence[str]): Source units.
            units_b (Sequence[str]): Target units.
            key (callable, optional): Maps a unit to the value used for
                equality tests, e.g. str.lower for case-insensitive runs.
        """
        self.units_a = list(units_a)
        self.units_b = list(units_b)
        if key is None:
            self.keys_a = self.units_a
            self.keys_b = self.units_b
        else:
            self.keys_a = [key(u) for u in self.units_a]
            self.keys_b = [key(u) for u in self.units_b]
        self.matrix: List[List[int]] = []

    def build_matrix(self, timeout_ms: float = DEFAULT_TIMEOUT_MS) -> List[List[int]]:
        """
        Fills the DP matrix.

        Raises:
            ComputationTimeout: The budget ran out before the last row. The
                partially built matrix is dropped.
        """
        keys_a, keys_b = self.keys_a, self.keys_b
        m, n = len(keys_a), len(keys_b)
        budget = timeout_ms / 1000.0
        start = time.perf_counter()

        matrix = [list(range(n + 1))]
        for i in range(1, m + 1):
            if time.perf_counter() - start > budget:
                self.matrix = []
                raise ComputationTimeout(
                    f"Alignment of {m}x{n} units exceeded {timeout_ms} ms "
                    f"after {i - 1} of {m} rows",
                    timeout_ms=timeout_ms, rows_completed=i - 1, total_rows=m)

            prev = matrix[i - 1]
            row = [i] + [0] * n
            key_a = keys_a[i - 1]
            for j in range(1, n + 1):
                if key_a == keys_b[j - 1]:
                    row[j] = prev[j - 1]
                else:
                    row[j] = 1 + min(prev[j], row[j - 1], prev[j - 1])
            matrix.append(row)

        self.matrix = matrix
        return matrix

    def backtrace(self) -> List[Operation]:
        """
        Walks the matrix from (m, n) back to (0, 0).

        Equal units move diagonally and emit nothing. Otherwise the first
        matching transition wins, in the fixed order replace, delete, insert.
        The returned list is in left-to-right document order.
        """
        dp = self.matrix
        keys_a, keys_b = self.keys_a, self.keys_b
        i, j = len(keys_a), len(keys_b)
        operations = []

        while i > 0 or j > 0:
            if i > 0 and j > 0 and keys_a[i - 1] == keys_b[j - 1]:
                i -= 1
                j -= 1
            elif i > 0 and j > 0 and dp[i][j] == dp[i - 1][j - 1] + 1:
                operations.append(Operation(
                    OP_REPLACE, i - 1,
                    old_units=(self.units_a[i - 1],), new_units=(self.units_b[j - 1],)))
                i -= 1
                j -= 1
            elif i > 0 and dp[i][j] == dp[i - 1][j] + 1:
                operations.append(Operation(OP_DELETE, i - 1, old_units=(self.units_a[i - 1],)))
                i -= 1
            else:
                # Anchored at the current source index, not the target index.
                operations.append(Operation(OP_INSERT, i, new_units=(self.units_b[j - 1],)))
                j -= 1

        operations.reverse()
        return operations

    def run(self, timeout_ms: float = DEFAULT_TIMEOUT_MS) -> AlignmentResult:
        """
        Builds the matrix, backtraces it and releases it.

        Returns:
            AlignmentResult: matrix[m][n] and the raw (unoptimized) operations.
        """
        matrix = self.build_matrix(timeout_ms)
        edit_distance = matrix[-1][-1]
        operations = self.backtrace()
        self.matrix = []

        logger.debug("Aligned %d x %d units: distance=%d, operations=%d",
                     len(self.units_a), len(self.units_b), edit_distance, len(operations))
        return AlignmentResult(edit_distance=edit_distance, operations=tuple(operations))


def align(units_a: Sequence[str], units_b: Sequence[str],
          timeout_ms: float = DEFAULT_TIMEOUT_MS,
          key: Optional[KeyFunc] = None) -> AlignmentResult:
    """Convenience wrapper: AlignmentEngine(units_a, units_b, key).run(timeout_ms)."""
    return AlignmentEngine(units_a, units_b, key=key).run(timeout_ms)


def calculate_edit_distance(units_a: Sequence[str], units_b: Sequence[str],
                            timeout_ms: float = DEFAULT_TIMEOUT_MS,
                            key: Optional[KeyFunc] = None) -> int:
    """Edit distance only, discarding the operations."""
    return AlignmentEngine(units_a, units_b, key=key).build_matrix(timeout_ms)[-1][-1]
