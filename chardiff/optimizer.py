from typing import Iterable, List, Optional, Sequence

from .models import OP_DELETE, OP_INSERT, OP_REPLACE, Operation


class OperationOptimizer:
    """
    Collapses colliding operations into single edits per anchor.

    Rules, applied left to right against the last emitted operation:
        1. An insert at the same anchor as an emitted insert extends it.
        2. A replace at the anchor of an emitted insert absorbs it: the
           result is one replace whose new units are the inserted units
           followed by the replacement, and whose old unit is kept.
        3. Any other operation at the anchor of an emitted insert is dropped.
        4. A delete starting where an emitted delete ends extends it.

    Because every rule looks only at what has already been emitted, running
    the pass on its own output changes nothing.
    """

    def __init__(self, operations: Iterable[Operation]):
        """
        Args:
            operations (Iterable[Operation]): Position-ordered operations,
                as returned by AlignmentEngine.backtrace().
        """
        self.operations = list(operations)

    def optimize(self) -> List[Operation]:
        """
        Runs the merge pass.

        Returns:
            List[Operation]: The merged operations, still in position order.
        """
        optimized: List[Operation] = []

        for op in self.operations:
            last = optimized[-1] if optimized else None

            if self._is_insert_at(last, op.position):
                if op.kind == OP_INSERT:
                    optimized[-1] = Operation(
                        OP_INSERT, op.position,
                        new_units=last.new_units + op.new_units)
                elif op.kind == OP_REPLACE:
                    optimized[-1] = Operation(
                        OP_REPLACE, op.position,
                        old_units=op.old_units,
                        new_units=last.new_units + op.new_units)
                # Anything else at this anchor is already covered by the insert.
                continue

            if op.kind == OP_DELETE and self._is_delete_ending_at(last, op.position):
                optimized[-1] = Operation(
                    OP_DELETE, last.position,
                    old_units=last.old_units + op.old_units)
                continue

            optimized.append(op)

        return optimized

    @staticmethod
    def _is_insert_at(op: Optional[Operation], position: int) -> bool:
        return op is not None and op.kind == OP_INSERT and op.position == position

    @staticmethod
    def _is_delete_ending_at(op: Optional[Operation], position: int) -> bool:
        return (op is not None and op.kind == OP_DELETE
                and op.position + len(op.old_units) == position)


def optimize(operations: Sequence[Operation]) -> List[Operation]:
    """Shorthand for OperationOptimizer(operations).optimize()."""
    return OperationOptimizer(operations).optimize()
