"""
Transcribes optimized operations into public DiffRecords, and replays
records against a source text.
"""
from typing import Iterable, List, Optional, Sequence

from .models import (KIND_ADD, KIND_DELETE, KIND_MODIFY, OP_DELETE, OP_INSERT,
                     OP_REPLACE, DiffRecord, Operation)

_KIND_BY_OP = {
    OP_REPLACE: KIND_MODIFY,
    OP_DELETE: KIND_DELETE,
    OP_INSERT: KIND_ADD,
}


def to_diff_records(operations: Iterable[Operation],
                    offsets: Optional[Sequence[int]] = None) -> List[DiffRecord]:
    """
    Maps replace/delete/insert onto modify/delete/add records.

    Args:
        operations (Iterable[Operation]): Optimized operations.
        offsets (Sequence[int], optional): Code-point offset of each source
            unit plus a trailing end offset (see segmenter.unit_offsets).
            When omitted, offsets equal positions (character precision).

    Returns:
        List[DiffRecord]: One record per operation, same order.
    """
    records = []
    for op in operations:
        kind = _KIND_BY_OP[op.kind]
        offset = offsets[op.position] if offsets is not None else op.position

        if kind == KIND_MODIFY:
            record = DiffRecord(op.position, kind, op.new_text, op.old_text, offset)
        elif kind == KIND_DELETE:
            record = DiffRecord(op.position, kind, op.old_text, op.old_text, offset)
        else:
            record = DiffRecord(op.position, kind, op.new_text, None, offset)
        records.append(record)
    return records


def apply_diff_records(text: str, diffs: Iterable[DiffRecord]) -> str:
    """
    Replays records over the source text to rebuild the target text.

    Records are applied in offset order; at a shared offset an add goes
    before whatever removes source text there.
    """
    ordered = sorted(diffs, key=lambda r: (r.offset, r.kind != KIND_ADD))
    parts = []
    cursor = 0

    for record in ordered:
        if record.offset < cursor:
            raise ValueError(
                f"overlapping diff record at offset {record.offset} (already at {cursor})")
        parts.append(text[cursor:record.offset])
        cursor = record.offset

        if record.kind == KIND_ADD:
            parts.append(record.content)
        elif record.kind == KIND_DELETE:
            cursor += len(record.original_content if record.original_content is not None
                          else record.content)
        elif record.kind == KIND_MODIFY:
            parts.append(record.content)
            cursor += len(record.original_content or "")
        else:
            raise ValueError(f"unknown diff record kind: {record.kind!r}")

    parts.append(text[cursor:])
    return "".join(parts)
