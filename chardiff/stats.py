from collections import Counter

from .models import KIND_ADD, KIND_DELETE, KIND_MODIFY, DiffResult, DiffStats


def compute_stats(diff_result: DiffResult) -> DiffStats:
    """
    Counts a result's records by kind. Similarity is carried over as is.
    """
    counts = Counter(record.kind for record in diff_result.diffs)
    return DiffStats(
        additions=max(0, counts[KIND_ADD]),
        deletions=max(0, counts[KIND_DELETE]),
        modifications=max(0, counts[KIND_MODIFY]),
        similarity=diff_result.similarity,
    )
