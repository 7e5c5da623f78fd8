from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .exceptions import EmptyInput

OP_REPLACE = "replace"
OP_DELETE = "delete"
OP_INSERT = "insert"

KIND_ADD = "add"
KIND_DELETE = "delete"
KIND_MODIFY = "modify"


@dataclass(frozen=True)
class Operation:
    """
    A single edit produced by the Alignment Engine.

    Attributes:
        kind (str): 'replace', 'delete' or 'insert'.
        position (int): Index into the source unit sequence. For inserts this
            is the insertion point (new units go before source unit `position`).
        old_units (Tuple[str, ...]): Source units removed (replace/delete).
        new_units (Tuple[str, ...]): Target units introduced (replace/insert).
    """
    kind: str
    position: int
    old_units: Tuple[str, ...] = ()
    new_units: Tuple[str, ...] = ()

    @property
    def old_text(self) -> str:
        return "".join(self.old_units)

    @property
    def new_text(self) -> str:
        return "".join(self.new_units)


@dataclass(frozen=True)
class AlignmentResult:
    """Edit distance plus the left-to-right operation list."""
    edit_distance: int
    operations: Tuple[Operation, ...]


@dataclass(frozen=True)
class DiffRecord:
    """
    Public edit description.

    Attributes:
        position (int): Anchor index into the source unit sequence.
        kind (str): 'add', 'delete' or 'modify'.
        content (str): New text for add/modify, removed text for delete.
        original_content (str, optional): Old text for modify/delete.
        offset (int): Code-point offset of the anchor in the normalized
            source text. Equals `position` at character precision.
    """
    position: int
    kind: str
    content: str
    original_content: Optional[str] = None
    offset: int = 0

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'position': self.position,
            'type': self.kind,
            'content': self.content,
            'offset': self.offset,
        }
        if self.original_content is not None:
            data['originalContent'] = self.original_content
        return data


@dataclass(frozen=True)
class DiffResult:
    """
    The complete output of one comparison.

    Attributes:
        edit_distance (int): Unit-level Levenshtein distance.
        diffs (Tuple[DiffRecord, ...]): Records in position order.
        similarity (float): 0-100, two decimals.
        text1 (str): Normalized source text.
        text2 (str): Normalized target text.
        precision (str): Unit granularity used for the comparison.
    """
    edit_distance: int
    diffs: Tuple[DiffRecord, ...]
    similarity: float
    text1: str
    text2: str
    precision: str = "character"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'editDistance': self.edit_distance,
            'diffs': [record.to_dict() for record in self.diffs],
            'similarity': self.similarity,
            'text1': self.text1,
            'text2': self.text2,
            'precision': self.precision,
        }


@dataclass(frozen=True)
class DiffStats:
    """Record counts by kind, plus the similarity of the source result."""
    additions: int = 0
    deletions: int = 0
    modifications: int = 0
    similarity: float = 100.0

    @property
    def total_changes(self) -> int:
        return self.additions + self.deletions + self.modifications

    def to_dict(self) -> Dict[str, Any]:
        return {
            'additions': self.additions,
            'deletions': self.deletions,
            'modifications': self.modifications,
            'similarity': self.similarity,
        }


@dataclass(frozen=True)
class TextStats:
    char_count: int
    line_count: int
    word_count: int
    byte_length: int


@dataclass
class TextValidation:
    """
    Outcome of validate_text_content().

    Errors make the text unusable for a comparison; warnings are advisory.
    """
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def raise_for_errors(self) -> None:
        if not self.is_valid:
            raise EmptyInput("; ".join(self.errors), errors=self.errors)
