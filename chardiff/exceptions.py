"""
Exceptions raised by the chardiff core.

Hierarchy:
    - ChardiffError (base)
        - InvalidConfiguration (bad timeout / precision / option name)
        - ComputationTimeout (alignment exceeded its wall-clock budget)
        - EmptyInput (text failed content validation)

Normalization and segmentation never raise; only option validation and
the Alignment Engine do.
"""
from typing import Any, List, Optional


class ChardiffError(Exception):
    """
    Base class for every chardiff-specific error.

    Attributes:
        message (str): Human readable description.
        original_error (Exception, optional): The wrapped cause, if any.
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class InvalidConfiguration(ChardiffError, ValueError):
    """
    Raised by option validation before any computation starts.

    Attributes:
        parameter_name (str, optional): The offending option.
        parameter_value (Any): The value that was rejected.
    """

    def __init__(
        self,
        message: str,
        parameter_name: Optional[str] = None,
        parameter_value: Any = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class ComputationTimeout(ChardiffError):
    """
    Raised when the alignment matrix could not be filled within budget.

    No partial result accompanies this error.
    """

    def __init__(
        self,
        message: str,
        timeout_ms: float,
        rows_completed: int = 0,
        total_rows: int = 0,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message, original_error=original_error)
        self.timeout_ms = timeout_ms
        self.rows_completed = rows_completed
        self.total_rows = total_rows


class EmptyInput(ChardiffError):
    """Raised by TextValidation.raise_for_errors() for unusable text content."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = list(errors or [])
