class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules.

    These are user-correctable and are reported back to the caller as-is.
    """


class OccurrenceLimitError(ValidationError):
    """A recurrence rule would produce more occurrences than allowed."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Quá nhiều buổi (tối đa {limit}). Vui lòng rút ngắn khoảng thời gian.")
