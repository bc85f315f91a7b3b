"""
Domain-specific exceptions for investments app.

Three families, caught in views and converted to HTTP responses:

    InvestmentsServiceError
    ├── NotFound          (404) unknown investment or voter
    ├── ValidationError   (400) malformed vote or investment data
    └── StorageError      (503) persistence layer failure

None of them is retried automatically.
"""


class InvestmentsServiceError(Exception):
    """Base exception for all investments service errors."""
    pass


class NotFound(InvestmentsServiceError):
    """Raised when a referenced entity does not exist."""
    pass


class InvestmentNotFoundError(NotFound):
    """Raised when an investment does not exist."""
    pass


class VoterNotFoundError(NotFound):
    """Raised when a voter does not exist or is not an eligible member."""
    pass


class ValidationError(InvestmentsServiceError):
    """Raised when input violates a business rule."""
    pass


class InvalidVoteError(ValidationError):
    """Raised when a vote payload is malformed (e.g. non-boolean approval)."""
    pass


class InvalidInvestmentError(ValidationError):
    """Raised when investment fields are out of range."""
    pass


class StorageError(InvestmentsServiceError):
    """Raised when the database is unavailable or a write conflicts."""
    pass


class VoteStorageError(StorageError):
    """Raised when a vote cannot be durably committed. No vote was recorded."""
    pass


class ActivationStorageError(StorageError):
    """Raised when the activation check cannot read votes or flip the flag."""
    pass
