"""
Domain exceptions for ledger app.

Raised by the ledger services layer and translated into HTTP responses
by the views.
"""


class LedgerServiceError(Exception):
    """Base exception for ledger service errors."""
    pass


class InvalidTransactionError(LedgerServiceError):
    """Raised when a transaction amount or type is invalid."""
    pass


class InvalidYearError(LedgerServiceError):
    """Raised when a contribution history year filter is out of range."""
    pass


class TransactionNotPermittedError(LedgerServiceError):
    """Raised when a member records a transaction type reserved for staff."""
    pass
