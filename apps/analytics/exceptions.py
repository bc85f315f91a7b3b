"""
Domain exceptions for analytics app.

Exception Hierarchy:
    AnalyticsServiceError (base)
    ├── InvalidLimitError
    ├── InvalidMonthError
    └── DuplicateMonthError
"""


class AnalyticsServiceError(Exception):
    """
    Base exception for all analytics service errors.

    Views catch it and return a 400 response:

        try:
            series = AnalyticsQueries.monthly_performance(limit=limit)
        except AnalyticsServiceError as e:
            return Response({'error': str(e)}, status=400)
    """

    pass


class InvalidLimitError(AnalyticsServiceError):
    """Raised when a series limit is not an integer between 1 and 120."""

    pass


class InvalidMonthError(AnalyticsServiceError):
    """Raised when a month is outside 1-12."""

    pass


class DuplicateMonthError(AnalyticsServiceError):
    """Raised when performance for a month has already been recorded."""

    pass
