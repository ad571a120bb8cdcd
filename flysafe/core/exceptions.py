"""
Application exceptions
"""


class FlySafeError(Exception):
    """Base exception for FlySafe errors."""
    pass


class EmptyInputError(FlySafeError):
    """Raised when an operation needs at least one candidate and got none."""
    pass
