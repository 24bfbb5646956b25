"""
Domain exceptions.
"""

from typing import Optional


class DomainError(Exception):
    """Base class for domain-specific errors."""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class InvalidArgumentError(DomainError, ValueError):
    """Raised when an operation receives an unusable argument."""

    def __init__(self, message: str, argument: Optional[str] = None):
        self.argument = argument
        super().__init__(message, "INVALID_ARGUMENT")
