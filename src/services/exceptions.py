"""
Service-level exceptions.

This module contains exceptions that can be raised by various services
in the application.
"""
from typing import List, Optional

class AuthorizationError(Exception):
    """Raised when the caller identity is missing or not allowed."""
    pass

class ProfileValidationError(ValueError):
    """Raised when a profile update would leave the cycle settings invalid."""

    def __init__(self, message: str, fields: Optional[List[str]] = None):
        super().__init__(message)
        self.fields = fields or []

class ProfileNotFoundError(Exception):
    """Raised when a user has no stored cycle profile."""
    pass

class EntryNotFoundError(Exception):
    """Raised when a log entry does not exist or belongs to another user."""
    pass

class StorageError(Exception):
    """Raised when the backing table cannot be read or written."""
    pass
