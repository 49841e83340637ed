"""
Foody Backend: Custom Exception Hierarchy
============================================

What:  Application-specific exceptions raised by the service layer.
Why:   Lets global handlers (registered in main.py) turn failures into
       consistent JSON error responses without try/except in every route.
How:   Each exception carries a user-safe message and an optional context
       dict that is logged but never returned to the client.

Exception Hierarchy:
    FoodyError (base)          → 500 Internal Server Error
    └── DatabaseError          → 500 Internal Server Error (generic message)
"""

from typing import Any, Dict, Optional


class FoodyError(Exception):
    """
    Base exception for all Foody application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class DatabaseError(FoodyError):
    """
    Raised when a query or insert fails.

    What:    Connectivity loss, constraint violation, malformed query, etc.
    HTTP:    500 Internal Server Error

    The response message is always generic; the SQL error type and any
    identifying details go to the server log only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
