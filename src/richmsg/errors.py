"""
richmsg error types.
"""

from typing import Any, Optional


class RichMessageError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class MissingFieldError(RichMessageError):
    """A required value was None. Raised where the value is passed in, never at render time."""

    def __init__(self, field: str, code: str = "missing_field"):
        super().__init__(code, f"{field} must not be None", {"field": field})
        self.field = field
