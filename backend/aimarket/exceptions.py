"""
AI Market Exception Hierarchy

Every error carries the HTTP status it maps to at the request boundary.
Responses use the flat `{"error": message}` envelope the storefront page reads.
"""
from typing import Optional, Dict, Any


class MarketError(Exception):
    """
    Base exception for all storefront errors.

    Handled by the application exception handler; never fatal to the process.
    """

    status_code: int = 500

    def __init__(
        self,
        error_code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.error_code = error_code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to API error response format."""
        return {"error": self.message}


class ValidationError(MarketError):
    """
    A required request field is missing.

    Examples:
    - POST /api/orders without itemId or amount
    - POST /api/briefs without module
    """

    status_code = 400

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("market:request:invalid", message, details)


class NotFoundError(MarketError):
    """Unknown module id on direct lookup."""

    status_code = 404

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("market:module:not_found", message, details)


class ExternalProviderError(MarketError):
    """
    The payment provider answered with an error or could not be reached.

    The message includes the raw provider text where one was returned.
    """

    status_code = 500

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        error_code: str = "market:provider:error"
    ):
        super().__init__(error_code, message, details)


class ExternalAuthError(ExternalProviderError):
    """
    OAuth token exchange failed.

    Examples:
    - Credentials not configured (demo-only mode)
    - Provider rejected the client id/secret
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details, error_code="market:provider:auth_failed")


class ExternalCaptureError(ExternalProviderError):
    """Order capture call failed before a provider response could be read."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details, error_code="market:provider:capture_failed")
