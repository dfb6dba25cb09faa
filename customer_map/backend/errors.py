"""
Error types for the customer map backend.
"""

UPSTREAM_ERROR_MESSAGE = "Failed to fetch data from Stripe. Please check your API key."
MISSING_CREDENTIAL_MESSAGE = "Please provide a valid API Key"


class CustomerMapError(Exception):
    """Base class for errors scoped to a single request or render cycle."""


class ValidationError(CustomerMapError):
    """Credential missing or empty. Raised before any network call."""

    def __init__(self, message: str = MISSING_CREDENTIAL_MESSAGE):
        super().__init__(message)


class UpstreamError(CustomerMapError):
    """
    Any failure while fetching from Stripe (auth, network, rate limit,
    malformed data). Always carries the generic user-facing message.
    """

    def __init__(self, message: str = UPSTREAM_ERROR_MESSAGE):
        super().__init__(message)


class RenderingInitError(CustomerMapError):
    """Render target could not be bound (e.g. already bound to another view)."""
