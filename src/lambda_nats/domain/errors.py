"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when required settings such as ``AWS_LAMBDA_RUNTIME_API`` are
    absent or malformed. Caught at CLI boundaries and mapped to exit code 78.

    Example:
        >>> err = ConfigurationError("AWS_LAMBDA_RUNTIME_API environment variable is not set")
        >>> str(err)
        'AWS_LAMBDA_RUNTIME_API environment variable is not set'
    """


class ExtensionRegistrationError(Exception):
    """The Extensions API refused or garbled the registration handshake.

    Attributes:
        status_code: HTTP status returned by ``/register``, ``None`` when the
            status was fine but the identifier header was missing.
        body: Response body text for diagnostics.

    Example:
        >>> err = ExtensionRegistrationError("Register failed with status 403: denied", status_code=403, body="denied")
        >>> err.status_code
        403
    """

    def __init__(self, message: str, *, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RuntimeApiError(Exception):
    """Fetching or decoding the next lifecycle event failed.

    Example:
        >>> str(RuntimeApiError("Next event failed with status 500: boom"))
        'Next event failed with status 500: boom'
    """


class PublisherError(Exception):
    """The NATS connection could not be established.

    Example:
        >>> str(PublisherError("Failed to connect to NATS at nats://localhost:4222"))
        'Failed to connect to NATS at nats://localhost:4222'
    """


__all__ = [
    "ConfigurationError",
    "ExtensionRegistrationError",
    "PublisherError",
    "RuntimeApiError",
]
