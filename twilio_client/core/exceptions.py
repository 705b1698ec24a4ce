"""
twilio_client/core/exceptions.py

Purpose: Error taxonomy

- ClientError and one subclass per failure kind of a provider call
- ParseError for phone validation failures
- None of these are retried by the library
"""

from typing import Optional, Any


class ClientError(Exception):
    """
    Base exception for every failed provider call.
    """
    def __init__(self, message: str, code: str = "CLIENT_ERROR", details: Optional[Any] = None):
        self.message = message
        self.code = code
        self.details = details
        super().__init__(self.message)


class ConfigurationError(ClientError):
    """
    Raised for a missing builder field or an endpoint that does not resolve to a URL.
    """
    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(f"Configuration error: {message}", code="CONFIGURATION_ERROR", details=details)


class RequestTimeoutError(ClientError):
    """
    Raised when the transport reports a timeout.

    Carries the configured timeout, not the time actually spent waiting.
    """
    def __init__(self, seconds: float):
        self.seconds = seconds
        super().__init__(
            f"Operation timed out after {seconds:g} seconds",
            code="TIMEOUT",
            details={"seconds": seconds},
        )


class TransportError(ClientError):
    """
    Raised for any non-timeout failure while sending the request or reading the body.
    """
    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"HTTP request failed: {cause}", code="TRANSPORT_ERROR")


class DeserializationError(ClientError):
    """
    Raised when a 2xx body does not match the expected response shape.
    """
    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"JSON serialization error: {cause}", code="SERDE_ERROR")


class AuthenticationError(ClientError):
    """
    Raised on HTTP 401. The raw body is kept for diagnostics.
    """
    def __init__(self, body: str):
        self.body = body
        super().__init__(f"Authentication failed: {body}", code="AUTHENTICATION_FAILED", details=body)


class ServerResponseError(ClientError):
    """
    Raised on any non-2xx status other than 401.
    """
    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"Server response error: {status_code} - {body}",
            code="SERVER_RESPONSE_ERROR",
            details={"status_code": status_code, "body": body},
        )


class ParseError(ValueError):
    """
    Raised when a phone number fails validation.
    """
    def __init__(self, message: str, number: Optional[str] = None):
        self.message = message
        self.number = number
        super().__init__(message)
