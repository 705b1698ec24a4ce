"""
twilio_client

Async clients for Twilio Programmable Messaging (SMS) and Verify (OTP).
"""

from twilio_client.core.exceptions import (
    AuthenticationError,
    ClientError,
    ConfigurationError,
    DeserializationError,
    ParseError,
    RequestTimeoutError,
    ServerResponseError,
    TransportError,
)
from twilio_client.models.phone import Phone, RawPhone
from twilio_client.schemas.sms import MessageStatus, SendSmsResponse
from twilio_client.schemas.verify import (
    Channel,
    SendCodeAttempt,
    TwilioRequestResponse,
    TwilioVerifyResponse,
    VerificationStatus,
)
from twilio_client.services.sms_service import DEFAULT_TIMEOUT, SmsClient, SmsClientBuilder
from twilio_client.services.verify_service import VerifyClient, VerifyClientBuilder

__version__ = "0.1.0"

__all__ = [
    "AuthenticationError",
    "Channel",
    "ClientError",
    "ConfigurationError",
    "DEFAULT_TIMEOUT",
    "DeserializationError",
    "MessageStatus",
    "ParseError",
    "Phone",
    "RawPhone",
    "RequestTimeoutError",
    "SendCodeAttempt",
    "SendSmsResponse",
    "ServerResponseError",
    "SmsClient",
    "SmsClientBuilder",
    "TransportError",
    "TwilioRequestResponse",
    "TwilioVerifyResponse",
    "VerificationStatus",
    "VerifyClient",
    "VerifyClientBuilder",
]
