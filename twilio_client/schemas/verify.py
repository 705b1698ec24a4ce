"""
twilio_client/schemas/verify.py

Purpose: Verify API response payloads

- TwilioRequestResponse: POST /Verifications (OTP sent)
- TwilioVerifyResponse: POST /VerificationCheck (OTP checked)
"""

from enum import Enum
from typing import Optional, List

from pydantic import BaseModel, ConfigDict


class Channel(str, Enum):
    SMS = "sms"
    CALL = "call"
    EMAIL = "email"
    WHATSAPP = "whatsapp"


class VerificationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    CANCELED = "canceled"
    MAX_ATTEMPTS_REACHED = "max_attempts_reached"
    DELETED = "deleted"
    FAILED = "failed"
    EXPIRED = "expired"


class SendCodeAttempt(BaseModel):
    attempt_sid: str
    channel: Channel
    time: str


class TwilioRequestResponse(BaseModel):
    """
    Verification resource returned when an OTP is requested.
    """
    model_config = ConfigDict(extra="ignore")

    sid: Optional[str] = None
    status: Optional[VerificationStatus] = None
    send_code_attempts: Optional[List[SendCodeAttempt]] = None
    to: Optional[str] = None
    valid: Optional[bool] = None
    date_created: Optional[str] = None
    date_updated: Optional[str] = None


class TwilioVerifyResponse(BaseModel):
    """
    Verification check result. `valid` is True only when the code matched.
    """
    model_config = ConfigDict(extra="ignore")

    status: VerificationStatus
    payee: Optional[str] = None
    date_updated: str
    account_sid: str
    to: str
    amount: Optional[float] = None
    valid: bool
    sid: str
    date_created: str
    service_sid: str
    channel: Channel
