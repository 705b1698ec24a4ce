"""
twilio_client/schemas/sms.py

Purpose: Programmable Messaging response payloads
"""

from enum import Enum
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class MessageStatus(str, Enum):
    """
    The status of the message
    """
    QUEUED = "queued"
    SENDING = "sending"
    SENT = "sent"
    FAILED = "failed"
    DELIVERED = "delivered"
    UNDELIVERED = "undelivered"
    RECEIVING = "receiving"
    RECEIVED = "received"
    ACCEPTED = "accepted"
    SCHEDULED = "scheduled"
    READ = "read"
    PARTIALLY_DELIVERED = "partially_delivered"
    CANCELED = "canceled"


class SendSmsResponse(BaseModel):
    """
    Message resource returned by POST /Messages.json.
    Every field is optional; unknown fields are ignored.
    """
    model_config = ConfigDict(extra="ignore")

    sid: Optional[str] = None
    body: Optional[str] = Field(default=None, validation_alias=AliasChoices("body", "Body"))
    date_created: Optional[str] = None
    date_sent: Optional[str] = None
    date_updated: Optional[str] = None
    error_code: Optional[int] = None
    error_message: Optional[str] = None
    num_segments: Optional[str] = None
    status: Optional[MessageStatus] = None
    to: Optional[str] = Field(default=None, validation_alias=AliasChoices("to", "To"))
