"""
twilio_client/services/sms_service.py

Purpose: Twilio Programmable Messaging client

- Builder that checks every mandatory field before producing a client
- send(): SMS/MMS to a validated Phone
- All HTTP work is delegated to the request engine
"""

from typing import Dict, List, Optional, Union
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ConfigDict, SecretStr

from twilio_client.core.config import Settings
from twilio_client.core.exceptions import ConfigurationError, ParseError
from twilio_client.core.logging import get_logger
from twilio_client.models.phone import Phone
from twilio_client.schemas.sms import SendSmsResponse
from twilio_client.services.request_engine import execute

logger = get_logger(__name__)

SERVICE_NAME = "Twilio SMS"
DEFAULT_TIMEOUT = 10.0
MESSAGES_PATH = "/2010-04-01/Accounts/{account_sid}/Messages.json"


def as_secret(value: Optional[Union[str, SecretStr]]) -> Optional[SecretStr]:
    if value is None or isinstance(value, SecretStr):
        return value
    return SecretStr(value)


def urlencode_path_segment(value: str) -> str:
    """Percent-encodes a value for use as a single path segment."""
    return quote(value, safe="")


def check_timeout(timeout: Optional[float], service: str) -> float:
    if timeout is None:
        return DEFAULT_TIMEOUT
    if timeout <= 0:
        raise ConfigurationError(f"{service} timeout must be greater than zero")
    return float(timeout)


class SmsClientConfig(BaseModel):
    """
    Immutable configuration held by an SmsClient.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    base_url: httpx.URL
    sender: Phone
    account_sid: SecretStr
    auth_token: SecretStr
    timeout: float = DEFAULT_TIMEOUT


class SmsClientBuilder:
    """
    Collects SMS client settings. Nothing is checked until build().

    Usage:
        client = (
            SmsClient.builder()
            .base_url("https://api.twilio.com")
            .sender(Phone.parse("0700782326", "KE"))
            .account_sid("AC...")
            .auth_token("...")
            .build()
        )
    """

    def __init__(self):
        self._base_url: Optional[str] = None
        self._sender: Optional[Phone] = None
        self._account_sid: Optional[SecretStr] = None
        self._auth_token: Optional[SecretStr] = None
        self._timeout: Optional[float] = None
        self._http_client: Optional[httpx.AsyncClient] = None
        self._transport: Optional[httpx.AsyncBaseTransport] = None

    def base_url(self, url: Union[str, httpx.URL]) -> "SmsClientBuilder":
        self._base_url = url
        return self

    def sender(self, sender: Phone) -> "SmsClientBuilder":
        self._sender = sender
        return self

    def account_sid(self, account_sid: Union[str, SecretStr]) -> "SmsClientBuilder":
        self._account_sid = as_secret(account_sid)
        return self

    def auth_token(self, token: Union[str, SecretStr]) -> "SmsClientBuilder":
        self._auth_token = as_secret(token)
        return self

    def timeout(self, seconds: float) -> "SmsClientBuilder":
        self._timeout = seconds
        return self

    def http_client(self, client: httpx.AsyncClient) -> "SmsClientBuilder":
        """Use a caller-owned httpx client. It is not closed by SmsClient.aclose()."""
        self._http_client = client
        return self

    def transport(self, transport: httpx.AsyncBaseTransport) -> "SmsClientBuilder":
        self._transport = transport
        return self

    def build(self) -> "SmsClient":
        """
        Raises:
            ConfigurationError: a mandatory field is missing or invalid
        """
        if self._base_url is None or str(self._base_url) == "":
            raise ConfigurationError("Twilio sms base_url is required")
        if self._sender is None:
            raise ConfigurationError("Twilio sms sender phone is required")
        if self._account_sid is None:
            raise ConfigurationError("Twilio sms account_sid is required")
        if self._auth_token is None:
            raise ConfigurationError("Twilio sms auth_token is required")

        try:
            base_url = httpx.URL(self._base_url)
        except httpx.InvalidURL as exc:
            raise ConfigurationError(f"Twilio sms base_url is invalid: {exc}") from exc

        config = SmsClientConfig(
            base_url=base_url,
            sender=self._sender,
            account_sid=self._account_sid,
            auth_token=self._auth_token,
            timeout=check_timeout(self._timeout, "Twilio sms"),
        )

        owns_client = self._http_client is None
        http_client = self._http_client or httpx.AsyncClient(
            timeout=config.timeout,
            follow_redirects=True,
            transport=self._transport,
        )

        return SmsClient(config, http_client, owns_client=owns_client)


class SmsClient:
    """
    Sends messages through Twilio Programmable Messaging.

    Safe to share between concurrent tasks: it only holds immutable
    configuration and the pooled httpx client.
    """

    def __init__(self, config: SmsClientConfig, http_client: httpx.AsyncClient, owns_client: bool = True):
        self._config = config
        self._http_client = http_client
        self._owns_client = owns_client

    @staticmethod
    def builder() -> SmsClientBuilder:
        return SmsClientBuilder()

    @classmethod
    def from_settings(cls, settings: Settings) -> "SmsClient":
        """
        Builds a client from environment settings.

        Raises:
            ConfigurationError: a required setting is missing, or the sender
                number does not validate
        """
        sender = None
        if settings.TWILIO_SENDER_NUMBER:
            try:
                if settings.TWILIO_SENDER_COUNTRY:
                    sender = Phone.parse(settings.TWILIO_SENDER_NUMBER, settings.TWILIO_SENDER_COUNTRY)
                else:
                    sender = Phone.parse_without_country(settings.TWILIO_SENDER_NUMBER)
            except ParseError as exc:
                raise ConfigurationError(f"Twilio sms sender phone is invalid: {exc}") from exc

        builder = (
            cls.builder()
            .base_url(settings.TWILIO_API_BASE_URL)
            .timeout(settings.TWILIO_TIMEOUT_SECONDS)
        )
        if sender is not None:
            builder.sender(sender)
        if settings.TWILIO_ACCOUNT_SID is not None:
            builder.account_sid(settings.TWILIO_ACCOUNT_SID)
        if settings.TWILIO_AUTH_TOKEN is not None:
            builder.auth_token(settings.TWILIO_AUTH_TOKEN)

        return builder.build()

    @property
    def config(self) -> SmsClientConfig:
        return self._config

    @property
    def sender(self) -> Phone:
        return self._config.sender

    async def send(
        self,
        to: Phone,
        content: str,
        send_as_mms: Optional[bool] = None,
        media_urls: Optional[List[str]] = None,
    ) -> SendSmsResponse:
        """
        Sends a message to a validated phone.

        Args:
            to: Recipient
            content: Message text
            send_as_mms: Ask Twilio to deliver as MMS
            media_urls: Publicly reachable media URLs, sent comma-joined

        Returns:
            SendSmsResponse

        Raises:
            ClientError: see request_engine.execute
        """
        config = self._config
        path = MESSAGES_PATH.format(
            account_sid=urlencode_path_segment(config.account_sid.get_secret_value())
        )

        fields: Dict[str, str] = {
            "From": config.sender.e164,
            "To": to.e164,
            "Body": content,
        }
        if media_urls is not None:
            fields["MediaUrl"] = ",".join(media_urls)
        if send_as_mms is not None:
            fields["SendAsMms"] = "true" if send_as_mms else "false"

        logger.info(f"📤 {SERVICE_NAME}: sending message to {to.e164}", extra={"service": SERVICE_NAME})

        response = await execute(
            self._http_client,
            config.base_url,
            path,
            config.account_sid,
            config.auth_token,
            config.timeout,
            fields,
            SendSmsResponse,
            SERVICE_NAME,
        )

        logger.debug(
            f"{SERVICE_NAME}: message accepted (sid={response.sid}, status={response.status})",
            extra={"service": SERVICE_NAME},
        )
        return response

    async def aclose(self) -> None:
        """Closes the pooled httpx client if this SmsClient created it."""
        if self._owns_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "SmsClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    def __repr__(self):
        return f"SmsClient(base_url={str(self._config.base_url)!r}, sender={self._config.sender.e164!r})"
