"""
twilio_client/services/verify_service.py

Purpose: Twilio Verify client (one-time passcodes)

- request(): sends an OTP to a phone over SMS
- verify(): checks the code the user typed
- Both calls go through the shared request engine
"""

from typing import Dict, Optional, Union

import httpx
from pydantic import BaseModel, ConfigDict, SecretStr

from twilio_client.core.config import Settings
from twilio_client.core.exceptions import ConfigurationError
from twilio_client.core.logging import get_logger
from twilio_client.models.phone import Phone
from twilio_client.schemas.verify import Channel, TwilioRequestResponse, TwilioVerifyResponse
from twilio_client.services.request_engine import execute
from twilio_client.services.sms_service import (
    DEFAULT_TIMEOUT,
    as_secret,
    check_timeout,
    urlencode_path_segment,
)

logger = get_logger(__name__)

SERVICE_NAME = "Twilio Verify"
VERIFICATIONS_PATH = "/v2/Services/{service_sid}/Verifications"
VERIFICATION_CHECK_PATH = "/v2/Services/{service_sid}/VerificationCheck"


class VerifyClientConfig(BaseModel):
    """
    Immutable configuration held by a VerifyClient.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    base_url: httpx.URL
    service_sid: SecretStr
    account_sid: SecretStr
    auth_token: SecretStr
    timeout: float = DEFAULT_TIMEOUT


class VerifyClientBuilder:
    """
    Collects Verify client settings. Nothing is checked until build().
    """

    def __init__(self):
        self._base_url: Optional[str] = None
        self._service_sid: Optional[SecretStr] = None
        self._account_sid: Optional[SecretStr] = None
        self._auth_token: Optional[SecretStr] = None
        self._timeout: Optional[float] = None
        self._http_client: Optional[httpx.AsyncClient] = None
        self._transport: Optional[httpx.AsyncBaseTransport] = None

    def base_url(self, url: Union[str, httpx.URL]) -> "VerifyClientBuilder":
        self._base_url = url
        return self

    def service_sid(self, service_sid: Union[str, SecretStr]) -> "VerifyClientBuilder":
        self._service_sid = as_secret(service_sid)
        return self

    def account_sid(self, account_sid: Union[str, SecretStr]) -> "VerifyClientBuilder":
        self._account_sid = as_secret(account_sid)
        return self

    def auth_token(self, token: Union[str, SecretStr]) -> "VerifyClientBuilder":
        self._auth_token = as_secret(token)
        return self

    def timeout(self, seconds: float) -> "VerifyClientBuilder":
        self._timeout = seconds
        return self

    def http_client(self, client: httpx.AsyncClient) -> "VerifyClientBuilder":
        """Use a caller-owned httpx client. It is not closed by VerifyClient.aclose()."""
        self._http_client = client
        return self

    def transport(self, transport: httpx.AsyncBaseTransport) -> "VerifyClientBuilder":
        self._transport = transport
        return self

    def build(self) -> "VerifyClient":
        """
        Raises:
            ConfigurationError: a mandatory field is missing or invalid
        """
        if self._base_url is None or str(self._base_url) == "":
            raise ConfigurationError("Twilio verify base_url is required")
        if self._account_sid is None:
            raise ConfigurationError("Twilio verify account_sid is required")
        if self._service_sid is None:
            raise ConfigurationError("Twilio verify service_sid is required")
        if self._auth_token is None:
            raise ConfigurationError("Twilio verify auth_token is required")

        try:
            base_url = httpx.URL(self._base_url)
        except httpx.InvalidURL as exc:
            raise ConfigurationError(f"Twilio verify base_url is invalid: {exc}") from exc

        config = VerifyClientConfig(
            base_url=base_url,
            service_sid=self._service_sid,
            account_sid=self._account_sid,
            auth_token=self._auth_token,
            timeout=check_timeout(self._timeout, "Twilio verify"),
        )

        owns_client = self._http_client is None
        http_client = self._http_client or httpx.AsyncClient(
            timeout=config.timeout,
            follow_redirects=True,
            transport=self._transport,
        )

        return VerifyClient(config, http_client, owns_client=owns_client)


class VerifyClient:
    """
    Requests and checks one-time passcodes through a Verify service.
    """

    def __init__(self, config: VerifyClientConfig, http_client: httpx.AsyncClient, owns_client: bool = True):
        self._config = config
        self._http_client = http_client
        self._owns_client = owns_client

    @staticmethod
    def builder() -> VerifyClientBuilder:
        return VerifyClientBuilder()

    @classmethod
    def from_settings(cls, settings: Settings) -> "VerifyClient":
        """
        Builds a client from environment settings.

        Raises:
            ConfigurationError: a required setting is missing
        """
        builder = (
            cls.builder()
            .base_url(settings.TWILIO_VERIFY_BASE_URL)
            .timeout(settings.TWILIO_TIMEOUT_SECONDS)
        )
        if settings.TWILIO_VERIFY_SERVICE_SID is not None:
            builder.service_sid(settings.TWILIO_VERIFY_SERVICE_SID)
        if settings.TWILIO_ACCOUNT_SID is not None:
            builder.account_sid(settings.TWILIO_ACCOUNT_SID)
        if settings.TWILIO_AUTH_TOKEN is not None:
            builder.auth_token(settings.TWILIO_AUTH_TOKEN)

        return builder.build()

    @property
    def config(self) -> VerifyClientConfig:
        return self._config

    def _path(self, template: str) -> str:
        service_sid = self._config.service_sid.get_secret_value()
        return template.format(service_sid=urlencode_path_segment(service_sid))

    async def _post(self, path: str, fields: Dict[str, str], response_model):
        config = self._config
        return await execute(
            self._http_client,
            config.base_url,
            path,
            config.account_sid,
            config.auth_token,
            config.timeout,
            fields,
            response_model,
            SERVICE_NAME,
        )

    async def request(self, to: Phone) -> TwilioRequestResponse:
        """
        Sends a one-time passcode to `to` over SMS.

        Raises:
            ClientError: see request_engine.execute
        """
        fields = {
            "To": to.e164,
            "Channel": Channel.SMS.value,
        }

        logger.info(f"🔐 {SERVICE_NAME}: requesting OTP for {to.e164}", extra={"service": SERVICE_NAME})
        response = await self._post(self._path(VERIFICATIONS_PATH), fields, TwilioRequestResponse)
        logger.debug(f"{SERVICE_NAME}: OTP requested (status={response.status})", extra={"service": SERVICE_NAME})

        return response

    async def verify(self, to: Phone, code: Union[str, SecretStr]) -> TwilioVerifyResponse:
        """
        Checks the code the user received.

        A wrong code is not an error: Twilio answers 200 with
        status "pending" and valid=False.

        Raises:
            ClientError: see request_engine.execute
        """
        code = as_secret(code)
        fields = {
            "To": to.e164,
            "Code": code.get_secret_value(),
        }

        logger.info(f"🔐 {SERVICE_NAME}: verifying OTP for {to.e164}", extra={"service": SERVICE_NAME})
        response = await self._post(self._path(VERIFICATION_CHECK_PATH), fields, TwilioVerifyResponse)
        logger.debug(
            f"{SERVICE_NAME}: OTP check finished (status={response.status}, valid={response.valid})",
            extra={"service": SERVICE_NAME},
        )

        return response

    async def aclose(self) -> None:
        """Closes the pooled httpx client if this VerifyClient created it."""
        if self._owns_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "VerifyClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    def __repr__(self):
        return f"VerifyClient(base_url={str(self._config.base_url)!r})"
