"""
twilio_client/services/request_engine.py

Purpose: Shared request execution for the SMS and Verify clients

- Resolves the endpoint against the configured base URL
- POSTs the form fields with HTTP Basic auth and the configured timeout
- Classifies the response into a typed payload or a ClientError
- Exactly one network attempt per call, no retries
"""

from typing import Dict, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, SecretStr, ValidationError

from twilio_client.core.exceptions import (
    AuthenticationError,
    ConfigurationError,
    DeserializationError,
    RequestTimeoutError,
    ServerResponseError,
    TransportError,
)
from twilio_client.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


def resolve_url(base_url: Union[str, httpx.URL], relative_path: str, service_name: str) -> httpx.URL:
    """
    Joins a relative endpoint path onto the base URL.

    Raises:
        ConfigurationError: if the result is not an absolute http(s) URL
    """
    # Never render the joined URL: its path holds the account or service SID
    reason = f"{service_name}: invalid URL: base URL {str(base_url)!r} must be an absolute http(s) URL"
    try:
        url = httpx.URL(base_url).join(relative_path)
    except httpx.InvalidURL as exc:
        raise ConfigurationError(reason) from exc

    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(reason)

    return url


async def execute(
    http_client: httpx.AsyncClient,
    base_url: Union[str, httpx.URL],
    relative_path: str,
    account_sid: SecretStr,
    auth_token: SecretStr,
    timeout: float,
    fields: Dict[str, str],
    response_model: Type[T],
    service_name: str,
) -> T:
    """
    Performs one authenticated form POST and returns the parsed payload.

    Args:
        http_client: Pooled client owned by the calling SMS/Verify client
        base_url: Provider base URL
        relative_path: Endpoint path, joined onto base_url
        account_sid: Basic auth username
        auth_token: Basic auth password
        timeout: Seconds, applied to the whole request
        fields: Form fields for the request body
        response_model: Pydantic model a 2xx body is parsed into
        service_name: "Twilio SMS" / "Twilio Verify", used to tag log lines

    Returns:
        Instance of response_model

    Raises:
        ConfigurationError: endpoint does not resolve to a URL
        RequestTimeoutError: transport timed out (carries `timeout`)
        TransportError: any other failure while sending or reading
        DeserializationError: 2xx body does not fit response_model
        AuthenticationError: HTTP 401
        ServerResponseError: any other non-2xx status
    """
    url = resolve_url(base_url, relative_path, service_name)
    log_extra = {"service": service_name}

    request = http_client.build_request(
        "POST",
        url,
        data=fields,
        timeout=timeout,
    )
    auth = httpx.BasicAuth(account_sid.get_secret_value(), auth_token.get_secret_value())

    try:
        response = await http_client.send(request, auth=auth, stream=True)
    except httpx.TimeoutException as exc:
        logger.error(f"{service_name}: request timed out: {exc!r}", extra=log_extra)
        raise RequestTimeoutError(timeout) from exc
    except httpx.HTTPError as exc:
        logger.error(f"{service_name}: failed to send request: {exc!r}", extra=log_extra)
        raise TransportError(exc) from exc

    try:
        await response.aread()
        message = response.text
    except httpx.TimeoutException as exc:
        logger.error(f"{service_name}: timed out reading response body: {exc!r}", extra=log_extra)
        raise RequestTimeoutError(timeout) from exc
    except httpx.HTTPError as exc:
        logger.error(f"{service_name}: failed to read response body: {exc!r}", extra=log_extra)
        raise TransportError(exc) from exc
    finally:
        await response.aclose()

    if response.is_success:
        try:
            return response_model.model_validate_json(message)
        except ValidationError as exc:
            logger.error(
                f"{service_name}: failed to parse response: {exc}",
                extra={**log_extra, "status_code": response.status_code},
            )
            raise DeserializationError(exc) from exc

    if response.status_code == 401:
        raise AuthenticationError(message)

    raise ServerResponseError(response.status_code, message)
