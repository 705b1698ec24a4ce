import base64
import json
from typing import Any, Optional
from urllib.parse import parse_qs

import httpx


ACCOUNT_SID = "AC0123456789abcdef0123456789abcdef"
AUTH_TOKEN = "super-secret-auth-token"
SERVICE_SID = "VA0123456789abcdef0123456789abcdef"
BASE_URL = "https://twilio.test"


class MockProvider:
    """
    Stands in for the Twilio API. Records every request it receives and
    answers with a fixed status/body, or raises a transport exception.
    """

    def __init__(
        self,
        status_code: int = 200,
        json_body: Optional[Any] = None,
        text: Optional[str] = None,
        exc: Optional[type] = None,
    ):
        self.status_code = status_code
        self.json_body = json_body
        self.text = text
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc("simulated transport failure", request=request)
        if self.json_body is not None:
            return httpx.Response(self.status_code, json=self.json_body)
        return httpx.Response(self.status_code, text=self.text or "")

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "provider received no request"
        return self.requests[-1]

    def last_form(self) -> dict:
        parsed = parse_qs(self.last_request.content.decode(), keep_blank_values=True)
        return {key: values[0] for key, values in parsed.items()}


def basic_auth_header(username: str, password: str) -> str:
    token = base64.b64encode(f"{username}:{password}".encode()).decode()
    return f"Basic {token}"


def error_body(code: int, message: str, status: int) -> str:
    return json.dumps({"code": code, "message": message, "status": status})
