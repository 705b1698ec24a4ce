import json
import logging

import pytest

from twilio_client.core.exceptions import (
    AuthenticationError,
    ClientError,
    ConfigurationError,
    RequestTimeoutError,
    ServerResponseError,
)
from twilio_client.core.logging import DevelopmentFormatter, StructuredFormatter, get_logger, setup_logging


@pytest.fixture
def restore_package_logger():
    logger = logging.getLogger("twilio_client")
    saved = (logger.level, list(logger.handlers), logger.propagate)
    yield logger
    logger.setLevel(saved[0])
    logger.handlers[:] = saved[1]
    logger.propagate = saved[2]


def make_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="twilio_client.services.request_engine",
        level=logging.ERROR,
        pathname=__file__,
        lineno=10,
        msg="Twilio SMS: failed to send request",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_get_logger_is_namespaced():
    assert get_logger("sms").name == "twilio_client.sms"
    assert get_logger("twilio_client.services.sms_service").name == "twilio_client.services.sms_service"


def test_structured_formatter_emits_json_with_service():
    payload = json.loads(StructuredFormatter().format(make_record(service="Twilio SMS")))

    assert payload["level"] == "ERROR"
    assert payload["message"] == "Twilio SMS: failed to send request"
    assert payload["service"] == "Twilio SMS"
    assert "status_code" not in payload


def test_development_formatter_appends_context():
    line = DevelopmentFormatter().format(make_record(service="Twilio Verify", status_code=200))
    assert "[service=Twilio Verify, status_code=200]" in line


def test_setup_logging_installs_single_handler(restore_package_logger):
    logger = setup_logging(level="debug", structured=True)
    setup_logging(level="debug", structured=True)

    assert logger is restore_package_logger
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, StructuredFormatter)
    assert logging.getLogger("httpx").level == logging.WARNING


def test_error_kinds_have_stable_codes():
    assert ConfigurationError("x").code == "CONFIGURATION_ERROR"
    assert RequestTimeoutError(10).code == "TIMEOUT"
    assert AuthenticationError("").code == "AUTHENTICATION_FAILED"
    assert ServerResponseError(503, "down").code == "SERVER_RESPONSE_ERROR"
    assert str(RequestTimeoutError(10)) == "Operation timed out after 10 seconds"
    assert isinstance(ServerResponseError(503, "down"), ClientError)
