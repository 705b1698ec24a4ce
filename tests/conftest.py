import os

import pytest

from twilio_client import Phone


@pytest.fixture
def kenyan_phone() -> Phone:
    return Phone.parse("0700782326", "KE")


@pytest.fixture
def sender_phone() -> Phone:
    return Phone.parse("0712345678", "KE")


@pytest.fixture(autouse=True)
def clean_twilio_env(monkeypatch):
    """Keep real TWILIO_* variables out of Settings() built in tests."""
    for name in list(os.environ):
        if name.startswith("TWILIO_"):
            monkeypatch.delenv(name)
