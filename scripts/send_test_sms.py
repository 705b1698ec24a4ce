"""
Live smoke test against Twilio

Checks that the .env credentials are complete, then optionally sends a
test SMS and/or runs an OTP request + check against the real API.

Usage: python scripts/send_test_sms.py
"""

import asyncio

from dotenv import load_dotenv

from twilio_client import ClientError, ParseError, Phone, SmsClient, VerifyClient
from twilio_client.core.config import Settings, validate_settings
from twilio_client.core.logging import setup_logging

# Load environment variables
load_dotenv()


def check_config(settings: Settings, verify: bool) -> bool:
    """Report which settings are present"""
    print("=" * 60)
    print("  Twilio Configuration Check")
    print("=" * 60 + "\n")

    print(f"Account SID: {'✅ Set' if settings.TWILIO_ACCOUNT_SID else '❌ Not set'}")
    print(f"Auth Token: {'✅ Set' if settings.TWILIO_AUTH_TOKEN else '❌ Not set'}")
    print(f"Sender Number: {settings.TWILIO_SENDER_NUMBER or '❌ Not set'}")
    print(f"Verify Service SID: {'✅ Set' if settings.TWILIO_VERIFY_SERVICE_SID else '❌ Not set'}")
    print(f"Timeout: {settings.TWILIO_TIMEOUT_SECONDS:g}s\n")

    try:
        validate_settings(settings, verify=verify)
    except ValueError as e:
        print(f"❌ {e}")
        return False

    return True


def ask_phone() -> Phone:
    number = input("Enter the recipient number (with country code, e.g., +254712345678): ")
    return Phone.parse_without_country(number)


async def send_message(settings: Settings):
    """Send one SMS"""
    to = ask_phone()
    print(f"\n📤 Sending test message to {to.e164}...")

    async with SmsClient.from_settings(settings) as client:
        response = await client.send(to, "🧪 Test message from twilio-client")

    print("\n✅ Message accepted!")
    print(f"Message SID: {response.sid}")
    print(f"Status: {response.status.value if response.status else 'unknown'}")


async def request_and_verify_otp(settings: Settings):
    """Request an OTP and check the code typed back"""
    to = ask_phone()

    async with VerifyClient.from_settings(settings) as client:
        requested = await client.request(to)
        print(f"\n🔐 OTP requested, status: {requested.status.value if requested.status else 'unknown'}")

        code = input("Enter the code you received: ")
        checked = await client.verify(to, code)

    if checked.valid:
        print("\n✅ Code approved")
    else:
        print(f"\n❌ Code rejected (status: {checked.status.value})")


async def main():
    setup_logging()
    settings = Settings()

    print("\n🧪 Twilio Client Smoke Test\n")

    mode = input("Test (s)ms, (v)erify or (b)oth? ").strip().lower()
    run_sms = mode in ("s", "b")
    run_verify = mode in ("v", "b")

    if run_sms and not check_config(settings, verify=False):
        return
    if run_verify and not check_config(settings, verify=True):
        return

    try:
        if run_sms:
            await send_message(settings)
        if run_verify:
            await request_and_verify_otp(settings)
    except ParseError as e:
        print(f"\n❌ Invalid phone number: {e}")
    except ClientError as e:
        print(f"\n❌ Request failed [{e.code}]: {e.message}")

    print("\n" + "=" * 60 + "\n")


if __name__ == "__main__":
    asyncio.run(main())
