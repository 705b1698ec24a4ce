"""
twilio_client/models/phone.py

Purpose: Validated phone numbers

- Parses numbers with or without a country hint
- Rejects anything the numbering plan does not consider valid
- Exposes the E.164 form and the two-letter country
"""

import re
from typing import Optional

import phonenumbers
from phonenumbers import NumberParseException, PhoneNumberFormat
from pydantic import BaseModel

from twilio_client.core.exceptions import ParseError

# Digits with at most one leading "+"
_NUMBER_PATTERN = re.compile(r"^\+?[0-9]+$")


class Phone:
    """
    A phone number that has passed validation.

    Build one with Phone.parse() or Phone.parse_without_country(). Two
    phones are equal when their E.164 strings are equal.
    """

    __slots__ = ("_number", "_e164")

    def __init__(self, number: phonenumbers.PhoneNumber):
        self._number = number
        self._e164 = phonenumbers.format_number(number, PhoneNumberFormat.E164)

    @classmethod
    def parse(cls, number: str, country_iso: str) -> "Phone":
        """
        Parses a number using the dialing rules of a country.

        Args:
            number: National or international format number
            country_iso: Two-letter country code, any case (e.g. "KE")

        Returns:
            Validated Phone

        Raises:
            ParseError: unknown country, unparseable number, or invalid number
        """
        country = (country_iso or "").strip().upper()
        if country not in phonenumbers.SUPPORTED_REGIONS:
            raise ParseError(
                f"{country!r} is not a valid or known phone country code",
                number=number,
            )
        return cls._build(number, country)

    @classmethod
    def parse_without_country(cls, number: str) -> "Phone":
        """
        Parses a number that carries its own international prefix ("+254...").

        Raises:
            ParseError: unparseable number or invalid number
        """
        return cls._build(number, None)

    @classmethod
    def _build(cls, number: str, country: Optional[str]) -> "Phone":
        candidate = (number or "").strip()
        if not _NUMBER_PATTERN.match(candidate):
            raise ParseError(f"error while parsing phone number {number}", number=number)

        try:
            parsed = phonenumbers.parse(candidate, country)
        except NumberParseException as exc:
            raise ParseError(
                f"error while parsing phone number {number}: {exc}",
                number=number,
            ) from exc

        if not phonenumbers.is_valid_number(parsed):
            raise ParseError(f"{number} is not a valid phone number.", number=number)

        return cls(parsed)

    @property
    def e164(self) -> str:
        """+<country calling code><national number>"""
        return self._e164

    def e164_number(self) -> str:
        """Same as the e164 property, kept as a method for callers that expect one."""
        return self._e164

    @property
    def country_iso(self) -> str:
        """Two-letter region of the number ("001" for non-geographic numbers)."""
        return phonenumbers.region_code_for_number(self._number)

    def __eq__(self, other):
        if not isinstance(other, Phone):
            return NotImplemented
        return self._e164 == other._e164

    def __hash__(self):
        return hash(self._e164)

    def __str__(self):
        return self._e164

    def __repr__(self):
        return f"Phone({self._e164!r})"


class RawPhone(BaseModel):
    """
    Unvalidated phone as it arrives from callers: a number and a country.
    """
    number: str
    country_code: str

    def to_phone(self) -> Phone:
        return Phone.parse(self.number, self.country_code)
