import pytest

from twilio_client import ParseError, Phone, RawPhone

VALID_KENYAN_NUMBERS = [
    "0700782326",
    "0700123456",
    "0712345678",
    "0722123456",
    "0733123456",
    "+254712345678",
    "254712345678",
]


@pytest.mark.parametrize("number", VALID_KENYAN_NUMBERS)
def test_valid_kenyan_number_is_parsed(number):
    phone = Phone.parse(number, "KE")
    assert phone.e164.startswith("+254")
    assert phone.country_iso == "KE"


@pytest.mark.parametrize("number", VALID_KENYAN_NUMBERS)
def test_e164_output_reparses_to_equal_phone(number):
    phone = Phone.parse(number, "KE")
    reparsed = Phone.parse_without_country(phone.e164)

    assert reparsed == phone
    assert reparsed.e164 == phone.e164
    assert Phone.parse(phone.e164, "KE").e164 == phone.e164


def test_national_and_international_forms_are_equal():
    assert Phone.parse("0712345678", "KE") == Phone.parse_without_country("+254712345678")
    assert hash(Phone.parse("0712345678", "KE")) == hash(Phone.parse_without_country("+254712345678"))


def test_e164_has_no_separators():
    phone = Phone.parse("0700782326", "KE")
    assert phone.e164 == "+254700782326"
    assert phone.e164_number() == "+254700782326"
    assert str(phone) == "+254700782326"


def test_country_hint_is_case_insensitive():
    assert Phone.parse("0700782326", "ke") == Phone.parse("0700782326", "KE")


def test_country_is_derived_without_hint():
    assert Phone.parse_without_country("+254700782326").country_iso == "KE"
    assert Phone.parse_without_country("+16502530000").country_iso == "US"


@pytest.mark.parametrize("number", ["25470234323", "254723435456523", "070078232", "07007823261234"])
def test_number_with_length_not_in_range_is_rejected(number):
    with pytest.raises(ParseError):
        Phone.parse(number, "KE")


def test_empty_string_is_rejected():
    with pytest.raises(ParseError):
        Phone.parse("", "KE")
    with pytest.raises(ParseError):
        Phone.parse_without_country("")


@pytest.mark.parametrize("number", ["2547ji@89898", "0700-782-326", "0700 782 326", "+254 700 782326", "07OO782326", "+"])
def test_number_with_invalid_chars_is_rejected(number):
    with pytest.raises(ParseError):
        Phone.parse(number, "KE")
    with pytest.raises(ParseError):
        Phone.parse_without_country(number)


@pytest.mark.parametrize("country", ["XX", "KEN", "", "12"])
def test_unknown_country_hint_is_rejected(country):
    with pytest.raises(ParseError) as exc_info:
        Phone.parse("0700782326", country)
    assert "not a valid or known phone country code" in str(exc_info.value)


def test_national_format_without_country_is_rejected():
    with pytest.raises(ParseError) as exc_info:
        Phone.parse_without_country("0700782326")
    assert exc_info.value.number == "0700782326"


def test_invalid_number_message_names_the_input():
    with pytest.raises(ParseError) as exc_info:
        Phone.parse("25470234323", "KE")
    assert "25470234323" in exc_info.value.message


def test_phone_is_not_equal_to_its_string():
    assert Phone.parse("0700782326", "KE") != "+254700782326"


def test_raw_phone_converts_to_phone():
    raw = RawPhone(number="0700782326", country_code="KE")
    assert raw.to_phone() == Phone.parse_without_country("+254700782326")


def test_raw_phone_with_invalid_number_raises():
    with pytest.raises(ParseError):
        RawPhone(number="123", country_code="KE").to_phone()


def test_missing_country_hint_message_is_readable():
    with pytest.raises(ParseError) as exc_info:
        Phone.parse("0700782326", None)
    assert "None is" not in str(exc_info.value)
    assert "is not a valid or known phone country code" in str(exc_info.value)
    assert "''" in str(exc_info.value)
