import pytest

from customer_record_api.app.core.errors import ValidationError
from customer_record_api.app.core.validation import (
    EMAIL_ERROR,
    NAME_ERROR,
    PHONE_ERROR,
    check_customer_fields,
    is_valid_email,
    is_valid_name,
    is_valid_phone_number,
    parse_customer_id,
    parse_page_number,
    validate_customer,
)
from customer_record_api.app.schemas.customer import CustomerCreate
from tests.conftest import customer_payload


@pytest.mark.parametrize("name", ["Ann", "lee", "McDonald", "X"])
def test_valid_names(name):
    assert is_valid_name(name)


@pytest.mark.parametrize(
    "name",
    ["", "Ann1", "Ann Lee", "O'Brien", "Anne-Marie", "Zoë", "Ann\n", None],
)
def test_invalid_names(name):
    assert not is_valid_name(name)


@pytest.mark.parametrize(
    "phone",
    ["555123456", "55512345678", "555-123-4567", "(555)1234567", "５５５１２３４５６７", "5551234567\n", None],
)
def test_invalid_phone_numbers(phone):
    assert not is_valid_phone_number(phone)


def test_ten_digit_phone_number_is_valid():
    assert is_valid_phone_number("0000000000")


@pytest.mark.parametrize("email", ["a@b.com", "a@b.c", "first.last@mail.example.org", "see a@b.co here"])
def test_valid_emails(email):
    assert is_valid_email(email)


@pytest.mark.parametrize("email", ["ab.com", "a@bcom", "@b.com", "a@.com", "a@b.", "a @b.com", "", None])
def test_invalid_emails(email):
    assert not is_valid_email(email)


def test_first_failure_wins():
    # Every field is wrong; the name rule is checked first.
    assert check_customer_fields("A1", "Lee", "12", "nope") == NAME_ERROR
    assert check_customer_fields("Ann", "Lee", "12", "nope") == PHONE_ERROR
    assert check_customer_fields("Ann", "Lee", "5551234567", "nope") == EMAIL_ERROR
    assert check_customer_fields("Ann", "Lee", "5551234567", "a@b.com") is None


def test_last_name_is_checked_too():
    assert check_customer_fields("Ann", "L33", "5551234567", "a@b.com") == NAME_ERROR


def test_address_is_not_validated():
    payload = CustomerCreate(**customer_payload(address="#4, ??? !!"))
    validate_customer(payload)


def test_validate_customer_raises_with_reason():
    payload = CustomerCreate(**customer_payload(phone_number="555"))
    with pytest.raises(ValidationError) as exc_info:
        validate_customer(payload)
    assert exc_info.value.message == PHONE_ERROR
    assert exc_info.value.status_code == 400


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1", 1),
        ("3", 3),
        ("0", 1),
        ("-2", 1),
        ("abc", 1),
        ("", 1),
        ("3abc", 3),
        (" 2", 2),
        ("+4", 4),
    ],
)
def test_parse_page_number(raw, expected):
    assert parse_page_number(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1", 1),
        ("42", 42),
        ("-3", -3),
        (str(2 ** 63 - 1), 2 ** 63 - 1),
        (str(-(2 ** 63)), -(2 ** 63)),
        (str(2 ** 63), None),
        ("99999999999999999999", None),
        ("abc", None),
        ("1.5", None),
        ("3abc", None),
        ("", None),
    ],
)
def test_parse_customer_id(raw, expected):
    assert parse_customer_id(raw) == expected
