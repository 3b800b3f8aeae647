import pytest

from errors import ValidationError
from validation import EMAIL_MESSAGE, parse_subscription, validate_email_address


@pytest.mark.parametrize("email", [
    "a@b.com",
    "hello@comingsoon.io",
    "first.last+tag@mail.co.uk",
    "UPPER@Domain.ORG",
    "user@site.local",
    "user@example.test",
    "me@host.localhost",
])
def test_accepts_valid_addresses(email):
    assert validate_email_address(email) is None


@pytest.mark.parametrize("email", [
    "not-an-email",
    "missing-domain@",
    "@no-local.com",
    "a@nodot",
    "a b@c.com",
    " a@b.com",
    "a@b.com ",
    "a@b.com\n",
    "",
    None,
    42,
])
def test_rejects_invalid_addresses(email):
    assert validate_email_address(email) == EMAIL_MESSAGE


def test_parse_subscription_returns_email_unchanged():
    assert parse_subscription({"email": "Mixed.Case@B.com"}) == "Mixed.Case@B.com"


@pytest.mark.parametrize("payload", [None, [], "a@b.com", {}, {"email": "nope"}, {"mail": "a@b.com"}])
def test_parse_subscription_rejects_bad_payloads(payload):
    with pytest.raises(ValidationError) as excinfo:
        parse_subscription(payload)
    assert excinfo.value.message == EMAIL_MESSAGE
