"""Email Rule — tests for the shared email-format rule.

Tests cover:
    - normalize_email accepts common valid forms
    - normalize_email lower-cases the domain, keeps the local part, strips whitespace
    - normalize_email raises ValueError with a readable message for invalid input
    - SubscriberCreate applies the same rule and reports field "email"
"""

import pytest

from app.core.email_rule import EMAIL_FIELD, normalize_email
from app.core.errors import ValidationError
from app.schemas.subscriber import SubscriberCreate, parse_subscriber_create


VALID = [
    "a@example.com",
    "first.last@example.org",
    "user+tag@mail.example.com",
    "o'brien@example.co.uk",
]

INVALID = [
    "not-an-email",
    "",
    "   ",
    "a@",
    "@example.com",
    "a@@example.com",
    "a b@example.com",
    "a@example",
    "a@-example.com",
]


@pytest.mark.parametrize("email", VALID)
def test_valid_emails_pass(email):
    assert normalize_email(email) == email


@pytest.mark.parametrize("email", INVALID)
def test_invalid_emails_fail(email):
    with pytest.raises(ValueError) as exc_info:
        normalize_email(email)
    assert str(exc_info.value)


def test_domain_is_lowercased_local_part_kept():
    assert normalize_email("Ada.Lovelace@Example.COM") == "Ada.Lovelace@example.com"


def test_whitespace_is_stripped():
    assert normalize_email("  a@example.com\t") == "a@example.com"


def test_non_string_is_rejected():
    with pytest.raises(ValueError):
        normalize_email(None)
    with pytest.raises(ValueError):
        normalize_email(123)


# ─── Schema uses the same rule ──────────────────────────────────

def test_schema_normalizes_email():
    request = SubscriberCreate(email="Ada@Example.com")
    assert request.email == "Ada@example.com"


def test_schema_message_matches_rule_message():
    with pytest.raises(ValueError) as rule_exc:
        normalize_email("not-an-email")
    with pytest.raises(ValidationError) as schema_exc:
        parse_subscriber_create({"email": "not-an-email"})
    assert schema_exc.value.message == str(rule_exc.value)
    assert schema_exc.value.field == EMAIL_FIELD
