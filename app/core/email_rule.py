"""Email Rule — the one email-format rule shared by handler and caller.

Invariants:
    - normalize_email is the ONLY place an address is checked or normalized
    - Domain part lower-cased, local part kept as given, whitespace stripped
    - Pure: no DNS lookups (check_deliverability=False), no IO

Design Decisions:
    - email-validator over a hand-written regex: same validator pydantic's EmailStr
      uses, RFC 5322/6531 aware
    - Local part case preserved: RFC 5321 lets the receiving host treat it
      case-sensitively, so "a@x.io" and "A@x.io" are distinct subscribers
"""

from email_validator import EmailNotValidError, validate_email

EMAIL_FIELD = "email"


def normalize_email(value: str) -> str:
    """Return the canonical form of value, or raise ValueError with a readable message."""
    if not isinstance(value, str):
        raise ValueError("Email must be a string")
    candidate = value.strip()
    if not candidate:
        raise ValueError("Email is required")
    try:
        result = validate_email(candidate, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"Invalid email address: {e}") from e
    return result.normalized

