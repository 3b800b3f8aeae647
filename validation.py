"""Email rule shared by the signup form and the subscribe API.

Both tiers call :func:`validate_email_address`, so a value the HTML form
rejects is rejected by ``POST /api/subscribe`` with the same message and
vice versa. The module has no Flask or WTForms imports.
"""
from email_validator import EmailNotValidError, validate_email

from errors import ValidationError

EMAIL_MESSAGE = "Please enter a valid email address"


def validate_email_address(candidate):
    """Return ``None`` if *candidate* is a syntactically valid address, else the error message.

    The value is checked as given: it is not trimmed or case-folded, and
    any whitespace makes it invalid. Deliverability (DNS) is not checked.
    """
    if not isinstance(candidate, str) or not candidate:
        return EMAIL_MESSAGE

    if any(ch.isspace() for ch in candidate):
        return EMAIL_MESSAGE

    local_part, at, domain = candidate.rpartition("@")
    if not at or not local_part or "." not in domain:
        return EMAIL_MESSAGE

    try:
        validate_email(candidate, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError:
        return EMAIL_MESSAGE

    return None


def parse_subscription(payload):
    """Extract the email from a decoded subscribe request body.

    Raises :class:`ValidationError` when the body is not an object or its
    ``email`` fails the rule.
    """
    if not isinstance(payload, dict):
        raise ValidationError(EMAIL_MESSAGE)

    email = payload.get("email")
    message = validate_email_address(email)
    if message:
        raise ValidationError(message)
    return email
