"""Contact Rules — honeypot, required-field and length checks before sending."""

import pytest

from resume_site.core.contact_rules import check_submission, missing_fields, overlong_fields
from resume_site.core.errors import FieldTooLongError, MissingFieldsError, SpamRejectionError
from resume_site.schemas.contact import ContactForm


def _form(**overrides):
    values = {"name": "Ann", "email": "ann@example.com", "message": "Hi", "honeypot": ""}
    values.update(overrides)
    return ContactForm(**values)


def test_complete_form_passes():
    check_submission(_form())


def test_filled_honeypot_is_spam():
    with pytest.raises(SpamRejectionError):
        check_submission(_form(honeypot="http://spam.example"))


def test_honeypot_checked_before_required_fields():
    with pytest.raises(SpamRejectionError):
        check_submission(_form(name="", honeypot="bot"))


def test_whitespace_only_fields_are_missing():
    with pytest.raises(MissingFieldsError) as exc_info:
        check_submission(_form(name="  ", message="\n"))
    assert exc_info.value.fields == ["name", "message"]


def test_missing_fields_empty_for_complete_form():
    assert missing_fields(_form()) == []


def test_overlong_fields_are_rejected():
    with pytest.raises(FieldTooLongError) as exc_info:
        check_submission(_form(name="n" * 201, message="x" * 10_001))
    assert exc_info.value.fields == ["name", "message"]


def test_limits_are_inclusive():
    assert overlong_fields(_form(email="e" * 320, message="x" * 10_000)) == []


def test_missing_fields_reported_before_length():
    with pytest.raises(MissingFieldsError):
        check_submission(_form(name="", message="x" * 10_001))
