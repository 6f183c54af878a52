"""Tests for contact submission validation."""

import pytest

from domain.contact import (
    ContactSubmission,
    MissingFields,
    REQUIRED_FIELDS,
    decode_form_body,
    validate_submission,
)
from domain.contact.submission import field_or_none


class TestValidateSubmission:
    """Test validate_submission()."""

    def test_complete_submission(self):
        result = validate_submission({"name": "a", "email": "b", "message": "c"})

        assert result == ContactSubmission(name="a", email="b", message="c")

    def test_decoded_body_round_trip(self):
        result = validate_submission(decode_form_body(b"name=a&email=b&message=c"))

        assert result == ContactSubmission("a", "b", "c")

    @pytest.mark.parametrize("missing", REQUIRED_FIELDS)
    def test_missing_field(self, missing):
        fields = {"name": "a", "email": "b", "message": "c"}
        del fields[missing]

        result = validate_submission(fields)

        assert isinstance(result, MissingFields)
        assert result.fields == (missing,)

    def test_empty_value_counts_as_missing(self):
        result = validate_submission({"name": "", "email": "b", "message": "c"})

        assert result == MissingFields(fields=("name",))

    def test_all_missing_in_declared_order(self):
        result = validate_submission({})

        assert result.fields == ("name", "email", "message")

    def test_email_format_is_not_checked(self):
        result = validate_submission({"name": "a", "email": "not-an-address", "message": "c"})

        assert isinstance(result, ContactSubmission)
        assert result.email == "not-an-address"

    def test_extra_fields_are_ignored(self):
        result = validate_submission(
            {"name": "a", "email": "b", "message": "c", "phone": "123"}
        )

        assert result == ContactSubmission("a", "b", "c")

    def test_submission_is_immutable(self):
        submission = ContactSubmission("a", "b", "c")

        with pytest.raises(AttributeError):
            submission.name = "z"

    def test_whitespace_value_is_present(self):
        result = validate_submission({"name": " ", "email": "b", "message": "c"})

        assert result == ContactSubmission(name=" ", email="b", message="c")

    def test_accepts_read_only_mapping(self):
        from types import MappingProxyType

        result = validate_submission(MappingProxyType({"name": "a", "email": "b", "message": "c"}))

        assert result == ContactSubmission("a", "b", "c")


class TestFieldOrNone:
    def test_empty_string_is_absent(self):
        assert field_or_none({"name": ""}, "name") is None

    def test_missing_key_is_absent(self):
        assert field_or_none({}, "name") is None

    def test_present_value(self):
        assert field_or_none({"name": "a"}, "name") == "a"
