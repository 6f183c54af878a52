"""Tests for the urlencoded form decoder."""

import pytest

from domain.contact import decode_form_body


class TestDecodeFormBody:
    """Test decode_form_body()."""

    def test_plain_pairs(self):
        fields = decode_form_body(b"name=a&email=b&message=c")

        assert fields == {"name": "a", "email": "b", "message": "c"}

    def test_percent_encoded_and_plus(self):
        fields = decode_form_body(b"name=Jane+Doe&email=jane%40x.com&message=Hi%21%0Athere")

        assert fields["name"] == "Jane Doe"
        assert fields["email"] == "jane@x.com"
        assert fields["message"] == "Hi!\nthere"

    def test_utf8_multibyte_value(self):
        fields = decode_form_body("name=%E5%B1%B1%E7%94%B0".encode())

        assert fields["name"] == "山田"

    def test_str_body_is_accepted(self):
        assert decode_form_body("name=a") == {"name": "a"}

    @pytest.mark.parametrize("body", [b"", None, ""])
    def test_empty_body(self, body):
        assert decode_form_body(body) == {}

    def test_pair_without_equals_is_skipped(self):
        assert decode_form_body(b"flag&name=a") == {"name": "a"}

    def test_empty_key_is_skipped(self):
        assert decode_form_body(b"=orphan&name=a") == {"name": "a"}

    def test_empty_value_is_kept(self):
        assert decode_form_body(b"name=") == {"name": ""}

    def test_bad_escape_drops_only_its_pair(self):
        fields = decode_form_body(b"name=a%ZZ&email=b&message=c")

        assert "name" not in fields
        assert fields == {"email": "b", "message": "c"}

    def test_truncated_escape_drops_pair(self):
        assert decode_form_body(b"name=a&message=c%4") == {"name": "a"}

    def test_invalid_utf8_drops_pair(self):
        assert decode_form_body(b"name=%FF&email=b") == {"email": "b"}

    def test_last_duplicate_wins(self):
        assert decode_form_body(b"name=first&name=second") == {"name": "second"}

    def test_value_may_contain_equals(self):
        assert decode_form_body(b"message=a=b") == {"message": "a=b"}

