"""Unit tests for request auth parsing and error mapping helpers."""

import pytest
from sqlalchemy.exc import IntegrityError

from folio.interface.api.auth import bearer_token
from folio.interface.api.error import duplicate_key_message


class TestBearerToken:
    @pytest.mark.parametrize(
        ("header", "expected"),
        [
            ("Bearer abc.def", "abc.def"),
            ("bearer abc.def", "abc.def"),
            ("Bearer   abc.def  ", "abc.def"),
            ("Basic dXNlcjpwYXNz", None),
            ("Bearer", None),
            ("Bearer ", None),
            ("", None),
            (None, None),
        ],
    )
    def test_parses_header(self, header, expected):
        assert bearer_token(header) == expected


class TestDuplicateKeyMessage:
    def test_names_field_and_value(self):
        orig = Exception(
            'duplicate key value violates unique constraint "users_email_key"\n'
            "DETAIL:  Key (email)=(ada@example.com) already exists."
        )
        exc = IntegrityError("INSERT INTO users ...", {}, orig)

        assert duplicate_key_message(exc) == "The email 'ada@example.com' already exists"

    def test_generic_message_without_detail(self):
        exc = IntegrityError("INSERT INTO likes ...", {}, Exception("constraint failed"))

        assert duplicate_key_message(exc) == "This record already exists"
