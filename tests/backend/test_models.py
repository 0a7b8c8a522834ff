"""
Tests for profile models, the session holder and store errors.
"""

import pytest
from bson import ObjectId
from pydantic import ValidationError

from profiles_app.exceptions import DuplicateCredentialError, UnknownProfileTypeError
from profiles_app.models.profile import (
    Admin,
    Gender,
    User,
    document_to_profile,
    profile_to_document,
)
from profiles_app.session import SessionHolder


class TestProfileDocuments:
    """Tests for conversion between models and stored documents."""

    def test_user_document_layout(self, make_user):
        doc = profile_to_document(make_user())

        assert "_id" not in doc
        assert doc["type"] == "User"
        assert doc["gender"] == "FEMALE"
        assert doc["card"] == "4000-1234-5678-9010"
        assert set(doc) == {
            "type", "email", "username", "password", "name",
            "lastname", "telephone", "gender", "card",
        }

    def test_admin_document_uses_current_account_field(self, admin_profile):
        doc = profile_to_document(admin_profile)

        assert doc["type"] == "Admin"
        assert doc["currentAccount"] == "ES00-0000-0000"
        assert "current_account" not in doc

    def test_document_to_profile_dispatches_on_type(self, admin_document):
        user_doc = {
            "_id": ObjectId(),
            "type": "User",
            "email": "u@example.com",
            "username": "u",
            "password": "x",
            "name": "U",
            "lastname": "V",
            "telephone": "1",
            "gender": "MALE",
            "card": "c",
        }
        admin_doc = dict(admin_document, _id=ObjectId())

        user = document_to_profile(user_doc)
        admin = document_to_profile(admin_doc)

        assert isinstance(user, User)
        assert user.id == str(user_doc["_id"])
        assert user.gender == Gender.MALE
        assert isinstance(admin, Admin)
        assert admin.current_account == "ES00-0000-0000"

    @pytest.mark.parametrize("profile_type", ["Guest", None])
    def test_unknown_type_raises(self, profile_type):
        doc = {"_id": ObjectId(), "email": "g@example.com", "username": "g"}
        if profile_type is not None:
            doc["type"] = profile_type

        with pytest.raises(UnknownProfileTypeError) as exc_info:
            document_to_profile(doc)

        assert exc_info.value.profile_type == profile_type

    def test_invalid_gender_rejected(self, make_user):
        with pytest.raises(ValidationError):
            make_user(gender="UNKNOWN")

    def test_stored_email_kept_as_written(self, make_user):
        assert make_user(email="bob@localhost").email == "bob@localhost"
        assert make_user(email="alice@Example.COM").email == "alice@Example.COM"

    def test_register_request_rejects_invalid_email(self, registration_payload):
        from profiles_app.schemas.profile import RegisterRequest

        with pytest.raises(ValidationError):
            RegisterRequest(**{**registration_payload, "email": "not-an-email"})

    def test_register_request_keeps_email_case(self, registration_payload):
        from profiles_app.schemas.profile import RegisterRequest

        request = RegisterRequest(**{**registration_payload, "email": "alice@Example.COM"})

        assert request.email == "alice@Example.COM"
        assert request.to_user().email == "alice@Example.COM"


class TestSessionHolder:
    """Tests for SessionHolder."""

    def test_starts_empty(self):
        session = SessionHolder()

        assert session.profile is None
        assert session.is_authenticated is False
        assert session.is_admin is False

    def test_set_profile_replaces_current(self, make_user, admin_profile):
        session = SessionHolder()

        session.set_profile(make_user())
        assert session.is_authenticated
        assert not session.is_admin

        session.set_profile(admin_profile)
        assert session.profile is admin_profile
        assert session.is_admin

    def test_clear(self, make_user):
        session = SessionHolder()
        session.set_profile(make_user())

        session.clear()

        assert session.profile is None


class TestDuplicateCredentialError:
    """Tests for the duplicate credential message."""

    @pytest.mark.parametrize("fields,message", [
        (["email"], "Email already exists"),
        (["username"], "Username already exists"),
        (["email", "username"], "Both email and username already exist"),
    ])
    def test_message(self, fields, message):
        error = DuplicateCredentialError(fields)

        assert str(error) == message
        assert error.fields == tuple(fields)
