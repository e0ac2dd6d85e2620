"""Unit tests for the User aggregate."""

from datetime import datetime, timezone

import pytest

from user_directory.domain.shared import ErrorCode
from user_directory.domain.user import (
    Email,
    InvalidEmailError,
    InvalidUserDataError,
    User,
)

TEST_EMAIL = "ann@x.io"


class TestUserCreate:
    def test_create_sets_fields(self):
        user = User.create("Ann", TEST_EMAIL, 30)

        assert user.name == "Ann"
        assert user.email == TEST_EMAIL
        assert user.age == 30
        assert user.id is None
        assert user.is_persisted is False
        assert user.created_at.tzinfo is not None

    def test_create_accepts_email_value_object(self):
        user = User.create("Ann", Email(TEST_EMAIL), 30)

        assert user.email_obj == Email(TEST_EMAIL)

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, name):
        with pytest.raises(InvalidUserDataError) as exc_info:
            User.create(name, TEST_EMAIL, 30)

        assert exc_info.value.details["field"] == "name"
        assert exc_info.value.code == ErrorCode.VALIDATION_ERROR

    def test_name_longer_than_fifty_rejected(self):
        with pytest.raises(InvalidUserDataError):
            User.create("a" * 51, TEST_EMAIL, 30)

    def test_name_of_fifty_characters_accepted(self):
        user = User.create("a" * 50, TEST_EMAIL, 30)

        assert len(user.name) == 50

    @pytest.mark.parametrize("age", [0, -1, True])
    def test_non_positive_age_rejected(self, age):
        with pytest.raises(InvalidUserDataError) as exc_info:
            User.create("Ann", TEST_EMAIL, age)

        assert exc_info.value.details["field"] == "age"

    def test_invalid_email_rejected(self):
        with pytest.raises(InvalidEmailError):
            User.create("Ann", "not-an-email", 30)


class TestUserMutation:
    def test_rename_validates(self):
        user = User.create("Ann", TEST_EMAIL, 30)

        user.rename("Anna")
        assert user.name == "Anna"

        with pytest.raises(InvalidUserDataError):
            user.rename(" ")
        assert user.name == "Anna"

    def test_change_email_and_age(self):
        user = User.create("Ann", TEST_EMAIL, 30)

        user.change_email("ann@y.io")
        user.change_age(31)

        assert user.email == "ann@y.io"
        assert user.age == 31

    def test_created_at_survives_changes(self):
        user = User.create("Ann", TEST_EMAIL, 30)
        created_at = user.created_at

        user.rename("Anna")
        user.change_age(40)

        assert user.created_at == created_at


class TestUserIdentity:
    def test_reconstitute_keeps_stored_values(self):
        created_at = datetime(2024, 1, 1, tzinfo=timezone.utc)

        user = User.reconstitute(
            id=7,
            name="Ann",
            email=TEST_EMAIL,
            age=30,
            created_at=created_at,
        )

        assert user.id == 7
        assert user.is_persisted is True
        assert user.created_at == created_at

    def test_equality_by_id(self):
        created_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
        first = User.reconstitute(1, "Ann", TEST_EMAIL, 30, created_at)
        same = User.reconstitute(1, "Other", "other@x.io", 50, created_at)
        different = User.reconstitute(2, "Ann", TEST_EMAIL, 30, created_at)

        assert first == same
        assert hash(first) == hash(same)
        assert first != different

    def test_unsaved_users_equal_only_to_themselves(self):
        first = User.create("Ann", TEST_EMAIL, 30)
        second = User.create("Ann", TEST_EMAIL, 30)

        assert first == first
        assert first != second
