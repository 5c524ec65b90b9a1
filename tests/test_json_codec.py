"""Unit tests for sysapi.core.json_codec: null omission, camelCase and ISO datetimes."""

import json
import unittest
from datetime import UTC, datetime

from sysapi.core.json_codec import convert_object, read_value, write_string
from sysapi.schemas.resource import ResourceRecord
from sysapi.schemas.user import UserListItem, UserRecord


def _user(**kwargs: object) -> UserRecord:
    defaults: dict = {
        "id": 3,
        "username": "user",
        "email": "user@domain.com",
        "password": "$2b$12$abcdefghijklmnopqrstuv",
        "is_active": 1,
        "created_at": datetime(2026, 10, 19, 8, 30, 0, tzinfo=UTC),
        "last_login": datetime(2026, 10, 19, 9, 0, 0, tzinfo=UTC),
    }
    defaults.update(kwargs)
    return UserRecord(**defaults)


class TestWriteString(unittest.TestCase):
    def test_camel_case_field_names(self) -> None:
        data = json.loads(write_string(_user()))
        self.assertIn("isActive", data)
        self.assertIn("createdAt", data)
        self.assertIn("lastLogin", data)
        self.assertNotIn("is_active", data)

    def test_null_fields_omitted(self) -> None:
        data = json.loads(write_string(_user(email=None, last_login=None)))
        self.assertNotIn("email", data)
        self.assertNotIn("lastLogin", data)
        self.assertEqual(data["username"], "user")

    def test_datetime_is_iso_string_not_epoch(self) -> None:
        data = json.loads(write_string(_user()))
        self.assertIsInstance(data["createdAt"], str)
        self.assertTrue(data["createdAt"].startswith("2026-10-19T08:30:00"))

    def test_list_of_records(self) -> None:
        items = [UserListItem(id=1, username="a"), UserListItem(id=2, username="b", email="b@x.io")]
        data = json.loads(write_string(items))
        self.assertEqual(data, [{"id": 1, "username": "a"}, {"id": 2, "username": "b", "email": "b@x.io"}])

    def test_scalar(self) -> None:
        self.assertEqual(write_string(42), "42")


class TestRoundTrip(unittest.TestCase):
    """write_string(read_value(write_string(u))) == write_string(u)."""

    def test_full_user(self) -> None:
        text = write_string(_user())
        self.assertEqual(write_string(read_value(text, UserRecord)), text)

    def test_user_with_nulls(self) -> None:
        text = write_string(_user(email=None, password=None, last_login=None))
        again = read_value(text, UserRecord)
        self.assertIsNone(again.email)
        self.assertEqual(write_string(again), text)

    def test_resource(self) -> None:
        resource = ResourceRecord(
            id=2, name="menu", type=1, permission="sys:menu", parent_id=1, icon="i", url="/m"
        )
        text = write_string(resource)
        self.assertIn('"parentId":1', text)
        self.assertEqual(read_value(text, ResourceRecord), resource)


class TestReadValue(unittest.TestCase):
    def test_accepts_snake_case_input(self) -> None:
        user = read_value('{"username": "u", "is_active": 0}', UserRecord)
        self.assertEqual(user.is_active, 0)

    def test_invalid_json_raises_value_error(self) -> None:
        with self.assertRaises(ValueError):
            read_value("{not json", UserRecord)


class TestConvertObject(unittest.TestCase):
    def test_from_dict(self) -> None:
        item = convert_object({"id": 1, "username": "u", "lastLogin": None}, UserListItem)
        self.assertEqual(item.id, 1)
        self.assertIsNone(item.last_login)

    def test_from_attributes(self) -> None:
        class Row:
            id = 5
            username = "row"
            email = None
            last_login = None

        item = convert_object(Row(), UserListItem)
        self.assertEqual(item.username, "row")


if __name__ == "__main__":
    unittest.main()
