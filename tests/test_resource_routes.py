"""Route tests for /sys/resource against an in-memory SQLite app."""

import unittest

from fastapi.testclient import TestClient

from sysapi.core.config import Settings
from sysapi.core.database import Database
from sysapi.factory import create_app


def _client() -> TestClient:
    settings = Settings(
        _env_file=None, DATABASE_URL="sqlite://", DB_CREATE_TABLES=True, AUTH_ENABLED=False
    )
    return TestClient(create_app(settings, Database(settings.DATABASE_URL)))


class TestResourceRoutes(unittest.TestCase):
    def test_crud(self) -> None:
        with _client() as client:
            root = client.post("/sys/resource", json={"name": "system", "url": "/sys"}).json()
            child = client.post(
                "/sys/resource",
                json={"name": "users", "type": 1, "permission": "sys:user", "parentId": root},
            ).json()

            body = client.get(f"/sys/resource/{child}").json()
            self.assertEqual(body["parentId"], root)
            self.assertNotIn("parentId", client.get(f"/sys/resource/{root}").json())
            self.assertEqual(len(client.get("/sys/resource").json()), 2)

            updated = client.put(
                "/sys/resource", json={"id": child, "name": "accounts", "parentId": None}
            )
            self.assertEqual(updated.json(), 1)
            self.assertEqual(client.get(f"/sys/resource/{child}").json()["name"], "accounts")

            self.assertEqual(client.delete(f"/sys/resource/{child}").json(), 1)
            self.assertEqual(client.delete(f"/sys/resource/{child}").json(), 0)

    def test_invalid_parent_is_400(self) -> None:
        with _client() as client:
            response = client.post("/sys/resource", json={"name": "x", "parentId": 55})
            self.assertEqual(response.status_code, 400)
            self.assertEqual(response.json()["message"], "Invalid parent reference")

    def test_delete_parent_in_use_is_412(self) -> None:
        with _client() as client:
            root = client.post("/sys/resource", json={"name": "root"}).json()
            client.post("/sys/resource", json={"name": "leaf", "parentId": root})
            response = client.delete(f"/sys/resource/{root}")
            self.assertEqual(response.status_code, 412)
            self.assertEqual(response.json()["code"], 1003)

    def test_missing_resource_is_404(self) -> None:
        with _client() as client:
            self.assertEqual(client.get("/sys/resource/8").status_code, 404)

    def test_update_missing_is_412(self) -> None:
        with _client() as client:
            response = client.put("/sys/resource", json={"id": 8, "name": "x"})
            self.assertEqual(response.status_code, 412)

    def test_out_of_range_ids_are_400(self) -> None:
        with _client() as client:
            too_large = 2**31
            self.assertEqual(
                client.post("/sys/resource", json={"name": "x", "parentId": too_large}).status_code,
                400,
            )
            self.assertEqual(
                client.put("/sys/resource", json={"id": too_large, "name": "x"}).status_code, 400
            )
            self.assertEqual(client.get(f"/sys/resource/{too_large}").status_code, 400)
            self.assertEqual(client.delete("/sys/resource/1_0").status_code, 400)


if __name__ == "__main__":
    unittest.main()
