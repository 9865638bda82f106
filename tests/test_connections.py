"""Tests for the connections API."""

import json

from tests.factories import connection_payload, feed_payload


class TestConnectionCrud:
    def test_create_returns_201_with_server_fields(self, auth_client):
        response = auth_client.post("/api/connections", json=connection_payload())

        assert response.status_code == 201
        body = response.get_json()
        assert body["id"] == 1
        assert body["status"] == "Connected"
        assert body["user_id"] == auth_client.get("/api/user").get_json()["id"]
        assert body["created_at"] == body["updated_at"]

    def test_create_ignores_client_user_id(self, auth_client, other_client):
        bob_id = other_client.get("/api/user").get_json()["id"]

        response = auth_client.post("/api/connections", json=connection_payload(user_id=bob_id))

        assert response.status_code == 201
        assert response.get_json()["user_id"] != bob_id

    def test_create_with_projects_list(self, auth_client):
        projects = [{"id": "67ca45548f08ced866d9763a", "name": "project2"}]

        response = auth_client.post(
            "/api/connections", json=connection_payload(name="Tasks", projects=projects)
        )

        assert response.status_code == 201
        assert json.loads(response.get_json()["projects"]) == projects

    def test_create_rejects_invalid_payload(self, auth_client):
        response = auth_client.post("/api/connections", json=connection_payload(status="Maybe"))

        assert response.status_code == 400

    def test_create_rejects_non_json_body(self, auth_client):
        response = auth_client.post("/api/connections", data="not json", content_type="text/plain")

        assert response.status_code == 400

    def test_list_returns_only_own_connections(self, auth_client, other_client, connection):
        other_client.post("/api/connections", json=connection_payload(name="Bob Slack"))

        response = auth_client.get("/api/connections")

        assert response.status_code == 200
        assert [item["id"] for item in response.get_json()] == [connection["id"]]

    def test_get_by_id(self, auth_client, connection):
        response = auth_client.get(f"/api/connections/{connection['id']}")

        assert response.status_code == 200
        assert response.get_json() == connection

    def test_patch_updates_status(self, auth_client, connection):
        response = auth_client.patch(
            f"/api/connections/{connection['id']}", json={"status": "Disconnected"}
        )

        assert response.status_code == 200
        body = response.get_json()
        assert body["status"] == "Disconnected"
        assert body["name"] == connection["name"]
        assert body["updated_at"] > connection["updated_at"]

    def test_patch_with_null_projects_clears_them(self, auth_client):
        projects = [{"id": "67ca45548f08ced866d9763a", "name": "project2"}]
        created = auth_client.post(
            "/api/connections", json=connection_payload(name="TickTick", projects=projects)
        ).get_json()

        response = auth_client.patch(f"/api/connections/{created['id']}", json={"projects": None})

        assert response.status_code == 200
        body = response.get_json()
        assert body["projects"] is None
        assert body["name"] == "TickTick"

    def test_patch_rejects_invalid_status(self, auth_client, connection):
        response = auth_client.patch(f"/api/connections/{connection['id']}", json={"status": "Off"})

        assert response.status_code == 400

    def test_delete_returns_204(self, auth_client, connection):
        response = auth_client.delete(f"/api/connections/{connection['id']}")

        assert response.status_code == 204
        assert auth_client.get(f"/api/connections/{connection['id']}").status_code == 404

    def test_delete_cascades_to_feeds(self, auth_client, connection):
        feed_ids = [
            auth_client.post("/api/feeds", json=feed_payload(connection["id"], name=f"Feed {i}")).get_json()["id"]
            for i in range(3)
        ]

        auth_client.delete(f"/api/connections/{connection['id']}")

        for feed_id in feed_ids:
            assert auth_client.get(f"/api/feeds/{feed_id}").status_code == 404
        assert auth_client.get("/api/feeds").get_json() == []


class TestConnectionOwnership:
    def test_foreign_connection_is_not_found(self, other_client, connection):
        path = f"/api/connections/{connection['id']}"

        assert other_client.get(path).status_code == 404
        assert other_client.patch(path, json={"name": "Hijacked"}).status_code == 404
        assert other_client.delete(path).status_code == 404

    def test_foreign_delete_leaves_connection_intact(self, auth_client, other_client, connection):
        other_client.delete(f"/api/connections/{connection['id']}")

        assert auth_client.get(f"/api/connections/{connection['id']}").get_json() == connection

    def test_missing_connection_is_not_found(self, auth_client):
        response = auth_client.get("/api/connections/404")

        assert response.status_code == 404
        assert response.get_json() == {"success": False, "error": "Connection not found"}


class TestServicesAndConnectionCheck:
    def test_services_catalog(self, client):
        response = client.get("/api/services")

        assert response.status_code == 200
        assert [service["id"] for service in response.get_json()] == [
            "gmail",
            "ticktick",
            "notion",
            "slack",
        ]

    def test_gmail_without_app_password_fails(self, auth_client):
        response = auth_client.post(
            "/api/connections/test", json={"service": "gmail", "email": "alice@example.com"}
        )

        assert response.status_code == 400
        assert "Invalid Gmail credentials" in response.get_json()["error"]

    def test_gmail_with_credentials_succeeds(self, auth_client):
        response = auth_client.post(
            "/api/connections/test",
            json={"service": "gmail", "email": "alice@example.com", "app_password": "abcd"},
        )

        assert response.status_code == 200
        assert response.get_json() == {"success": True, "message": "Successfully connected to gmail"}

    def test_unknown_service_is_rejected(self, auth_client):
        response = auth_client.post("/api/connections/test", json={"service": "fax"})

        assert response.status_code == 400

    def test_check_requires_login(self, client):
        response = client.post("/api/connections/test", json={"service": "slack"})

        assert response.status_code == 401
