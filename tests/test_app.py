"""Tests for the application factory and cross-cutting request handling."""

import pytest
from flask import request

from app import create_app
from config import TestingConfig
from storage import MemStorage, SqlStorage
from tests.factories import register
from utils.i18n import resolve_request_language


class CsrfConfig(TestingConfig):
    CSRF_ENABLED = True


class SqlConfig(TestingConfig):
    STORAGE_BACKEND = "sql"


class TestFactory:
    def test_injected_storage_is_used(self):
        store = MemStorage()

        app = create_app(TestingConfig, storage=store)

        assert app.extensions["minimind.storage"] is store

    def test_backend_from_config(self):
        app = create_app(SqlConfig)

        assert isinstance(app.extensions["minimind.storage"], SqlStorage)

    def test_unknown_backend_is_rejected(self):
        class BrokenConfig(TestingConfig):
            STORAGE_BACKEND = "cassandra"

        with pytest.raises(ValueError):
            create_app(BrokenConfig)

    def test_full_flow_on_sql_backend(self):
        client = create_app(SqlConfig).test_client()
        assert register(client, "alice").status_code == 201

        connection = client.post(
            "/api/connections",
            json={
                "name": "Team Slack",
                "url": "https://slack.com/api",
                "token": "xoxb",
                "status": "Connected",
                "icon": "https://a.slack-edge.com/favicon.png",
            },
        ).get_json()
        feed = client.post(
            "/api/feeds",
            json={
                "name": "Tips",
                "full_text": "tip one\n\ntip two\n\ntip three",
                "separator": "\\n\\n",
                "frequency": "Weekly",
                "connection_id": connection["id"],
            },
        ).get_json()

        assert feed["contents"] == ["tip one", "tip two", "tip three"]
        assert client.delete(f"/api/connections/{connection['id']}").status_code == 204
        assert client.get(f"/api/feeds/{feed['id']}").status_code == 404


class TestRequestHandling:
    def test_healthz(self, client):
        response = client.get("/healthz")

        assert response.status_code == 200
        assert response.get_json() == {"status": "ok"}

    def test_security_headers(self, client):
        response = client.get("/healthz")

        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["X-Content-Type-Options"] == "nosniff"

    def test_unknown_route_returns_json_error(self, client):
        response = client.get("/api/does-not-exist")

        assert response.status_code == 404
        assert response.get_json()["success"] is False

    def test_unexpected_error_returns_500(self, app, client):
        @app.get("/api/boom")
        def boom():
            raise RuntimeError("boom")

        response = client.get("/api/boom")

        assert response.status_code == 500
        assert response.get_json() == {"success": False, "error": "Internal server error"}


class TestCsrf:
    @pytest.fixture
    def csrf_client(self):
        return create_app(CsrfConfig, storage=MemStorage()).test_client()

    def test_state_change_without_token_is_rejected(self, csrf_client):
        response = register(csrf_client, "alice")

        assert response.status_code == 400
        assert "CSRF" in response.get_json()["error"]

    def test_state_change_with_token_is_accepted(self, csrf_client):
        token = csrf_client.get("/api/csrf-token").get_json()["csrf_token"]
        csrf_client.environ_base["HTTP_X_CSRF_TOKEN"] = token

        response = register(csrf_client, "alice")

        assert response.status_code == 201

    def test_reads_do_not_need_token(self, csrf_client):
        assert csrf_client.get("/api/services").status_code == 200


class TestLanguageSelection:
    def resolve(self, app, **kwargs):
        with app.test_request_context(**kwargs):
            return resolve_request_language(
                request=request,
                supported_languages=app.config["SUPPORTED_LANGUAGES"],
                cookie_name=app.config["LANG_COOKIE_NAME"],
                default_language=app.config["DEFAULT_LANGUAGE"],
            )

    def test_cookie_wins(self, app):
        lang = self.resolve(
            app,
            headers={"Cookie": "site_lang=ru", "Accept-Language": "en-US,en;q=0.9"},
        )

        assert lang == "ru"

    def test_accept_language_header(self, app):
        assert self.resolve(app, headers={"Accept-Language": "ru-RU,ru;q=0.9"}) == "ru"

    def test_falls_back_to_default(self, app):
        assert self.resolve(app, headers={"Accept-Language": "de-DE"}) == "en"
