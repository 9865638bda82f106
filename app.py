"""
Название: «MiniMind»
Краткое описание: панель управления подключениями к внешним сервисам (Gmail, TickTick,
Notion, Slack) и лентами контента, которые делятся на элементы для поэтапной отправки.
Язык: Python (Flask)
"""

import hmac
import os
import secrets

from flask import Flask, jsonify, request, session
from flask_babel import gettext as _
from werkzeug.exceptions import HTTPException

from config import Config
from errors import AppError
from extensions import STORAGE_EXTENSION, babel, cors, db, login_manager
import models  # noqa: F401 - регистрирует таблицы для db.create_all()
from routes.auth import register_routes as register_auth_routes
from routes.common import api_error
from routes.connections import register_routes as register_connection_routes
from routes.feeds import register_routes as register_feed_routes
from routes.stats import register_routes as register_stats_routes
from storage import SqlStorage, Storage, create_storage
from utils.i18n import resolve_request_language
from utils.rate_limit import InMemoryRateLimiter


def create_app(config_object=Config, storage: Storage | None = None) -> Flask:
    """Фабрика приложения; хранилище можно передать явно (например, в тестах)."""
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config["LOG_LEVEL"])

    if storage is None:
        storage = create_storage(app.config["STORAGE_BACKEND"])
    app.extensions[STORAGE_EXTENSION] = storage

    # Таблицы нужны только SQL-хранилищу
    if isinstance(storage, SqlStorage):
        db.init_app(app)
        with app.app_context():
            db.create_all()

    login_manager.init_app(app)

    def select_locale() -> str:
        return resolve_request_language(
            request=request,
            supported_languages=app.config["SUPPORTED_LANGUAGES"],
            cookie_name=app.config["LANG_COOKIE_NAME"],
            default_language=app.config["DEFAULT_LANGUAGE"],
        )

    babel.init_app(app, locale_selector=select_locale)

    if app.config["CORS_ENABLED"]:
        cors.init_app(
            app,
            resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
            supports_credentials=True,
        )

    app.extensions["rate_limiter"] = InMemoryRateLimiter()

    # Регистрация роутов по модулям
    register_auth_routes(app)
    register_connection_routes(app)
    register_feed_routes(app)
    register_stats_routes(app)

    def _ensure_csrf_token() -> str:
        token = session.get("csrf_token")
        if not token:
            token = secrets.token_urlsafe(32)
            session["csrf_token"] = token
        return token

    def _is_csrf_valid() -> bool:
        expected = session.get("csrf_token")
        provided = request.headers.get("X-CSRF-Token")
        if not expected or not provided:
            return False
        return hmac.compare_digest(expected, provided)

    @login_manager.unauthorized_handler
    def handle_unauthorized():
        return api_error(_("Not authenticated"), 401)

    @app.errorhandler(AppError)
    def handle_app_error(error: AppError):
        return api_error(error.message, error.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        return api_error(error.description, error.code)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        app.logger.exception("Необработанная ошибка при обработке %s %s", request.method, request.path)
        return api_error(_("Internal server error"), 500)

    @app.before_request
    def enforce_csrf():
        """Проверяет CSRF-токен для всех изменяющих запросов."""
        if not app.config["CSRF_ENABLED"]:
            return None

        if request.method in {"GET", "HEAD", "OPTIONS", "TRACE"}:
            return None

        if _is_csrf_valid():
            return None

        return api_error(_("Invalid CSRF token. Refresh the page and try again."), 400)

    @app.after_request
    def apply_security_headers(response):
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
        return response

    @app.get("/api/csrf-token")
    def csrf_token():
        return jsonify({"csrf_token": _ensure_csrf_token()})

    @app.get("/healthz")
    def healthz():
        return {"status": "ok"}, 200

    return app


app = create_app()


if __name__ == "__main__":
    is_production = os.environ.get("FLASK_ENV", "").lower() == "production"
    app.run(debug=not is_production)
