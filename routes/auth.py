"""
Программа: «MiniMind» – панель рассылки контента по подключённым сервисам.
Модуль: routes/auth.py – маршруты аутентификации и управления сессиями.

Назначение модуля:
- Регистрация новых пользователей с хешированием пароля (scrypt).
- Вход и выход из системы с использованием Flask-Login.
- Загрузка пользователя из хранилища по идентификатору для управления сессией.
"""

from flask import current_app, jsonify, request
from flask_babel import gettext as _
from flask_login import current_user, login_required, login_user, logout_user
from werkzeug.security import check_password_hash, generate_password_hash

from errors import UnauthenticatedError
from extensions import get_storage, login_manager
from routes.common import api_error, json_body, validated
from utils.rate_limit import is_rate_limited
from utils.validation import validate_registration


@login_manager.user_loader
def load_user(user_id):
    return get_storage().get_user(int(user_id))


def register_routes(app):
    @app.post("/api/register")
    def register():
        if is_rate_limited("register", limit=10, window_seconds=15 * 60):
            return api_error(_("Too many registration attempts. Try again in a few minutes."), 429)

        fields = validated(
            validate_registration(json_body(), current_app.config["PASSWORD_MIN_LENGTH"])
        )
        fields["password"] = generate_password_hash(fields["password"], method="scrypt")

        user = get_storage().create_user(fields)
        login_user(user)
        current_app.logger.info("Зарегистрирован пользователь %s (id=%s)", user.username, user.id)
        return jsonify(user.to_dict()), 201

    @app.post("/api/login")
    def login():
        data = json_body() or {}
        username = data.get("username")
        password = data.get("password")
        if not isinstance(username, str) or not isinstance(password, str):
            return api_error(_("Username and password are required"), 400)

        if is_rate_limited("login_ip", limit=20, window_seconds=10 * 60):
            return api_error(_("Too many login attempts. Try again later."), 429)

        username_key = username.strip().lower() or "anonymous"
        if is_rate_limited("login_user", limit=10, window_seconds=10 * 60, identity=username_key):
            return api_error(_("Too many login attempts for this user. Try again later."), 429)

        user = get_storage().get_user_by_username(username.strip())
        if user and check_password_hash(user.password, password):
            login_user(user)
            return jsonify(user.to_dict())

        current_app.logger.warning("Неудачная попытка входа для %s", username_key)
        return api_error(_("Invalid username or password"), 401)

    @app.post("/api/logout")
    @login_required
    def logout():
        logout_user()
        return jsonify({"success": True})

    @app.get("/api/user")
    def current_user_info():
        if not current_user.is_authenticated:
            raise UnauthenticatedError(_("Not authenticated"))
        return jsonify(current_user.to_dict())
