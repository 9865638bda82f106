"""
Программа: «MiniMind» – панель рассылки контента по подключённым сервисам.
Модуль: routes/connections.py – API подключений к внешним сервисам.

Назначение модуля:
- CRUD подключений текущего пользователя; удаление каскадно удаляет ленты подключения.
- Каталог поддерживаемых сервисов и имитация проверки подключения.
"""

from flask import current_app, jsonify
from flask_babel import gettext as _
from flask_login import current_user, login_required

from extensions import get_storage
from routes.common import api_error, json_body, validated
from utils.connection_tester import SERVICES, check_connection, get_service
from utils.ownership import require_owned_connection
from utils.validation import validate_connection_create, validate_connection_patch


def register_routes(app):
    @app.get("/api/services")
    def list_services():
        return jsonify(list(SERVICES))

    @app.post("/api/connections/test")
    @login_required
    def test_connection():
        """Проверить учётные данные сервиса до сохранения подключения."""
        data = json_body()
        if not isinstance(data, dict):
            return api_error(_("Request body must be a JSON object"), 400)

        service_id = data.get("service")
        if get_service(service_id) is None:
            return api_error(_("Please select a connection type"), 400)

        result = check_connection(
            service_id,
            data,
            delay_seconds=current_app.config["CONNECTION_TEST_DELAY_SECONDS"],
        )
        if not result.success:
            return api_error(result.message, 400)
        return jsonify({"success": True, "message": result.message})

    @app.get("/api/connections")
    @login_required
    def list_connections():
        connections = get_storage().list_connections(current_user.id)
        return jsonify([connection.to_dict() for connection in connections])

    @app.post("/api/connections")
    @login_required
    def create_connection():
        fields = validated(validate_connection_create(json_body()))
        fields["user_id"] = current_user.id

        connection = get_storage().create_connection(fields)
        current_app.logger.info(
            "Создано подключение %s (id=%s) пользователем %s",
            connection.name,
            connection.id,
            current_user.id,
        )
        return jsonify(connection.to_dict()), 201

    @app.get("/api/connections/<int:connection_id>")
    @login_required
    def get_connection(connection_id: int):
        connection = require_owned_connection(get_storage(), connection_id, current_user.id)
        return jsonify(connection.to_dict())

    @app.patch("/api/connections/<int:connection_id>")
    @login_required
    def update_connection(connection_id: int):
        storage = get_storage()
        require_owned_connection(storage, connection_id, current_user.id)
        patch = validated(validate_connection_patch(json_body()))

        connection = storage.update_connection(connection_id, patch)
        return jsonify(connection.to_dict())

    @app.delete("/api/connections/<int:connection_id>")
    @login_required
    def delete_connection(connection_id: int):
        storage = get_storage()
        require_owned_connection(storage, connection_id, current_user.id)
        storage.delete_connection(connection_id)
        return "", 204
