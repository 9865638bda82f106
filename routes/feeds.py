"""
Программа: «MiniMind» – панель рассылки контента по подключённым сервисам.
Модуль: routes/feeds.py – API лент контента.

Назначение модуля:
- Создание ленты: текст делится на элементы по разделителю, счётчик отправки начинается с нуля.
- Частичное обновление с пересчётом элементов, когда переданы и текст, и разделитель.
- Переключение активности, удаление и чтение лент текущего пользователя.
"""

from flask import current_app, jsonify
from flask_babel import gettext as _
from flask_login import current_user, login_required

from errors import ValidationError
from extensions import get_storage
from models.feed import FeedPatch
from models.patch import UNSET
from routes.common import json_body, validated
from utils.content_splitter import split_content
from utils.validation import validate_feed_create, validate_feed_patch
from utils.ownership import require_owned_feed


def _require_usable_connection(storage, connection_id: int) -> None:
    connection = storage.get_connection(connection_id)
    if connection is None or connection.user_id != current_user.id:
        raise ValidationError(_("Unknown connection"))


def register_routes(app):
    @app.get("/api/feeds")
    @login_required
    def list_feeds():
        feeds = get_storage().list_feeds(current_user.id)
        return jsonify([feed.to_dict() for feed in feeds])

    @app.post("/api/feeds")
    @login_required
    def create_feed():
        storage = get_storage()
        fields = validated(validate_feed_create(json_body()))
        _require_usable_connection(storage, fields["connection_id"])

        fields["contents"] = split_content(fields["full_text"], fields["separator"])
        fields["user_id"] = current_user.id

        feed = storage.create_feed(fields)
        current_app.logger.info(
            "Создана лента %s (id=%s): элементов %s",
            feed.name,
            feed.id,
            len(feed.contents),
        )
        return jsonify(feed.to_dict()), 201

    @app.get("/api/feeds/<int:feed_id>")
    @login_required
    def get_feed(feed_id: int):
        feed = require_owned_feed(get_storage(), feed_id, current_user.id)
        return jsonify(feed.to_dict())

    @app.patch("/api/feeds/<int:feed_id>")
    @login_required
    def update_feed(feed_id: int):
        storage = get_storage()
        require_owned_feed(storage, feed_id, current_user.id)
        patch = validated(validate_feed_patch(json_body()))
        if patch.connection_id is not UNSET:
            _require_usable_connection(storage, patch.connection_id)

        # contents пересчитывается до слияния с хранимой записью
        feed = storage.update_feed(feed_id, patch.with_derived_contents())
        return jsonify(feed.to_dict())

    @app.patch("/api/feeds/<int:feed_id>/toggle")
    @login_required
    def toggle_feed(feed_id: int):
        storage = get_storage()
        existing = require_owned_feed(storage, feed_id, current_user.id)

        feed = storage.update_feed(feed_id, FeedPatch(active=not existing.active))
        return jsonify(feed.to_dict())

    @app.delete("/api/feeds/<int:feed_id>")
    @login_required
    def delete_feed(feed_id: int):
        storage = get_storage()
        require_owned_feed(storage, feed_id, current_user.id)
        storage.delete_feed(feed_id)
        return "", 204
