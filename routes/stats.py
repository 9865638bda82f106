"""
Модуль: `routes/stats.py`.
Назначение: Сводка для панели управления.
"""

from flask import jsonify
from flask_login import current_user, login_required

from extensions import get_storage
from utils.stats import collect_dashboard_stats


def register_routes(app):
    @app.get("/api/stats")
    @login_required
    def dashboard_stats():
        return jsonify(collect_dashboard_stats(get_storage(), current_user.id))
