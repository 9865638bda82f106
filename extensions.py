"""
Модуль: `extensions.py`.
Назначение: Экземпляры Flask-расширений и доступ к хранилищу текущего приложения.
"""

from flask import current_app
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_cors import CORS
from flask_babel import Babel

# Расширения создаются без приложения и привязываются в create_app()
db = SQLAlchemy()
login_manager = LoginManager()
cors = CORS()
babel = Babel()

STORAGE_EXTENSION = "minimind.storage"


def get_storage():
    """Возвращает хранилище, переданное в фабрику приложения."""
    return current_app.extensions[STORAGE_EXTENSION]
