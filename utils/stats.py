"""
Модуль: `utils/stats.py`.
Назначение: Сводные показатели панели управления для одного пользователя.
"""

from storage.base import Storage


def collect_dashboard_stats(storage: Storage, user_id: int) -> dict:
    """Считает активные ленты, подключения и общее число отправленных элементов."""
    connections = storage.list_connections(user_id)
    feeds = storage.list_feeds(user_id)
    return {
        "activeFeeds": sum(1 for feed in feeds if feed.active),
        "connectedApps": len(connections),
        "contentDelivered": sum(feed.num_sent for feed in feeds),
    }
