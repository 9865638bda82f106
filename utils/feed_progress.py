"""
Модуль: `utils/feed_progress.py`.
Назначение: Показатели прогресса отправки элементов ленты.
"""


def clamp_num_sent(num_sent: int | None, total_items: int) -> int:
    """Ограничивает счётчик отправленных элементов диапазоном [0, total_items]."""
    if not num_sent or num_sent < 0:
        return 0
    return min(num_sent, max(total_items, 0))


def completion_percent(num_sent: int, total_items: int) -> int:
    """Процент отправленных элементов, 0 для пустой ленты."""
    if total_items <= 0:
        return 0
    sent = clamp_num_sent(num_sent, total_items)
    # Половина округляется вверх, целочисленно без погрешностей float
    return (sent * 200 + total_items) // (2 * total_items)


def remaining_items(num_sent: int, total_items: int) -> int:
    return max(total_items, 0) - clamp_num_sent(num_sent, total_items)
