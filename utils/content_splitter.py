"""
Модуль: `utils/content_splitter.py`.
Назначение: Разбиение исходного текста ленты на отдельные элементы контента.

Разделитель задаётся строкой. Два служебных обозначения, которые приходят из формы
как экранированные последовательности, заменяются реальными символами:
`\\n` – перевод строки, `\\n\\n` – пустая строка между абзацами. Любая другая строка
(например `---`, `;` или `,`) используется буквально.
"""

NEWLINE_PLACEHOLDER = "\\n"
PARAGRAPH_PLACEHOLDER = "\\n\\n"

_PLACEHOLDERS = {
    NEWLINE_PLACEHOLDER: "\n",
    PARAGRAPH_PLACEHOLDER: "\n\n",
}


def resolve_separator(separator: str | None) -> str:
    """Возвращает фактический разделитель для служебного обозначения или строки."""
    if not separator:
        return ""
    return _PLACEHOLDERS.get(separator, separator)


def split_content(full_text: str | None, separator: str | None) -> list[str]:
    """Делит текст по разделителю, обрезает пробелы и отбрасывает пустые элементы."""
    actual_separator = resolve_separator(separator)
    if not full_text or not actual_separator:
        return []
    items = (item.strip() for item in full_text.split(actual_separator))
    return [item for item in items if item]


def join_content(contents: list[str], separator: str | None) -> str:
    """Собирает элементы обратно в текст для формы редактирования."""
    actual_separator = resolve_separator(separator) or "\n"
    return actual_separator.join(contents)
