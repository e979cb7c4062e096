"""domainguard.core.validation

Рендеринг значений для сообщений об ошибках.

Сообщение строится только на пути ошибки, успешный путь ничего не форматирует.
"""

from __future__ import annotations

from domainguard.core.patterns import ELLIPSIS, MAX_VALUE_LENGTH


def render(value: object, max_length: int = MAX_VALUE_LENGTH) -> str:
    """`str(value)`, обрезанный до `max_length` символов."""

    text = str(value)
    if len(text) <= max_length:
        return text
    return text[: max_length - len(ELLIPSIS)] + ELLIPSIS


def subject(name: str, value: object) -> str:
    return f"{name}={render(value)}"

