"""Проверки принадлежности Enum.

В Python нельзя получить "необъявленный" экземпляр Enum (`Color(999)` сразу
бросает ValueError), поэтому проверка принимает сырое значение и тип Enum
и возвращает найденный член. Составные значения Flag, которые не объявлены
как отдельный член, не принимаются.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from domainguard.core.patterns import DEFAULT_NAME
from domainguard.core.types import EnumT
from domainguard.core.validation import subject
from domainguard.errors import GuardError, GuardFailureKind

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _member_for_value(enum_type: type[EnumT], value: Any) -> Optional[EnumT]:
    for member in enum_type.__members__.values():
        # тип должен совпадать: True и 1.0 не являются значением 1
        if member is value or (type(value) is type(member.value) and member.value == value):
            return member
    return None


def _member_for_name(enum_type: type[EnumT], text: str) -> Optional[EnumT]:
    key = text.strip().casefold()
    for member_name, member in enum_type.__members__.items():
        if member_name.casefold() == key:
            return member
    if _INTEGER.fullmatch(key) is None:
        return None
    return _member_for_value(enum_type, int(key))


def _undefined(name: str, value: object, enum_type: type) -> GuardError:
    return GuardError(
        f"{subject(name, value)} is not a valid {enum_type.__name__} value.",
        GuardFailureKind.ENUM,
    )


def ensure_enum_defined(value: Any, enum_type: type[EnumT], name: str = DEFAULT_NAME) -> EnumT:
    """Член `enum_type` или значение объявленного члена того же типа -> член.

    `True` и `1.0` не считаются значением `1`.
    """

    member = _member_for_value(enum_type, value)
    if member is None:
        raise _undefined(name, value, enum_type)
    return member


def ensure_enum_name_defined(value: str, enum_type: type[EnumT], name: str = DEFAULT_NAME) -> EnumT:
    """Разбор строки в член `enum_type` без учёта регистра.

    Принимается имя члена (включая алиасы) или целое число (только цифры
    с необязательным знаком), равное значению объявленного члена
    ("1" -> FIRST). Всё остальное отклоняется: "0_1", "1.0", "0x1" и числа,
    не соответствующие ни одному члену.
    """

    member = _member_for_name(enum_type, value)
    if member is None:
        raise _undefined(name, value, enum_type)
    return member


__all__ = [
    "ensure_enum_defined",
    "ensure_enum_name_defined",
]
