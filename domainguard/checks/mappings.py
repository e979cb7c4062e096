"""Проверки словарей (любых mapping'ов с `in` и `[]`)."""

from __future__ import annotations

from typing import Any, Optional

from domainguard.checks.nulls import ensure_not_none
from domainguard.core.patterns import DEFAULT_NAME
from domainguard.core.types import SupportsKeyLookup
from domainguard.core.validation import render
from domainguard.errors import GuardError, GuardFailureKind


def ensure_key_exists(mapping: Optional[SupportsKeyLookup], key: Any, name: str = DEFAULT_NAME) -> Any:
    """Вернуть `mapping[key]`, если ключ есть.

    Сначала проверяется сам mapping (`cannot be null`), потом наличие ключа.
    """

    checked = ensure_not_none(mapping, name)
    if key not in checked:
        raise GuardError(f"{name} does not contain key '{render(key)}'.", GuardFailureKind.KEY)
    return checked[key]


__all__ = [
    "ensure_key_exists",
]
