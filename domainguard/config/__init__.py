"""Конфигурация проверок (замороженные политики)."""

from __future__ import annotations

from .policies import DEFAULT_EMAIL_POLICY, EmailPolicy

__all__ = [
    "EmailPolicy",
    "DEFAULT_EMAIL_POLICY",
]
