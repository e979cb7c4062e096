"""Политики проверок.

Этот модуль намеренно data-only: замороженные dataclass'ы и их значения
по умолчанию.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EmailPolicy:
    """Параметры грамматики email для `ensure_valid_email`.

    Проверка всегда синтаксическая, без DNS-запросов.

    Атрибуты:
        allow_smtputf8: разрешить не-ASCII символы в локальной части.
        allow_quoted_local: разрешить "quoted"@local-part.
        allow_domain_literal: разрешить user@[192.0.2.1].
        allow_display_name: разрешить "Name <user@domain>".
        globally_deliverable: требовать домен, доступный из интернета
            (точка в домене, известный TLD). По умолчанию выключено:
            грамматика допускает admin@mailserver1.
        allow_test_domains: принимать зарезервированный TLD .test.
    """

    allow_smtputf8: bool = True
    allow_quoted_local: bool = False
    allow_domain_literal: bool = False
    allow_display_name: bool = False
    globally_deliverable: bool = False
    allow_test_domains: bool = True


DEFAULT_EMAIL_POLICY = EmailPolicy()
