"""domainguard.core.patterns

Константы, общие для всех проверок.

Принцип: регулярные выражения компилируются один раз при импорте,
а не на каждом вызове проверки.
"""

from __future__ import annotations

import re

# Имя параметра по умолчанию (в Python нет захвата выражения вызова)
DEFAULT_NAME: str = "value"

# Рендеринг значений в сообщениях
MAX_VALUE_LENGTH: int = 120
ELLIPSIS: str = "..."

# http(s) + расширение картинки + необязательная query-строка
IMAGE_URL_PATTERN: re.Pattern[str] = re.compile(
    r"^https?://.+\.(png|gif|webp|jpeg|jpg)(\?.*)?$",
    re.IGNORECASE,
)
