"""
runtime — единственная точка, где читаются настройки окружения regionbox.

Переменные:
- REGIONBOX_EXTRA_ALIASES — путь к CSV (code,alias) с дополнительными алиасами регионов
- REGIONBOX_DEBUG         — 1/true/yes: печатать подробности загрузки алиасов

Доменный код не должен читать os.environ напрямую.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUE = ("1", "true", "True", "yes", "YES")


@dataclass(frozen=True)
class Settings:
    extra_aliases_path: str | None
    debug: bool


_SETTINGS: Settings | None = None


def _build_settings() -> Settings:
    extra = (os.getenv("REGIONBOX_EXTRA_ALIASES") or "").strip() or None
    debug = os.getenv("REGIONBOX_DEBUG", "0").strip() in _TRUE
    return Settings(extra_aliases_path=extra, debug=debug)


def get_settings(force_reload: bool = False) -> Settings:
    """Возвращает активные настройки. Кэшируется на время процесса."""
    global _SETTINGS
    if _SETTINGS is not None and not force_reload:
        return _SETTINGS
    _SETTINGS = _build_settings()
    return _SETTINGS
