"""
base — нейтральный слой инфраструктуры.

Назначение:
- прочитать настройки окружения один раз на процесс (runtime)
"""

from regionbox.base.runtime import Settings, get_settings

__all__ = ["Settings", "get_settings"]
