"""
registries — встроенные справочники, поставляемые вместе с пакетом.

Цель:
- хранить "сырьё" (алиасы) прямо в репозитории (внутри пакета), чтобы оно было доступно после pip install
- дать простой API поиска без внешних ссылок и без сетевых скачиваний
"""

from regionbox.registries import m49_regions

__all__ = ["m49_regions"]
