"""
errors — исключения пакета.

Ошибки возможны только на пути восстановления Region из хранилища (scan).
Все остальные операции справочника тотальны: неизвестный код даёт "Unknown".
"""

from __future__ import annotations


class ScanError(ValueError):
    """Не удалось восстановить Region из сохранённого значения."""


class NilTargetError(ScanError):
    """Попытка сканировать в отсутствующий (None) Region."""


class UnsupportedTypeError(ScanError, TypeError):
    """Тип исходного значения не поддерживается."""
