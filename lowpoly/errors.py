# lowpoly/errors.py
"""Ієрархія винятків lowpoly. Вироджена геометрія помилкою не вважається."""
from __future__ import annotations


class LowPolyError(Exception):
    """Базовий виняток пакета."""


class ConfigError(LowPolyError, ValueError):
    """Некоректна конфігурація (розміри, кількість точок, бекенд...)."""


class ColorError(ConfigError):
    def __init__(self, value: str):
        super().__init__(f"invalid color {value!r}: expected '#RRGGBB'")
        self.value = value


class InvalidPointError(LowPolyError, ValueError):
    def __init__(self, index: int, point):
        super().__init__(f"point {index} has non-finite coordinates: {tuple(point)!r}")
        self.index = index
        self.point = point


class OutputError(LowPolyError, OSError):
    def __init__(self, path: str, cause: OSError):
        reason = cause.strerror or str(cause)
        super().__init__(f"cannot write {path!r}: {reason}")
        self.path = path
        self.cause = cause
