"""
Errors — Ошибки доменных моделей

Все ошибки здесь сигнализируют об ошибке вызывающего кода, а не о
внешнем условии. Их не перехватывают для повторной попытки.
"""

from typing import Any


class YearError(ValueError):
    """Базовая ошибка CalendarYear."""


class InvalidYearError(YearError):
    """
    Попытка создать год 0.

    В нумерации без нуля за 1 BC (-1) сразу следует 1 AD (1).
    """

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Year value must be non-zero, got {value}")


class DomainMismatchError(YearError):
    """
    Операция смешивает абсолютный и относительный год.

    Сравнение, расстояние и арифметика определены только для пары
    absolute/absolute или relative/relative.
    """

    def __init__(self, left: Any, right: Any):
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot combine absolute and relative years: {left!r} vs {right!r}"
        )
