"""
CalendarYear — Год в нумерации без нуля

В обычных программах год — это просто int. В дендрохронологии это не так:
(a) переход через границу BC/AD встречается регулярно,
(b) часто работаем с относительными годами (образец ещё не датирован).

Соглашения:
- Для недатированных образцов отсчёт начинается с относительного года 1001.
- Года 0 нет: за 1 BC (-1) сразу следует 1 AD (1).
- В таблицах по 10 лет в строке, колонки "0".."9" (последняя цифра года).
  На границе BC/AD оставляется разрыв: расстояние на графике от 40 BC до
  20 BC такое же, как от 10 BC до 10 AD, а 1 BC попадает в 10-ю колонку,
  а не в 1-ю. Разрыв виден только в row/col.

ЗАПРЕЩЕНО считать расстояния вычитанием value напрямую: только через
distance_to / advanced, которые учитывают отсутствие нуля.
"""

from typing import Final, Iterator, Tuple, Union

from pydantic import BaseModel, Field, field_validator

from dendro.core.domain.errors import DomainMismatchError, InvalidYearError


# Якорь относительной хронологии для недатированных образцов
DEFAULT_RELATIVE_YEAR: Final[int] = 1001

# Лет в строке таблицы
YEARS_PER_ROW: Final[int] = 10


# =============================================================================
# НУМЕРАЦИЯ БЕЗ НУЛЯ ↔ НЕПРЕРЫВНЫЕ ЦЕЛЫЕ
# =============================================================================


def _to_contiguous(v: int) -> int:
    """Год без нуля → непрерывное целое (… -1 BC → 0, 1 AD → 1 …)."""
    return v if v > 0 else v + 1


def _from_contiguous(v: int) -> int:
    """Непрерывное целое → год без нуля. Обратная к _to_contiguous."""
    return v if v > 0 else v - 1


def _trunc_div(n: int, d: int) -> int:
    # Деление с округлением к нулю (в Python // округляет к -inf)
    q = abs(n) // d
    return q if n >= 0 else -q


def _is_offset(n: object) -> bool:
    return isinstance(n, int) and not isinstance(n, bool)


# =============================================================================
# CALENDAR YEAR
# =============================================================================


class CalendarYear(BaseModel):
    """
    Год в абсолютной (BC/AD) или относительной нумерации.

    Immutable модель (frozen=True). Все арифметические операции
    возвращают новый экземпляр.

    Операции над двумя годами определены только при совпадении
    is_absolute, иначе DomainMismatchError.
    """

    value: int = Field(..., strict=True, description="Год, без нуля (отрицательный = BC)")
    is_absolute: bool = Field(
        ..., strict=True, description="True: исторический год, False: относительный"
    )

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def validate_non_zero(cls, v: int) -> int:
        """Года 0 не существует."""
        if v == 0:
            raise ValueError("year value must be non-zero")
        return v

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def create(cls, value: int, is_absolute: bool) -> "CalendarYear":
        """
        Создание года с проверкой.

        Args:
            value: Год (не 0)
            is_absolute: Абсолютная или относительная нумерация

        Returns:
            CalendarYear

        Raises:
            InvalidYearError: Если value == 0
        """
        if value == 0:
            raise InvalidYearError(value)
        return cls(value=value, is_absolute=is_absolute)

    @classmethod
    def absolute(cls, value: int) -> "CalendarYear":
        return cls.create(value, is_absolute=True)

    @classmethod
    def relative(cls, value: int) -> "CalendarYear":
        return cls.create(value, is_absolute=False)

    @classmethod
    def default(cls) -> "CalendarYear":
        """Относительный год 1001 — начало хронологии недатированного образца."""
        return cls(value=DEFAULT_RELATIVE_YEAR, is_absolute=False)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def _check_same_domain(self, other: "CalendarYear") -> None:
        if self.is_absolute != other.is_absolute:
            raise DomainMismatchError(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CalendarYear):
            return NotImplemented
        self._check_same_domain(other)
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CalendarYear):
            return NotImplemented
        self._check_same_domain(other)
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CalendarYear):
            return NotImplemented
        self._check_same_domain(other)
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CalendarYear):
            return NotImplemented
        self._check_same_domain(other)
        return self.value >= other.value

    # -------------------------------------------------------------------------
    # Расстояние и шаг
    # -------------------------------------------------------------------------

    def distance_to(self, other: "CalendarYear") -> int:
        """
        Знаковое число лет от self до other.

        Точно через границу BC/AD: от -1 (1 BC) до 1 (1 AD) — 1 год.

        Raises:
            DomainMismatchError: Если is_absolute различается
        """
        self._check_same_domain(other)
        return _to_contiguous(other.value) - _to_contiguous(self.value)

    def advanced(self, n: int) -> "CalendarYear":
        """
        Год, отстоящий от self на n лет (n может быть отрицательным).

        Инвариант: a.advanced(a.distance_to(b)) == b
        """
        if not _is_offset(n):
            raise TypeError(f"Year offset must be int, got {type(n).__name__}")
        return CalendarYear(
            value=_from_contiguous(_to_contiguous(self.value) + n),
            is_absolute=self.is_absolute,
        )

    def __add__(self, n: object) -> "CalendarYear":
        if not _is_offset(n):
            return NotImplemented
        return self.advanced(n)

    def __radd__(self, n: object) -> "CalendarYear":
        if not _is_offset(n):
            return NotImplemented
        return self.advanced(n)

    def __sub__(self, other: object) -> Union[int, "CalendarYear"]:
        # year - year -> int, year - int -> year
        if isinstance(other, CalendarYear):
            return other.distance_to(self)
        if not _is_offset(other):
            return NotImplemented
        return self.advanced(-other)

    # -------------------------------------------------------------------------
    # Отображение
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        # Без признака absolute/relative и без суффикса BC/AD
        return str(self.value)

    @property
    def row(self) -> int:
        """
        Строка таблицы (десятилетие).

        row 0 — 1..9 (единственная строка из 9 лет), row 1 — 10..19,
        row -1 — -1..-10, row -2 — -11..-20 и т.д.
        """
        if self.value < 0:
            return _trunc_div(self.value + 1, YEARS_PER_ROW) - 1
        return self.value // YEARS_PER_ROW

    @property
    def col(self) -> int:
        """Колонка таблицы (последняя цифра года); 1 BC → колонка 9."""
        if self.value < 0:
            return YEARS_PER_ROW - ((YEARS_PER_ROW - self.value) % YEARS_PER_ROW)
        return self.value % YEARS_PER_ROW

    @property
    def layout(self) -> Tuple[int, int]:
        """(row, col) для табличного отображения."""
        return self.row, self.col


# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================


def year_range(start: CalendarYear, stop: CalendarYear, step: int = 1) -> Iterator[CalendarYear]:
    """
    Годы от start до stop (не включая stop) с шагом step, минуя год 0.

    Args:
        start: Первый год
        stop: Граница (не включается)
        step: Шаг в годах (может быть отрицательным)

    Returns:
        Итератор CalendarYear

    Raises:
        ValueError: Если step == 0
        DomainMismatchError: Если is_absolute у start и stop различается
    """
    if not _is_offset(step):
        raise TypeError(f"Year step must be int, got {type(step).__name__}")
    if step == 0:
        raise ValueError("year_range() step must not be zero")

    span = start.distance_to(stop)
    return (start.advanced(n) for n in range(0, span, step))
