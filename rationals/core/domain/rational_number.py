"""
RationalNumber — объектная обёртка над каноническим значением

Тонкий фасад: не владеет инвариантами и не содержит собственной логики,
каждый метод делегирует в Normalizer / Arithmetic / Comparator / Codec.

Immutable: операции всегда возвращают новый RationalNumber.
Поддерживает операторы Python (+, -, *, /, унарный -, сравнения),
hash, float(), str().
"""

import functools
from typing import Any, Dict, Iterable, List, Sequence

from rationals.core.codec.interchange import export_value, import_value
from rationals.core.codec.text import format_value, parse_value
from rationals.core.domain.canonical import (
    NEGATIVE_INFINITY,
    ONE,
    POSITIVE_INFINITY,
    ZERO,
    CanonicalValue,
    FiniteRational,
    Sign,
    SignedInfinity,
)
from rationals.core.domain.errors import InvalidValue
from rationals.core.math import arithmetic
from rationals.core.math.comparator import (
    Ordering,
    compare,
    is_equal_to,
    is_less_than,
)
from rationals.core.math.integer_domain import DEFAULT_DOMAIN, IntegerDomain
from rationals.core.math.normalizer import (
    copy_value,
    from_double,
    from_float,
    from_fraction,
    from_int,
    from_mixed,
    from_unsigned_int,
)


@functools.total_ordering
class RationalNumber:
    """
    Рациональное число со знаковыми бесконечностями.

    Создание — только через classmethod-конструкторы (или from_underlying
    для готового канонического значения). Атрибут класса `domain` задаёт
    целочисленный домен всех операций; подкласс может переопределить его.

    Examples:
        >>> half = RationalNumber.fraction(1, 2)
        >>> third = RationalNumber.fraction(1, 3)
        >>> (half + third).string_value()
        '5/6'
    """

    __slots__ = ("_value",)

    domain: IntegerDomain = DEFAULT_DOMAIN

    def __init__(self, value: CanonicalValue):
        if not isinstance(value, (FiniteRational, SignedInfinity)):
            raise InvalidValue(
                f"RationalNumber wraps a canonical value, got {type(value).__name__}"
            )
        self._value = value

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_underlying(cls, value: CanonicalValue) -> "RationalNumber":
        return cls(copy_value(value))

    @classmethod
    def from_rational_number(cls, number: "RationalNumber") -> "RationalNumber":
        return cls(copy_value(number.underlying))

    @classmethod
    def from_unsigned_int(cls, n: int) -> "RationalNumber":
        return cls(from_unsigned_int(n, cls.domain))

    @classmethod
    def from_int(cls, n: int) -> "RationalNumber":
        return cls(from_int(n, cls.domain))

    @classmethod
    def from_float(cls, x: float) -> "RationalNumber":
        return cls(from_float(x, cls.domain))

    @classmethod
    def from_double(cls, x: float) -> "RationalNumber":
        return cls(from_double(x, cls.domain))

    @classmethod
    def fraction(cls, numerator: int, denominator: int) -> "RationalNumber":
        return cls(from_fraction(numerator, denominator, cls.domain))

    @classmethod
    def mixed(cls, integer: int, frac_num: int, frac_den: int) -> "RationalNumber":
        return cls(from_mixed(integer, frac_num, frac_den, cls.domain))

    @classmethod
    def from_string(cls, text: str) -> "RationalNumber":
        return cls(parse_value(text, cls.domain))

    @classmethod
    def zero(cls) -> "RationalNumber":
        return cls(ZERO)

    @classmethod
    def one(cls) -> "RationalNumber":
        return cls(ONE)

    @classmethod
    def positive_infinity(cls) -> "RationalNumber":
        return cls(POSITIVE_INFINITY)

    @classmethod
    def negative_infinity(cls) -> "RationalNumber":
        return cls(NEGATIVE_INFINITY)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def underlying(self) -> CanonicalValue:
        return self._value

    @property
    def is_finite(self) -> bool:
        return isinstance(self._value, FiniteRational)

    @property
    def numerator(self) -> int:
        return self._finite().numerator

    @property
    def denominator(self) -> int:
        return self._finite().denominator

    def _finite(self) -> FiniteRational:
        if not isinstance(self._value, FiniteRational):
            raise InvalidValue(f"{format_value(self._value)} has no numerator/denominator")
        return self._value

    def float_value(self) -> float:
        """
        Ближайший Python float (IEEE 754 binary64).

        Возвращает double, а не одинарную точность: n / d округляется
        корректно для любых int. Значение одинарной точности можно получить
        через normalizer.to_single_precision(number.float_value()).
        """
        if isinstance(self._value, FiniteRational):
            return self._value.numerator / self._value.denominator
        return float("inf") if self._value.sign is Sign.POSITIVE else float("-inf")

    def string_value(self) -> str:
        return format_value(self._value)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def reciprocal(self) -> "RationalNumber":
        return self._wrap(arithmetic.reciprocal(self._value, self.domain))

    def opposite(self) -> "RationalNumber":
        return self._wrap(arithmetic.negate(self._value, self.domain))

    def plus(self, other: "RationalNumber") -> "RationalNumber":
        return self._wrap(arithmetic.add(self._value, other.underlying, self.domain))

    def minus(self, other: "RationalNumber") -> "RationalNumber":
        return self._wrap(arithmetic.subtract(self._value, other.underlying, self.domain))

    def times(self, other: "RationalNumber") -> "RationalNumber":
        return self._wrap(arithmetic.multiply(self._value, other.underlying, self.domain))

    def divided_by(self, other: "RationalNumber") -> "RationalNumber":
        return self._wrap(arithmetic.divide(self._value, other.underlying, self.domain))

    @classmethod
    def sum(cls, summands: Iterable["RationalNumber"]) -> "RationalNumber":
        return cls(arithmetic.sum_values((n.underlying for n in summands), cls.domain))

    @classmethod
    def product(cls, factors: Iterable["RationalNumber"]) -> "RationalNumber":
        return cls(arithmetic.product_values((n.underlying for n in factors), cls.domain))

    @classmethod
    def maximum(cls, numbers: Iterable["RationalNumber"]) -> "RationalNumber":
        """Наибольшее из чисел; для пустого входа -inf."""
        return cls(arithmetic.maximum(n.underlying for n in numbers))

    @classmethod
    def minimum(cls, numbers: Iterable["RationalNumber"]) -> "RationalNumber":
        """Наименьшее из чисел; для пустого входа +inf."""
        return cls(arithmetic.minimum(n.underlying for n in numbers))

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    @classmethod
    def compare_values(cls, lhs: "RationalNumber", rhs: "RationalNumber") -> Ordering:
        return compare(lhs.underlying, rhs.underlying)

    def compare(self, other: "RationalNumber") -> Ordering:
        return compare(self._value, other.underlying)

    def is_less_than(self, other: "RationalNumber") -> bool:
        return is_less_than(self._value, other.underlying)

    def is_equal_to(self, other: "RationalNumber") -> bool:
        return is_equal_to(self._value, other.underlying)

    # -------------------------------------------------------------------------
    # Interchange
    # -------------------------------------------------------------------------

    def export_to_json(self) -> Dict[str, Any]:
        return export_value(self._value)

    @classmethod
    def import_from_json(cls, payload: Any) -> "RationalNumber":
        return cls(import_value(payload, cls.domain))

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def _wrap(self, value: CanonicalValue) -> "RationalNumber":
        return type(self)(value)

    def _coerce(self, other: Any) -> "RationalNumber | None":
        if isinstance(other, RationalNumber):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return type(self).from_int(other)
        return None

    def __add__(self, other: Any):
        rhs = self._coerce(other)
        return NotImplemented if rhs is None else self.plus(rhs)

    def __radd__(self, other: Any):
        lhs = self._coerce(other)
        return NotImplemented if lhs is None else lhs.plus(self)

    def __sub__(self, other: Any):
        rhs = self._coerce(other)
        return NotImplemented if rhs is None else self.minus(rhs)

    def __rsub__(self, other: Any):
        lhs = self._coerce(other)
        return NotImplemented if lhs is None else lhs.minus(self)

    def __mul__(self, other: Any):
        rhs = self._coerce(other)
        return NotImplemented if rhs is None else self.times(rhs)

    def __rmul__(self, other: Any):
        lhs = self._coerce(other)
        return NotImplemented if lhs is None else lhs.times(self)

    def __truediv__(self, other: Any):
        rhs = self._coerce(other)
        return NotImplemented if rhs is None else self.divided_by(rhs)

    def __rtruediv__(self, other: Any):
        lhs = self._coerce(other)
        return NotImplemented if lhs is None else lhs.divided_by(self)

    def __neg__(self) -> "RationalNumber":
        return self.opposite()

    def __pos__(self) -> "RationalNumber":
        return self

    def _comparable(self, other: Any) -> "CanonicalValue | None":
        # сравнение с int не проверяет домен: 2**70 просто не равно и больше
        if isinstance(other, RationalNumber):
            return other.underlying
        if isinstance(other, int) and not isinstance(other, bool):
            return FiniteRational(other, 1)
        return None

    def __eq__(self, other: Any) -> bool:
        rhs = self._comparable(other)
        if rhs is None:
            return NotImplemented
        return self._value == rhs

    def __lt__(self, other: Any) -> bool:
        rhs = self._comparable(other)
        if rhs is None:
            return NotImplemented
        return is_less_than(self._value, rhs)

    def __hash__(self) -> int:
        # согласовано с __eq__ для целых: hash(RationalNumber.from_int(n)) == hash(n)
        if isinstance(self._value, FiniteRational) and self._value.denominator == 1:
            return hash(self._value.numerator)
        return hash(self._value)

    def __float__(self) -> float:
        return self.float_value()

    def __str__(self) -> str:
        return self.string_value()

    def __repr__(self) -> str:
        return f"RationalNumber('{self.string_value()}')"

    def __copy__(self) -> "RationalNumber":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "RationalNumber":
        return self


# =============================================================================
# BATCH INTEROP
# =============================================================================


def box_array(values: Sequence[CanonicalValue]) -> List[RationalNumber]:
    """
    Канонические значения -> список RationalNumber.

    Поэлементно, порядок и количество сохраняются; пустой вход -> [].
    """
    return [RationalNumber.from_underlying(value) for value in values]


def unbox_array(numbers: Sequence[RationalNumber]) -> List[CanonicalValue]:
    """RationalNumber -> список канонических значений (копии)."""
    return [copy_value(number.underlying) for number in numbers]
