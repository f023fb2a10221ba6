"""
Comparator — полный порядок над каноническими значениями

Правила:
- inf vs inf: равны, если знаки совпадают, иначе порядок по знаку
- inf vs finite: бесконечность всегда на крайней стороне своего знака
- finite vs finite: n1 * d2 против n2 * d1 в целых Python (без float)

Python int не ограничен по ширине, поэтому перекрёстное умножение
выполняется в расширенном домене и не может переполниться.
"""

from enum import Enum

from rationals.core.domain.canonical import (
    CanonicalValue,
    Sign,
    SignedInfinity,
)


# =============================================================================
# ENUMS
# =============================================================================


class Ordering(int, Enum):
    """Трёхзначный результат сравнения"""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def negate_comparison_result(result: Ordering) -> Ordering:
    """
    Отрицание результата сравнения: LESS <-> GREATER, EQUAL без изменений.

    compare(a, b) == negate_comparison_result(compare(b, a)) для любых a, b.
    """
    return Ordering(-result.value)


def _from_int(diff: int) -> Ordering:
    if diff < 0:
        return Ordering.LESS
    if diff > 0:
        return Ordering.GREATER
    return Ordering.EQUAL


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare(lhs: CanonicalValue, rhs: CanonicalValue) -> Ordering:
    """
    Трёхзначное сравнение двух канонических значений.

    Args:
        lhs: Значение слева от знака сравнения
        rhs: Значение справа от знака сравнения

    Returns:
        Ordering.LESS / EQUAL / GREATER

    Examples:
        >>> compare(FiniteRational(1, 2), FiniteRational(2, 3))
        <Ordering.LESS: -1>
        >>> compare(NEGATIVE_INFINITY, FiniteRational(-10**9, 1))
        <Ordering.LESS: -1>
    """
    if isinstance(lhs, SignedInfinity):
        if isinstance(rhs, SignedInfinity) and rhs.sign is lhs.sign:
            return Ordering.EQUAL
        return Ordering.GREATER if lhs.sign is Sign.POSITIVE else Ordering.LESS
    if isinstance(rhs, SignedInfinity):
        return negate_comparison_result(compare(rhs, lhs))

    # Канонические формы равны только структурно
    if lhs == rhs:
        return Ordering.EQUAL
    return _from_int(lhs.numerator * rhs.denominator - rhs.numerator * lhs.denominator)


def is_less_than(lhs: CanonicalValue, rhs: CanonicalValue) -> bool:
    return compare(lhs, rhs) is Ordering.LESS


def is_equal_to(lhs: CanonicalValue, rhs: CanonicalValue) -> bool:
    return compare(lhs, rhs) is Ordering.EQUAL
