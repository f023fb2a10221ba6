"""
Arithmetic Engine — точная арифметика над каноническими значениями

Операции:
- negate, reciprocal
- add, subtract, multiply, divide
- свёртки: sum_values, product_values, maximum, minimum

Правила бесконечностей:
    finite + inf = inf
    inf + inf (один знак) = inf
    (+inf) + (-inf), inf - inf -> IndeterminateForm
    nonzero * inf = inf со знаком произведения
    0 * inf -> IndeterminateForm
    1 / inf = 0

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда канонический (несократимый, знак в числителе)
2. Промежуточные величины проверяются до сокращения (ArithmeticOverflow)
3. Никакого NaN: неопределённость всегда является ошибкой
4. Свёртки идут слева направо, первая ошибка прерывает всю свёртку
"""

import math
from typing import Iterable, Tuple

from rationals.core.domain.canonical import (
    NEGATIVE_INFINITY,
    ONE,
    POSITIVE_INFINITY,
    ZERO,
    CanonicalValue,
    FiniteRational,
    SignedInfinity,
    infinity,
    is_zero,
    sign_of,
)
from rationals.core.domain.errors import DivisionByZero, IndeterminateForm
from rationals.core.math.comparator import Ordering, compare
from rationals.core.math.integer_domain import (
    DEFAULT_DOMAIN,
    IntegerDomain,
    check_denominator,
    check_numerator,
)
from rationals.core.math.normalizer import make_finite
from rationals.logging_utils import get_logger

logger = get_logger(__name__)


# =============================================================================
# УНАРНЫЕ ОПЕРАЦИИ
# =============================================================================


def negate(value: CanonicalValue, domain: IntegerDomain = DEFAULT_DOMAIN) -> CanonicalValue:
    """
    Аддитивная обратная величина.

    Raises:
        ArithmeticOverflow: Для наименьшего числителя домена (-2**(bits-1))
    """
    if isinstance(value, SignedInfinity):
        return infinity(value.sign.flipped())
    numerator = check_numerator(-value.numerator, domain, "negated numerator")
    return FiniteRational(numerator, value.denominator)


def reciprocal(value: CanonicalValue, domain: IntegerDomain = DEFAULT_DOMAIN) -> FiniteRational:
    """
    Мультипликативная обратная величина.

    (n, d) -> (sign(n) * d, |n|). Обратное к любой бесконечности — ноль
    (в домене один ноль, поэтому знак бесконечности теряется).

    Raises:
        DivisionByZero: Если value == 0
        ArithmeticOverflow: Если d не помещается в числитель
            или |n| не помещается в знаменатель

    Examples:
        >>> reciprocal(FiniteRational(-3, 4))
        FiniteRational(numerator=-4, denominator=3)
    """
    if isinstance(value, SignedInfinity):
        return ZERO
    if value.numerator == 0:
        raise DivisionByZero("reciprocal of zero")

    sign = 1 if value.numerator > 0 else -1
    numerator = check_numerator(sign * value.denominator, domain, "reciprocal numerator")
    denominator = check_denominator(abs(value.numerator), domain, "reciprocal denominator")
    return FiniteRational(numerator, denominator)


# =============================================================================
# БИНАРНЫЕ ОПЕРАЦИИ
# =============================================================================


def _to_common_denominator(
    lhs: FiniteRational,
    rhs: FiniteRational,
    domain: IntegerDomain,
) -> Tuple[int, int, int]:
    """Числители, приведённые к lcm знаменателей, и сам lcm."""
    if lhs.denominator == rhs.denominator:
        return lhs.numerator, rhs.numerator, lhs.denominator

    common = check_denominator(
        math.lcm(lhs.denominator, rhs.denominator), domain, "common denominator"
    )
    left = check_numerator(
        lhs.numerator * (common // lhs.denominator), domain, "scaled numerator"
    )
    right = check_numerator(
        rhs.numerator * (common // rhs.denominator), domain, "scaled numerator"
    )
    return left, right, common


def add(
    lhs: CanonicalValue,
    rhs: CanonicalValue,
    domain: IntegerDomain = DEFAULT_DOMAIN,
) -> CanonicalValue:
    """
    Сумма двух значений.

    Конечные слагаемые приводятся к lcm(d1, d2), что даёт меньшие
    промежуточные величины, чем d1 * d2. Каждая промежуточная величина
    проверяется на попадание в домен до сокращения.

    Raises:
        IndeterminateForm: (+inf) + (-inf)
        ArithmeticOverflow: Переполнение знаменателя или числителя

    Examples:
        >>> add(FiniteRational(1, 2), FiniteRational(1, 3))
        FiniteRational(numerator=5, denominator=6)
    """
    if isinstance(lhs, SignedInfinity) and isinstance(rhs, SignedInfinity):
        if lhs.sign is not rhs.sign:
            logger.debug("indeterminate sum of opposite infinities")
            raise IndeterminateForm("sum of infinities with opposite signs")
        return lhs
    if isinstance(lhs, SignedInfinity):
        return lhs
    if isinstance(rhs, SignedInfinity):
        return rhs

    left, right, common = _to_common_denominator(lhs, rhs, domain)
    total = check_numerator(left + right, domain, "sum numerator")
    return make_finite(total, common, domain)


def subtract(
    lhs: CanonicalValue,
    rhs: CanonicalValue,
    domain: IntegerDomain = DEFAULT_DOMAIN,
) -> CanonicalValue:
    """
    Разность lhs - rhs.

    Raises:
        IndeterminateForm: inf - inf (один знак)
        ArithmeticOverflow: Переполнение промежуточных величин
    """
    if isinstance(lhs, SignedInfinity) and isinstance(rhs, SignedInfinity):
        if lhs.sign is rhs.sign:
            logger.debug("indeterminate difference of equal infinities")
            raise IndeterminateForm("difference of infinities with the same sign")
        return lhs
    if isinstance(lhs, SignedInfinity):
        return lhs
    if isinstance(rhs, SignedInfinity):
        return infinity(rhs.sign.flipped())

    left, right, common = _to_common_denominator(lhs, rhs, domain)
    difference = check_numerator(left - right, domain, "difference numerator")
    return make_finite(difference, common, domain)


def multiply(
    lhs: CanonicalValue,
    rhs: CanonicalValue,
    domain: IntegerDomain = DEFAULT_DOMAIN,
) -> CanonicalValue:
    """
    Произведение двух значений.

    Перед умножением выполняется перекрёстное сокращение
    (gcd(n1, d2), gcd(n2, d1)), поэтому произведения сразу несократимы
    и переполнение возникает только если переполняется сам результат.

    Raises:
        IndeterminateForm: 0 * inf
        ArithmeticOverflow: Переполнение числителя или знаменателя

    Examples:
        >>> multiply(FiniteRational(2, 3), FiniteRational(3, 4))
        FiniteRational(numerator=1, denominator=2)
    """
    if isinstance(lhs, SignedInfinity) or isinstance(rhs, SignedInfinity):
        if is_zero(lhs) or is_zero(rhs):
            logger.debug("indeterminate product of zero and infinity")
            raise IndeterminateForm("product of zero and infinity")
        return POSITIVE_INFINITY if sign_of(lhs) * sign_of(rhs) > 0 else NEGATIVE_INFINITY

    g1 = math.gcd(lhs.numerator, rhs.denominator)
    g2 = math.gcd(rhs.numerator, lhs.denominator)
    numerator = (lhs.numerator // g1) * (rhs.numerator // g2)
    denominator = (lhs.denominator // g2) * (rhs.denominator // g1)

    check_numerator(numerator, domain, "product numerator")
    check_denominator(denominator, domain, "product denominator")
    if numerator == 0:
        return ZERO
    return FiniteRational(numerator, denominator)


def divide(
    lhs: CanonicalValue,
    rhs: CanonicalValue,
    domain: IntegerDomain = DEFAULT_DOMAIN,
) -> CanonicalValue:
    """
    Частное lhs / rhs = lhs * reciprocal(rhs).

    Raises:
        DivisionByZero: Если rhs == 0
        IndeterminateForm: Если lhs — бесконечность, а rhs — бесконечность
    """
    return multiply(lhs, reciprocal(rhs, domain), domain)


# =============================================================================
# СВЁРТКИ
# =============================================================================


def sum_values(
    values: Iterable[CanonicalValue],
    domain: IntegerDomain = DEFAULT_DOMAIN,
) -> CanonicalValue:
    """Сумма последовательности. Пустая последовательность -> ZERO."""
    total: CanonicalValue = ZERO
    for value in values:
        total = add(total, value, domain)
    return total


def product_values(
    values: Iterable[CanonicalValue],
    domain: IntegerDomain = DEFAULT_DOMAIN,
) -> CanonicalValue:
    """Произведение последовательности. Пустая последовательность -> ONE."""
    result: CanonicalValue = ONE
    for value in values:
        result = multiply(result, value, domain)
    return result


def maximum(values: Iterable[CanonicalValue]) -> CanonicalValue:
    """
    Наибольшее значение последовательности.

    Пустая последовательность -> NEGATIVE_INFINITY (нейтральный элемент
    для max). При равенстве возвращается первое из равных.
    """
    best: CanonicalValue = NEGATIVE_INFINITY
    for value in values:
        if compare(value, best) is Ordering.GREATER:
            best = value
    return best


def minimum(values: Iterable[CanonicalValue]) -> CanonicalValue:
    """
    Наименьшее значение последовательности.

    Пустая последовательность -> POSITIVE_INFINITY (нейтральный элемент
    для min). При равенстве возвращается первое из равных.
    """
    best: CanonicalValue = POSITIVE_INFINITY
    for value in values:
        if compare(value, best) is Ordering.LESS:
            best = value
    return best
