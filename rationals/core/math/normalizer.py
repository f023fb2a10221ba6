"""
Normalizer — конструкторы канонического значения

Единственный допустимый способ превратить любую из шести входных форм
в CanonicalValue:
- unsigned integer / signed integer
- float (32-bit) / double (64-bit)
- numerator/denominator
- integer + proper fraction (смешанное число)

Плюс строка (через текстовый кодек) и копирование.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда несократим, знак в числителе, знаменатель >= 1
2. float раскладывается точно по двоичной мантиссе/экспоненте,
   без промежуточного десятичного представления
3. NaN никогда не становится значением (InvalidValue)
4. Выход за целочисленный домен -> ArithmeticOverflow
"""

import math
import struct

from rationals.core.domain.canonical import (
    NEGATIVE_INFINITY,
    POSITIVE_INFINITY,
    CanonicalValue,
    FiniteRational,
    SignedInfinity,
)
from rationals.core.domain.errors import (
    ArithmeticOverflow,
    InvalidDenominator,
    InvalidFraction,
    InvalidValue,
)
from rationals.core.math.integer_domain import (
    DEFAULT_DOMAIN,
    IntegerDomain,
    check_denominator,
    check_numerator,
)
from rationals.logging_utils import get_logger

logger = get_logger(__name__)


# =============================================================================
# БАЗОВОЕ СОКРАЩЕНИЕ
# =============================================================================


def make_finite(
    numerator: int,
    denominator: int,
    domain: IntegerDomain = DEFAULT_DOMAIN,
) -> FiniteRational:
    """
    Сокращение произвольной дроби до канонической формы.

    Знак переносится в числитель, дробь делится на gcd, результат
    проверяется на попадание в домен.

    Args:
        numerator: Числитель (любое int)
        denominator: Знаменатель (любое ненулевое int)
        domain: Целочисленный домен

    Returns:
        FiniteRational в несократимом виде

    Raises:
        InvalidDenominator: Если denominator == 0
        ArithmeticOverflow: Если сокращённая дробь вне домена

    Examples:
        >>> make_finite(6, -4)
        FiniteRational(numerator=-3, denominator=2)
        >>> make_finite(0, 7)
        FiniteRational(numerator=0, denominator=1)
    """
    if denominator == 0:
        raise InvalidDenominator("denominator must be non-zero")

    if denominator < 0:
        numerator, denominator = -numerator, -denominator

    divisor = math.gcd(numerator, denominator)
    numerator //= divisor
    denominator //= divisor

    check_numerator(numerator, domain)
    check_denominator(denominator, domain)
    return FiniteRational(numerator, denominator)


def _require_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        logger.debug("rejected %s of type %s", name, type(value).__name__)
        raise InvalidValue(f"{name} must be an int, got {type(value).__name__}")
    return value


def _require_float(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (float, int)):
        logger.debug("rejected float input of type %s", type(value).__name__)
        raise InvalidValue(f"float value must be a float, got {type(value).__name__}")
    try:
        return float(value)
    except OverflowError as exc:
        raise ArithmeticOverflow(f"integer {value} does not fit a float") from exc


# =============================================================================
# ЦЕЛЫЕ
# =============================================================================


def from_unsigned_int(n: int, domain: IntegerDomain = DEFAULT_DOMAIN) -> FiniteRational:
    """
    Конструктор из беззнакового целого.

    Raises:
        InvalidValue: Если n не int или n < 0
        ArithmeticOverflow: Если n не помещается в числитель домена
    """
    _require_int(n, "unsigned integer")
    if n < 0:
        raise InvalidValue(f"unsigned integer must be non-negative, got {n}")
    return FiniteRational(check_numerator(n, domain), 1)


def from_int(n: int, domain: IntegerDomain = DEFAULT_DOMAIN) -> FiniteRational:
    """Конструктор из знакового целого: (n, 1)."""
    _require_int(n, "integer")
    return FiniteRational(check_numerator(n, domain), 1)


# =============================================================================
# ПЛАВАЮЩАЯ ТОЧКА
# =============================================================================


def from_double(x: float, domain: IntegerDomain = DEFAULT_DOMAIN) -> CanonicalValue:
    """
    Конструктор из double (IEEE 754 binary64).

    Значение раскладывается точно: float.as_integer_ratio() возвращает
    несократимую дробь со знаменателем-степенью двойки.

    Args:
        x: Исходный float
        domain: Целочисленный домен

    Returns:
        SignedInfinity для ±inf, иначе FiniteRational

    Raises:
        InvalidValue: Если x — NaN или не float/int
        ArithmeticOverflow: Если точная дробь не помещается в домен

    Examples:
        >>> from_double(0.75)
        FiniteRational(numerator=3, denominator=4)
        >>> from_double(float("-inf"))
        SignedInfinity(sign=<Sign.NEGATIVE: '-'>)
    """
    x = _require_float(x)
    if math.isnan(x):
        logger.debug("rejected NaN input")
        raise InvalidValue("NaN has no rational value")
    if math.isinf(x):
        return POSITIVE_INFINITY if x > 0 else NEGATIVE_INFINITY

    numerator, denominator = x.as_integer_ratio()
    check_numerator(numerator, domain)
    check_denominator(denominator, domain)
    return FiniteRational(numerator, denominator)


def to_single_precision(x: float) -> float:
    """
    Округление Python float до IEEE 754 binary32.

    Конечные значения за пределами float32 насыщаются до бесконечности
    того же знака, как при приведении типа в C.
    """
    if math.isnan(x) or math.isinf(x):
        return x
    try:
        return struct.unpack("<f", struct.pack("<f", x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


def from_float(x: float, domain: IntegerDomain = DEFAULT_DOMAIN) -> CanonicalValue:
    """
    Конструктор из float (IEEE 754 binary32).

    Значение сначала округляется до одинарной точности, затем
    раскладывается точно, как в from_double.
    """
    return from_double(to_single_precision(_require_float(x)), domain)


# =============================================================================
# ДРОБИ
# =============================================================================


def from_fraction(
    numerator: int,
    denominator: int,
    domain: IntegerDomain = DEFAULT_DOMAIN,
) -> FiniteRational:
    """
    Конструктор из пары numerator/denominator.

    Знаменатель беззнаковый и не может быть 0 или 1 (для целых
    используйте from_int). После сокращения знаменатель может стать 1:
    from_fraction(4, 2) == (2, 1).

    Raises:
        InvalidValue: Если аргументы не int
        InvalidDenominator: Если denominator <= 1
        ArithmeticOverflow: Если аргументы или результат вне домена

    Examples:
        >>> from_fraction(2, 4)
        FiniteRational(numerator=1, denominator=2)
    """
    _require_int(numerator, "numerator")
    _require_int(denominator, "denominator")
    if denominator in (0, 1) or denominator < 0:
        logger.debug("rejected denominator %d", denominator)
        raise InvalidDenominator(
            f"denominator must be greater than 1, got {denominator}"
        )

    check_numerator(numerator, domain)
    check_denominator(denominator, domain)
    return make_finite(numerator, denominator, domain)


def from_mixed(
    integer: int,
    frac_num: int,
    frac_den: int,
    domain: IntegerDomain = DEFAULT_DOMAIN,
) -> FiniteRational:
    """
    Конструктор из суммы целого и дроби строго между нулём и единицей.

    Значение = integer + frac_num / frac_den; дробная часть всегда
    прибавляется: from_mixed(-2, 1, 2) == -3/2.

    Raises:
        InvalidValue: Если аргументы не int
        InvalidFraction: Если не выполнено 0 < frac_num < frac_den
        ArithmeticOverflow: Если результат вне домена

    Examples:
        >>> from_mixed(2, 1, 2)
        FiniteRational(numerator=5, denominator=2)
    """
    _require_int(integer, "integer part")
    _require_int(frac_num, "fraction numerator")
    _require_int(frac_den, "fraction denominator")
    if not 0 < frac_num < frac_den:
        logger.debug("rejected fraction part %d/%d", frac_num, frac_den)
        raise InvalidFraction(
            f"fraction part must satisfy 0 < numerator < denominator, "
            f"got {frac_num}/{frac_den}"
        )

    check_numerator(integer, domain, "integer part")
    check_denominator(frac_den, domain, "fraction denominator")
    return make_finite(integer * frac_den + frac_num, frac_den, domain)


# =============================================================================
# ПРОЧЕЕ
# =============================================================================


def from_string(text: str, domain: IntegerDomain = DEFAULT_DOMAIN) -> CanonicalValue:
    """Конструктор из строки (грамматики текстового кодека)."""
    # text зависит от normalizer, поэтому импорт локальный
    from rationals.core.codec.text import parse_value

    return parse_value(text, domain)


def copy_value(value: CanonicalValue) -> CanonicalValue:
    """Структурная копия канонического значения. Никогда не падает."""
    if isinstance(value, SignedInfinity):
        return SignedInfinity(value.sign)
    return FiniteRational(value.numerator, value.denominator)
