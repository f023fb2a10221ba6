"""
Integer Domain — фиксированные целочисленные диапазоны движка

Движок не переходит на bignum: числитель — знаковое целое ширины `bits`,
знаменатель — беззнаковое целое той же ширины. Любое значение вне
диапазона сигнализируется ArithmeticOverflow, а не обрезается.

Python int не переполняется, поэтому все промежуточные величины
вычисляются точно и затем проверяются функциями этого модуля.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение никогда не проходит молча (ArithmeticOverflow)
2. Проверки детерминированы и не зависят от платформы
"""

from dataclasses import dataclass
from typing import Final

from rationals.core.domain.errors import ArithmeticOverflow
from rationals.logging_utils import get_logger

logger = get_logger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class IntegerDomain:
    """
    Ширина целочисленного домена.

    Числитель: [-2**(bits-1), 2**(bits-1) - 1]
    Знаменатель: [1, 2**bits - 1]
    """

    bits: int = 64

    def __post_init__(self) -> None:
        if not isinstance(self.bits, int) or self.bits <= 0 or self.bits % 8 != 0:
            raise ValueError(f"bits must be a positive multiple of 8, got {self.bits}")

    @property
    def numerator_min(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def numerator_max(self) -> int:
        return (1 << (self.bits - 1)) - 1

    @property
    def denominator_max(self) -> int:
        return (1 << self.bits) - 1


# Ширина int/uint исходной библиотеки
INT32_DOMAIN: Final[IntegerDomain] = IntegerDomain(bits=32)

INT64_DOMAIN: Final[IntegerDomain] = IntegerDomain(bits=64)

# Домен по умолчанию: вмещает любой 32-битный вход и double умеренной экспоненты
DEFAULT_DOMAIN: Final[IntegerDomain] = INT64_DOMAIN


# =============================================================================
# ПРОВЕРКИ ДИАПАЗОНА
# =============================================================================


def fits_numerator(value: int, domain: IntegerDomain = DEFAULT_DOMAIN) -> bool:
    return domain.numerator_min <= value <= domain.numerator_max


def fits_denominator(value: int, domain: IntegerDomain = DEFAULT_DOMAIN) -> bool:
    return 1 <= value <= domain.denominator_max


def check_numerator(
    value: int,
    domain: IntegerDomain = DEFAULT_DOMAIN,
    what: str = "numerator",
) -> int:
    """
    Проверка, что значение помещается в знаковый диапазон домена.

    Args:
        value: Проверяемое значение
        domain: Целочисленный домен (default: DEFAULT_DOMAIN)
        what: Имя величины (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        ArithmeticOverflow: Если value вне [numerator_min, numerator_max]

    Examples:
        >>> check_numerator(2**31 - 1, INT32_DOMAIN)
        2147483647
        >>> check_numerator(2**31, INT32_DOMAIN)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ArithmeticOverflow: ...
    """
    if not fits_numerator(value, domain):
        logger.debug("%s %d outside int%d domain", what, value, domain.bits)
        raise ArithmeticOverflow(
            f"{what} {value} outside signed {domain.bits}-bit range "
            f"[{domain.numerator_min}, {domain.numerator_max}]"
        )
    return value


def check_denominator(
    value: int,
    domain: IntegerDomain = DEFAULT_DOMAIN,
    what: str = "denominator",
) -> int:
    """
    Проверка, что значение помещается в беззнаковый диапазон домена.

    Raises:
        ArithmeticOverflow: Если value > denominator_max
    """
    if value > domain.denominator_max:
        logger.debug("%s %d outside uint%d domain", what, value, domain.bits)
        raise ArithmeticOverflow(
            f"{what} {value} outside unsigned {domain.bits}-bit range "
            f"[1, {domain.denominator_max}]"
        )
    return value
