"""
Canonical Value — единственное внутреннее представление рационального числа

Sum type из двух вариантов:
- FiniteRational: конечная дробь (numerator, denominator) в несократимом виде
- SignedInfinity: бесконечность со знаком

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (FiniteRational):
1. denominator >= 1
2. gcd(|numerator|, denominator) == 1
3. denominator == 1 — легальная терминальная форма целого числа
4. Знак хранится только в numerator

Значения immutable (frozen dataclass); копирование — O(1).
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Final, Union

from rationals.core.domain.errors import InvalidValue


# =============================================================================
# ENUMS
# =============================================================================


class Sign(str, Enum):
    """Знак бесконечности"""

    POSITIVE = "+"
    NEGATIVE = "-"

    def flipped(self) -> "Sign":
        return Sign.NEGATIVE if self is Sign.POSITIVE else Sign.POSITIVE


def _is_plain_int(value: object) -> bool:
    # bool является подклассом int, но не является допустимым числом
    return isinstance(value, int) and not isinstance(value, bool)


# =============================================================================
# VARIANTS
# =============================================================================


@dataclass(frozen=True)
class FiniteRational:
    """
    Конечное рациональное число в каноническом виде.

    Прямое создание проверяет инварианты, но не сокращает дробь:
    для произвольных (numerator, denominator) используйте normalizer.
    """

    numerator: int
    denominator: int

    def __post_init__(self) -> None:
        if not _is_plain_int(self.numerator) or not _is_plain_int(self.denominator):
            raise InvalidValue(
                f"numerator and denominator must be int, got "
                f"{type(self.numerator).__name__}/{type(self.denominator).__name__}"
            )
        if self.denominator < 1:
            raise InvalidValue(f"denominator must be >= 1, got {self.denominator}")
        if math.gcd(self.numerator, self.denominator) != 1:
            raise InvalidValue(
                f"{self.numerator}/{self.denominator} is not in lowest terms"
            )

    @property
    def is_integer(self) -> bool:
        return self.denominator == 1


@dataclass(frozen=True)
class SignedInfinity:
    """Бесконечность со знаком. Равна только бесконечности того же знака."""

    sign: Sign

    def __post_init__(self) -> None:
        if not isinstance(self.sign, Sign):
            raise InvalidValue(f"sign must be a Sign, got {self.sign!r}")


CanonicalValue = Union[FiniteRational, SignedInfinity]


# =============================================================================
# CONSTANTS
# =============================================================================

ZERO: Final[FiniteRational] = FiniteRational(0, 1)
ONE: Final[FiniteRational] = FiniteRational(1, 1)
POSITIVE_INFINITY: Final[SignedInfinity] = SignedInfinity(Sign.POSITIVE)
NEGATIVE_INFINITY: Final[SignedInfinity] = SignedInfinity(Sign.NEGATIVE)


# =============================================================================
# HELPERS
# =============================================================================


def is_finite(value: CanonicalValue) -> bool:
    return isinstance(value, FiniteRational)


def is_zero(value: CanonicalValue) -> bool:
    return isinstance(value, FiniteRational) and value.numerator == 0


def infinity(sign: Sign) -> SignedInfinity:
    return POSITIVE_INFINITY if sign is Sign.POSITIVE else NEGATIVE_INFINITY


def sign_of(value: CanonicalValue) -> int:
    """
    Знак значения как целое.

    Returns:
        -1 для отрицательных (включая -inf), 0 для нуля, +1 для положительных
    """
    if isinstance(value, SignedInfinity):
        return 1 if value.sign is Sign.POSITIVE else -1
    if value.numerator > 0:
        return 1
    if value.numerator < 0:
        return -1
    return 0
