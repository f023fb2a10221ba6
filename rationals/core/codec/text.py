"""
Textual Codec — строковое представление канонических значений

Форматы:
    "7", "-7"           целое
    "3/4", "-3/4"       собственная дробь (|v| < 1)
    "2 1/2", "-2 1/2"   смешанное число: floor(v) и дробь 0 < f/d < 1
    "+inf", "-inf"      бесконечности

Смешанная форма использует floor, как и конструктор from_mixed:
"-2 1/2" == -2 + 1/2 == -3/2. Поэтому parse_value(format_value(v)) == v
для любого канонического значения.

Десятичные дроби ("0.5") не разбираются: float попадает в движок только
через типизированные конструкторы from_float/from_double.
"""

import re
from typing import Final

from rationals.core.domain.canonical import (
    NEGATIVE_INFINITY,
    POSITIVE_INFINITY,
    CanonicalValue,
    Sign,
    SignedInfinity,
)
from rationals.core.domain.errors import (
    InvalidDenominator,
    InvalidFraction,
    ParseError,
)
from rationals.core.math.integer_domain import DEFAULT_DOMAIN, IntegerDomain
from rationals.core.math.normalizer import from_fraction, from_int, from_mixed
from rationals.logging_utils import get_logger

logger = get_logger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

POSITIVE_INFINITY_TOKEN: Final[str] = "+inf"
NEGATIVE_INFINITY_TOKEN: Final[str] = "-inf"

_INTEGER_RE: Final[re.Pattern] = re.compile(r"(?P<integer>[+-]?[0-9]+)")
_FRACTION_RE: Final[re.Pattern] = re.compile(r"(?P<num>[+-]?[0-9]+)/(?P<den>[0-9]+)")
_MIXED_RE: Final[re.Pattern] = re.compile(
    r"(?P<integer>[+-]?[0-9]+)[ ]+(?P<num>[0-9]+)/(?P<den>[0-9]+)"
)
_INFINITY_RE: Final[re.Pattern] = re.compile(r"(?P<sign>[+-]?)inf", re.IGNORECASE)


# =============================================================================
# FORMAT
# =============================================================================


def format_value(value: CanonicalValue) -> str:
    """
    Строковое представление канонического значения.

    Examples:
        >>> format_value(FiniteRational(5, 2))
        '2 1/2'
        >>> format_value(FiniteRational(-1, 3))
        '-1/3'
        >>> format_value(POSITIVE_INFINITY)
        '+inf'
    """
    if isinstance(value, SignedInfinity):
        if value.sign is Sign.POSITIVE:
            return POSITIVE_INFINITY_TOKEN
        return NEGATIVE_INFINITY_TOKEN

    numerator, denominator = value.numerator, value.denominator
    if denominator == 1:
        return str(numerator)
    if abs(numerator) < denominator:
        return f"{numerator}/{denominator}"

    integer, remainder = divmod(numerator, denominator)
    return f"{integer} {remainder}/{denominator}"


# =============================================================================
# PARSE
# =============================================================================


def parse_value(text: str, domain: IntegerDomain = DEFAULT_DOMAIN) -> CanonicalValue:
    """
    Разбор строки в каноническое значение.

    Пробелы по краям игнорируются. Синтаксически корректная строка с
    недопустимыми частями ("1/0", "2 3/2") тоже считается ошибкой разбора;
    исходная ошибка нормализатора сохраняется в __cause__. Выход за
    целочисленный домен остаётся ArithmeticOverflow.

    Args:
        text: Исходная строка
        domain: Целочисленный домен

    Returns:
        CanonicalValue

    Raises:
        ParseError: Если строка не соответствует ни одной грамматике
        ArithmeticOverflow: Если числа не помещаются в домен
    """
    if not isinstance(text, str):
        raise ParseError(f"expected a string, got {type(text).__name__}")

    stripped = text.strip()

    match = _INTEGER_RE.fullmatch(stripped)
    if match:
        return from_int(int(match["integer"]), domain)

    match = _INFINITY_RE.fullmatch(stripped)
    if match:
        return NEGATIVE_INFINITY if match["sign"] == "-" else POSITIVE_INFINITY

    try:
        match = _FRACTION_RE.fullmatch(stripped)
        if match:
            return from_fraction(int(match["num"]), int(match["den"]), domain)

        match = _MIXED_RE.fullmatch(stripped)
        if match:
            return from_mixed(
                int(match["integer"]), int(match["num"]), int(match["den"]), domain
            )
    except (InvalidDenominator, InvalidFraction) as exc:
        logger.debug("rejected text %r: %s", text, exc)
        raise ParseError(f"invalid rational number {text!r}: {exc}") from exc

    logger.debug("rejected text %r", text)
    raise ParseError(f"malformed rational number {text!r}")
