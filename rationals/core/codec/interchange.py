"""
Interchange Codec — экспорт/импорт JSON-подобного представления

Экспорт всегда выдаёт одну нормализованную форму, независимо от того,
через какую форму было создано значение:
    конечное:      {"numerator": n, "denominator": d}
    бесконечность: {"infinity": "+inf"} / {"infinity": "-inf"}

Импорт принимает все формы контракта rational_number.json:
    целое, float, строку текстовой грамматики, объект дроби,
    объект смешанного числа, объект бесконечности.

Порядок импорта:
1. JSON Schema контракт (jsonschema)
2. Типизированный разбор объекта (pydantic)
3. Диспетчеризация в соответствующий конструктор Normalizer
"""

import json
from typing import Any, Dict

from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError

from rationals.core.codec.text import (
    POSITIVE_INFINITY_TOKEN,
    format_value,
    parse_value,
)
from rationals.core.contracts.validators import RationalNumberValidator
from rationals.core.domain.canonical import (
    NEGATIVE_INFINITY,
    POSITIVE_INFINITY,
    CanonicalValue,
    SignedInfinity,
)
from rationals.core.domain.errors import InvalidValue
from rationals.core.domain.interchange import (
    FractionPayload,
    InfinityPayload,
    MixedPayload,
)
from rationals.core.math.integer_domain import DEFAULT_DOMAIN, IntegerDomain
from rationals.core.math.normalizer import (
    from_double,
    from_fraction,
    from_int,
    from_mixed,
)
from rationals.logging_utils import get_logger

logger = get_logger(__name__)

_VALIDATOR = RationalNumberValidator()


# =============================================================================
# EXPORT
# =============================================================================


def export_value(value: CanonicalValue) -> Dict[str, Any]:
    """
    Экспорт канонического значения в interchange-форму.

    Examples:
        >>> export_value(FiniteRational(5, 2))
        {'numerator': 5, 'denominator': 2}
        >>> export_value(NEGATIVE_INFINITY)
        {'infinity': '-inf'}
    """
    if isinstance(value, SignedInfinity):
        return InfinityPayload(infinity=format_value(value)).model_dump()
    return FractionPayload(
        numerator=value.numerator, denominator=value.denominator
    ).model_dump()


def export_json(value: CanonicalValue) -> str:
    """Экспорт в JSON-текст."""
    return json.dumps(export_value(value))


# =============================================================================
# IMPORT
# =============================================================================


def import_value(payload: Any, domain: IntegerDomain = DEFAULT_DOMAIN) -> CanonicalValue:
    """
    Импорт interchange-формы в каноническое значение.

    Объект дроби со знаменателем 1 импортируется как целое, поэтому
    любой результат export_value импортируется обратно.

    Args:
        payload: int, float, str или dict
        domain: Целочисленный домен

    Returns:
        CanonicalValue

    Raises:
        InvalidValue: Если payload не соответствует ни одной форме
        ParseError: Если строка не соответствует текстовой грамматике
        InvalidFraction: Если дробная часть смешанного числа некорректна
        ArithmeticOverflow: Если числа не помещаются в домен
    """
    try:
        _VALIDATOR.validate(payload)
    except SchemaValidationError as exc:
        logger.debug("rejected interchange payload %r: %s", payload, exc.message)
        raise InvalidValue(f"unrecognized interchange payload: {payload!r}") from exc

    if isinstance(payload, int):
        return from_int(payload, domain)
    if isinstance(payload, float):
        return from_double(payload, domain)
    if isinstance(payload, str):
        return parse_value(payload, domain)
    if not isinstance(payload, dict):
        raise InvalidValue(f"unrecognized interchange payload: {payload!r}")

    try:
        if "infinity" in payload:
            sentinel = InfinityPayload.model_validate(payload)
            if sentinel.infinity == POSITIVE_INFINITY_TOKEN:
                return POSITIVE_INFINITY
            return NEGATIVE_INFINITY

        if "numerator" in payload:
            fraction = FractionPayload.model_validate(payload)
            if fraction.denominator == 1:
                return from_int(fraction.numerator, domain)
            return from_fraction(fraction.numerator, fraction.denominator, domain)

        mixed = MixedPayload.model_validate(payload)
    except ValidationError as exc:
        logger.debug("rejected interchange object %r", payload)
        raise InvalidValue(f"unrecognized interchange payload: {payload!r}") from exc

    return from_mixed(
        mixed.integer, mixed.fraction_numerator, mixed.fraction_denominator, domain
    )


def import_json(text: str, domain: IntegerDomain = DEFAULT_DOMAIN) -> CanonicalValue:
    """
    Импорт из JSON-текста.

    Raises:
        InvalidValue: Если текст не является JSON или форма не распознана
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidValue(f"interchange text is not valid JSON: {exc}") from exc
    return import_value(payload, domain)
