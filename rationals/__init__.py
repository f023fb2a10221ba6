"""
rationals: exact rational numbers with signed infinities

Values built from integers, floats, fractions, mixed numbers or strings are
normalized into one canonical form and combined with exact arithmetic.
Nothing is ever rounded; results outside the fixed-width integer domain
raise ArithmeticOverflow.

Quick start:
    >>> from rationals import RationalNumber
    >>> x = RationalNumber.fraction(1, 2) + RationalNumber.fraction(1, 3)
    >>> str(x)
    '5/6'
    >>> RationalNumber.mixed(2, 1, 2).export_to_json()
    {'numerator': 5, 'denominator': 2}
"""

__version__ = "1.0.0"

from rationals.core.domain import (
    NEGATIVE_INFINITY,
    ONE,
    POSITIVE_INFINITY,
    ZERO,
    ArithmeticOverflow,
    CanonicalValue,
    DivisionByZero,
    FiniteRational,
    IndeterminateForm,
    InvalidDenominator,
    InvalidFraction,
    InvalidValue,
    ParseError,
    RationalError,
    RationalNumber,
    Sign,
    SignedInfinity,
    box_array,
    unbox_array,
)
from rationals.core.math import (
    DEFAULT_DOMAIN,
    INT32_DOMAIN,
    INT64_DOMAIN,
    IntegerDomain,
    Ordering,
    compare,
    negate_comparison_result,
)
from rationals.core.codec import (
    export_value,
    format_value,
    import_value,
    parse_value,
)

__all__ = [
    "__version__",
    # Canonical value
    "CanonicalValue",
    "FiniteRational",
    "SignedInfinity",
    "Sign",
    "ZERO",
    "ONE",
    "POSITIVE_INFINITY",
    "NEGATIVE_INFINITY",
    # Wrapper
    "RationalNumber",
    "box_array",
    "unbox_array",
    # Config
    "IntegerDomain",
    "INT32_DOMAIN",
    "INT64_DOMAIN",
    "DEFAULT_DOMAIN",
    # Ordering
    "Ordering",
    "compare",
    "negate_comparison_result",
    # Codecs
    "format_value",
    "parse_value",
    "export_value",
    "import_value",
    # Errors
    "RationalError",
    "InvalidValue",
    "InvalidDenominator",
    "InvalidFraction",
    "DivisionByZero",
    "ArithmeticOverflow",
    "IndeterminateForm",
    "ParseError",
]
