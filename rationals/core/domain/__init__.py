"""
Domain models and value objects.

Contains the canonical rational value, the typed errors, the interchange
payload models and the RationalNumber wrapper.
"""

from rationals.core.domain.canonical import (
    NEGATIVE_INFINITY,
    ONE,
    POSITIVE_INFINITY,
    ZERO,
    CanonicalValue,
    FiniteRational,
    Sign,
    SignedInfinity,
    is_finite,
    is_zero,
    sign_of,
)
from rationals.core.domain.errors import (
    ArithmeticOverflow,
    DivisionByZero,
    IndeterminateForm,
    InvalidDenominator,
    InvalidFraction,
    InvalidValue,
    ParseError,
    RationalError,
)
from rationals.core.domain.interchange import (
    FractionPayload,
    InfinityPayload,
    MixedPayload,
)
from rationals.core.domain.rational_number import (
    RationalNumber,
    box_array,
    unbox_array,
)

__all__ = [
    # Canonical value
    "CanonicalValue",
    "FiniteRational",
    "SignedInfinity",
    "Sign",
    "ZERO",
    "ONE",
    "POSITIVE_INFINITY",
    "NEGATIVE_INFINITY",
    "is_finite",
    "is_zero",
    "sign_of",
    # Errors
    "RationalError",
    "InvalidValue",
    "InvalidDenominator",
    "InvalidFraction",
    "DivisionByZero",
    "ArithmeticOverflow",
    "IndeterminateForm",
    "ParseError",
    # Interchange payloads
    "FractionPayload",
    "MixedPayload",
    "InfinityPayload",
    # Wrapper
    "RationalNumber",
    "box_array",
    "unbox_array",
]
