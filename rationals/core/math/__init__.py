"""
Mathematical primitives.

Integer domain checks, normalization, exact arithmetic and ordering.
"""

from rationals.core.math.integer_domain import (
    DEFAULT_DOMAIN,
    INT32_DOMAIN,
    INT64_DOMAIN,
    IntegerDomain,
    check_denominator,
    check_numerator,
    fits_denominator,
    fits_numerator,
)
from rationals.core.math.normalizer import (
    copy_value,
    from_double,
    from_float,
    from_fraction,
    from_int,
    from_mixed,
    from_string,
    from_unsigned_int,
    make_finite,
    to_single_precision,
)
from rationals.core.math.comparator import (
    Ordering,
    compare,
    is_equal_to,
    is_less_than,
    negate_comparison_result,
)
from rationals.core.math.arithmetic import (
    add,
    divide,
    maximum,
    minimum,
    multiply,
    negate,
    product_values,
    reciprocal,
    subtract,
    sum_values,
)

__all__ = [
    # Integer domain: config
    "IntegerDomain",
    "INT32_DOMAIN",
    "INT64_DOMAIN",
    "DEFAULT_DOMAIN",
    # Integer domain: checks
    "check_numerator",
    "check_denominator",
    "fits_numerator",
    "fits_denominator",
    # Normalizer
    "make_finite",
    "from_unsigned_int",
    "from_int",
    "from_float",
    "from_double",
    "from_fraction",
    "from_mixed",
    "from_string",
    "copy_value",
    "to_single_precision",
    # Comparator
    "Ordering",
    "compare",
    "negate_comparison_result",
    "is_less_than",
    "is_equal_to",
    # Arithmetic
    "negate",
    "reciprocal",
    "add",
    "subtract",
    "multiply",
    "divide",
    "sum_values",
    "product_values",
    "maximum",
    "minimum",
]
