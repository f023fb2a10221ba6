"""
Тесты для Arithmetic Engine и Comparator

Проверяет:
1. negate / reciprocal (включая бесконечности и ноль)
2. add / subtract / multiply / divide с правилами бесконечностей
3. Переполнение домена -> ArithmeticOverflow (никакого молчаливого обрезания)
4. Алгебраические законы: коммутативность, нейтральные элементы
5. Свёртки и их значения для пустых последовательностей
6. Полный порядок: тотальность, антисимметрия, бесконечности
"""

import itertools

import pytest

from rationals.core.domain.canonical import (
    NEGATIVE_INFINITY,
    ONE,
    POSITIVE_INFINITY,
    ZERO,
    FiniteRational,
)
from rationals.core.domain.errors import (
    ArithmeticOverflow,
    DivisionByZero,
    IndeterminateForm,
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
from rationals.core.math.comparator import (
    Ordering,
    compare,
    is_equal_to,
    is_less_than,
    negate_comparison_result,
)
from rationals.core.math.integer_domain import INT32_DOMAIN


HALF = FiniteRational(1, 2)
THIRD = FiniteRational(1, 3)

FINITE_SAMPLES = [
    ZERO,
    ONE,
    HALF,
    THIRD,
    FiniteRational(-3, 4),
    FiniteRational(7, 5),
    FiniteRational(-9, 1),
    FiniteRational(22, 7),
]

ALL_SAMPLES = FINITE_SAMPLES + [POSITIVE_INFINITY, NEGATIVE_INFINITY]


# =============================================================================
# UNARY
# =============================================================================


class TestNegate:
    """Тесты для negate"""

    def test_finite(self) -> None:
        """Смена знака числителя"""
        assert negate(FiniteRational(3, 4)) == FiniteRational(-3, 4)
        assert negate(FiniteRational(-3, 4)) == FiniteRational(3, 4)
        assert negate(ZERO) == ZERO

    def test_infinity(self) -> None:
        """Смена знака бесконечности"""
        assert negate(POSITIVE_INFINITY) == NEGATIVE_INFINITY
        assert negate(NEGATIVE_INFINITY) == POSITIVE_INFINITY

    def test_most_negative_numerator_overflows(self) -> None:
        """-(-2**31) не помещается в int32"""
        with pytest.raises(ArithmeticOverflow):
            negate(FiniteRational(-(2**31), 1), INT32_DOMAIN)


class TestReciprocal:
    """Тесты для reciprocal"""

    def test_sign_moves_to_numerator(self) -> None:
        """(-3, 4) -> (-4, 3)"""
        assert reciprocal(FiniteRational(-3, 4)) == FiniteRational(-4, 3)
        assert reciprocal(FiniteRational(5, 1)) == FiniteRational(1, 5)

    def test_zero_raises(self) -> None:
        """Обратное к нулю не существует"""
        with pytest.raises(DivisionByZero):
            reciprocal(ZERO)
        with pytest.raises(ZeroDivisionError):
            reciprocal(ZERO)

    def test_infinity_reciprocates_to_zero(self) -> None:
        """1 / ±inf = 0"""
        assert reciprocal(POSITIVE_INFINITY) == ZERO
        assert reciprocal(NEGATIVE_INFINITY) == ZERO

    def test_involution(self) -> None:
        """reciprocal(reciprocal(a)) == a для ненулевых конечных a"""
        for value in FINITE_SAMPLES:
            if value != ZERO:
                assert reciprocal(reciprocal(value)) == value

    def test_overflow(self) -> None:
        """Знаменатель uint32 не помещается в числитель int32"""
        with pytest.raises(ArithmeticOverflow):
            reciprocal(FiniteRational(1, 2**32 - 1), INT32_DOMAIN)


# =============================================================================
# BINARY
# =============================================================================


class TestAdd:
    """Тесты для add / subtract"""

    def test_example_half_plus_third(self) -> None:
        """1/2 + 1/3 = 5/6"""
        assert add(HALF, THIRD) == FiniteRational(5, 6)

    def test_result_reduced(self) -> None:
        """Результат всегда несократим"""
        assert add(HALF, HALF) == ONE
        assert add(FiniteRational(1, 6), THIRD) == HALF
        assert add(HALF, FiniteRational(-1, 2)) == ZERO

    def test_subtract(self) -> None:
        """Разность конечных значений"""
        assert subtract(HALF, THIRD) == FiniteRational(1, 6)
        assert subtract(THIRD, HALF) == FiniteRational(-1, 6)
        assert subtract(ONE, ONE) == ZERO

    def test_finite_plus_infinity(self) -> None:
        """finite + inf = inf"""
        assert add(HALF, POSITIVE_INFINITY) == POSITIVE_INFINITY
        assert add(NEGATIVE_INFINITY, HALF) == NEGATIVE_INFINITY
        assert subtract(HALF, POSITIVE_INFINITY) == NEGATIVE_INFINITY

    def test_same_sign_infinities(self) -> None:
        """inf + inf одного знака = та же бесконечность"""
        assert add(POSITIVE_INFINITY, POSITIVE_INFINITY) == POSITIVE_INFINITY
        assert add(NEGATIVE_INFINITY, NEGATIVE_INFINITY) == NEGATIVE_INFINITY
        assert subtract(POSITIVE_INFINITY, NEGATIVE_INFINITY) == POSITIVE_INFINITY
        assert subtract(NEGATIVE_INFINITY, POSITIVE_INFINITY) == NEGATIVE_INFINITY

    def test_indeterminate_forms(self) -> None:
        """(+inf) + (-inf) и inf - inf неопределены"""
        with pytest.raises(IndeterminateForm):
            add(POSITIVE_INFINITY, NEGATIVE_INFINITY)
        with pytest.raises(IndeterminateForm):
            subtract(POSITIVE_INFINITY, POSITIVE_INFINITY)
        with pytest.raises(IndeterminateForm):
            subtract(NEGATIVE_INFINITY, NEGATIVE_INFINITY)

    def test_numerator_overflow(self) -> None:
        """Переполнение числителя не обрезается"""
        with pytest.raises(ArithmeticOverflow):
            add(FiniteRational(2**63 - 1, 1), ONE)
        with pytest.raises(ArithmeticOverflow):
            add(FiniteRational(2**31 - 1, 1), ONE, INT32_DOMAIN)
        with pytest.raises(ArithmeticOverflow):
            subtract(FiniteRational(-(2**31), 1), ONE, INT32_DOMAIN)

    def test_subtract_most_negative_numerator(self) -> None:
        """-1 - (-2**63) = 2**63 - 1 помещается в int64"""
        most_negative = FiniteRational(-(2**63), 1)
        assert subtract(FiniteRational(-1, 1), most_negative) == FiniteRational(2**63 - 1, 1)
        assert subtract(FiniteRational(-1, 1), FiniteRational(-(2**31), 1), INT32_DOMAIN) == (
            FiniteRational(2**31 - 1, 1)
        )

    def test_infinity_minus_most_negative_numerator(self) -> None:
        """inf - finite = inf без промежуточного отрицания"""
        most_negative = FiniteRational(-(2**63), 1)
        assert subtract(POSITIVE_INFINITY, most_negative) == POSITIVE_INFINITY
        assert subtract(most_negative, POSITIVE_INFINITY) == NEGATIVE_INFINITY
        assert subtract(most_negative, NEGATIVE_INFINITY) == POSITIVE_INFINITY

    def test_common_denominator_overflow(self) -> None:
        """lcm взаимно простых знаменателей не помещается в uint32"""
        with pytest.raises(ArithmeticOverflow, match="common denominator"):
            add(
                FiniteRational(1, 2**32 - 1),
                FiniteRational(1, 2**32 - 3),
                INT32_DOMAIN,
            )

    def test_lcm_keeps_intermediates_small(self) -> None:
        """Общий знаменатель — lcm, а не произведение"""
        big = 2**31
        assert add(FiniteRational(1, big), FiniteRational(1, big), INT32_DOMAIN) == (
            FiniteRational(1, 2**30)
        )

    def test_commutative(self) -> None:
        """add(a, b) == add(b, a)"""
        for a, b in itertools.product(FINITE_SAMPLES, repeat=2):
            assert add(a, b) == add(b, a)

    def test_identity(self) -> None:
        """add(a, 0) == a"""
        for value in ALL_SAMPLES:
            assert add(value, ZERO) == value


class TestMultiply:
    """Тесты для multiply / divide"""

    def test_finite(self) -> None:
        """Произведение сокращается"""
        assert multiply(FiniteRational(2, 3), FiniteRational(3, 4)) == HALF
        assert multiply(FiniteRational(-2, 3), FiniteRational(3, 4)) == FiniteRational(-1, 2)
        assert multiply(ZERO, FiniteRational(5, 7)) == ZERO

    def test_infinity_sign_rule(self) -> None:
        """nonzero * inf = inf со знаком произведения"""
        assert multiply(HALF, POSITIVE_INFINITY) == POSITIVE_INFINITY
        assert multiply(FiniteRational(-1, 2), POSITIVE_INFINITY) == NEGATIVE_INFINITY
        assert multiply(NEGATIVE_INFINITY, NEGATIVE_INFINITY) == POSITIVE_INFINITY
        assert multiply(NEGATIVE_INFINITY, POSITIVE_INFINITY) == NEGATIVE_INFINITY

    def test_zero_times_infinity(self) -> None:
        """0 * inf неопределено"""
        with pytest.raises(IndeterminateForm):
            multiply(ZERO, POSITIVE_INFINITY)
        with pytest.raises(IndeterminateForm):
            multiply(NEGATIVE_INFINITY, ZERO)

    def test_overflow(self) -> None:
        """Переполнение числителя или знаменателя произведения"""
        with pytest.raises(ArithmeticOverflow):
            multiply(FiniteRational(2**31 - 1, 1), FiniteRational(2, 1), INT32_DOMAIN)
        with pytest.raises(ArithmeticOverflow):
            multiply(FiniteRational(1, 2**16), FiniteRational(1, 2**16), INT32_DOMAIN)

    def test_cross_reduction_avoids_overflow(self) -> None:
        """(2**31-1)/2 * 2/(2**31-1) = 1 без промежуточного переполнения"""
        big = 2**31 - 1
        assert multiply(
            FiniteRational(big, 2), FiniteRational(2, big), INT32_DOMAIN
        ) == ONE

    def test_commutative(self) -> None:
        """multiply(a, b) == multiply(b, a)"""
        for a, b in itertools.product(FINITE_SAMPLES, repeat=2):
            assert multiply(a, b) == multiply(b, a)

    def test_identity(self) -> None:
        """multiply(a, 1) == a"""
        for value in ALL_SAMPLES:
            assert multiply(value, ONE) == value

    def test_divide(self) -> None:
        """divide(a, b) = a * (1 / b)"""
        assert divide(HALF, FiniteRational(1, 4)) == FiniteRational(2, 1)
        assert divide(HALF, POSITIVE_INFINITY) == ZERO
        assert divide(POSITIVE_INFINITY, FiniteRational(-2, 1)) == NEGATIVE_INFINITY
        with pytest.raises(DivisionByZero):
            divide(ONE, ZERO)


# =============================================================================
# FOLDS
# =============================================================================


class TestFolds:
    """Тесты для sum_values / product_values / maximum / minimum"""

    def test_empty_sequences(self) -> None:
        """Значения для пустого входа"""
        assert sum_values([]) == ZERO
        assert product_values([]) == ONE
        assert maximum([]) == NEGATIVE_INFINITY
        assert minimum([]) == POSITIVE_INFINITY

    def test_sum(self) -> None:
        """1/2 + 1/3 + 1/6 = 1"""
        assert sum_values([HALF, THIRD, FiniteRational(1, 6)]) == ONE

    def test_product(self) -> None:
        """2/3 * 3/4 * 4/5 = 2/5"""
        values = [FiniteRational(2, 3), FiniteRational(3, 4), FiniteRational(4, 5)]
        assert product_values(values) == FiniteRational(2, 5)

    def test_max_min(self) -> None:
        """Линейный поиск экстремума"""
        values = [HALF, FiniteRational(2, 3), FiniteRational(-5, 1)]
        assert maximum(values) == FiniteRational(2, 3)
        assert minimum(values) == FiniteRational(-5, 1)
        assert maximum(values + [POSITIVE_INFINITY]) == POSITIVE_INFINITY
        assert minimum(values + [NEGATIVE_INFINITY]) == NEGATIVE_INFINITY

    def test_accepts_iterators(self) -> None:
        """Свёртки принимают любые iterable"""
        assert sum_values(iter([HALF, HALF])) == ONE

    def test_first_error_aborts_fold(self) -> None:
        """Первая ошибка прерывает свёртку, остальные элементы не читаются"""
        consumed = []

        def values():
            for value in (POSITIVE_INFINITY, NEGATIVE_INFINITY, ONE, ONE):
                consumed.append(value)
                yield value

        with pytest.raises(IndeterminateForm):
            sum_values(values())
        assert len(consumed) == 2

    def test_overflow_in_fold(self) -> None:
        """Переполнение в середине свёртки"""
        values = [FiniteRational(2**30, 1)] * 3
        with pytest.raises(ArithmeticOverflow):
            sum_values(values, INT32_DOMAIN)


# =============================================================================
# COMPARATOR
# =============================================================================


class TestComparator:
    """Тесты для compare / negate_comparison_result"""

    def test_example(self) -> None:
        """1/2 < 2/3"""
        assert compare(HALF, FiniteRational(2, 3)) is Ordering.LESS
        assert compare(FiniteRational(2, 3), HALF) is Ordering.GREATER
        assert compare(HALF, HALF) is Ordering.EQUAL

    def test_infinities(self) -> None:
        """Бесконечности на крайних позициях"""
        huge = FiniteRational(2**63 - 1, 1)
        assert compare(POSITIVE_INFINITY, huge) is Ordering.GREATER
        assert compare(NEGATIVE_INFINITY, FiniteRational(-(2**63), 1)) is Ordering.LESS
        assert compare(huge, POSITIVE_INFINITY) is Ordering.LESS
        assert compare(POSITIVE_INFINITY, POSITIVE_INFINITY) is Ordering.EQUAL
        assert compare(NEGATIVE_INFINITY, NEGATIVE_INFINITY) is Ordering.EQUAL
        assert compare(NEGATIVE_INFINITY, POSITIVE_INFINITY) is Ordering.LESS

    def test_exact_beyond_float_precision(self) -> None:
        """Сравнение не теряет точность, в отличие от float"""
        a = FiniteRational(2**62 + 1, 1)
        b = FiniteRational(2**62, 1)
        assert float(a.numerator) == float(b.numerator)
        assert compare(a, b) is Ordering.GREATER
        assert compare(FiniteRational(1, 2**63 - 1), FiniteRational(1, 2**63 - 2)) is Ordering.LESS

    def test_negate_comparison_result(self) -> None:
        """LESS <-> GREATER, EQUAL неизменен"""
        assert negate_comparison_result(Ordering.LESS) is Ordering.GREATER
        assert negate_comparison_result(Ordering.GREATER) is Ordering.LESS
        assert negate_comparison_result(Ordering.EQUAL) is Ordering.EQUAL

    def test_totality_and_antisymmetry(self) -> None:
        """Ровно один результат, и compare(a, b) == negate(compare(b, a))"""
        for a, b in itertools.product(ALL_SAMPLES, repeat=2):
            result = compare(a, b)
            assert result in (Ordering.LESS, Ordering.EQUAL, Ordering.GREATER)
            assert result is negate_comparison_result(compare(b, a))
            assert (result is Ordering.EQUAL) == (a == b)

    def test_transitivity_matches_sorted_order(self) -> None:
        """Порядок согласован с ожидаемой сортировкой"""
        ordered = [
            NEGATIVE_INFINITY,
            FiniteRational(-9, 1),
            FiniteRational(-3, 4),
            ZERO,
            THIRD,
            HALF,
            ONE,
            FiniteRational(7, 5),
            FiniteRational(22, 7),
            POSITIVE_INFINITY,
        ]
        for i, j in itertools.combinations(range(len(ordered)), 2):
            assert compare(ordered[i], ordered[j]) is Ordering.LESS

    def test_predicates(self) -> None:
        """is_less_than / is_equal_to"""
        assert is_less_than(THIRD, HALF)
        assert not is_less_than(HALF, HALF)
        assert is_equal_to(HALF, FiniteRational(1, 2))
        assert not is_equal_to(POSITIVE_INFINITY, NEGATIVE_INFINITY)
