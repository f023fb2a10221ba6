"""
Errors — типизированные ошибки движка рациональных чисел

Иерархия:
    RationalError (базовый класс)
    ├── InvalidValue - NaN, неверный тип входа, нераспознанный interchange payload
    ├── InvalidDenominator - знаменатель 0/1/отрицательный для формы дроби
    ├── InvalidFraction - дробная часть вне интервала 0 < num < den
    ├── DivisionByZero - обратное к нулю
    ├── ArithmeticOverflow - выход за фиксированный целочисленный диапазон
    ├── IndeterminateForm - inf - inf, (+inf) + (-inf), 0 * inf
    └── ParseError - некорректная строка

Каждая ошибка также наследует ближайшее встроенное исключение, чтобы
обычные обработчики (`except ValueError`, `except ZeroDivisionError`)
продолжали работать.
"""


class RationalError(Exception):
    """
    Базовое исключение пакета rationals.

    Все остальные ошибки наследуют его, поэтому вызывающий код может
    поймать любую ошибку движка одним обработчиком.

    Example:
        >>> try:
        ...     value = parse_value("1/0")
        ... except RationalError as e:
        ...     print(f"rationals error: {e}")
    """

    pass


class InvalidValue(RationalError, ValueError):
    """
    Невалидное входное значение.

    Examples:
        - float NaN
        - отрицательное число для unsigned-формы
        - payload, не совпадающий ни с одной interchange-формой
    """

    pass


class InvalidDenominator(RationalError, ValueError):
    """Знаменатель 0, 1 или отрицательный там, где требуется собственная дробь."""

    pass


class InvalidFraction(RationalError, ValueError):
    """Дробная часть смешанного числа не лежит строго между нулём и единицей."""

    pass


class DivisionByZero(RationalError, ZeroDivisionError):
    """Обратное значение (или деление) для нуля."""

    pass


class ArithmeticOverflow(RationalError, OverflowError):
    """
    Результат или промежуточное значение вне целочисленного домена.

    Движок никогда не переходит на bignum и никогда не обрезает значение:
    выход за диапазон всегда сигнализируется этой ошибкой.
    """

    pass


class IndeterminateForm(RationalError, ArithmeticError):
    """
    Неопределённость с бесконечностями.

    Examples:
        - (+inf) + (-inf)
        - inf - inf
        - 0 * inf
    """

    pass


class ParseError(RationalError, ValueError):
    """Строка не соответствует ни одной текстовой грамматике."""

    pass
