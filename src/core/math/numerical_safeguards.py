"""
Numerical Safeguards — Safe Math Primitives для builder-арифметики

Модуль обеспечивает предсказуемость арифметических операций builder'ов:
- Классификация операндов (вещественные / целые числа, bool исключён)
- Точное деление целых чисел через Fraction (без потерь float)
- Детерминированное округление (half-away-from-zero / half-even)
- Остаток от деления с усечением к нулю (знак делимого)
- Epsilon-независимые проверки конечности и ограничение диапазона

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. bool никогда не считается числом-операндом
2. Деление int / int выполняется точно, округление не зависит от размера чисел
3. NaN/Inf детектируются до записи результата
4. Все операции детерминированы и воспроизводимы
"""

import math
import numbers
from decimal import Decimal
from fractions import Fraction
from typing import Final, Union

Number = Union[int, float, Fraction]

# Граница округления "половины"
ROUND_HALF: Final[float] = 0.5


# =============================================================================
# КЛАССИФИКАЦИЯ ОПЕРАНДОВ
# =============================================================================


def is_real_number(value: object) -> bool:
    """
    Проверка, является ли значение вещественным числом-операндом.

    bool формально является int в Python, но как операнд арифметики
    builder'а не допускается.

    Examples:
        >>> is_real_number(2.5)
        True
        >>> is_real_number(True)
        False
        >>> is_real_number("3")
        False
    """
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_integer_number(value: object) -> bool:
    """
    Проверка, является ли значение целым числом-операндом (bool исключён).

    Examples:
        >>> is_integer_number(3)
        True
        >>> is_integer_number(3.0)
        False
    """
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def is_valid_float(value: Number | Decimal) -> bool:
    """
    Проверка, является ли число валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение (int, float, Fraction, Decimal)

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    # int/Fraction всегда конечны; math.isfinite переполняется на больших значениях
    if isinstance(value, numbers.Rational):
        return True
    return math.isfinite(value)


# =============================================================================
# ТОЧНОЕ ДЕЛЕНИЕ И ОКРУГЛЕНИЕ
# =============================================================================


def exact_quotient(numerator: Number, denominator: Number) -> Number:
    """
    Частное без потери точности для целых операндов.

    Если оба операнда целые, возвращается Fraction (точное значение),
    иначе выполняется обычное деление.

    Raises:
        ZeroDivisionError: Если denominator == 0 (проверяет вызывающий)

    Examples:
        >>> exact_quotient(7, 2)
        Fraction(7, 2)
        >>> exact_quotient(7.0, 2)
        3.5
    """
    if is_integer_number(numerator) and is_integer_number(denominator):
        return Fraction(int(numerator), int(denominator))
    return numerator / denominator


def round_half_away_from_zero(value: Number) -> int:
    """
    Округление до целого, половины округляются от нуля.

    Стандартное математическое округление: 2.5 → 3, -2.5 → -3.

    Raises:
        ValueError: Если value равно NaN
        OverflowError: Если value равно Inf

    Examples:
        >>> round_half_away_from_zero(2.5)
        3
        >>> round_half_away_from_zero(-2.5)
        -3
        >>> round_half_away_from_zero(Fraction(7, 4))
        2
    """
    magnitude = abs(value)
    whole = math.floor(magnitude)

    if magnitude - whole >= ROUND_HALF:
        whole += 1

    return -whole if value < 0 else whole


def round_half_even(value: Number) -> int:
    """
    Банковское округление до целого: 2.5 → 2, 3.5 → 4.

    Examples:
        >>> round_half_even(Fraction(5, 2))
        2
    """
    return round(value)


def truncating_remainder(dividend: int, divisor: int) -> int:
    """
    Остаток от деления с усечением частного к нулю.

    В отличие от оператора % (floor-семантика), знак результата
    совпадает со знаком делимого: -7 rem 3 = -1, 7 rem -3 = 1.

    Raises:
        ZeroDivisionError: Если divisor == 0

    Examples:
        >>> truncating_remainder(7, 3)
        1
        >>> truncating_remainder(-7, 3)
        -1
        >>> truncating_remainder(7, -3)
        1
    """
    remainder = abs(dividend) % abs(divisor)
    return -remainder if dividend < 0 else remainder


# =============================================================================
# ОГРАНИЧЕНИЕ ДИАПАЗОНА
# =============================================================================


def clamp(
    value: Number,
    min_value: Number | None = None,
    max_value: Number | None = None,
) -> Number:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(5, 0, 10)
        5
        >>> clamp(-1, 0, 10)
        0
        >>> clamp(15, 0, 10)
        10
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_integer(value: object, name: str) -> int:
    """
    Валидация, что значение является целым числом (не bool).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value как int

    Raises:
        ValueError: Если value не целое число
    """
    if not is_integer_number(value):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return int(value)
