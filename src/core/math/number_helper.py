"""
Number Helper — Exact Numeric Magnitude Comparison

Модуль сравнивает числа разных представлений по математическому значению:
- int / numpy-подобные integral типы (произвольная точность)
- float (IEEE-754 double)
- decimal.Decimal
- fractions.Fraction и прочие numbers.Rational
- прочие numbers.Real (float32, longdouble, ...) через as_integer_ratio

Правила promotion (promote):
- одинаковый вид → сравнение в нём же (кроме REAL)
- любая пара с DECIMAL → DECIMAL: int через Decimal(int), float через
  Decimal.from_float, Rational и REAL остаются Fraction (Decimal сравнивается
  с numbers.Rational нативно и точно)
- любая другая смешанная пара → RATIONAL (Fraction, без округления)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сравнение никогда не теряет точность: 2**53 + 1 > float(2**53)
2. Результат всегда Comparison (LESS / EQUAL / GREATER)
3. NaN → неупорядочено, возвращается EQUAL; total order при NaN не гарантируется
4. Бесконечности сравниваются по знаку, без преобразований
5. bool не считается числом
6. Decimal никогда не превращается в Fraction: стоимость сравнения не зависит
   от экспоненты (Decimal("1E+999999999") сравнивается мгновенно)
"""

import math
import numbers
from decimal import Decimal
from enum import Enum, IntEnum
from fractions import Fraction
from typing import Any

from src.core.contracts.violations import OrderContractViolation, describe_operand

# =============================================================================
# RESULT / KINDS
# =============================================================================


class Comparison(IntEnum):
    """Результат трёхстороннего сравнения"""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, value: int) -> "Comparison":
        """Знак произвольного целого как Comparison"""
        return cls((value > 0) - (value < 0))


class NumericKind(str, Enum):
    """Вид числового представления"""

    INTEGER = "integer"
    FLOAT = "float"
    DECIMAL = "decimal"
    RATIONAL = "rational"
    REAL = "real"


# =============================================================================
# КЛАССИФИКАЦИЯ
# =============================================================================


def is_numeric(value: Any) -> bool:
    """
    Является ли значение числом для magnitude-сравнения.

    bool исключён: True/False сравниваются natural ordering, как и прочие
    не-числа. complex не является numbers.Real и тоже исключён.

    Examples:
        >>> is_numeric(3), is_numeric(2.5), is_numeric(Decimal("1.5"))
        (True, True, True)
        >>> is_numeric(True), is_numeric("3"), is_numeric(1j)
        (False, False, False)
    """
    if isinstance(value, bool):
        return False
    return isinstance(value, (numbers.Real, Decimal))


def numeric_kind(value: Any) -> NumericKind:
    """
    Вид числового представления значения.

    Raises:
        OrderContractViolation: Если значение не число
    """
    if not is_numeric(value):
        raise OrderContractViolation(
            f"Expected a real number, got {describe_operand(value)}", first=value
        )

    if isinstance(value, Decimal):
        return NumericKind.DECIMAL
    if isinstance(value, numbers.Integral):
        return NumericKind.INTEGER
    if isinstance(value, float):
        return NumericKind.FLOAT
    if isinstance(value, numbers.Rational):
        return NumericKind.RATIONAL
    return NumericKind.REAL


def promote(kind_a: NumericKind, kind_b: NumericKind) -> NumericKind:
    """
    Самый узкий общий вид, в котором оба значения сравниваются точно.

    REAL + REAL → RATIONAL: два разных бинарных формата (float32 и longdouble)
    не имеют точного нативного сравнения. Любая пара с DECIMAL остаётся в
    DECIMAL: перевод Decimal в Fraction материализует 10**exponent.

    Examples:
        >>> promote(NumericKind.INTEGER, NumericKind.INTEGER).value
        'integer'
        >>> promote(NumericKind.INTEGER, NumericKind.DECIMAL).value
        'decimal'
        >>> promote(NumericKind.INTEGER, NumericKind.FLOAT).value
        'rational'
        >>> promote(NumericKind.FLOAT, NumericKind.DECIMAL).value
        'decimal'
    """
    if kind_a == kind_b and kind_a != NumericKind.REAL:
        return kind_a

    if NumericKind.DECIMAL in (kind_a, kind_b):
        return NumericKind.DECIMAL

    return NumericKind.RATIONAL


# =============================================================================
# СПЕЦИАЛЬНЫЕ ЗНАЧЕНИЯ
# =============================================================================


def is_nan(value: Any) -> bool:
    """
    NaN для любого поддерживаемого представления (включая Decimal sNaN).

    Raises:
        OrderContractViolation: Если значение не число
    """
    kind = numeric_kind(value)

    if kind == NumericKind.DECIMAL:
        return value.is_nan()
    if kind in (NumericKind.INTEGER, NumericKind.RATIONAL):
        return False
    return value != value


def is_infinite(value: Any) -> bool:
    """
    +/-Inf для любого поддерживаемого представления.

    Raises:
        OrderContractViolation: Если значение не число
    """
    return _infinity_sign(value, numeric_kind(value)) != 0


def is_unordered(a: Any, b: Any) -> bool:
    """True если пара неупорядочена (хотя бы один операнд NaN)"""
    return is_nan(a) or is_nan(b)


def _infinity_sign(value: Any, kind: NumericKind) -> int:
    # 0 для конечных значений, +1 / -1 для +Inf / -Inf
    if kind == NumericKind.DECIMAL:
        if value.is_infinite():
            return 1 if value > 0 else -1
        return 0
    if kind in (NumericKind.INTEGER, NumericKind.RATIONAL):
        return 0
    if value == math.inf:
        return 1
    if value == -math.inf:
        return -1
    return 0


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def to_fraction(value: Any) -> Fraction:
    """
    Точное представление конечного числа как Fraction.

    Используется для RATIONAL promotion и для сравнения Rational / REAL
    с Decimal. Для numbers.Real без
    as_integer_ratio остаётся только float(value), что может терять точность.

    Examples:
        >>> to_fraction(0.5)
        Fraction(1, 2)
        >>> to_fraction(Decimal("0.1"))
        Fraction(1, 10)
    """
    if isinstance(value, Fraction):
        return value
    if isinstance(value, numbers.Rational):
        return Fraction(int(value.numerator), int(value.denominator))
    if isinstance(value, (float, Decimal)):
        return Fraction(value)

    as_integer_ratio = getattr(value, "as_integer_ratio", None)
    if as_integer_ratio is not None:
        numerator, denominator = as_integer_ratio()
        return Fraction(int(numerator), int(denominator))

    return Fraction(float(value))


def _coerce(value: Any, target: NumericKind) -> Any:
    if target == NumericKind.INTEGER:
        return int(value)
    if target == NumericKind.FLOAT:
        return float(value)
    if target == NumericKind.DECIMAL:
        if isinstance(value, Decimal):
            return value
        if isinstance(value, numbers.Integral):
            return Decimal(int(value))
        if isinstance(value, float):
            return Decimal.from_float(value)
        # Decimal сравнивается с Fraction нативно, без контекстного округления
        return to_fraction(value)
    return to_fraction(value)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_numbers(a: Any, b: Any) -> Comparison:
    """
    Сравнение двух чисел по математическому значению.

    Алгоритм:
        1. NaN на любой стороне → EQUAL (неупорядочено)
        2. Бесконечность на любой стороне → сравнение по знаку
        3. promote(kind(a), kind(b)) → сравнение в общем виде

    Args:
        a: Первое число
        b: Второе число

    Returns:
        LESS если a < b, EQUAL если a == b (или пара неупорядочена),
        GREATER если a > b

    Raises:
        OrderContractViolation: Если хотя бы один операнд не число

    Examples:
        >>> compare_numbers(3, 3.0)
        <Comparison.EQUAL: 0>
        >>> compare_numbers(2**53 + 1, float(2**53))
        <Comparison.GREATER: 1>
        >>> compare_numbers(Decimal("0.1"), 0.1)
        <Comparison.LESS: -1>
    """
    kind_a = numeric_kind(a)
    kind_b = numeric_kind(b)

    if is_nan(a) or is_nan(b):
        return Comparison.EQUAL

    inf_a = _infinity_sign(a, kind_a)
    inf_b = _infinity_sign(b, kind_b)
    if inf_a or inf_b:
        return Comparison.of(inf_a - inf_b)

    target = promote(kind_a, kind_b)
    x = _coerce(a, target)
    y = _coerce(b, target)

    return Comparison.of((x > y) - (x < y))
