"""
Divider — Деление векторов цифр с остатком

Два пути:
- Короткий делитель (int < RADIX): проход от старшей цифры к младшей
  с накоплением остатка rem * RADIX + digit, O(n)
- Длинный делитель: нормализованное деление столбиком (Knuth, Algorithm D)

Нормализованное деление:
1. norm = RADIX // (старшая цифра делителя + 1)
2. Делимое и делитель умножаются на norm (частное не меняется, старшая
   цифра делителя становится близкой к RADIX)
3. Для каждой позиции от старшей: сдвиг частичного остатка и снос цифры,
   оценка цифры частного по двум старшим цифрам остатка и старшей цифре
   делителя, коррекция оценки вниз с возвратом делителя
4. Итоговый остаток делится на norm

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль → InvariantViolation
2. После нормализации коррекция оценки выполняется не более двух раз
3. q * b + r == a, 0 <= r < b
"""

from typing import Sequence

from biguint.core.math.additive import add_digits, add_small, sub_digits
from biguint.core.math.comparator import compare_digits
from biguint.core.math.digit_store import (
    RADIX,
    InvariantViolation,
    copy_digits,
    digits_from_int,
    digits_to_int,
    is_zero,
    normalize,
)
from biguint.core.math.multiplication import mul_small


# =============================================================================
# КОРОТКИЙ ДЕЛИТЕЛЬ
# =============================================================================


def divmod_small(digits: list[int], num: int) -> int:
    """
    Деление на короткое число (in place).

    Args:
        digits: Нормализованный вектор делимого; на выходе содержит частное
        num: Положительный int (при num >= RADIX → длинное деление)

    Returns:
        Остаток от деления (int в [0, num))

    Raises:
        InvariantViolation: если num <= 0
    """
    if num <= 0:
        raise InvariantViolation(f"divisor must be positive, got {num}")

    if num >= RADIX:
        quotient, remainder = divmod_digits(digits, digits_from_int(num))
        digits[:] = quotient
        return digits_to_int(remainder)

    remainder = 0
    for position in range(len(digits) - 1, -1, -1):
        remainder = remainder * RADIX + digits[position]
        digits[position], remainder = divmod(remainder, num)

    normalize(digits)
    return remainder


def mod_small(digits: Sequence[int], num: int) -> int:
    """
    Остаток от деления на native int без вычисления частного.

    Args:
        digits: Нормализованный вектор делимого (не изменяется)
        num: Положительный int любой величины

    Returns:
        digits mod num

    Raises:
        InvariantViolation: если num <= 0
    """
    if num <= 0:
        raise InvariantViolation(f"divisor must be positive, got {num}")

    remainder = 0
    for position in range(len(digits) - 1, -1, -1):
        remainder = (remainder * RADIX + digits[position]) % num
    return remainder


# =============================================================================
# ДЛИННЫЙ ДЕЛИТЕЛЬ
# =============================================================================


def divmod_digits(a: Sequence[int], b: Sequence[int]) -> tuple[list[int], list[int]]:
    """
    Частное и остаток от деления за один проход.

    Args:
        a: Нормализованный вектор делимого
        b: Нормализованный вектор делителя (не ноль)

    Returns:
        (quotient, remainder) — новые нормализованные векторы

    Raises:
        InvariantViolation: если b == 0

    Examples:
        >>> divmod_digits([0, 0, 100], [7])
        ([714285714, 285714285, 14], [2])
    """
    if is_zero(b):
        raise InvariantViolation("division by zero")

    if len(b) == 1:
        quotient = copy_digits(a)
        remainder = divmod_small(quotient, b[0])
        return quotient, [remainder]

    if compare_digits(a, b) < 0:
        return [0], copy_digits(a)

    norm = RADIX // (b[-1] + 1)
    dividend = mul_small(copy_digits(a), norm)
    divisor = mul_small(copy_digits(b), norm)
    size_b = len(divisor)
    top = divisor[-1]

    quotient = [0] * len(dividend)
    remainder = [0]

    for position in range(len(dividend) - 1, -1, -1):
        # remainder = remainder * RADIX + dividend[position]
        if not is_zero(remainder):
            remainder.insert(0, 0)
        add_small(remainder, dividend[position])

        high = remainder[size_b] if len(remainder) > size_b else 0
        low = remainder[size_b - 1] if len(remainder) > size_b - 1 else 0
        estimate = (high * RADIX + low) // top

        trial = mul_small(copy_digits(divisor), estimate)
        while compare_digits(remainder, trial) < 0:
            add_digits(remainder, divisor)
            estimate -= 1

        sub_digits(remainder, trial)
        quotient[position] = estimate

    divmod_small(remainder, norm)
    return normalize(quotient), remainder


def floordiv_digits(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Целая часть от деления a на b."""
    return divmod_digits(a, b)[0]


def mod_digits(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Остаток от деления a на b."""
    return divmod_digits(a, b)[1]
