"""
Additive Operators — Сложение и вычитание векторов цифр

Операции выполняются на месте над первым аргументом и завершаются
нормализацией. Время работы линейно по длине большего операнда.

Варианты:
- short: второй операнд — native int в [0, RADIX) (одна цифра)
- long: второй операнд — вектор цифр

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сложение увеличивает длину не более чем на одну цифру
2. Скаляр >= RADIX эскалируется в long-вариант
3. Уменьшаемое должно быть >= вычитаемого, иначе InvariantViolation
   выбрасывается ДО изменения цифр (частичный результат не остаётся)
"""

from typing import Sequence

from biguint.core.math.comparator import compare_digits
from biguint.core.math.digit_store import (
    RADIX,
    InvariantViolation,
    digits_from_int,
    normalize,
)


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def add_small(digits: list[int], num: int) -> list[int]:
    """
    Прибавление короткого числа (in place).

    Args:
        digits: Нормализованный вектор цифр, изменяется на месте
        num: Неотрицательный int (при num >= RADIX → long-вариант)

    Returns:
        Тот же список digits

    Raises:
        InvariantViolation: если num отрицательно
    """
    if num < 0:
        raise InvariantViolation(f"addend must be non-negative, got {num}")

    if num >= RADIX:
        return add_digits(digits, digits_from_int(num))

    carry = num
    position = 0
    while carry > 0:
        if position == len(digits):
            digits.append(0)
        carry += digits[position]
        if carry >= RADIX:
            digits[position] = carry - RADIX
            carry = 1
        else:
            digits[position] = carry
            carry = 0
        position += 1

    return normalize(digits)


def add_digits(digits: list[int], other: Sequence[int]) -> list[int]:
    """
    Прибавление длинного числа (in place), позиционно с переносом.

    Args:
        digits: Нормализованный вектор цифр, изменяется на месте
        other: Нормализованный вектор-слагаемое (не изменяется)

    Returns:
        Тот же список digits
    """
    if len(other) == 1:
        return add_small(digits, other[0])

    # other может быть тем же списком, что и digits (a += a)
    other = tuple(other)
    size = max(len(digits), len(other))
    if len(digits) < size:
        digits.extend([0] * (size - len(digits)))

    carry = 0
    for position in range(size):
        total = digits[position] + carry
        if position < len(other):
            total += other[position]
        if total >= RADIX:
            digits[position] = total - RADIX
            carry = 1
        else:
            digits[position] = total
            carry = 0

    if carry:
        digits.append(carry)

    return normalize(digits)


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


def sub_small(digits: list[int], num: int) -> list[int]:
    """
    Вычитание короткого числа (in place), с заёмом из старших разрядов.

    Args:
        digits: Нормализованный вектор цифр (уменьшаемое)
        num: Неотрицательный int, не больше уменьшаемого

    Returns:
        Тот же список digits

    Raises:
        InvariantViolation: если num отрицательно или больше уменьшаемого
    """
    if num < 0:
        raise InvariantViolation(f"subtrahend must be non-negative, got {num}")

    if num >= RADIX:
        return sub_digits(digits, digits_from_int(num))

    if len(digits) == 1 and digits[0] < num:
        raise InvariantViolation(
            f"subtraction underflow: minuend {digits[0]} < subtrahend {num}"
        )

    borrow = num
    position = 0
    while borrow > 0:
        remainder = digits[position] - borrow
        if remainder < 0:
            digits[position] = remainder + RADIX
            borrow = 1
        else:
            digits[position] = remainder
            borrow = 0
        position += 1

    return normalize(digits)


def sub_digits(digits: list[int], other: Sequence[int]) -> list[int]:
    """
    Вычитание длинного числа (in place), зеркально сложению.

    Цикл останавливается, как только заём погашен за пределами длины
    вычитаемого.

    Args:
        digits: Нормализованный вектор цифр (уменьшаемое)
        other: Нормализованный вектор-вычитаемое, other <= digits

    Returns:
        Тот же список digits

    Raises:
        InvariantViolation: если other > digits (underflow)
    """
    if len(other) == 1:
        return sub_small(digits, other[0])

    if compare_digits(digits, other) < 0:
        raise InvariantViolation(
            f"subtraction underflow: minuend has {len(digits)} digits, "
            f"subtrahend has {len(other)} digits and is larger"
        )

    other = tuple(other)
    borrow = 0
    for position in range(len(digits)):
        if position >= len(other) and borrow == 0:
            break
        remainder = digits[position] - borrow
        if position < len(other):
            remainder -= other[position]
        if remainder < 0:
            digits[position] = remainder + RADIX
            borrow = 1
        else:
            digits[position] = remainder
            borrow = 0

    return normalize(digits)
