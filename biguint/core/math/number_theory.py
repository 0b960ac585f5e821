"""
Number Theory — Возведение в степень и НОД

Построено исключительно на операциях умножения и деления.

ФОРМУЛЫ:
    power: бинарное возведение, от младшего бита показателя:
        если бит установлен → acc = acc * base
        base = base * base; при заданном модуле → base = base mod m
    gcd: (a, b) → (b, a mod b), пока b != 0

КОНТРАКТ РАЗМЕЩЕНИЯ РЕДУКЦИИ:
    Модуль применяется только к базе после возведения в квадрат, аккумулятор
    не редуцируется. Результат сравним с base ** exponent по модулю m, но
    может быть >= m. Вызывающий код сам берёт итоговый остаток.
"""

from typing import Sequence

from biguint.core.math.digit_store import (
    InvariantViolation,
    copy_digits,
    is_zero,
)
from biguint.core.math.division import mod_digits
from biguint.core.math.multiplication import MultiplierConfig, multiply


def power_digits(
    base: Sequence[int],
    exponent: int,
    modulus: Sequence[int] | None = None,
    config: MultiplierConfig | None = None,
) -> list[int]:
    """
    Бинарное возведение в степень с опциональной редукцией базы.

    Args:
        base: Нормализованный вектор основания
        exponent: Неотрицательный native int
        modulus: Нормализованный вектор модуля (не ноль) или None
        config: Конфигурация селектора умножения

    Returns:
        Новый нормализованный вектор; без модуля — base ** exponent,
        с модулем — значение, сравнимое с base ** exponent по модулю

    Raises:
        InvariantViolation: если exponent отрицателен или не int,
            или modulus == 0

    Examples:
        >>> power_digits([2], 10)
        [1024]
        >>> power_digits([7], 0)
        [1]
    """
    if isinstance(exponent, bool) or not isinstance(exponent, int):
        raise InvariantViolation(f"exponent must be an int, got {exponent!r}")

    if exponent < 0:
        raise InvariantViolation(f"exponent must be non-negative, got {exponent}")

    if modulus is not None and is_zero(modulus):
        raise InvariantViolation("modulus must be positive, got 0")

    result = [1]
    current = copy_digits(base)

    while exponent > 0:
        if exponent % 2 != 0:
            result = multiply(result, current, config)
        exponent //= 2
        # Квадрат после последнего бита не используется
        if exponent > 0:
            current = multiply(current, current, config)
            if modulus is not None:
                current = mod_digits(current, modulus)

    return result


def gcd_digits(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Наибольший общий делитель (алгоритм Евклида).

    Args:
        a: Нормализованный вектор
        b: Нормализованный вектор

    Returns:
        Новый нормализованный вектор gcd(a, b); gcd(a, 0) == a

    Examples:
        >>> gcd_digits([48], [18])
        [6]
    """
    a = copy_digits(a)
    b = copy_digits(b)

    while not is_zero(b):
        a, b = b, mod_digits(a, b)

    return a
