"""
Comparator — Полный порядок на векторах цифр

Оба операнда нормализованы (нет старших нулевых цифр), поэтому более
длинный вектор всегда больше. При равной длине сравнение идёт от старшей
цифры к младшей.
"""

from typing import Sequence


def compare_digits(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Трёхзначное сравнение двух нормализованных векторов цифр.

    Args:
        a: Первый вектор (младшая цифра первой)
        b: Второй вектор

    Returns:
        -1 если a < b
         0 если a == b
        +1 если a > b

    Examples:
        >>> compare_digits([0, 1], [999_999_999])
        1
        >>> compare_digits([7], [7])
        0
        >>> compare_digits([1, 2], [2, 2])
        -1
    """
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1

    for position in range(len(a) - 1, -1, -1):
        if a[position] != b[position]:
            return 1 if a[position] > b[position] else -1

    return 0
