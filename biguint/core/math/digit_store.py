"""
Digit Store — Хранилище цифр и нормализация

Базовый (листовой) модуль движка: представление числа в виде вектора цифр
по основанию RADIX и восстановление канонической формы.

Представление:
- list[int], младшая цифра первой (little-endian)
- каждая цифра в диапазоне [0, RADIX), RADIX = 10^9
- одна цифра соответствует ровно WIDTH = 9 десятичным символам

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вектор никогда не пуст: ноль хранится как [0]
2. Нет старших нулевых цифр, кроме значения ноль
3. Каждая цифра лежит в [0, RADIX)
4. Нарушение инварианта → InvariantViolation (ошибка программиста,
   а не восстанавливаемое состояние данных)
"""

from typing import Final, Sequence

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Основание системы счисления.
# Произведение двух цифр плюс перенос помещается в 64-битный промежуточный
# результат, а цифра переводится ровно в WIDTH десятичных символов.
RADIX: Final[int] = 1_000_000_000

# Количество десятичных символов в одной цифре
WIDTH: Final[int] = 9


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvariantViolation(Exception):
    """
    Нарушение предусловия или инварианта беззнаковой арифметики.

    Случаи:
    1. Цифра вне диапазона [0, RADIX)
    2. Отрицательный аргумент беззнаковой операции
    3. Вычитание большего из меньшего (underflow)
    4. Деление на ноль (в том числе нулевой модуль)
    5. Отрицательная степень

    Это ошибка вызывающего кода: библиотека никогда не перехватывает это
    исключение, продолжение вычисления дало бы некорректный результат.
    """
    pass


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize(digits: list[int]) -> list[int]:
    """
    Восстановление канонической формы вектора цифр (in place).

    Удаляет старшие нулевые цифры до минимальной длины 1 и проверяет,
    что каждая цифра лежит в [0, RADIX).

    Args:
        digits: Вектор цифр (младшая первой), изменяется на месте

    Returns:
        Тот же список digits

    Raises:
        InvariantViolation: если цифра не int или вне [0, RADIX)

    Examples:
        >>> normalize([5, 0, 0])
        [5]
        >>> normalize([])
        [0]
        >>> normalize([0, 0])
        [0]
    """
    if not digits:
        digits.append(0)

    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()

    for position, digit in enumerate(digits):
        if type(digit) is not int or not 0 <= digit < RADIX:
            raise InvariantViolation(
                f"digit at position {position} must be an int in [0, {RADIX}), "
                f"got {digit!r}"
            )

    return digits


# =============================================================================
# КОНСТРУИРОВАНИЕ И КОНВЕРСИЯ
# =============================================================================


def digits_from_int(value: int) -> list[int]:
    """
    Разложение неотрицательного int по основанию RADIX.

    Args:
        value: Неотрицательное целое

    Returns:
        Нормализованный вектор цифр (младшая первой)

    Raises:
        InvariantViolation: если value отрицательно или не является int

    Examples:
        >>> digits_from_int(0)
        [0]
        >>> digits_from_int(1_000_000_001)
        [1, 1]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvariantViolation(f"value must be an int, got {value!r}")

    if value < 0:
        raise InvariantViolation(f"value must be non-negative, got {value}")

    digits: list[int] = []
    while True:
        value, digit = divmod(value, RADIX)
        digits.append(digit)
        if value == 0:
            break

    return normalize(digits)


def digits_to_int(digits: Sequence[int]) -> int:
    """Сборка native int из вектора цифр (схема Горнера от старшей цифры)."""
    value = 0
    for digit in reversed(digits):
        value = value * RADIX + digit
    return value


def copy_digits(digits: Sequence[int]) -> list[int]:
    """Независимая копия вектора цифр для чистых (не мутирующих) операций."""
    return list(digits)


def is_zero(digits: Sequence[int]) -> bool:
    """True если нормализованный вектор представляет ноль."""
    return len(digits) == 1 and digits[0] == 0
