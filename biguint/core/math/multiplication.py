"""
Multiplier — Умножение векторов цифр

Два взаимозаменяемых алгоритма и селектор:
- Schoolbook: классическая свёртка O(n·m) с переносами
- Spectral: свёртка через FFT (numpy.fft) за O(n log n)
- Selector: выбор алгоритма по оценке стоимости от длин операндов

Умножение на короткое число (одна цифра) всегда идёт через линейный
скалярный путь mul_small, независимо от селектора.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (spectral):
1. Каждая цифра RADIX = 1000^3 разбивается на три под-цифры по основанию
   SPLIT_RADIX = 1000, чтобы накопленная ошибка округления после обратного
   преобразования оставалась < 0.5
2. Длина преобразования = степень двойки, вмещающая больший операнд,
   умноженная на 2 (исключает циклическое наложение свёртки)
3. Оба решения несут точность: их нельзя менять без повторной проверки
   эквивалентности schoolbook(a, b) == spectral(a, b)

ФОРМУЛЫ (selector):
    schoolbook_cost = len_a * len_b
    size = 2 * pow2_ceil(3 * max(len_a, len_b))
    spectral_cost = spectral_cost_factor * size * log2(size)
    SPECTRAL если schoolbook_cost >= crossover_factor * spectral_cost
"""

import logging
from enum import Enum
from typing import Callable, Final, Sequence

import numpy as np
from pydantic import BaseModel, Field

from biguint.core.math.digit_store import (
    RADIX,
    InvariantViolation,
    digits_from_int,
    normalize,
)

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ УМНОЖЕНИЯ
# =============================================================================

# Основание под-цифр для спектрального умножения: RADIX == SPLIT_RADIX ** 3
SPLIT_RADIX: Final[int] = 1000

# Количество под-цифр в одной цифре RADIX
SPLIT_PARTS: Final[int] = 3

# Порог переключения: spectral выбирается, если стоимость schoolbook
# не меньше crossover_factor * стоимость spectral (подобрано эмпирически)
DEFAULT_CROSSOVER_FACTOR: Final[float] = 15.0

# Множитель стоимости спектрального умножения (три преобразования)
DEFAULT_SPECTRAL_COST_FACTOR: Final[int] = 3


# =============================================================================
# CONFIG
# =============================================================================


class MultiplierKind(str, Enum):
    """Алгоритм умножения длинных чисел"""

    SCHOOLBOOK = "schoolbook"
    SPECTRAL = "spectral"


class MultiplierConfig(BaseModel):
    """
    Конфигурация селектора умножения.

    Порог — настраиваемый параметр производительности, а не условие
    корректности: оба алгоритма дают одинаковый результат. Для малых
    операндов schoolbook выбирается при любом положительном пороге >= 1.
    """

    crossover_factor: float = Field(
        DEFAULT_CROSSOVER_FACTOR,
        gt=0,
        description="Отношение стоимостей schoolbook/spectral для выбора spectral",
    )
    spectral_cost_factor: int = Field(
        DEFAULT_SPECTRAL_COST_FACTOR,
        gt=0,
        description="Множитель оценки стоимости spectral",
    )

    model_config = {"frozen": True}


DEFAULT_MULTIPLIER_CONFIG: Final[MultiplierConfig] = MultiplierConfig()


# =============================================================================
# SCALAR MULTIPLY
# =============================================================================


def mul_small(digits: list[int], num: int) -> list[int]:
    """
    Умножение на короткое число (in place), линейный проход с переносом.

    Args:
        digits: Нормализованный вектор цифр, изменяется на месте
        num: Неотрицательный int (при num >= RADIX → длинное умножение)

    Returns:
        Тот же список digits

    Raises:
        InvariantViolation: если num отрицательно
    """
    if num < 0:
        raise InvariantViolation(f"multiplier must be non-negative, got {num}")

    if num >= RADIX:
        digits[:] = multiply(digits, digits_from_int(num))
        return digits

    carry = 0
    for position, digit in enumerate(digits):
        carry, digits[position] = divmod(digit * num + carry, RADIX)

    if carry:
        digits.append(carry)

    return normalize(digits)


# =============================================================================
# SCHOOLBOOK
# =============================================================================


def schoolbook_multiply(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Классическое умножение столбиком.

    Результат накапливается в буфере длины len(a) + len(b). Если один из
    операндов однозначный, вырождается в mul_small.

    Args:
        a: Нормализованный вектор цифр
        b: Нормализованный вектор цифр

    Returns:
        Новый нормализованный вектор a * b
    """
    if len(b) == 1:
        return mul_small(list(a), b[0])
    if len(a) == 1:
        return mul_small(list(b), a[0])

    size_b = len(b)
    result = [0] * (len(a) + size_b)

    for i, digit_a in enumerate(a):
        if digit_a == 0:
            continue
        carry = 0
        for j, digit_b in enumerate(b):
            carry, result[i + j] = divmod(result[i + j] + digit_a * digit_b + carry, RADIX)
        # Позиция i + size_b ещё не записана предыдущими строками
        result[i + size_b] = carry

    return normalize(result)


# =============================================================================
# SPECTRAL
# =============================================================================


def _split_digits(digits: Sequence[int]) -> list[int]:
    """Разбиение цифр RADIX на под-цифры SPLIT_RADIX (младшая первой)."""
    parts: list[int] = []
    for digit in digits:
        parts.append(digit % SPLIT_RADIX)
        parts.append(digit // SPLIT_RADIX % SPLIT_RADIX)
        parts.append(digit // (SPLIT_RADIX * SPLIT_RADIX))
    return parts


def transform_length(longest: int) -> int:
    """
    Длина преобразования для свёртки.

    Минимальная степень двойки >= longest, удвоенная.

    Examples:
        >>> transform_length(3)
        8
        >>> transform_length(4)
        8
    """
    size = 1
    while size < longest:
        size *= 2
    return size * 2


def spectral_multiply(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Умножение через быстрое преобразование Фурье.

    Алгоритм:
    1. Разбиение цифр на под-цифры по основанию 1000
    2. Дополнение нулями до transform_length
    3. rfft обоих векторов, поэлементное произведение, irfft
    4. Округление коэффициентов и переносы по основанию 1000
    5. Сборка каждых трёх под-цифр обратно в одну цифру RADIX

    Args:
        a: Нормализованный вектор цифр
        b: Нормализованный вектор цифр

    Returns:
        Новый нормализованный вектор a * b

    Raises:
        InvariantViolation: если ошибка округления превысила допустимую
            (отрицательный коэффициент свёртки)
    """
    if len(b) == 1:
        return mul_small(list(a), b[0])
    if len(a) == 1:
        return mul_small(list(b), a[0])

    parts_a = np.asarray(_split_digits(a), dtype=np.float64)
    parts_b = np.asarray(_split_digits(b), dtype=np.float64)
    size = transform_length(max(len(parts_a), len(parts_b)))
    logger.debug("spectral multiply: %d x %d digits, transform length %d", len(a), len(b), size)

    spectrum = np.fft.rfft(parts_a, size) * np.fft.rfft(parts_b, size)
    coefficients: list[int] = np.rint(np.fft.irfft(spectrum, size)).astype(np.int64).tolist()

    carry = 0
    for position, value in enumerate(coefficients):
        total = value + carry
        if total < 0:
            raise InvariantViolation(
                f"spectral rounding error: negative coefficient {total} at {position}"
            )
        carry, coefficients[position] = divmod(total, SPLIT_RADIX)

    while carry:
        carry, low = divmod(carry, SPLIT_RADIX)
        coefficients.append(low)

    # Дополнение до кратного SPLIT_PARTS
    coefficients.extend([0] * (-len(coefficients) % SPLIT_PARTS))

    result = [
        coefficients[i] + SPLIT_RADIX * (coefficients[i + 1] + SPLIT_RADIX * coefficients[i + 2])
        for i in range(0, len(coefficients), SPLIT_PARTS)
    ]
    return normalize(result)


# =============================================================================
# SELECTOR
# =============================================================================


_MULTIPLIERS: Final[dict[MultiplierKind, Callable[[Sequence[int], Sequence[int]], list[int]]]] = {
    MultiplierKind.SCHOOLBOOK: schoolbook_multiply,
    MultiplierKind.SPECTRAL: spectral_multiply,
}


def estimate_costs(
    len_a: int,
    len_b: int,
    config: MultiplierConfig = DEFAULT_MULTIPLIER_CONFIG,
) -> tuple[int, int]:
    """
    Оценка стоимости обоих алгоритмов по длинам операндов.

    Args:
        len_a: Количество цифр первого операнда
        len_b: Количество цифр второго операнда
        config: Конфигурация селектора

    Returns:
        (schoolbook_cost, spectral_cost)

    Examples:
        >>> estimate_costs(2, 2)
        (4, 192)
    """
    size = transform_length(SPLIT_PARTS * max(len_a, len_b))
    # size является степенью двойки, log2 точный
    log_size = size.bit_length() - 1
    return len_a * len_b, config.spectral_cost_factor * size * log_size


def select_multiplier(
    len_a: int,
    len_b: int,
    config: MultiplierConfig = DEFAULT_MULTIPLIER_CONFIG,
) -> MultiplierKind:
    """
    Выбор алгоритма умножения по длинам операндов.

    Args:
        len_a: Количество цифр первого операнда
        len_b: Количество цифр второго операнда
        config: Конфигурация селектора

    Returns:
        MultiplierKind.SPECTRAL если schoolbook_cost >= crossover_factor * spectral_cost,
        иначе MultiplierKind.SCHOOLBOOK
    """
    schoolbook_cost, spectral_cost = estimate_costs(len_a, len_b, config)
    if schoolbook_cost >= config.crossover_factor * spectral_cost:
        kind = MultiplierKind.SPECTRAL
    else:
        kind = MultiplierKind.SCHOOLBOOK

    logger.debug(
        "multiply: %d x %d digits, costs schoolbook=%d spectral=%d -> %s",
        len_a, len_b, schoolbook_cost, spectral_cost, kind.value,
    )
    return kind


def multiply_with(
    a: Sequence[int],
    b: Sequence[int],
    kind: MultiplierKind,
) -> list[int]:
    """Умножение заданным алгоритмом (без селектора)."""
    return _MULTIPLIERS[MultiplierKind(kind)](a, b)


def multiply(
    a: Sequence[int],
    b: Sequence[int],
    config: MultiplierConfig | None = None,
) -> list[int]:
    """
    Комбинированное умножение.

    Однозначный операнд → скалярный путь; иначе алгоритм выбирается
    select_multiplier.

    Args:
        a: Нормализованный вектор цифр
        b: Нормализованный вектор цифр
        config: Конфигурация селектора (default: DEFAULT_MULTIPLIER_CONFIG)

    Returns:
        Новый нормализованный вектор a * b
    """
    if len(b) == 1:
        return mul_small(list(a), b[0])
    if len(a) == 1:
        return mul_small(list(b), a[0])

    config = config or DEFAULT_MULTIPLIER_CONFIG
    kind = select_multiplier(len(a), len(b), config)
    return _MULTIPLIERS[kind](a, b)
