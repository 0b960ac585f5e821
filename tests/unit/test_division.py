"""
Тесты для Divider — короткое и нормализованное длинное деление

Проверяемые инварианты:
1. q * b + r == a, 0 <= r < b
2. Короткий путь и длинный путь согласованы
3. Деление на ноль → InvariantViolation
4. Коррекция оценки цифры частного (делители с малой старшей цифрой)
"""

import random

import pytest

from biguint.core.math.digit_store import (
    RADIX,
    InvariantViolation,
    digits_from_int,
    digits_to_int,
)
from biguint.core.math.division import (
    divmod_digits,
    divmod_small,
    floordiv_digits,
    mod_digits,
    mod_small,
)


@pytest.fixture
def rng():
    return random.Random(4242)


def check_divmod(a: int, b: int) -> None:
    quotient, remainder = divmod_digits(digits_from_int(a), digits_from_int(b))
    assert (digits_to_int(quotient), digits_to_int(remainder)) == divmod(a, b)
    # Результат нормализован
    assert quotient == digits_from_int(a // b)
    assert remainder == digits_from_int(a % b)


# =============================================================================
# ТЕСТЫ: короткий делитель
# =============================================================================


class TestDivmodSmall:
    """Тесты divmod_small / mod_small."""

    def test_concrete_scenario(self):
        """10^20 / 7 = 14285714285714285714, остаток 2."""
        digits = digits_from_int(10 ** 20)
        remainder = divmod_small(digits, 7)
        assert digits_to_int(digits) == 14285714285714285714
        assert remainder == 2

    def test_quotient_is_normalized(self):
        digits = [0, 1]
        assert divmod_small(digits, 2) == 0
        assert digits == [500_000_000]

    def test_large_divisor_escalates(self):
        a = 10 ** 40 + 12345
        b = 3 * RADIX + 1
        digits = digits_from_int(a)
        remainder = divmod_small(digits, b)
        assert (digits_to_int(digits), remainder) == divmod(a, b)

    def test_zero_divisor_rejected(self):
        with pytest.raises(InvariantViolation, match="positive"):
            divmod_small([5], 0)

    def test_negative_divisor_rejected(self):
        with pytest.raises(InvariantViolation, match="positive"):
            divmod_small([5], -3)

    def test_mod_small_leaves_digits_intact(self):
        digits = digits_from_int(10 ** 30 + 11)
        assert mod_small(digits, 13) == (10 ** 30 + 11) % 13
        assert digits == digits_from_int(10 ** 30 + 11)

    def test_mod_small_any_magnitude(self):
        a = 7 ** 80
        b = 10 ** 25 + 9
        assert mod_small(digits_from_int(a), b) == a % b

    def test_mod_small_zero_rejected(self):
        with pytest.raises(InvariantViolation):
            mod_small([5], 0)


# =============================================================================
# ТЕСТЫ: длинный делитель
# =============================================================================


class TestDivmodDigits:
    """Тесты нормализованного длинного деления."""

    def test_division_by_zero(self):
        with pytest.raises(InvariantViolation, match="division by zero"):
            divmod_digits([1, 2], [0])

    def test_dividend_smaller_than_divisor(self):
        assert divmod_digits([5, 1], [0, 2]) == ([0], [5, 1])

    def test_equal_operands(self):
        assert divmod_digits([7, 8, 9], [7, 8, 9]) == ([1], [0])

    def test_zero_dividend(self):
        assert divmod_digits([0], [1, 1]) == ([0], [0])

    def test_exact_division(self):
        b = 123_456_789_012_345_678_901
        check_divmod(b * (10 ** 50 + 3), b)

    def test_small_leading_divisor_digit(self):
        """Старшая цифра делителя 1: максимальный множитель нормализации."""
        check_divmod(10 ** 60 - 1, RADIX + 1)
        check_divmod(RADIX ** 5 - 1, RADIX ** 2)

    def test_large_leading_divisor_digit(self):
        """Старшая цифра делителя RADIX - 1: norm == 1."""
        check_divmod(RADIX ** 6 - 1, RADIX ** 2 - 1)

    def test_estimate_correction_cases(self):
        """Делимые вида b * q + (b - 1) с q из максимальных цифр."""
        b = (RADIX // 2) * RADIX + 1
        for q in [RADIX - 1, RADIX ** 2 - 1, RADIX ** 3 - 2]:
            check_divmod(b * q + b - 1, b)

    def test_random_identity(self, rng):
        """q * b + r == a и r < b."""
        for _ in range(150):
            a = rng.randrange(RADIX ** rng.randint(1, 10))
            b = rng.randrange(1, RADIX ** rng.randint(1, 6))
            check_divmod(a, b)

    def test_operands_not_mutated(self):
        a, b = [1, 2, 3], [4, 5]
        divmod_digits(a, b)
        assert a == [1, 2, 3] and b == [4, 5]

    def test_wrappers(self):
        a = digits_from_int(10 ** 30 + 7)
        b = digits_from_int(10 ** 12 + 3)
        assert digits_to_int(floordiv_digits(a, b)) == (10 ** 30 + 7) // (10 ** 12 + 3)
        assert digits_to_int(mod_digits(a, b)) == (10 ** 30 + 7) % (10 ** 12 + 3)
