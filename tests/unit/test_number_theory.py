"""
Тесты для Number Theory — power_digits и gcd_digits

Проверяемые инварианты:
1. Без модуля power_digits == base ** exponent
2. С модулем результат сравним с base ** exponent по модулю, редуцируется
   только база (аккумулятор — нет)
3. power(a, n, m) mod m == power(a mod m, n, m) mod m
4. gcd(a, 0) == a; gcd делит оба операнда; gcd(a, b) == gcd(b, a mod b)
"""

import math
import random

import pytest

from biguint.core.math.digit_store import (
    InvariantViolation,
    digits_from_int,
    digits_to_int,
)
from biguint.core.math.division import mod_digits
from biguint.core.math.number_theory import gcd_digits, power_digits


@pytest.fixture
def rng():
    return random.Random(1234)


# =============================================================================
# ТЕСТЫ: power_digits
# =============================================================================


class TestPowerDigits:
    """Тесты бинарного возведения в степень."""

    def test_zero_exponent(self):
        assert power_digits([7], 0) == [1]
        assert power_digits([0], 0) == [1]

    def test_plain_power(self):
        assert digits_to_int(power_digits([2], 100)) == 2 ** 100
        assert digits_to_int(power_digits(digits_from_int(10 ** 12 + 1), 7)) == (10 ** 12 + 1) ** 7

    def test_zero_base(self):
        assert power_digits([0], 5) == [0]

    def test_modular_congruence(self, rng):
        for _ in range(40):
            base = rng.randrange(10 ** 30)
            exponent = rng.randrange(200)
            modulus = rng.randrange(1, 10 ** 20)
            result = power_digits(digits_from_int(base), exponent, digits_from_int(modulus))
            assert digits_to_int(result) % modulus == pow(base, exponent, modulus)

    def test_accumulator_not_reduced(self):
        """Редуцируется только база: первый множитель аккумулятора — исходная база."""
        # exponent = 1: аккумулятор = base, квадрат не вычисляется
        assert digits_to_int(power_digits([100], 1, [7])) == 100
        # exponent = 3: acc = 100 * (100^2 mod 7) = 100 * 4
        assert digits_to_int(power_digits([100], 3, [7])) == 400

    def test_reduction_placement_does_not_change_residue(self, rng):
        """power(a, n, m) mod m == power(a mod m, n, m) mod m."""
        for _ in range(30):
            a = digits_from_int(rng.randrange(10 ** 40))
            m = digits_from_int(rng.randrange(1, 10 ** 15))
            n = rng.randrange(1, 100)
            left = mod_digits(power_digits(a, n, m), m)
            right = mod_digits(power_digits(mod_digits(a, m), n, m), m)
            assert left == right

    def test_negative_exponent_rejected(self):
        with pytest.raises(InvariantViolation, match="non-negative"):
            power_digits([2], -1)

    def test_non_int_exponent_rejected(self):
        with pytest.raises(InvariantViolation, match="must be an int"):
            power_digits([2], 2.0)

    def test_zero_modulus_rejected(self):
        with pytest.raises(InvariantViolation, match="modulus"):
            power_digits([2], 3, [0])


# =============================================================================
# ТЕСТЫ: gcd_digits
# =============================================================================


class TestGcdDigits:
    """Тесты алгоритма Евклида."""

    def test_concrete(self):
        assert gcd_digits([48], [18]) == [6]

    def test_with_zero(self):
        a = digits_from_int(10 ** 20 + 3)
        assert gcd_digits(a, [0]) == a
        assert gcd_digits([0], a) == a
        assert gcd_digits([0], [0]) == [0]

    def test_coprime(self):
        assert gcd_digits(digits_from_int(2 ** 89 - 1), digits_from_int(2 ** 61 - 1)) == [1]

    def test_matches_math_gcd(self, rng):
        for _ in range(60):
            common = rng.randrange(1, 10 ** 12)
            a = common * rng.randrange(10 ** 25)
            b = common * rng.randrange(10 ** 18)
            assert digits_to_int(gcd_digits(digits_from_int(a), digits_from_int(b))) == math.gcd(a, b)

    def test_divides_both_and_recurrence(self, rng):
        for _ in range(30):
            a = digits_from_int(rng.randrange(1, 10 ** 30))
            b = digits_from_int(rng.randrange(1, 10 ** 20))
            g = gcd_digits(a, b)
            assert mod_digits(a, g) == [0]
            assert mod_digits(b, g) == [0]
            assert g == gcd_digits(b, mod_digits(a, b))

    def test_operands_not_mutated(self):
        a, b = [48], [18]
        gcd_digits(a, b)
        assert a == [48] and b == [18]
