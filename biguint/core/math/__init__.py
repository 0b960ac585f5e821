"""
Core math modules для biguint

Арифметика над векторами цифр по основанию RADIX (младшая цифра первой).
Каждый модуль работает с list[int] и сохраняет инварианты нормализации.
"""

# Digit Store
from biguint.core.math.digit_store import (
    RADIX,
    WIDTH,
    InvariantViolation,
    copy_digits,
    digits_from_int,
    digits_to_int,
    is_zero,
    normalize,
)

# Comparator
from biguint.core.math.comparator import compare_digits

# Additive Operators
from biguint.core.math.additive import (
    add_digits,
    add_small,
    sub_digits,
    sub_small,
)

# Multiplier
from biguint.core.math.multiplication import (
    DEFAULT_CROSSOVER_FACTOR,
    DEFAULT_MULTIPLIER_CONFIG,
    DEFAULT_SPECTRAL_COST_FACTOR,
    SPLIT_RADIX,
    MultiplierConfig,
    MultiplierKind,
    estimate_costs,
    mul_small,
    multiply,
    multiply_with,
    schoolbook_multiply,
    select_multiplier,
    spectral_multiply,
    transform_length,
)

# Divider
from biguint.core.math.division import (
    divmod_digits,
    divmod_small,
    floordiv_digits,
    mod_digits,
    mod_small,
)

# Number Theory
from biguint.core.math.number_theory import gcd_digits, power_digits

__all__ = [
    # Digit Store — Constants
    "RADIX",
    "WIDTH",
    # Digit Store — Exceptions
    "InvariantViolation",
    # Digit Store — Functions
    "copy_digits",
    "digits_from_int",
    "digits_to_int",
    "is_zero",
    "normalize",
    # Comparator
    "compare_digits",
    # Additive Operators
    "add_digits",
    "add_small",
    "sub_digits",
    "sub_small",
    # Multiplier — Constants
    "DEFAULT_CROSSOVER_FACTOR",
    "DEFAULT_MULTIPLIER_CONFIG",
    "DEFAULT_SPECTRAL_COST_FACTOR",
    "SPLIT_RADIX",
    # Multiplier — Types
    "MultiplierConfig",
    "MultiplierKind",
    # Multiplier — Functions
    "estimate_costs",
    "mul_small",
    "multiply",
    "multiply_with",
    "schoolbook_multiply",
    "select_multiplier",
    "spectral_multiply",
    "transform_length",
    # Divider
    "divmod_digits",
    "divmod_small",
    "floordiv_digits",
    "mod_digits",
    "mod_small",
    # Number Theory
    "gcd_digits",
    "power_digits",
]
