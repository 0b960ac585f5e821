"""
biguint — arbitrary-precision unsigned integer arithmetic.

Decimal parsing and formatting, comparison, addition, subtraction,
adaptive schoolbook/spectral multiplication, normalized long division,
modular exponentiation and GCD.
"""

from biguint.core.codec import ParseError
from biguint.core.domain import UInt, gcd, power
from biguint.core.math import (
    RADIX,
    WIDTH,
    InvariantViolation,
    MultiplierConfig,
    MultiplierKind,
)

__all__ = [
    "RADIX",
    "WIDTH",
    "InvariantViolation",
    "MultiplierConfig",
    "MultiplierKind",
    "ParseError",
    "UInt",
    "gcd",
    "power",
]
