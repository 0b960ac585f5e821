"""
Domain models and value objects.

Contains the UInt value type and the number-theoretic module functions.
"""

from biguint.core.domain.uint import UInt, gcd, power

__all__ = [
    # Value type
    "UInt",
    # Functions
    "gcd",
    "power",
]
