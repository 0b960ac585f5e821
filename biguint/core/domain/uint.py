"""
UInt — Беззнаковое целое произвольной точности

Value type поверх вектора цифр по основанию RADIX. Каждый экземпляр
единолично владеет своим списком цифр:
- чистые операторы (+, -, *, //, %, **) возвращают новый UInt
- составные операторы (+=, -=, *=, //=, %=) изменяют список цифр на месте
  и возвращают тот же объект

Операнды: UInt или неотрицательный native int любой величины. Скаляр
< RADIX идёт через короткие (линейные) пути, больший — эскалируется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. digits всегда нормализован (см. digit_store)
2. Отрицательный операнд, underflow, деление на ноль → InvariantViolation
3. Некорректный текст → ParseError (восстанавливаемая ошибка)
"""

from typing import Any, Dict, Sequence

from biguint.core.codec.text_codec import format_decimal, parse_decimal
from biguint.core.contracts.validators import validate_uint_digits
from biguint.core.math.additive import add_digits, add_small, sub_digits, sub_small
from biguint.core.math.comparator import compare_digits
from biguint.core.math.digit_store import (
    RADIX,
    copy_digits,
    digits_from_int,
    digits_to_int,
    is_zero,
    normalize,
)
from biguint.core.math.division import divmod_digits, divmod_small, mod_small
from biguint.core.math.multiplication import (
    MultiplierConfig,
    MultiplierKind,
    mul_small,
    multiply,
    multiply_with,
)
from biguint.core.math.number_theory import gcd_digits, power_digits


def _is_native_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class UInt:
    """
    Беззнаковое целое произвольной точности.

    Attributes:
        digits: Нормализованный вектор цифр (младшая первой)

    Examples:
        >>> UInt("999999999") + 1 == UInt("1000000000")
        True
        >>> UInt(123456789) * 987654321
        UInt('121932631112635269')
        >>> divmod(UInt(10**20), 7)
        (UInt('14285714285714285714'), UInt('2'))
    """

    __slots__ = ("digits",)

    def __init__(self, value: "int | str | Sequence[int] | UInt" = 0):
        """
        Построение из int, десятичной строки, вектора цифр или другого UInt.

        Raises:
            InvariantViolation: отрицательный int или цифра вне [0, RADIX)
            ParseError: некорректная десятичная строка
            TypeError: неподдерживаемый тип
        """
        if isinstance(value, UInt):
            self.digits = copy_digits(value.digits)
        elif isinstance(value, str):
            self.digits = parse_decimal(value)
        elif _is_native_int(value):
            self.digits = digits_from_int(value)
        elif isinstance(value, (list, tuple)):
            self.digits = normalize(list(value))
        else:
            raise TypeError(f"cannot build UInt from {type(value).__name__}")

    # =========================================================================
    # CONSTRUCTORS
    # =========================================================================

    @classmethod
    def _wrap(cls, digits: list[int]) -> "UInt":
        # digits уже нормализован и не разделяется с другим UInt
        number = cls.__new__(cls)
        number.digits = digits
        return number

    @classmethod
    def from_int(cls, value: int) -> "UInt":
        return cls._wrap(digits_from_int(value))

    @classmethod
    def from_str(cls, text: str) -> "UInt":
        return cls._wrap(parse_decimal(text))

    @classmethod
    def from_digits(cls, digits: Sequence[int]) -> "UInt":
        """Построение из сырого вектора цифр (младшая первой), с копированием."""
        return cls._wrap(normalize(list(digits)))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UInt":
        """
        Построение из контракта uint_digits.

        Raises:
            jsonschema.ValidationError: если data не соответствует схеме
        """
        validate_uint_digits(data)
        return cls._wrap(normalize([int(digit) for digit in data["digits"]]))

    def to_dict(self) -> Dict[str, Any]:
        """Сырой вектор цифр в форме контракта uint_digits."""
        return {"radix": RADIX, "digits": copy_digits(self.digits)}

    def copy(self) -> "UInt":
        return UInt._wrap(copy_digits(self.digits))

    # =========================================================================
    # PROPERTIES & CONVERSIONS
    # =========================================================================

    @property
    def digit_count(self) -> int:
        """Количество цифр по основанию RADIX."""
        return len(self.digits)

    def is_zero(self) -> bool:
        return is_zero(self.digits)

    def __int__(self) -> int:
        return digits_to_int(self.digits)

    def __bool__(self) -> bool:
        return not is_zero(self.digits)

    def __str__(self) -> str:
        return format_decimal(self.digits)

    def __repr__(self) -> str:
        return f"UInt('{format_decimal(self.digits)}')"

    def __hash__(self) -> int:
        # Согласовано с равенством UInt(n) == n
        return hash(digits_to_int(self.digits))

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def _compare(self, other: Any) -> Any:
        if isinstance(other, UInt):
            return compare_digits(self.digits, other.digits)
        if _is_native_int(other):
            if other < 0:
                return 1
            return compare_digits(self.digits, digits_from_int(other))
        return NotImplemented

    def __eq__(self, other: Any) -> bool:
        result = self._compare(other)
        return result if result is NotImplemented else result == 0

    def __ne__(self, other: Any) -> bool:
        result = self._compare(other)
        return result if result is NotImplemented else result != 0

    def __lt__(self, other: Any) -> bool:
        result = self._compare(other)
        return result if result is NotImplemented else result < 0

    def __le__(self, other: Any) -> bool:
        result = self._compare(other)
        return result if result is NotImplemented else result <= 0

    def __gt__(self, other: Any) -> bool:
        result = self._compare(other)
        return result if result is NotImplemented else result > 0

    def __ge__(self, other: Any) -> bool:
        result = self._compare(other)
        return result if result is NotImplemented else result >= 0

    # =========================================================================
    # ADDITIVE
    # =========================================================================

    def __add__(self, other: Any) -> "UInt":
        if isinstance(other, UInt):
            return UInt._wrap(add_digits(copy_digits(self.digits), other.digits))
        if _is_native_int(other):
            return UInt._wrap(add_small(copy_digits(self.digits), other))
        return NotImplemented

    __radd__ = __add__

    def __iadd__(self, other: Any) -> "UInt":
        if isinstance(other, UInt):
            add_digits(self.digits, other.digits)
        elif _is_native_int(other):
            add_small(self.digits, other)
        else:
            return NotImplemented
        return self

    def __sub__(self, other: Any) -> "UInt":
        if isinstance(other, UInt):
            return UInt._wrap(sub_digits(copy_digits(self.digits), other.digits))
        if _is_native_int(other):
            return UInt._wrap(sub_small(copy_digits(self.digits), other))
        return NotImplemented

    def __rsub__(self, other: Any) -> "UInt":
        if _is_native_int(other):
            return UInt._wrap(sub_digits(digits_from_int(other), self.digits))
        return NotImplemented

    def __isub__(self, other: Any) -> "UInt":
        if isinstance(other, UInt):
            sub_digits(self.digits, other.digits)
        elif _is_native_int(other):
            sub_small(self.digits, other)
        else:
            return NotImplemented
        return self

    # =========================================================================
    # MULTIPLICATIVE
    # =========================================================================

    def __mul__(self, other: Any) -> "UInt":
        if isinstance(other, UInt):
            return UInt._wrap(multiply(self.digits, other.digits))
        if _is_native_int(other):
            return UInt._wrap(mul_small(copy_digits(self.digits), other))
        return NotImplemented

    __rmul__ = __mul__

    def __imul__(self, other: Any) -> "UInt":
        if isinstance(other, UInt):
            self.digits[:] = multiply(self.digits, other.digits)
        elif _is_native_int(other):
            mul_small(self.digits, other)
        else:
            return NotImplemented
        return self

    def multiply_with(self, other: "UInt | int", kind: MultiplierKind) -> "UInt":
        """Произведение заданным алгоритмом, минуя селектор."""
        return UInt._wrap(multiply_with(self.digits, _as_uint(other).digits, kind))

    # =========================================================================
    # DIVISION
    # =========================================================================

    def divmod(self, other: "UInt | int") -> "tuple[UInt, UInt]":
        """
        Частное и остаток за один проход.

        Raises:
            InvariantViolation: деление на ноль или отрицательный делитель
        """
        if _is_native_int(other) and 0 < other < RADIX:
            quotient = copy_digits(self.digits)
            remainder = divmod_small(quotient, other)
            return UInt._wrap(quotient), UInt.from_int(remainder)
        quotient, remainder = divmod_digits(self.digits, _as_uint(other).digits)
        return UInt._wrap(quotient), UInt._wrap(remainder)

    def mod_small(self, num: int) -> int:
        """Остаток от деления на положительный native int."""
        return mod_small(self.digits, num)

    def __divmod__(self, other: Any) -> "tuple[UInt, UInt]":
        if not isinstance(other, UInt) and not _is_native_int(other):
            return NotImplemented
        return self.divmod(other)

    def __rdivmod__(self, other: Any) -> "tuple[UInt, UInt]":
        if not _is_native_int(other):
            return NotImplemented
        return UInt.from_int(other).divmod(self)

    def __floordiv__(self, other: Any) -> "UInt":
        if _is_native_int(other) and 0 < other < RADIX:
            quotient = copy_digits(self.digits)
            divmod_small(quotient, other)
            return UInt._wrap(quotient)
        if not isinstance(other, UInt) and not _is_native_int(other):
            return NotImplemented
        return self.divmod(other)[0]

    def __rfloordiv__(self, other: Any) -> "UInt":
        if not _is_native_int(other):
            return NotImplemented
        return UInt.from_int(other).divmod(self)[0]

    def __ifloordiv__(self, other: Any) -> "UInt":
        if _is_native_int(other) and 0 < other < RADIX:
            divmod_small(self.digits, other)
            return self
        if not isinstance(other, UInt) and not _is_native_int(other):
            return NotImplemented
        self.digits[:] = self.divmod(other)[0].digits
        return self

    # Дробных значений нет: "/" означает целочисленное деление
    __truediv__ = __floordiv__
    __rtruediv__ = __rfloordiv__
    __itruediv__ = __ifloordiv__

    def __mod__(self, other: Any) -> "UInt":
        if _is_native_int(other):
            return UInt.from_int(mod_small(self.digits, other))
        if not isinstance(other, UInt):
            return NotImplemented
        return self.divmod(other)[1]

    def __rmod__(self, other: Any) -> "UInt":
        if not _is_native_int(other):
            return NotImplemented
        return UInt.from_int(other).divmod(self)[1]

    def __imod__(self, other: Any) -> "UInt":
        if _is_native_int(other):
            self.digits[:] = digits_from_int(mod_small(self.digits, other))
            return self
        if not isinstance(other, UInt):
            return NotImplemented
        self.digits[:] = self.divmod(other)[1].digits
        return self

    # =========================================================================
    # EXPONENTIATION
    # =========================================================================

    def __pow__(self, exponent: Any, modulo: Any = None) -> "UInt":
        """
        a ** n и pow(a, n, m).

        Трёхаргументная форма возвращает полностью редуцированный остаток
        (power(a, n, m) % m), как принято для pow().
        """
        if not _is_native_int(exponent):
            return NotImplemented
        if modulo is None:
            return power(self, exponent)
        if not isinstance(modulo, UInt) and not _is_native_int(modulo):
            return NotImplemented
        return power(self, exponent, modulo) % _as_uint(modulo)


# =============================================================================
# MODULE FUNCTIONS
# =============================================================================


def _as_uint(value: "UInt | int") -> UInt:
    if isinstance(value, UInt):
        return value
    if _is_native_int(value):
        return UInt.from_int(value)
    raise TypeError(f"expected UInt or int, got {type(value).__name__}")


def power(
    base: "UInt | int",
    exponent: int,
    modulus: "UInt | int | None" = None,
    config: MultiplierConfig | None = None,
) -> UInt:
    """
    Бинарное возведение в степень.

    С модулем база редуцируется после каждого возведения в квадрат,
    аккумулятор — нет: результат сравним с base ** exponent по модулю,
    но может быть >= modulus.

    Args:
        base: Основание
        exponent: Неотрицательный native int
        modulus: Положительный модуль или None
        config: Конфигурация селектора умножения

    Returns:
        Новый UInt

    Raises:
        InvariantViolation: exponent < 0 или modulus == 0

    Examples:
        >>> power(2, 100)
        UInt('1267650600228229401496703205376')
        >>> power(3, 5, 7) % 7
        UInt('5')
    """
    modulus_digits = None if modulus is None else _as_uint(modulus).digits
    return UInt._wrap(power_digits(_as_uint(base).digits, exponent, modulus_digits, config))


def gcd(a: "UInt | int", b: "UInt | int") -> UInt:
    """
    Наибольший общий делитель (алгоритм Евклида).

    Examples:
        >>> gcd(48, 18)
        UInt('6')
    """
    return UInt._wrap(gcd_digits(_as_uint(a).digits, _as_uint(b).digits))
