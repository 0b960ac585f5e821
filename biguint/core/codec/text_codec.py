"""
Text Codec — Десятичное представление чисел

Parse: строка десятичных цифр → вектор цифр. Строка режется на группы
по WIDTH символов от младшего конца; старшая группа может быть короче.

Format: старшая цифра без дополнения, каждая следующая — с дополнением
нулями ровно до WIDTH символов.

Текст — единственная граница с недоверенным вводом, поэтому ошибки
разбора восстанавливаемы (ParseError), в отличие от арифметических
инвариантов.

Round-trip: format(parse(s)) == s без ведущих нулей.
"""

import re
from typing import Final, Sequence, TextIO

from biguint.core.math.digit_store import WIDTH, normalize

# Только ASCII-цифры: без знака, разделителей и пробелов
_DECIMAL_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9]+")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ParseError(ValueError):
    """
    Некорректный десятичный текст.

    Attributes:
        text: Исходный текст, который не удалось разобрать
    """

    def __init__(self, message: str, text: str = ""):
        super().__init__(message)
        self.text = text


# =============================================================================
# PARSE / FORMAT
# =============================================================================


def parse_decimal(text: str) -> list[int]:
    """
    Разбор десятичной строки в вектор цифр.

    Args:
        text: Непустая строка из ASCII-цифр

    Returns:
        Нормализованный вектор цифр (ведущие нули отбрасываются)

    Raises:
        ParseError: если строка пуста или содержит не-цифры

    Examples:
        >>> parse_decimal("1000000000")
        [0, 1]
        >>> parse_decimal("000123")
        [123]
    """
    if not isinstance(text, str):
        raise ParseError(f"decimal text must be a str, got {type(text).__name__}")

    if not text:
        raise ParseError("decimal text must not be empty", text)

    if _DECIMAL_PATTERN.fullmatch(text) is None:
        raise ParseError(f"decimal text must contain only digits 0-9, got {text!r}", text)

    digits: list[int] = []
    for end in range(len(text), 0, -WIDTH):
        digits.append(int(text[max(0, end - WIDTH):end]))

    return normalize(digits)


def format_decimal(digits: Sequence[int]) -> str:
    """
    Форматирование вектора цифр в десятичную строку.

    Examples:
        >>> format_decimal([0, 1])
        '1000000000'
        >>> format_decimal([5, 0, 12])
        '12000000000000000005'
    """
    head = str(digits[-1])
    tail = "".join(f"{digits[i]:0{WIDTH}d}" for i in range(len(digits) - 2, -1, -1))
    return head + tail


# =============================================================================
# STREAM ADAPTERS
# =============================================================================


def read_uint_token(stream: TextIO) -> list[int]:
    """
    Чтение одного числа из текстового потока.

    Пропускает ведущие пробельные символы и читает токен до следующего
    пробельного символа или конца потока.

    Args:
        stream: Текстовый поток

    Returns:
        Нормализованный вектор цифр

    Raises:
        ParseError: если поток исчерпан или токен некорректен
    """
    char = stream.read(1)
    while char and char.isspace():
        char = stream.read(1)

    chars: list[str] = []
    while char and not char.isspace():
        chars.append(char)
        char = stream.read(1)

    if not chars:
        raise ParseError("unexpected end of stream while reading a number")

    return parse_decimal("".join(chars))


def write_decimal(stream: TextIO, digits: Sequence[int]) -> None:
    """Запись десятичного представления в текстовый поток."""
    stream.write(format_decimal(digits))
