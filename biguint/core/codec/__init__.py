"""
Text codec: десятичный разбор и форматирование, потоковые адаптеры.
"""

from biguint.core.codec.text_codec import (
    ParseError,
    format_decimal,
    parse_decimal,
    read_uint_token,
    write_decimal,
)

__all__ = [
    "ParseError",
    "format_decimal",
    "parse_decimal",
    "read_uint_token",
    "write_decimal",
]
