# Commander CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value coercion for Commander argument parsing.

Converts the raw token following an option flag into the payload its declared
`OptionValueType` calls for. Numbers are signed 32-bit integers and floats are
rounded to 32-bit precision, so values read back from `Commander` are the ones
a C or Rust consumer of the same command line would see.

Functions:
- coerce_number: Parse a signed 32-bit integer.
- coerce_float: Parse a float and round it to 32-bit precision.
- coerce_value: Build an `ArgumentValue` of the requested type.
"""
import math
import re
import struct

from commander.argument import ArgumentValue
from commander.option_value_type import OptionValueType

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def coerce_number(value: str) -> int:
    """
    Convert a string to a signed 32-bit integer.

    Only an optional sign followed by decimal digits is accepted; whitespace,
    underscores and radix prefixes are rejected.

    Raises:
        ValueError: If the string is not an integer or is out of range.
    """
    if not _NUMBER_PATTERN.fullmatch(value):
        raise ValueError(f"'{value}' is not a valid integer")
    number = int(value)
    if not INT32_MIN <= number <= INT32_MAX:
        raise ValueError(f"'{value}' is out of range for a 32-bit integer")
    return number


def coerce_float(value: str) -> float:
    """
    Convert a string to a float with 32-bit precision.

    Accepts decimal and exponent notation plus `inf`, `infinity` and `nan`.
    Magnitudes beyond the 32-bit range become infinity.

    Raises:
        ValueError: If the string is not a float.
    """
    if not _FLOAT_PATTERN.fullmatch(value):
        raise ValueError(f"'{value}' is not a valid float")
    number = float(value)
    try:
        return struct.unpack("<f", struct.pack("<f", number))[0]
    except OverflowError:
        return math.copysign(math.inf, number)


def coerce_value(value: str, value_type: OptionValueType) -> ArgumentValue:
    """
    Coerce a raw token into an `ArgumentValue` of `value_type`.

    Raises:
        ValueError: If the token cannot be converted.
    """
    if value_type is OptionValueType.STRING:
        return ArgumentValue.from_string(value)
    elif value_type is OptionValueType.NUMBER:
        return ArgumentValue.from_number(coerce_number(value))
    elif value_type is OptionValueType.FLOAT:
        return ArgumentValue.from_float(coerce_float(value))
    return ArgumentValue.no_value()
