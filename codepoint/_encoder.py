# Copyright (c) 2025, The codepoint authors; All Rights Reserved
# codepoint is published under the PSF license.
"""
Encode a textual Unicode codepoint (`U+XXXX` or `\\UXXXXXXXX`) as UTF-8.

See: https://en.wikipedia.org/wiki/UTF-8#Encoding
"""
import sys
from string import hexdigits

CODEPOINT_VERSION = "1.0.0"

__all__ = ['convert', 'parse', 'width_class',
           'CodepointError', 'InvalidCodepoint', 'InvalidWidth',
           'NumericParseFailure']


class CodepointError(ValueError):
    "Base class for all errors raised while converting a codepoint."


class InvalidCodepoint(CodepointError):
    "The codepoint does not start with 'U+' or '\\U'."


class InvalidWidth(CodepointError):
    "The value does not fall into any of the four UTF-8 width classes."


class NumericParseFailure(CodepointError):
    "The digits following the prefix are not a valid hexadecimal number."


PREFIXES = ('U+', '\\U')

# (lowest, highest) value of each width class, ascending
_bands = ((0x000000, 0x00007f),
          (0x000080, 0x0007ff),
          (0x000800, 0x00ffff),
          (0x010000, 0x10ffff))

# start marker bytes for each width class, most significant byte first
_markers = {
    1: (0b00000000,),
    2: (0b11000000, 0b10000000),
    3: (0b11100000, 0b10000000, 0b10000000),
    4: (0b11110000, 0b10000000, 0b10000000, 0b10000000),
}

# number of value bits carried by each marker byte
_payload_bits = {
    0b00000000: 7,
    0b10000000: 6,
    0b11000000: 5,
    0b11100000: 4,
    0b11110000: 3,
}

# total number of value bits for each width class
_bit_budget = {1: 7, 2: 11, 3: 16, 4: 21}

_hexdigits = frozenset(hexdigits)


def _check_str(__cpoint):
    if not isinstance(__cpoint, str):
        raise TypeError("str expected, got '%s'" % type(__cpoint).__name__)


def parse(__cpoint):
    """parse(cpoint, /) -> int

Return the scalar value of the codepoint designator `cpoint`, which has
to start with `U+` or `\\U` followed by hexadecimal digits (in either case).
Raises `InvalidCodepoint` for an unknown prefix, and `NumericParseFailure`
when the digits are empty, not hexadecimal, or the value does not fit
into a native signed integer.
"""
    _check_str(__cpoint)
    if __cpoint[:2] not in PREFIXES:
        raise InvalidCodepoint("codepoint must start with 'U+' or '\\U', "
                               "got %r" % __cpoint)

    digits = __cpoint[2:]
    try:
        # int() alone would also accept signs, whitespace and underscores
        if not _hexdigits.issuperset(digits):
            raise ValueError("invalid literal for int() with base 16: %r" %
                             digits)
        value = int(digits, 16)
    except ValueError as e:
        raise NumericParseFailure(str(e)) from e

    if value > sys.maxsize:
        raise NumericParseFailure("value out of range: %r" % digits)
    return value


def width_class(__value):
    """width_class(value, /) -> int

Return the number of bytes (1, 2, 3 or 4) needed to encode the scalar
`value` in UTF-8.  Raises `InvalidWidth` when the value is negative
or larger than 0x10FFFF.
"""
    if not isinstance(__value, int):
        raise TypeError("int expected, got '%s'" % type(__value).__name__)

    for width, (lo, hi) in enumerate(_bands, 1):
        if lo <= __value <= hi:
            return width

    raise InvalidWidth("value not in range(0, 0x110000), got %s" %
                       hex(__value))


def _pack(value, width):
    try:
        shift = _bit_budget[width]
    except KeyError:
        raise InvalidWidth("no bit budget for width %r" % width) from None

    res = bytearray()
    for marker in _markers[width]:
        n = _payload_bits[marker]
        shift -= n
        # the marker bits and the n value bits never overlap
        res.append(marker | value >> shift & ((1 << n) - 1))
    return bytes(res)


def convert(__cpoint):
    """convert(cpoint, /) -> bytes

Convert the codepoint designator `cpoint` (in the form `U+XXXX` or
`\\UXXXXXXXX`) to its UTF-8 encoding.  The returned bytes object
has length 1 to 4, with the most significant byte first.
Surrogates (U+D800 to U+DFFF) are not rejected, but encoded like any
other 3-byte value.
"""
    value = parse(__cpoint)
    return _pack(value, width_class(value))
