# Copyright (c) 2025, The codepoint authors; All Rights Reserved
# codepoint is published under the PSF license.
"""
Bit-level utilities for looking at the UTF-8 encoding of a codepoint.
All bitarrays returned here are big-endian, as UTF-8 bytes are written
most significant bit first.
"""
import sys

from bitarray import bitarray
from bitarray.util import int2ba, ba2hex

from codepoint._encoder import (
    convert, parse, width_class, _check_str,
    _markers, _payload_bits, _bit_budget,
)

__all__ = ['payload_bits', 'to_bitarray', 'layout', 'hexlify', 'pprint']


def payload_bits(__cpoint):
    """payload_bits(cpoint, /) -> bitarray

Return the scalar value of `cpoint` as bitarray, padded with leading zeros
to the number of value bits available in its width class (7, 11, 16 or 21).
These are the bits which get distributed over the encoded bytes.
"""
    value = parse(__cpoint)
    return int2ba(value, _bit_budget[width_class(value)], 'big')


def to_bitarray(__cpoint):
    """to_bitarray(cpoint, /) -> bitarray

Return the UTF-8 encoding of `cpoint` as (big-endian) bitarray.
"""
    return bitarray(convert(__cpoint), 'big')


def layout(__cpoint):
    """layout(cpoint, /) -> list

Return a list with one tuple `(marker, payload)` for each byte of the
UTF-8 encoding of `cpoint`.  `marker` is a bitarray with the fixed leading
bits of the byte (e.g. `110` for the first byte of a 2 byte sequence),
and `payload` a bitarray with the value bits carried by the byte.
Joining all payloads gives `payload_bits(cpoint)`.
"""
    a = to_bitarray(__cpoint)
    res = []
    for i, marker in enumerate(_markers[len(a) // 8]):
        start = 8 * i
        k = 8 - _payload_bits[marker]  # number of fixed bits
        res.append((a[start : start + k], a[start + k : start + 8]))
    return res


def hexlify(__cpoint, sep=' '):
    """hexlify(cpoint, /, sep=' ') -> str

Return the UTF-8 encoding of `cpoint` as lowercase hexadecimal string,
with the bytes separated by `sep`.
"""
    if not isinstance(sep, str):
        raise TypeError("str expected for sep, got '%s'" % type(sep).__name__)

    s = ba2hex(to_bitarray(__cpoint))
    return sep.join(s[i : i + 2] for i in range(0, len(s), 2))


def pprint(__cpoint, stream=None, group=8):
    """pprint(cpoint, /, stream=None, group=8)

Print the codepoint, its UTF-8 encoding in hexadecimal and the encoded bits
to `stream`, defaults is `sys.stdout`.  By default, bits are grouped
in bytes (8 bits).
"""
    _check_str(__cpoint)
    if stream is None:
        stream = sys.stdout

    group = int(group)
    if group < 1:
        raise ValueError('group must be >= 1')

    a = to_bitarray(__cpoint)
    bits = ' '.join(a[i : i + group].to01() for i in range(0, len(a), group))
    stream.write("%s  %s  %s\n" % (__cpoint, hexlify(__cpoint), bits))
    stream.flush()
