# Copyright (c) 2025, The codepoint authors; All Rights Reserved
"""
This package converts a Unicode codepoint, given as a string in the
form `U+XXXX` or `\\UXXXXXXXX`, to its UTF-8 encoding.

Bit-level utilities, which show how the value bits are distributed over
the encoded bytes, can be found in `codepoint.util`.
"""
from codepoint._encoder import (
    convert, parse, width_class,
    CodepointError, InvalidCodepoint, InvalidWidth, NumericParseFailure,
    CODEPOINT_VERSION as __version__
)

__all__ = ['convert', 'parse', 'width_class',
           'CodepointError', 'InvalidCodepoint', 'InvalidWidth',
           'NumericParseFailure']


def test(verbosity=1):
    """test(verbosity=1) -> TextTestResult

Run self-test, and return `unittest.runner.TextTestResult` object.
"""
    from codepoint import test_codepoint
    return test_codepoint.run(verbosity=verbosity)
