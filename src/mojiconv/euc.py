"""
EUC framing shared by eucJP-ms and EUC-JIS-2004.

G0 is ASCII, G1 is the first JIS plane as two bytes in 0xA1-0xFE, G2 is
half-width katakana after SS2 and G3 is a further 94x94 set after SS3.
"""

import typing

from .sjis import QUESTION_MARK
from .unicode import BinaryLike

SS2 = 0x8E
SS3 = 0x8F

CodeResolver = typing.Callable[[int, int], typing.Optional[int]]


def is_halfwidth_katakana(code: int) -> bool:
    return 0xA1 <= code <= 0xDF


def is_gr_byte(x: int) -> bool:
    return 0xA1 <= x <= 0xFE


def iter_codes_from_euc(
    binary: BinaryLike, g1: CodeResolver, g3: CodeResolver
) -> typing.Iterator[int]:
    """
    Turns EUC bytes into Shift_JIS-family codes.

    ``g1`` and ``g3`` map a byte pair to a code; ``g1`` is only called with
    bytes in 0xA1-0xFE.  Anything that cannot be resolved yields ``?``, and
    an incomplete trailing sequence ends the input.
    """
    n = len(binary)
    i = 0
    while i < n:
        x1 = binary[i]
        if x1 < 0x80:
            yield x1
            i += 1
            continue
        if i + 1 >= n:
            break
        if x1 == SS3:
            if i + 2 >= n:
                break
            code = g3(binary[i + 1], binary[i + 2])
            i += 3
        else:
            x2 = binary[i + 1]
            i += 2
            if x1 == SS2:
                code = x2 if is_halfwidth_katakana(x2) else None
            elif is_gr_byte(x1) and is_gr_byte(x2):
                code = g1(x1, x2)
            else:
                code = None
        yield QUESTION_MARK if code is None else code


def append_g1(buf: bytearray, ku: int, ten: int) -> None:
    buf.append(ku + 0xA0)
    buf.append(ten + 0xA0)
