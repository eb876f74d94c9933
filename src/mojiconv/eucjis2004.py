"""
EUC-JIS-2004: the first plane of JIS X 0213 in G1 and the second plane
in G3.  This is also what ``EUC-JP`` resolves to.
"""

import typing

from . import sjis, sjis2004
from .euc import (
    SS2,
    SS3,
    append_g1,
    is_gr_byte,
    is_halfwidth_katakana,
    iter_codes_from_euc,
)
from .menkuten import (
    MenKuTen,
    to_men_ku_ten_from_sjis2004_code,
    to_sjis2004_code_from_men_ku_ten,
)
from .unicode import BinaryLike, from_code_points


def to_eucjis2004_binary(text: str) -> bytes:
    buf = bytearray()
    for code in sjis2004.to_sjis2004_array(text):
        if code < 0x80:
            buf.append(code)
        elif is_halfwidth_katakana(code):
            buf.append(SS2)
            buf.append(code)
        elif code < 0x100:
            buf.append(sjis.QUESTION_MARK)
        else:
            mkt = to_men_ku_ten_from_sjis2004_code(code)
            if mkt is None or mkt.ku > 94:
                buf.append(sjis.QUESTION_MARK)
                continue
            if mkt.men == 2:
                buf.append(SS3)
            append_g1(buf, mkt.ku, mkt.ten)
    return bytes(buf)


def _g1(x1: int, x2: int) -> typing.Optional[int]:
    return to_sjis2004_code_from_men_ku_ten(MenKuTen(1, x1 - 0xA0, x2 - 0xA0))


def _g3(x1: int, x2: int) -> typing.Optional[int]:
    if not (is_gr_byte(x1) and is_gr_byte(x2)):
        return None
    return to_sjis2004_code_from_men_ku_ten(MenKuTen(2, x1 - 0xA0, x2 - 0xA0))


def from_eucjis2004_binary(binary: BinaryLike) -> str:
    return from_code_points(
        sjis.iter_decoded(
            iter_codes_from_euc(binary, _g1, _g3), sjis2004.TABLE.decoding_map
        )
    )


def is_encodable(codepoint: int) -> bool:
    return (
        codepoint == sjis.QUESTION_MARK
        or to_eucjis2004_binary(chr(codepoint)) != b"?"
    )
