"""
eucJP-ms, the EUC form of Windows-31J.

G1 carries the JIS X 0208 rows of CP932 including the NEC special
characters.  The IBM extensions that JIS X 0212 lacks are placed in G3 rows
83 and 84, which is the only part that needs a table of its own.

No other JIS X 0212 code is produced.  IBM extension kanji outside those two
rows (for example U+7E8A) and the user-defined rows 95 to 114 encode to
``?``.
"""

import typing

from . import cp932, sjis
from .codepage import CodePageTable
from .euc import SS2, SS3, append_g1, is_halfwidth_katakana, iter_codes_from_euc
from .menkuten import MenKuTen, to_ku_ten_from_sjis_code, to_sjis_code_from_ku_ten
from .unicode import BinaryLike, from_code_points

# G3 code (without SS3) -> CP932 code
EUCJPMS_TO_CP932: typing.Mapping[int, int] = {
    0xF3F3: 0xFA40, 0xF3F4: 0xFA41, 0xF3F5: 0xFA42, 0xF3F6: 0xFA43, 0xF3F7: 0xFA44,
    0xF3F8: 0xFA45, 0xF3F9: 0xFA46, 0xF3FA: 0xFA47, 0xF3FB: 0xFA48, 0xF3FC: 0xFA49,
    0xF3FD: 0x8754, 0xF3FE: 0x8755, 0xF4A1: 0x8756, 0xF4A2: 0x8757, 0xF4A3: 0x8758,
    0xF4A4: 0x8759, 0xF4A5: 0x875A, 0xF4A6: 0x875B, 0xF4A7: 0x875C, 0xF4A8: 0x875D,
    0xF4A9: 0xFA56, 0xF4AA: 0xFA57, 0xF4AB: 0x878A, 0xF4AC: 0x8782, 0xF4AD: 0x8784,
    0xF4AE: 0xFA62, 0xF4AF: 0xFA6A, 0xF4B0: 0xFA7C, 0xF4B1: 0xFA83, 0xF4B2: 0xFA8A,
    0xF4B3: 0xFA8B, 0xF4B4: 0xFA90, 0xF4B5: 0xFA92, 0xF4B6: 0xFA96, 0xF4B7: 0xFA9B,
    0xF4B8: 0xFA9C, 0xF4B9: 0xFA9D, 0xF4BA: 0xFAAA, 0xF4BB: 0xFAAE, 0xF4BC: 0xFAB0,
    0xF4BD: 0xFAB1, 0xF4BE: 0xFABA, 0xF4BF: 0xFABD, 0xF4C0: 0xFAC1, 0xF4C1: 0xFACD,
    0xF4C2: 0xFAD0, 0xF4C3: 0xFAD5, 0xF4C4: 0xFAD8, 0xF4C5: 0xFAE0, 0xF4C6: 0xFAE5,
    0xF4C7: 0xFAE8, 0xF4C8: 0xFAEA, 0xF4C9: 0xFAEE, 0xF4CA: 0xFAF2, 0xF4CB: 0xFB43,
    0xF4CC: 0xFB44, 0xF4CD: 0xFB50, 0xF4CE: 0xFB58, 0xF4CF: 0xFB5E, 0xF4D0: 0xFB6E,
    0xF4D1: 0xFB70, 0xF4D2: 0xFB72, 0xF4D3: 0xFB75, 0xF4D4: 0xFB7C, 0xF4D5: 0xFB7D,
    0xF4D6: 0xFB7E, 0xF4D7: 0xFB80, 0xF4D8: 0xFB82, 0xF4D9: 0xFB85, 0xF4DA: 0xFB86,
    0xF4DB: 0xFB89, 0xF4DC: 0xFB8D, 0xF4DD: 0xFB8E, 0xF4DE: 0xFB92, 0xF4DF: 0xFB94,
    0xF4E0: 0xFB9D, 0xF4E1: 0xFB9E, 0xF4E2: 0xFB9F, 0xF4E3: 0xFBA0, 0xF4E4: 0xFBA1,
    0xF4E5: 0xFBA9, 0xF4E6: 0xFBAC, 0xF4E7: 0xFBAE, 0xF4E8: 0xFBB0, 0xF4E9: 0xFBB1,
    0xF4EA: 0xFBB3, 0xF4EB: 0xFBB4, 0xF4EC: 0xFBB6, 0xF4ED: 0xFBB7, 0xF4EE: 0xFBB8,
    0xF4EF: 0xFBD3, 0xF4F0: 0xFBDA, 0xF4F1: 0xFBE8, 0xF4F2: 0xFBE9, 0xF4F3: 0xFBEA,
    0xF4F4: 0xFBEE, 0xF4F5: 0xFBF0, 0xF4F6: 0xFBF2, 0xF4F7: 0xFBF6, 0xF4F8: 0xFBF7,
    0xF4F9: 0xFBF9, 0xF4FA: 0xFBFA, 0xF4FB: 0xFBFC, 0xF4FC: 0xFC42, 0xF4FD: 0xFC49,
    0xF4FE: 0xFC4B,
}

TABLE = CodePageTable("eucJP-ms G3", lambda: EUCJPMS_TO_CP932)


def to_eucjpms_binary(text: str) -> bytes:
    to_g3 = TABLE.encoding_map
    buf = bytearray()
    for code in cp932.to_cp932_array(text):
        if code < 0x80:
            buf.append(code)
        elif is_halfwidth_katakana(code):
            buf.append(SS2)
            buf.append(code)
        elif code < 0x100:
            buf.append(sjis.QUESTION_MARK)
        else:
            g3 = to_g3.get(code)
            if g3 is not None:
                buf.append(SS3)
                buf.append(g3 >> 8)
                buf.append(g3 & 0xFF)
                continue
            kuten = to_ku_ten_from_sjis_code(code)
            # the user defined area and the remaining IBM extensions lie
            # beyond row 94
            if kuten is not None and kuten.ku <= 94:
                append_g1(buf, kuten.ku, kuten.ten)
            else:
                buf.append(sjis.QUESTION_MARK)
    return bytes(buf)


def _g1(x1: int, x2: int) -> typing.Optional[int]:
    return to_sjis_code_from_ku_ten(MenKuTen(1, x1 - 0xA0, x2 - 0xA0))


def _g3(x1: int, x2: int) -> typing.Optional[int]:
    return TABLE.decoding_map.get((x1 << 8) | x2)


def from_eucjpms_binary(binary: BinaryLike) -> str:
    return from_code_points(
        sjis.iter_decoded(
            iter_codes_from_euc(binary, _g1, _g3), cp932.TABLE.decoding_map
        )
    )


def is_encodable(codepoint: int) -> bool:
    return codepoint == sjis.QUESTION_MARK or to_eucjpms_binary(chr(codepoint)) != b"?"
