"""
Windows-31J (CP932), Microsoft's variant of Shift_JIS including the NEC
special characters, the NEC-selected IBM extensions and the IBM extensions.
"""

import functools
import itertools
import typing

from . import _cp932_table, sjis
from .codepage import CodePageTable, load_packed_table
from .menkuten import JISKanjiLevel, MenKuTen, MenKuTenLike
from .unicode import BinaryLike, code_point_at, from_code_points

# Codes that decode to a character already reachable through another code.
# Encoding never yields them, as with WideCharToMultiByte.
CP932_DUPLICATES: typing.FrozenSet[int] = frozenset(
    itertools.chain(
        # NEC special characters shadowed by row 2
        (0x8790, 0x8791, 0x8792, 0x8795, 0x8796, 0x8797, 0x879A, 0x879B, 0x879C),
        # NEC-selected IBM extensions
        (c for c in range(0xED40, 0xEDFD) if c & 0xFF != 0x7F),
        (c for c in range(0xEE40, 0xEEED) if c & 0xFF != 0x7F),
        range(0xEEEF, 0xEEFD),
        # IBM extensions shadowed by the NEC special characters
        range(0xFA4A, 0xFA55),
        range(0xFA58, 0xFA5C),
    )
)

CP932_OVERRIDES: typing.Mapping[int, int] = {
    0x00A5: 0x5C,  # YEN SIGN
    0x301C: 0x8160,  # WAVE DASH
    0x2212: 0x817C,  # MINUS SIGN
}

TABLE = CodePageTable(
    "Windows-31J",
    functools.partial(load_packed_table, _cp932_table),
    duplicates=CP932_DUPLICATES,
    overrides=CP932_OVERRIDES,
)


def to_cp932_from_unicode(codepoint: int) -> typing.Optional[int]:
    return TABLE.encoding_map.get(codepoint)


def to_unicode_from_cp932(code: int) -> typing.Optional[int]:
    # CP932 has no multi-codepoint entries
    return typing.cast(typing.Optional[int], TABLE.decoding_map.get(code))


def to_cp932_array(text: str) -> typing.List[int]:
    return sjis.to_sjis_array(text, TABLE.encoding_map)


def to_cp932_binary(text: str) -> bytes:
    return sjis.to_sjis_binary(text, TABLE.encoding_map)


def from_cp932_array(cp932: typing.Union[BinaryLike, typing.Iterable[int]]) -> str:
    return sjis.from_sjis_array(cp932, TABLE.decoding_map)


def is_encodable(codepoint: int) -> bool:
    return codepoint in TABLE.encoding_map


def to_ku_ten(text: str) -> typing.Optional[MenKuTen]:
    """Returns the row and cell of the first character of ``text``."""
    if not text:
        return None
    return sjis.to_ku_ten_from_unicode(code_point_at(text), TABLE.encoding_map)


def from_ku_ten(kuten: MenKuTenLike) -> str:
    """Returns the character at ``kuten``, or an empty string."""
    codepoints = sjis.to_unicode_code_from_ku_ten(kuten, TABLE.decoding_map)
    if codepoints is None:
        return ""
    return from_code_points(codepoints)


def to_jis_kanji_level(text: str) -> typing.Optional[JISKanjiLevel]:
    if not text:
        return None
    return sjis.to_jis_kanji_level_from_unicode(code_point_at(text), TABLE.encoding_map)
