"""
Shift_JIS-2004, the Shift_JIS encoding of both planes of JIS X 0213:2004.
"""

import functools
import typing

from . import _sjis2004_table, sjis
from .codepage import CodePageTable, DecodedValue, load_packed_table
from .menkuten import JISKanjiLevel, MenKuTen, MenKuTenLike
from .unicode import BinaryLike, code_point_at, from_code_points

SJIS2004_OVERRIDES: typing.Mapping[int, int] = {
    0x00A5: 0x5C,  # YEN SIGN
}

TABLE = CodePageTable(
    "Shift_JIS-2004",
    functools.partial(load_packed_table, _sjis2004_table),
    overrides=SJIS2004_OVERRIDES,
)


def to_sjis2004_from_unicode(codepoint: int) -> typing.Optional[int]:
    return TABLE.encoding_map.get(codepoint)


def to_unicode_from_sjis2004(code: int) -> typing.Optional[DecodedValue]:
    """
    Returns the code point for ``code``, or a tuple for the kana and IPA
    letters that JIS X 0213 composes with a combining mark.
    """
    return TABLE.decoding_map.get(code)


def to_sjis2004_array(text: str) -> typing.List[int]:
    return sjis.to_sjis_array(text, TABLE.encoding_map)


def to_sjis2004_binary(text: str) -> bytes:
    return sjis.to_sjis_binary(text, TABLE.encoding_map)


def from_sjis2004_array(
    sjis2004: typing.Union[BinaryLike, typing.Iterable[int]]
) -> str:
    return sjis.from_sjis_array(sjis2004, TABLE.decoding_map)


def is_encodable(codepoint: int) -> bool:
    return codepoint in TABLE.encoding_map


def to_men_ku_ten(text: str) -> typing.Optional[MenKuTen]:
    """Returns the plane, row and cell of the first character of ``text``."""
    if not text:
        return None
    return sjis.to_men_ku_ten_from_unicode(code_point_at(text), TABLE.encoding_map)


def from_men_ku_ten(menkuten: MenKuTenLike) -> str:
    """Returns the character at ``menkuten``, or an empty string."""
    codepoints = sjis.to_unicode_code_from_men_ku_ten(menkuten, TABLE.decoding_map)
    if codepoints is None:
        return ""
    return from_code_points(codepoints)


def to_jis_kanji_level(text: str) -> typing.Optional[JISKanjiLevel]:
    if not text:
        return None
    return sjis.to_jis_kanji_level_from_unicode(code_point_at(text), TABLE.encoding_map)
