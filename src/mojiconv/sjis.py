"""
Conversion routines shared by the Shift_JIS family.  Each routine takes the
lookup table of the particular code page to work on.
"""

import typing

from .codepage import DecodedValue
from .menkuten import (
    JISKanjiLevel,
    MenKuTen,
    MenKuTenLike,
    to_jis_kanji_level_from_sjis_code,
    to_ku_ten_from_sjis_code,
    to_men_ku_ten_from_sjis2004_code,
    to_sjis2004_code_from_men_ku_ten,
    to_sjis_code_from_ku_ten,
)
from .unicode import BinaryLike, from_code_points, iter_code_points

EncodingMap = typing.Mapping[int, int]
DecodingMap = typing.Mapping[int, DecodedValue]

QUESTION_MARK = 0x3F


def is_lead_byte(x: int) -> bool:
    return 0x81 <= x <= 0x9F or 0xE0 <= x <= 0xFC


def to_sjis_array(text: str, encoding_map: EncodingMap) -> typing.List[int]:
    return [encoding_map.get(c, QUESTION_MARK) for c in iter_code_points(text)]


def to_sjis_binary(text: str, encoding_map: EncodingMap) -> bytes:
    buf = bytearray()
    for x in to_sjis_array(text, encoding_map):
        if x >= 0x100:
            buf.append(x >> 8)
            buf.append(x & 0xFF)
        else:
            buf.append(x)
    return bytes(buf)


def iter_decoded(
    codes: typing.Iterable[int], decoding_map: DecodingMap
) -> typing.Iterator[int]:
    """Looks up codes that are already combined."""
    for x in codes:
        y = decoding_map.get(x)
        if y is None:
            yield QUESTION_MARK
        elif isinstance(y, tuple):
            yield from y
        else:
            yield y


def iter_sjis_codes(
    sjis: typing.Union[BinaryLike, typing.Iterable[int]]
) -> typing.Iterator[int]:
    """Joins lead and trail bytes; a dangling lead byte comes out as is."""
    it = iter(sjis)
    for x in it:
        if x < 0x100 and is_lead_byte(x):
            trail = next(it, None)
            if trail is None:
                yield x << 8
                return
            x = (x << 8) | trail
        yield x


def from_sjis_array(
    sjis: typing.Union[BinaryLike, typing.Iterable[int]], decoding_map: DecodingMap
) -> str:
    """
    Decodes a sequence of bytes, or of codes already combined into one
    integer, into a string.  Unmapped codes turn into ``?``.
    """
    return from_code_points(iter_decoded(iter_sjis_codes(sjis), decoding_map))


def to_sjis_code_from_unicode(
    codepoint: int, encoding_map: EncodingMap
) -> typing.Optional[int]:
    return encoding_map.get(codepoint)


def to_men_ku_ten_from_unicode(
    codepoint: int, encoding_map: EncodingMap
) -> typing.Optional[MenKuTen]:
    return to_men_ku_ten_from_sjis2004_code(encoding_map.get(codepoint))


def to_ku_ten_from_unicode(
    codepoint: int, encoding_map: EncodingMap
) -> typing.Optional[MenKuTen]:
    return to_ku_ten_from_sjis_code(encoding_map.get(codepoint))


def _lookup_code_points(
    code: typing.Optional[int], decoding_map: DecodingMap
) -> typing.Optional[typing.List[int]]:
    if code is None:
        return None
    y = decoding_map.get(code)
    if y is None:
        return None
    if isinstance(y, tuple):
        return list(y)
    return [y]


def to_unicode_code_from_men_ku_ten(
    menkuten: MenKuTenLike, decoding_map: DecodingMap
) -> typing.Optional[typing.List[int]]:
    return _lookup_code_points(to_sjis2004_code_from_men_ku_ten(menkuten), decoding_map)


def to_unicode_code_from_ku_ten(
    kuten: MenKuTenLike, decoding_map: DecodingMap
) -> typing.Optional[typing.List[int]]:
    return _lookup_code_points(to_sjis_code_from_ku_ten(kuten), decoding_map)


def to_jis_kanji_level_from_unicode(
    codepoint: int, encoding_map: EncodingMap
) -> typing.Optional[JISKanjiLevel]:
    """Returns ``None`` when the code point is not in the code page at all."""
    code = encoding_map.get(codepoint)
    if code is None:
        return None
    return to_jis_kanji_level_from_sjis_code(code)
