"""
Surrogate-aware code point helpers and the UTF-8 / UTF-16 / UTF-32 byte
codecs.

Python strings normally hold whole code points, but strings obtained through
``surrogatepass`` or built from UTF-16 code units may carry surrogate pairs.
Every helper in this module treats such a pair as a single code point.

The width helpers count display width in half-width cells, the way fixed
pitch Japanese terminals and forms lay out text.
"""

import re
import typing
import unicodedata

BinaryLike = typing.Union[bytes, bytearray, memoryview, typing.Sequence[int]]

REPLACEMENT_CHARACTER = 0xFFFD

BOMS: typing.Sequence[typing.Tuple[bytes, str]] = (
    # 4-byte signatures first; FF FE 00 00 begins with the UTF-16LE mark.
    (b"\x00\x00\xfe\xff", "UTF-32BE"),
    (b"\xff\xfe\x00\x00", "UTF-32LE"),
    (b"\xef\xbb\xbf", "UTF-8"),
    (b"\xfe\xff", "UTF-16BE"),
    (b"\xff\xfe", "UTF-16LE"),
)

bom_by_charset: typing.Mapping[str, bytes] = {
    charset: bom for bom, charset in BOMS
}

utf8_regexp = re.compile(r"utf[-_]?8n?", re.IGNORECASE)
utf16_regexp = re.compile(r"utf[-_]?16", re.IGNORECASE)
utf32_regexp = re.compile(r"utf[-_]?32", re.IGNORECASE)
big_endian_regexp = re.compile(r"utf[-_]?(?:16|32)[-_]?be", re.IGNORECASE)
with_bom_regexp = re.compile(r"\s+with\s+bom$", re.IGNORECASE)


def is_high_surrogate_at(text: str, index: int) -> bool:
    return 0 <= index < len(text) and 0xD800 <= ord(text[index]) <= 0xDBFF


def is_low_surrogate_at(text: str, index: int) -> bool:
    return 0 <= index < len(text) and 0xDC00 <= ord(text[index]) <= 0xDFFF


def is_surrogate_pair_at(text: str, index: int) -> bool:
    return is_high_surrogate_at(text, index) and is_low_surrogate_at(
        text, index + 1
    )


def combine_surrogates(high: int, low: int) -> int:
    return (((high - 0xD800) << 10) | (low - 0xDC00)) + 0x10000


def code_point_at(text: str, index: int = 0) -> int:
    """
    Returns the code point starting at ``index``, joining a surrogate pair
    into one value.  A high surrogate with no low surrogate after it is
    returned unchanged.
    """
    if is_surrogate_pair_at(text, index):
        return combine_surrogates(ord(text[index]), ord(text[index + 1]))
    return ord(text[index])


def code_point_before(text: str, index: int) -> int:
    if is_low_surrogate_at(text, index - 1) and is_high_surrogate_at(
        text, index - 2
    ):
        return combine_surrogates(ord(text[index - 2]), ord(text[index - 1]))
    return ord(text[index - 1])


def code_point_count(
    text: str, begin: int = 0, end: typing.Optional[int] = None
) -> int:
    if end is None:
        end = len(text)
    count = 0
    i = begin
    while i < end:
        count += 1
        if is_surrogate_pair_at(text, i):
            i += 1
        i += 1
    return count


def offset_by_code_points(text: str, index: int, offset: int) -> int:
    """
    Returns the string index that lies ``offset`` code points away from
    ``index``.  Raises :class:`IndexError` if it falls outside ``text``.
    """
    if offset == 0:
        return index
    if offset > 0:
        i = index
        for _ in range(offset):
            if i >= len(text):
                raise IndexError(f"offset {offset} from {index} is out of range")
            i += 2 if is_surrogate_pair_at(text, i) else 1
        return i
    i = index
    for _ in range(-offset):
        if i <= 0:
            raise IndexError(f"offset {offset} from {index} is out of range")
        if is_low_surrogate_at(text, i - 1) and is_high_surrogate_at(text, i - 2):
            i -= 2
        else:
            i -= 1
    return i


def iter_code_points(text: str) -> typing.Iterator[int]:
    i = 0
    n = len(text)
    while i < n:
        if is_surrogate_pair_at(text, i):
            yield combine_surrogates(ord(text[i]), ord(text[i + 1]))
            i += 2
        else:
            yield ord(text[i])
            i += 1


def to_utf32_array(text: str) -> typing.List[int]:
    return list(iter_code_points(text))


def from_code_points(codepoints: typing.Iterable[int]) -> str:
    return "".join(
        chr(c) if 0 <= c <= 0x10FFFF else chr(REPLACEMENT_CHARACTER)
        for c in codepoints
    )


def to_utf16_array_from_code_points(
    codepoints: typing.Iterable[int],
) -> typing.List[int]:
    units: typing.List[int] = []
    for c in codepoints:
        if c >= 0x10000:
            c -= 0x10000
            units.append(0xD800 | ((c >> 10) & 0x3FF))
            units.append(0xDC00 | (c & 0x3FF))
        else:
            units.append(c)
    return units


def to_utf16_array(text: str) -> typing.List[int]:
    return to_utf16_array_from_code_points(iter_code_points(text))


def iter_code_points_from_utf16(units: typing.Iterable[int]) -> typing.Iterator[int]:
    high: typing.Optional[int] = None
    for u in units:
        if high is not None:
            if 0xDC00 <= u <= 0xDFFF:
                yield combine_surrogates(high, u)
                high = None
                continue
            yield high
            high = None
        if 0xD800 <= u <= 0xDBFF:
            high = u
        else:
            yield u
    if high is not None:
        yield high


def from_utf16_array(units: typing.Iterable[int]) -> str:
    return from_code_points(iter_code_points_from_utf16(units))


def to_utf8_array(text: str) -> bytes:
    return encode_utf8(iter_code_points(text))


def from_utf8_array(binary: BinaryLike) -> str:
    return from_code_points(decode_utf8(binary))


def cut_text_for_code_point(text: str, offset: int, size: int) -> str:
    """Cuts out ``size`` code points of ``text`` starting at ``offset``."""
    return from_code_points(to_utf32_array(text)[offset : offset + size])


ZERO_WIDTH_JOINER = 0x200D

# ZWSP, ZWNJ, ZWJ and WJ
ZERO_WIDTH_CHARACTERS = frozenset((0x200B, 0x200C, ZERO_WIDTH_JOINER, 0x2060))


def is_variation_selector(c: int) -> bool:
    return 0x180B <= c <= 0x180D or 0xFE00 <= c <= 0xFE0F or 0xE0100 <= c <= 0xE01EF


def is_grapheme_component(c: int) -> bool:
    """
    Tells whether ``c`` attaches to the preceding character: a combining
    mark, a variation selector, an emoji skin tone modifier, a tag character
    or the zero width joiner.
    """
    if is_variation_selector(c):
        return True
    if 0x1F3FB <= c <= 0x1F3FF or 0xE0000 <= c <= 0xE007F:
        return True
    if c == ZERO_WIDTH_JOINER:
        return True
    return 0 <= c <= 0x10FFFF and unicodedata.category(chr(c)).startswith("M")


def _base_width(c: int) -> int:
    return 1 if c < 0x80 or 0xFF61 <= c <= 0xFF9F else 2


def get_width_from_code_point(c: int) -> int:
    """
    Returns the display width of ``c`` counted in half-width cells: 1 for
    ASCII and half-width katakana, 0 for grapheme components and zero width
    characters, and 2 for everything else.
    """
    if is_grapheme_component(c) or c in ZERO_WIDTH_CHARACTERS:
        return 0
    return _base_width(c)


def get_width(text: str) -> int:
    # a character joined by ZWJ is drawn together with the previous one
    width = 0
    joined = False
    for c in iter_code_points(text):
        if not joined:
            width += get_width_from_code_point(c)
        joined = c == ZERO_WIDTH_JOINER
    return width


def to_moji_array(text: str) -> typing.List[typing.List[int]]:
    """
    Splits ``text`` into user-perceived characters, each given as the list of
    its code points.
    """
    retval: typing.List[typing.List[int]] = []
    joined = False
    for c in iter_code_points(text):
        if retval and (joined or is_grapheme_component(c)):
            retval[-1].append(c)
        else:
            retval.append([c])
        joined = c == ZERO_WIDTH_JOINER
    return retval


def from_moji_array(moji_array: typing.Iterable[typing.Sequence[int]]) -> str:
    return "".join(from_code_points(moji) for moji in moji_array)


def cut_text_for_width(text: str, offset: int, size: int) -> str:
    """
    Cuts out ``size`` half-width cells of ``text`` starting at the cell
    ``offset``.  A character is never split; a full-width character that
    straddles either edge of the range is replaced with a space.
    """
    if offset < 0:
        size += offset
        offset = 0
    if size <= 0:
        return ""

    retval: typing.List[typing.Sequence[int]] = []
    space = (0x20,)
    position = 0
    started = False
    for moji in to_moji_array(text):
        width = _base_width(moji[0])
        if position >= offset:
            started = True
            retval.append(moji if size >= width else space)
            size -= width
            if size <= 0:
                break
        position += width
        if not started and position - 1 >= offset:
            # the range starts in the middle of this character
            size -= 1
            retval.append(space)
            if size <= 0:
                break
    return from_moji_array(retval)


def get_charset_from_bom(binary: BinaryLike) -> typing.Optional[str]:
    head = bytes(binary[:4])
    for bom, charset in BOMS:
        if head.startswith(bom):
            return charset
    return None


def decode_utf8(binary: BinaryLike, offset: int = 0) -> typing.List[int]:
    # continuation bytes are not validated; a truncated sequence is dropped
    retval: typing.List[int] = []
    remaining = 0
    c = 0
    for i in range(offset, len(binary)):
        b = binary[i]
        if remaining == 0:
            if b < 0x80:
                retval.append(b)
                continue
            elif b < 0xE0:
                remaining = 1
                c = b & 0x1F
            elif b < 0xF0:
                remaining = 2
                c = b & 0x0F
            else:
                remaining = 3
                c = b & 0x07
        else:
            c = (c << 6) | (b & 0x3F)
            remaining -= 1
            if remaining == 0:
                retval.append(c)
    return retval


def decode_utf16(
    binary: BinaryLike, big_endian: bool, offset: int = 0
) -> typing.List[int]:
    units: typing.List[int] = []
    for i in range(offset, len(binary) - 1, 2):
        if big_endian:
            units.append((binary[i] << 8) | binary[i + 1])
        else:
            units.append(binary[i] | (binary[i + 1] << 8))
    retval: typing.List[int] = []
    i = 0
    while i < len(units):
        u = units[i]
        if 0xD800 <= u <= 0xDBFF:
            if i + 1 >= len(units):
                # unpaired trailing high surrogate
                break
            if 0xDC00 <= units[i + 1] <= 0xDFFF:
                retval.append(combine_surrogates(u, units[i + 1]))
                i += 2
            else:
                retval.append(u)
                i += 1
        else:
            retval.append(u)
            i += 1
    return retval


def decode_utf32(
    binary: BinaryLike, big_endian: bool, offset: int = 0
) -> typing.List[int]:
    retval: typing.List[int] = []
    for i in range(offset, len(binary) - 3, 4):
        if big_endian:
            retval.append(
                (binary[i] << 24)
                | (binary[i + 1] << 16)
                | (binary[i + 2] << 8)
                | binary[i + 3]
            )
        else:
            retval.append(
                binary[i]
                | (binary[i + 1] << 8)
                | (binary[i + 2] << 16)
                | (binary[i + 3] << 24)
            )
    return retval


def to_code_points_from_utf_binary(
    binary: BinaryLike, charset: typing.Optional[str] = None
) -> typing.Optional[typing.List[int]]:
    """
    Decodes UTF-8, UTF-16 or UTF-32 bytes into code points.

    A byte order mark takes precedence over ``charset``.  Returns ``None``
    when neither is available or when ``charset`` is not a UTF encoding.
    Plain ``UTF-16`` and ``UTF-32`` are read as little endian.
    """
    offset = 0
    bom_charset = get_charset_from_bom(binary)
    if bom_charset is not None:
        charset = bom_charset
        offset = len(bom_by_charset[bom_charset])
    if not charset:
        return None

    if utf8_regexp.search(charset):
        return decode_utf8(binary, offset)
    elif utf16_regexp.search(charset):
        return decode_utf16(
            binary, big_endian_regexp.search(charset) is not None, offset
        )
    elif utf32_regexp.search(charset):
        return decode_utf32(
            binary, big_endian_regexp.search(charset) is not None, offset
        )
    return None


def encode_utf8(codepoints: typing.Iterable[int]) -> bytes:
    buf = bytearray()
    for c in codepoints:
        if c < 0x80:
            buf.append(c)
        elif c < 0x800:
            buf.append(0xC0 | (c >> 6))
            buf.append(0x80 | (c & 0x3F))
        elif c < 0x10000:
            buf.append(0xE0 | (c >> 12))
            buf.append(0x80 | ((c >> 6) & 0x3F))
            buf.append(0x80 | (c & 0x3F))
        else:
            buf.append(0xF0 | ((c >> 18) & 0x07))
            buf.append(0x80 | ((c >> 12) & 0x3F))
            buf.append(0x80 | ((c >> 6) & 0x3F))
            buf.append(0x80 | (c & 0x3F))
    return bytes(buf)


def to_utf_binary_from_code_points(
    codepoints: typing.Iterable[int], charset: str, with_bom: bool = False
) -> typing.Optional[bytes]:
    """
    Encodes code points as UTF-8, UTF-16LE/BE or UTF-32LE/BE.

    The byte order mark is written when ``with_bom`` is true or the charset
    name ends with ``" with BOM"``.  Returns ``None`` for a non-UTF charset.
    """
    if with_bom_regexp.search(charset):
        with_bom = True

    if utf8_regexp.search(charset):
        name = "UTF-8"
        body = encode_utf8(codepoints)
    elif utf16_regexp.search(charset):
        big_endian = big_endian_regexp.search(charset) is not None
        name = "UTF-16BE" if big_endian else "UTF-16LE"
        buf = bytearray()
        for u in to_utf16_array_from_code_points(codepoints):
            buf += u.to_bytes(2, "big" if big_endian else "little")
        body = bytes(buf)
    elif utf32_regexp.search(charset):
        big_endian = big_endian_regexp.search(charset) is not None
        name = "UTF-32BE" if big_endian else "UTF-32LE"
        buf = bytearray()
        for c in codepoints:
            buf += (c & 0xFFFFFFFF).to_bytes(4, "big" if big_endian else "little")
        body = bytes(buf)
    else:
        return None

    if with_bom:
        return bom_by_charset[name] + body
    return body
