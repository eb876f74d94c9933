import pytest
import mojiconv
from mojiconv import unicode

# "aあ①圡0𠮷"
TEXT = "aあ①圡0\U00020bb7"
CODE_POINTS = [0x61, 0x3042, 0x2460, 0x5721, 0x30, 0x20BB7]

UTF8 = bytes.fromhex("61 E3 81 82 E2 91 A0 E5 9C A1 30 F0 A0 AE B7")
UTF16BE = bytes.fromhex("00 61 30 42 24 60 57 21 00 30 D8 42 DF B7")
UTF16LE = bytes.fromhex("61 00 42 30 60 24 21 57 30 00 42 D8 B7 DF")
UTF32BE = bytes.fromhex(
    "00 00 00 61 00 00 30 42 00 00 24 60 00 00 57 21 00 00 00 30 00 02 0B B7"
)
UTF32LE = bytes.fromhex(
    "61 00 00 00 42 30 00 00 60 24 00 00 21 57 00 00 30 00 00 00 B7 0B 02 00"
)


@pytest.mark.parametrize(
    ("expected", "text", "index"),
    [
        (0x61, "a\ud842\udfb7", 0),
        (0x20BB7, "a\ud842\udfb7", 1),
        (0xDFB7, "a\ud842\udfb7", 2),
        (0x20BB7, "\U00020bb7", 0),
        (0xD842, "\ud842a", 0),
    ],
)
def test_code_point_at(expected, text, index):
    assert unicode.code_point_at(text, index) == expected


@pytest.mark.parametrize(
    ("expected", "text", "index"),
    [
        (0x20BB7, "a\ud842\udfb7", 3),
        (0x61, "a\ud842\udfb7", 1),
        (0xD842, "a\ud842", 2),
    ],
)
def test_code_point_before(expected, text, index):
    assert unicode.code_point_before(text, index) == expected


@pytest.mark.parametrize(
    ("expected", "text", "begin", "end"),
    [
        (3, "a\ud842\udfbbb", 0, None),
        (2, "a\ud842\udfbbb", 1, None),
        (1, "a\ud842\udfbbb", 0, 1),
        (0, "", 0, None),
        (6, TEXT, 0, None),
    ],
)
def test_code_point_count(expected, text, begin, end):
    assert unicode.code_point_count(text, begin, end) == expected


@pytest.mark.parametrize(
    ("expected", "text", "index", "offset"),
    [
        (3, "a\ud842\udfb7b", 0, 2),
        (4, "a\ud842\udfb7b", 0, 3),
        (1, "a\ud842\udfb7b", 4, -2),
        (2, "a\ud842\udfb7b", 2, 0),
    ],
)
def test_offset_by_code_points(expected, text, index, offset):
    assert unicode.offset_by_code_points(text, index, offset) == expected


@pytest.mark.parametrize(
    ("text", "index", "offset"),
    [
        ("ab", 0, 3),
        ("ab", 1, -2),
    ],
)
def test_offset_by_code_points_out_of_range(text, index, offset):
    with pytest.raises(IndexError):
        unicode.offset_by_code_points(text, index, offset)


def test_to_utf32_array():
    assert unicode.to_utf32_array(TEXT) == CODE_POINTS
    # a surrogate pair counts as one code point
    assert unicode.to_utf32_array("\ud842\udfb7") == [0x20BB7]


@pytest.mark.parametrize(
    ("expected", "input"),
    [
        (TEXT, CODE_POINTS),
        ("\ufffd", [0x110000]),
        ("a\ufffd", [0x61, -1]),
    ],
)
def test_from_code_points(expected, input):
    assert unicode.from_code_points(input) == expected


def test_to_utf16_array():
    assert unicode.to_utf16_array(TEXT) == [
        0x61,
        0x3042,
        0x2460,
        0x5721,
        0x30,
        0xD842,
        0xDFB7,
    ]


@pytest.mark.parametrize(
    ("expected", "input"),
    [
        ("\U00020bb7a", [0xD842, 0xDFB7, 0x61]),
        ("a\ud842", [0x61, 0xD842]),
        ("\ud842a", [0xD842, 0x61]),
    ],
)
def test_from_utf16_array(expected, input):
    assert unicode.from_utf16_array(input) == expected


def test_utf8_array():
    assert unicode.to_utf8_array(TEXT) == UTF8
    assert unicode.from_utf8_array(UTF8) == TEXT


@pytest.mark.parametrize(
    ("expected", "text", "offset", "size"),
    [
        ("\U00020bb7b", "a\U00020bb7bc", 1, 2),
        ("a", "a\U00020bb7bc", 0, 1),
        ("c", "a\U00020bb7bc", 3, 10),
        ("", "abc", 5, 1),
    ],
)
def test_cut_text_for_code_point(expected, text, offset, size):
    assert unicode.cut_text_for_code_point(text, offset, size) == expected


FAMILY = "\U0001f468\u200d\U0001f469\u200d\U0001f467"


@pytest.mark.parametrize(
    ("expected", "input"),
    [
        (1, 0x61),
        (1, 0x7F),
        (1, 0xFF71),
        (1, 0xFF9F),
        (2, 0xFF10),
        (2, 0x3042),
        (2, 0x6F22),
        (2, 0x1F600),
        (0, 0x301),
        (0, 0x3099),
        (0, 0xFE0F),
        (0, 0xE0100),
        (0, 0x1F3FD),
        (0, 0xE0041),
        (0, 0x200B),
        (0, 0x200D),
        (0, 0x2060),
    ],
)
def test_get_width_from_code_point(expected, input):
    assert unicode.get_width_from_code_point(input) == expected


@pytest.mark.parametrize(
    ("expected", "input"),
    [
        (0, ""),
        (3, "abc"),
        (3, "ｱｲｳ"),
        (4, "漢字"),
        (2, "か\u3099"),
        (1, "e\u0301"),
        (2, "a\u200bb"),
        (2, "\u845b\U000e0100"),
        (2, "\U0001f44d\U0001f3fd"),
        # members joined by ZWJ are drawn as one glyph
        (2, FAMILY),
        (3, FAMILY + "a"),
    ],
)
def test_get_width(expected, input):
    assert unicode.get_width(input) == expected


@pytest.mark.parametrize(
    ("expected", "input"),
    [
        ([], ""),
        ([[0x61], [0x62]], "ab"),
        ([[0x304B, 0x3099], [0x304D]], "か\u3099き"),
        ([[0x1F44D, 0x1F3FD], [0x61]], "\U0001f44d\U0001f3fda"),
        ([[0x1F468, 0x200D, 0x1F469, 0x200D, 0x1F467]], FAMILY),
        ([[0x20BB7], [0x61]], "𠮷a"),
    ],
)
def test_to_moji_array(expected, input):
    assert unicode.to_moji_array(input) == expected


def test_from_moji_array():
    assert unicode.from_moji_array([[0x304B, 0x3099], [0x20BB7]]) == (
        "か\u3099\U00020bb7"
    )


@pytest.mark.parametrize(
    ("expected", "text", "offset", "size"),
    [
        ("abc", "abcdef", 0, 3),
        ("cd", "abcdef", 2, 2),
        ("ｱｲ", "ｱｲｳ", 0, 2),
        ("a ", "aあb", 0, 2),
        ("あb", "aあb", 1, 3),
        # offsets that fall inside a full-width character pad with a space
        (" b", "aあb", 2, 2),
        (" ", "漢字", 1, 1),
        (" 字", "漢字", 1, 3),
        ("か\u3099", "か\u3099き", 0, 2),
        ("き", "か\u3099き", 2, 2),
        (FAMILY, FAMILY + "a", 0, 2),
        ("a", FAMILY + "a", 2, 5),
        ("a", "abc", -1, 2),
        ("", "abc", -3, 2),
        ("", "abc", 0, 0),
        ("", "abc", 5, 2),
    ],
)
def test_cut_text_for_width(expected, text, offset, size):
    assert unicode.cut_text_for_width(text, offset, size) == expected


@pytest.mark.parametrize(
    ("expected", "input"),
    [
        ("UTF-8", b"\xef\xbb\xbfa"),
        ("UTF-16BE", b"\xfe\xff\x00a"),
        ("UTF-16LE", b"\xff\xfea\x00"),
        ("UTF-32BE", b"\x00\x00\xfe\xff\x00\x00\x00a"),
        ("UTF-32LE", b"\xff\xfe\x00\x00a\x00\x00\x00"),
        (None, b"abc"),
        (None, b""),
    ],
)
def test_get_charset_from_bom(expected, input):
    assert unicode.get_charset_from_bom(input) == expected


@pytest.mark.parametrize(
    ("input", "charset"),
    [
        (UTF8, "UTF-8"),
        (UTF8, "utf8"),
        (UTF16BE, "UTF-16BE"),
        (UTF16LE, "UTF-16LE"),
        (UTF16LE, "UTF-16"),
        (UTF32BE, "UTF-32BE"),
        (UTF32LE, "UTF-32LE"),
        (UTF32LE, "UTF-32"),
        (b"\xef\xbb\xbf" + UTF8, None),
        (b"\xfe\xff" + UTF16BE, None),
        (b"\xff\xfe" + UTF16LE, "UTF-16BE"),
        (b"\x00\x00\xfe\xff" + UTF32BE, None),
        (b"\xff\xfe\x00\x00" + UTF32LE, "UTF-8"),
        (list(UTF8), "UTF-8"),
    ],
)
def test_to_code_points_from_utf_binary(input, charset):
    assert unicode.to_code_points_from_utf_binary(input, charset) == CODE_POINTS


@pytest.mark.parametrize(
    ("input", "charset"),
    [
        (UTF8, None),
        (UTF8, ""),
        (UTF8, "Shift_JIS"),
    ],
)
def test_to_code_points_from_utf_binary_unknown(input, charset):
    assert unicode.to_code_points_from_utf_binary(input, charset) is None


@pytest.mark.parametrize(
    ("expected", "input", "charset"),
    [
        ([0x61], b"a\xe3\x81", "UTF-8"),
        ([0x61], b"\x00\x61\xd8\x42", "UTF-16BE"),
        ([0x61], b"\x00\x61\x00", "UTF-16BE"),
        ([0x61], b"\x61\x00\x00\x00\x62\x00", "UTF-32LE"),
    ],
)
def test_to_code_points_from_utf_binary_truncated(expected, input, charset):
    assert unicode.to_code_points_from_utf_binary(input, charset) == expected


@pytest.mark.parametrize(
    ("expected", "charset", "with_bom"),
    [
        (UTF8, "UTF-8", False),
        (b"\xef\xbb\xbf" + UTF8, "UTF-8", True),
        (b"\xef\xbb\xbf" + UTF8, "UTF-8 with BOM", False),
        (UTF16BE, "UTF-16BE", False),
        (b"\xfe\xff" + UTF16BE, "UTF-16BE", True),
        (UTF16LE, "UTF-16LE", False),
        (UTF16LE, "UTF-16", False),
        (b"\xff\xfe" + UTF16LE, "UTF-16LE with BOM", False),
        (UTF32BE, "UTF-32BE", False),
        (b"\x00\x00\xfe\xff" + UTF32BE, "UTF-32BE", True),
        (UTF32LE, "UTF-32LE", False),
        (b"\xff\xfe\x00\x00" + UTF32LE, "UTF-32LE", True),
    ],
)
def test_to_utf_binary_from_code_points(expected, charset, with_bom):
    assert (
        unicode.to_utf_binary_from_code_points(CODE_POINTS, charset, with_bom)
        == expected
    )


def test_to_utf_binary_from_code_points_unknown():
    assert unicode.to_utf_binary_from_code_points(CODE_POINTS, "EUC-JP") is None


def test_width_helpers_are_exported():
    assert mojiconv.get_width("ｱ漢a") == 4
    assert mojiconv.cut_text_for_width("ｱ漢a", 1, 2) == "漢"
