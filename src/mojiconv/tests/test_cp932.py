import pytest
from mojiconv import cp932
from mojiconv.menkuten import JISKanjiLevel, MenKuTen

# "ABCあいう高髙①"
TEXT = "ABCあいう高\u9ad9①"
BINARY = bytes.fromhex("41 42 43 82 A0 82 A2 82 A4 8D 82 FB FC 87 40")


@pytest.mark.parametrize(
    ("expected", "codepoint"),
    [
        (0x5C, 0x5C),
        (0x7E, 0x7E),
        (0x5C, 0xA5),
        (0xFBFC, 0x9AD9),
        (0x8754, 0x2160),
        # NEC special characters win over row 2 duplicates
        (0x81E0, 0x2252),
        (0x81E6, 0x2235),
        (0x81CA, 0xFFE2),
        # IBM extensions win over the NEC-selected ones
        (0xFA5C, 0x7E8A),
        (0xFA40, 0x2170),
        (0xFA55, 0xFFE4),
        (0x8160, 0x301C),
        (0x8160, 0xFF5E),
        (0x817C, 0x2212),
        (0x817C, 0xFF0D),
        (0x8161, 0x2225),
        (0xF040, 0xE000),
        (0xF9FC, 0xE757),
        (None, 0x2016),
        (None, 0x203E),
        (None, 0x5721),
    ],
)
def test_to_cp932_from_unicode(expected, codepoint):
    assert cp932.to_cp932_from_unicode(codepoint) == expected


@pytest.mark.parametrize(
    ("expected", "code"),
    [
        (0x5C, 0x5C),
        (0x80, 0x80),
        (0xF8F0, 0xA0),
        (0xF8F1, 0xFD),
        (0xFF61, 0xA1),
        (0x7E8A, 0xED40),
        (0x2160, 0xFA4A),
        (0x2160, 0x8754),
        (0x2252, 0x8790),
        (0xFF5E, 0x8160),
        (0xFF0D, 0x817C),
        (0xFF3C, 0x815F),
        (0x2170, 0xEEEF),
        (0x2170, 0xFA40),
        (0xE000, 0xF040),
        (None, 0x8540),
    ],
)
def test_to_unicode_from_cp932(expected, code):
    assert cp932.to_unicode_from_cp932(code) == expected


def test_to_cp932_array():
    assert cp932.to_cp932_array("Aあ圡") == [0x41, 0x82A0, 0x3F]


@pytest.mark.parametrize(
    ("expected", "input"),
    [
        (BINARY, TEXT),
        (b"\x5c\x5c", "\\¥"),
        (b"??", "圡\U00020bb7"),
        (b"", ""),
    ],
)
def test_to_cp932_binary(expected, input):
    assert cp932.to_cp932_binary(input) == expected


@pytest.mark.parametrize(
    ("expected", "input"),
    [
        (TEXT, BINARY),
        (TEXT, list(BINARY)),
        ("Aあ", [0x41, 0x82A0]),
        ("\u7e8a", b"\xed\x40"),
        ("?", b"\x85\x40"),
        ("a?", b"a\x82"),
        ("", b""),
    ],
)
def test_from_cp932_array(expected, input):
    assert cp932.from_cp932_array(input) == expected


@pytest.mark.parametrize(
    ("expected", "codepoint"),
    [
        (True, 0x41),
        (True, 0x9AD9),
        (True, 0xA5),
        (False, 0x5721),
        (False, 0x20BB7),
    ],
)
def test_is_encodable(expected, codepoint):
    assert cp932.is_encodable(codepoint) is expected


@pytest.mark.parametrize(
    ("expected", "input"),
    [
        (MenKuTen(1, 16, 1), "亜"),
        (MenKuTen(1, 13, 1), "①"),
        (MenKuTen(1, 118, 94), "\u9ad9"),
        (MenKuTen(1, 84, 6), "熙"),
        (None, "鷗"),
        (None, "A"),
        (None, ""),
    ],
)
def test_to_ku_ten(expected, input):
    assert cp932.to_ku_ten(input) == expected


@pytest.mark.parametrize(
    ("expected", "input"),
    [
        ("①", "13-1"),
        ("亜", (16, 1)),
        ("\u9ad9", "118-94"),
        ("", "9-1"),
    ],
)
def test_from_ku_ten(expected, input):
    assert cp932.from_ku_ten(input) == expected


@pytest.mark.parametrize(
    ("expected", "input"),
    [
        (JISKanjiLevel.LEVEL_1, "亜"),
        (JISKanjiLevel.LEVEL_2, "熙"),
        (JISKanjiLevel.NONE, "①"),
        (None, "圡"),
        (None, ""),
    ],
)
def test_to_jis_kanji_level(expected, input):
    assert cp932.to_jis_kanji_level(input) == expected


def test_round_trip():
    for codepoint, code in cp932.TABLE.encoding_map.items():
        if codepoint in cp932.CP932_OVERRIDES:
            continue
        assert cp932.TABLE.decoding_map[code] == codepoint
        assert code not in cp932.CP932_DUPLICATES


def test_duplicates():
    assert len(cp932.CP932_DUPLICATES) == 398
    for code in cp932.CP932_DUPLICATES:
        assert code in cp932.TABLE.decoding_map
