import pytest
from mojiconv import eucjis2004

# "謹𪘂麵"
TEXT = "\ufa63\U0002a602\u9eb5"
BINARY = bytes.fromhex("FC B0 8F FE F0 FE F0")


@pytest.mark.parametrize(
    ("expected", "input"),
    [
        (BINARY, TEXT),
        (bytes.fromhex("A4 B0 B1 E0 61 8E B1 AD B0"), "ぐ園aｱ⑯"),
        (bytes.fromhex("8F A1 A1"), "\U00020089"),
        # combining sequences only decode; the mark is encoded on its own
        (bytes.fromhex("A4 AB 3F A9 DC AB DC"), "\u304b\u309a\u00e6\u0300"),
        (b"?", "\u9ad9"),
        (b"?", "\ue000"),
        (b"", ""),
    ],
)
def test_to_eucjis2004_binary(expected, input):
    assert eucjis2004.to_eucjis2004_binary(input) == expected


@pytest.mark.parametrize(
    ("expected", "input"),
    [
        (TEXT, BINARY),
        ("ぐ園aｱ⑯", bytes.fromhex("A4 B0 B1 E0 61 8E B1 AD B0")),
        ("\U00020089", b"\x8f\xa1\xa1"),
        ("\U0002a6b2", b"\x8f\xfe\xf6"),
        ("\u304b\u309a", b"\xa4\xf7"),
        ("?", b"\x8f\xa2\xa1"),
        ("?a", b"\x8f\x41\x41a"),
        ("?", b"\x8e\x41"),
        ("a", b"a\xfc"),
    ],
)
def test_from_eucjis2004_binary(expected, input):
    assert eucjis2004.from_eucjis2004_binary(input) == expected


@pytest.mark.parametrize(
    ("expected", "codepoint"),
    [
        (True, 0x3F),
        (True, 0xFA63),
        (True, 0x2A602),
        (True, 0xFF71),
        (False, 0x9AD9),
        (False, 0x309A),
    ],
)
def test_is_encodable(expected, codepoint):
    assert eucjis2004.is_encodable(codepoint) is expected
