import importlib

import pytest
import mojiconv

# "aあ①圡0𠮷"
UTF_TEXT = "aあ①圡0\U00020bb7"
UTF8 = bytes.fromhex("61 E3 81 82 E2 91 A0 E5 9C A1 30 F0 A0 AE B7")
UTF16BE = bytes.fromhex("00 61 30 42 24 60 57 21 00 30 D8 42 DF B7")
UTF16LE = bytes.fromhex("61 00 42 30 60 24 21 57 30 00 42 D8 B7 DF")
UTF32BE = bytes.fromhex(
    "00 00 00 61 00 00 30 42 00 00 24 60 00 00 57 21 00 00 00 30 00 02 0B B7"
)
UTF32LE = bytes.fromhex(
    "61 00 00 00 42 30 00 00 60 24 00 00 21 57 00 00 30 00 00 00 B7 0B 02 00"
)

# "ABCあいう高髙①"
CP932_TEXT = "ABCあいう高\u9ad9①"
CP932 = bytes.fromhex("41 42 43 82 A0 82 A2 82 A4 8D 82 FB FC 87 40")

# "圡①靁謹𪘂麵"
SJIS2004_TEXT = "\u5721\u2460\u9741\ufa63\U0002a602\u9eb5"
SJIS2004 = bytes.fromhex("88 62 87 40 FB 9A EE AE FC EE EF EE")

# "ぐ髙園aｱ⑯"
EUCJPMS_TEXT = "ぐ\u9ad9園aｱ⑯"
EUCJPMS = bytes.fromhex("A4 B0 8F F4 FB B1 E0 61 8E B1 AD B0")

# "ぐ園aｱ⑯"
EUCJP_TEXT = "ぐ園aｱ⑯"
EUCJP = bytes.fromhex("A4 B0 B1 E0 61 8E B1 AD B0")

# "謹𪘂麵"
EUCJIS2004_TEXT = "\ufa63\U0002a602\u9eb5"
EUCJIS2004 = bytes.fromhex("FC B0 8F FE F0 FE F0")

JA_TEXT = "日本語のテキストです"
JA_LONG_TEXT = "日本語のテキストです。カタカナとひらがな"


@pytest.mark.parametrize(
    ("expected", "input"),
    [
        ("UTF-8", "utf8"),
        ("UTF-8", "UTF-8"),
        ("UTF-8", "unicode-1-1-utf-8"),
        ("UTF-16LE", "UTF-16"),
        ("UTF-16LE", "unicode"),
        ("UTF-16LE", "utf_16le"),
        ("UTF-16BE", "unicodeFFFE"),
        ("UTF-16BE", "utf16be"),
        ("UTF-32LE", "utf32"),
        ("UTF-32BE", "UTF-32BE"),
        ("Shift_JIS", "sjis"),
        ("Shift_JIS", "SJIS"),
        ("Shift_JIS", "cp932"),
        ("Shift_JIS", "MS932"),
        ("Shift_JIS", "Windows-31J"),
        ("Shift_JIS", "x-sjis"),
        ("Shift_JIS", "MS_Kanji"),
        ("Shift_JIS-2004", "SJIS-2004"),
        ("Shift_JIS-2004", "shift_jis2004"),
        ("eucJP-ms", "EUC-JP-MS"),
        ("eucJP-ms", "eucjpms"),
        ("EUC-JP", "euc-jp"),
        ("EUC-JP", "x-euc-jp"),
        ("EUC-JIS-2004", "EUC-JIS-2004"),
        ("EUC-JIS-2004", "euc-jis-2000"),
        ("EUC-JIS-2004", "EUC-JP-2004"),
        ("UTF-8 with BOM", "utf-8 bom"),
        ("UTF-8 with BOM", "BOM UTF-8"),
        ("UTF-8 with BOM", "UTF-8 with BOM"),
        ("UTF-16BE with BOM", "utf16be with bom"),
        ("latin-1", "latin-1"),
        ("sjis-2001", "sjis-2001"),
    ],
)
def test_normalize_charset_name(expected, input):
    assert mojiconv.normalize_charset_name(input) == expected


@pytest.mark.parametrize(
    ("expected", "input"),
    [
        (0, []),
        (0, [0x61]),
        (2, [0x61, 0x62, 0x63]),
        (1, [0x41, 0x7A]),
        (0, [0x61, 0x31]),
        (1, [0x31, 0x32]),
        (2, [0x3042, 0x3044, 0x3046]),
        (1, [0x30A2, 0x30A4]),
        (1, [0xFF21, 0xFF41]),
        (1, [0xFF10, 0xFF11]),
        (1, [0xFF71, 0xFF72]),
        (1, [0x6F22, 0x5B57]),
        (1, [0x3400, 0x20BB7]),
        # unclassified characters break a run
        (0, [0x61, 0x20, 0x62]),
        (0, [0x3042, 0x30A2]),
    ],
)
def test_count_word(expected, input):
    assert mojiconv.count_word(input) == expected


@pytest.mark.parametrize(
    ("expected", "text", "charset"),
    [
        (UTF8, UTF_TEXT, "UTF-8"),
        (UTF16BE, UTF_TEXT, "UTF-16BE"),
        (UTF16LE, UTF_TEXT, "UTF-16LE"),
        (UTF16LE, UTF_TEXT, "utf16"),
        (UTF32BE, UTF_TEXT, "UTF-32BE"),
        (UTF32LE, UTF_TEXT, "UTF-32LE"),
        (b"\xef\xbb\xbf" + UTF8, UTF_TEXT, "UTF-8 with BOM"),
        (b"\xef\xbb\xbf" + UTF8, UTF_TEXT, "bom utf8"),
        (CP932, CP932_TEXT, "Shift_JIS"),
        (CP932, CP932_TEXT, "Windows-31J"),
        (SJIS2004, SJIS2004_TEXT, "SJIS-2004"),
        (EUCJPMS, EUCJPMS_TEXT, "eucJP-ms"),
        (EUCJP, EUCJP_TEXT, "EUC-JP"),
        (EUCJIS2004, EUCJIS2004_TEXT, "EUC-JIS-2004"),
        (b"a?", "a圡", "Shift_JIS"),
        (b"", "", "UTF-8"),
    ],
)
def test_encode(expected, text, charset):
    assert mojiconv.encode(text, charset) == expected


@pytest.mark.parametrize(
    ("expected", "charset"),
    [
        (b"\xef\xbb\xbf" + UTF8, "UTF-8"),
        (b"\xfe\xff" + UTF16BE, "UTF-16BE"),
        (b"\xff\xfe" + UTF16LE, "UTF-16LE"),
        (b"\x00\x00\xfe\xff" + UTF32BE, "UTF-32BE"),
        (b"\xff\xfe\x00\x00" + UTF32LE, "UTF-32LE"),
    ],
)
def test_encode_with_bom(expected, charset):
    assert mojiconv.encode(UTF_TEXT, charset, with_bom=True) == expected


def test_encode_with_bom_ignored_for_legacy_charsets():
    assert mojiconv.encode(CP932_TEXT, "Shift_JIS", with_bom=True) == CP932


@pytest.mark.parametrize(
    ("charset",),
    [
        ("latin-1",),
        ("",),
        ("autodetect",),
    ],
)
def test_encode_unknown_charset(charset):
    assert mojiconv.encode("abc", charset) is None


@pytest.mark.parametrize(
    ("expected", "binary", "charset"),
    [
        (UTF_TEXT, UTF8, "UTF-8"),
        (UTF_TEXT, UTF16BE, "utf-16be"),
        (UTF_TEXT, UTF16LE, "UTF-16LE"),
        (UTF_TEXT, UTF32BE, "UTF-32BE"),
        (UTF_TEXT, UTF32LE, "UTF-32LE"),
        # the byte order mark takes precedence
        (UTF_TEXT, b"\xfe\xff" + UTF16BE, "UTF-16LE"),
        (UTF_TEXT, b"\xef\xbb\xbf" + UTF8, "UTF-8 with BOM"),
        (CP932_TEXT, CP932, "Shift_JIS"),
        (CP932_TEXT, list(CP932), "cp932"),
        (SJIS2004_TEXT, SJIS2004, "Shift_JIS-2004"),
        (EUCJPMS_TEXT, EUCJPMS, "eucJP-ms"),
        (EUCJP_TEXT, EUCJP, "EUC-JP"),
        (EUCJIS2004_TEXT, EUCJIS2004, "EUC-JIS-2004"),
        ("", b"", "Shift_JIS"),
    ],
)
def test_decode(expected, binary, charset):
    assert mojiconv.decode(binary, charset) == expected


def test_decode_unknown_charset():
    assert mojiconv.decode(b"abc", "latin-1") is None


@pytest.mark.parametrize(
    ("expected_charset", "expected", "binary"),
    [
        ("UTF-8", UTF_TEXT, b"\xef\xbb\xbf" + UTF8),
        ("UTF-16BE", UTF_TEXT, b"\xfe\xff" + UTF16BE),
        ("UTF-16LE", UTF_TEXT, b"\xff\xfe" + UTF16LE),
        ("UTF-32BE", UTF_TEXT, b"\x00\x00\xfe\xff" + UTF32BE),
        ("UTF-32LE", UTF_TEXT, b"\xff\xfe\x00\x00" + UTF32LE),
        ("Shift_JIS", CP932_TEXT, CP932),
        ("EUC-JIS-2004", EUCJIS2004_TEXT, EUCJIS2004),
        ("UTF-8", JA_TEXT, JA_TEXT.encode("utf-8")),
        ("UTF-16LE", JA_TEXT, JA_TEXT.encode("utf-16le")),
        ("Shift_JIS", JA_LONG_TEXT, JA_LONG_TEXT.encode("cp932")),
        # ties go to the earlier candidate
        ("Shift_JIS", "ab", b"ab"),
        ("Shift_JIS", "", b""),
    ],
)
def test_autodetect(expected_charset, expected, binary):
    assert mojiconv.detect_charset(binary) == expected_charset
    assert mojiconv.decode(binary) == expected
    assert mojiconv.decode(binary, "autodetect") == expected
    assert mojiconv.decode(binary, "") == expected


@pytest.mark.parametrize(
    ("expected", "candidates"),
    [
        ("EUC-JIS-2004", ("EUC-JIS-2004", "Shift_JIS")),
        ("Shift_JIS", ("Shift_JIS", "EUC-JIS-2004")),
        ("UTF-8", ("UTF-16LE", "UTF-8")),
    ],
)
def test_autodetect_candidate_order(monkeypatch, expected, candidates):
    module = importlib.import_module("mojiconv.encode")
    monkeypatch.setattr(module, "autodetect_candidates", candidates)
    assert mojiconv.detect_charset(b"ab") == expected


def test_autodetect_logs_scores(caplog):
    with caplog.at_level("DEBUG", logger="mojiconv.encode"):
        mojiconv.decode(CP932)
    assert "Autodetect candidate Shift_JIS scored" in caplog.text


def test_bom_wins_over_requested_charset():
    assert mojiconv.decode(b"\xff\xfe" + UTF16LE, "UTF-8") == UTF_TEXT


@pytest.mark.parametrize(
    ("charset",),
    [
        ("Shift_JIS",),
        ("Shift_JIS-2004",),
        ("eucJP-ms",),
        ("EUC-JP",),
        ("EUC-JIS-2004",),
    ],
)
def test_unmappable_characters_become_question_marks(charset):
    # hangul and an emoji exist in none of the Japanese charsets
    binary = mojiconv.encode("한글\U0001f600", charset)
    assert binary == b"???"
    assert mojiconv.decode(binary, charset) == "???"


@pytest.mark.parametrize(
    ("expected", "text"),
    [
        (b"\x81\x7c", "\u2212"),
        (b"\x81\xaf", "\uff0d"),
        (b"\x81\x60", "\u301c"),
        (b"\x81\xb0", "\uff5e"),
    ],
)
def test_sjis2004_minus_and_wave_dash(expected, text):
    binary = mojiconv.encode(text, "Shift_JIS-2004")
    assert binary == expected
    assert mojiconv.decode(binary, "Shift_JIS-2004") == text


def test_ascii_is_detected_as_ascii():
    assert mojiconv.decode(b"AB") == "AB"


def test_encode_decode_shift_jis():
    binary = mojiconv.encode("高", "Shift_JIS")
    assert binary == b"\x8d\x82"
    assert mojiconv.decode(binary, "Shift_JIS") == "高"
    assert mojiconv.encode("あ", "UTF-8") == b"\xe3\x81\x82"
