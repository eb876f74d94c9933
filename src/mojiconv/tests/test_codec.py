import codecs
import io

import pytest
from mojiconv import codec

codec.register()

# "ABCあいう高髙①"
CP932_TEXT = "ABCあいう高\u9ad9①"
CP932 = bytes.fromhex("41 42 43 82 A0 82 A2 82 A4 8D 82 FB FC 87 40")

# "ぐ髙園aｱ⑯"
EUCJPMS_TEXT = "ぐ\u9ad9園aｱ⑯"
EUCJPMS = bytes.fromhex("A4 B0 8F F4 FB B1 E0 61 8E B1 AD B0")


@pytest.mark.parametrize(
    ("expected", "encoding"),
    [
        ("mojiconv_Shift_JIS", "mojiconv_cp932"),
        ("mojiconv_Shift_JIS", "mojiconv-sjis"),
        ("mojiconv_Shift_JIS", "MOJICONV_SHIFT_JIS"),
        ("mojiconv_Shift_JIS-2004", "mojiconv_shift_jis_2004"),
        ("mojiconv_Shift_JIS-2004", "mojiconv_sjis2004"),
        ("mojiconv_eucJP-ms", "mojiconv_eucjp_ms"),
        ("mojiconv_EUC-JP", "mojiconv_euc_jp"),
        ("mojiconv_EUC-JIS-2004", "mojiconv_euc_jis_2004"),
    ],
)
def test_lookup(expected, encoding):
    assert codecs.lookup(encoding).name == expected


@pytest.mark.parametrize(
    ("encoding",),
    [
        ("utf-8",),
        ("mojiconv_latin1",),
        ("mojiconv_utf_8",),
    ],
)
def test_find_codecs_ignores_others(encoding):
    assert codec.find_codecs(encoding) is None


def test_register_is_idempotent():
    codec.register()
    codec.register()
    assert codecs.lookup("mojiconv_cp932") is codecs.lookup("mojiconv_windows_31j")


@pytest.mark.parametrize(
    ("expected", "text", "encoding"),
    [
        (CP932, CP932_TEXT, "mojiconv_cp932"),
        (EUCJPMS, EUCJPMS_TEXT, "mojiconv_eucjp_ms"),
        (b"\xfc\xb0", "謹", "mojiconv_euc_jis_2004"),
        (b"\xfc\xee", "\U0002a602", "mojiconv_sjis2004"),
    ],
)
def test_encode_decode(expected, text, encoding):
    assert text.encode(encoding) == expected
    assert expected.decode(encoding) == text


@pytest.mark.parametrize(
    ("text", "encoding", "start"),
    [
        ("a圡", "mojiconv_cp932", 1),
        ("\u9ad9", "mojiconv_sjis2004", 0),
        ("ab\u7e8a", "mojiconv_eucjp_ms", 2),
    ],
)
def test_encode_strict(text, encoding, start):
    with pytest.raises(UnicodeEncodeError) as e:
        text.encode(encoding)
    assert e.value.start == start
    assert e.value.end == start + 1


@pytest.mark.parametrize(
    ("expected", "text", "encoding", "errors"),
    [
        (b"a?", "a圡", "mojiconv_cp932", "replace"),
        (b"a?", "a圡", "mojiconv_cp932", "ignore"),
        (b"?", "\u9ad9", "mojiconv_euc_jis_2004", "replace"),
    ],
)
def test_encode_lenient(expected, text, encoding, errors):
    assert text.encode(encoding, errors) == expected


@pytest.mark.parametrize(
    ("errors",),
    [
        ("strict",),
        ("replace",),
        ("ignore",),
    ],
)
def test_decode_never_fails(errors):
    assert b"\x85\x40a\x82".decode("mojiconv_cp932", errors) == "?a?"
    assert b"\x8f\xa2\xa1\x8e\x41".decode("mojiconv_eucjp_ms", errors) == "??"


@pytest.mark.parametrize(
    ("expected", "chunks", "encoding"),
    [
        (["a", "", "あ"], [b"a\x82", b"", b"\xa0"], "mojiconv_cp932"),
        (["", "", "\u9ad9a"], [b"\x8f", b"\xf4", b"\xfba"], "mojiconv_eucjp_ms"),
        (["\u9ad9", "?"], [b"\xfb\xfc", b"\x82"], "mojiconv_cp932"),
    ],
)
def test_incremental_decoder(expected, chunks, encoding):
    decoder = codecs.getincrementaldecoder(encoding)()
    result = [decoder.decode(chunk) for chunk in chunks[:-1]]
    result.append(decoder.decode(chunks[-1], final=True))
    assert result == expected


def test_incremental_encoder():
    encoder = codecs.getincrementalencoder("mojiconv_eucjp_ms")()
    data = encoder.encode("ぐ") + encoder.encode("\u9ad9", final=True)
    assert data == bytes.fromhex("A4 B0 8F F4 FB")


def test_stream_reader_writer():
    buf = io.BytesIO()
    writer = codecs.getwriter("mojiconv_cp932")(buf)
    writer.write(CP932_TEXT)
    assert buf.getvalue() == CP932

    reader = codecs.getreader("mojiconv_cp932")(io.BytesIO(CP932))
    assert reader.read() == CP932_TEXT


def test_text_io_wrapper():
    f = io.TextIOWrapper(io.BytesIO(EUCJPMS), encoding="mojiconv_eucjp_ms")
    assert f.read() == EUCJPMS_TEXT
