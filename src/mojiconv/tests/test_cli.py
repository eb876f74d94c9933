import pytest
from click.testing import CliRunner

import mojiconv
from mojiconv.cli import main

# "ABCあいう高髙①"
CP932_TEXT = "ABCあいう高\u9ad9①"
CP932 = bytes.fromhex("41 42 43 82 A0 82 A2 82 A4 8D 82 FB FC 87 40")

# "ぐ髙園aｱ⑯"
EUCJPMS_TEXT = "ぐ\u9ad9園aｱ⑯"
EUCJPMS = bytes.fromhex("A4 B0 8F F4 FB B1 E0 61 8E B1 AD B0")


@pytest.mark.parametrize(
    ("expected", "args", "input"),
    [
        (CP932_TEXT.encode("utf-8"), [], CP932),
        (CP932_TEXT.encode("utf-8"), ["-f", "cp932"], CP932),
        (
            mojiconv.encode(EUCJPMS_TEXT, "Shift_JIS"),
            ["-f", "eucJP-ms", "-t", "sjis"],
            EUCJPMS,
        ),
        (
            mojiconv.encode(EUCJPMS_TEXT, "EUC-JIS-2004"),
            ["-f", "eucjp-ms", "-t", "euc-jis-2004"],
            EUCJPMS,
        ),
        (b"\xfe\xff\x00a", ["-t", "utf-16be", "--bom"], b"a"),
        (b"\xef\xbb\xbfa", ["-t", "utf-8 with bom"], b"a"),
    ],
)
def test_convert(expected, args, input):
    result = CliRunner().invoke(main, ["convert"] + args, input=input)
    assert result.exit_code == 0
    assert result.stdout_bytes == expected


def test_convert_files(tmp_path):
    src = tmp_path / "src.txt"
    dest = tmp_path / "dest.txt"
    src.write_bytes(EUCJPMS)
    result = CliRunner().invoke(
        main, ["convert", "-f", "eucJP-ms", "-t", "UTF-16LE", str(src), str(dest)]
    )
    assert result.exit_code == 0
    assert dest.read_bytes() == EUCJPMS_TEXT.encode("utf-16le")


@pytest.mark.parametrize(
    ("args",),
    [
        (["-f", "latin-1"],),
        (["-t", "ebcdic"],),
        (["-t", "autodetect"],),
    ],
)
def test_convert_bad_charset(args):
    result = CliRunner().invoke(main, ["convert"] + args, input=b"a")
    assert result.exit_code == 2


def test_detect(tmp_path):
    paths = []
    for name, data in [
        ("cp932.txt", CP932),
        ("utf8.txt", "日本語のテキストです".encode("utf-8")),
        ("bom.txt", b"\xff\xfe\x00\x00a\x00\x00\x00"),
    ]:
        path = tmp_path / name
        path.write_bytes(data)
        paths.append(str(path))

    result = CliRunner().invoke(main, ["detect"] + paths)
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        f"{paths[0]}: Shift_JIS",
        f"{paths[1]}: UTF-8",
        f"{paths[2]}: UTF-32LE",
    ]


@pytest.mark.parametrize(
    ("expected", "args"),
    [
        (
            ["亜\tU+4E9C\t16-1", "\u9ad9\tU+9AD9\t-", "\U0002a602\tU+2A602\t2-94-80"],
            ["亜\u9ad9\U0002a602"],
        ),
        (
            ["亜\tU+4E9C\t16-1", "\u9ad9\tU+9AD9\t118-94", "a\tU+0061\t-"],
            ["-c", "shift_jis", "亜\u9ad9a"],
        ),
    ],
)
def test_kuten(expected, args):
    result = CliRunner().invoke(main, ["kuten"] + args)
    assert result.exit_code == 0
    assert result.output.splitlines() == expected
