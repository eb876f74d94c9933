import pytest
import mojiconv
from mojiconv.menkuten import MenKuTen, JISKanjiLevel


@pytest.mark.parametrize(
    ("expected", "input"),
    [
        (MenKuTen(1, 16, 1), "1-16-1"),
        (MenKuTen(1, 16, 1), "16-1"),
        (MenKuTen(2, 94, 86), " 2-94-86 "),
        (MenKuTen(2, 1, 1), {"text": "2-1-1"}),
        (MenKuTen(1, 3, 4), {"ku": 3, "ten": 4}),
        (MenKuTen(2, 3, 4), {"men": 2, "ku": 3, "ten": 4}),
        (MenKuTen(1, 16, 1), (16, 1)),
        (MenKuTen(2, 94, 86), (2, 94, 86)),
        (MenKuTen(1, 119, 12), MenKuTen(1, 119, 12)),
    ],
)
def test_parse_men_ku_ten(expected, input):
    assert mojiconv.parse_men_ku_ten(input) == expected


@pytest.mark.parametrize(
    ("input",),
    [
        ("",),
        ("abc",),
        ("1-2-3-4",),
        ("0-1",),
        ("1-0",),
        ({"ku": 0, "ten": 1},),
        ({},),
        ((1,),),
        ((True, 1),),
        ((1.5, 1),),
        (None,),
        (12,),
    ],
)
def test_parse_men_ku_ten_invalid(input):
    with pytest.raises(mojiconv.InvalidMenKuTenError):
        mojiconv.parse_men_ku_ten(input)


def test_invalid_men_ku_ten_error_is_value_error():
    with pytest.raises(ValueError) as e:
        mojiconv.parse_men_ku_ten("abc")
    assert "abc" in e.value.message


@pytest.mark.parametrize(
    ("expected", "input"),
    [
        ("16-1", MenKuTen(1, 16, 1)),
        ("2-1-1", MenKuTen(2, 1, 1)),
        ("118-94", MenKuTen(1, 118, 94)),
    ],
)
def test_men_ku_ten_text(expected, input):
    assert input.text == expected
    assert str(input) == expected


@pytest.mark.parametrize(
    ("expected", "code"),
    [
        (MenKuTen(1, 16, 1), 0x889F),
        (MenKuTen(1, 13, 1), 0x8740),
        (MenKuTen(1, 14, 1), 0x879F),
        (MenKuTen(1, 94, 94), 0xEFFC),
        (MenKuTen(2, 1, 1), 0xF040),
        (MenKuTen(2, 8, 1), 0xF09F),
        (MenKuTen(2, 12, 1), 0xF29F),
        (MenKuTen(2, 78, 1), 0xF49F),
        (MenKuTen(2, 94, 86), 0xFCF4),
        (None, 0x41),
        (None, 0),
        (None, None),
    ],
)
def test_to_men_ku_ten_from_sjis2004_code(expected, code):
    assert mojiconv.to_men_ku_ten_from_sjis2004_code(code) == expected


@pytest.mark.parametrize(
    ("expected", "code"),
    [
        (MenKuTen(1, 16, 1), 0x889F),
        (MenKuTen(1, 13, 1), 0x8740),
        (MenKuTen(1, 95, 1), 0xF040),
        (MenKuTen(1, 115, 1), 0xFA40),
        (MenKuTen(1, 118, 94), 0xFBFC),
        (MenKuTen(1, 119, 12), 0xFC4B),
        (None, 0xA1),
        (None, None),
    ],
)
def test_to_ku_ten_from_sjis_code(expected, code):
    assert mojiconv.to_ku_ten_from_sjis_code(code) == expected


@pytest.mark.parametrize(
    ("expected", "input"),
    [
        (0x889F, "1-16-1"),
        (0x8740, "13-1"),
        (0x8780, "13-64"),
        (0xEFFC, "1-94-94"),
        (0xF040, "2-1-1"),
        (0xF09F, "2-8-1"),
        (0xF29F, "2-12-1"),
        (0xF49F, "2-78-1"),
        (0xFCF4, "2-94-86"),
        (0xFC4B, "119-12"),
        (0xFC4B, (119, 12)),
        (None, "2-2-1"),
        (None, "3-1-1"),
    ],
)
def test_to_sjis2004_code_from_men_ku_ten(expected, input):
    assert mojiconv.to_sjis2004_code_from_men_ku_ten(input) == expected


def test_to_sjis2004_code_from_men_ku_ten_invalid():
    with pytest.raises(mojiconv.InvalidMenKuTenError):
        mojiconv.to_sjis2004_code_from_men_ku_ten("x-y")


@pytest.mark.parametrize(
    ("expected", "input"),
    [
        (0x8740, "13-1"),
        (0xFA40, "115-1"),
        (0xFBFC, {"ku": 118, "ten": 94}),
    ],
)
def test_to_sjis_code_from_ku_ten(expected, input):
    assert mojiconv.to_sjis_code_from_ku_ten(input) == expected


@pytest.mark.parametrize(
    ("expected", "code"),
    [
        (JISKanjiLevel.NONE, None),
        (JISKanjiLevel.NONE, 0x41),
        # ①
        (JISKanjiLevel.NONE, 0x8740),
        # 俱
        (JISKanjiLevel.LEVEL_3, 0x879F),
        # 亜
        (JISKanjiLevel.LEVEL_1, 0x889F),
        (JISKanjiLevel.LEVEL_1, 0x9872),
        (JISKanjiLevel.LEVEL_3, 0x9873),
        (JISKanjiLevel.LEVEL_2, 0x989F),
        # 熙
        (JISKanjiLevel.LEVEL_2, 0xEAA4),
        (JISKanjiLevel.LEVEL_3, 0xEAA5),
        # 鷗
        (JISKanjiLevel.LEVEL_3, 0xEFE3),
        (JISKanjiLevel.LEVEL_4, 0xF040),
        (JISKanjiLevel.LEVEL_4, 0xFCF4),
    ],
)
def test_to_jis_kanji_level_from_sjis_code(expected, code):
    assert mojiconv.to_jis_kanji_level_from_sjis_code(code) is expected


@pytest.mark.parametrize(
    ("expected", "input"),
    [
        (True, "1-1-1"),
        (True, "94-94"),
        (True, "2-1-1"),
        (True, "2-15-94"),
        (True, "2-78-1"),
        (False, "1-95-1"),
        (False, "119-12"),
        (False, "2-2-1"),
        (False, "2-77-1"),
        (False, "1-1-95"),
        (False, "3-1-1"),
        (False, "abc"),
        (False, None),
    ],
)
def test_is_regular_men_ku_ten(expected, input):
    assert mojiconv.is_regular_men_ku_ten(input) is expected


def test_men_ku_ten_round_trip():
    for men in (1, 2):
        for ku in range(1, 95):
            for ten in range(1, 95):
                mkt = MenKuTen(men, ku, ten)
                if not mojiconv.is_regular_men_ku_ten(mkt):
                    continue
                code = mojiconv.to_sjis2004_code_from_men_ku_ten(mkt)
                assert mojiconv.to_men_ku_ten_from_sjis2004_code(code) == mkt


def test_ku_ten_round_trip():
    code = mojiconv.to_sjis_code_from_ku_ten({"ku": 1, "ten": 1})
    assert code == 0x8140
    assert mojiconv.to_ku_ten_from_sjis_code(code) == MenKuTen(1, 1, 1)
