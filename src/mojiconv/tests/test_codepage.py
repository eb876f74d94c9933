import concurrent.futures
import types

import pytest
from mojiconv import codepage


@pytest.mark.parametrize(
    ("expected", "base", "packed"),
    [
        ([(0x8140, 0x61), (0x8141, 0x62)], 0x8140, "ab"),
        ([(0x8140, 0x61), (0x8143, 0x62)], 0x8140, "a2b"),
        ([(0x8140, 0x61), (0x814D, 0x62)], 0x8140, "a12b"),
        ([(0x8142, 0x3042)], 0x8140, "2あ"),
        ([], 0x8140, "5"),
    ],
)
def test_unpack_double_byte(expected, base, packed):
    assert list(codepage.unpack_double_byte(base, packed)) == expected


def test_load_packed_table():
    module = types.SimpleNamespace(
        SINGLE_BYTE={0x41: 0x41, 0xA1: 0xFF61},
        DOUBLE_BYTE_BASE=0x8140,
        DOUBLE_BYTE_PACKED=("　、", "1あ"),
        DOUBLE_BYTE_EXPLICIT={0x8150: 0x30, 0x82F5: (0x304B, 0x309A)},
    )
    assert codepage.load_packed_table(module) == {
        0x41: 0x41,
        0xA1: 0xFF61,
        0x8140: 0x3000,
        0x8141: 0x3001,
        0x8143: 0x3042,
        0x8150: 0x30,
        0x82F5: (0x304B, 0x309A),
    }


@pytest.mark.parametrize(
    ("expected", "decoding_map", "duplicates", "overrides"),
    [
        ({0x41: 0x41, 0x42: 0x8140}, {0x41: 0x41, 0x8140: 0x42}, (), None),
        # the smallest code wins
        ({0x2252: 0x81E0}, {0x8790: 0x2252, 0x81E0: 0x2252}, (), None),
        ({0x2170: 0xFA40}, {0xEEEF: 0x2170, 0xFA40: 0x2170}, (0xEEEF,), None),
        ({}, {0x82F5: (0x304B, 0x309A)}, (), None),
        ({0x5C: 0x5C, 0xA5: 0x5C}, {0x5C: 0x5C}, (), {0xA5: 0x5C}),
        (
            {0xFF5E: 0x8160, 0x301C: 0x8160},
            {0x8160: 0xFF5E},
            (),
            {0x301C: 0x8160},
        ),
    ],
)
def test_build_encoding_map(expected, decoding_map, duplicates, overrides):
    assert (
        codepage.build_encoding_map(decoding_map, duplicates, overrides) == expected
    )


def test_code_page_table_is_lazy():
    calls = []

    def loader():
        calls.append(None)
        return {0x41: 0x41, 0x8140: 0x3000, 0x8141: 0x3000}

    table = codepage.CodePageTable("test", loader, duplicates=(0x8140,))
    assert not table.is_built
    assert calls == []

    assert table.decoding_map[0x8140] == 0x3000
    assert table.is_built
    assert table.encoding_map == {0x41: 0x41, 0x3000: 0x8141}
    assert len(calls) == 1


def test_code_page_table_is_read_only():
    table = codepage.CodePageTable("test", lambda: {0x41: 0x41})
    with pytest.raises(TypeError):
        table.decoding_map[0x42] = 0x42  # type: ignore
    with pytest.raises(TypeError):
        table.encoding_map[0x42] = 0x42  # type: ignore


def test_code_page_table_builds_once():
    calls = []

    def loader():
        calls.append(None)
        return {c: c for c in range(0x100)}

    table = codepage.CodePageTable("test", loader)
    with concurrent.futures.ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(lambda _: table.encoding_map[0x41], range(64)))
    assert results == [0x41] * 64
    assert len(calls) == 1


def test_code_page_table_repr():
    table = codepage.CodePageTable("test", dict)
    assert repr(table) == "<CodePageTable 'test' built=False>"
