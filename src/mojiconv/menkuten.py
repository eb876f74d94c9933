import collections.abc
import enum
import re
import typing


class InvalidMenKuTenError(ValueError):
    @property
    def message(self):
        return self.args[0]


class JISKanjiLevel(enum.IntEnum):
    NONE = 0
    """
    Not a kanji, or the code does not designate a JIS X 0208 / 0213
    position at all.
    """
    LEVEL_1 = 1
    """JIS level 1 kanji (第1水準)."""
    LEVEL_2 = 2
    """JIS level 2 kanji (第2水準)."""
    LEVEL_3 = 3
    """JIS X 0213 level 3 kanji (第3水準), all in the first plane."""
    LEVEL_4 = 4
    """JIS X 0213 level 4 kanji (第4水準), i.e. everything in the second plane."""


class MenKuTen(typing.NamedTuple):
    men: int
    """plane; 1 or 2"""
    ku: int
    """row"""
    ten: int
    """cell"""

    @property
    def text(self) -> str:
        if self.men == 1:
            return f"{self.ku}-{self.ten}"
        return f"{self.men}-{self.ku}-{self.ten}"

    def __str__(self) -> str:
        return self.text


MenKuTenLike = typing.Union[
    MenKuTen,
    str,
    typing.Tuple[int, int],
    typing.Tuple[int, int, int],
    typing.Mapping[str, typing.Any],
]

men_ku_ten_regexp = re.compile(r"\s*(?:(\d+)-)?(\d+)-(\d+)\s*$")

# plane-2 rows below 78 that JIS X 0213 actually allocates
PLANE2_SPARSE_ROWS = frozenset((1, 3, 4, 5, 8, 12, 13, 14, 15))


def _parse_men_ku_ten_repr(v: str) -> MenKuTen:
    m = men_ku_ten_regexp.match(v)
    if m is None:
        raise InvalidMenKuTenError(f"invalid men-ku-ten string: {v}")
    return MenKuTen(
        men=int(m.group(1)) if m.group(1) is not None else 1,
        ku=int(m.group(2)),
        ten=int(m.group(3)),
    )


def parse_men_ku_ten(value: MenKuTenLike) -> MenKuTen:
    """
    Resolves ``value`` into a :class:`MenKuTen`.

    Accepts a :class:`MenKuTen`, a ``"ku-ten"`` or ``"men-ku-ten"`` string,
    a ``(ku, ten)`` or ``(men, ku, ten)`` tuple, or a mapping holding either
    ``text`` or ``men`` / ``ku`` / ``ten``.  The plane defaults to 1.
    """
    mkt: MenKuTen
    if isinstance(value, MenKuTen):
        mkt = value
    elif isinstance(value, str):
        mkt = _parse_men_ku_ten_repr(value)
    elif isinstance(value, collections.abc.Mapping):
        text = value.get("text")
        if isinstance(text, str) and text:
            mkt = _parse_men_ku_ten_repr(text)
        else:
            mkt = MenKuTen(
                men=value.get("men") or 1,
                ku=value.get("ku") or 0,
                ten=value.get("ten") or 0,
            )
    elif isinstance(value, tuple) and len(value) == 2:
        mkt = MenKuTen(1, value[0], value[1])
    elif isinstance(value, tuple) and len(value) == 3:
        mkt = MenKuTen(value[0], value[1], value[2])
    else:
        raise InvalidMenKuTenError(f"unsupported men-ku-ten value: {value!r}")

    for name, v in zip(MenKuTen._fields, mkt):
        if not isinstance(v, int) or isinstance(v, bool) or v < 1:
            raise InvalidMenKuTenError(f"invalid {name} value: {v!r}")
    return mkt


def _split_sjis_code(code: int, plane2: bool) -> typing.Tuple[int, int, int]:
    s1 = code >> 8
    s2 = code & 0xFF
    men = 1
    if not plane2 or s1 < 0xF0:
        # row 63 onwards continues at 0xE0 instead of 0xA0
        if s1 < 0xE0:
            s1 -= 0x81
        else:
            s1 -= 0xC1
    else:
        men = 2
        if ((s1 == 0xF0 or s1 == 0xF2) and s2 < 0x9F) or s1 == 0xF1:
            # rows 1, 3, 4, 5 and 8
            s1 -= 0xF0
        elif (s1 == 0xF4 and s2 < 0x9F) or s1 < 0xF4:
            # rows 12 to 15
            s1 -= 0xED
        else:
            # rows 78 to 94
            s1 -= 0xCE

    if s2 < 0x9F:
        ku = s1 * 2 + 1
        # 0x7F is never a trail byte
        if s2 < 0x80:
            ten = s2 - 0x40 + 1
        else:
            ten = s2 - 0x40
    else:
        ku = s1 * 2 + 2
        ten = s2 - 0x9F + 1
    return men, ku, ten


def to_men_ku_ten_from_sjis2004_code(
    code: typing.Optional[int],
) -> typing.Optional[MenKuTen]:
    """
    Converts a 2-byte Shift_JIS-2004 code into its JIS X 0213 plane, row
    and cell.  Returns ``None`` for single byte codes.
    """
    if not code or code < 0x100:
        return None
    return MenKuTen(*_split_sjis_code(code, plane2=True))


def to_ku_ten_from_sjis_code(code: typing.Optional[int]) -> typing.Optional[MenKuTen]:
    """
    Converts a 2-byte Shift_JIS code into its row and cell.  Lead bytes above
    0xEF keep counting rows past 94, which is where CP932 places the user
    defined area and the IBM extensions.
    """
    if not code or code < 0x100:
        return None
    return MenKuTen(*_split_sjis_code(code, plane2=False))


def to_sjis2004_code_from_men_ku_ten(menkuten: MenKuTenLike) -> typing.Optional[int]:
    m, k, t = parse_men_ku_ten(menkuten)

    s1 = -1
    s2 = -1
    # rows past 94 address the CP932 extension rows
    if m == 1:
        if 1 <= k <= 62:
            s1 = (k + 257) // 2
        elif 63 <= k:
            s1 = (k + 385) // 2
    elif m == 2:
        if k in PLANE2_SPARSE_ROWS:
            s1 = (k + 479) // 2 - (k // 8) * 3
        elif 78 <= k:
            s1 = (k + 411) // 2

    if k % 2 == 1:
        if 1 <= t <= 63:
            s2 = t + 63
        elif 64 <= t:
            s2 = t + 64
    else:
        s2 = t + 158

    if s1 == -1 or s2 == -1:
        return None
    return (s1 << 8) | s2


def to_sjis_code_from_ku_ten(kuten: MenKuTenLike) -> typing.Optional[int]:
    return to_sjis2004_code_from_men_ku_ten(kuten)


def to_jis_kanji_level_from_sjis_code(code: typing.Optional[int]) -> JISKanjiLevel:
    mkt = to_men_ku_ten_from_sjis2004_code(code)
    if mkt is None:
        return JISKanjiLevel.NONE
    if mkt.men > 1:
        return JISKanjiLevel.LEVEL_4
    if mkt.ku < 14:
        return JISKanjiLevel.NONE
    if mkt.ku < 16:
        return JISKanjiLevel.LEVEL_3
    if mkt.ku < 47:
        return JISKanjiLevel.LEVEL_1
    if mkt.ku == 47:
        return JISKanjiLevel.LEVEL_1 if mkt.ten < 52 else JISKanjiLevel.LEVEL_3
    if mkt.ku < 84:
        return JISKanjiLevel.LEVEL_2
    if mkt.ku == 84:
        return JISKanjiLevel.LEVEL_2 if mkt.ten < 7 else JISKanjiLevel.LEVEL_3
    if mkt.ku < 95:
        return JISKanjiLevel.LEVEL_3
    return JISKanjiLevel.NONE


def is_regular_men_ku_ten(menkuten: MenKuTenLike) -> bool:
    """
    Tells whether the position is allocated by JIS X 0208 / 0213, as opposed
    to one that only exists in vendor extensions.  Never raises.
    """
    try:
        m, k, t = parse_men_ku_ten(menkuten)
    except InvalidMenKuTenError:
        return False

    if m == 1:
        if not 1 <= k <= 94:
            return False
    elif m == 2:
        if not (k in PLANE2_SPARSE_ROWS or 78 <= k <= 94):
            return False
    else:
        return False
    return 1 <= t <= 94
