import logging
import re
import typing

from . import cp932, eucjis2004, eucjpms, sjis2004
from .unicode import (
    BinaryLike,
    from_code_points,
    get_charset_from_bom,
    iter_code_points,
    to_code_points_from_utf_binary,
    to_utf_binary_from_code_points,
)

logger = logging.getLogger(__name__)

AUTODETECT = "autodetect"
WITH_BOM = " with BOM"

CHARSETS: typing.Sequence[str] = (
    "UTF-8",
    "UTF-16LE",
    "UTF-16BE",
    "UTF-32LE",
    "UTF-32BE",
    "Shift_JIS",
    "Shift_JIS-2004",
    "eucJP-ms",
    "EUC-JP",
    "EUC-JIS-2004",
)

charset_aliases: typing.Sequence[typing.Tuple[typing.Pattern[str], str]] = [
    (re.compile(p, re.IGNORECASE), name)
    for p, name in (
        (r"unicode-1-1-utf-8|utf[-_]?8", "UTF-8"),
        (
            r"csunicode|iso-10646-ucs-2|ucs-2|unicode|unicodefeff"
            r"|utf[-_]?16(?:[-_]?le)?",
            "UTF-16LE",
        ),
        (r"unicodefffe|utf[-_]?16[-_]?be", "UTF-16BE"),
        (r"utf32_littleendian|utf[-_]?32(?:[-_]?le)?", "UTF-32LE"),
        (r"utf32_bigendian|utf[-_]?32[-_]?be", "UTF-32BE"),
        (
            r"csshiftjis|ms_kanji|(?:cp|ms)932|shift[-_]?jis|sjis"
            r"|windows[-_]?31j|x-sjis",
            "Shift_JIS",
        ),
        (r"sjis[-_]?2004|shift[-_]?jis[-_]?2004", "Shift_JIS-2004"),
        (r"euc[-_]?jp[-_]?ms", "eucJP-ms"),
        (r"euc[-_]?jp|cseucpkdfmtjapanese|x-euc-jp", "EUC-JP"),
        (r"euc[-_]?jis[-_]?200[04]|euc[-_]?jp[-_]?2004", "EUC-JIS-2004"),
    )
]

bom_token_regexp = re.compile(r"^bom\s+|\s+(?:with\s+)?bom$", re.IGNORECASE)


class LegacyCharset(typing.NamedTuple):
    name: str
    encode: typing.Callable[[str], bytes]
    decode: typing.Callable[[BinaryLike], str]
    is_encodable: typing.Callable[[int], bool]


legacy_charsets: typing.Mapping[str, LegacyCharset] = {
    "Shift_JIS": LegacyCharset(
        "Shift_JIS",
        cp932.to_cp932_binary,
        cp932.from_cp932_array,
        cp932.is_encodable,
    ),
    "Shift_JIS-2004": LegacyCharset(
        "Shift_JIS-2004",
        sjis2004.to_sjis2004_binary,
        sjis2004.from_sjis2004_array,
        sjis2004.is_encodable,
    ),
    "eucJP-ms": LegacyCharset(
        "eucJP-ms",
        eucjpms.to_eucjpms_binary,
        eucjpms.from_eucjpms_binary,
        eucjpms.is_encodable,
    ),
    "EUC-JIS-2004": LegacyCharset(
        "EUC-JIS-2004",
        eucjis2004.to_eucjis2004_binary,
        eucjis2004.from_eucjis2004_binary,
        eucjis2004.is_encodable,
    ),
    "EUC-JP": LegacyCharset(
        "EUC-JP",
        eucjis2004.to_eucjis2004_binary,
        eucjis2004.from_eucjis2004_binary,
        eucjis2004.is_encodable,
    ),
}

# tried in this order; the earlier one wins a tie
autodetect_candidates: typing.Sequence[str] = (
    "Shift_JIS",
    "eucJP-ms",
    "EUC-JIS-2004",
    "UTF-8",
    "UTF-16LE",
)


def normalize_charset_name(name: str) -> str:
    """
    Maps an alias such as ``sjis``, ``cp932`` or ``utf8`` to its canonical
    charset name.  A ``bom`` token before or after the name comes back as
    a trailing ``" with BOM"``.  Unknown names are returned as they are.
    """
    with_bom = False
    x = name.strip()
    if bom_token_regexp.search(x):
        with_bom = True
        x = bom_token_regexp.sub("", x)

    for pattern, canonical in charset_aliases:
        if pattern.fullmatch(x):
            x = canonical
            break

    if with_bom:
        x += WITH_BOM
    return x


def split_bom_suffix(charset: str) -> typing.Tuple[str, bool]:
    if charset.endswith(WITH_BOM):
        return charset[: -len(WITH_BOM)], True
    return charset, False


def is_utf(charset: str) -> bool:
    return charset.upper().startswith("UTF-")


def _classify(c: int) -> int:
    if 0x41 <= c <= 0x5A or 0x61 <= c <= 0x7A:
        return 1
    elif 0x30 <= c <= 0x39:
        return 2
    elif 0x3041 <= c <= 0x3093:
        # hiragana
        return 3
    elif 0x30A1 <= c <= 0x30F3:
        # katakana
        return 4
    elif 0xFF21 <= c <= 0xFF3A or 0xFF41 <= c <= 0xFF5A:
        return 5
    elif 0xFF10 <= c <= 0xFF19:
        return 6
    elif 0xFF61 <= c <= 0xFF9F:
        # half-width katakana
        return 7
    elif 0x3400 <= c <= 0x9FFF or 0x20000 <= c <= 0x2FA1F:
        # CJK unified ideographs, extension A and the supplementary planes
        return 8
    return 0


def count_word(codepoints: typing.Iterable[int]) -> int:
    """
    Counts adjacent pairs of characters that fall into the same class
    (letters, digits, kana, kanji and so on).  Text that is decoded with the
    right charset scores higher than mojibake.
    """
    count = 0
    prev = 0
    for c in codepoints:
        t = _classify(c)
        if t != 0 and t == prev:
            count += 1
        prev = t
    return count


def _decode_candidate(binary: BinaryLike, charset: str) -> str:
    if is_utf(charset):
        codepoints = to_code_points_from_utf_binary(binary, charset)
        return from_code_points(codepoints or ())
    return legacy_charsets[charset].decode(binary)


def _autodetect(binary: BinaryLike) -> typing.Tuple[str, str]:
    bom_charset = get_charset_from_bom(binary)
    if bom_charset is not None:
        return bom_charset, _decode_candidate(binary, bom_charset)

    scored: typing.List[typing.Tuple[int, str, str]] = []
    for charset in autodetect_candidates:
        text = _decode_candidate(binary, charset)
        count = count_word(iter_code_points(text))
        logger.debug("Autodetect candidate %s scored %d", charset, count)
        scored.append((count, charset, text))
    # max() keeps the earliest of equal scores
    _, charset, text = max(scored, key=lambda s: s[0])
    return charset, text


def detect_charset(binary: BinaryLike) -> str:
    """Returns the canonical name of the charset ``decode`` would pick."""
    return _autodetect(binary)[0]


def encode(text: str, charset: str, with_bom: bool = False) -> typing.Optional[bytes]:
    """
    Encodes ``text`` in ``charset``.  Characters the charset cannot represent
    become ``?``.  Returns ``None`` if the charset is unknown.
    """
    ncharset, bom_in_name = split_bom_suffix(normalize_charset_name(charset))
    if is_utf(ncharset):
        return to_utf_binary_from_code_points(
            iter_code_points(text), ncharset, with_bom or bom_in_name
        )
    legacy = legacy_charsets.get(ncharset)
    if legacy is None:
        return None
    return legacy.encode(text)


def decode(binary: BinaryLike, charset: str = AUTODETECT) -> typing.Optional[str]:
    """
    Decodes ``binary``.  With ``autodetect`` a byte order mark decides the
    charset, and otherwise the most plausible reading among Shift_JIS,
    eucJP-ms, EUC-JIS-2004, UTF-8 and UTF-16LE wins.  Returns ``None`` if
    the charset is unknown.
    """
    if not charset or charset.strip().lower() == AUTODETECT:
        return _autodetect(binary)[1]

    ncharset, _ = split_bom_suffix(normalize_charset_name(charset))
    if is_utf(ncharset):
        codepoints = to_code_points_from_utf_binary(binary, ncharset)
        if codepoints is None:
            return None
        return from_code_points(codepoints)
    legacy = legacy_charsets.get(ncharset)
    if legacy is None:
        return None
    return legacy.decode(binary)
