"""
A converter between Unicode and the Japanese legacy encodings Shift_JIS
(Windows-31J / CP932), Shift_JIS-2004, eucJP-ms, EUC-JP and EUC-JIS-2004,
along with the men-ku-ten (面区点) arithmetic of JIS X 0208 / JIS X 0213
and a charset autodetection heuristic.

This library makes use of the data from the following entities:

* Windows-31J mapping table (cp932.txt)

    Published by: Microsoft Corporation
    Source: https://www.unicode.org/Public/MAPPINGS/VENDORS/MICSFT/WINDOWS/CP932.TXT
    Copyright / license: Unicode, Inc. terms of use

* JIS X 0213:2004 vs Unicode mapping table (sjis-0213-2004-std.txt)

    Published by: x0213.org
    Source: http://x0213.org/codetable/
    Copyright / license: freely redistributable

* eucJP-ms character set definition

    Published by: TOG/JVC CDE/Motif Technical WG
    Source: http://www.opengroup.or.jp/jvc/cde/appendix.html

"""

from .encode import (  # noqa: F401
    CHARSETS,
    count_word,
    decode,
    detect_charset,
    encode,
    normalize_charset_name,
)
from .menkuten import (  # noqa: F401
    InvalidMenKuTenError,
    JISKanjiLevel,
    MenKuTen,
    is_regular_men_ku_ten,
    parse_men_ku_ten,
    to_jis_kanji_level_from_sjis_code,
    to_ku_ten_from_sjis_code,
    to_men_ku_ten_from_sjis2004_code,
    to_sjis2004_code_from_men_ku_ten,
    to_sjis_code_from_ku_ten,
)
from .unicode import (  # noqa: F401
    cut_text_for_code_point,
    cut_text_for_width,
    from_moji_array,
    get_width,
    get_width_from_code_point,
    to_moji_array,
)
