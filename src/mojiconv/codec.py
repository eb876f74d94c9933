"""
Hooks the legacy charsets into the :mod:`codecs` registry.

After :func:`register` has been called, every legacy charset can be looked
up under a ``mojiconv_`` prefixed alias::

    >>> import mojiconv.codec
    >>> mojiconv.codec.register()
    >>> "髙".encode("mojiconv_cp932")
    b'\\xfb\\xfc'

Unmappable characters raise :class:`UnicodeEncodeError` under the
``strict`` error handler and become ``?`` under any other.  Decoding never
fails, not even under ``strict``: malformed or unmapped bytes decode to
``?``.
"""

import codecs
import logging
import threading
import typing

from .encode import LegacyCharset, legacy_charsets, normalize_charset_name
from .euc import SS3
from .sjis import is_lead_byte

logger = logging.getLogger(__name__)

PREFIX = "mojiconv_"

_lock = threading.Lock()
_registered = False
_codec_infos: typing.Dict[str, codecs.CodecInfo] = {}


def sjis_complete_length(data: bytes) -> int:
    i = 0
    n = len(data)
    while i < n:
        width = 2 if is_lead_byte(data[i]) else 1
        if i + width > n:
            break
        i += width
    return i


def euc_complete_length(data: bytes) -> int:
    i = 0
    n = len(data)
    while i < n:
        x = data[i]
        if x < 0x80:
            width = 1
        elif x == SS3:
            width = 3
        else:
            width = 2
        if i + width > n:
            break
        i += width
    return i


class Codec(codecs.Codec):
    def __init__(self, charset: LegacyCharset) -> None:
        self.charset = charset

    def encode(self, input: str, errors: str = "strict") -> typing.Tuple[bytes, int]:
        if errors == "strict":
            for i, c in enumerate(input):
                if not self.charset.is_encodable(ord(c)):
                    raise UnicodeEncodeError(
                        PREFIX + self.charset.name,
                        input,
                        i,
                        i + 1,
                        "character maps to <undefined>",
                    )
        return self.charset.encode(input), len(input)

    def decode(self, input: bytes, errors: str = "strict") -> typing.Tuple[str, int]:
        # malformed or unmapped bytes always become "?", whatever ``errors`` says
        data = bytes(input)
        return self.charset.decode(data), len(data)


def make_codec_info(charset: LegacyCharset) -> codecs.CodecInfo:
    codec = Codec(charset)
    complete_length = (
        sjis_complete_length
        if charset.name.startswith("Shift_JIS")
        else euc_complete_length
    )

    class IncrementalEncoder(codecs.IncrementalEncoder):
        def encode(self, input: str, final: bool = False) -> bytes:
            return codec.encode(input, self.errors)[0]

    class IncrementalDecoder(codecs.BufferedIncrementalDecoder):
        def _buffer_decode(
            self, input: bytes, errors: str, final: bool
        ) -> typing.Tuple[str, int]:
            n = len(input) if final else complete_length(input)
            return codec.decode(input[:n], errors)[0], n

    class StreamWriter(codecs.StreamWriter):
        def encode(
            self, input: str, errors: str = "strict"
        ) -> typing.Tuple[bytes, int]:
            return codec.encode(input, errors)

    class StreamReader(codecs.StreamReader):
        def decode(
            self, input: bytes, errors: str = "strict"
        ) -> typing.Tuple[str, int]:
            n = complete_length(input)
            return codec.decode(input[:n], errors)[0], n

    return codecs.CodecInfo(
        name=PREFIX + charset.name,
        encode=codec.encode,
        decode=codec.decode,
        incrementalencoder=IncrementalEncoder,
        incrementaldecoder=IncrementalDecoder,
        streamreader=StreamReader,
        streamwriter=StreamWriter,
    )


def resolve_charset(alias: str) -> typing.Optional[LegacyCharset]:
    for candidate in (alias, alias.replace("_", "-")):
        charset = legacy_charsets.get(normalize_charset_name(candidate))
        if charset is not None:
            return charset
    return None


def find_codecs(encoding: str) -> typing.Optional[codecs.CodecInfo]:
    name = encoding.lower().replace("-", "_").replace(" ", "_")
    if not name.startswith(PREFIX):
        return None
    charset = resolve_charset(name[len(PREFIX) :])
    if charset is None:
        return None
    with _lock:
        info = _codec_infos.get(charset.name)
        if info is None:
            info = _codec_infos[charset.name] = make_codec_info(charset)
    return info


def register() -> None:
    global _registered

    with _lock:
        if _registered:
            return
        codecs.register(find_codecs)
        _registered = True
    logger.debug("Registered codec search function for %s*", PREFIX)
