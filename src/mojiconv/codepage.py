import logging
import threading
import types
import typing

logger = logging.getLogger(__name__)

DecodedValue = typing.Union[int, typing.Tuple[int, ...]]


class PackedTableModule(typing.Protocol):
    SINGLE_BYTE: typing.Mapping[int, int]
    DOUBLE_BYTE_BASE: int
    DOUBLE_BYTE_PACKED: typing.Sequence[str]
    DOUBLE_BYTE_EXPLICIT: typing.Mapping[int, DecodedValue]


def unpack_double_byte(
    base: int, packed: str
) -> typing.Iterator[typing.Tuple[int, int]]:
    """
    Yields ``(code, codepoint)`` pairs from the packed form, where each
    character stands for the next code and a run of ASCII digits skips that
    many unassigned codes.
    """
    code = base
    skip = 0
    for c in packed:
        if "0" <= c <= "9":
            skip = skip * 10 + (ord(c) - 0x30)
            continue
        code += skip
        skip = 0
        yield code, ord(c)
        code += 1


def load_packed_table(module: PackedTableModule) -> typing.Dict[int, DecodedValue]:
    table: typing.Dict[int, DecodedValue] = dict(module.SINGLE_BYTE)
    table.update(
        unpack_double_byte(module.DOUBLE_BYTE_BASE, "".join(module.DOUBLE_BYTE_PACKED))
    )
    table.update(module.DOUBLE_BYTE_EXPLICIT)
    return table


def build_encoding_map(
    decoding_map: typing.Mapping[int, DecodedValue],
    duplicates: typing.Container[int] = (),
    overrides: typing.Optional[typing.Mapping[int, int]] = None,
) -> typing.Dict[int, int]:
    """
    Inverts ``decoding_map``.  Codes in ``duplicates`` and sequence values
    are left out, the smallest code wins when several codes share a value,
    and ``overrides`` are applied last.
    """
    encoding_map: typing.Dict[int, int] = {}
    for code in sorted(decoding_map):
        if code in duplicates:
            continue
        v = decoding_map[code]
        if isinstance(v, tuple):
            continue
        encoding_map.setdefault(v, code)
    if overrides:
        encoding_map.update(overrides)
    return encoding_map


class CodePageTable:
    """
    A pair of lookup tables between legacy codes and their decoded values,
    built on first use and shared for the rest of the process.
    """

    name: str
    _loader: typing.Callable[[], typing.Mapping[int, DecodedValue]]
    _duplicates: typing.FrozenSet[int]
    _overrides: typing.Mapping[int, int]
    _lock: threading.Lock
    _built: bool
    _decoding_map: typing.Mapping[int, DecodedValue]
    _encoding_map: typing.Mapping[int, int]

    def __init__(
        self,
        name: str,
        loader: typing.Callable[[], typing.Mapping[int, DecodedValue]],
        duplicates: typing.Iterable[int] = (),
        overrides: typing.Optional[typing.Mapping[int, int]] = None,
    ) -> None:
        self.name = name
        self._loader = loader
        self._duplicates = frozenset(duplicates)
        self._overrides = dict(overrides) if overrides else {}
        self._lock = threading.Lock()
        self._built = False
        self._decoding_map = types.MappingProxyType({})
        self._encoding_map = types.MappingProxyType({})

    def __repr__(self) -> str:
        return f"<CodePageTable {self.name!r} built={self._built}>"

    @property
    def is_built(self) -> bool:
        return self._built

    def _build(self) -> None:
        with self._lock:
            if self._built:
                return
            decoding_map = dict(self._loader())
            encoding_map = build_encoding_map(
                decoding_map, self._duplicates, self._overrides
            )
            self._decoding_map = types.MappingProxyType(decoding_map)
            self._encoding_map = types.MappingProxyType(encoding_map)
            self._built = True
        logger.debug(
            "Built %s table: %d decoding, %d encoding entries",
            self.name,
            len(decoding_map),
            len(encoding_map),
        )

    @property
    def decoding_map(self) -> typing.Mapping[int, DecodedValue]:
        if not self._built:
            self._build()
        return self._decoding_map

    @property
    def encoding_map(self) -> typing.Mapping[int, int]:
        if not self._built:
            self._build()
        return self._encoding_map
