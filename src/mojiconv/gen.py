import click
import re
import typing
import unicodedata
import jinja2

from .codepage import DecodedValue


code_template = """# Generated by ``python -m mojiconv.gen``; do not edit by hand.
# {{ title }} mapping table in packed form.

SINGLE_BYTE = {
{%- for row in single_byte|batch(6) %}
    {% for code, u in row %}{{ "0x%02x: 0x%04x,"|format(code, u) }}{% if not loop.last %} {% endif %}{% endfor %}
{%- endfor %}
}

DOUBLE_BYTE_BASE = {{ "0x%04x"|format(base) }}

DOUBLE_BYTE_PACKED = (
{%- for row in packed_rows %}
    "{{ row }}",
{%- endfor %}
)

DOUBLE_BYTE_EXPLICIT = {
{%- for code, v in explicit %}
    {{ "0x%04x"|format(code) }}: {{ v|py_value }},
{%- endfor %}
}
"""


class InvalidFormatError(Exception):
    @property
    def message(self):
        return self.args[0]


class PackedTable(typing.NamedTuple):
    single_byte: typing.Sequence[typing.Tuple[int, int]]
    """(code, code point) pairs for codes below 0x100"""
    base: int
    """the code the first packed row starts at"""
    packed_rows: typing.Sequence[str]
    """one string per lead byte, already escaped for a Python literal"""
    explicit: typing.Sequence[typing.Tuple[int, DecodedValue]]
    """entries that cannot be packed"""


code_repr_regexp = re.compile(r"0[xX]([0-9a-fA-F]+)$")
uni_repr_regexp = re.compile(r"(?:0[xX]|[uU]\+)([0-9a-fA-F]+)((?:\+[0-9a-fA-F]+)*)$")


def parse_code_repr(v: str) -> int:
    m = code_repr_regexp.match(v)
    if m is None:
        raise ValueError(f"invalid code: {v}")
    return int(m.group(1), 16)


def parse_uni_repr(v: str) -> DecodedValue:
    m = uni_repr_regexp.match(v)
    if m is None:
        raise ValueError(f"invalid unicode repr: {v}")

    ucps = [int(m.group(1), 16)]
    ucps.extend(int(c, 16) for c in m.group(2).split("+")[1:])
    for ucp in ucps:
        if ucp > 0x10FFFF:
            raise ValueError(f"invalid unicode code point: {ucp:08x}")

    if len(ucps) == 1:
        return ucps[0]
    return tuple(ucps)


def read_mapping_file(f: str) -> typing.Dict[int, DecodedValue]:
    mapping: typing.Dict[int, DecodedValue] = {}

    with open(f, encoding="utf-8") as fp:
        for lo, line in enumerate(fp):
            line = line.split("#", 1)[0].strip()
            if not line:
                continue

            cols = line.split()
            if len(cols) < 2:
                # unassigned code
                continue

            try:
                code = parse_code_repr(cols[0])
            except ValueError as e:
                raise InvalidFormatError(
                    f"failed to parse code at line {lo + 1}"
                ) from e

            try:
                mapping[code] = parse_uni_repr(cols[1])
            except ValueError as e:
                raise InvalidFormatError(
                    f"failed to parse unicode at line {lo + 1}"
                ) from e

    return mapping


def escape_code_point(u: int) -> str:
    if u == 0x5C:
        return "\\\\"
    if u == 0x22:
        return '\\"'
    c = chr(u)
    # combining marks, controls, private use, unassigned and separators
    if unicodedata.category(c)[0] in "MCZ":
        if u <= 0xFFFF:
            return f"\\u{u:04x}"
        return f"\\U{u:08x}"
    return c


def is_packable(v: DecodedValue) -> bool:
    # digits would read as a gap length
    return not isinstance(v, tuple) and not 0x30 <= v <= 0x39


def pack_mapping(
    mapping: typing.Mapping[int, DecodedValue], base: int = 0x8140
) -> PackedTable:
    single_byte: typing.List[typing.Tuple[int, int]] = []
    explicit: typing.List[typing.Tuple[int, DecodedValue]] = []
    rows: typing.Dict[int, typing.List[str]] = {}

    for code in sorted(mapping):
        v = mapping[code]
        if code < 0x100 and not isinstance(v, tuple):
            single_byte.append((code, v))
        elif code < base:
            explicit.append((code, v))

    gap = 0
    end = max(mapping, default=base - 1) + 1
    for code in range(base, end):
        v = mapping.get(code)
        if v is None or not is_packable(v):
            if v is not None:
                explicit.append((code, v))
            gap += 1
            continue
        row = rows.setdefault(code >> 8, [])
        if gap:
            row.append(str(gap))
            gap = 0
        row.append(escape_code_point(typing.cast(int, v)))

    return PackedTable(
        single_byte=single_byte,
        base=base,
        packed_rows=["".join(row) for _, row in sorted(rows.items())],
        explicit=explicit,
    )


def py_value(v: DecodedValue) -> str:
    if isinstance(v, tuple):
        return "(" + ", ".join(f"0x{u:04x}" for u in v) + ")"
    return f"0x{v:04x}"


def do_gen(dest: str, src: str, title: str, base: int = 0x8140) -> None:
    e = jinja2.Environment(keep_trailing_newline=True)
    e.filters["py_value"] = py_value
    t = e.from_string(code_template)

    print(f"reading {src}...")
    mapping = read_mapping_file(src)

    print(f"packing {len(mapping)} entries...")
    packed = pack_mapping(mapping, base)

    gen = t.generate(
        title=title,
        single_byte=packed.single_byte,
        base=packed.base,
        packed_rows=packed.packed_rows,
        explicit=packed.explicit,
    )
    print(f"writing {dest}...")
    with open(dest, "w", encoding="utf-8") as f:
        for c in gen:
            f.write(c)


@click.command()
@click.argument("dest", required=True)
@click.argument("src", required=True)
@click.option("--title", required=True, help="Name of the code page.")
@click.option(
    "--base",
    default="0x8140",
    show_default=True,
    help="First double byte code.",
)
def main(dest, src, title, base):
    do_gen(dest, src, title, int(base, 0))


if __name__ == "__main__":
    main()
