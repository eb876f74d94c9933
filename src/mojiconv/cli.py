import logging
import typing

import click

from . import cp932, sjis2004
from .encode import (
    AUTODETECT,
    decode,
    detect_charset,
    encode,
    is_utf,
    legacy_charsets,
    normalize_charset_name,
    split_bom_suffix,
)
from .unicode import iter_code_points

logger = logging.getLogger(__name__)

kuten_charsets = ("Shift_JIS", "Shift_JIS-2004")


def validate_charset(ctx, param, value: typing.Optional[str]) -> typing.Optional[str]:
    if value is None or value.lower() == AUTODETECT:
        return value
    charset, _ = split_bom_suffix(normalize_charset_name(value))
    if not is_utf(charset) and charset not in legacy_charsets:
        raise click.BadParameter(f"unknown charset: {value}")
    return value


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log what is going on.")
def main(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@main.command()
@click.argument("src", type=click.File("rb"), default="-")
@click.argument("dest", type=click.File("wb"), default="-")
@click.option(
    "-f",
    "--from",
    "from_",
    default=AUTODETECT,
    show_default=True,
    callback=validate_charset,
    help="Charset of SRC.",
)
@click.option(
    "-t",
    "--to",
    default="UTF-8",
    show_default=True,
    callback=validate_charset,
    help="Charset to write DEST in.",
)
@click.option("--bom", is_flag=True, help="Write a byte order mark (UTF only).")
def convert(src, dest, from_: str, to: str, bom: bool) -> None:
    """Converts SRC from one charset to another and writes it to DEST."""
    if to.lower() == AUTODETECT:
        raise click.BadParameter("only valid for --from", param_hint="--to")
    data = src.read()
    if from_.lower() == AUTODETECT:
        logger.debug("%s looks like %s", src.name, detect_charset(data))
    text = decode(data, from_)
    if text is None:
        raise click.ClickException(f"cannot decode {src.name} as {from_}")
    out = encode(text, to, bom)
    if out is None:
        raise click.ClickException(f"cannot encode to {to}")
    dest.write(out)


@main.command()
@click.argument("files", type=click.File("rb"), nargs=-1, required=True)
def detect(files) -> None:
    """Prints the charset each of FILES is most likely written in."""
    for f in files:
        click.echo(f"{f.name}: {detect_charset(f.read())}")


@main.command()
@click.argument("text")
@click.option(
    "-c",
    "--charset",
    type=click.Choice(kuten_charsets, case_sensitive=False),
    default="Shift_JIS-2004",
    show_default=True,
)
def kuten(text: str, charset: str) -> None:
    """Prints the (men-)ku-ten position of every character in TEXT."""
    for c in iter_code_points(text):
        ch = chr(c)
        if charset.lower() == "shift_jis":
            mkt = cp932.to_ku_ten(ch)
        else:
            mkt = sjis2004.to_men_ku_ten(ch)
        click.echo(f"{ch}\tU+{c:04X}\t{mkt.text if mkt else '-'}")


if __name__ == "__main__":
    main()
