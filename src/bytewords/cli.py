"""
Command line interface.
"""

import base64
import binascii
import importlib.metadata
import logging
import math
import pathlib
import sys

from . import codec, config
from .errors import DecodeError
from .types import STYLES, PayloadFormat, Style
from .wordlist import WORDLIST, index_for_token, minimal_word_for_index

import click

logger = logging.getLogger("bytewords")
logger.setLevel(logging.CRITICAL)
handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
logger.addHandler(handler)


STYLE_CHOICE = click.Choice(list(STYLES))
FORMAT_CHOICE = click.Choice(list(config.PAYLOAD_FORMATS))


def parse_payload(value: str | bytes, fmt: PayloadFormat) -> bytes:
    """Converts the textual (or, for the raw format, binary) representation of a payload into bytes."""
    match fmt:
        case "raw":
            return value if isinstance(value, bytes) else value.encode()
        case "hex":
            text = (value.decode() if isinstance(value, bytes) else value).strip()
            if text[:2].lower() == "0x":
                text = text[2:]
            return bytes.fromhex(text)
        case "base64":
            try:
                return base64.b64decode(value.strip(), validate=True)
            except binascii.Error as e:
                raise ValueError(str(e)) from None
        case _:
            raise NotImplementedError


def format_payload(payload: bytes, fmt: PayloadFormat) -> str | bytes:
    match fmt:
        case "raw":
            return payload
        case "hex":
            return payload.hex()
        case "base64":
            return base64.b64encode(payload).decode()
        case _:
            raise NotImplementedError


def read_input(value: str | None, binary: bool = False) -> str | bytes:
    """Returns the given argument, or the content of stdin if the argument is omitted or '-'."""
    if value is not None and value != "-":
        return value
    with click.open_file("-", "rb" if binary else "r") as f:
        return f.read()


def error(text: str) -> None:
    click.echo("\x1b[31m" + f"ERROR: {text}" + "\x1b[0m", err=True)


def print_word_box(title: str, words: list[str], hex_value: str = "") -> None:
    """Print a box to display bytewords for transcription, e.g.:
    ╔══════════════════════════════════════════════════════════════════════════════╗
    ║ STANDARD BYTEWORDS                                                           ║
    ╟──────────────────────────────────────────────────────────────────────────────╢
    ║ 1. able  2. acid  3. also  4. lava  5. zero  6. jade  7. need  8. echo       ║
    ║ 9. taxi                                                                      ║
    ╟──────────────────────────────────────────────────────────────────────────────╢
    ║ 00010280ff                                                                   ║
    ╚══════════════════════════════════════════════════════════════════════════════╝
    """
    # Width of the box to draw, includes the border characters.
    WIDTH = 80

    # Indent level, includes the border character.
    INDENT = 2

    # Minimum and maximum value for the spacing between two columns of words.
    MIN_COL_SPACING = 2
    MAX_COL_SPACING = 5

    # Box drawing characters.
    TL, TR, BL, BR, H, V, SL, S, SR = "╔ ╗ ╚ ╝ ═ ║ ╟ ─ ╢".split()

    def write(row: int, col: int, value: str) -> None:
        for i, char in enumerate(value):
            rows[row][col + i] = char

    number_width = len(str(len(words)))
    word_length = max((len(w) for w in words), default=0)
    col_width = number_width + 2 + word_length
    content_width = WIDTH - INDENT * 2
    content_cols = max(1, min(len(words), (content_width + MIN_COL_SPACING) // (col_width + MIN_COL_SPACING)))
    content_rows = math.ceil(len(words) / content_cols)

    hex_lines = [hex_value[i : i + content_width] for i in range(0, len(hex_value), content_width)]
    height = 4 + content_rows + (len(hex_lines) + 1 if hex_lines else 0)

    # Draw the borders of the box.
    rows = [[" "] * WIDTH for _ in range(height)]
    write(0, 0, TL + (H * (WIDTH - 2)) + TR)
    write(1, 0, V + (" " * (WIDTH - 2)) + V)
    write(2, 0, SL + (S * (WIDTH - 2)) + SR)
    for i in range(3, height - 1):
        write(i, 0, V + (" " * (WIDTH - 2)) + V)
    if hex_lines:
        write(-2 - len(hex_lines), 0, SL + (S * (WIDTH - 2)) + SR)
    write(-1, 0, BL + (H * (WIDTH - 2)) + BR)

    # Draw the title in the top left and the hex value at the bottom.
    write(1, INDENT, title)
    for i, line in enumerate(hex_lines):
        write(-1 - len(hex_lines) + i, INDENT, line)

    # Draw the words neatly into a table format, include words indices for readability.
    col_spacing = MIN_COL_SPACING
    if content_cols > 1:
        col_spacing = (content_width - content_cols * col_width) // (content_cols - 1)
        col_spacing = min(col_spacing, MAX_COL_SPACING)

    for i, word in enumerate(words):
        col = i % content_cols
        row = i // content_cols
        write(3 + row, INDENT + col * (col_width + col_spacing), f"{i + 1: >{number_width}}. {word}")

    click.echo()
    click.echo("\n".join("".join(row) for row in rows))
    click.echo()


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=str(config.CONFIG_PATH),
    show_default=True,
    help="Path of the configuration file.",
)
@click.pass_context
def bytewords(ctx: click.Context, debug: bool, config_path: str) -> None:
    """Bytewords: Encode binary data as short, pronounceable words with an embedded CRC-32 checksum.

    Every byte is represented by one of 256 four letter words. The 'standard' style separates words by spaces, the
    'uri' style by hyphens and the 'minimal' style concatenates the first and last letter of each word.
    """
    if debug:
        logger.setLevel(logging.DEBUG)

    try:
        ctx.obj = config.load_or_default(pathlib.Path(config_path))
    except ValueError as e:
        error(f"Configuration file invalid. {e}")
        ctx.exit(1)
    logger.debug(f"Configuration: {ctx.obj}")


@bytewords.command()
@click.argument("payload", required=False)
@click.option("--style", type=STYLE_CHOICE, help="Bytewords style of the output.")
@click.option("--format", "fmt", type=FORMAT_CHOICE, help="Format of the payload.")
@click.option("--box", is_flag=True, help="Display the words in a numbered box.")
@click.pass_obj
def encode(cfg: config.Config, payload: str | None, style: Style | None, fmt: PayloadFormat | None, box: bool) -> None:
    """Encode PAYLOAD as bytewords. Reads the payload from stdin if omitted or '-'."""
    style = style or cfg.get_style("encode")
    fmt = fmt or cfg.get_format("encode")
    if box and style == "minimal":
        raise click.UsageError("The --box option requires the 'standard' or 'uri' style.")

    try:
        data = parse_payload(read_input(payload, binary=fmt == "raw"), fmt)
    except ValueError as e:
        error(f"Invalid {fmt} payload. {e}")
        sys.exit(1)

    encoded = codec.encode(style, data)
    if box:
        print_word_box(f"{style.upper()} BYTEWORDS", encoded.split(STYLES[style].separator), data.hex())
    else:
        click.echo(encoded)


@bytewords.command()
@click.argument("text", required=False)
@click.option("--style", type=STYLE_CHOICE, help="Bytewords style of the input.")
@click.option("--format", "fmt", type=FORMAT_CHOICE, help="Format of the decoded payload.")
@click.pass_obj
def decode(cfg: config.Config, text: str | None, style: Style | None, fmt: PayloadFormat | None) -> None:
    """Decode bytewords TEXT and verify its checksum. Reads the text from stdin if omitted or '-'."""
    style = style or cfg.get_style("decode")
    fmt = fmt or cfg.get_format("decode")

    phrase = read_input(text)
    assert isinstance(phrase, str)
    try:
        payload = codec.decode(style, phrase.strip())
    except DecodeError as e:
        error(str(e))
        sys.exit(1)

    output = format_payload(payload, fmt)
    if isinstance(output, bytes):
        with click.open_file("-", "wb") as f:
            f.write(output)
    else:
        click.echo(output)


@bytewords.command()
@click.argument("words", nargs=-1, required=True)
def lookup(words: tuple[str, ...]) -> None:
    """Look up the byte values of WORDS (four letter words or two letter minimal codes)."""
    failed = False
    for word in words:
        try:
            index = index_for_token(word)
        except DecodeError as e:
            error(str(e))
            failed = True
            continue
        click.echo(f"{index: >3}  {index:02x}  {WORDLIST[index]}  {minimal_word_for_index(index)}")
    if failed:
        sys.exit(1)


@bytewords.command()
def table() -> None:
    """Display the full word table."""
    for index, word in enumerate(WORDLIST):
        click.echo(f"{index: >3}  {index:02x}  {word}  {minimal_word_for_index(index)}")


@bytewords.command()
def version() -> None:
    """Display version information of this tool."""
    click.echo(f"Bytewords: {importlib.metadata.version('bytewords')}")
    click.echo("Libraries: ")
    for lib in ("click",):
        click.echo(f" - {lib}: {importlib.metadata.version(lib)}")


def main():
    bytewords(prog_name=bytewords.name)
