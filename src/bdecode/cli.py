"""
Command line front end: decode a Bencoded file and print it as JSON.
"""
import json
import logging
import sys

import click

from .decoder import decode, decode_one
from .errors import BencodeDecodeError
from .structure import BencodeDict, BencodeInt, BencodeList, BencodeString

logger = logging.getLogger(__name__)


def bytes_to_str(data: bytes, raw_hex: bool = False) -> str:
    """Renders a byte string as UTF-8 text when possible, otherwise as hex."""
    if not raw_hex:
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            pass
    return data.hex()


def to_json(value, raw_hex: bool = False):
    """Converts a decoded value into objects ``json.dumps`` accepts."""
    if isinstance(value, BencodeString):
        return bytes_to_str(bytes(value), raw_hex)

    if isinstance(value, BencodeInt):
        return value.value

    if isinstance(value, BencodeList):
        return [to_json(item, raw_hex) for item in value.value]

    if isinstance(value, BencodeDict):
        return {
            bytes_to_str(bytes(key), raw_hex): to_json(item, raw_hex)
            for key, item in value.value.items()
        }

    raise TypeError(f"Type not serializable: {type(value)}")


@click.command(
    name="bdecode",
    help="Decode a Bencoded FILE (default: stdin) and print each top-level value as JSON.",
)
@click.argument("source", type=click.File("rb"), default="-")
@click.option("--raw-hex", is_flag=True, help="Always print byte strings as hex.")
@click.option("--single", is_flag=True, help="Require exactly one top-level value.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(source, raw_hex: bool, single: bool, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s:%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    name = getattr(source, "name", "<stdin>")
    data = source.read()
    logger.debug("Read %d bytes from %s", len(data), name)

    try:
        values = [decode_one(data)] if single else decode(data)
    except BencodeDecodeError as exc:
        raise click.ClickException(f"cannot decode {name}: {exc}") from exc

    for value in values:
        click.echo(json.dumps(to_json(value, raw_hex)))
