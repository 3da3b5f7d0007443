import logging
from typing import Optional

import click
import typer
from rich.console import Console
from rich.table import Table

from nostrcodec import bech32
from nostrcodec.exception import Bech32Exception, KeyException
from nostrcodec.key import PrivateKey, PublicKey

log = logging.getLogger(__name__)
app = typer.Typer()
console = Console()

state = {"verbose": 3}


def _fail(err: Exception):
    log.debug(f"{type(err).__name__}: {err}")
    click.echo(f"Error: {err}", err=True)
    raise typer.Exit(code=1)


def _length_limit(max_length: int) -> Optional[int]:
    return max_length if max_length > 0 else None


@app.command()
def keygen():
    """Creates a private and public key."""
    private_key = PrivateKey()
    public_key = private_key.public_key
    click.echo(f"Private key: {private_key.bech32()}")
    click.echo(f"Public key: {public_key.bech32()}")


@app.command()
def convert(identifier: str):
    """Converts an npub, nsec or hex public key."""
    try:
        if identifier.lower().startswith("nsec"):
            private_key = PrivateKey.from_nsec(identifier)
            public_key = private_key.public_key
            click.echo(f"nsec: {private_key.bech32()}")
        elif identifier.lower().startswith("npub"):
            public_key = PublicKey.from_npub(identifier)
        else:
            public_key = PublicKey.from_hex(identifier)
    except KeyException as err:
        _fail(err)
    click.echo(f"npub: {public_key.bech32()}")
    click.echo(f"hex: {public_key.hex()}")


@app.command()
def encode(
    prefix: str,
    hex_data: str,
    max_length: int = typer.Option(bech32.MAX_LENGTH, help="0 disables the limit"),
):
    """Encodes hex data as bech32 string with the given prefix."""
    try:
        data = bytes.fromhex(hex_data)
    except ValueError as err:
        _fail(err)
    try:
        click.echo(bech32.encode(prefix, data, _length_limit(max_length)))
    except Bech32Exception as err:
        _fail(err)


@app.command()
def decode(
    bech: str,
    strict: bool = typer.Option(False, help="Reject mixed case strings"),
    max_length: int = typer.Option(bech32.MAX_LENGTH, help="0 disables the limit"),
):
    """Decodes a bech32 string into prefix and hex data."""
    try:
        result = bech32.decode(bech, _length_limit(max_length), strict)
    except Bech32Exception as err:
        _fail(err)
    table = Table("key", "value")
    table.add_row("prefix", result.hrp)
    table.add_row("hex", result.data.hex())
    table.add_row("length", str(len(result.data)))
    console.print(table)


@app.callback()
def main(verbose: int = 3):
    """Bech32 encoding for nostr keys."""
    # Logging
    state["verbose"] = verbose
    log = logging.getLogger("nostrcodec")
    verbosity = ["critical", "error", "warn", "info", "debug"][int(min(verbose, 4))]
    log.setLevel(getattr(logging, verbosity.upper()))
    if not log.handlers:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        ch = logging.StreamHandler()
        ch.setFormatter(formatter)
        log.addHandler(ch)
    for handler in log.handlers:
        handler.setLevel(getattr(logging, verbosity.upper()))


if __name__ == "__main__":
    app()
