"""Walrus CLI - Main commands."""
import asyncio
import binascii
from pathlib import Path
from typing import List, Optional

import typer
from Crypto.Random import get_random_bytes
from rich.console import Console
from rich.table import Table

from walruspy.core.crypto import CBC_IV_SIZE, CipherSuite
from walruspy.core.exceptions import WalrusError

app = typer.Typer(
    name="walrus",
    help="Walrus decentralized storage CLI",
    add_completion=False
)
console = Console()


def run_async(coro):
    """Run async function."""
    return asyncio.run(coro)


def _parse_hex(value: Optional[str], name: str) -> Optional[bytes]:
    if value is None:
        return None
    try:
        return binascii.unhexlify(value.strip())
    except (binascii.Error, ValueError):
        console.print(f"[red]{name} must be a hex string[/red]")
        raise typer.Exit(1)


def _build_encryption(key: Optional[str], iv: Optional[str], suite: CipherSuite):
    from walruspy import EncryptionOptions

    key_bytes = _parse_hex(key, "Key")
    if key_bytes is None:
        return None
    return EncryptionOptions(key=key_bytes, suite=suite, iv=_parse_hex(iv, "IV"))


def _build_config(aggregators: Optional[List[str]], publishers: Optional[List[str]]):
    from walruspy import ClientConfig

    config = ClientConfig.default()
    if aggregators:
        config.aggregator_urls = list(aggregators)
    if publishers:
        config.publisher_urls = list(publishers)
    return config


AGGREGATOR_OPTION = typer.Option(None, "--aggregator", "-a", help="Aggregator URL (repeatable)")
PUBLISHER_OPTION = typer.Option(None, "--publisher", "-P", help="Publisher URL (repeatable)")
KEY_OPTION = typer.Option(None, "--key", "-k", envvar="WALRUS_KEY", help="Hex AES key (enables encryption)")
IV_OPTION = typer.Option(None, "--iv", envvar="WALRUS_IV", help="Hex IV (AES256CBC only)")
SUITE_OPTION = typer.Option(CipherSuite.AES256GCM, "--suite", "-s", help="Cipher suite")


@app.command()
def store(
    file_path: Path = typer.Argument(..., help="Local file to store", exists=True, dir_okay=False),
    epochs: int = typer.Option(0, "--epochs", "-e", help="Number of storage epochs"),
    key: Optional[str] = KEY_OPTION,
    iv: Optional[str] = IV_OPTION,
    suite: CipherSuite = SUITE_OPTION,
    publisher: Optional[List[str]] = PUBLISHER_OPTION,
):
    """Store a file and print its blob ID."""
    from walruspy import WalrusClient, StoreOptions

    async def do_store():
        options = StoreOptions(
            epochs=epochs or None,
            encryption=_build_encryption(key, iv, suite)
        )
        async with WalrusClient(_build_config(None, publisher)) as walrus:
            try:
                result = await walrus.store_file(file_path, options)
            except WalrusError as e:
                console.print(f"[red]Store failed: {e}[/red]")
                raise typer.Exit(1)

        console.print(f"[green]Stored:[/green] {file_path.name}")
        console.print(f"Blob ID: {result.blob_id}")
        console.print(f"End epoch: {result.blob.end_epoch}")

    run_async(do_store())


@app.command()
def read(
    blob_id: str = typer.Argument(..., help="Blob ID to retrieve"),
    output: Path = typer.Option(None, "--output", "-o", help="Output file path"),
    key: Optional[str] = KEY_OPTION,
    iv: Optional[str] = IV_OPTION,
    suite: CipherSuite = SUITE_OPTION,
    aggregator: Optional[List[str]] = AGGREGATOR_OPTION,
):
    """Retrieve a blob, decrypting it when a key is given."""
    from walruspy import WalrusClient, ReadOptions

    async def do_read():
        options = ReadOptions(encryption=_build_encryption(key, iv, suite))
        output_path = output or Path(blob_id)
        async with WalrusClient(_build_config(aggregator, None)) as walrus:
            try:
                await walrus.read_to_file(blob_id, output_path, options)
            except WalrusError as e:
                console.print(f"[red]Read failed: {e}[/red]")
                raise typer.Exit(1)

        console.print(f"[green]Saved:[/green] {output_path}")

    run_async(do_read())


@app.command()
def head(
    blob_id: str = typer.Argument(..., help="Blob ID"),
    aggregator: Optional[List[str]] = AGGREGATOR_OPTION,
):
    """Show blob metadata."""
    from walruspy import WalrusClient

    async def do_head():
        async with WalrusClient(_build_config(aggregator, None)) as walrus:
            try:
                meta = await walrus.head(blob_id)
            except WalrusError as e:
                console.print(f"[red]Head failed: {e}[/red]")
                raise typer.Exit(1)

        table = Table()
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        table.add_row("Content-Length", f"{meta.content_length:,}")
        table.add_row("Content-Type", meta.content_type)
        table.add_row("Last-Modified", meta.last_modified)
        table.add_row("ETag", meta.etag)
        console.print(table)

    run_async(do_head())


@app.command()
def keygen(
    bits: int = typer.Option(256, "--bits", "-b", help="Key size in bits (128, 192 or 256)"),
    with_iv: bool = typer.Option(False, "--iv", help="Also generate a CBC IV"),
):
    """Generate a random hex key (and optionally an IV)."""
    if bits not in (128, 192, 256):
        console.print("[red]Key size must be 128, 192 or 256 bits[/red]")
        raise typer.Exit(1)

    console.print(f"key: {get_random_bytes(bits // 8).hex()}")
    if with_iv:
        console.print(f"iv: {get_random_bytes(CBC_IV_SIZE).hex()}")


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
