"""Command-line driver for cipherkit.

Usage:
    cipherkit text sign -i message.txt -k ed25519.sk -f ed25519
    cipherkit text verify -i message.txt -k ed25519.vk -s SIG --format ed25519
    cipherkit text generate --format blake3 -o keys/
    cipherkit chacha encrypt -i message.txt -k chacha20poly1305.key -f chacha20poly1305
    cipherkit chacha decrypt -i encrypted.txt -k chacha20poly1305.key -n NONCE -f chacha20poly1305
    cipherkit base64 encode -i message.txt -f urlsafe

The core only sees bytes; this module applies URL-safe unpadded base64 to
signatures, ciphertexts and nonces on the way in and out.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO, Optional

import typer

from .config import CipherKitConfig, load_config
from .constants import STDIN_PATH
from .crypto import (
    decode_base64,
    encode_base64,
    from_base64url,
    generate_keys,
    process_decrypt,
    process_encrypt,
    process_sign,
    process_verify,
    read_all,
    to_base64url,
)
from .errors import CipherKitError, ConfigError
from .types import AeadFormat, AlgorithmTag, Base64Format, KeyMap, SignatureFormat

logger = logging.getLogger("cipherkit")

app = typer.Typer(add_completion=False, help="Signing, verification and AEAD over files.")
text_app = typer.Typer(add_completion=False, help="Text signature")
chacha_app = typer.Typer(add_completion=False, help="ChaCha20-Poly1305 encryption/decryption")
base64_app = typer.Typer(add_completion=False, help="Base64 encode/decode")
app.add_typer(text_app, name="text")
app.add_typer(chacha_app, name="chacha")
app.add_typer(base64_app, name="base64")


def verify_file_exists(path: str) -> str:
    """Accept ``-`` (stdin) or an existing path."""
    if path == STDIN_PATH or Path(path).exists():
        return path
    raise typer.BadParameter("File does not exist")


def verify_path(path: Optional[Path]) -> Optional[Path]:
    """Accept an existing directory, or None to fall back to the configured one."""
    if path is None or path.is_dir():
        return path
    raise typer.BadParameter("Directory does not exist")


@contextlib.contextmanager
def _reader(path: str) -> Iterator[BinaryIO]:
    if path == STDIN_PATH:
        yield typer.get_binary_stream("stdin")
    else:
        with open(path, "rb") as f:
            yield f


@contextlib.contextmanager
def _handle_errors() -> Iterator[None]:
    try:
        yield
    except (CipherKitError, OSError) as e:
        logger.debug("Command failed", exc_info=True)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


def _read_key(path: str) -> bytes:
    return Path(path).read_bytes()


def _write_keys(keys: KeyMap, output: Path) -> None:
    for name, key in keys.items():
        target = output / name
        target.write_bytes(key)
        typer.echo(f"Wrote {target}")


def _generate(ctx: typer.Context, tag: AlgorithmTag, output: Optional[Path]) -> None:
    config: CipherKitConfig = ctx.obj
    directory = output if output is not None else config.key_dir
    with _handle_errors():
        if not directory.is_dir():
            raise CipherKitError(f"Output directory does not exist: {directory}")
        _write_keys(generate_keys(tag), directory)


@app.callback()
def main(ctx: typer.Context) -> None:
    """Load configuration and set up logging."""
    try:
        config = load_config()
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2) from e
    logging.basicConfig(
        level=config.log_level_number,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    ctx.obj = config


@text_app.command("sign")
def text_sign(
    input_file: str = typer.Option(STDIN_PATH, "--input", "-i", callback=verify_file_exists),
    key: str = typer.Option(..., "--key", "-k", callback=verify_file_exists),
    fmt: SignatureFormat = typer.Option(..., "--format", "-f", case_sensitive=False),
) -> None:
    """Sign input with a private key."""
    with _handle_errors(), _reader(input_file) as reader:
        signature = process_sign(reader, _read_key(key), fmt)
    typer.echo(f"Signature result: {to_base64url(signature)}")


@text_app.command("verify")
def text_verify(
    input_file: str = typer.Option(STDIN_PATH, "--input", "-i", callback=verify_file_exists),
    key: str = typer.Option(..., "--key", "-k", callback=verify_file_exists),
    sig: str = typer.Option(..., "--sig", "-s"),
    fmt: SignatureFormat = typer.Option(..., "--format", case_sensitive=False),
) -> None:
    """Verify a signature with a public key."""
    with _handle_errors(), _reader(input_file) as reader:
        verified = process_verify(reader, _read_key(key), from_base64url(sig), fmt)
    typer.echo("Signature verified" if verified else "Signature not verified")


@text_app.command("generate")
def text_generate(
    ctx: typer.Context,
    fmt: SignatureFormat = typer.Option(
        SignatureFormat.BLAKE3, "--format", case_sensitive=False
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", callback=verify_path),
) -> None:
    """Generate signing key material."""
    _generate(ctx, fmt, output)


@chacha_app.command("encrypt")
def chacha_encrypt(
    input_file: str = typer.Option(STDIN_PATH, "--input", "-i", callback=verify_file_exists),
    key: str = typer.Option(..., "--key", "-k", callback=verify_file_exists),
    fmt: AeadFormat = typer.Option(..., "--format", "-f", case_sensitive=False),
) -> None:
    """Encrypt input with a ChaCha key."""
    with _handle_errors(), _reader(input_file) as reader:
        result = process_encrypt(reader, _read_key(key), fmt)
    typer.echo(f"Encrypted: {to_base64url(result.ciphertext)}")
    typer.echo(f"Nonce: {to_base64url(result.nonce)}")


@chacha_app.command("decrypt")
def chacha_decrypt(
    input_file: str = typer.Option(STDIN_PATH, "--input", "-i", callback=verify_file_exists),
    key: str = typer.Option(..., "--key", "-k", callback=verify_file_exists),
    nonce: str = typer.Option(..., "--nonce", "-n"),
    fmt: AeadFormat = typer.Option(..., "--format", "-f", case_sensitive=False),
) -> None:
    """Decrypt base64url ciphertext with a ChaCha key."""
    with _handle_errors(), _reader(input_file) as reader:
        ciphertext = from_base64url(read_all(reader).decode("ascii", errors="replace"))
        plaintext = process_decrypt(ciphertext, _read_key(key), from_base64url(nonce), fmt)
    typer.echo(f"Decrypted: {plaintext.decode('utf-8', errors='replace')}")


@chacha_app.command("generate")
def chacha_generate(
    ctx: typer.Context,
    fmt: AeadFormat = typer.Option(..., "--format", case_sensitive=False),
    output: Optional[Path] = typer.Option(None, "--output", "-o", callback=verify_path),
) -> None:
    """Generate a ChaCha key."""
    _generate(ctx, fmt, output)


@base64_app.command("encode")
def base64_encode(
    input_file: str = typer.Option(STDIN_PATH, "--input", "-i", callback=verify_file_exists),
    fmt: Base64Format = typer.Option(
        Base64Format.STANDARD, "--format", "-f", case_sensitive=False
    ),
) -> None:
    """Encode input to base64."""
    with _handle_errors(), _reader(input_file) as reader:
        encoded = encode_base64(read_all(reader), fmt)
    typer.echo(encoded)


@base64_app.command("decode")
def base64_decode(
    input_file: str = typer.Option(STDIN_PATH, "--input", "-i", callback=verify_file_exists),
    fmt: Base64Format = typer.Option(
        Base64Format.STANDARD, "--format", "-f", case_sensitive=False
    ),
) -> None:
    """Decode base64 input."""
    with _handle_errors(), _reader(input_file) as reader:
        decoded = decode_base64(read_all(reader).decode("ascii", errors="replace"), fmt)
    out = typer.get_binary_stream("stdout")
    out.write(decoded)
    out.flush()


if __name__ == "__main__":
    app()
