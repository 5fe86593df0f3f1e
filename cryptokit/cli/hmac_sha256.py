"""
cryptokit.cli.hmac_sha256
-------------------------

Compute or verify an HMAC-SHA256 tag from the command line.

Examples:
  # Tag a file, key given inline:
  cryptokit-hmac -k supersecret --in message.txt

  # Tag stdin, key read from a file:
  echo -n payload | cryptokit-hmac --keyfile key.txt

  # Verify (exit 0 on match, 1 on mismatch, 2 on error):
  cryptokit-hmac -k supersecret --in message.txt --verify 3385...68ad

Environment:
  CRYPTOKIT_HMAC_KEY  : key used when neither --key nor --keyfile is given
  CRYPTOKIT_LOG_LEVEL : logging level (default: WARNING)
"""

import os
import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer

from .. import config
from ..errors import CryptokitError, InvalidTagError
from ..hmac import compute_tag_hex, verify_tag_hex

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_ERROR = 2

app = typer.Typer(
    name="cryptokit-hmac",
    help="Compute or verify HMAC-SHA256 tags.",
    add_completion=False,
)


class CLIError(Exception):
    """Input problem reported to the user with exit code 2."""
    pass


def _fail(prefix: str, err: Exception) -> NoReturn:
    typer.echo(f"{prefix}: {err}", err=True)
    raise typer.Exit(EXIT_ERROR)


def load_key(key: Optional[str], keyfile: Optional[Path]) -> bytes:
    """Resolve the key from --key, --keyfile or the environment, in that order."""
    if key and keyfile:
        raise CLIError("both --key and --keyfile are set")

    if key:
        return key.encode('utf-8')

    if keyfile:
        try:
            raw = keyfile.read_bytes()
        except OSError as e:
            raise CLIError(f"reading key file: {e}") from e
        return raw.rstrip(b'\r\n')

    env_key = os.environ.get(config.ENV_HMAC_KEY)
    if env_key:
        logger.debug("Using key from %s", config.ENV_HMAC_KEY)
        return env_key.encode('utf-8')

    raise CLIError("no key or keyfile provided")


def read_input(in_path: Optional[Path]) -> bytes:
    """Read the payload from a file, or from stdin when no path is given."""
    if in_path:
        try:
            return in_path.read_bytes()
        except OSError as e:
            raise CLIError(f"reading input file: {e}") from e

    data = typer.get_binary_stream('stdin').read()
    if not data:
        raise CLIError("no input provided (stdin empty)")
    return data


@app.command()
def main(
    key: Optional[str] = typer.Option(None, "--key", "-k", help="Secret key as a string."),
    keyfile: Optional[Path] = typer.Option(None, "--keyfile", help="Path to a secret key file."),
    in_path: Optional[Path] = typer.Option(None, "--in", "-i", help="Input file (default: stdin)."),
    verify: Optional[str] = typer.Option(None, "--verify", help="Expected hex tag (verify mode)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """
    Print the hex HMAC-SHA256 tag of the input, or check it against --verify.
    """
    logging.basicConfig(level=config.log_level(verbose))

    try:
        secret = load_key(key, keyfile)
    except CLIError as e:
        _fail("error loading key", e)

    try:
        payload = read_input(in_path)
    except CLIError as e:
        _fail("error reading input", e)

    try:
        tag = compute_tag_hex(secret, payload)
    except CryptokitError as e:
        _fail("error computing HMAC SHA256 sum", e)

    if verify:
        try:
            ok = verify_tag_hex(secret, payload, verify)
        except InvalidTagError as e:
            _fail("error decoding hex tag", e)
        except CryptokitError as e:
            _fail("error verifying HMAC SHA256 sum", e)

        if not ok:
            typer.echo("mismatch", err=True)
            raise typer.Exit(EXIT_MISMATCH)
        raise typer.Exit(EXIT_OK)

    typer.echo(tag)


def run() -> None:  # pragma: no cover
    app(prog_name="cryptokit-hmac")


if __name__ == "__main__":  # pragma: no cover
    run()
