"""
cryptokit.cli.rand
------------------

Print a cryptographically secure random token.

Examples:
  # 16 random bytes as hex (default):
  cryptokit-rand

  # 32-byte API key:
  cryptokit-rand -n 32

  # base64 output:
  cryptokit-rand -n 24 --b64

Environment:
  CRYPTOKIT_TOKEN_BYTES : default for -n (default: 16)
  CRYPTOKIT_LOG_LEVEL   : logging level (default: WARNING)
"""

import logging
from typing import Optional

import typer

from .. import config
from ..errors import CryptokitError
from ..rand import random_base64, random_hex

logger = logging.getLogger(__name__)

EXIT_ERROR = 2

app = typer.Typer(
    name="cryptokit-rand",
    help="Generate cryptographically secure random tokens.",
    add_completion=False,
)


@app.command()
def main(
    n: Optional[int] = typer.Option(None, "-n", help="Number of random bytes (default: 16)."),
    b64: bool = typer.Option(False, "--b64", help="Output as base64."),
    hex_: bool = typer.Option(False, "--hex", help="Output as hex (default)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """
    Print n random bytes, hex-encoded unless --b64 is given.
    """
    logging.basicConfig(level=config.log_level(verbose))

    if n is None:
        try:
            n = config.default_token_bytes()
        except ValueError as e:
            typer.echo(str(e), err=True)
            raise typer.Exit(EXIT_ERROR)

    if n < 0:
        typer.echo(f"negative number of bytes: {n}", err=True)
        raise typer.Exit(EXIT_ERROR)

    if b64 and hex_:
        typer.echo("cannot provide both --b64 and --hex output", err=True)
        raise typer.Exit(EXIT_ERROR)

    # The system CSPRNG is used when no source is given
    encode = random_base64 if b64 else random_hex
    try:
        token = encode(n)
    except CryptokitError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(EXIT_ERROR)

    logger.debug("Generated %d random bytes", n)
    typer.echo(token)


def run() -> None:  # pragma: no cover
    app(prog_name="cryptokit-rand")


if __name__ == "__main__":  # pragma: no cover
    run()
