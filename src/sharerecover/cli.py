"""
CLI application for recovering a polynomial's constant term from shares.

Commands:
    recover        Recover the secret from one or more share files
    inspect        Show the decoded shares of a file
    encode         Rewrite a share file with every value in one base
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer

from .core.loader import dump_share_set, load_share_set
from .core.recovery import recover_from_share_set
from .errors import RecoveryError


logger = logging.getLogger(__name__)

app = typer.Typer(
    name="sharerecover",
    help="Recover a polynomial's constant term from threshold shares",
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@app.callback()
def main(
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        "-l",
        envvar="SHARERECOVER_LOG_LEVEL",
        help="Logging level: DEBUG, INFO, WARNING or ERROR",
    ),
) -> None:
    """Configure logging for all commands."""
    level = log_level.upper()
    if level not in LOG_LEVELS:
        typer.echo(f"Error: Unknown log level '{log_level}'", err=True)
        raise typer.Exit(2)

    # Recovered secrets may be far longer than the default str() digit limit
    sys.set_int_max_str_digits(0)

    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def recover(
    files: List[Path] = typer.Argument(..., help="Share files (JSON)"),
    cross_check: bool = typer.Option(
        False,
        "--cross-check/--no-cross-check",
        envvar="SHARERECOVER_CROSS_CHECK",
        help="Require every k-subset of the shares to agree",
    ),
    limit: Optional[int] = typer.Option(
        None, "--limit", min=1, help="Maximum subsets to compare with --cross-check"
    ),
) -> None:
    """
    Recover the constant term from each share file.

    With one file the secret is printed alone; with several, each line is
    prefixed with the file name. Failing files are reported on stderr and
    the command exits with status 1 once all files are processed.

    Example:
        sharerecover recover shares.json
        sharerecover recover --cross-check a.json b.json
    """
    failed = False

    for path in files:
        try:
            share_set = load_share_set(path)
            secret = recover_from_share_set(
                share_set, cross_validate=cross_check, limit=limit
            )
        except (RecoveryError, OSError) as e:
            logger.debug("Recovery failed for %s", path, exc_info=True)
            typer.echo(f"Error: {path}: {e}", err=True)
            failed = True
            continue

        if len(files) == 1:
            typer.echo(str(secret))
        else:
            typer.echo(f"{path}: {secret}")

    if failed:
        raise typer.Exit(1)


@app.command()
def inspect(
    file: Path = typer.Argument(..., help="Share file (JSON)"),
) -> None:
    """
    Show the threshold and decoded shares of a file.
    """
    try:
        share_set = load_share_set(file)
    except (RecoveryError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Threshold: k = {share_set.k}")
    typer.echo(f"Declared shares: n = {share_set.n}")
    typer.echo("")

    typer.echo("Shares:")
    typer.echo("-" * 50)
    for share in share_set.shares:
        typer.echo(f"  x={share.x}: y={share.y}")

    if not share_set.shares:
        typer.echo("  (none)")


@app.command()
def encode(
    file: Path = typer.Argument(..., help="Share file (JSON)"),
    base: int = typer.Option(
        10, "--base", "-b", min=2, max=36, help="Target base for share values"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Output file (default: overwrite input)"
    ),
) -> None:
    """
    Rewrite every share value in a single base.

    The decoded values, and therefore the recovered secret, are unchanged.
    """
    target = output if output is not None else file

    try:
        share_set = load_share_set(file)
        dump_share_set(share_set, target, base=base)
    except (RecoveryError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Encoded {len(share_set.shares)} shares in base {base}: {target}")


if __name__ == "__main__":
    app()
