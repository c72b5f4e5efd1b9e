"""
Command-line interface for the secure password generator.
"""
from __future__ import annotations

import dataclasses
import logging

import click

from . import __version__
from .config import DEFAULT_CONFIG
from .errors import EntropySourceError, NoClassSelected
from .generator import generate_with_meta
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="spgen")
@click.option(
    "-n",
    "--length",
    type=click.IntRange(DEFAULT_CONFIG.min_length, DEFAULT_CONFIG.max_length),
    default=DEFAULT_CONFIG.password_length,
    show_default=True,
    help="Password length in characters.",
)
@click.option("--lower/--no-lower", default=DEFAULT_CONFIG.include_lowercase, help="Include lowercase (a-z).")
@click.option("--upper/--no-upper", default=DEFAULT_CONFIG.include_uppercase, help="Include uppercase (A-Z).")
@click.option("--digits/--no-digits", default=DEFAULT_CONFIG.include_digits, help="Include numbers (0-9).")
@click.option("--symbols/--no-symbols", default=DEFAULT_CONFIG.include_symbols, help="Include symbols (!@#...).")
@click.option(
    "-c",
    "--count",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="How many passwords to print.",
)
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
def cli(
    length: int,
    lower: bool,
    upper: bool,
    digits: bool,
    symbols: bool,
    count: int,
    verbose: bool,
    log_json: bool,
) -> None:
    """spgen: generate cryptographically strong random passwords."""
    configure_logging(verbose=verbose, log_json=log_json)

    cfg = dataclasses.replace(
        DEFAULT_CONFIG,
        password_length=length,
        include_lowercase=lower,
        include_uppercase=upper,
        include_digits=digits,
        include_symbols=symbols,
    )
    request = cfg.to_request()

    for _ in range(count):
        try:
            meta = generate_with_meta(request)
        except NoClassSelected as exc:
            raise click.UsageError(str(exc)) from exc
        except EntropySourceError as exc:
            logger.error("Entropy source failure: %s", exc)
            raise click.ClickException(str(exc)) from exc
        click.echo(meta.password)

    logger.debug(
        "Printed %d password(s) of length %d from a %d-character alphabet",
        count,
        length,
        meta.alphabet_size,
    )


def main() -> None:
    """
    Entry point for `python -m spgen`, `run_spgen.py` and the `spgen` script.
    """
    cli()
