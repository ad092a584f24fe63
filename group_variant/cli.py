"""
Expands grouped variants in utility-class strings.
Fragments are taken from the arguments, or from stdin when none are given,
and each expanded fragment is written to stdout on its own line.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from .config import ConfigError, build_config
from .exceptions import ExpansionError
from .inputs import enforce_input_length, enforce_well_formed, get_max_input_length, read_fragments
from .transformer import expand

__all__ = ["cli"]


@click.command()
@click.version_option(package_name="group-variant")
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Fail on malformed groups instead of leaving them as text",
)
@click.option("--max-input-length", type=int, help="Maximum characters per fragment")
@click.option(
    "--whole/--lines",
    default=None,
    help="Read stdin as a single fragment instead of one fragment per line",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug details to stderr")
@click.argument("fragments", nargs=-1)
def cli(
    fragments: tuple[str, ...],
    strict: bool | None = None,
    max_input_length: int | None = None,
    whole: bool | None = None,
    verbose: bool = False,
):
    """
    Entry point for expanding grouped variants.

    Args:
        fragments: Fragments to expand; stdin is read when empty.
        strict: Override for failing on malformed groups.
        max_input_length: Override for the per-fragment length limit.
        whole: Whether stdin is a single fragment rather than one per line.
        verbose: Enable debug logging on stderr.

    Returns:
        None.

    Raises:
        click.BadParameter: If the configuration is invalid.
        click.ClickException: If a fragment is too long, or malformed in strict
            mode.

    Examples:
        group-variant "hover:(bg-red text-white)"
        echo "sm:(p-2 m-1)" | group-variant --strict
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        config = build_config(
            Path.cwd(),
            strict=strict,
            max_input_length=max_input_length,
            line_mode=None if whole is None else not whole,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    # An explicit option wins over the environment.
    if max_input_length is None:
        try:
            limit = get_max_input_length(default=config.max_input_length)
        except ValueError as error:
            raise click.ClickException(str(error)) from error
    else:
        limit = config.max_input_length

    if not fragments:
        fragments = read_fragments(click.get_text_stream("stdin"), line_mode=config.line_mode)

    for fragment in fragments:
        try:
            enforce_input_length(fragment, limit)
            result = expand(fragment)
            if config.strict:
                enforce_well_formed(result, fragment)
        except ExpansionError as error:
            raise click.ClickException(str(error)) from error

        click.echo(result.text)


if __name__ == "__main__":
    cli()
