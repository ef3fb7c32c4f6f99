"""
Click-based CLI for hashtool.

Usage:
    hash --[md5|sha256|blake3] --text <text>
    hash --[md5|sha256|blake3] --file <path>

Texts and files may be repeated and mixed; they are digested in the
order given.
"""

from __future__ import annotations

from pathlib import Path

import click

from ..core.exceptions import HashToolException
from ..core.models.digest import DigestOptions, HashAlgorithm
from ..core.models.inputs import HashInput
from ..inputs.resolver import FILE_PARAM, TEXT_PARAM, resolve_inputs
from .context import HashContext
from .parsing import OrderedInputCommand, get_input_order

# Version is loaded from package metadata
try:
    from importlib.metadata import version

    __version__ = version("hashtool")
except Exception:
    __version__ = "1.0.0"


def _select_algorithm(sha256: bool, md5: bool, blake3: bool, default: HashAlgorithm) -> HashAlgorithm:
    chosen = [
        algo
        for algo, flag in (
            (HashAlgorithm.SHA256, sha256),
            (HashAlgorithm.MD5, md5),
            (HashAlgorithm.BLAKE3, blake3),
        )
        if flag
    ]
    if len(chosen) > 1:
        names = ", ".join(f"--{algo.value}" for algo in chosen)
        raise click.UsageError(f"Options {names} are mutually exclusive.")
    return chosen[0] if chosen else default


@click.command(
    cls=OrderedInputCommand,
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("-S", "--sha256", is_flag=True, help="Compute the hash using sha256 algorithm (Default)")
@click.option("-M", "--md5", is_flag=True, help="Compute the hash using md5 algorithm")
@click.option("-B", "--blake3", is_flag=True, help="Compute the hash using blake3 algorithm")
@click.option(
    "-t",
    "--text",
    TEXT_PARAM,
    multiple=True,
    metavar="TEXT",
    help="Compute the hash of this text. Can be provided multiple times, compute the hash of each text",
)
@click.option(
    "-f",
    "--file",
    FILE_PARAM,
    multiple=True,
    metavar="FILE",
    help="Compute the hash of this file. Can be provided multiple times, compute the hash of each file",
)
@click.option(
    "-u",
    "--update",
    is_flag=True,
    help="Instead of computing the hash of each text/file, update on each of them, and print the finalized digest",
)
@click.option(
    "-H",
    "--hex",
    "hex_mode",
    is_flag=True,
    help="Treat the text or file content as hex strings, e.g. '0x19 0xab 0xcd 0xef'",
)
@click.option("-q", "--quiet", is_flag=True, help="Do not print the text/file, just the hash")
@click.option(
    "-p",
    "--progressive",
    is_flag=True,
    help="With --update, also print the running digest after each text/file",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Read configuration from this TOML file",
)
@click.option("-v", "--verbose", is_flag=True, help="Log diagnostics to stderr")
@click.version_option(version=__version__, prog_name="hash")
@click.pass_context
def cli(
    ctx: click.Context,
    sha256: bool,
    md5: bool,
    blake3: bool,
    text: tuple[str, ...],
    file: tuple[str, ...],
    update: bool,
    hex_mode: bool,
    quiet: bool,
    progressive: bool,
    config_path: Path | None,
    verbose: bool,
) -> None:
    """Print string or file checksums."""
    if not text and not file:
        raise click.UsageError("Provide at least one --text or --file.")

    try:
        hctx = HashContext.create(config_path=config_path, verbose=verbose)
    except HashToolException as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(e.exit_code)

    settings = hctx.config.hash
    algorithm = _select_algorithm(sha256, md5, blake3, settings.algorithm)
    options = DigestOptions(
        algorithm=algorithm,
        hex=hex_mode or settings.hex,
        update=update or settings.update,
        progressive=progressive or settings.progressive,
    )
    quiet = quiet or settings.quiet

    logger = hctx.logger
    presenter = hctx.presenter

    if options.progressive and not options.update:
        logger.warning("--progressive has no effect without --update")

    try:
        inputs: list[HashInput] = resolve_inputs(get_input_order(ctx), text, file)
        logger.debug(
            "resolved %d inputs; algorithm=%s mode=%s hex=%s",
            len(inputs),
            options.algorithm.value,
            options.mode.value,
            options.hex,
        )
        for report in hctx.digest_service().run(inputs, options):
            presenter.print_report(report, quiet=quiet)
    except HashToolException as e:
        logger.error("%s", e)
        presenter.print_error(str(e))
        ctx.exit(e.exit_code)


__all__ = [
    "HashContext",
    "__version__",
    "cli",
]
