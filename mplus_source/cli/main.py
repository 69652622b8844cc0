import logging
from functools import wraps
from pathlib import Path

import click

from mplus_source import __version__ as about
from mplus_source.cli.config import setup_logging
from mplus_source.cli.exit_codes import exit_code_for
from mplus_source.cli.presenter import CliPresenter
from mplus_source.cli.validators import validate_chapter, validate_series
from mplus_source.constants import EXTENSION_ID, ImageQuality
from mplus_source.errors import SourceError
from mplus_source.source.decryption import decrypt_bytes, decrypt_page
from mplus_source.source.init import MangaPlusSource

# Get a logger for this module.
log = logging.getLogger(__name__)

# Define an epilog message with examples.
EPILOG = f"""
Examples:

{click.style('• find the catalog entry for a title', fg="green")}

    $ mplus-source search "one piece"

{click.style('• list all chapters of title 100020', fg="green")}

    $ mplus-source chapters https://mangaplus.shueisha.co.jp/titles/100020

{click.style('• save the decrypted first page of chapter 1000486 in low quality', fg="green")}

    $ mplus-source page 1000486 0 -q low -o page.jpg
"""


def handle_source_errors(command):
    """Report ``SourceError`` through the presenter and exit with its mapped code."""

    @wraps(command)
    def wrapper(*args, **kwargs):
        ctx = click.get_current_context()
        try:
            return command(*args, **kwargs)
        except SourceError as exc:
            exit_code = exit_code_for(exc)
            log.debug("Command failed", exc_info=True)
            ctx.obj["presenter"].emit_error(exc, exit_code)
            ctx.exit(exit_code)

    return wrapper


@click.group(
    help=about.__description__,
    epilog=EPILOG,
)
@click.version_option(
    about.__version__,
    prog_name=about.__title__,
    message=f"%(prog)s, version %(version)s\nSource id {EXTENSION_ID}",
)
@click.option(
    "--json", "json_output",
    is_flag=True,
    default=False,
    help="Emit machine-readable JSON",
    envvar="MPLUS_JSON",
)
@click.option(
    "--quiet",
    is_flag=True,
    default=False,
    help="Suppress human-readable output",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Log requests and decryption steps",
    envvar="MPLUS_VERBOSE",
)
@click.pass_context
def main(ctx: click.Context, json_output: bool, quiet: bool, verbose: bool):
    """
    Entry point for the MANGA Plus source CLI.

    Parameters:
        ctx (click.Context): Click context.
        json_output (bool): Flag to emit JSON instead of human-readable text.
        quiet (bool): Flag to suppress human-readable output.
        verbose (bool): Flag to enable debug logging.
    """
    setup_logging(logging.DEBUG if verbose else logging.WARNING)
    presenter = CliPresenter(json_output=json_output, quiet=quiet)
    presenter.emit_intro(about.__intro__)
    ctx.ensure_object(dict)
    ctx.obj["presenter"] = presenter
    ctx.obj.setdefault("source_factory", MangaPlusSource)


def _source(ctx: click.Context) -> MangaPlusSource:
    return ctx.obj["source_factory"]()


@main.command(help="Search the catalog for a title")
@click.argument("query")
@click.pass_context
@handle_source_errors
def search(ctx: click.Context, query: str):
    result = _source(ctx).search(query)
    ctx.obj["presenter"].emit_search_result(result)


@main.command(help="List the chapters of a series")
@click.argument("series", callback=validate_series)
@click.pass_context
@handle_source_errors
def chapters(ctx: click.Context, series: str):
    chapter_series = _source(ctx).list_chapters(series)
    ctx.obj["presenter"].emit_chapters(chapter_series)


@main.command(help="Resolve the page images of a chapter")
@click.argument("chapter", callback=validate_chapter)
@click.pass_context
@handle_source_errors
def pages(ctx: click.Context, chapter: str):
    chapter_pages = _source(ctx).get_pages(chapter)
    ctx.obj["presenter"].emit_pages(chapter_pages)


@main.command(help="Download and decrypt one page of a chapter")
@click.argument("chapter", callback=validate_chapter)
@click.argument("index", type=click.IntRange(min=0))
@click.option(
    "--quality", "-q",
    type=click.Choice([quality.value for quality in ImageQuality]),
    default=ImageQuality.HIGH.value,
    show_default=True,
    help="Image quality",
    envvar="MPLUS_QUALITY",
)
@click.option(
    "--out", "-o",
    "out_file",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    required=True,
    metavar="<file>",
    help="File receiving the decrypted image bytes",
)
@click.pass_context
@handle_source_errors
def page(ctx: click.Context, chapter: str, index: int, quality: str, out_file: Path):
    source = _source(ctx)
    chapter_pages = source.get_pages(chapter)
    if index >= len(chapter_pages):
        raise click.BadParameter(
            f"Chapter {chapter} has {len(chapter_pages)} page(s)",
            param_hint="INDEX",
        )
    image = source.download_page(chapter_pages[index], quality)
    out_file.write_bytes(image)
    ctx.obj["presenter"].emit_notice(f"Saved {len(image)} bytes to {out_file}")


@main.command(help="Decrypt a downloaded page with its hexadecimal key")
@click.argument("key")
@click.argument("in_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--out", "-o",
    "out_file",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    required=True,
    metavar="<file>",
    help="File receiving the decrypted bytes",
)
@click.option(
    "--base64", "as_base64",
    is_flag=True,
    default=False,
    help="Input is base64 text; output is written as base64 text",
)
@click.pass_context
@handle_source_errors
def decrypt(ctx: click.Context, key: str, in_file: Path, out_file: Path, as_base64: bool):
    if as_base64:
        payload = in_file.read_text(encoding="utf-8", errors="replace").strip()
        out_file.write_text(decrypt_page(key, payload), encoding="ascii")
    else:
        out_file.write_bytes(decrypt_bytes(key, in_file.read_bytes()))
    ctx.obj["presenter"].emit_notice(f"Decrypted {in_file} to {out_file}")


if __name__ == "__main__":
    main(prog_name=about.__title__)
