#!/usr/bin/env python3
"""
dayone2md CLI
-------------

Command-line interface for converting Day One exports to Markdown notes.

Usage:
    # Convert a zip export
    dayone2md ~/Downloads/Export.zip ~/notes/dayone

    # Convert an already extracted export, echoing progress
    dayone2md -v ~/Downloads/Export ~/notes/dayone

    # Show journals and entry counts without writing
    dayone2md --dry-run ~/Downloads/Export.zip ~/notes/dayone
"""
from __future__ import annotations

from pathlib import Path
from typing import Tuple

import click

from dayone2md.core.cli import setup_logger
from dayone2md.core.logging_manager import ConversionLogger, handle_cli_error
from dayone2md.core.paths import LOG_DIR, LOG_DIR_ENVVAR
from dayone2md.pipeline.json2md import convert_export, preview_export


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("paths", nargs=-1, metavar="INPUT OUTPUT_DIR")
@click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    envvar=LOG_DIR_ENVVAR,
    show_default=True,
    help="Directory for log files",
)
@click.option("-v", "--verbose", is_flag=True, help="Echo progress and show tracebacks")
@click.option("--dry-run", is_flag=True, help="List journals without writing notes")
@click.pass_context
def cli(
    ctx: click.Context,
    paths: Tuple[str, ...],
    log_dir: str,
    verbose: bool,
    dry_run: bool,
) -> None:
    """
    Convert a Day One JSON export into Markdown notes.

    INPUT is a Day One export zip or an extracted export directory.
    OUTPUT_DIR receives one folder per journal with a <uuid>.md note per
    entry, plus a copy of the photos directory.

    \b
    The export directory should have the following structure:
    1. 1~N <journal>.json files
    2. a photos directory holding the images referenced by entries
    """
    if len(paths) < 2:
        click.echo(ctx.get_help())
        ctx.exit(0)

    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "dayone2md", verbose=verbose)
    logger: ConversionLogger = ctx.obj["logger"]

    input_path, output_dir = Path(paths[0]), Path(paths[1])

    if dry_run:
        try:
            journals = preview_export(input_path, logger)
        except Exception as e:
            handle_cli_error(ctx, e, "preview", {"input": str(input_path)})

        click.echo(f"Would convert {len(journals)} journals:")
        for name, count in journals.items():
            click.echo(f"  • {name}: {count} entries")
        click.echo(f"\nOutput directory: {output_dir}")
        click.echo("\n💡 Run without --dry-run to execute conversion")
        return

    click.echo(f"📝 Converting {input_path} to Markdown...")

    try:
        stats = convert_export(input_path, output_dir, logger)
    except Exception as e:
        handle_cli_error(
            ctx,
            e,
            "convert",
            additional_context={"input": str(input_path), "output": str(output_dir)},
        )

    click.echo("\n✅ Conversion complete:")
    click.echo(f"  Journals processed: {stats.journals_processed}")
    click.echo(f"  Entries written: {stats.entries_written}")
    click.echo(f"  Attachments copied: {stats.attachments_copied}")
    click.echo(f"  Duration: {stats.duration():.2f}s")


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
