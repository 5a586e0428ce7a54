from __future__ import annotations

import difflib
import logging
import pathlib
import shutil
import sys

import click

from ronfmt import config
from ronfmt.core import format_text
from ronfmt.highlight import highlight

__all__ = ("main",)

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(levelname)s] %(message)s"


def diff(v1: str, v2: str, filename: str) -> str:
    lines = difflib.unified_diff(
        v1.splitlines(),
        v2.splitlines(),
        fromfile=filename,
        tofile=filename,
        lineterm="",
    )
    return "".join(f"{line}\n" for line in lines)


def backup_path(path: pathlib.Path) -> pathlib.Path:
    return path.with_name(path.name + ".bak")


@click.command()
@click.version_option(package_name="ronfmt")
@click.argument(
    "file",
    type=click.Path(exists=True, dir_okay=False, path_type=pathlib.Path),
)
@click.option(
    "-w",
    "--width",
    type=click.IntRange(min=0),
    default=config.WIDTH,
    show_default=True,
    help="Soft maximum line width used to decide where to break lines.",
)
@click.option(
    "-t",
    "--tab-size",
    type=click.IntRange(min=0),
    default=config.INDENT,
    show_default=True,
    help="Indentation size in spaces.",
)
@click.option("-i", "--in-place", is_flag=True, help="Format FILE in place.")
@click.option(
    "--no-backup",
    is_flag=True,
    help="Do not copy FILE to FILE.bak before formatting it in place.",
)
@click.option(
    "--check",
    is_flag=True,
    help="Do not write anything, fail if FILE isn't formatted.",
)
@click.option(
    "--color/--no-color",
    default=None,
    help="Highlight the output (defaults to on for terminals).",
)
@click.option("-v", "--verbose", is_flag=True, help="Print debug logs.")
def main(
    file: pathlib.Path,
    width: int,
    tab_size: int,
    in_place: bool,
    no_backup: bool,
    check: bool,
    color: bool | None,
    verbose: bool,
) -> None:
    """Autoformat the RON file FILE."""
    logging.basicConfig(
        format=LOG_FORMAT, level=logging.DEBUG if verbose else logging.WARNING
    )
    with open(file, "r") as fd:
        orig = fd.read()
    try:
        new = format_text(
            orig,
            config.Config(indent=tab_size, width=width),
            filename=str(file),
        )
    except SyntaxError as e:
        click.secho(
            f"{file}:{e.lineno}:{e.offset}: {e.msg}", fg="red", err=True
        )
        sys.exit(1)

    if check:
        if new != orig:
            click.echo(diff(orig, new, filename=str(file)), err=True, nl=False)
            sys.exit(1)
        return

    if in_place:
        if not no_backup:
            backup = backup_path(file)
            logger.debug("backing up %s to %s", file, backup)
            shutil.copyfile(file, backup)
        with open(file, "w") as fd:
            fd.write(new)
        return

    if color is None:
        color = sys.stdout.isatty()
    click.echo(highlight(new) if color else new, nl=False, color=color)


if __name__ == "__main__":
    main()
