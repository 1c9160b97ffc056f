# topmark:header:start
#
#   project      : svgtidy
#   file         : optimize.py
#   file_relpath : src/svgtidy/cli/commands/optimize.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""svgtidy `optimize` command.

Optimizes one document or a whole directory tree.

Input modes:
  * ``INPUT`` is a file: the result goes to ``--output`` or, without it, to stdout.
  * ``INPUT`` is ``-``: the document is read from stdin; output as above.
  * ``INPUT`` is a directory: every ``*.svg`` file below it is optimized into
    ``--output`` (required), mirroring the relative layout. Files are processed
    concurrently (``--jobs``); a failing file does not stop the others.

Size reports are printed only when the markup goes to files, and ``-q``
silences them.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from svgtidy.cli.cmd_common import build_config_common, get_effective_verbosity
from svgtidy.cli.errors import (
    SvgtidyFileNotFoundError,
    SvgtidyIOError,
    SvgtidyParseError,
    SvgtidyPermissionDeniedError,
    SvgtidyUsageError,
    error_for,
)
from svgtidy.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_optimizer_options,
    split_names,
)
from svgtidy.config.logging import get_logger
from svgtidy.constants import SVG_FILE_SUFFIX
from svgtidy.dom.parser import ParseError
from svgtidy.pipeline.engine import FileJob, optimize_files, optimize_markup, print_options_for
from svgtidy.pipeline.pipelines import build_pipeline

if TYPE_CHECKING:
    from svgtidy.cli_shared.console_api import ConsoleLike
    from svgtidy.config.logging import SvgtidyLogger
    from svgtidy.config.model import Config

logger: SvgtidyLogger = get_logger(__name__)

STDIN_MARKER = "-"


def size_report(label: str, before: int, after: int) -> str:
    """Return a one-line size summary such as ``a.svg: 120 -> 80 bytes (33.3% saved)``."""
    saved = 100.0 * (before - after) / before if before else 0.0
    return f"{label}: {before} -> {after} bytes ({saved:.1f}% saved)"


def collect_svg_files(directory: Path) -> list[Path]:
    """Return every ``*.svg`` file below ``directory``, sorted for a stable order."""
    return sorted(p for p in directory.rglob(f"*{SVG_FILE_SUFFIX}") if p.is_file())


def _read_input(path: Path) -> str:
    try:
        return path.read_bytes().decode("utf-8")
    except (FileNotFoundError, IsADirectoryError) as e:
        raise SvgtidyFileNotFoundError(f"{path}: no such file") from e
    except PermissionError as e:
        raise SvgtidyPermissionDeniedError(f"{path}: permission denied") from e
    except UnicodeDecodeError as e:
        raise SvgtidyParseError(f"{path}: not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise SvgtidyIOError(f"{path}: {e}") from e


def _write_output(path: Path, text: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(text.encode("utf-8"))
    except PermissionError as e:
        raise SvgtidyPermissionDeniedError(f"{path}: permission denied") from e
    except OSError as e:
        raise SvgtidyIOError(f"{path}: {e}") from e


def _optimize_single(
    console: ConsoleLike,
    *,
    source: str,
    output: Path | None,
    config: Config,
    report: bool,
) -> None:
    if source == STDIN_MARKER:
        label = "<stdin>"
        text = click.get_text_stream("stdin").read()
    else:
        label = source
        text = _read_input(Path(source))

    try:
        result = optimize_markup(
            text,
            build_pipeline(config),
            options=print_options_for(config),
            multipass=config.multipass,
        )
    except ParseError as e:
        raise SvgtidyParseError(f"{label}: {e}") from e

    if output is None:
        console.markup(result)
        return
    _write_output(output, result)
    if report:
        console.print(size_report(label, len(text.encode("utf-8")), len(result.encode("utf-8"))))


def _optimize_directory(
    console: ConsoleLike,
    *,
    source: Path,
    output: Path,
    config: Config,
    jobs: int | None,
    report: bool,
) -> None:
    files = collect_svg_files(source)
    if not files:
        console.warn(f"No {SVG_FILE_SUFFIX} files found below {source}")
        return

    file_jobs = [FileJob(path, output / path.relative_to(source)) for path in files]
    results, encountered_error_code = optimize_files(file_jobs, config=config, max_workers=jobs)

    before = after = 0
    for result in results:
        if not result.ok:
            console.error(f"{result.job.source}: {result.message}")
            continue
        before += result.original_size
        after += result.optimized_size
        if report:
            console.print(
                size_report(str(result.job.source), result.original_size, result.optimized_size)
            )

    failed = sum(1 for result in results if not result.ok)
    if report:
        console.print(size_report(f"{len(results) - failed} file(s)", before, after))
    if encountered_error_code is not None:
        raise error_for(encountered_error_code, f"{failed} of {len(results)} file(s) failed")


@click.command(
    name="optimize",
    help=(
        "Optimize SVG markup. INPUT is a file, '-' for stdin, or a directory "
        "(requires --output; every *.svg below it is optimized)."
    ),
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("source", metavar="INPUT", type=str)
@click.option(
    "-o",
    "--output",
    "output",
    type=click.Path(dir_okay=True, file_okay=True, path_type=Path),
    default=None,
    help="Output file (or directory for a directory INPUT). Defaults to stdout.",
)
@click.option(
    "-j",
    "--jobs",
    "jobs",
    type=click.IntRange(min=1),
    default=None,
    help="Worker threads for directory batches (default: automatic).",
)
@common_optimizer_options
@common_config_options
def optimize_command(
    *,
    source: str,
    output: Path | None,
    jobs: int | None,
    precision: int | None,
    deg_precision: int | None,
    enable: tuple[str, ...],
    disable: tuple[str, ...],
    multipass: bool | None,
    pretty: bool | None,
    indent: int | None,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Optimize one document or every SVG file below a directory.

    Args:
        source (str): Input file, ``-`` for stdin, or a directory.
        output (Path | None): Output file or directory; stdout when None.
        jobs (int | None): Worker threads for directory batches.
        precision (int | None): Override for ``precision``.
        deg_precision (int | None): Override for ``deg_precision``.
        enable (tuple[str, ...]): Comma-separated passes to switch on.
        disable (tuple[str, ...]): Comma-separated passes to switch off.
        multipass (bool | None): Override for ``multipass``.
        pretty (bool | None): Override for ``pretty``.
        indent (int | None): Override for ``indent``.
        no_config (bool): Skip discovery of configuration files.
        config_paths (tuple[str, ...]): Explicit configuration files.

    Raises:
        SvgtidyUsageError: For a directory INPUT without ``--output``.
        SvgtidyFileNotFoundError: If INPUT does not exist.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    report = get_effective_verbosity(ctx) <= logging.WARNING

    config = build_config_common(
        no_config=no_config,
        config_paths=config_paths,
        overrides={
            "precision": precision,
            "deg_precision": deg_precision,
            "enable": split_names(enable),
            "disable": split_names(disable),
            "multipass": multipass,
            "pretty": pretty,
            "indent": indent,
        },
    )

    if source != STDIN_MARKER:
        path = Path(source)
        if not path.exists():
            raise SvgtidyFileNotFoundError(f"{source}: no such file or directory")
        if path.is_dir():
            if output is None:
                raise SvgtidyUsageError("A directory INPUT requires --output DIRECTORY.")
            if output.exists() and not output.is_dir():
                raise SvgtidyUsageError(f"--output {output} must be a directory.")
            _optimize_directory(
                console, source=path, output=output, config=config, jobs=jobs, report=report
            )
            return

    _optimize_single(console, source=source, output=output, config=config, report=report)
