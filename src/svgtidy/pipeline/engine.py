# topmark:header:start
#
#   project      : svgtidy
#   file         : engine.py
#   file_relpath : src/svgtidy/pipeline/engine.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Execution helpers for optimizing markup and files (engine layer).

Both the public API and the CLI go through this module.

Design goals:
  - No CLI dependencies: nothing under ``svgtidy.cli`` and no Click imports.
    Presentation (printing, colors, exit) is the CLI's job.
  - Structured results: `optimize_files` returns one `FileResult` per job, in
    input order, plus an optional `ExitCode` summarizing the first failure.
  - Logging only: failures are logged; callers decide how to surface them.

Typical usage:

    results, err = optimize_files(jobs, config=cfg, max_workers=4)
    if err is not None:
        # CLI maps this to a process exit; API callers may handle it differently.
        ...
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import TYPE_CHECKING

from svgtidy.cli_shared.exit_codes import ExitCode
from svgtidy.config.logging import get_logger
from svgtidy.config.model import Config
from svgtidy.dom.parser import ParseError, parse
from svgtidy.dom.printer import PrintOptions, print_document
from svgtidy.pipeline import runner
from svgtidy.pipeline.pipelines import build_pipeline

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from svgtidy.config.logging import SvgtidyLogger
    from svgtidy.pipeline.contracts import Pass

logger: SvgtidyLogger = get_logger(__name__)


def print_options_for(config: Config) -> PrintOptions:
    """Return the printer options selected by ``config``."""
    return PrintOptions(pretty=config.pretty, indent=config.indent)


def optimize_markup(
    text: str,
    passes: Sequence[Pass],
    *,
    options: PrintOptions | None = None,
    multipass: bool = True,
) -> str:
    """Parse, optimize and print one document.

    In compact mode a result longer than ``text`` is discarded and ``text`` is
    returned instead; pretty output is exempt since it trades size for layout.

    Args:
        text (str): Source markup.
        passes (Sequence[Pass]): Ordered pass instances.
        options (PrintOptions | None): Printer options; compact when None.
        multipass (bool): Repeat the passes until the output stops changing.

    Returns:
        str: The optimized markup.

    Raises:
        ParseError: If ``text`` is not well-formed.
    """
    options = options or PrintOptions()
    doc = parse(text)
    if multipass:
        doc = runner.run_to_fixed_point(doc, passes)
    else:
        doc = runner.run(doc, passes)
    result = print_document(doc, options)
    if not options.pretty and len(result) > len(text):
        logger.debug("Optimized output is longer than the input (%d > %d)", len(result), len(text))
        return text
    return result


@dataclass(frozen=True, slots=True)
class FileJob:
    """One file to optimize.

    Attributes:
        source (Path): Input file.
        destination (Path | None): Output file; None rewrites ``source`` in place.
    """

    source: Path
    destination: Path | None = None


@dataclass(frozen=True, slots=True)
class FileResult:
    """Outcome of one `FileJob`.

    Attributes:
        job (FileJob): The job.
        original_size (int): Input size in bytes (0 if unreadable).
        optimized_size (int): Output size in bytes (0 on failure).
        error (ExitCode | None): Failure category, None on success.
        message (str): Failure detail for reporting.
    """

    job: FileJob
    original_size: int = 0
    optimized_size: int = 0
    error: ExitCode | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        """Return True if the file was optimized and written."""
        return self.error is None


def _process(job: FileJob, config: Config) -> FileResult:
    path = job.source
    original_size = 0
    try:
        raw = path.read_bytes()
        original_size = len(raw)
        text = raw.decode("utf-8")
        result = optimize_markup(
            text,
            build_pipeline(config),
            options=print_options_for(config),
            multipass=config.multipass,
        )
        destination = job.destination or path
        destination.parent.mkdir(parents=True, exist_ok=True)
        data = result.encode("utf-8")
        destination.write_bytes(data)
        logger.info("%s: %d -> %d bytes", path, original_size, len(data))
        return FileResult(job, original_size, len(data))
    except (FileNotFoundError, IsADirectoryError) as e:
        logger.error("%s: %s", e, path)
        return FileResult(job, original_size, error=ExitCode.FILE_NOT_FOUND, message=str(e))
    except PermissionError as e:
        logger.error("%s: %s", e, path)
        return FileResult(job, original_size, error=ExitCode.PERMISSION_DENIED, message=str(e))
    except UnicodeDecodeError as e:
        logger.error("Encoding error while reading %s: %s", path, e)
        return FileResult(job, original_size, error=ExitCode.PARSE_ERROR, message=str(e))
    except ParseError as e:
        logger.error("Parse error in %s: %s", path, e)
        return FileResult(job, original_size, error=ExitCode.PARSE_ERROR, message=str(e))
    except OSError as e:
        logger.error("I/O error while processing %s: %s", path, e)
        return FileResult(job, original_size, error=ExitCode.IO_ERROR, message=str(e))
    except Exception as e:  # pragma: no cover
        logger.exception("Unexpected error processing %s: %s", path, e)
        return FileResult(job, original_size, error=ExitCode.PIPELINE_ERROR, message=str(e))


def optimize_files(
    jobs: Sequence[FileJob],
    *,
    config: Config | None = None,
    max_workers: int | None = None,
) -> tuple[list[FileResult], ExitCode | None]:
    """Optimize files concurrently and return (results, encountered_error_code).

    Each file is an independent unit of work with its own document and pass
    instances. A failure is logged and recorded on its `FileResult`; the other
    files are processed regardless.

    Args:
        jobs (Sequence[FileJob]): Files to optimize.
        config (Config | None): Effective configuration; defaults when None.
        max_workers (int | None): Worker threads; None lets the executor decide.

    Returns:
        tuple[list[FileResult], ExitCode | None]: Results in ``jobs`` order and the
            first non-success exit code in that order (None when all succeeded).

    Raises:
        ValueError: If the configuration names an unknown pass.
    """
    config = config or Config()
    # Surface configuration errors once, before any file is touched
    build_pipeline(config)

    if max_workers == 1 or len(jobs) <= 1:
        results = [_process(job, config) for job in jobs]
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = list(executor.map(lambda job: _process(job, config), jobs))

    encountered_error_code: ExitCode | None = None
    for result in results:
        if result.error is not None:
            encountered_error_code = result.error
            break
    return results, encountered_error_code
