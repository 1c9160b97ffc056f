# topmark:header:start
#
#   project      : svgtidy
#   file         : runner.py
#   file_relpath : src/svgtidy/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Run an optimization pipeline over one document."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from svgtidy.config.logging import get_logger
from svgtidy.dom.printer import print_document

if TYPE_CHECKING:
    from collections.abc import Sequence

    from svgtidy.config.logging import SvgtidyLogger
    from svgtidy.dom.model import Document
    from svgtidy.pipeline.contracts import Pass

logger: SvgtidyLogger = get_logger(__name__)

MAX_ROUNDS: Final[int] = 10


def run(doc: Document, passes: Sequence[Pass]) -> Document:
    """Execute the passes sequentially.

    Args:
        doc (Document): The document; mutated in place.
        passes (Sequence[Pass]): Ordered pass instances.

    Returns:
        Document: The same document after all passes have run.
    """
    for pass_ in passes:
        doc = pass_(doc)
    return doc


def run_to_fixed_point(
    doc: Document, passes: Sequence[Pass], *, max_rounds: int = MAX_ROUNDS
) -> Document:
    """Repeat the pass list until a round leaves the canonical output unchanged.

    A pass may expose an opportunity to a pass that runs before it (removing an
    element can orphan an id, for instance). Repeating until nothing changes
    makes a second optimization of the result a no-op.

    Args:
        doc (Document): The document; mutated in place.
        passes (Sequence[Pass]): Ordered pass instances.
        max_rounds (int): Upper bound on the number of rounds.

    Returns:
        Document: The same document at its fixed point (or after ``max_rounds``).
    """
    previous = print_document(doc)
    for round_no in range(1, max_rounds + 1):
        doc = run(doc, passes)
        current = print_document(doc)
        if current == previous:
            logger.debug("Fixed point reached after %d round(s)", round_no)
            break
        previous = current
    else:
        logger.warning("No fixed point after %d rounds", max_rounds)
    return doc
