# topmark:header:start
#
#   project      : svgtidy
#   file         : references.py
#   file_relpath : src/svgtidy/pipeline/passes/references.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Find and rewrite id references.

Three reference forms are recognized in attribute values:

- ``url(#id)`` (paint servers, clip paths, masks, filters, markers), anywhere in
  the value, ``style`` included;
- ``#id`` as the whole value of ``href`` / ``xlink:href``;
- ``id.event`` tokens in the SMIL timing attributes ``begin`` and ``end``.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Mapping

    from svgtidy.dom.model import Document, Element

URL_REFERENCE_RE: Final[re.Pattern[str]] = re.compile(
    r"url\(\s*(['\"]?)#([^'\")\s]+)\1\s*\)"
)
HREF_ATTRIBUTES: Final[tuple[str, ...]] = ("href", "xlink:href")
TIMING_ATTRIBUTES: Final[tuple[str, ...]] = ("begin", "end")
_TIMING_ID_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z_][\w-]*")


def _timing_ids(value: str) -> Iterator[tuple[int, int]]:
    """Yield the spans of the ids in a ``begin``/``end`` value."""
    pos = 0
    for token in value.split(";"):
        stripped = token.strip()
        start = pos + token.find(stripped) if stripped else pos
        dot = stripped.find(".")
        if dot > 0 and _TIMING_ID_RE.fullmatch(stripped[:dot]):
            yield start, start + dot
        pos += len(token) + 1


def iter_references(element: Element) -> Iterator[str]:
    """Yield every id referenced by the attributes of ``element``."""
    for name, value in element.attributes.items():
        for m in URL_REFERENCE_RE.finditer(value):
            yield m.group(2)
        if name in HREF_ATTRIBUTES and value.startswith("#"):
            yield value[1:]
        if name in TIMING_ATTRIBUTES:
            for start, stop in _timing_ids(value):
                yield value[start:stop]


def collect_references(doc: Document) -> set[str]:
    """Return the set of ids referenced anywhere in ``doc``."""
    refs: set[str] = set()
    for element in doc.iter_elements():
        refs.update(iter_references(element))
    return refs


def rewrite_references(element: Element, rename: Callable[[str], str | None]) -> None:
    """Rewrite the references held by ``element``.

    Args:
        element (Element): Element whose attributes are rewritten in place.
        rename (Callable[[str], str | None]): Maps an id to its replacement; None
            leaves the reference as is.
    """

    def url_sub(m: re.Match[str]) -> str:
        new = rename(m.group(2))
        return m.group(0) if new is None else f"url(#{new})"

    for name, value in list(element.attributes.items()):
        updated = URL_REFERENCE_RE.sub(url_sub, value)
        if name in HREF_ATTRIBUTES and updated.startswith("#"):
            new = rename(updated[1:])
            if new is not None:
                updated = f"#{new}"
        if name in TIMING_ATTRIBUTES:
            for start, stop in reversed(list(_timing_ids(updated))):
                new = rename(updated[start:stop])
                if new is not None:
                    updated = updated[:start] + new + updated[stop:]
        if updated != value:
            element.set(name, updated)


def index_ids(doc: Document) -> Mapping[str, Element]:
    """Return the elements carrying an id, keyed by id (first occurrence wins)."""
    ids: dict[str, Element] = {}
    for element in doc.iter_elements():
        value = element.get("id")
        if value is not None and value not in ids:
            ids[value] = element
    return ids
