# topmark:header:start
#
#   project      : svgtidy
#   file         : base.py
#   file_relpath : src/svgtidy/pipeline/passes/base.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Base class for class-based optimization passes.

The runner invokes passes as *callables*. `BasePass` implements the common
lifecycle:

    doc = pass_(doc)  # internally: log → apply

Subclasses override ``apply()`` and, when they read configuration, the
``from_config()`` factory. They are registered with
[`svgtidy.pipeline.registry.register_pass`][] which also sets ``name``.

The module also hosts small tree helpers shared by several passes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from svgtidy.config.logging import get_logger
from svgtidy.constants import DEFAULT_PRECISION
from svgtidy.dom.model import Element

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from svgtidy.config.logging import SvgtidyLogger
    from svgtidy.config.model import Config
    from svgtidy.dom.model import Document, Node

logger: SvgtidyLogger = get_logger(__name__)


@dataclass
class BasePass:
    """Reusable foundation for optimization passes.

    Do not override ``__call__`` unless you need custom lifecycle behavior.

    Attributes:
        name (str): Registered pass name, set by the registration decorator.
    """

    name: ClassVar[str] = ""

    def __call__(self, doc: Document) -> Document:
        """Invoke the pass lifecycle.

        Args:
            doc (Document): The document being optimized.

        Returns:
            Document: The same document instance after mutation.
        """
        logger.trace("Pass %s: applying", self.name)
        self.apply(doc)
        return doc

    def apply(self, doc: Document) -> None:
        """Rewrite ``doc`` in place. The default implementation does nothing.

        Args:
            doc (Document): The document being optimized.
        """
        pass

    @classmethod
    def from_config(cls, config: Config) -> BasePass:
        """Build an instance for ``config``. Option-free passes ignore it."""
        return cls()


@dataclass
class NumericPass(BasePass):
    """Base for passes that format numbers.

    Attributes:
        precision (int): Fractional digits kept.
        remove_leading_zero (bool): Emit ``.5`` instead of ``0.5``.
    """

    precision: int = DEFAULT_PRECISION
    remove_leading_zero: bool = True

    @classmethod
    def from_config(cls, config: Config) -> BasePass:
        return cls(precision=config.precision, remove_leading_zero=config.remove_leading_zero)


def filter_tree(nodes: list[Node], keep: Callable[[Node], bool]) -> list[Node]:
    """Return ``nodes`` without the ones rejected by ``keep``, recursively.

    Kept elements have their children filtered in place; a rejected node takes its
    whole subtree with it.

    Args:
        nodes (list[Node]): A children list.
        keep (Callable[[Node], bool]): Predicate deciding whether a node stays.

    Returns:
        list[Node]: The filtered list.
    """
    kept: list[Node] = []
    for node in nodes:
        if not keep(node):
            continue
        if isinstance(node, Element):
            node.replace_children(filter_tree(node.children, keep))
        kept.append(node)
    return kept


def iter_parents(doc: Document) -> Iterator[tuple[Element, list[Element]]]:
    """Yield ``(element, ancestors)`` pairs in document order.

    ``ancestors`` lists the enclosing elements from the root down; it is shared
    between iterations and must not be stored.
    """
    stack: list[Element] = []

    def walk(element: Element) -> Iterator[tuple[Element, list[Element]]]:
        yield element, stack
        stack.append(element)
        for child in element.children:
            if isinstance(child, Element):
                yield from walk(child)
        stack.pop()

    for node in doc.children:
        if isinstance(node, Element):
            yield from walk(node)


def iter_post_order(element: Element) -> Iterator[Element]:
    """Yield the descendants of ``element`` children first, then ``element`` itself."""
    for child in list(element.children):
        if isinstance(child, Element):
            yield from iter_post_order(child)
    yield element


def has_element(doc: Document, *names: str) -> bool:
    """Return True if the document contains an element named in ``names``."""
    return any(element.name in names for element in doc.iter_elements())
