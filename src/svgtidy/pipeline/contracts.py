# topmark:header:start
#
#   project      : svgtidy
#   file         : contracts.py
#   file_relpath : src/svgtidy/pipeline/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Type contracts for optimization passes (engine-facing).

A pass is an instantiated, callable object. The runner invokes it as
``pass_(doc)`` where ``doc`` is the `Document` being optimized.

Lifecycle
---------
1) ``__call__`` logs the application and calls ``apply(doc)``.
2) ``apply`` mutates the document in place. It never raises for values it does
   not understand; those are left untouched.
3) ``__call__`` returns the same document, for chaining.

Attributes:
----------
name : str
    Registered pass name (e.g. ``"removeComments"``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from svgtidy.dom.model import Document


class Pass(Protocol):
    """Protocol for a single optimization pass.

    Implementations typically subclass
    [`svgtidy.pipeline.passes.base.BasePass`][].
    """

    name: str

    def apply(self, doc: "Document") -> None:
        """Rewrite the document in place.

        Args:
            doc (Document): The document, owned exclusively by this pass while it runs.
        """
        ...

    def __call__(self, doc: "Document") -> "Document":
        """Run the pass lifecycle.

        Args:
            doc (Document): The document to optimize.

        Returns:
            Document: The same document object, for chaining.
        """
        ...
