# topmark:header:start
#
#   project      : svgtidy
#   file         : registry.py
#   file_relpath : src/svgtidy/pipeline/registry.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Registry of optimization passes.

Pass classes register themselves with the `register_pass` class decorator when
their module is imported. `register_all_passes` imports every module of the
``passes`` package so that the registry is complete before it is queried.
"""

from __future__ import annotations

import importlib
import pkgutil
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from svgtidy.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from svgtidy.config.logging import SvgtidyLogger
    from svgtidy.pipeline.passes.base import BasePass

logger: SvgtidyLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class PassInfo:
    """Registry entry for one pass.

    Attributes:
        name (str): Public pass name (e.g. ``"removeComments"``).
        pass_class (type[BasePass]): The implementing class.
        enabled_by_default (bool): Whether the default pipeline runs it.
        description (str): First line of the class docstring.
    """

    name: str
    pass_class: type[BasePass]
    enabled_by_default: bool
    description: str


_registry: dict[str, PassInfo] = {}


def register_pass(
    name: str, *, enabled_by_default: bool = True
) -> Callable[[type[BasePass]], type[BasePass]]:
    """Class decorator registering a pass under ``name``.

    Args:
        name (str): Public pass name.
        enabled_by_default (bool): Whether the default pipeline includes the pass.

    Returns:
        Callable[[type[BasePass]], type[BasePass]]: The decorator.

    Raises:
        ValueError: If a pass is already registered under ``name``.
    """

    def decorator(cls: type[BasePass]) -> type[BasePass]:
        logger.debug("Registering pass %s as '%s'", cls.__name__, name)
        if name in _registry:
            raise ValueError(f"Pass '{name}' is already registered.")
        cls.name = name
        doc = (cls.__doc__ or "").strip()
        _registry[name] = PassInfo(
            name=name,
            pass_class=cls,
            enabled_by_default=enabled_by_default,
            description=doc.splitlines()[0] if doc else "",
        )
        return cls

    return decorator


def register_all_passes() -> None:
    """Import all pass modules so that they register themselves."""
    package_dir = Path(__file__).parent / "passes"
    for module_info in pkgutil.iter_modules([str(package_dir)]):
        if not module_info.ispkg:
            importlib.import_module(f"svgtidy.pipeline.passes.{module_info.name}")


def get_pass_registry() -> Mapping[str, PassInfo]:
    """Return a read-only view of the registered passes, keyed by name."""
    register_all_passes()
    return MappingProxyType(_registry)
