# topmark:header:start
#
#   project      : svgtidy
#   file         : pipelines.py
#   file_relpath : src/svgtidy/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Pass ordering and pipeline construction.

`PASS_ORDER` is the canonical order of every registered pass. A pipeline is the
subsequence selected by the configuration: passes enabled by default, plus the
ones named in ``enable``, minus the ones named in ``disable`` (``disable`` wins).

Overview
--------
- cleanup: prolog, comments, metadata and editor data are dropped first;
- attributes: style promotion, whitespace, defaults and useless paint;
- structure: ids, defs, hidden and empty nodes, shapes, groups and paths;
- values: path data, transforms, numbers, lists and colors are re-encoded;
- finishing: namespace declarations, attribute order and defs order.

Notes:
* Attribute removal runs before the structural passes so that structural
  decisions see final attribute sets.
* Structural simplification runs before value formatting.
* ``removeHiddenElems`` runs before ``cleanupIds`` so that references held by
  removed elements no longer keep ids alive.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from svgtidy.config.logging import get_logger
from svgtidy.config.model import Config
from svgtidy.pipeline.registry import get_pass_registry

if TYPE_CHECKING:
    from collections.abc import Iterable

    from svgtidy.config.logging import SvgtidyLogger
    from svgtidy.pipeline.contracts import Pass

logger: SvgtidyLogger = get_logger(__name__)

PASS_ORDER: Final[tuple[str, ...]] = (
    "removeDoctype",
    "removeXMLProcInst",
    "removeComments",
    "removeMetadata",
    "removeTitle",
    "removeDesc",
    "removeEditorsNSData",
    "removeScriptElement",
    "removeRasterImages",
    "removeStyleElement",
    "convertStyleToAttrs",
    "cleanupAttrs",
    "removeEmptyAttrs",
    "removeUnknownsAndDefaults",
    "removeUselessStrokeAndFill",
    "removeDimensions",
    "removeHiddenElems",
    "cleanupIds",
    "removeUselessDefs",
    "removeEmptyText",
    "convertOneStopGradients",
    "convertEllipseToCircle",
    "convertShapeToPath",
    "moveGroupAttrsToElems",
    "moveElemsAttrsToGroup",
    "removeEmptyContainers",
    "collapseGroups",
    "mergePaths",
    "convertPathData",
    "convertTransform",
    "cleanupNumericValues",
    "cleanupListOfValues",
    "convertColors",
    "removeUnusedNS",
    "sortAttrs",
    "sortDefsChildren",
)


def resolve_pass_names(enable: Iterable[str] = (), disable: Iterable[str] = ()) -> list[str]:
    """Return the names of the selected passes in pipeline order.

    Args:
        enable (Iterable[str]): Passes to run in addition to the defaults.
        disable (Iterable[str]): Passes to skip; takes precedence over ``enable``.

    Returns:
        list[str]: Selected pass names, ordered as in `PASS_ORDER`.

    Raises:
        ValueError: If a name is not a registered pass.
    """
    registry = get_pass_registry()
    enabled = set(enable)
    disabled = set(disable)
    unknown = sorted((enabled | disabled) - set(registry))
    if unknown:
        raise ValueError(f"Unknown pass name(s): {', '.join(unknown)}")

    selected: list[str] = []
    for name in PASS_ORDER:
        if name in disabled:
            continue
        if registry[name].enabled_by_default or name in enabled:
            selected.append(name)
    return selected


def build_pipeline(config: Config | None = None) -> tuple[Pass, ...]:
    """Instantiate the passes selected by ``config``.

    Args:
        config (Config | None): Effective configuration; defaults when None.

    Returns:
        tuple[Pass, ...]: Pass instances in pipeline order.

    Raises:
        ValueError: If the configuration names an unknown pass.
    """
    config = config or Config()
    registry = get_pass_registry()
    names = resolve_pass_names(config.enable, config.disable)
    logger.debug("Pipeline: %s", ", ".join(names))
    return tuple(registry[name].pass_class.from_config(config) for name in names)


def default_pipeline() -> tuple[Pass, ...]:
    """Return the default pipeline (every pass enabled by default, default options)."""
    return build_pipeline(Config())
