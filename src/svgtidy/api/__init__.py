# topmark:header:start
#
#   project      : svgtidy
#   file         : __init__.py
#   file_relpath : src/svgtidy/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Public svgtidy API (stable surface).

This module exposes a **small, typed API** for integrations that want to
optimize markup programmatically without going through the CLI.

Configuration contract
----------------------
- Functions accept either a frozen [`svgtidy.config.Config`][] or a plain
  **mapping** mirroring the TOML shape (``{"precision": 2, "disable": [...]}``).
  Mappings are validated and merged over the built-in defaults; no
  configuration file is discovered.
- `optimize` is fail-soft: input that does not parse is returned unchanged, so
  it can sit in a build step without guarding every call.

```python
import svgtidy

small = svgtidy.optimize(markup, config={"precision": 2, "enable": ["removeStyleElement"]})
```
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from svgtidy.codecs.path_data import parse_path_data, serialize_path_data
from svgtidy.codecs.transform import compose, parse_transform, serialize_transform
from svgtidy.config.logging import get_logger
from svgtidy.config.model import Config, MutableConfig
from svgtidy.constants import SVGTIDY_VERSION
from svgtidy.dom.parser import ParseError, parse
from svgtidy.dom.printer import PrintOptions, print_document
from svgtidy.pipeline import runner
from svgtidy.pipeline.engine import optimize_markup, print_options_for
from svgtidy.pipeline.pipelines import build_pipeline

if TYPE_CHECKING:
    from svgtidy.config.logging import SvgtidyLogger
    from svgtidy.dom.model import Document

logger: SvgtidyLogger = get_logger(__name__)


__all__: list[str] = [
    "Config",
    "ParseError",
    "PrintOptions",
    "compose",
    "optimize",
    "optimize_document",
    "parse",
    "parse_path_data",
    "parse_transform",
    "print_document",
    "resolve_config",
    "serialize_path_data",
    "serialize_transform",
    "version",
]


def resolve_config(config: Config | Mapping[str, Any] | None = None) -> Config:
    """Normalize the ``config`` argument of the public functions.

    Args:
        config (Config | Mapping[str, Any] | None): A frozen config, a TOML-shaped
            mapping, or None for the defaults.

    Returns:
        Config: The frozen configuration.

    Raises:
        ConfigError: If the mapping holds unknown keys or invalid values.
    """
    if config is None:
        return Config()
    if isinstance(config, Config):
        return config
    return MutableConfig.from_defaults().apply_overrides(config).freeze()


def optimize(text: str, config: Config | Mapping[str, Any] | None = None) -> str:
    """Optimize one document given as text.

    Args:
        text (str): Source markup.
        config (Config | Mapping[str, Any] | None): Pass selection and options.

    Returns:
        str: The optimized markup; ``text`` itself when it does not parse or when
            the compact result would be longer.

    Raises:
        ConfigError: If ``config`` is an invalid mapping.
        ValueError: If ``config`` names an unknown pass.
    """
    cfg = resolve_config(config)
    try:
        return optimize_markup(
            text,
            build_pipeline(cfg),
            options=print_options_for(cfg),
            multipass=cfg.multipass,
        )
    except ParseError as e:
        logger.warning("Input is not well-formed, returned unchanged: %s", e)
        return text


def optimize_document(doc: Document, config: Config | Mapping[str, Any] | None = None) -> Document:
    """Run the configured pipeline over a parsed document, in place.

    Args:
        doc (Document): The document to optimize; mutated.
        config (Config | Mapping[str, Any] | None): Pass selection and options.

    Returns:
        Document: The same document.
    """
    cfg = resolve_config(config)
    passes = build_pipeline(cfg)
    if cfg.multipass:
        return runner.run_to_fixed_point(doc, passes)
    return runner.run(doc, passes)


def version() -> str:
    """Return the installed svgtidy version."""
    return SVGTIDY_VERSION
