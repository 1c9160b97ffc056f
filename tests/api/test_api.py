# topmark:header:start
#
#   project      : svgtidy
#   file         : test_api.py
#   file_relpath : tests/api/test_api.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Tests for the public API surface."""

from __future__ import annotations

import pytest

import svgtidy
from svgtidy import api
from svgtidy.config.errors import ConfigError
from svgtidy.config.model import Config
from svgtidy.constants import SVGTIDY_VERSION
from tests.conftest import mark_pipeline, parametrize


@mark_pipeline
def test_optimize_with_defaults() -> None:
    assert svgtidy.optimize("<svg><!-- c --><g><rect/></g></svg>") == "<svg><rect/></svg>"


def test_optimize_is_fail_soft() -> None:
    assert svgtidy.optimize("<svg><rect") == "<svg><rect"


@mark_pipeline
@parametrize(
    "element,attribute",
    [
        ('<path d="M1e999 0L1 1"/>', 'd="M1e999 0L1 1"'),
        ('<path d="M0 0h1" transform="rotate(1e999)"/>', 'transform="rotate(1e999)"'),
        ('<polygon points="0 0 1e999 0 1 1"/>', 'points="0 0 1e999 0 1 1"'),
    ],
)
def test_optimize_keeps_numbers_too_large_to_represent(element: str, attribute: str) -> None:
    out = svgtidy.optimize(f"<svg>{element}</svg>")
    assert attribute in out


@mark_pipeline
def test_optimize_keeps_references_to_non_xml_chars() -> None:
    out = svgtidy.optimize("<svg><text>&#xD800;</text></svg>")
    out.encode("utf-8")
    assert "#xD800;" in out


@mark_pipeline
def test_optimize_accepts_mappings() -> None:
    text = "<svg><style>rect{}</style><rect/></svg>"
    assert svgtidy.optimize(text) == text
    assert svgtidy.optimize(text, {"enable": ["removeStyleElement"]}) == "<svg><rect/></svg>"


@mark_pipeline
def test_optimize_pretty_mapping() -> None:
    out = svgtidy.optimize("<svg><g><rect/><circle/></g></svg>", {"pretty": True, "indent": 1})
    assert out == "<svg>\n <rect/>\n <circle/>\n</svg>\n"


def test_optimize_rejects_unknown_passes() -> None:
    with pytest.raises(ValueError, match="Unknown pass"):
        svgtidy.optimize("<svg/>", {"disable": ["nope"]})


def test_resolve_config() -> None:
    assert api.resolve_config() == Config()
    config = Config(precision=1)
    assert api.resolve_config(config) is config
    assert api.resolve_config({"precision": 1}).precision == 1
    with pytest.raises(ConfigError):
        api.resolve_config({"colour": "red"})


@mark_pipeline
def test_optimize_document_in_place() -> None:
    doc = svgtidy.parse('<svg><g><circle r="1.23456"/></g></svg>')
    result = api.optimize_document(doc, Config(precision=1, multipass=False))
    assert result is doc
    assert svgtidy.print_document(doc) == '<svg><circle r="1.2"/></svg>'


def test_codec_reexports() -> None:
    segments = svgtidy.parse_path_data("M0 0L10 0")
    assert segments is not None
    assert svgtidy.serialize_path_data(segments) == "M0 0 10 0"
    functions = svgtidy.parse_transform("translate(5)")
    assert functions is not None
    assert svgtidy.compose(functions).apply(0.0, 0.0) == (5.0, 0.0)
    assert svgtidy.serialize_transform(functions) == "translate(5)"


def test_version() -> None:
    assert api.version() == SVGTIDY_VERSION
