# topmark:header:start
#
#   project      : svgtidy
#   file         : test_pipelines.py
#   file_relpath : tests/pipeline/test_pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Tests for pass selection and pipeline construction."""

from __future__ import annotations

import pytest

from svgtidy.pipeline.pipelines import (
    PASS_ORDER,
    build_pipeline,
    default_pipeline,
    resolve_pass_names,
)
from tests.conftest import make_config


def test_default_selection_follows_pass_order() -> None:
    names = resolve_pass_names()
    assert "removeStyleElement" not in names
    assert names == [name for name in PASS_ORDER if name != "removeStyleElement"]


def test_enable_inserts_at_canonical_position() -> None:
    names = resolve_pass_names(enable=["removeStyleElement"])
    assert names == list(PASS_ORDER)


def test_disable_wins_over_enable() -> None:
    names = resolve_pass_names(
        enable=["removeStyleElement"], disable=["removeStyleElement", "sortAttrs"]
    )
    assert "removeStyleElement" not in names
    assert "sortAttrs" not in names


def test_unknown_names_are_reported_sorted() -> None:
    with pytest.raises(ValueError, match=r"Unknown pass name\(s\): bogus, nope"):
        resolve_pass_names(enable=["nope"], disable=["bogus"])


def test_hidden_elements_go_before_id_cleanup() -> None:
    assert PASS_ORDER.index("removeHiddenElems") < PASS_ORDER.index("cleanupIds")
    assert PASS_ORDER.index("collapseGroups") < PASS_ORDER.index("cleanupNumericValues")


def test_build_pipeline_passes_options() -> None:
    pipeline = build_pipeline(make_config(precision=1, disable=("sortAttrs",)))
    names = [p.name for p in pipeline]
    assert "sortAttrs" not in names
    numeric = next(p for p in pipeline if p.name == "cleanupNumericValues")
    assert getattr(numeric, "precision") == 1


def test_default_pipeline() -> None:
    assert [p.name for p in default_pipeline()] == resolve_pass_names()
