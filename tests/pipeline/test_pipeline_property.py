# topmark:header:start
#
#   project      : svgtidy
#   file         : test_pipeline_property.py
#   file_relpath : tests/pipeline/test_pipeline_property.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

# pyright: strict

"""Property tests for whole-document optimization.

Optimizing never grows compact output, always yields well-formed markup, and
(with multipass) a second optimization of the result changes nothing.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, given, settings

import svgtidy
from svgtidy.dom.parser import parse
from tests.strategies_svgtidy import s_svg_document

# Mark the entire test module
pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


@settings(max_examples=150, deadline=None, suppress_health_check=[HealthCheck.too_slow])
@given(text=s_svg_document())
def test_optimized_output_is_smaller_and_well_formed(text: str) -> None:
    out = svgtidy.optimize(text)
    assert len(out) <= len(text)
    parse(out)


@settings(max_examples=150, deadline=None, suppress_health_check=[HealthCheck.too_slow])
@given(text=s_svg_document())
def test_optimization_is_idempotent(text: str) -> None:
    once = svgtidy.optimize(text)
    assert svgtidy.optimize(once) == once
