# topmark:header:start
#
#   project      : svgtidy
#   file         : test_visibility_passes.py
#   file_relpath : tests/pipeline/passes/test_visibility_passes.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Tests for the hidden element and empty node passes."""

from __future__ import annotations

from tests.conftest import run_pass


class TestRemoveHiddenElems:
    def test_hidden_shapes_are_removed(self) -> None:
        text = (
            '<svg><rect width="0" height="10"/><circle r="0"/><g display="none"><rect/></g>'
            '<path d=""/><rect opacity="0" width="1" height="1"/><rect width="1" height="1"/></svg>'
        )
        assert run_pass("removeHiddenElems", text) == '<svg><rect width="1" height="1"/></svg>'

    def test_referenced_elements_are_kept(self) -> None:
        text = '<svg><rect id="r" display="none"/><use href="#r"/></svg>'
        assert run_pass("removeHiddenElems", text) == text

    def test_referenced_descendants_pin_the_ancestor(self) -> None:
        text = '<svg><g display="none"><path id="p" d="M0 0h1"/></g><use href="#p"/></svg>'
        assert run_pass("removeHiddenElems", text) == text

    def test_opacity_is_ignored_inside_clip_paths(self) -> None:
        text = '<svg><clipPath id="c"><rect opacity="0" width="1" height="1"/></clipPath></svg>'
        assert run_pass("removeHiddenElems", text) == text

    def test_animated_elements_are_kept(self) -> None:
        text = '<svg><rect display="none"><set attributeName="display" to="inline"/></rect></svg>'
        assert run_pass("removeHiddenElems", text) == text


class TestRemoveEmptyText:
    def test_whitespace_and_empty_text_elements(self) -> None:
        text = '<svg>\n  <text/>\n  <text> a </text><g>  </g><tref/><tspan id="t"/></svg>'
        out = run_pass("removeEmptyText", text)
        assert out == '<svg><text> a </text><g/><tspan id="t"/></svg>'

    def test_preserved_whitespace_is_kept(self) -> None:
        text = '<svg><g xml:space="preserve">  </g></svg>'
        assert run_pass("removeEmptyText", text) == text

    def test_tref_with_target_is_kept(self) -> None:
        text = '<svg><tref href="#t"/></svg>'
        assert run_pass("removeEmptyText", text) == text


def test_remove_empty_containers() -> None:
    text = (
        '<svg><g/><defs></defs><g id="x"/><g filter="url(#f)"/>'
        "<switch><g/></switch><g><g/></g></svg>"
    )
    out = run_pass("removeEmptyContainers", text)
    assert out == '<svg><g id="x"/><g filter="url(#f)"/><switch><g/></switch></svg>'


def test_pattern_with_href_is_kept() -> None:
    text = '<svg><pattern href="#p"/><mask/></svg>'
    assert run_pass("removeEmptyContainers", text) == '<svg><pattern href="#p"/></svg>'
