# topmark:header:start
#
#   project      : svgtidy
#   file         : test_id_passes.py
#   file_relpath : tests/pipeline/passes/test_id_passes.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Tests for the id, defs and gradient passes."""

from __future__ import annotations

from itertools import islice

from svgtidy.pipeline.passes.ids import short_ids
from tests.conftest import run_pass


class TestCleanupIds:
    def test_unreferenced_ids_go_and_referenced_ones_shrink(self) -> None:
        text = (
            '<svg><defs><linearGradient id="gradient1"/></defs>'
            '<rect id="unused" fill="url(#gradient1)"/></svg>'
        )
        out = run_pass("cleanupIds", text)
        assert out == '<svg><defs><linearGradient id="a"/></defs><rect fill="url(#a)"/></svg>'

    def test_href_and_timing_references_are_rewritten(self) -> None:
        text = (
            '<svg><circle id="c1"/><use href="#c1"/>'
            '<animate id="anim" begin="anim2.end"/><animate id="anim2" begin="0s"/></svg>'
        )
        out = run_pass("cleanupIds", text)
        assert out == (
            '<svg><circle id="a"/><use href="#a"/>'
            '<animate begin="b.end"/><animate id="b" begin="0s"/></svg>'
        )

    def test_duplicate_ids_keep_the_first(self) -> None:
        out = run_pass("cleanupIds", '<svg><rect id="x"/><rect id="x"/><use href="#x"/></svg>')
        assert out == '<svg><rect id="a"/><rect/><use href="#a"/></svg>'

    def test_documents_with_style_are_left_alone(self) -> None:
        text = '<svg><style>#long{fill:red}</style><rect id="long"/></svg>'
        assert run_pass("cleanupIds", text) == text


def test_short_ids_sequence() -> None:
    ids = list(islice(short_ids(), 54))
    assert ids[0] == "a"
    assert ids[25] == "z"
    assert ids[26] == "A"
    assert ids[52] == "aa"
    assert ids[53] == "ab"
    assert len(set(ids)) == len(ids)


def test_remove_useless_defs_lifts_referenceable_content() -> None:
    text = '<svg><defs><g><linearGradient id="g"/><rect/></g><path/></defs></svg>'
    assert run_pass("removeUselessDefs", text) == '<svg><defs><linearGradient id="g"/></defs></svg>'


def test_sort_defs_children_by_frequency() -> None:
    text = (
        '<svg><defs><path id="p"/><linearGradient id="a"/><linearGradient id="b"/></defs></svg>'
    )
    out = run_pass("sortDefsChildren", text)
    assert out == (
        '<svg><defs><linearGradient id="a"/><linearGradient id="b"/><path id="p"/></defs></svg>'
    )


def test_sort_defs_children_skips_mixed_content() -> None:
    text = '<svg><defs><path id="p"/><!-- c --><circle id="a"/><circle id="b"/></defs></svg>'
    assert run_pass("sortDefsChildren", text) == text


class TestConvertOneStopGradients:
    def test_reference_is_replaced_by_stop_color(self) -> None:
        text = (
            '<svg><defs><linearGradient id="g"><stop stop-color="red"/></linearGradient></defs>'
            '<rect fill="url(#g)"/></svg>'
        )
        assert run_pass("convertOneStopGradients", text) == '<svg><defs/><rect fill="red"/></svg>'

    def test_missing_stop_color_is_black(self) -> None:
        text = (
            '<svg><defs><radialGradient id="g"><stop/></radialGradient></defs>'
            '<circle stroke="url(#g)"/></svg>'
        )
        out = run_pass("convertOneStopGradients", text)
        assert out == '<svg><defs/><circle stroke="#000"/></svg>'

    def test_partial_opacity_is_kept(self) -> None:
        text = (
            '<svg><defs><linearGradient id="g"><stop stop-color="red" stop-opacity=".5"/>'
            '</linearGradient></defs><rect fill="url(#g)"/></svg>'
        )
        assert run_pass("convertOneStopGradients", text) == text

    def test_inherited_gradients_are_kept(self) -> None:
        text = (
            '<svg><defs><linearGradient id="g"><stop stop-color="red"/></linearGradient>'
            '<linearGradient id="h" href="#g"/></defs><rect fill="url(#h)"/></svg>'
        )
        assert run_pass("convertOneStopGradients", text) == text
