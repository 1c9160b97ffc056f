# topmark:header:start
#
#   project      : svgtidy
#   file         : test_model.py
#   file_relpath : tests/dom/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Unit tests for the document tree model."""

from __future__ import annotations

import pytest

from svgtidy.dom.model import Comment, Document, Element, Text, move_node


def _tree() -> Document:
    root = Element("svg", {"width": "10"})
    group = Element("g", {}, [Element("rect"), Text("hi"), Element("circle")])
    root.append(group)
    root.append(Comment(" c "))
    return Document([root])


def test_root_is_first_element() -> None:
    doc = Document([Comment("x"), Element("svg")])
    assert doc.root is not None
    assert doc.root.name == "svg"
    assert Document([Text(" ")]).root is None


def test_iter_elements_is_document_order() -> None:
    doc = _tree()
    assert [e.name for e in doc.iter_elements()] == ["svg", "g", "rect", "circle"]


def test_attribute_helpers_preserve_order() -> None:
    element = Element("rect", {"x": "1", "y": "2"})
    element.set("width", "3")
    element.set("x", "9")
    assert list(element.attributes) == ["x", "y", "width"]
    assert element.get("x") == "9"
    assert element.pop("y") == "2"
    assert element.pop("missing") is None
    element.remove_attributes(["x", "nope"])
    assert element.attributes == {"width": "3"}
    assert element.has("width")
    assert not element.has("x")


def test_remove_uses_identity() -> None:
    first, second = Element("rect"), Element("rect")
    parent = Element("g", {}, [first, second])
    parent.remove(second)
    assert parent.children == [first]
    assert parent.children[0] is first
    with pytest.raises(ValueError):
        parent.remove(second)


def test_splice_returns_removed_nodes() -> None:
    a, b, c = Element("a"), Element("b"), Element("c")
    parent = Element("g", {}, [a, b, c])
    new = Element("n")
    removed = parent.splice(1, 2, [new])
    assert removed == [b]
    assert [child.name for child in parent.element_children()] == ["a", "n", "c"]


def test_text_content_concatenates_descendant_text() -> None:
    text = Element("text", {}, [Text("a"), Element("tspan", {}, [Text("b")]), Text("c")])
    assert text.text_content() == "abc"


def test_clone_is_deep() -> None:
    doc = _tree()
    root = doc.root
    assert root is not None
    copy = root.clone()
    copy.set("width", "20")
    copy.element_children()[0].set("id", "x")
    assert root.get("width") == "10"
    assert not root.element_children()[0].has("id")


def test_move_node_between_parents() -> None:
    rect = Element("rect")
    source = Element("g", {}, [rect])
    target = Element("g", {}, [Element("circle")])
    moved = move_node(source.children, 0, target.children)
    assert moved is rect
    assert source.children == []
    assert target.children[-1] is rect

    move_node(target.children, 1, source.children, 0)
    assert source.children == [rect]
    assert [child.name for child in target.element_children()] == ["circle"]


def test_nodes_compare_by_identity() -> None:
    assert Text("a") != Text("a")
    assert Element("g") != Element("g")
