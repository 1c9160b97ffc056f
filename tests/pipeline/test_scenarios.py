# topmark:header:start
#
#   project      : svgtidy
#   file         : test_scenarios.py
#   file_relpath : tests/pipeline/test_scenarios.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""End-to-end scenarios through the default pipeline."""

from __future__ import annotations

import pytest

import svgtidy
from svgtidy.dom.parser import ParseError, ParseErrorKind, parse
from tests.conftest import mark_pipeline, parametrize


@mark_pipeline
@parametrize(
    "text,expected",
    [
        ("<svg><!-- c --><rect/><g><!-- c2 --></g></svg>", "<svg><rect/></svg>"),
        ("<svg><g><rect/></g></svg>", "<svg><rect/></svg>"),
        ('<svg opacity="0.5"></svg>', '<svg opacity=".5"/>'),
        (
            '<svg><rect x="10" y="20" width="100" height="50"/></svg>',
            '<svg><path d="M10 20h100v50H10z"/></svg>',
        ),
        ('<svg fill="rgb(255,0,0)"/>', '<svg fill="#f00"/>'),
    ],
)
def test_default_pipeline_scenarios(text: str, expected: str) -> None:
    assert svgtidy.optimize(text) == expected


def test_truncated_input_reports_offset() -> None:
    with pytest.raises(ParseError) as info:
        parse("<svg><rect")
    assert info.value.kind is ParseErrorKind.UNTERMINATED_TAG
    assert info.value.offset == len("<svg><rect")


@mark_pipeline
def test_editor_document() -> None:
    text = (
        '<?xml version="1.0" encoding="UTF-8" standalone="no"?>\n'
        "<!-- Created with an editor -->\n"
        '<svg xmlns="http://www.w3.org/2000/svg" '
        'xmlns:inkscape="http://www.inkscape.org/namespaces/inkscape" '
        'width="100" height="100" viewBox="0 0 100 100" inkscape:version="1.0">\n'
        "  <metadata><rdf/></metadata>\n"
        '  <g inkscape:label="Layer 1" style="fill:#ff0000;stroke:none">\n'
        '    <rect x="10.0000" y="10" width="20" height="20"/>\n'
        "  </g>\n"
        "</svg>\n"
    )
    assert svgtidy.optimize(text) == (
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">'
        '<path fill="#f00" d="M10 10h20v20H10z"/></svg>'
    )


@mark_pipeline
def test_single_pass_mode() -> None:
    text = '<svg><g id="a"><rect/></g></svg>'
    assert svgtidy.optimize(text, {"multipass": False}) == "<svg><rect/></svg>"
