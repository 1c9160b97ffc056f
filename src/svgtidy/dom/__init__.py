# topmark:header:start
#
#   project      : svgtidy
#   file         : __init__.py
#   file_relpath : src/svgtidy/dom/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Document tree, parser and printer.

The public surface is:

- [`svgtidy.dom.model`][svgtidy.dom.model]: `Document`, `Element` and the leaf nodes;
- [`svgtidy.dom.parser`][svgtidy.dom.parser]: `parse` and `ParseError`;
- [`svgtidy.dom.printer`][svgtidy.dom.printer]: `print_document` and `PrintOptions`.
"""
