# topmark:header:start
#
#   project      : svgtidy
#   file         : __init__.py
#   file_relpath : src/svgtidy/codecs/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Encoders and decoders for attribute micro-syntaxes.

Numbers and lengths, path data, transform lists and colors. Decoders return
``None`` for input they do not understand; callers leave such values alone.
"""
