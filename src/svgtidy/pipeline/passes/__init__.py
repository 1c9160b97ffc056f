# topmark:header:start
#
#   project      : svgtidy
#   file         : __init__.py
#   file_relpath : src/svgtidy/pipeline/passes/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Optimization passes.

Every module in this package is imported by
`svgtidy.pipeline.registry.register_all_passes`; pass classes register
themselves with `register_pass` at import time.
"""
