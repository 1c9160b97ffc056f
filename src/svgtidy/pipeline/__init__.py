# topmark:header:start
#
#   project      : svgtidy
#   file         : __init__.py
#   file_relpath : src/svgtidy/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""svgtidy optimization pipeline package.

This package contains the components that run the ordered pass list over a
document:

- the pass contract and the base classes passes derive from;
- the pass registry and the canonical pass order;
- the runner (single round or repeated until stable);
- the engine used by the API and the CLI for markup and file batches.

The public entry points are [`svgtidy.pipeline.pipelines`][svgtidy.pipeline.pipelines]
(pipeline construction), [`svgtidy.pipeline.runner`][svgtidy.pipeline.runner] and
[`svgtidy.pipeline.engine`][svgtidy.pipeline.engine].
"""
