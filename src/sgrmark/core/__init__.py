# topmark:header:start
#
#   project      : SgrMark
#   file         : __init__.py
#   file_relpath : src/sgrmark/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core SgrMark building blocks.

This package holds the UI-agnostic engine: the packed `Style` value, the color
quantizers, the SGR encoder, the markup parser and the render states. Nothing in
here depends on Click or on the configuration layer.

Public modules:
    - sgrmark.core.style
    - sgrmark.core.quantize
    - sgrmark.core.sgr
    - sgrmark.core.palette
    - sgrmark.core.parser
    - sgrmark.core.state
    - sgrmark.core.errors
"""

from __future__ import annotations
