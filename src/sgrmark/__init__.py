# topmark:header:start
#
#   project      : SgrMark
#   file         : __init__.py
#   file_relpath : src/sgrmark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SgrMark package.

SgrMark turns inline markup such as ``{b}bold{/b}`` or ``{red}alert`` into
ANSI/SGR escape sequences for color-capable terminals. It exposes a small
typed API (`sgrmark.api`) and a Click-based CLI (`sgrmark`).
"""

from __future__ import annotations
