# topmark:header:start
#
#   project      : SgrMark
#   file         : __init__.py
#   file_relpath : src/sgrmark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer for SgrMark.

Modules:
    - `sgrmark.config.logging`: TRACE-capable logger and colored log formatting.
    - `sgrmark.config.keys`: canonical TOML keys.
    - `sgrmark.config.io`: TOML loading and config file discovery.
    - `sgrmark.config.model`: the immutable `Config` and per-tag `TagSpec`.
"""
