# topmark:header:start
#
#   project      : SgrMark
#   file         : __init__.py
#   file_relpath : src/sgrmark/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SgrMark CLI subcommands."""
