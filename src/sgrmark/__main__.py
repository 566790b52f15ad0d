# topmark:header:start
#
#   project      : SgrMark
#   file         : __main__.py
#   file_relpath : src/sgrmark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running SgrMark via ``python -m sgrmark``.

Equivalent to running the ``sgrmark`` console script; delegates to
`sgrmark.cli.main.cli`.

Examples:
    Render markup from the module interface::

        python -m sgrmark render "{b}hello{/b}"
"""

from __future__ import annotations

from sgrmark.cli.main import cli

if __name__ == "__main__":
    cli()
