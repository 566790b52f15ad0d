# topmark:header:start
#
#   project      : SgrMark
#   file         : constants.py
#   file_relpath : src/sgrmark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SgrMark Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

SGRMARK_VERSION: str = get_version("sgrmark")

# Config files looked up while walking up from the working directory.
SGRMARK_TOML_NAME: str = "sgrmark.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

# Directory marking the top of a repository; discovery stops there.
VCS_ROOT_MARKER: str = ".git"

# Environment variable disabling color output (https://no-color.org).
NO_COLOR_ENV: str = "NO_COLOR"
