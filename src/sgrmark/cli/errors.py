# topmark:header:start
#
#   project      : SgrMark
#   file         : errors.py
#   file_relpath : src/sgrmark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the SgrMark CLI.

Raise these in CLI commands to signal errors with standardized messages and
exit codes. They prefer the project console if one is stored on the Click
context (see `SgrmarkCliError.show`), and fall back to Click's own display.
"""

from __future__ import annotations

from typing import IO, Any

import click

from sgrmark.cli.exit_codes import ExitCode


class SgrmarkCliError(click.ClickException):
    """Base class for all SgrMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorized later by `show`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class SgrmarkUsageError(SgrmarkCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class SgrmarkDataError(SgrmarkCliError):
    """Error for invalid input data (undecodable text, unknown color)."""

    exit_code = ExitCode.DATA_ERROR


class SgrmarkIOError(SgrmarkCliError):
    """Error when the rendered output cannot be written."""

    exit_code = ExitCode.IO_ERROR


class SgrmarkConfigError(SgrmarkCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
