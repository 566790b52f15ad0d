# topmark:header:start
#
#   project      : SgrMark
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers.

`run_cli` invokes the Click group in-process with `click.testing.CliRunner`.
Combine it with the ``isolation`` fixture so config discovery only sees the
files a test creates.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from sgrmark.cli.exit_codes import ExitCode
from sgrmark.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Mapping


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
    env: Mapping[str, str | None] | None = None,
) -> Result:
    """Invoke the CLI and return the `click.testing.Result`.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["render", "{b}x"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.
        env (Mapping[str, str | None] | None): Environment overrides for the run.

    Returns:
        Result: The result produced by `CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["render", "--color-mode", "off", "{b}x"])
        assert result.stdout_bytes == b"\\x1b[1mx\\n"
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text, env=env)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``."""
    assert result.exit_code == code, result.output
