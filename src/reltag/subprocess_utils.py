"""Subprocess helpers for running git with consistent error context."""

import logging
import os
import subprocess
import time
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


def copied_env_for_git_subprocess() -> dict[str, str]:
    """Return a copy of os.environ safe for non-interactive git commands.

    Disables terminal prompts so a missing credential or passphrase fails
    fast instead of hanging the release.
    """
    env = os.environ.copy()
    env["GIT_TERMINAL_PROMPT"] = "0"
    return env


def run_subprocess_with_context(
    cmd: Sequence[str],
    *,
    operation_context: str,
    cwd: Path | None = None,
    check: bool = True,
    input: str | None = None,
    env: dict[str, str] | None = None,
    timeout: float | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a command, enriching failures with what was being attempted.

    Output is captured as UTF-8 text. Bytes that do not decode, such as a ref
    name in another encoding, are kept as surrogate escapes so the text can be
    passed back to git unchanged. The command and its duration are logged at
    DEBUG level.

    Args:
        cmd: Command and arguments
        operation_context: Human-readable description, e.g. "create tag 'v1.0.0'"
        cwd: Working directory for the command
        check: If True, raise on non-zero exit; if False, return the result
        input: Text passed on stdin
        env: Environment for the command (defaults to copied_env_for_git_subprocess())
        timeout: Seconds before the command is killed

    Returns:
        The completed process

    Raises:
        RuntimeError: If check is True and the command exits non-zero, with the
            subprocess.CalledProcessError chained as the cause
        FileNotFoundError: If the executable is not installed
    """
    start = time.monotonic()
    try:
        result = subprocess.run(
            list(cmd),
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="surrogateescape",
            check=check,
            input=input,
            env=env if env is not None else copied_env_for_git_subprocess(),
            timeout=timeout,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        message = f"Failed to {operation_context}: exit code {e.returncode}"
        if stderr:
            message = f"{message}\n{stderr}"
        raise RuntimeError(message) from e
    finally:
        logger.debug(
            "%s (%s) took %.3fs", " ".join(cmd), operation_context, time.monotonic() - start
        )
    return result
