"""Centralized error handler for pnpm-overrides commands."""

import traceback
from collections.abc import Callable
from datetime import datetime
from functools import wraps
from pathlib import Path
from typing import Any

import click

from pnpm_overrides.utils.logging import logger

from .constants import ERROR_LOG_FILE_NAME, STATE_DIR


def error_log_path(root: str | Path | None = None) -> Path:
    """Error log inside the project's state directory.

    Uses the current directory when root is not an existing directory.
    """
    base = Path(root) if root and Path(root).is_dir() else Path(".")
    return base / STATE_DIR / ERROR_LOG_FILE_NAME


def handle_exceptions(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator that logs any failure and turns it into a ClickException.

    The traceback is appended to <root>/.pnpm-overrides/error.log, where
    root is the command's --root option.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (click.ClickException, click.exceptions.Exit):
            raise
        except Exception as e:
            log_path = error_log_path(kwargs.get("root"))
            log_path.parent.mkdir(parents=True, exist_ok=True)

            error_type = type(e).__name__
            error_msg = str(e)
            tb = traceback.format_exc()

            logger.opt(exception=True).error(
                "Command '{cmd}' failed: {err}",
                cmd=func.__name__,
                err=error_msg,
            )

            with open(log_path, "a", encoding="utf-8") as f:
                f.write("\n" + "=" * 80 + "\n")
                f.write(f"[{datetime.now().isoformat()}] Error in command: {func.__name__}\n")
                f.write("=" * 80 + "\n")
                f.write(f"{error_type}: {error_msg}\n\n")
                f.write(tb)
                f.write("=" * 80 + "\n\n")

            user_message = (
                f"{error_type}: {error_msg}\n\n"
                f"Full traceback logged to: {log_path}"
            )

            raise click.ClickException(user_message) from e

    return wrapper
