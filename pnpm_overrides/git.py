"""Changed-file queries against the project's git working tree."""

import subprocess
from pathlib import Path

from pnpm_overrides.exceptions import GitQueryError
from pnpm_overrides.utils.logging import logger

DEFAULT_GIT_TIMEOUT = 30


def get_changed_files(
    root: Path | str = ".", staged: bool = False, timeout: int = DEFAULT_GIT_TIMEOUT
) -> list[str]:
    """List paths changed in the working tree (or the index when staged=True).

    Raises:
        GitQueryError: If git is missing, times out or exits non-zero
    """
    cmd = ["git", "diff", "--name-only"]
    if staged:
        cmd.append("--cached")

    try:
        result = subprocess.run(
            cmd,
            cwd=str(root),
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=True,
            shell=False,
            timeout=timeout,
        )
    except FileNotFoundError as e:
        raise GitQueryError("Git is not available") from e
    except subprocess.TimeoutExpired as e:
        raise GitQueryError(f"'{' '.join(cmd)}' timed out after {timeout}s") from e
    except subprocess.CalledProcessError as e:
        raise GitQueryError(f"'{' '.join(cmd)}' failed: {(e.stderr or '').strip()}") from e

    files = [line for line in result.stdout.strip().split("\n") if line]
    logger.debug(f"{' '.join(cmd)}: {len(files)} files")
    return files
