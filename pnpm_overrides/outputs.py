"""Step outputs: how a command hands results back to the workflow.

GitHub Actions collects step outputs from the file named by GITHUB_OUTPUT.
Other steps of the same job write to that file too, so it is only ever
appended to.
"""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from pnpm_overrides.exceptions import OutputChannelError
from pnpm_overrides.utils.constants import ENV_GITHUB_OUTPUT
from pnpm_overrides.utils.logging import logger


class OutputSink(Protocol):
    """Anything that accepts ``key=value`` step outputs."""

    def set_output(self, key: str, value: str) -> None: ...


class GithubOutputFile:
    """Appends ``key=value`` lines to a GitHub Actions output file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def set_output(self, key: str, value: str) -> None:
        if "\n" in key or "\n" in value:
            raise OutputChannelError(f"Multi-line step outputs are not supported: {key}")

        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(f"{key}={value}\n")
        except OSError as e:
            raise OutputChannelError(f"Cannot write step output to {self.path}: {e}") from e

        logger.debug(f"Wrote step output {key}={value} to {self.path}")

    def __repr__(self) -> str:
        return f"GithubOutputFile({str(self.path)!r})"


class MemoryOutputSink:
    """Collects outputs in memory; used when no workflow is listening."""

    def __init__(self):
        self.outputs: dict[str, str] = {}

    def set_output(self, key: str, value: str) -> None:
        self.outputs[key] = value


def github_output_from_env(environ: Mapping[str, str] | None = None) -> GithubOutputFile:
    """Build the sink from GITHUB_OUTPUT.

    Raises:
        OutputChannelError: If GITHUB_OUTPUT is unset or empty
    """
    if environ is None:
        environ = os.environ

    path = environ.get(ENV_GITHUB_OUTPUT)
    if not path:
        raise OutputChannelError(
            f"{ENV_GITHUB_OUTPUT} is not set - run inside GitHub Actions or pass --github-output"
        )
    return GithubOutputFile(path)
