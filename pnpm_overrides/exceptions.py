"""Custom exceptions for pnpm-overrides.

Optional inputs (audit reports, the workspace file, the removed-overrides
record) never raise; they degrade through LoadedDocument. These exceptions
cover the conditions a run cannot recover from.
"""


class OverridesError(Exception):
    """Base class for all pnpm-overrides failures."""

    pass


class ManifestError(OverridesError):
    """Raised when package.json is missing or is not a JSON object.

    Attributes:
        path: The manifest path that failed to load
    """

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path


class OutputChannelError(OverridesError):
    """Raised when the decision channel is not configured or not writable."""

    pass


class GitQueryError(OverridesError):
    """Raised when git cannot list changed files."""

    pass


class PathTraversalError(OverridesError):
    """Raised when a configured path resolves outside the project root."""

    pass
