"""pnpm-overrides utilities package."""

from .constants import (
    AUDIT_DIFF_FILE,
    AUDIT_WITH_FILE,
    AUDIT_WITHOUT_FILE,
    ERROR_LOG_FILE_NAME,
    OVERRIDES_KEY,
    PACKAGE_JSON_FILE,
    REMOVED_OVERRIDES_FILE,
    STATE_DIR,
    SUMMARY_FILE,
    WORKSPACE_FILE,
)
from .error_handler import handle_exceptions
from .exit_codes import ExitCodes
from .helpers import dump_json, project_path, save_json_file
from .logging import logger

__all__ = [
    "AUDIT_DIFF_FILE",
    "AUDIT_WITH_FILE",
    "AUDIT_WITHOUT_FILE",
    "ERROR_LOG_FILE_NAME",
    "OVERRIDES_KEY",
    "PACKAGE_JSON_FILE",
    "REMOVED_OVERRIDES_FILE",
    "STATE_DIR",
    "SUMMARY_FILE",
    "WORKSPACE_FILE",
    "handle_exceptions",
    "ExitCodes",
    "dump_json",
    "project_path",
    "save_json_file",
    "logger",
]
