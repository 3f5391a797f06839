"""Centralized constants for the pnpm-overrides utils package.

This module provides a single source of truth for file names, directories,
and environment variable names used across the package.
"""

from pathlib import Path

# ============================================================================
# PROJECT FILES
# ============================================================================

PACKAGE_JSON_FILE = "package.json"
WORKSPACE_FILE = "pnpm-workspace.yaml"

# Record of overrides removed by `pnpm-overrides remove`
REMOVED_OVERRIDES_FILE = "removed-overrides.json"

# `pnpm audit --json` snapshots written by the action
AUDIT_WITH_FILE = "audit-with.json"
AUDIT_WITHOUT_FILE = "audit-without.json"
AUDIT_DIFF_FILE = "audit-diff.txt"

SUMMARY_FILE = "override-removal-summary.md"

# The key removed from both documents
OVERRIDES_KEY = "overrides"

# ============================================================================
# OUTPUT DIRECTORIES
# ============================================================================

# Tool state directory under the project root (config file, error log)
STATE_DIR = Path(".pnpm-overrides")
CONFIG_FILE_NAME = "config.json"
ERROR_LOG_FILE_NAME = "error.log"

# ============================================================================
# ENVIRONMENT VARIABLES
# ============================================================================

ENV_PREFIX = "PNPM_OVERRIDES"
ENV_GITHUB_OUTPUT = "GITHUB_OUTPUT"

# ============================================================================
# REGISTRY
# ============================================================================

NPM_PACKAGE_URL = "https://npmjs.com/package/"
