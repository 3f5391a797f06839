"""Runtime configuration for pnpm-overrides - file names and timeouts."""

import copy
import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pnpm_overrides.utils.constants import (
    AUDIT_DIFF_FILE,
    AUDIT_WITH_FILE,
    AUDIT_WITHOUT_FILE,
    CONFIG_FILE_NAME,
    ENV_PREFIX,
    PACKAGE_JSON_FILE,
    REMOVED_OVERRIDES_FILE,
    STATE_DIR,
    SUMMARY_FILE,
    WORKSPACE_FILE,
)
from pnpm_overrides.utils.logging import logger

DEFAULTS = {
    "paths": {
        "package_json": PACKAGE_JSON_FILE,
        "workspace_file": WORKSPACE_FILE,
        "removed_record": REMOVED_OVERRIDES_FILE,
        "audit_with": AUDIT_WITH_FILE,
        "audit_without": AUDIT_WITHOUT_FILE,
        "audit_diff": AUDIT_DIFF_FILE,
        "summary": SUMMARY_FILE,
    },
    "timeouts": {
        "git": 30,
    },
}


def config_file_path(root: str | Path = ".") -> Path:
    return Path(root) / STATE_DIR / CONFIG_FILE_NAME


def load_runtime_config(
    root: str | Path = ".", environ: Mapping[str, str] | None = None
) -> dict[str, Any]:
    """
    Load runtime configuration from .pnpm-overrides/config.json and environment variables.

    Config priority (highest to lowest):
    1. Environment variables (PNPM_OVERRIDES_<SECTION>_<KEY>)
    2. .pnpm-overrides/config.json under root
    3. Built-in defaults

    Args:
        root: Project root to look for the config file
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Configuration dictionary with merged values
    """
    if environ is None:
        environ = os.environ

    cfg = copy.deepcopy(DEFAULTS)

    path = config_file_path(root)
    try:
        if path.exists():
            with open(path, encoding="utf-8") as f:
                user = json.load(f)

            if isinstance(user, dict):
                for section in cfg:
                    if section in user and isinstance(user[section], dict):
                        for key, value in user[section].items():
                            if key in cfg[section] and isinstance(value, type(cfg[section][key])):
                                cfg[section][key] = value
                            else:
                                logger.warning(f"Ignoring config value {section}.{key} in {path}")
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load config file from {path}: {e}")
        logger.info("Continuing with default configuration")

    for section in cfg:
        for key in cfg[section]:
            env_var = f"{ENV_PREFIX}_{section.upper()}_{key.upper()}"
            if env_var not in environ:
                continue
            value = environ[env_var]
            try:
                if isinstance(cfg[section][key], int):
                    cfg[section][key] = int(value)
                else:
                    cfg[section][key] = value
            except ValueError as e:
                logger.warning(f"Invalid value for environment variable {env_var}: '{value}' - {e}")
                logger.info(f"Using default value: {cfg[section][key]}")

    return cfg
