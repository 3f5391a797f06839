"""Tests for runtime configuration loading."""

import json

from pnpm_overrides.config_runtime import DEFAULTS, config_file_path, load_runtime_config


def _write_config(root, data):
    path = config_file_path(root)
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(data), encoding="utf-8")


def test_defaults(tmp_path):
    cfg = load_runtime_config(tmp_path, environ={})

    assert cfg == DEFAULTS
    assert cfg is not DEFAULTS
    assert cfg["paths"]["package_json"] == "package.json"
    assert cfg["paths"]["audit_with"] == "audit-with.json"


def test_config_file_overrides_defaults(tmp_path):
    _write_config(tmp_path, {"paths": {"summary": "PR_BODY.md"}, "timeouts": {"git": 5}})

    cfg = load_runtime_config(tmp_path, environ={})

    assert cfg["paths"]["summary"] == "PR_BODY.md"
    assert cfg["timeouts"]["git"] == 5
    assert cfg["paths"]["audit_diff"] == "audit-diff.txt"


def test_config_file_ignores_unknown_and_mistyped_values(tmp_path):
    _write_config(tmp_path, {"paths": {"nope": "x", "summary": 3}, "other": {}})

    cfg = load_runtime_config(tmp_path, environ={})

    assert cfg == DEFAULTS


def test_broken_config_file_falls_back_to_defaults(tmp_path):
    path = config_file_path(tmp_path)
    path.parent.mkdir(parents=True)
    path.write_text("{", encoding="utf-8")

    assert load_runtime_config(tmp_path, environ={}) == DEFAULTS


def test_environment_wins_over_file(tmp_path):
    _write_config(tmp_path, {"paths": {"summary": "from-file.md"}})
    environ = {
        "PNPM_OVERRIDES_PATHS_SUMMARY": "from-env.md",
        "PNPM_OVERRIDES_TIMEOUTS_GIT": "12",
    }

    cfg = load_runtime_config(tmp_path, environ=environ)

    assert cfg["paths"]["summary"] == "from-env.md"
    assert cfg["timeouts"]["git"] == 12


def test_invalid_environment_value_is_ignored(tmp_path):
    cfg = load_runtime_config(tmp_path, environ={"PNPM_OVERRIDES_TIMEOUTS_GIT": "soon"})

    assert cfg["timeouts"]["git"] == DEFAULTS["timeouts"]["git"]
