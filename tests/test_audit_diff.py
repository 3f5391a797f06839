"""Tests for comparing audit reports with and without overrides."""

import json

import pytest

from pnpm_overrides.audit_diff import (
    NEW_HEADER,
    REMOVED_HEADER,
    AuditDiff,
    advisory_fingerprint,
    compare_audits,
    diff_audits,
    fingerprint_report,
    load_audit_fingerprints,
)
from pnpm_overrides.outputs import GithubOutputFile


def _report(*advisories):
    return {
        "advisories": {
            str(index): {"module_name": name, "vulnerable_versions": versions}
            for index, (name, versions) in enumerate(advisories, start=1)
        }
    }


class TestDecisionTable:
    """Removed/new sets and the decision for representative inputs."""

    @pytest.mark.parametrize(
        "with_fps,without_fps,removed,new,decision",
        [
            (["lodash@<4.17.21"], [], ["lodash@<4.17.21"], [], True),
            (["lodash@<4.17.21"], ["lodash@<4.17.21"], [], [], False),
            ([], [], [], [], False),
            ([], ["minimist@<1.2.6"], [], ["minimist@<1.2.6"], False),
            (["lodash@<4.17.21"], ["minimist@<1.2.6"], ["lodash@<4.17.21"], ["minimist@<1.2.6"], False),
        ],
    )
    def test_decision(self, with_fps, without_fps, removed, new, decision):
        diff = diff_audits(with_fps, without_fps)

        assert diff.removed == removed
        assert diff.new == new
        assert diff.can_remove_overrides is decision

    def test_results_are_sorted(self):
        diff = diff_audits(["b@1", "a@1", "c@1"], ["c@1"])
        assert diff.removed == ["a@1", "b@1"]


class TestFingerprints:
    def test_fingerprint_format(self):
        advisory = {"module_name": "lodash", "vulnerable_versions": "<4.17.21", "id": 1}
        assert advisory_fingerprint(advisory) == "lodash@<4.17.21"

    def test_incomplete_advisories_are_skipped(self):
        report = {
            "advisories": {
                "1": {"module_name": "lodash"},
                "2": "not-an-object",
                "3": {"module_name": "semver", "vulnerable_versions": "<7.5.2"},
            }
        }
        assert fingerprint_report(report) == ["semver@<7.5.2"]

    def test_duplicates_collapse(self):
        report = _report(("lodash", "<4.17.21"), ("lodash", "<4.17.21"), ("axios", "<1.6.0"))
        assert fingerprint_report(report) == ["axios@<1.6.0", "lodash@<4.17.21"]

    @pytest.mark.parametrize("report", [{}, [], None, {"advisories": []}, {"advisories": None}])
    def test_reports_without_advisories(self, report):
        assert fingerprint_report(report) == []

    def test_missing_and_unparseable_files_are_empty(self, project):
        assert load_audit_fingerprints(project.root / "audit-with.json") == []

        project.write("audit-with.json", "this is not json")
        assert load_audit_fingerprints(project.root / "audit-with.json") == []

    def test_fixture_report(self, project):
        project.copy_fixture("audit-lodash.json")
        assert load_audit_fingerprints(project.root / "audit-lodash.json") == ["lodash@<4.17.21"]


class TestRender:
    def test_render_layout(self):
        diff = AuditDiff(removed=["a@1", "b@2"], new=["c@3"])
        assert diff.render() == f"{REMOVED_HEADER}\na@1\nb@2\n\n{NEW_HEADER}\nc@3"

    def test_render_empty(self):
        assert AuditDiff().render() == (
            "=== Removed Issues (now fixed upstream) ===\n"
            "\n"
            "=== New Issues (appear without overrides) ==="
        )


class TestCompareAudits:
    def test_overrides_removable(self, project, output_sink):
        project.copy_fixture("audit-lodash.json", "audit-with.json")
        project.copy_fixture("audit-clean.json", "audit-without.json")

        diff = compare_audits(project.root, output_sink)

        assert diff.removed == ["lodash@<4.17.21"]
        assert output_sink.outputs == {"can_remove_overrides": "true"}
        assert project.read("audit-diff.txt") == diff.render()

    def test_same_issues_keep_overrides(self, project, output_sink):
        project.copy_fixture("audit-lodash.json", "audit-with.json")
        project.copy_fixture("audit-lodash.json", "audit-without.json")

        compare_audits(project.root, output_sink)

        assert output_sink.outputs == {"can_remove_overrides": "false"}

    def test_unparseable_with_report(self, project, output_sink):
        project.write("audit-with.json", "{broken")
        project.copy_fixture("audit-clean.json", "audit-without.json")

        diff = compare_audits(project.root, output_sink)

        assert diff == AuditDiff()
        assert output_sink.outputs == {"can_remove_overrides": "false"}

    def test_utf16_with_report_counts_as_empty(self, project, output_sink):
        report = project.root / "audit-with.json"
        report.write_bytes(json.dumps(_report(("lodash", "<4.17.21"))).encode("utf-16"))
        project.copy_fixture("audit-clean.json", "audit-without.json")

        diff = compare_audits(project.root, output_sink)

        assert diff == AuditDiff()
        assert output_sink.outputs == {"can_remove_overrides": "false"}

    def test_both_reports_missing(self, project, output_sink):
        diff = compare_audits(project.root, output_sink)

        assert diff == AuditDiff()
        assert project.exists("audit-diff.txt")
        assert output_sink.outputs["can_remove_overrides"] == "false"

    def test_custom_report_names(self, project, output_sink):
        project.write("a.json", json.dumps(_report(("qs", "<6.10.3"))))
        project.write("b.json", json.dumps(_report()))

        diff = compare_audits(
            project.root,
            output_sink,
            with_report="a.json",
            without_report="b.json",
            diff_file="diff.txt",
        )

        assert diff.removed == ["qs@<6.10.3"]
        assert project.exists("diff.txt")
        assert not project.exists("audit-diff.txt")

    def test_decision_is_appended_to_output_file(self, project):
        project.copy_fixture("audit-lodash.json", "audit-with.json")
        project.copy_fixture("audit-clean.json", "audit-without.json")
        output_file = project.write("github_output", "previous_step=done\n")

        compare_audits(project.root, GithubOutputFile(output_file))

        assert output_file.read_text() == "previous_step=done\ncan_remove_overrides=true\n"
