"""Tests for step output sinks."""

import pytest

from pnpm_overrides.exceptions import OutputChannelError
from pnpm_overrides.outputs import GithubOutputFile, MemoryOutputSink, github_output_from_env


class TestGithubOutputFile:
    def test_appends_lines(self, tmp_path):
        path = tmp_path / "output"
        path.write_text("cache-hit=false\n")
        sink = GithubOutputFile(path)

        sink.set_output("can_remove_overrides", "false")
        sink.set_output("other", "1")

        assert path.read_text() == "cache-hit=false\ncan_remove_overrides=false\nother=1\n"

    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "output"
        GithubOutputFile(path).set_output("key", "value")
        assert path.read_text() == "key=value\n"

    def test_unwritable_location(self, tmp_path):
        sink = GithubOutputFile(tmp_path / "missing-dir" / "output")
        with pytest.raises(OutputChannelError, match="Cannot write step output"):
            sink.set_output("key", "value")

    def test_multiline_values_rejected(self, tmp_path):
        with pytest.raises(OutputChannelError):
            GithubOutputFile(tmp_path / "output").set_output("key", "a\nb")


class TestFromEnv:
    def test_reads_github_output(self, tmp_path):
        sink = github_output_from_env({"GITHUB_OUTPUT": str(tmp_path / "out")})
        assert sink.path == tmp_path / "out"

    @pytest.mark.parametrize("environ", [{}, {"GITHUB_OUTPUT": ""}])
    def test_missing_variable_is_an_error(self, environ):
        with pytest.raises(OutputChannelError, match="GITHUB_OUTPUT"):
            github_output_from_env(environ)


def test_memory_sink_keeps_last_value():
    sink = MemoryOutputSink()
    sink.set_output("a", "1")
    sink.set_output("a", "2")
    assert sink.outputs == {"a": "2"}
