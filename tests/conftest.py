"""Pytest configuration and fixtures."""
import shutil
import subprocess
from pathlib import Path

import pytest

from pnpm_overrides.outputs import MemoryOutputSink

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class Project:
    """Temporary project root with helpers for fixture files and git."""

    def __init__(self, root: Path):
        self.root = root

    def copy_fixture(self, fixture_name: str, dest_name: str | None = None) -> Path:
        target = self.root / (dest_name or fixture_name)
        shutil.copyfile(FIXTURES_DIR / fixture_name, target)
        return target

    def write(self, name: str, content: str) -> Path:
        target = self.root / name
        target.write_text(content, encoding="utf-8")
        return target

    def read(self, name: str) -> str:
        return (self.root / name).read_text(encoding="utf-8")

    def exists(self, name: str) -> bool:
        return (self.root / name).exists()

    def git(self, *args: str) -> str:
        result = subprocess.run(
            ["git", *args], cwd=self.root, check=True, capture_output=True, text=True
        )
        return result.stdout

    def commit_all(self, message: str = "Initial commit") -> None:
        self.git("add", ".")
        self.git("commit", "-m", message)


@pytest.fixture
def project(tmp_path):
    """Empty project root; tests copy fixture files into it."""
    return Project(tmp_path)


@pytest.fixture
def git_project(project):
    """Project root initialized as a git repository."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    project.git("init")
    project.git("config", "user.name", "Test User")
    project.git("config", "user.email", "test@example.com")
    project.git("config", "commit.gpgsign", "false")
    return project


@pytest.fixture
def output_sink():
    """In-memory decision channel."""
    return MemoryOutputSink()
