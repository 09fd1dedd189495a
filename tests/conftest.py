"""Test configuration and fixtures."""

import os
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

import pytest

from checkout_ago.core.interfaces import IGitRunner
from checkout_ago.core.models import CommandResult


class FakeGitRunner(IGitRunner):
    """Records git invocations and answers them from canned responses."""

    def __init__(self, responses: Dict[str, Tuple[int, bytes]] = None,
                 checkout_returncode: int = 0):
        # Keyed by the git subcommand, e.g. "rev-parse" or "rev-list"
        self.responses = responses or {}
        self.checkout_returncode = checkout_returncode
        self.captured: List[List[str]] = []
        self.called: List[List[str]] = []

    @property
    def executable(self) -> str:
        return "git"

    def capture(self, args: Sequence[str]) -> CommandResult:
        self.captured.append(list(args))
        returncode, stdout = self.responses.get(args[0], (0, b""))
        stderr = b"" if returncode == 0 else f"fatal: {args[0]} broke\n".encode()
        return CommandResult(args=list(args), returncode=returncode,
                             stdout=stdout, stderr=stderr)

    def call(self, args: Sequence[str]) -> int:
        self.called.append(list(args))
        return self.checkout_returncode


@pytest.fixture
def fake_runner():
    """Runner where HEAD is C1 and the lookup finds C2."""
    return FakeGitRunner({
        "rev-parse": (0, b"C1\n"),
        "rev-list": (0, b"C2\n"),
    })


@pytest.fixture
def git_repo():
    """Create a temporary git repository with two commits, one backdated."""
    if shutil.which("git") is None:
        pytest.skip("git executable not available")

    temp_dir = Path(tempfile.mkdtemp())

    def git(*args, **env):
        subprocess.run(
            ["git", *args], cwd=temp_dir, check=True, capture_output=True,
            env={**_base_env(), **env},
        )

    try:
        git("init", "-q")
        (temp_dir / "README.md").write_text("# Old\n")
        git("add", "README.md")
        git("commit", "-q", "-m", "old", GIT_AUTHOR_DATE="2020-01-01T00:00:00",
            GIT_COMMITTER_DATE="2020-01-01T00:00:00")
        (temp_dir / "README.md").write_text("# New\n")
        git("commit", "-q", "-am", "new")

        yield temp_dir
    finally:
        shutil.rmtree(temp_dir)


def _base_env() -> Dict[str, str]:
    env = dict(os.environ)
    env.update({
        "GIT_AUTHOR_NAME": "Test",
        "GIT_AUTHOR_EMAIL": "test@example.com",
        "GIT_COMMITTER_NAME": "Test",
        "GIT_COMMITTER_EMAIL": "test@example.com",
        "GIT_CONFIG_NOSYSTEM": "1",
        "HOME": tempfile.gettempdir(),
    })
    return env
