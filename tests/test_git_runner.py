"""Tests for git process execution against a real repository."""

import tempfile
from pathlib import Path

import pytest

from checkout_ago.core.checkout_engine import CheckoutEngine
from checkout_ago.core.errors import GitCommandError, RepositoryNotFoundError
from checkout_ago.core.git_runner import GitRunner, find_repository_root


class TestFindRepositoryRoot:
    """Test cases for find_repository_root."""

    def test_finds_root_from_subdirectory(self, git_repo):
        subdir = git_repo / "src"
        subdir.mkdir()

        assert find_repository_root(subdir).resolve() == git_repo.resolve()

    def test_outside_repository(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            with pytest.raises(RepositoryNotFoundError, match="not a git repository"):
                find_repository_root(Path(temp_dir) / "missing")


class TestGitRunner:
    """Test cases for GitRunner."""

    def test_capture(self, git_repo):
        result = GitRunner(git_repo).capture(["rev-parse", "HEAD"])

        assert result.succeeded
        assert len(result.stdout.strip()) == 40

    def test_capture_failure_returncode(self, git_repo):
        result = GitRunner(git_repo).capture(["rev-parse", "no-such-ref"])

        assert not result.succeeded
        assert result.stderr

    def test_missing_executable(self, git_repo):
        runner = GitRunner(git_repo, executable="definitely-not-git-xyz")

        with pytest.raises(GitCommandError, match="failed to run"):
            runner.capture(["rev-parse", "HEAD"])

    def test_call_missing_executable(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            runner = GitRunner(Path(temp_dir), executable="definitely-not-git-xyz")

            with pytest.raises(GitCommandError, match="failed to run") as exc_info:
                runner.call(["checkout", "C2"])

        assert exc_info.value.git_args == ["checkout", "C2"]

    def test_engine_checks_out_old_commit(self, git_repo):
        runner = GitRunner(git_repo)
        lines = []
        engine = CheckoutEngine(runner, output=lines.append)

        result = engine.run("1d")

        assert result.checked_out is True
        assert (git_repo / "README.md").read_text() == "# Old\n"
        assert lines[2] == f"To return: git checkout {result.plan.current_head}"

    def test_engine_print_only_leaves_tree(self, git_repo):
        engine = CheckoutEngine(GitRunner(git_repo), output=lambda line: None)

        result = engine.run("1d", print_only=True)

        assert result.plan.target_commit != result.plan.current_head
        assert (git_repo / "README.md").read_text() == "# New\n"
