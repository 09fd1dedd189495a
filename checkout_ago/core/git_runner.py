"""Git process execution and repository discovery."""

import logging
import subprocess
from pathlib import Path
from typing import Optional, Sequence

import git

from .errors import GitCommandError, RepositoryNotFoundError
from .interfaces import IGitRunner
from .models import CommandResult


logger = logging.getLogger(__name__)


def find_repository_root(path: Optional[Path] = None) -> Path:
    """Locate the working directory of the repository containing ``path``.

    Args:
        path: Any directory inside the repository (defaults to cwd)

    Returns:
        The repository's top-level working directory

    Raises:
        RepositoryNotFoundError: If ``path`` is not inside a git work tree
    """
    path = Path(path) if path else Path.cwd()

    try:
        repo = git.Repo(str(path), search_parent_directories=True)
    except (git.InvalidGitRepositoryError, git.NoSuchPathError):
        raise RepositoryNotFoundError(f"not a git repository: {path}")

    try:
        if repo.working_tree_dir is None:
            raise RepositoryNotFoundError(f"not a git work tree: {path}")
        root = Path(repo.working_tree_dir)
    finally:
        repo.close()

    logger.debug(f"Git repository found at {root}")
    return root


class GitRunner(IGitRunner):
    """Runs git as a child process inside a working directory."""

    def __init__(self, cwd: Optional[Path] = None, executable: str = "git"):
        """Initialize the runner.

        Args:
            cwd: Directory git runs in (defaults to the current directory)
            executable: Name or path of the git executable
        """
        self.cwd = cwd
        self._executable = executable

    @property
    def executable(self) -> str:
        return self._executable

    def capture(self, args: Sequence[str]) -> CommandResult:
        """Run git and capture stdout/stderr as bytes.

        Raises:
            GitCommandError: If the executable cannot be started
        """
        command = [self._executable, *args]
        logger.debug(f"Running {command} (captured)")

        try:
            completed = subprocess.run(
                command, cwd=self.cwd, capture_output=True, check=False
            )
        except OSError as e:
            raise GitCommandError(f"failed to run {self._executable}: {e}", list(args))

        logger.debug(f"{command} exited with {completed.returncode}")
        return CommandResult(
            args=list(args),
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )

    def call(self, args: Sequence[str]) -> int:
        """Run git with inherited stdout/stderr so its progress stays visible.

        Raises:
            GitCommandError: If the executable cannot be started
        """
        command = [self._executable, *args]
        logger.debug(f"Running {command}")

        try:
            completed = subprocess.run(command, cwd=self.cwd, check=False)
        except OSError as e:
            raise GitCommandError(f"failed to run {self._executable}: {e}", list(args))

        logger.debug(f"{command} exited with {completed.returncode}")
        return completed.returncode
