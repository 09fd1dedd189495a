"""Exceptions raised by checkout-ago."""

from typing import List, Optional


class CheckoutAgoError(Exception):
    """Base exception for every failure reported to the user."""
    pass


class UsageError(CheckoutAgoError):
    """Raised when the command line is missing required input."""
    pass


class GitCommandError(CheckoutAgoError):
    """Raised when a git invocation cannot be started or exits non-zero."""

    def __init__(self, message: str, args: Optional[List[str]] = None,
                 returncode: Optional[int] = None):
        super().__init__(message)
        self.git_args = list(args or [])
        self.returncode = returncode


class GitOutputDecodeError(CheckoutAgoError):
    """Raised when captured git output is not valid text."""
    pass


class CommitNotFoundError(CheckoutAgoError):
    """Raised when no commit exists before the requested time."""
    pass


class RepositoryNotFoundError(CheckoutAgoError):
    """Raised when the project root is not inside a git repository."""
    pass


class ConfigError(CheckoutAgoError):
    """Raised when a configuration file fails validation."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("invalid configuration: " + "; ".join(self.errors))
