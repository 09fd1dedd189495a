"""Argument builders for the git invocations checkout-ago makes."""

import shlex
from typing import List, Sequence

from .time_parser import normalize_ago


DEFAULT_REFERENCE = "HEAD"


def rev_parse_args(reference: str = DEFAULT_REFERENCE) -> List[str]:
    """Build the ``git rev-parse`` arguments for the current position."""
    return ["rev-parse", reference]


def rev_list_args(ago: str, reference: str = DEFAULT_REFERENCE) -> List[str]:
    """Build the ``git rev-list`` arguments for a given "ago" string.

    The expression is normalized first, then embedded as
    ``--before=<normalized> ago``. An empty expression is passed through
    as ``--before= ago``.
    """
    ago = normalize_ago(ago)

    return [
        "rev-list",
        "-n",
        "1",
        f"--before={ago} ago",
        reference,
    ]


def checkout_args(commit: str) -> List[str]:
    """Build the ``git checkout`` arguments."""
    return ["checkout", commit]


def format_command(executable: str, args: Sequence[str]) -> str:
    """Render an invocation the way a user would type it in a shell."""
    return " ".join(shlex.quote(part) for part in [executable, *args])
