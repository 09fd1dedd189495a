"""Core data models and type definitions for checkout-ago."""

from dataclasses import dataclass
from typing import List

from .commands import checkout_args, format_command


# Type aliases for better readability
RevisionId = str
TimeExpression = str


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a git invocation whose output was captured."""
    args: List[str]
    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


@dataclass(frozen=True)
class CheckoutPlan:
    """Where the working tree is and where it would jump to."""
    ago: TimeExpression
    normalized_ago: str
    current_head: RevisionId
    target_commit: RevisionId
    executable: str = "git"

    @property
    def return_command(self) -> str:
        """Command that brings the working tree back to where it started."""
        return format_command(self.executable, checkout_args(self.current_head))

    def report_lines(self) -> List[str]:
        return [
            f"Current HEAD: {self.current_head}",
            f"Target commit: {self.target_commit}",
            f"To return: {self.return_command}",
        ]


@dataclass
class CheckoutResult:
    """Result of a complete checkout-ago run."""
    plan: CheckoutPlan
    print_only: bool = False
    checked_out: bool = False
