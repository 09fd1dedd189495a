"""Engine that finds and checks out the last commit before a point in time."""

import logging
from typing import Callable, Optional

from .commands import DEFAULT_REFERENCE, checkout_args, rev_list_args, rev_parse_args
from .errors import CommitNotFoundError, GitCommandError, GitOutputDecodeError
from .interfaces import IGitRunner
from .models import CheckoutPlan, CheckoutResult, CommandResult, RevisionId
from .time_parser import normalize_ago


logger = logging.getLogger(__name__)


class CheckoutEngine:
    """Sequences the git invocations behind a single checkout-ago run.

    Steps run strictly in order: capture the current position, resolve the
    target commit, report both, then (unless print-only) check the target
    out. Any failed step aborts the run; nothing is retried.
    """

    def __init__(self, runner: IGitRunner, reference: str = DEFAULT_REFERENCE,
                 output: Optional[Callable[[str], None]] = None):
        """Initialize the engine.

        Args:
            runner: Runner used for every git invocation
            reference: Position the search starts from
            output: Callable receiving each report line (defaults to print)
        """
        self.runner = runner
        self.reference = reference
        self.output = output or print

    def current_head(self) -> RevisionId:
        """Return the commit the working tree currently reflects.

        Raises:
            GitCommandError: If ``git rev-parse`` fails
            GitOutputDecodeError: If its output is not valid text
        """
        result = self.runner.capture(rev_parse_args(self.reference))
        self._check(result, "git rev-parse failed")
        head = self._decode(result, "git rev-parse")
        logger.debug(f"Current {self.reference} is {head}")
        return head

    def find_target(self, ago: str) -> RevisionId:
        """Return the most recent commit older than ``ago``.

        Raises:
            GitCommandError: If ``git rev-list`` fails
            GitOutputDecodeError: If its output is not valid text
            CommitNotFoundError: If no commit exists before that time
        """
        result = self.runner.capture(rev_list_args(ago, self.reference))
        self._check(result, "git rev-list failed")
        target = self._decode(result, "git rev-list")

        if not target:
            raise CommitNotFoundError("no commit found before the given time")

        logger.debug(f"Last commit before {normalize_ago(ago)!r} ago is {target}")
        return target

    def plan(self, ago: str) -> CheckoutPlan:
        """Resolve where the working tree is and where it would jump to."""
        current = self.current_head()
        target = self.find_target(ago)

        return CheckoutPlan(
            ago=ago,
            normalized_ago=normalize_ago(ago),
            current_head=current,
            target_commit=target,
            executable=self.runner.executable,
        )

    def report(self, plan: CheckoutPlan) -> None:
        for line in plan.report_lines():
            self.output(line)

    def apply(self, plan: CheckoutPlan) -> None:
        """Check out the plan's target commit.

        Raises:
            GitCommandError: If ``git checkout`` exits non-zero
        """
        logger.info(f"Checking out {plan.target_commit}")
        self.output("")

        args = checkout_args(plan.target_commit)
        returncode = self.runner.call(args)
        if returncode != 0:
            raise GitCommandError("git checkout failed", args, returncode)

    def run(self, ago: str, print_only: bool = False) -> CheckoutResult:
        """Plan, report and (unless ``print_only``) apply a checkout."""
        plan = self.plan(ago)
        self.report(plan)

        result = CheckoutResult(plan=plan, print_only=print_only)
        if print_only:
            logger.info("Print-only mode, leaving the working tree untouched")
            return result

        self.apply(plan)
        result.checked_out = True
        return result

    def _check(self, result: CommandResult, message: str) -> None:
        if result.succeeded:
            return

        detail = _first_line(result.stderr)
        if detail:
            message = f"{message}: {detail}"
        raise GitCommandError(message, result.args, result.returncode)

    def _decode(self, result: CommandResult, step: str) -> str:
        try:
            return result.stdout.decode("utf-8").strip()
        except UnicodeDecodeError as e:
            raise GitOutputDecodeError(f"{step} returned output that is not valid UTF-8: {e}")


def _first_line(data: bytes) -> str:
    text = data.decode("utf-8", errors="replace").strip()
    return text.splitlines()[0] if text else ""
