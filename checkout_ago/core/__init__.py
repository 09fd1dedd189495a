"""Core components: time parsing, git command building and the checkout engine."""

from .checkout_engine import CheckoutEngine
from .commands import checkout_args, rev_list_args, rev_parse_args
from .errors import (
    CheckoutAgoError, CommitNotFoundError, ConfigError, GitCommandError,
    GitOutputDecodeError, RepositoryNotFoundError, UsageError
)
from .time_parser import normalize_ago

__all__ = [
    'CheckoutEngine',
    'checkout_args',
    'rev_list_args',
    'rev_parse_args',
    'normalize_ago',
    'CheckoutAgoError',
    'CommitNotFoundError',
    'ConfigError',
    'GitCommandError',
    'GitOutputDecodeError',
    'RepositoryNotFoundError',
    'UsageError'
]
