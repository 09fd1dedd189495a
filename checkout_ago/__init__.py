"""
checkout-ago - Jump a git working tree back in time.

Checks out the most recent commit that existed before a relative point in
time such as "2 days", "2d" or "3h", or just reports it in print-only mode.
"""

__version__ = "0.1.0"
__author__ = "checkout-ago contributors"
