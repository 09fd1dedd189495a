"""Allow running checkout-ago with ``python -m checkout_ago``."""

from .cli.main import cli

if __name__ == "__main__":
    cli()
