"""Restaurant list CLI.

Built with Click and Rich.
"""

from restlist.cli.main import cli

__all__ = ["cli"]
