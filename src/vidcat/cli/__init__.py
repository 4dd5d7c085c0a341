"""Command-line interface package for vidcat."""

from vidcat.cli.main import CLIApplication, create_app

__all__ = ["CLIApplication", "create_app"]
