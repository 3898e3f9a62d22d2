"""Command line interface."""

from faker_dispatch.cli.main import cli

__all__ = ["cli"]
