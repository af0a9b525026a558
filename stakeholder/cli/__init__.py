"""Command-line configuration."""

from stakeholder.cli.config import parse_arguments

__all__ = ["parse_arguments"]
