"""Command-line interface for DistSpell."""

from distspell.cli.parser import create_parser

__all__ = ["create_parser"]
