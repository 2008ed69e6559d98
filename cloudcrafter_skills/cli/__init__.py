"""CLI module for cloudcrafter-skills.

Provides the command-line interface for installing, updating, listing and
removing bundled content.
"""

from cloudcrafter_skills.cli.main import create_parser, main

__all__ = ["create_parser", "main"]
