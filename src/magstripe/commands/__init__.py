"""Subcommand modules for magstripe.

Provides register_commands() which uses deferred imports to keep
``magstripe --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from magstripe.commands.decode import decode

    cli.add_command(decode)
