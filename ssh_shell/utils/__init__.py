"""Utilities for ssh-shell."""

from ssh_shell.utils.console import ColorfulFormatter, configure_logging
from ssh_shell.utils.shell import escape, join_command

__all__ = [
    "ColorfulFormatter",
    "configure_logging",
    "escape",
    "join_command",
]
