"""Data models for ssh-shell."""

from ssh_shell.models.command import CommandResult
from ssh_shell.models.target import SSHTarget

__all__ = [
    "CommandResult",
    "SSHTarget",
]
