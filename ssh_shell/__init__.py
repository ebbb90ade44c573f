"""ssh-shell: run one remote command over SSH with password authentication."""

from ssh_shell.errors import (
    AuthenticationError,
    ChannelError,
    CommandTimeoutError,
    ConnectivityError,
    NonZeroExitError,
    ShellError,
    StreamError,
)
from ssh_shell.models import CommandResult, SSHTarget
from ssh_shell.protocols import Shell
from ssh_shell.services import Empty, Plain, Safe, SSHByPassword, Verbose, capture
from ssh_shell.utils.shell import escape

__all__ = [
    "AuthenticationError",
    "ChannelError",
    "CommandResult",
    "CommandTimeoutError",
    "ConnectivityError",
    "Empty",
    "NonZeroExitError",
    "Plain",
    "SSHByPassword",
    "SSHTarget",
    "Safe",
    "Shell",
    "ShellError",
    "StreamError",
    "Verbose",
    "capture",
    "escape",
]
