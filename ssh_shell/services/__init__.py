"""Services for ssh-shell."""

from ssh_shell.services.decorators import Empty, Plain, Safe, Verbose, capture
from ssh_shell.services.password import SSHByPassword
from ssh_shell.services.streams import (
    LoggingSink,
    NullSink,
    TeeSink,
    drain_output,
    pump_input,
    start_pump,
)

__all__ = [
    "Empty",
    "LoggingSink",
    "NullSink",
    "Plain",
    "SSHByPassword",
    "Safe",
    "TeeSink",
    "Verbose",
    "capture",
    "drain_output",
    "pump_input",
    "start_pump",
]
