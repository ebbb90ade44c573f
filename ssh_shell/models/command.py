"""Captured command output."""

from dataclasses import dataclass


@dataclass
class CommandResult:
    """Decoded output and exit status of one remote invocation."""

    output: str
    error: str
    returncode: int

    @property
    def succeeded(self) -> bool:
        """Whether the command exited with status zero."""
        return self.returncode == 0
