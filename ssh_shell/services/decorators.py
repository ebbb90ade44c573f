"""Shell decorators.

Each decorator holds another Shell and forwards to it, adding one
behavior on the way: mirroring output to a log, failing on non-zero exit
codes, or simplifying the call signature.
"""

import io
import logging
from typing import BinaryIO

from ssh_shell.errors import NonZeroExitError
from ssh_shell.models import CommandResult
from ssh_shell.protocols import Shell
from ssh_shell.services.streams import LoggingSink, NullSink, TeeSink


class Verbose:
    """Shell that mirrors command output to a logger.

    stdout lines are logged at INFO and stderr lines at WARNING, while the
    caller's sinks receive the same bytes untouched. The exit code and any
    exception of the wrapped shell pass through unchanged.
    """

    def __init__(self, origin: Shell, logger: logging.Logger | None = None) -> None:
        """Initialize verbose shell.

        Args:
            origin: Shell to delegate to
            logger: Logger receiving the output; defaults to this module's
        """
        self.origin = origin
        self.logger = logger or logging.getLogger(__name__)

    def __repr__(self) -> str:
        return f"Verbose({self.origin!r})"

    def exec(
        self,
        command: str,
        stdin: BinaryIO,
        stdout: BinaryIO,
        stderr: BinaryIO,
    ) -> int:
        out = TeeSink(stdout, LoggingSink(self.logger, logging.INFO))
        err = TeeSink(stderr, LoggingSink(self.logger, logging.WARNING))
        try:
            return self.origin.exec(command, stdin, out, err)  # type: ignore[arg-type]
        finally:
            out.close()
            err.close()


class Safe:
    """Shell that raises NonZeroExitError unless the command exits with 0."""

    def __init__(self, origin: Shell) -> None:
        self.origin = origin

    def __repr__(self) -> str:
        return f"Safe({self.origin!r})"

    def exec(
        self,
        command: str,
        stdin: BinaryIO,
        stdout: BinaryIO,
        stderr: BinaryIO,
    ) -> int:
        """Run command and return 0.

        Raises:
            NonZeroExitError: If the exit status is not zero
        """
        code = self.origin.exec(command, stdin, stdout, stderr)
        if code != 0:
            raise NonZeroExitError(command, code)
        return code


class Empty:
    """Shell without streams: no input, output discarded."""

    def __init__(self, origin: Shell) -> None:
        self.origin = origin

    def exec(self, command: str) -> int:
        """Run command and return its exit status."""
        return self.origin.exec(command, io.BytesIO(), NullSink(), NullSink())  # type: ignore[arg-type]


class Plain:
    """Shell returning stdout as text.

    Input is empty and stderr is discarded. Wrap the origin in Safe to
    turn a non-zero exit status into an error.
    """

    def __init__(self, origin: Shell, encoding: str = "utf-8") -> None:
        self.origin = origin
        self.encoding = encoding

    def exec(self, command: str) -> str:
        """Run command and return what it printed to stdout."""
        stdout = io.BytesIO()
        self.origin.exec(command, io.BytesIO(), stdout, NullSink())  # type: ignore[arg-type]
        return stdout.getvalue().decode(self.encoding, errors="replace")


def capture(shell: Shell, command: str, stdin: bytes = b"") -> CommandResult:
    """Run command once and collect its decoded output.

    Args:
        shell: Shell to run the command on
        command: Command line to run
        stdin: Bytes fed to the command's stdin

    Returns:
        CommandResult with stdout, stderr and exit status
    """
    stdout = io.BytesIO()
    stderr = io.BytesIO()
    code = shell.exec(command, io.BytesIO(stdin), stdout, stderr)
    return CommandResult(
        output=stdout.getvalue().decode("utf-8", errors="replace"),
        error=stderr.getvalue().decode("utf-8", errors="replace"),
        returncode=code,
    )
