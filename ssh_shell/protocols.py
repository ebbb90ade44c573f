"""Protocol interfaces for dependency inversion.

Clients and decorators depend on the Shell capability rather than on a
concrete implementation, so any object with a matching ``exec`` can be
wrapped or substituted in tests.

Usage Example:

    from ssh_shell.protocols import Shell

    def deploy(shell: Shell) -> int:
        '''Depends on the protocol, not on SSHByPassword.'''
        return shell.exec("make deploy", io.BytesIO(), sys.stdout.buffer, sys.stderr.buffer)

    deploy(SSHByPassword("example.com", 22, "deploy", "secret"))
    deploy(Verbose(SSHByPassword("example.com", 22, "deploy", "secret")))
"""

from typing import BinaryIO, Protocol, runtime_checkable


@runtime_checkable
class Shell(Protocol):
    """Protocol for executing one command on a remote host.

    Example implementation:
        class LocalEcho:
            def exec(self, command, stdin, stdout, stderr) -> int:
                stdout.write(command.encode())
                return 0
    """

    def exec(
        self,
        command: str,
        stdin: BinaryIO,
        stdout: BinaryIO,
        stderr: BinaryIO,
    ) -> int:
        """Execute command, relaying streams, and return its exit status.

        Args:
            command: Command line to run remotely
            stdin: Bytes fed to the remote process's stdin
            stdout: Sink for the remote process's stdout
            stderr: Sink for the remote process's stderr

        Returns:
            Exit status of the remote command

        Raises:
            ShellError: If the command could not be run to completion
        """
        ...


__all__ = ["Shell"]
